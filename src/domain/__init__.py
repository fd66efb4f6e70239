"""Domain layer - Pure business logic.

The domain layer has NO dependencies on any framework or infrastructure.

Structure:
- entities/: User, Customer, Dog, Kennel, Booking
- enums/: roles, resources, actions, access decisions
- value_objects/: Caller (authenticated principal)
- protocols/: repository and service ports
- validators/: email and password policy checks
"""
