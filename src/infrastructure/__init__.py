"""Infrastructure layer: adapters implementing the domain ports.

- authorization/: Casbin role matrix
- logging/: structlog console adapter
- persistence/: SQLAlchemy models, database and repositories
- security/: bcrypt password hashing and JWT session tokens

The domain layer never imports from here.
"""
