"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- services/: Access policy and user provisioning shared by handlers
- errors/: Builders for the messages every resource shares

Handlers return Result types; they never raise for business failures.
"""
