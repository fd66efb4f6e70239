"""Error responses and global exception handlers."""

from src.presentation.routers.api.errors.error_response_builder import (
    ErrorResponseBuilder,
    error_body,
)
from src.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "ErrorResponseBuilder",
    "error_body",
    "register_exception_handlers",
]
