"""Error handling infrastructure package."""

from src.infrastructure.error.context import ExceptionContext
from src.infrastructure.error.error_middleware import error_response, handle_exceptions

__all__: list[str] = [
    "ExceptionContext",
    "handle_exceptions",
    "error_response",
]
