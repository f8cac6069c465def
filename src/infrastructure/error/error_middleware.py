"""Error handling middleware for the application."""

import functools
from typing import Any, Callable, Dict, TypeVar

from src.domain.base.exceptions import DomainException
from src.infrastructure.error.context import ExceptionContext
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def error_response(exc: BaseException) -> Dict[str, Any]:
    """
    Build the structured error payload reported for an exception.

    Domain exceptions carry their own code and details; anything else is
    reported as an unexpected error.
    """
    if isinstance(exc, DomainException):
        return {"error": exc.error_code, "message": exc.message, "details": exc.details}
    return {"error": "UNEXPECTED_ERROR", "message": str(exc), "details": {"type": type(exc).__name__}}


def handle_exceptions(operation: str, layer: str = "application") -> Callable[[F], F]:
    """
    Decorator logging any exception escaping the wrapped function, then re-raising it.

    Args:
        operation: Name of the operation, recorded in the log context
        layer: Architectural layer the operation belongs to

    Returns:
        Decorator function
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except DomainException as e:
                context = ExceptionContext.for_exception(operation, layer, e)
                logger.warning("Domain error", error=e.message, **context.to_dict())
                raise
            except Exception as e:
                context = ExceptionContext.for_exception(operation, layer, e)
                logger.error("Unexpected error", error=str(e), exc_info=True, **context.to_dict())
                raise

        return wrapper  # type: ignore[return-value]

    return decorator
