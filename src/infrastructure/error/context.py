"""Context attached to every logged failure."""

import threading
from datetime import datetime, timezone
from typing import Any, Dict

from src.domain.base.exceptions import DomainException


class ExceptionContext:
    """Where and when an operation failed, plus any extra fields for the log record."""

    def __init__(self, operation: str, layer: str = "application", **additional_context: Any):
        self.operation = operation
        self.layer = layer
        self.timestamp = datetime.now(timezone.utc)
        self.thread_id = threading.get_ident()
        self.additional_context = additional_context

    @classmethod
    def for_exception(cls, operation: str, layer: str, exc: BaseException) -> "ExceptionContext":
        """Build the context for ``exc``: its error code if it is a domain error, else its type."""
        if isinstance(exc, DomainException):
            return cls(operation, layer, error_code=exc.error_code)
        return cls(operation, layer, error_type=type(exc).__name__)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation,
            "layer": self.layer,
            "timestamp": self.timestamp.isoformat(),
            "thread_id": self.thread_id,
            **self.additional_context,
        }
