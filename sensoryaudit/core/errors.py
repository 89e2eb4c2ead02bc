"""Exceptions raised by SensoryAudit."""

from typing import List, Optional


class SensoryAuditError(Exception):
    """Base class for SensoryAudit errors."""


class AuditValidationError(SensoryAuditError, ValueError):
    """Raised when an audit request does not match the expected shape."""

    def __init__(self, details: List[str]):
        self.details = list(details)
        super().__init__("; ".join(self.details) or "Invalid input")


class UnresolvedReferenceError(SensoryAuditError, LookupError):
    """Raised in strict mode when a reference cannot be resolved."""

    def __init__(self, what: str, reference: Optional[str] = None):
        self.what = what
        self.reference = reference
        message = f"Could not resolve {what}"
        if reference is not None:
            message += f": {reference!r}"
        super().__init__(message)
