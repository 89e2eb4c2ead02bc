"""File I/O and request handling modules."""

from .file_handler import FileHandler
from .request_handler import handle_audit_request, parse_audit_request
from .schemas import AuditRequest

__all__ = [
    "AuditRequest",
    "FileHandler",
    "handle_audit_request",
    "parse_audit_request",
]
