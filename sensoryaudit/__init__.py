"""
SensoryAudit - sensory detail and motif auditing for manuscripts.
"""

__version__ = "1.0.0"

from .core import AuditInput, AuditResult, FlaggedChapter, SensoryBaseline, split_into_chapters
from .editor import AuditPipeline, perform_audit
from .io import handle_audit_request

__all__ = [
    "AuditInput",
    "AuditResult",
    "FlaggedChapter",
    "SensoryBaseline",
    "split_into_chapters",
    "AuditPipeline",
    "perform_audit",
    "handle_audit_request",
]
