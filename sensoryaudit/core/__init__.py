"""Core text analysis for SensoryAudit."""

from .errors import AuditValidationError, SensoryAuditError, UnresolvedReferenceError
from .lexicon import KeywordTable, MOTIF_TABLE, SENSORY_TABLE, TELLING_TABLE
from .manuscript import Chapter, count_words, split_into_chapters, split_into_sections
from .models import AuditInput, AuditResult, FlaggedChapter, FlagType, SensoryBaseline
from .resolution import resolve_or_default
from .scoring import RichnessStatus, classify, richness_score

__all__ = [
    "AuditValidationError",
    "SensoryAuditError",
    "UnresolvedReferenceError",
    "KeywordTable",
    "MOTIF_TABLE",
    "SENSORY_TABLE",
    "TELLING_TABLE",
    "Chapter",
    "count_words",
    "split_into_chapters",
    "split_into_sections",
    "AuditInput",
    "AuditResult",
    "FlaggedChapter",
    "FlagType",
    "SensoryBaseline",
    "resolve_or_default",
    "RichnessStatus",
    "classify",
    "richness_score",
]
