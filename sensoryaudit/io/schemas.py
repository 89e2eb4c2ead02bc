"""Request schemas for the audit boundary."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from ..config import MAX_MANUSCRIPT_CHARS
from ..core.models import FlagType


class SensoryBaselineModel(BaseModel):
    """The user's reference chapters, threshold and motif palette."""
    exemplary_chapters: List[StrictStr] = Field(
        ...,
        description="Chapter identifiers such as 'Ch. 4' or a phrase from the chapter"
    )
    richness_threshold: float = Field(
        ...,
        description="Score a section must reach to count as GREEN",
        ge=1,
        le=20,
        strict=True
    )
    target_sensory_palette: Optional[Dict[StrictStr, Optional[StrictStr]]] = Field(
        default=None,
        description="Motif name -> intended meaning"
    )


class FlaggedChapterModel(BaseModel):
    """A chapter the author already flagged for the roadmap."""
    chapter: StrictInt
    issue: StrictStr
    type: FlagType
    section: Optional[StrictStr] = None


class AuditRequest(BaseModel):
    """
    A full audit request.
    The manuscript length limit can be lowered per call with the
    ``max_chars`` validation context.
    """
    manuscript_text: StrictStr
    sensory_baseline: SensoryBaselineModel
    chapters_flagged_for_enrichment: Optional[List[FlaggedChapterModel]] = None

    @field_validator("manuscript_text")
    @classmethod
    def manuscript_within_limit(cls, value: str, info: ValidationInfo) -> str:
        limit = (info.context or {}).get("max_chars", MAX_MANUSCRIPT_CHARS)
        if len(value) > limit:
            raise PydanticCustomError(
                "manuscript_too_long",
                "must be at most {limit} characters",
                {"limit": limit},
            )
        return value


def error_details(errors: List[dict]) -> List[str]:
    """Flatten ``ValidationError.errors()`` into ``"field.path: message"`` strings."""
    details = []
    for error in errors:
        path = ""
        for part in error["loc"]:
            if isinstance(part, int):
                path += f"[{part}]"
            else:
                path += f".{part}" if path else str(part)
        details.append(f"{path or 'request'}: {error['msg']}")
    return details
