"""Data models for audit input and results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


DEFAULT_BASELINE_SCORE = 7.5


class FlagType(str, Enum):
    """Kinds of externally flagged chapters."""
    UNDERWRITTEN = "Underwritten sensory detail"
    SHOW_DONT_TELL = "Show-don't-tell"
    FORESHADOWING = "Sensory foreshadowing opportunity"


class Presence(str, Enum):
    """How strongly a motif shows up in a chapter."""
    CENTRAL = "Central"
    SECONDARY = "Secondary"
    ABSENT = "Absent"


@dataclass
class SensoryBaseline:
    """User-chosen reference for an audit."""

    exemplary_chapters: List[str] = field(default_factory=list)
    richness_threshold: float = DEFAULT_BASELINE_SCORE
    target_sensory_palette: Optional[Dict[str, str]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SensoryBaseline":
        palette = data.get("target_sensory_palette")
        return cls(
            exemplary_chapters=list(data.get("exemplary_chapters", [])),
            richness_threshold=float(data.get("richness_threshold", DEFAULT_BASELINE_SCORE)),
            target_sensory_palette=(
                {name: description or "" for name, description in palette.items()}
                if palette is not None else None
            ),
        )


@dataclass
class FlaggedChapter:
    """A chapter the author already knows needs work; only feeds the roadmap."""

    chapter: int
    issue: str
    type: FlagType
    section: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlaggedChapter":
        return cls(
            chapter=int(data["chapter"]),
            issue=data["issue"],
            type=FlagType(data["type"]),
            section=data.get("section"),
        )


@dataclass
class AuditInput:
    """A complete, already-validated audit request."""

    manuscript_text: str
    sensory_baseline: SensoryBaseline = field(default_factory=SensoryBaseline)
    chapters_flagged_for_enrichment: List[FlaggedChapter] = field(default_factory=list)


@dataclass
class SensoryFingerprint:
    favored_senses: List[str]
    baseline_richness_score: float
    syntax_signature: str = "Declarative with sensory escalation"
    vocabulary_preference: str = "Precise and visceral"
    metaphor_type: str = "Physical grounding"
    sensory_density_per_page: str = "8-12 references"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "favored_senses": list(self.favored_senses),
            "syntax_signature": self.syntax_signature,
            "vocabulary_preference": self.vocabulary_preference,
            "metaphor_type": self.metaphor_type,
            "sensory_density_per_page": self.sensory_density_per_page,
            "baseline_richness_score": self.baseline_richness_score,
        }


@dataclass
class ExemplaryPassage:
    source: str
    quote: str
    sensory_breakdown: Dict[str, int]
    richness_score: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "quote": self.quote,
            "sensory_breakdown": dict(self.sensory_breakdown),
            "richness_score": self.richness_score,
        }


@dataclass
class BaselineResult:
    """Phase 1 output."""

    sensory_fingerprint: SensoryFingerprint
    exemplary_passages_analyzed: List[ExemplaryPassage] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sensory_fingerprint": self.sensory_fingerprint.to_dict(),
            "exemplary_passages_analyzed": [p.to_dict() for p in self.exemplary_passages_analyzed],
        }


@dataclass
class ScorecardRow:
    """Score for one fixed-length section of one chapter.

    ``position`` is the chapter's index in the segmented manuscript and is
    kept out of the serialized row.
    """

    chapter: int
    section: str
    baseline: float
    your_score: float
    status: str
    key_sensory_gaps: List[str] = field(default_factory=list)
    position: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chapter": self.chapter,
            "section": self.section,
            "baseline": self.baseline,
            "your_score": self.your_score,
            "status": self.status,
            "key_sensory_gaps": list(self.key_sensory_gaps),
        }


@dataclass
class AuditSummary:
    chapters_at_baseline: int
    chapters_below_baseline: List[int]
    consistent_weak_points: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chapters_at_baseline": self.chapters_at_baseline,
            "chapters_below_baseline": list(self.chapters_below_baseline),
            "consistent_weak_points": self.consistent_weak_points,
        }


@dataclass
class RichnessAuditResult:
    """Phase 2 output."""

    richness_scorecard: List[ScorecardRow]
    summary: AuditSummary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "richness_scorecard": [row.to_dict() for row in self.richness_scorecard],
            "summary": self.summary.to_dict(),
        }


@dataclass
class MotifIncarnation:
    incarnation: str
    chapter: int
    presence: str
    description: str
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "incarnation": self.incarnation,
            "chapter": self.chapter,
            "presence": self.presence,
            "description": self.description,
        }


@dataclass
class EchoOpportunity:
    chapter: int
    reason: str
    suggested_revision: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chapter": self.chapter,
            "reason": self.reason,
            "suggested_revision": self.suggested_revision,
        }


@dataclass
class MotifMapping:
    chapters_present: List[MotifIncarnation] = field(default_factory=list)
    # Reserved; nothing populates this yet.
    echo_planting_opportunities: List[EchoOpportunity] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chapters_present": [c.to_dict() for c in self.chapters_present],
            "echo_planting_opportunities": [o.to_dict() for o in self.echo_planting_opportunities],
        }


@dataclass
class AlternativeRevision:
    alternative_number: int
    approach: str
    revised_text: str
    why_this_works: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "alternative_number": self.alternative_number,
            "approach": self.approach,
            "revised_text": self.revised_text,
            "why_this_works": list(self.why_this_works),
        }


@dataclass
class ShowDontTellResult:
    source: str
    current_telling_text: str
    what_is_conveyed: str
    problems: List[str] = field(default_factory=list)
    alternative_revisions: List[AlternativeRevision] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "current_telling_text": self.current_telling_text,
            "what_is_conveyed": self.what_is_conveyed,
            "problems": list(self.problems),
            "alternative_revisions": [r.to_dict() for r in self.alternative_revisions],
        }


@dataclass
class ReportArtifacts:
    """The five textual artifacts produced from an audit."""

    interactive_map_html: str
    audit_report_md: str
    enrichment_toolkit_md: str
    revisions_md: str
    roadmap_csv: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "interactive_map_html": self.interactive_map_html,
            "audit_report_md": self.audit_report_md,
            "enrichment_toolkit_md": self.enrichment_toolkit_md,
            "revisions_md": self.revisions_md,
            "roadmap_csv": self.roadmap_csv,
        }


@dataclass
class AuditResult:
    """Everything one audit produces, phase outputs and artifacts together."""

    baseline: BaselineResult
    richness: RichnessAuditResult
    motif_mapping: Dict[str, MotifMapping]
    per_passage: List[ShowDontTellResult]
    artifacts: Optional[ReportArtifacts] = None

    @property
    def sensory_fingerprint(self) -> SensoryFingerprint:
        return self.baseline.sensory_fingerprint

    @property
    def richness_scorecard(self) -> List[ScorecardRow]:
        return self.richness.richness_scorecard

    @property
    def summary(self) -> AuditSummary:
        return self.richness.summary

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into the response payload shape."""
        data: Dict[str, Any] = {}
        data.update(self.baseline.to_dict())
        data.update(self.richness.to_dict())
        data["motif_mapping"] = {name: m.to_dict() for name, m in self.motif_mapping.items()}
        data["per_passage"] = [p.to_dict() for p in self.per_passage]
        if self.artifacts is not None:
            data.update(self.artifacts.to_dict())
        return data
