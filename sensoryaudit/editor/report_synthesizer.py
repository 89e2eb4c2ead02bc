"""Turn phase outputs into markdown, CSV and HTML artifacts."""

from collections import Counter
from html import escape
from typing import Iterable, List, Optional
import csv
import io

from ..core.models import (
    AuditResult,
    FlaggedChapter,
    ReportArtifacts,
    ScorecardRow,
    ShowDontTellResult,
)
from ..core.scoring import RichnessStatus

NO_REVISIONS_MD = "# Revisions\n\nNo show-don't-tell issues detected at current thresholds."
ROADMAP_HEADER = ["Chapter", "Issue", "Priority"]

SUGGESTED_TECHNIQUES = [
    "Layer sensory cues into action beats.",
    "Add concrete textures, temperatures, or sounds to dialogue-heavy scenes.",
    "Use motif repetition to strengthen thematic continuity.",
]


def _row_line(row: ScorecardRow) -> str:
    return f"Chapter {row.chapter} {row.section}: {row.your_score:.1f} ({row.status})"


def _gap_counts(scorecard: Iterable[ScorecardRow]) -> Counter:
    return Counter(gap for row in scorecard for gap in row.key_sensory_gaps)


def build_audit_report(result: AuditResult) -> str:
    summary = result.summary
    summary_lines = [
        f"Baseline richness score: {result.sensory_fingerprint.baseline_richness_score:.1f}",
        f"Chapters at baseline: {summary.chapters_at_baseline}",
        "Chapters below baseline: "
        + (", ".join(str(n) for n in summary.chapters_below_baseline) or "None"),
        f"Consistent weak points: {summary.consistent_weak_points}",
    ]

    lines = ["# Sensory Audit Report", "", "## Summary"]
    lines.extend(f"- {line}" for line in summary_lines)
    lines.extend(["", "## Scorecard"])
    lines.extend(f"- {_row_line(row)}" for row in result.richness_scorecard)
    return "\n".join(lines)


def build_enrichment_toolkit(result: AuditResult) -> str:
    top_gaps = _gap_counts(result.richness_scorecard).most_common(5)

    lines = ["# Enrichment Toolkit", "", "## Focus Areas"]
    lines.extend(f"- {gap}: missing in {count} sections" for gap, count in top_gaps)
    lines.extend(["", "## Suggested Techniques"])
    lines.extend(f"- {technique}" for technique in SUGGESTED_TECHNIQUES)
    return "\n".join(lines)


def _revision_block(passage: ShowDontTellResult) -> str:
    lines = [
        f"## {passage.source}",
        f"Current: {passage.current_telling_text}",
        f"Issue: {passage.what_is_conveyed}",
        f"Problems: {', '.join(passage.problems)}",
    ]
    for rev in passage.alternative_revisions:
        lines.append(
            f"- Option {rev.alternative_number} ({rev.approach}): "
            f"{rev.revised_text} — {'; '.join(rev.why_this_works)}"
        )
    return "\n".join(lines)


def build_revisions(result: AuditResult) -> str:
    if not result.per_passage:
        return NO_REVISIONS_MD
    blocks = "\n\n".join(_revision_block(passage) for passage in result.per_passage)
    return "\n".join(["# Revisions", "", blocks])


def build_roadmap_csv(result: AuditResult, flagged: Optional[List[FlaggedChapter]] = None) -> str:
    """Roadmap rows: weak sections first, then author-flagged chapters."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(ROADMAP_HEADER)

    for row in result.richness_scorecard:
        if row.status == RichnessStatus.GREEN.value:
            continue
        priority = "High" if row.status == RichnessStatus.RED.value else "Medium"
        writer.writerow([row.chapter, f"{row.section} below baseline", priority])

    for flag in flagged or []:
        section = f"{flag.section} " if flag.section else ""
        writer.writerow([flag.chapter, f"{section}{flag.issue}", "High"])

    return buffer.getvalue().rstrip("\n")


def build_interactive_map(result: AuditResult) -> str:
    items = "".join(f"<li>{escape(_row_line(row))}</li>" for row in result.richness_scorecard)
    return f"<div><h3>Richness Map</h3><ul>{items}</ul></div>"


class ReportSynthesizer:
    """Builds every report artifact from a finished audit."""

    def synthesize(self, result: AuditResult, flagged: Optional[List[FlaggedChapter]] = None) -> ReportArtifacts:
        return ReportArtifacts(
            interactive_map_html=build_interactive_map(result),
            audit_report_md=build_audit_report(result),
            enrichment_toolkit_md=build_enrichment_toolkit(result),
            revisions_md=build_revisions(result),
            roadmap_csv=build_roadmap_csv(result, flagged),
        )
