"""Phase 2: score every chapter section against the richness threshold."""

from collections import Counter
from typing import List
import logging

from ..core.lexicon import KeywordTable, SENSORY_TABLE
from ..core.manuscript import SECTION_LENGTH, Chapter, count_words, split_into_chapters
from ..core.models import AuditSummary, RichnessAuditResult, ScorecardRow
from ..core.scoring import RichnessStatus, classify, richness_score

logger = logging.getLogger(__name__)

NO_WEAK_POINTS = "None identified"


class RichnessAuditor:
    """Scores fixed-length sections and summarizes where the prose runs thin."""

    def __init__(self, table: KeywordTable = SENSORY_TABLE, section_length: int = SECTION_LENGTH):
        self.table = table
        self.section_length = section_length

    def audit(self, chapters: List[Chapter], threshold: float) -> RichnessAuditResult:
        scorecard = []
        for chapter in chapters:
            for index, section in enumerate(chapter.sections(self.section_length), start=1):
                scorecard.append(self.score_section(chapter, index, section, threshold))

        logger.info(f"Scored {len(scorecard)} sections across {len(chapters)} chapters")
        return RichnessAuditResult(richness_scorecard=scorecard, summary=self.summarize(scorecard))

    def score_section(self, chapter: Chapter, index: int, section: str, threshold: float) -> ScorecardRow:
        counts = self.table.count(section)
        score = richness_score(counts, count_words(section))
        status = classify(score, threshold)

        logger.debug(f"Chapter {chapter.number} section {index}: {score:.2f} ({status.value})")

        return ScorecardRow(
            chapter=chapter.number,
            section=f"Section {index}",
            baseline=threshold,
            your_score=score,
            status=status.value,
            key_sensory_gaps=[category for category, count in counts.items() if count == 0],
            position=chapter.position,
        )

    @staticmethod
    def summarize(scorecard: List[ScorecardRow]) -> AuditSummary:
        below = sorted({row.chapter for row in scorecard if row.status != RichnessStatus.GREEN.value})
        distinct_chapters = len({row.chapter for row in scorecard})

        gap_counts = Counter(gap for row in scorecard for gap in row.key_sensory_gaps)
        weak_points = " and ".join(gap for gap, _ in gap_counts.most_common(2))

        return AuditSummary(
            chapters_at_baseline=distinct_chapters - len(below),
            chapters_below_baseline=below,
            consistent_weak_points=weak_points or NO_WEAK_POINTS,
        )


def audit_richness(manuscript: str, threshold: float) -> RichnessAuditResult:
    """Segment ``manuscript`` and audit it against ``threshold``."""
    return RichnessAuditor().audit(split_into_chapters(manuscript), threshold)
