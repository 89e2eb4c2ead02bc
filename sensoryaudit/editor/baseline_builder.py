"""Phase 1: derive a sensory fingerprint from exemplary chapters."""

from typing import List, Optional, Sequence
import logging
import re

from ..core.lexicon import KeywordTable, SENSORY_TABLE
from ..core.manuscript import Chapter, count_words, excerpt, split_into_chapters
from ..core.models import (
    DEFAULT_BASELINE_SCORE,
    BaselineResult,
    ExemplaryPassage,
    SensoryFingerprint,
)
from ..core.resolution import resolve_or_default
from ..core.scoring import richness_score

logger = logging.getLogger(__name__)

QUOTE_LENGTH = 200


class BaselineBuilder:
    """Builds the sensory fingerprint the rest of the audit is measured against."""

    def __init__(self, table: KeywordTable = SENSORY_TABLE, strict: bool = False):
        self.table = table
        self.strict = strict

    def build(self, chapters: List[Chapter], exemplary_chapters: Sequence[str]) -> BaselineResult:
        """Score each resolvable exemplary chapter and aggregate the results."""
        passages = []

        for identifier in exemplary_chapters:
            chapter = resolve_or_default(
                self.find_chapter(chapters, identifier),
                None,
                what="exemplary chapter",
                reference=identifier,
                strict=self.strict,
            )
            if chapter is None or not chapter.content:
                continue

            counts = self.table.count(chapter.content)
            passages.append(ExemplaryPassage(
                source=identifier,
                quote=excerpt(chapter.content, QUOTE_LENGTH),
                sensory_breakdown=counts,
                richness_score=richness_score(counts, count_words(chapter.content)),
            ))

        logger.info(f"Resolved {len(passages)} of {len(exemplary_chapters)} exemplary chapters")

        return BaselineResult(
            sensory_fingerprint=SensoryFingerprint(
                favored_senses=self._rank_senses(passages),
                baseline_richness_score=self._average_score(passages),
            ),
            exemplary_passages_analyzed=passages,
        )

    @staticmethod
    def find_chapter(chapters: List[Chapter], identifier: str) -> Optional[Chapter]:
        """Locate the chapter an identifier such as ``"Chandra (Ch. 4-8)"`` refers to.

        The first integer in the identifier selects the first chapter with
        that number. Identifiers without digits match the first chapter
        whose content contains them, ignoring case. A blank identifier is
        contained in every chapter, so it selects the first one.
        """
        normalized = identifier.strip()
        number_match = re.search(r"\d+", normalized)
        if number_match:
            target = int(number_match.group(0))
            return next((c for c in chapters if c.number == target), None)

        needle = normalized.lower()
        return next((c for c in chapters if needle in c.content.lower()), None)

    def _rank_senses(self, passages: List[ExemplaryPassage]) -> List[str]:
        if not passages:
            return []

        totals = {category: 0 for category in self.table.categories}
        for passage in passages:
            for category, count in passage.sensory_breakdown.items():
                totals[category] = totals.get(category, 0) + count

        # sorted() is stable, so ties keep declaration order
        return [category for category, _ in sorted(totals.items(), key=lambda item: -item[1])]

    @staticmethod
    def _average_score(passages: List[ExemplaryPassage]) -> float:
        if not passages:
            return DEFAULT_BASELINE_SCORE
        return sum(p.richness_score for p in passages) / len(passages)


def establish_baseline(manuscript: str, exemplary_chapters: Sequence[str], strict: bool = False) -> BaselineResult:
    """Segment ``manuscript`` and build its sensory fingerprint."""
    return BaselineBuilder(strict=strict).build(split_into_chapters(manuscript), exemplary_chapters)
