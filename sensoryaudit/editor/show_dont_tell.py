"""Phase 4: flag chapters that name emotions instead of showing them."""

from typing import List
import logging

from ..core.lexicon import KeywordTable, TELLING_TABLE
from ..core.manuscript import Chapter, collapse_whitespace, excerpt, split_into_chapters
from ..core.models import AlternativeRevision, ShowDontTellResult

logger = logging.getLogger(__name__)

TELL_LIMIT = 2
CURRENT_TEXT_LENGTH = 100
REVISION_EXCERPT_LENGTH = 140


class ShowDontTellDetector:
    """Counts abstract emotion words per chapter and proposes revision stubs."""

    def __init__(self, table: KeywordTable = TELLING_TABLE):
        self.table = table

    def detect(self, chapters: List[Chapter]) -> List[ShowDontTellResult]:
        findings = []
        for chapter in chapters:
            tell_count = sum(self.table.count(chapter.content).values())
            if tell_count > TELL_LIMIT:
                logger.debug(f"Chapter {chapter.number}: {tell_count} telling words")
                findings.append(self._finding(chapter))

        logger.info(f"Show-don't-tell findings: {len(findings)}")
        return findings

    @staticmethod
    def _finding(chapter: Chapter) -> ShowDontTellResult:
        snippet = collapse_whitespace(chapter.content[:REVISION_EXCERPT_LENGTH])
        return ShowDontTellResult(
            source=f"Chapter {chapter.number}",
            current_telling_text=excerpt(chapter.content, CURRENT_TEXT_LENGTH),
            what_is_conveyed="Emotional state or realization",
            problems=["Abstract emotion narration"],
            alternative_revisions=[
                AlternativeRevision(
                    alternative_number=1,
                    approach="Sensory/Action-Based",
                    revised_text=(
                        "Replace abstract emotion verbs with observable actions or "
                        f'sensations in this passage: "{snippet}..."'
                    ),
                    why_this_works=["Connects emotion to concrete physical cues"],
                )
            ],
        )


def analyze_show_dont_tell(manuscript: str) -> List[ShowDontTellResult]:
    """Segment ``manuscript`` and run the detector."""
    return ShowDontTellDetector().detect(split_into_chapters(manuscript))
