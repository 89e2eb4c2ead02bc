"""Phase 3: track thematic motifs chapter by chapter."""

from typing import Dict, List, Mapping, Optional
import logging

from ..core.lexicon import KeywordTable, MOTIF_TABLE
from ..core.manuscript import Chapter, split_into_chapters
from ..core.models import MotifIncarnation, MotifMapping, Presence
from ..core.resolution import resolve_or_default

logger = logging.getLogger(__name__)


def presence_for(count: int) -> Presence:
    if count > 2:
        return Presence.CENTRAL
    if count > 0:
        return Presence.SECONDARY
    return Presence.ABSENT


class MotifMapper:
    """Maps requested motifs onto chapters.

    Only the motif names are used; their descriptions are free text for the
    author's benefit. A name with no keyword list counts zero everywhere.
    """

    def __init__(self, table: KeywordTable = MOTIF_TABLE, strict: bool = False):
        self.table = table
        self.strict = strict

    def map(self, chapters: List[Chapter], palette: Optional[Mapping[str, str]]) -> Dict[str, MotifMapping]:
        mapping = {}
        for motif in (palette or {}):
            keywords = resolve_or_default(
                self.table.get(motif),
                [],
                what="motif",
                reference=motif,
                strict=self.strict,
            )
            motif_table = KeywordTable({motif: keywords})
            mapping[motif] = MotifMapping(
                chapters_present=[self._incarnation(motif, chapter, motif_table) for chapter in chapters],
            )
            logger.debug(f"Mapped motif '{motif}' using {len(keywords)} keywords")

        return mapping

    @staticmethod
    def _incarnation(motif: str, chapter: Chapter, motif_table: KeywordTable) -> MotifIncarnation:
        count = motif_table.count_category(chapter.content, motif)
        presence = presence_for(count)
        return MotifIncarnation(
            incarnation=f"{motif} in Ch.{chapter.number}",
            chapter=chapter.number,
            presence=presence.value,
            description=f"Appears {count} times" if presence != Presence.ABSENT else "Not present",
            count=count,
        )


def map_motifs(manuscript: str, palette: Optional[Mapping[str, str]]) -> Dict[str, MotifMapping]:
    """Segment ``manuscript`` and map the motifs named in ``palette``."""
    return MotifMapper().map(split_into_chapters(manuscript), palette)
