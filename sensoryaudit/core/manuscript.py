"""Chapter segmentation and text helpers for manuscripts."""

from dataclasses import dataclass
from typing import Any, Dict, List
import re


# "Chapter 12", "CH12", "Ch. 12", "Ch12" (case-insensitive)
CHAPTER_HEADING = re.compile(
    r"\b(?:Chapter\s+(\d+)|CH(\d+)|Ch\.?\s*(\d+))",
    re.IGNORECASE,
)

SECTION_LENGTH = 2500


@dataclass
class Chapter:
    """A chapter parsed from a manuscript.

    ``number`` is whatever the heading declared, so two chapters can share
    a number. ``position`` is the chapter's index in the parsed sequence and
    is what actually distinguishes them.
    """

    number: int
    content: str = ""
    position: int = 0

    @property
    def word_count(self) -> int:
        return count_words(self.content)

    def sections(self, length: int = SECTION_LENGTH) -> List[str]:
        """Split content into consecutive windows of at most ``length`` chars."""
        return split_into_sections(self.content, length)

    def to_dict(self) -> Dict[str, Any]:
        """Convert chapter to dictionary for serialization."""
        return {
            "chapter": self.number,
            "content": self.content,
        }


def count_words(text: str) -> int:
    """Number of non-empty whitespace-separated tokens."""
    return len(text.split())


def split_into_chapters(text: str) -> List[Chapter]:
    """Split manuscript text into chapters at heading markers.

    Content runs from the end of one heading to the start of the next and
    is stripped. Anything before the first heading is dropped. With no
    headings at all, the whole text becomes chapter 1.
    """
    matches = list(CHAPTER_HEADING.finditer(text))

    if not matches:
        return [Chapter(number=1, content=text.strip(), position=0)]

    chapters = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        number = int(next(group for group in match.groups() if group is not None))
        chapters.append(
            Chapter(number=number, content=text[match.end():end].strip(), position=i)
        )

    return chapters


def split_into_sections(content: str, length: int = SECTION_LENGTH) -> List[str]:
    """Fixed-length character windows; empty content yields one empty window."""
    if length <= 0:
        raise ValueError("Section length must be positive")
    if not content:
        return [""]
    return [content[i:i + length] for i in range(0, len(content), length)]


def excerpt(text: str, limit: int) -> str:
    """Leading excerpt with a trailing ellipsis marker."""
    return text[:limit] + "..."


def collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()
