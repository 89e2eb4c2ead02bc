"""Richness scoring and threshold classification."""

from enum import Enum
from typing import Mapping


REFERENCE_WORDS = 500
MIN_SCORE = 1.0
MAX_SCORE = 10.0
YELLOW_MARGIN = 2.0


class RichnessStatus(str, Enum):
    """Classification of a section against the baseline threshold."""
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"


def richness_score(counts: Mapping[str, int], word_count: int) -> float:
    """Sensory references per 500 words, clamped to [1, 10].

    A span with no words scores 0. The per-500-word density is used as the
    score directly, so a passage needs ten references per 500 words to reach
    the ceiling.
    """
    if word_count == 0:
        return 0.0

    total = sum(counts.values())
    per_reference_block = total / word_count * REFERENCE_WORDS
    return min(MAX_SCORE, max(MIN_SCORE, per_reference_block / 10 * 10))


def classify(score: float, threshold: float) -> RichnessStatus:
    """GREEN at or above threshold, YELLOW within two points below, else RED."""
    if score >= threshold:
        return RichnessStatus.GREEN
    if score >= threshold - YELLOW_MARGIN:
        return RichnessStatus.YELLOW
    return RichnessStatus.RED
