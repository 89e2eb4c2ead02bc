"""Keyword tables and whole-word scanning."""

import re
from typing import Dict, List, Mapping, Optional, Sequence


SENSORY_KEYWORDS: Dict[str, List[str]] = {
    "touch": ["touch", "feel", "texture", "skin", "hand", "finger", "pressure",
              "smooth", "rough", "soft", "hard", "warmth", "contact"],
    "sound": ["hear", "sound", "noise", "voice", "whisper", "echo", "ring",
              "hum", "crackle", "silence", "music", "tone"],
    "sight": ["see", "look", "view", "color", "light", "dark", "shadow",
              "bright", "dim", "glimpse", "stare", "visual"],
    "temperature": ["hot", "cold", "warm", "cool", "heat", "chill", "freeze",
                    "burn", "temperature", "fever"],
    "smell": ["smell", "scent", "odor", "aroma", "perfume", "stench",
              "fragrance", "whiff", "nose"],
}

MOTIF_KEYWORDS: Dict[str, List[str]] = {
    "fire": ["fire", "flame", "burn", "heat", "ash", "smoke", "ember",
             "ignite", "blaze"],
    "cold": ["cold", "ice", "freeze", "frost", "chill", "snow", "winter",
             "freezing"],
    "documentation": ["record", "document", "ledger", "scroll", "note",
                      "write", "paper", "book", "archive"],
    "touch": ["touch", "contact", "skin", "hand", "feel", "caress", "grip",
              "hold"],
    "light": ["light", "bright", "glow", "shine", "illuminate", "clarity",
              "vision", "beam"],
}

TELLING_WORDS: List[str] = [
    "feel", "think", "believe", "know", "understand",
    "realize", "emotion", "sad", "happy", "angry",
]


class KeywordTable:
    """A category -> keyword list table with precompiled whole-word patterns.

    Matching is case-insensitive and anchored on word boundaries at both
    ends, so ``hot`` never matches inside ``photograph``. Category order is
    the declaration order of the mapping and is preserved in every result.
    """

    def __init__(self, keywords: Mapping[str, Sequence[str]]):
        self.keywords: Dict[str, List[str]] = {
            category: list(words) for category, words in keywords.items()
        }
        self._patterns: Dict[str, List[re.Pattern]] = {
            category: [self._compile(word) for word in words]
            for category, words in self.keywords.items()
        }

    @staticmethod
    def _compile(keyword: str) -> re.Pattern:
        return re.compile(r"\b" + re.escape(keyword) + r"\b", re.IGNORECASE)

    @property
    def categories(self) -> List[str]:
        return list(self.keywords)

    def __contains__(self, category: object) -> bool:
        return category in self.keywords

    def get(self, category: str) -> Optional[List[str]]:
        """Keyword list for a category, or None if the table lacks it."""
        words = self.keywords.get(category)
        return list(words) if words is not None else None

    def count(self, text: str) -> Dict[str, int]:
        """Count keyword hits per category in ``text``."""
        return {
            category: sum(len(pattern.findall(text)) for pattern in patterns)
            for category, patterns in self._patterns.items()
        }

    def count_category(self, text: str, category: str) -> int:
        """Count hits for one category; unknown categories count zero."""
        return sum(len(p.findall(text)) for p in self._patterns.get(category, []))


SENSORY_TABLE = KeywordTable(SENSORY_KEYWORDS)
MOTIF_TABLE = KeywordTable(MOTIF_KEYWORDS)
TELLING_TABLE = KeywordTable({"telling": TELLING_WORDS})
