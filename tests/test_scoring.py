"""Tests for keyword scanning, scoring and classification."""

import pytest
from sensoryaudit.core.lexicon import KeywordTable, MOTIF_TABLE, SENSORY_TABLE, TELLING_TABLE
from sensoryaudit.core.scoring import RichnessStatus, classify, richness_score


def _span(hits: int, words: int = 500) -> str:
    return "smell " * hits + "plain " * (words - hits)


class TestKeywordTable:
    """Tests for the lexeme scanner."""

    def test_table_sizes(self):
        sizes = {c: len(SENSORY_TABLE.get(c)) for c in SENSORY_TABLE.categories}
        assert sizes == {"touch": 13, "sound": 12, "sight": 12, "temperature": 10, "smell": 9}
        assert MOTIF_TABLE.categories == ["fire", "cold", "documentation", "touch", "light"]
        assert len(TELLING_TABLE.get("telling")) == 10

    def test_whole_word_only(self):
        counts = SENSORY_TABLE.count("A photograph of hot tea")
        assert counts == {"touch": 0, "sound": 0, "sight": 0, "temperature": 1, "smell": 0}

    def test_case_insensitive(self):
        assert SENSORY_TABLE.count("HOT Hot hot")["temperature"] == 3

    def test_category_order_preserved(self):
        assert list(SENSORY_TABLE.count("")) == ["touch", "sound", "sight", "temperature", "smell"]

    def test_sums_keywords_in_category(self):
        counts = SENSORY_TABLE.count("She could hear the crackle and the hum.")
        assert counts["sound"] == 3

    def test_injected_table(self):
        table = KeywordTable({"weather": ["rain", "fog"]})
        assert table.count("Rain, then fog, then rain again.") == {"weather": 3}
        assert "weather" in table
        assert table.get("snow") is None

    def test_count_unknown_category(self):
        assert MOTIF_TABLE.count_category("fire fire", "water") == 0

    def test_keywords_are_escaped(self):
        table = KeywordTable({"odd": ["a.b"]})
        assert table.count("axb a.b") == {"odd": 1}


class TestRichnessScore:
    """Tests for the richness scorer."""

    def test_zero_words_scores_zero(self):
        assert richness_score({}, 0) == 0
        assert richness_score({"touch": 5}, 0) == 0

    def test_ten_hits_per_500_words_scores_ten(self):
        counts = SENSORY_TABLE.count(_span(10))
        assert richness_score(counts, 500) == pytest.approx(10.0)

    def test_clamped_to_ceiling(self):
        assert richness_score({"smell": 40}, 500) == 10.0

    def test_clamped_to_floor(self):
        assert richness_score({"smell": 0}, 500) == 1.0

    def test_density_is_score(self):
        # "8-12 refs per 500 words is excellent" would suggest ~10; the
        # formula gives the density itself.
        assert richness_score({"smell": 8}, 500) == pytest.approx(8.0)
        assert richness_score({"smell": 3}, 250) == pytest.approx(6.0)

    def test_monotonic_in_hits(self):
        scores = [richness_score(SENSORY_TABLE.count(_span(k)), 500) for k in range(0, 30)]
        assert scores == sorted(scores)


class TestClassify:
    """Tests for threshold classification."""

    def test_boundaries(self):
        threshold = 7.5
        assert classify(threshold, threshold) is RichnessStatus.GREEN
        assert classify(threshold - 2, threshold) is RichnessStatus.YELLOW
        assert classify(threshold - 2.1, threshold) is RichnessStatus.RED

    def test_above_threshold(self):
        assert classify(10, 8) is RichnessStatus.GREEN
        assert classify(7, 8) is RichnessStatus.YELLOW
        assert classify(0, 8) is RichnessStatus.RED

    def test_status_values(self):
        assert [s.value for s in RichnessStatus] == ["GREEN", "YELLOW", "RED"]
