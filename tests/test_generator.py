from types import SimpleNamespace

import pandas as pd
import pytest

from data_designer_originality.config import OriginalityColumnConfig, TextSimilarityColumnConfig
from data_designer_originality.generator import OriginalityColumnGenerator, TextSimilarityColumnGenerator


TEMPLATED_TEXT = " ".join(["In conclusion, this essay will explore many reasons."] * 5)

CONTROL_TEXT = (
    "The river froze early that year. "
    "Nobody in the village expected the cold to arrive before the harvest had been fully gathered and stored. "
    "We waited. "
    "Then came snow, heavy and wet, burying fences overnight."
)


def _run(generator_cls, config, data):
    # generate() only reads self.config
    return generator_cls.generate(SimpleNamespace(config=config), data)


@pytest.fixture
def essays():
    return pd.DataFrame({"essay": [TEMPLATED_TEXT, CONTROL_TEXT], "notes": [None, float("nan")]})


@pytest.fixture
def pairs():
    return pd.DataFrame({
        "draft": ["apple banana cherry", "alpha beta", "quiet green hills roll", None],
        "final": ["banana cherry grape melon", "alpha gamma", "quiet green hills roll", "apple"],
    })


class TestOriginalityColumnGenerator:
    def test_scores_each_row(self, essays):
        config = OriginalityColumnConfig(name="originality", target_columns=["essay", "notes"])
        rows = _run(OriginalityColumnGenerator, config, essays)["originality"].tolist()
        assert rows[0]["originality_score"] == 0
        assert rows[0]["ai_generated_score"] == 93
        assert rows[0]["is_valid"] is False
        assert rows[0]["word_count"] == 40
        assert rows[0]["summary"].startswith("Your text shows significant patterns")
        assert rows[1]["originality_score"] == 100
        assert rows[1]["ai_generated_score"] == 0
        assert rows[1]["is_valid"] is True
        assert rows[1]["summary"].startswith("Your text appears to be highly original")

    def test_missing_cells_are_skipped(self, essays):
        config = OriginalityColumnConfig(name="originality", target_columns=["essay", "notes"])
        rows = _run(OriginalityColumnGenerator, config, essays)["originality"].tolist()
        assert rows[1]["word_count"] == 35

    @pytest.mark.parametrize("min_score, expected", [(0, True), (1, False)])
    def test_min_score_is_inclusive(self, essays, min_score, expected):
        config = OriginalityColumnConfig(name="originality", target_columns=["essay"], min_score=min_score)
        rows = _run(OriginalityColumnGenerator, config, essays)["originality"].tolist()
        assert rows[0]["is_valid"] is expected

    def test_default_output_keys(self, essays):
        config = OriginalityColumnConfig(name="originality", target_columns=["essay"])
        row = _run(OriginalityColumnGenerator, config, essays)["originality"].tolist()[0]
        assert set(row) == {"is_valid", "originality_score", "ai_generated_score", "summary", "word_count", "suggestions"}
        assert len(row["suggestions"]) == 6

    def test_toggles(self, essays):
        config = OriginalityColumnConfig(
            name="originality", target_columns=["essay"], include_suggestions=False, include_matches=True,
        )
        row = _run(OriginalityColumnGenerator, config, essays)["originality"].tolist()[0]
        assert "suggestions" not in row
        assert len(row["matches"]) == 10
        assert row["matches"][0]["matchType"] == "ai-pattern"

    def test_input_frame_is_not_modified(self, essays):
        config = OriginalityColumnConfig(name="originality", target_columns=["essay"])
        out = _run(OriginalityColumnGenerator, config, essays)
        assert "originality" in out.columns
        assert "originality" not in essays.columns


class TestTextSimilarityColumnGenerator:
    def test_compares_each_row(self, pairs):
        config = TextSimilarityColumnConfig(name="duplicate", left_column="draft", right_column="final")
        rows = _run(TextSimilarityColumnGenerator, config, pairs)["duplicate"].tolist()
        assert rows[0]["similarity"] == 40.0
        assert rows[1]["similarity"] == 33.33
        assert rows[2]["similarity"] == 100.0
        assert rows[2]["common_phrases"] == ["quiet green hills roll"]
        assert rows[3] == {"is_duplicate": False, "similarity": 0.0, "common_phrases": []}

    @pytest.mark.parametrize("max_similarity, expected", [(40.0, True), (41.0, False)])
    def test_max_similarity_is_inclusive(self, pairs, max_similarity, expected):
        config = TextSimilarityColumnConfig(
            name="duplicate", left_column="draft", right_column="final", max_similarity=max_similarity,
        )
        rows = _run(TextSimilarityColumnGenerator, config, pairs)["duplicate"].tolist()
        assert rows[0]["is_duplicate"] is expected

    def test_common_phrases_toggle(self, pairs):
        config = TextSimilarityColumnConfig(
            name="duplicate", left_column="draft", right_column="final", include_common_phrases=False,
        )
        rows = _run(TextSimilarityColumnGenerator, config, pairs)["duplicate"].tolist()
        assert all(set(row) == {"is_duplicate", "similarity"} for row in rows)
