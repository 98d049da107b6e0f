import pytest
from pydantic import ValidationError

from data_designer_originality.config import OriginalityColumnConfig, TextSimilarityColumnConfig


class TestOriginalityColumnConfig:
    def test_defaults(self):
        config = OriginalityColumnConfig(name="originality", target_columns=["essay", "abstract"])
        assert config.column_type == "originality-check"
        assert config.min_score == 60
        assert config.include_suggestions is True
        assert config.include_matches is False
        assert config.required_columns == ["essay", "abstract"]
        assert config.side_effect_columns == []

    @pytest.mark.parametrize("min_score", [-1, 101])
    def test_min_score_bounds(self, min_score):
        with pytest.raises(ValidationError):
            OriginalityColumnConfig(name="originality", target_columns=["essay"], min_score=min_score)


class TestTextSimilarityColumnConfig:
    def test_defaults(self):
        config = TextSimilarityColumnConfig(name="duplicate_check", left_column="draft", right_column="final")
        assert config.column_type == "text-similarity"
        assert config.max_similarity == 50.0
        assert config.include_common_phrases is True
        assert config.required_columns == ["draft", "final"]

    def test_max_similarity_bounds(self):
        with pytest.raises(ValidationError):
            TextSimilarityColumnConfig(name="duplicate_check", left_column="a", right_column="b", max_similarity=150)
