from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class OriginalityColumnConfig(SingleColumnConfig):
    """Score text columns for originality and machine-authorship patterns.

    Matches each row's text against the built-in AI-pattern and cliché library,
    measures sentence-length burstiness and vocabulary richness, and produces an
    originality score (0-100), an AI-generation score (0-100), and a summary.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        min_score: Minimum originality score (0-100) for ``is_valid=True``. Defaults to 60
            (the boundary between "moderate" and "several patterns" summaries).
        include_suggestions: Include advisory strings in output.
        include_matches: Include located pattern matches (text, offsets, type, confidence).
    """

    target_columns: list[str]
    min_score: int = Field(default=60, ge=0, le=100, description="Minimum originality score for is_valid=True")
    include_suggestions: bool = Field(default=True, description="Include advisory strings in output")
    include_matches: bool = Field(default=False, description="Include located pattern matches in output")
    column_type: Literal["originality-check"] = "originality-check"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f50d"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []


class TextSimilarityColumnConfig(SingleColumnConfig):
    """Flag near-duplicate submissions by comparing two text columns row by row.

    Attributes:
        left_column: Column holding the first text.
        right_column: Column holding the text to compare against.
        max_similarity: Similarity (0-100) at or above which a row is flagged as a duplicate.
        include_common_phrases: Include up to ten shared four-word phrases in output.
    """

    left_column: str
    right_column: str
    max_similarity: float = Field(default=50.0, ge=0, le=100, description="Similarity at or above which is_duplicate=True")
    include_common_phrases: bool = Field(default=True, description="Include shared four-word phrases in output")
    column_type: Literal["text-similarity"] = "text-similarity"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f46f"

    @property
    def required_columns(self) -> list[str]:
        return [self.left_column, self.right_column]

    @property
    def side_effect_columns(self) -> list[str]:
        return []
