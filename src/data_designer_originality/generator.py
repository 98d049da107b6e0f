from __future__ import annotations

import logging

import pandas as pd
from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_originality.compare import compare_texts
from data_designer_originality.config import OriginalityColumnConfig, TextSimilarityColumnConfig
from data_designer_originality.core import analyze_text

logger = logging.getLogger(__name__)


def _cell_text(value: object) -> str:
    return str(value) if pd.notna(value) else ""


class OriginalityColumnGenerator(ColumnGeneratorFullColumn[OriginalityColumnConfig]):
    """Column generator that scores text for originality and AI writing patterns."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f50d Scoring column {self.config.name!r} for originality")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   min_score: {self.config.min_score}")

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if pd.notna(v))
            analysis = analyze_text(text)
            output: dict = {
                "is_valid": analysis.overall_score >= self.config.min_score,
                "originality_score": analysis.overall_score,
                "ai_generated_score": analysis.ai_generated_score,
                "summary": analysis.summary,
                "word_count": analysis.stats.word_count,
            }
            if self.config.include_suggestions:
                output["suggestions"] = list(analysis.suggestions)
            if self.config.include_matches:
                output["matches"] = [m.to_payload() for m in analysis.matches]
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data


class TextSimilarityColumnGenerator(ColumnGeneratorFullColumn[TextSimilarityColumnConfig]):
    """Column generator that compares two text columns for duplicate submissions."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f46f Comparing {self.config.left_column!r} with {self.config.right_column!r}")
        logger.info(f"   max_similarity: {self.config.max_similarity}")

        results = []
        for left, right in zip(data[self.config.left_column], data[self.config.right_column]):
            comparison = compare_texts(_cell_text(left), _cell_text(right))
            output: dict = {
                "is_duplicate": comparison.similarity >= self.config.max_similarity,
                "similarity": round(comparison.similarity, 2),
            }
            if self.config.include_common_phrases:
                output["common_phrases"] = list(comparison.common_phrases)
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data
