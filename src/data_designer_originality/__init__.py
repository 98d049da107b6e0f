# SPDX-License-Identifier: Apache-2.0
"""Originality check plugin for NeMo Data Designer.

Adds an ``originality-check`` column type that scores text for AI writing
patterns, clichés, uniform sentence rhythm and thin vocabulary, and a
``text-similarity`` column type that flags near-duplicate submissions.
Rule-based and deterministic. No LLM calls, no API dependencies.

Usage::

    from data_designer_originality import OriginalityColumnConfig

    builder.add_column(OriginalityColumnConfig(
        name="originality",
        target_columns=["essay"],
        min_score=60,
    ))

The engine can also be called directly::

    from data_designer_originality import analyze_text, compare_texts

    result = analyze_text(essay)
    result.overall_score, result.ai_generated_score
"""

from data_designer_originality.compare import ComparisonResult, compare_texts
from data_designer_originality.config import OriginalityColumnConfig, TextSimilarityColumnConfig
from data_designer_originality.core import (
    DEFAULT_PATTERN_LIBRARY,
    AnalysisResult,
    Hyperparameters,
    InvalidInputError,
    Match,
    SubmissionLengthError,
    analyze_text,
    build_pattern_library,
    check_submission,
)

__all__ = [
    "OriginalityColumnConfig",
    "TextSimilarityColumnConfig",
    "analyze_text",
    "compare_texts",
    "check_submission",
    "build_pattern_library",
    "Hyperparameters",
    "AnalysisResult",
    "ComparisonResult",
    "Match",
    "InvalidInputError",
    "SubmissionLengthError",
    "DEFAULT_PATTERN_LIBRARY",
]
