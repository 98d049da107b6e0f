from __future__ import annotations

from dataclasses import dataclass

from data_designer_originality.core import require_text

SIMILARITY_MIN_WORD_LENGTH = 4
NGRAM_MIN_WORD_LENGTH = 3


@dataclass(frozen=True)
class ComparisonResult:
    similarity: float
    common_phrases: tuple[str, ...]

    def to_payload(self) -> dict[str, object]:
        return {"similarity": self.similarity, "commonPhrases": list(self.common_phrases)}


def _word_set(text: str) -> set[str]:
    return {w for w in text.lower().split() if len(w) >= SIMILARITY_MIN_WORD_LENGTH}


def _ngrams(text: str, n: int) -> list[str]:
    words = [w for w in text.lower().split() if len(w) >= NGRAM_MIN_WORD_LENGTH]
    # dict keeps first-seen order while dropping repeats
    return list(dict.fromkeys(" ".join(words[i : i + n]) for i in range(len(words) - n + 1)))


def jaccard_similarity(text_a: str, text_b: str) -> float:
    """Jaccard index (0-100) of the two texts' case-folded words longer than three characters."""
    words_a, words_b = _word_set(text_a), _word_set(text_b)
    union = words_a | words_b
    if not union:
        return 0.0
    return (len(words_a & words_b) / len(union)) * 100


def compare_texts(text_a: str, text_b: str, *, ngram_size: int = 4, max_phrases: int = 10) -> ComparisonResult:
    """Compare two submissions for overlap.

    ``similarity`` is symmetric in its arguments. ``common_phrases`` lists shared
    ``ngram_size``-word phrases in the order they first occur in ``text_a``, capped
    at ``max_phrases``.

    Raises:
        InvalidInputError: either text is not a string.
        ValueError: ``ngram_size`` is below 1 or ``max_phrases`` is negative.
    """
    text_a = require_text(text_a, "text_a")
    text_b = require_text(text_b, "text_b")
    if ngram_size < 1:
        raise ValueError(f"ngram_size must be at least 1, got {ngram_size}")
    if max_phrases < 0:
        raise ValueError(f"max_phrases must not be negative, got {max_phrases}")

    shared = set(_ngrams(text_b, ngram_size))
    common = [gram for gram in _ngrams(text_a, ngram_size) if gram in shared]
    return ComparisonResult(
        similarity=jaccard_similarity(text_a, text_b),
        common_phrases=tuple(common[:max_phrases]),
    )
