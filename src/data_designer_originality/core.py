# Originality and machine-authorship scoring for submitted prose.
#
# Scans text against a fixed library of AI-pattern and cliché regexes, measures
# sentence-length burstiness and vocabulary richness, and fuses the three signals
# into an originality score (0-100), an AI-generation score (0-100), located
# matches, a summary, and advice. Deterministic; no network, no model.

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Literal

logger = logging.getLogger(__name__)

PatternCategory = Literal["ai-pattern", "cliche"]
MatchType = Literal["exact", "paraphrase", "ai-pattern"]

AI_PATTERN: PatternCategory = "ai-pattern"
CLICHE: PatternCategory = "cliche"

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Weights, multipliers, and thresholds used by the analyzer."""

    pattern_weight: float = 0.5
    burstiness_weight: float = 0.25
    vocabulary_weight: float = 0.25
    pattern_density_multiplier: float = 15.0
    density_words_basis: float = 100.0

    burstiness_min_sentences: int = 3
    burstiness_multiplier: float = 2.0
    vocabulary_multiplier: float = 1.5
    neutral_signal: float = 50.0

    match_penalty_per_match: int = 2
    match_penalty_cap: int = 30

    ai_pattern_confidence: int = 70
    cliche_confidence: int = 50

    ai_score_advice_min: int = 60
    ai_pattern_advice_min: int = 3
    cliche_advice_min: int = 2
    burstiness_advice_max: float = 30.0
    vocabulary_advice_max: float = 40.0

    score_min: int = 0
    score_max: int = 100
    summary_high_min: int = 80
    summary_moderate_min: int = 60
    summary_several_min: int = 40

    submission_min_chars: int = 50
    submission_max_chars: int = 50_000


DEFAULT_HYPERPARAMETERS = Hyperparameters()


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class InvalidInputError(TypeError):
    """Raised when the text handed to the engine is not a string."""


class SubmissionLengthError(ValueError):
    """Raised by :func:`check_submission` for text outside the accepted envelope."""


def require_text(value: object, argument: str = "text") -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{argument} must be a str, got {type(value).__name__}")
    return value


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PatternDefinition:
    name: str
    regex: re.Pattern[str]
    category: PatternCategory
    confidence: int
    source: str

    def __post_init__(self) -> None:
        if self.category not in (AI_PATTERN, CLICHE):
            raise ValueError(f"Unknown pattern category {self.category!r} for {self.name!r}")

    @property
    def match_type(self) -> MatchType:
        return "ai-pattern" if self.category == AI_PATTERN else "paraphrase"


PatternLibrary = tuple[PatternDefinition, ...]


@dataclass(frozen=True)
class Match:
    text: str
    start_index: int
    end_index: int
    match_type: MatchType
    confidence: int
    source: str
    url: str | None = None

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "text": self.text,
            "startIndex": self.start_index,
            "endIndex": self.end_index,
            "matchType": self.match_type,
            "confidence": self.confidence,
            "source": self.source,
        }
        if self.url is not None:
            payload["url"] = self.url
        return payload


@dataclass(frozen=True)
class TextStats:
    word_count: int
    character_count: int
    match_count: int

    def to_payload(self) -> dict[str, int]:
        return {
            "wordCount": self.word_count,
            "characterCount": self.character_count,
            "matchCount": self.match_count,
        }


@dataclass(frozen=True)
class AnalysisResult:
    overall_score: int
    ai_generated_score: int
    matches: tuple[Match, ...]
    summary: str
    suggestions: tuple[str, ...]
    burstiness: float
    vocabulary_richness: float
    stats: TextStats

    def to_payload(self) -> dict[str, object]:
        return {
            "overallScore": self.overall_score,
            "aiGeneratedScore": self.ai_generated_score,
            "matches": [m.to_payload() for m in self.matches],
            "summary": self.summary,
            "suggestions": list(self.suggestions),
            "signals": {
                "burstiness": self.burstiness,
                "vocabularyRichness": self.vocabulary_richness,
            },
            "stats": self.stats.to_payload(),
        }


# ---------------------------------------------------------------------------
# Pattern library
# ---------------------------------------------------------------------------

_APOS = "['’]"

_AI_PATTERNS = [
    ("in_conclusion", r"in conclusion,?"),
    ("important_to_note", rf"it{_APOS}s (important|worth|crucial) to (note|mention|understand)"),
    ("essay_will_explore", r"this (essay|article|paper) (will|shall) (explore|examine|discuss)"),
    ("many_reasons", r"there are (many|several|numerous) (ways|reasons|factors)"),
    ("in_todays_world", rf"in today{_APOS}s (world|society|age)"),
    ("first_and_foremost", r"first and foremost"),
    ("last_but_not_least", r"last but not least"),
    ("it_can_be_argued", r"it (is|can be) (argued|said|noted) that"),
    ("this_demonstrates", r"this (demonstrates|shows|illustrates|highlights)"),
    ("additive_transition", r"furthermore,?|moreover,?|additionally,?"),
    ("in_light_of", r"in (light|view) of (this|these|the)"),
    ("plays_a_role", r"plays a (crucial|vital|important|key) role"),
    ("goes_without_saying", r"it goes without saying"),
    ("needless_to_say", r"needless to say"),
    ("as_mentioned_earlier", r"as (mentioned|discussed|noted) (earlier|above|previously)"),
    ("in_summary", r"in (summary|essence|brief)"),
    ("the_fact_is", r"the (fact|reality|truth) (is|remains) that"),
    ("when_it_comes_to", r"when it comes to"),
    ("end_of_the_day", r"at the end of the day"),
    ("taking_into_account", r"taking (everything|all things) into (account|consideration)"),
]

_CLICHE_PATTERNS = [
    ("dawn_of_time", r"since the (dawn|beginning) of (time|civilization|history)"),
    ("throughout_history", r"throughout (history|the ages)"),
    ("modern_society", r"in (our|modern|contemporary) society"),
    ("debated_for_years", r"has been (debated|discussed|argued) for (years|decades|centuries)"),
    ("hot_topic", r"is a (hot|controversial|debated) topic"),
    ("experts_say", r"experts (say|believe|argue)"),
    ("according_to_experts", r"according to (experts|studies|research)"),
    ("studies_show", r"studies (have )?(show|shown|suggest|indicate)"),
]

_AI_PATTERN_SOURCE = "AI Pattern Detection"
_CLICHE_SOURCE = "Common Cliché"


def build_pattern_library(
    ai_patterns: Iterable[tuple[str, str]] = (),
    cliche_patterns: Iterable[tuple[str, str]] = (),
    hyperparameters: Hyperparameters | None = None,
) -> PatternLibrary:
    """Compile ``(name, regex)`` pairs into an immutable pattern library.

    Every regex is compiled case-insensitively. AI patterns come first, then clichés,
    which fixes the order in which matches are reported.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    ai = [
        PatternDefinition(name, re.compile(pattern, re.IGNORECASE), AI_PATTERN, hp.ai_pattern_confidence, _AI_PATTERN_SOURCE)
        for name, pattern in ai_patterns
    ]
    cliches = [
        PatternDefinition(name, re.compile(pattern, re.IGNORECASE), CLICHE, hp.cliche_confidence, _CLICHE_SOURCE)
        for name, pattern in cliche_patterns
    ]
    return tuple(ai + cliches)


DEFAULT_PATTERN_LIBRARY: PatternLibrary = build_pattern_library(_AI_PATTERNS, _CLICHE_PATTERNS)


@lru_cache(maxsize=32)
def default_pattern_library(hyperparameters: Hyperparameters) -> PatternLibrary:
    """Built-in library with confidences taken from ``hyperparameters``."""
    if hyperparameters == DEFAULT_HYPERPARAMETERS:
        return DEFAULT_PATTERN_LIBRARY
    return build_pattern_library(_AI_PATTERNS, _CLICHE_PATTERNS, hyperparameters)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_ALPHA_TOKEN_RE = re.compile(r"^[a-z]+$")


def _word_count(text: str) -> int:
    return len(text.split())


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    # round() is banker's rounding; 92.5 must become 93
    return int(math.floor(value + 0.5))


# ---------------------------------------------------------------------------
# Pattern matcher
# ---------------------------------------------------------------------------


def find_matches(text: str, library: PatternLibrary = DEFAULT_PATTERN_LIBRARY) -> list[Match]:
    """Return every non-overlapping occurrence of every library pattern.

    Matches are reported pattern by pattern in library order, then by position.
    A span hit by both an AI pattern and a cliché is reported twice.
    """
    matches: list[Match] = []
    for definition in library:
        for m in definition.regex.finditer(text):
            matches.append(Match(
                text=m.group(0),
                start_index=m.start(),
                end_index=m.end(),
                match_type=definition.match_type,
                confidence=definition.confidence,
                source=definition.source,
            ))
    return matches


# ---------------------------------------------------------------------------
# Statistical signals
# ---------------------------------------------------------------------------


def split_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def burstiness(text: str, hyperparameters: Hyperparameters | None = None) -> float:
    """Sentence-length variability: coefficient of variation x multiplier, clamped to 0-100.

    Returns the neutral value when there are too few sentences for a stable estimate.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    sentences = split_sentences(text)
    if len(sentences) < hp.burstiness_min_sentences:
        return hp.neutral_signal

    lengths = [_word_count(s) for s in sentences]
    mean = sum(lengths) / len(lengths)
    variance = sum((x - mean) ** 2 for x in lengths) / len(lengths)
    cv = (math.sqrt(variance) / mean) * 100
    return _clamp(cv * hp.burstiness_multiplier, float(hp.score_min), float(hp.score_max))


def vocabulary_richness(text: str, hyperparameters: Hyperparameters | None = None) -> float:
    """Type-token ratio over purely alphabetic tokens x multiplier, clamped to 0-100."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    words = [w for w in text.lower().split() if _ALPHA_TOKEN_RE.match(w)]
    if not words:
        return hp.neutral_signal

    ttr = (len(set(words)) / len(words)) * 100
    return _clamp(ttr * hp.vocabulary_multiplier, float(hp.score_min), float(hp.score_max))


# ---------------------------------------------------------------------------
# Score aggregation
# ---------------------------------------------------------------------------


def pattern_score(ai_match_count: int, word_count: int, hyperparameters: Hyperparameters | None = None) -> float:
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if word_count <= 0:
        return 0.0
    density = (ai_match_count / word_count) * hp.density_words_basis
    return min(float(hp.score_max), density * hp.pattern_density_multiplier)


def match_penalty(match_count: int, hyperparameters: Hyperparameters | None = None) -> int:
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    return min(hp.match_penalty_cap, match_count * hp.match_penalty_per_match)


def aggregate_scores(
    ai_match_count: int,
    total_match_count: int,
    word_count: int,
    burstiness_score: float,
    vocabulary_score: float,
    hyperparameters: Hyperparameters | None = None,
) -> tuple[int, int]:
    """Fuse the signals into ``(overall_score, ai_generated_score)``."""
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    raw_ai = (
        hp.pattern_weight * pattern_score(ai_match_count, word_count, hp)
        + hp.burstiness_weight * (hp.score_max - burstiness_score)
        + hp.vocabulary_weight * (hp.score_max - vocabulary_score)
    )
    ai_score = int(_clamp(_round_half_up(raw_ai), hp.score_min, hp.score_max))
    overall = hp.score_max - ai_score - match_penalty(total_match_count, hp)
    return int(_clamp(overall, hp.score_min, hp.score_max)), ai_score


# ---------------------------------------------------------------------------
# Suggestions and summary
# ---------------------------------------------------------------------------

_HIGH_AI_ADVICE = (
    "Consider adding more personal insights and original analysis",
    "Vary your sentence structure and length",
    "Replace common transitional phrases with more specific language",
)


def build_suggestions(
    ai_generated_score: int,
    ai_match_count: int,
    cliche_match_count: int,
    burstiness_score: float,
    vocabulary_score: float,
    hyperparameters: Hyperparameters | None = None,
) -> list[str]:
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    suggestions: list[str] = []
    if ai_generated_score > hp.ai_score_advice_min:
        suggestions.extend(_HIGH_AI_ADVICE)
    if ai_match_count > hp.ai_pattern_advice_min:
        suggestions.append('Reduce use of generic transitional phrases like "furthermore" and "moreover"')
    if cliche_match_count > hp.cliche_advice_min:
        suggestions.append("Replace clichéd expressions with more specific, original phrasing")
    if burstiness_score < hp.burstiness_advice_max:
        suggestions.append("Vary your sentence lengths - mix short punchy sentences with longer complex ones")
    if vocabulary_score < hp.vocabulary_advice_max:
        suggestions.append("Use more varied vocabulary - consider using a thesaurus for repetitive words")
    return suggestions


def summarize(overall_score: int, hyperparameters: Hyperparameters | None = None) -> str:
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if overall_score >= hp.summary_high_min:
        return "Your text appears to be highly original with minimal AI-generated patterns detected."
    if overall_score >= hp.summary_moderate_min:
        return "Your text shows moderate originality. Some common patterns were detected that could be improved."
    if overall_score >= hp.summary_several_min:
        return "Your text contains several patterns commonly associated with AI-generated content or unoriginal writing."
    return "Your text shows significant patterns that may indicate AI-generated content or lack of originality."


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def check_submission(text: object, hyperparameters: Hyperparameters | None = None) -> str:
    """Enforce the accepted submission envelope and return the text unchanged.

    :func:`analyze_text` accepts any string; this is for callers that want to reject
    submissions too short for meaningful analysis or too long to accept.

    Raises:
        InvalidInputError: ``text`` is not a string.
        SubmissionLengthError: trimmed text is shorter than ``submission_min_chars``
            or the raw text is longer than ``submission_max_chars``.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    value = require_text(text)
    if len(value.strip()) < hp.submission_min_chars:
        raise SubmissionLengthError(f"Text must be at least {hp.submission_min_chars} characters for accurate analysis")
    if len(value) > hp.submission_max_chars:
        raise SubmissionLengthError(f"Text must be less than {hp.submission_max_chars:,} characters")
    return value


def analyze_text(
    text: str,
    hyperparameters: Hyperparameters | None = None,
    patterns: PatternLibrary | None = None,
) -> AnalysisResult:
    """Score text for originality and likelihood of machine generation.

    Args:
        text: The prose to analyze. Any string is accepted; degenerate input
            (empty, a single sentence, no alphabetic words) falls back to neutral signals.
        hyperparameters: Optional tuning overrides. Uses the defaults if omitted.
        patterns: Optional pattern library. Uses the built-in library, with confidences
            from ``hyperparameters``, if omitted.

    Returns:
        AnalysisResult with both headline scores in 0-100, matches in discovery
        order, a summary line, and ordered suggestions.

    Raises:
        InvalidInputError: ``text`` is not a string.
    """
    text = require_text(text)
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    library = default_pattern_library(hp) if patterns is None else patterns

    matches = find_matches(text, library)
    ai_count = sum(1 for m in matches if m.match_type == "ai-pattern")
    cliche_count = len(matches) - ai_count
    wc = _word_count(text)
    burst = burstiness(text, hp)
    vocab = vocabulary_richness(text, hp)

    overall, ai_score = aggregate_scores(ai_count, len(matches), wc, burst, vocab, hp)
    logger.debug(f"Analyzed {wc} words: {len(matches)} matches, overall={overall}, ai={ai_score}")

    return AnalysisResult(
        overall_score=overall,
        ai_generated_score=ai_score,
        matches=tuple(matches),
        summary=summarize(overall, hp),
        suggestions=tuple(build_suggestions(ai_score, ai_count, cliche_count, burst, vocab, hp)),
        burstiness=round(burst, 2),
        vocabulary_richness=round(vocab, 2),
        stats=TextStats(word_count=wc, character_count=len(text), match_count=len(matches)),
    )
