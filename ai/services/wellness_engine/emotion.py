from __future__ import annotations
from typing import Dict, List

from .lexicons import (
    EMOTION_KEYWORDS,
    NEGATIVE_EMOTIONS,
    POSITIVE_EMOTIONS,
    CRISIS_PHRASES,
    POSITIVE_INDICATORS,
    STRESS_INDICATORS,
    BASELINE_SCORE,
    SCORE_MIN,
    SCORE_MAX,
    POSITIVE_EMOTION_WEIGHT,
    POSITIVE_INDICATOR_WEIGHT,
    NEGATIVE_EMOTION_WEIGHT,
    LOW_BAND_UPPER,
    MID_BAND_UPPER,
    HIGH_BAND_LOWER,
    LOW_SCORE_RECOMMENDATIONS,
    MID_SCORE_RECOMMENDATIONS,
    HIGH_SCORE_RECOMMENDATIONS,
)
from .models import EmotionalAnalysis

# Keyword scanner for journal / mood text.
# Policy:
# - Only normalization is lower-casing. No tokenizer, no stemming, no punctuation stripping.
# - A phrase "hits" when it is a substring anywhere in the text, word boundaries are ignored
#   ("bitterly" hits "bitter", "breakdown" hits "down").
# - Presence counts once per phrase, repeated occurrences do not add up.
# - Never raises; empty text is the neutral result (score 50, primary "happy" by table order).


def _matches(lower_text: str, phrases) -> List[str]:
    return [p for p in phrases if p in lower_text]


def detect_crisis(text: str) -> bool:
    lower_text = text.lower()
    return any(p in lower_text for p in CRISIS_PHRASES)


def emotion_scores(text: str) -> Dict[str, int]:
    """Per-category keyword hit counts, in category declaration order."""
    lower_text = text.lower()
    return {emotion: len(_matches(lower_text, kws)) for emotion, kws in EMOTION_KEYWORDS.items()}


def _primary_emotion(scores: Dict[str, int]) -> str:
    # max() keeps the first of equal maxima, so ties go to the earlier category
    return max(scores, key=lambda emotion: scores[emotion])


def _clamp(score: int) -> int:
    return max(SCORE_MIN, min(SCORE_MAX, score))


def recommendations_for(score: int) -> List[str]:
    if score < LOW_BAND_UPPER:
        return list(LOW_SCORE_RECOMMENDATIONS)
    if score < MID_BAND_UPPER:
        return list(MID_SCORE_RECOMMENDATIONS)
    if score >= HIGH_BAND_LOWER:
        return list(HIGH_SCORE_RECOMMENDATIONS)
    # 50..69: nothing to suggest
    return []


def analyze_text(text: str) -> EmotionalAnalysis:
    lower_text = (text or "").lower()

    crisis_risk = detect_crisis(lower_text)

    scores = emotion_scores(lower_text)
    primary = _primary_emotion(scores)

    positive_found = _matches(lower_text, POSITIVE_INDICATORS)
    stress_found = _matches(lower_text, STRESS_INDICATORS)

    negative_emotions = sum(scores[e] for e in NEGATIVE_EMOTIONS)
    positive_emotions = sum(scores[e] for e in POSITIVE_EMOTIONS)

    score = BASELINE_SCORE
    score += positive_emotions * POSITIVE_EMOTION_WEIGHT + len(positive_found) * POSITIVE_INDICATOR_WEIGHT
    score -= negative_emotions * NEGATIVE_EMOTION_WEIGHT
    score = _clamp(score)

    return EmotionalAnalysis(
        primary_emotion=primary,
        emotional_score=score,
        stress_indicators=tuple(stress_found),
        positive_indicators=tuple(positive_found),
        recommendations=tuple(recommendations_for(score)),
        crisis_risk=crisis_risk,
    )
