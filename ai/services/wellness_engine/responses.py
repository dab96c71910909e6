# -*- coding: utf-8 -*-
"""responses.py

Purpose
-------
- Turn an EmotionalAnalysis into the short supportive message shown to the user.
- Pick the "saved" acknowledgement for journal / dream entries.

Design
------
- Pure template selection: (style, score band) -> template, then format().
- Crisis always wins: one fixed support message regardless of style or score.
- Unknown style strings render with the neutral templates.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

from .lexicons import LOW_BAND_UPPER, MID_BAND_UPPER
from .models import EmotionalAnalysis, EntryKind, ResponseStyle


CRISIS_SUPPORT_MESSAGE = (
    "I notice you might be going through a really difficult time right now. "
    "Your feelings are valid, and you don't have to face this alone. "
    "Please consider reaching out to a crisis support line or a trusted person in your life. "
    "You matter, and there is help available."
)

CRISIS_HELPLINE_NOTICE = (
    "I notice you might be struggling. "
    "Please consider reaching out to a crisis helpline: 988 (US) or emergency services."
)

# band keys: "low" (<30), "mid" (30..49), "high" (>=50)
_RESPONSE_TEMPLATES: Dict[Tuple[ResponseStyle, str], str] = {
    (ResponseStyle.GENTLE, "low"): (
        "I can sense you're feeling {emotion} right now, and that's completely okay. "
        "Your emotions are valid, and it's brave of you to acknowledge them. "
        "Take things one moment at a time, and be gentle with yourself. 💝"
    ),
    (ResponseStyle.GENTLE, "mid"): (
        "It sounds like you're experiencing some {emotion} feelings today. "
        "Remember that it's normal to have ups and downs. "
        "You're doing the best you can, and that's enough. 🌸"
    ),
    (ResponseStyle.GENTLE, "high"): (
        "I'm glad to hear you're feeling {emotion}! "
        "It's wonderful when we can recognize and appreciate these positive moments. "
        "Keep nurturing this feeling. ✨"
    ),
    (ResponseStyle.MOTIVATIONAL, "low"): (
        "I see you're dealing with {emotion} right now - and you know what? "
        "You're still here, still fighting, and that makes you incredibly strong! "
        "Every challenge is an opportunity to grow stronger. You've got this! 💪"
    ),
    (ResponseStyle.MOTIVATIONAL, "mid"): (
        "Feeling {emotion} is part of the human experience, and you're handling it like a champion! "
        "Use this as fuel to push forward and create positive change. "
        "Your resilience is inspiring! 🔥"
    ),
    (ResponseStyle.MOTIVATIONAL, "high"): (
        "Yes! That {emotion} energy is exactly what I love to see! "
        "You're radiating positivity and strength. "
        "Channel this amazing energy into achieving your goals! 🚀"
    ),
    (ResponseStyle.NEUTRAL, "low"): (
        "Analysis shows primary emotion: {emotion}. Emotional score: {score}/100. "
        "Consider implementing stress management techniques and seeking support if needed."
    ),
    (ResponseStyle.NEUTRAL, "mid"): (
        "Current emotional state: {emotion}. Score: {score}/100. "
        "This indicates room for improvement through targeted wellness activities."
    ),
    (ResponseStyle.NEUTRAL, "high"): (
        "Emotional analysis: {emotion} with score of {score}/100. "
        "This reflects a positive mental state. Continue current practices."
    ),
}

_ACKNOWLEDGEMENTS: Dict[Tuple[EntryKind, ResponseStyle], str] = {
    (EntryKind.JOURNAL, ResponseStyle.GENTLE): "💝 Thank you for sharing your thoughts. Your feelings are valid and important.",
    (EntryKind.JOURNAL, ResponseStyle.MOTIVATIONAL): "⚡ Great job journaling! You're building emotional awareness and resilience.",
    (EntryKind.JOURNAL, ResponseStyle.NEUTRAL): "🎯 Journal entry saved. Your emotional score today: {score}",
    (EntryKind.DREAM, ResponseStyle.GENTLE): "🌙 Thank you for sharing your dream. Dreams can offer beautiful insights into our inner world.",
    (EntryKind.DREAM, ResponseStyle.MOTIVATIONAL): "⭐ Excellent dream journaling! You're exploring the depths of your subconscious mind.",
    (EntryKind.DREAM, ResponseStyle.NEUTRAL): "🎯 Dream logged successfully. Your subconscious patterns are being tracked.",
}


def coerce_style(style: Union[ResponseStyle, str, None]) -> ResponseStyle:
    if isinstance(style, ResponseStyle):
        return style
    try:
        return ResponseStyle(str(style or "").strip().lower())
    except ValueError:
        return ResponseStyle.NEUTRAL


def _band(score: int) -> str:
    if score < LOW_BAND_UPPER:
        return "low"
    if score < MID_BAND_UPPER:
        return "mid"
    return "high"


def generate_personalized_response(
    analysis: EmotionalAnalysis,
    response_style: Union[ResponseStyle, str],
) -> str:
    if analysis.crisis_risk:
        return CRISIS_SUPPORT_MESSAGE

    template = _RESPONSE_TEMPLATES[(coerce_style(response_style), _band(analysis.emotional_score))]
    return template.format(emotion=analysis.primary_emotion, score=analysis.emotional_score)


def entry_acknowledgement(
    kind: Union[EntryKind, str],
    response_style: Union[ResponseStyle, str],
    emotional_score: Optional[int] = None,
) -> str:
    """Notification text shown after a journal or dream entry is saved."""
    kind = EntryKind(kind)
    if kind == EntryKind.MOOD:
        raise ValueError("mood entries notify with recommendations, not an acknowledgement")
    template = _ACKNOWLEDGEMENTS[(kind, coerce_style(response_style))]
    return template.format(score=emotional_score if emotional_score is not None else "")
