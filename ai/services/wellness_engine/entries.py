from __future__ import annotations
from datetime import datetime, timezone
from typing import List, Optional, Union

from .dreams import analyze_dream
from .emotion import analyze_text
from .gamification import XP_REWARDS
from .models import EntryKind, EntryResult, EntryValidationError, MoodEntry, ResponseStyle
from .responses import CRISIS_HELPLINE_NOTICE, coerce_style, entry_acknowledgement

# Entry builders for the journal, mood and dream screens.
# Policy:
# - Builders are pure: they return a record plus the XP and notifications it earns.
#   Where the record is stored is the caller's business.
# - Journal / dream need non-blank text (nothing to save otherwise). Mood text may be empty.
# - Dream entries are not scored, they carry a fixed score of 60 and the matched symbols.

RECENT_LIMIT = 10

DEFAULT_LEVEL = 50
DEFAULT_MOOD_LABEL = "Neutral"
DEFAULT_DREAM_MOOD = "dreamy"
DREAM_SCORE = 60
DREAM_LEVELS = {"stress_level": 30, "energy_level": 70, "anxiety_level": 20}
DREAM_TAGS = ["dream", "subconscious"]


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _require_text(text: Optional[str], what: str) -> str:
    if not (text or "").strip():
        raise EntryValidationError(f"{what} text is required")
    return text  # type: ignore[return-value]


def _check_level(name: str, value: int) -> int:
    if not 0 <= int(value) <= 100:
        raise EntryValidationError(f"{name} must be within 0..100 (got {value})")
    return int(value)


def build_journal_entry(
    user_id: str,
    text: str,
    response_style: Union[ResponseStyle, str] = ResponseStyle.GENTLE,
    created_at: Optional[str] = None,
) -> EntryResult:
    text = _require_text(text, "journal")
    analysis = analyze_text(text)
    entry = MoodEntry(
        user_id=user_id,
        kind=EntryKind.JOURNAL,
        mood=analysis.primary_emotion,
        emotional_score=analysis.emotional_score,
        stress_level=DEFAULT_LEVEL,
        energy_level=DEFAULT_LEVEL,
        anxiety_level=DEFAULT_LEVEL,
        tags=list(analysis.stress_indicators) + list(analysis.positive_indicators),
        journal_entry=text,
        created_at=created_at or _now_iso(),
    )
    ack = entry_acknowledgement(EntryKind.JOURNAL, coerce_style(response_style), analysis.emotional_score)
    return EntryResult(
        entry=entry,
        analysis=analysis,
        xp_awarded=XP_REWARDS[EntryKind.JOURNAL],
        notifications=[ack],
    )


def build_mood_entry(
    user_id: str,
    mood: Optional[str],
    text: str = "",
    stress_level: int = DEFAULT_LEVEL,
    energy_level: int = DEFAULT_LEVEL,
    anxiety_level: int = DEFAULT_LEVEL,
    crisis_support: bool = False,
    created_at: Optional[str] = None,
) -> EntryResult:
    stress_level = _check_level("stress_level", stress_level)
    energy_level = _check_level("energy_level", energy_level)
    anxiety_level = _check_level("anxiety_level", anxiety_level)

    analysis = analyze_text(text or "")
    entry = MoodEntry(
        user_id=user_id,
        kind=EntryKind.MOOD,
        mood=(mood or "").strip() or DEFAULT_MOOD_LABEL,
        emotional_score=analysis.emotional_score,
        stress_level=stress_level,
        energy_level=energy_level,
        anxiety_level=anxiety_level,
        tags=list(analysis.stress_indicators) + list(analysis.positive_indicators),
        journal_entry=text or "",
        created_at=created_at or _now_iso(),
    )

    notifications = list(analysis.recommendations)
    # helpline notice only for users who opted into crisis support
    if analysis.crisis_risk and crisis_support:
        notifications.append(CRISIS_HELPLINE_NOTICE)

    return EntryResult(
        entry=entry,
        analysis=analysis,
        xp_awarded=XP_REWARDS[EntryKind.MOOD],
        notifications=notifications,
    )


def build_dream_entry(
    user_id: str,
    text: str,
    dream_mood: Optional[str] = None,
    response_style: Union[ResponseStyle, str] = ResponseStyle.GENTLE,
    created_at: Optional[str] = None,
) -> EntryResult:
    text = _require_text(text, "dream")
    entry = MoodEntry(
        user_id=user_id,
        kind=EntryKind.DREAM,
        mood=(dream_mood or "").strip() or DEFAULT_DREAM_MOOD,
        emotional_score=DREAM_SCORE,
        tags=list(DREAM_TAGS),
        dream_entry=text,
        dream_symbols=analyze_dream(text),
        created_at=created_at or _now_iso(),
        **DREAM_LEVELS,
    )
    return EntryResult(
        entry=entry,
        analysis=None,
        xp_awarded=XP_REWARDS[EntryKind.DREAM],
        notifications=[entry_acknowledgement(EntryKind.DREAM, coerce_style(response_style))],
    )


def push_recent(recent: List[MoodEntry], entry: MoodEntry, limit: int = RECENT_LIMIT) -> List[MoodEntry]:
    """New list with entry first, trimmed to limit."""
    return [entry] + list(recent[: max(0, limit - 1)])
