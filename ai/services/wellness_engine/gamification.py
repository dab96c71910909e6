from __future__ import annotations
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Optional

from .models import GameProfile, EntryKind

XP_PER_LEVEL = 100

XP_REWARDS: Dict[EntryKind, int] = {
    EntryKind.JOURNAL: 15,
    EntryKind.MOOD: 20,
    EntryKind.DREAM: 25,
}


def level_for_total_xp(total_xp: int) -> int:
    return total_xp // XP_PER_LEVEL + 1


def add_xp(profile: GameProfile, amount: int, at: Optional[str] = None) -> GameProfile:
    """Return a copy of profile with amount XP credited and the level recomputed."""
    if amount < 0:
        raise ValueError(f"XP amount must be >= 0 (got {amount})")
    total_xp = profile.total_xp + amount
    return replace(
        profile,
        xp=profile.xp + amount,
        total_xp=total_xp,
        level=level_for_total_xp(total_xp),
        abilities=list(profile.abilities),
        streaks=dict(profile.streaks),
        last_activity=at or datetime.now(timezone.utc).isoformat(),
    )


def xp_to_next_level(profile: GameProfile) -> int:
    return max(0, profile.level * XP_PER_LEVEL - profile.total_xp)


def level_progress(profile: GameProfile) -> float:
    # share of the current level already earned, 0.0 <= p < 1.0
    return (profile.total_xp % XP_PER_LEVEL) / XP_PER_LEVEL
