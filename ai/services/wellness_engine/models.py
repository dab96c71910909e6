from __future__ import annotations
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Dict, Optional, Any, Tuple


class ResponseStyle(str, Enum):
    GENTLE = "gentle"
    MOTIVATIONAL = "motivational"
    NEUTRAL = "neutral"


class EntryKind(str, Enum):
    MOOD = "mood"
    JOURNAL = "journal"
    DREAM = "dream"


class EntryValidationError(ValueError):
    """Raised when user input cannot become an entry (blank text, bad level)."""


@dataclass(frozen=True)
class EmotionalAnalysis:
    primary_emotion: str
    emotional_score: int          # 0..100, 50 = neutral baseline
    stress_indicators: Tuple[str, ...] = ()
    positive_indicators: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    crisis_risk: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "primary_emotion": self.primary_emotion,
            "emotional_score": self.emotional_score,
            "stress_indicators": list(self.stress_indicators),
            "positive_indicators": list(self.positive_indicators),
            "recommendations": list(self.recommendations),
            "crisis_risk": self.crisis_risk,
        }


@dataclass
class MoodEntry:
    user_id: str
    kind: EntryKind
    mood: str
    emotional_score: int
    stress_level: int     # 0..100
    energy_level: int     # 0..100
    anxiety_level: int    # 0..100
    tags: List[str] = field(default_factory=list)
    journal_entry: Optional[str] = None
    dream_entry: Optional[str] = None
    dream_symbols: Optional[List[str]] = None
    created_at: Optional[str] = None  # ISO-8601 (UTC)
    id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["kind"] = self.kind.value
        return d


@dataclass
class GameProfile:
    user_id: str
    level: int = 1
    xp: int = 0
    total_xp: int = 0
    abilities: List[str] = field(default_factory=list)
    streaks: Dict[str, int] = field(default_factory=dict)
    last_activity: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class EntryResult:
    entry: MoodEntry
    analysis: Optional[EmotionalAnalysis]
    xp_awarded: int
    notifications: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entry": self.entry.to_dict(),
            "analysis": self.analysis.to_dict() if self.analysis is not None else None,
            "xp_awarded": self.xp_awarded,
            "notifications": list(self.notifications),
        }
