# -*- coding: utf-8 -*-
"""
Fixed vocabulary tables for the wellness analyzer.

All matching is substring containment on lower-cased text, so every entry
here must already be lower case. Order matters: emotion categories break ties
by declaration order, and every result list follows table order.
"""

from __future__ import annotations

from typing import Dict, Tuple

# ---------- Emotion categories ----------

EMOTION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "happy": ("happy", "joy", "excited", "grateful", "content", "cheerful", "elated", "blissful"),
    "sad": ("sad", "down", "depressed", "lonely", "hopeless", "empty", "grief", "melancholy"),
    "anxious": ("anxious", "worried", "nervous", "panic", "fearful", "tense", "restless", "uneasy"),
    "angry": ("angry", "furious", "irritated", "frustrated", "rage", "annoyed", "livid", "bitter"),
    "calm": ("calm", "peaceful", "serene", "relaxed", "tranquil", "centered", "balanced", "zen"),
    "stressed": ("stressed", "overwhelmed", "pressure", "burden", "exhausted", "burned out", "frazzled"),
    "motivated": ("motivated", "inspired", "determined", "focused", "driven", "ambitious", "energized"),
}

EMOTIONS: Tuple[str, ...] = tuple(EMOTION_KEYWORDS)

NEGATIVE_EMOTIONS: Tuple[str, ...] = ("sad", "anxious", "angry", "stressed")
POSITIVE_EMOTIONS: Tuple[str, ...] = ("happy", "calm", "motivated")

# ---------- Phrase lists ----------

CRISIS_PHRASES: Tuple[str, ...] = (
    "suicide", "kill myself", "end it all", "worthless", "better off dead",
    "no point", "can't go on", "hurt myself", "self harm",
)

POSITIVE_INDICATORS: Tuple[str, ...] = (
    "grateful", "accomplished", "progress", "better", "improving", "healing",
    "hopeful", "optimistic", "blessed", "thankful", "proud", "achieved",
)

STRESS_INDICATORS: Tuple[str, ...] = (
    "can't sleep", "insomnia", "headache", "racing thoughts", "can't focus",
    "heart racing", "sweating", "shaking", "dizzy", "nauseous",
)

# ---------- Scoring ----------

BASELINE_SCORE = 50
SCORE_MIN = 0
SCORE_MAX = 100
POSITIVE_EMOTION_WEIGHT = 10
POSITIVE_INDICATOR_WEIGHT = 5
NEGATIVE_EMOTION_WEIGHT = 8

# band edges: [0, LOW) / [LOW, MID) / [MID, HIGH) / [HIGH, 100]
LOW_BAND_UPPER = 30
MID_BAND_UPPER = 50
HIGH_BAND_LOWER = 70

LOW_SCORE_RECOMMENDATIONS: Tuple[str, ...] = (
    "Try a 5-minute breathing exercise",
    "Consider journaling about what's bothering you",
    "Reach out to a trusted friend or family member",
    "Play a stress relief game to calm your mind",
    "Try a guided meditation or yoga session",
)

MID_SCORE_RECOMMENDATIONS: Tuple[str, ...] = (
    "Take a short walk outside",
    "Practice gratitude by listing 3 good things from today",
    "Listen to calming music",
    "Engage in a mindfulness activity",
)

HIGH_SCORE_RECOMMENDATIONS: Tuple[str, ...] = (
    "Share your positive energy with others",
    "Try a new creative activity",
    "Set a new personal goal",
    "Consider scheduling a wellness activity",
)

# ---------- Dream symbols ----------

DREAM_SYMBOLS: Dict[str, str] = {
    "water": "Represents emotions and the subconscious mind",
    "flying": "Suggests freedom, ambition, or desire to escape limitations",
    "falling": "May indicate feelings of losing control or anxiety",
    "animals": "Often represent instincts or aspects of personality",
    "house": "Symbolizes the self or different aspects of your life",
    "death": "Usually represents transformation or endings leading to new beginnings",
    "chase": "May indicate avoidance of something in waking life",
    "lost": "Could represent feeling directionless or confused",
}
