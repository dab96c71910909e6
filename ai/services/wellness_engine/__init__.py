from .models import EmotionalAnalysis, MoodEntry, GameProfile, EntryResult, EntryKind, ResponseStyle, EntryValidationError
from .emotion import analyze_text, emotion_scores, detect_crisis, recommendations_for
from .dreams import analyze_dream
from .responses import generate_personalized_response, entry_acknowledgement, CRISIS_SUPPORT_MESSAGE, CRISIS_HELPLINE_NOTICE
from .entries import build_journal_entry, build_mood_entry, build_dream_entry, push_recent
from .gamification import add_xp, xp_to_next_level, level_progress, XP_REWARDS
