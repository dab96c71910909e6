import pytest

from wellness_engine import (
    CRISIS_SUPPORT_MESSAGE,
    EmotionalAnalysis,
    ResponseStyle,
    analyze_dream,
    analyze_text,
    entry_acknowledgement,
    generate_personalized_response,
)
from wellness_engine.lexicons import DREAM_SYMBOLS


# ---------- dream symbols ----------

def test_dream_symbols_follow_table_order():
    out = analyze_dream("I was flying over water")
    assert out == [
        "water: Represents emotions and the subconscious mind",
        "flying: Suggests freedom, ambition, or desire to escape limitations",
    ]


def test_dream_empty_text():
    assert analyze_dream("") == []
    assert analyze_dream("nothing memorable") == []


def test_dream_case_insensitive_substring():
    out = analyze_dream("LOST inside my old HOUSE, then a chase through the warehouse")
    assert [s.split(":")[0] for s in out] == ["house", "chase", "lost"]


def test_dream_all_symbols():
    text = " ".join(DREAM_SYMBOLS)
    assert len(analyze_dream(text)) == len(DREAM_SYMBOLS)


# ---------- personalized responses ----------

@pytest.mark.parametrize("style", ["gentle", "motivational", "neutral", ResponseStyle.GENTLE])
@pytest.mark.parametrize("score", [0, 42, 50, 100])
def test_crisis_message_wins(style, score):
    a = EmotionalAnalysis(primary_emotion="sad", emotional_score=score, crisis_risk=True)
    assert generate_personalized_response(a, style) == CRISIS_SUPPORT_MESSAGE


def test_crisis_from_text():
    a = analyze_text("I'm so happy and calm, but I can't go on")
    assert generate_personalized_response(a, "motivational") == CRISIS_SUPPORT_MESSAGE


def test_gentle_bands():
    low = generate_personalized_response(EmotionalAnalysis("sad", 26), "gentle")
    mid = generate_personalized_response(EmotionalAnalysis("anxious", 42), "gentle")
    high = generate_personalized_response(EmotionalAnalysis("calm", 50), "gentle")
    assert low.startswith("I can sense you're feeling sad right now")
    assert mid.startswith("It sounds like you're experiencing some anxious feelings today.")
    assert high.startswith("I'm glad to hear you're feeling calm!")


def test_motivational_bands():
    assert "dealing with angry right now" in generate_personalized_response(EmotionalAnalysis("angry", 10), "motivational")
    assert generate_personalized_response(EmotionalAnalysis("sad", 30), "motivational").startswith("Feeling sad is part")
    assert generate_personalized_response(EmotionalAnalysis("happy", 90), "motivational").startswith("Yes! That happy energy")


def test_neutral_interpolates_score():
    assert generate_personalized_response(EmotionalAnalysis("sad", 29), "neutral").startswith(
        "Analysis shows primary emotion: sad. Emotional score: 29/100."
    )
    assert generate_personalized_response(EmotionalAnalysis("sad", 42), "neutral").startswith(
        "Current emotional state: sad. Score: 42/100."
    )
    assert generate_personalized_response(EmotionalAnalysis("happy", 70), "neutral").startswith(
        "Emotional analysis: happy with score of 70/100."
    )


def test_unknown_style_uses_neutral():
    a = EmotionalAnalysis("sad", 42)
    assert generate_personalized_response(a, "shouty") == generate_personalized_response(a, "neutral")


# ---------- acknowledgements ----------

def test_journal_acknowledgements():
    assert entry_acknowledgement("journal", "gentle").startswith("💝 Thank you for sharing your thoughts.")
    assert entry_acknowledgement("journal", "motivational").startswith("⚡ Great job journaling!")
    assert entry_acknowledgement("journal", "neutral", 65) == "🎯 Journal entry saved. Your emotional score today: 65"


def test_dream_acknowledgements():
    assert entry_acknowledgement("dream", "gentle").startswith("🌙 Thank you for sharing your dream.")
    assert entry_acknowledgement("dream", "motivational").startswith("⭐ Excellent dream journaling!")
    assert entry_acknowledgement("dream", "neutral") == "🎯 Dream logged successfully. Your subconscious patterns are being tracked."


def test_mood_has_no_acknowledgement():
    with pytest.raises(ValueError):
        entry_acknowledgement("mood", "gentle")
