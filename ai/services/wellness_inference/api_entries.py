# -*- coding: utf-8 -*-
"""
Entry API
---------
- POST /entries/journal
- POST /entries/mood
- POST /entries/dream

Role:
- Turn what the journal / mood tracker / dream journal screens submit into a
  typed entry record, with the XP it earns and the notifications to show.
- If the client posts its current game_profile, the XP is applied and the
  updated profile is returned.

Design notes:
- No storage here. The client keeps the entry (and its recent list) itself.
- EntryValidationError (blank text, level outside 0..100) -> 400.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from wellness_engine import (
    EntryResult,
    EntryValidationError,
    GameProfile,
    add_xp,
    build_dream_entry,
    build_journal_entry,
    build_mood_entry,
)

from .api_analysis import DEFAULT_RESPONSE_STYLE, StyleName, ensure_text_size
from .observability import log_alert, log_event, new_run_id

logger = logging.getLogger("wellness.entries")


# ---------- Models ----------

class GameProfilePayload(BaseModel):
    user_id: str
    level: int = Field(default=1, ge=1)
    xp: int = Field(default=0, ge=0)
    total_xp: int = Field(default=0, ge=0)
    abilities: List[str] = Field(default_factory=list)
    streaks: Dict[str, int] = Field(default_factory=dict)
    last_activity: Optional[str] = None

    def to_profile(self) -> GameProfile:
        return GameProfile(
            user_id=self.user_id,
            level=self.level,
            xp=self.xp,
            total_xp=self.total_xp,
            abilities=list(self.abilities),
            streaks=dict(self.streaks),
            last_activity=self.last_activity,
        )


class JournalEntryRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    text: str
    response_style: Optional[StyleName] = None
    created_at: Optional[str] = Field(default=None, description="ISO-8601; server time when omitted")
    game_profile: Optional[GameProfilePayload] = None


class MoodEntryRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    mood: Optional[str] = Field(default=None, description="Label picked on the mood scale")
    text: str = ""
    stress_level: int = 50
    energy_level: int = 50
    anxiety_level: int = 50
    crisis_support: bool = Field(default=False, description="User opted into crisis helpline notices")
    created_at: Optional[str] = None
    game_profile: Optional[GameProfilePayload] = None


class DreamEntryRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    text: str
    dream_mood: Optional[str] = None
    response_style: Optional[StyleName] = None
    created_at: Optional[str] = None
    game_profile: Optional[GameProfilePayload] = None


class EntryResponse(BaseModel):
    entry: Dict[str, Any]
    analysis: Optional[Dict[str, Any]] = None
    xp_awarded: int
    notifications: List[str] = Field(default_factory=list)
    game_profile: Optional[Dict[str, Any]] = None


# ---------- Helpers ----------

def _to_response(result: EntryResult, game_profile: Optional[GameProfilePayload], run_id: str) -> EntryResponse:
    body = result.to_dict()
    if game_profile is not None:
        updated = add_xp(game_profile.to_profile(), result.xp_awarded, at=result.entry.created_at)
        body["game_profile"] = updated.to_dict()

    entry = result.entry
    log_event(
        logger,
        "entry_built",
        run_id=run_id,
        kind=entry.kind.value,
        emotional_score=entry.emotional_score,
        tags=len(entry.tags),
        xp_awarded=result.xp_awarded,
        notifications=len(result.notifications),
    )
    if result.analysis is not None and result.analysis.crisis_risk:
        log_alert(logger, "CRISIS_RISK_DETECTED", run_id=run_id, source=f"entries_{entry.kind.value}")
    return EntryResponse(**body)


def _bad_request(exc: EntryValidationError, run_id: str, kind: str) -> HTTPException:
    log_event(logger, "entry_rejected", level="warning", run_id=run_id, kind=kind, reason=str(exc))
    return HTTPException(status_code=400, detail=str(exc))


# ---------- Routes ----------

def register_entry_routes(app: FastAPI) -> None:
    """Register the /entries/* endpoints. Called from app.py."""

    @app.post("/entries/journal", response_model=EntryResponse)
    def entries_journal(req: JournalEntryRequest) -> EntryResponse:
        run_id = new_run_id()
        text = ensure_text_size(req.text)
        try:
            result = build_journal_entry(
                user_id=req.user_id,
                text=text,
                response_style=req.response_style or DEFAULT_RESPONSE_STYLE,
                created_at=req.created_at,
            )
        except EntryValidationError as exc:
            raise _bad_request(exc, run_id, "journal")
        return _to_response(result, req.game_profile, run_id)

    @app.post("/entries/mood", response_model=EntryResponse)
    def entries_mood(req: MoodEntryRequest) -> EntryResponse:
        run_id = new_run_id()
        text = ensure_text_size(req.text)
        try:
            result = build_mood_entry(
                user_id=req.user_id,
                mood=req.mood,
                text=text,
                stress_level=req.stress_level,
                energy_level=req.energy_level,
                anxiety_level=req.anxiety_level,
                crisis_support=req.crisis_support,
                created_at=req.created_at,
            )
        except EntryValidationError as exc:
            raise _bad_request(exc, run_id, "mood")
        return _to_response(result, req.game_profile, run_id)

    @app.post("/entries/dream", response_model=EntryResponse)
    def entries_dream(req: DreamEntryRequest) -> EntryResponse:
        run_id = new_run_id()
        text = ensure_text_size(req.text)
        try:
            result = build_dream_entry(
                user_id=req.user_id,
                text=text,
                dream_mood=req.dream_mood,
                response_style=req.response_style or DEFAULT_RESPONSE_STYLE,
                created_at=req.created_at,
            )
        except EntryValidationError as exc:
            raise _bad_request(exc, run_id, "dream")
        return _to_response(result, req.game_profile, run_id)
