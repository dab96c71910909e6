# -*- coding: utf-8 -*-
"""
Text Analysis API
-----------------
- POST /analysis/text    : emotional analysis of a journal / mood text
- POST /analysis/respond : personalized message for a text (or a prior analysis)
- POST /analysis/dream   : dream symbol matches

Notes:
- Stateless. Nothing is persisted, the caller keeps its own history.
- User text is never written to logs (length / score / flags only).
- Crisis-risk results raise an ALERT::CRISIS_RISK_DETECTED log line.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from wellness_engine import (
    EmotionalAnalysis,
    ResponseStyle,
    analyze_dream,
    analyze_text,
    generate_personalized_response,
)

from .observability import elapsed_ms, log_alert, log_event, monotonic_ms, new_run_id

logger = logging.getLogger("wellness.analysis")

# ---------- Environment ----------

try:
    MAX_TEXT_CHARS = int(os.getenv("WELLNESS_MAX_TEXT_CHARS", "20000"))
except ValueError:
    MAX_TEXT_CHARS = 20000

_DEFAULT_STYLE_RAW = os.getenv("WELLNESS_DEFAULT_RESPONSE_STYLE", "gentle").strip().lower()
DEFAULT_RESPONSE_STYLE = (
    ResponseStyle(_DEFAULT_STYLE_RAW)
    if _DEFAULT_STYLE_RAW in {s.value for s in ResponseStyle}
    else ResponseStyle.GENTLE
)

StyleName = Literal["gentle", "motivational", "neutral"]


# ---------- Models ----------

class AnalysisPayload(BaseModel):
    primary_emotion: str
    emotional_score: int = Field(..., ge=0, le=100)
    stress_indicators: List[str] = Field(default_factory=list)
    positive_indicators: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    crisis_risk: bool = False

    @classmethod
    def from_analysis(cls, analysis: EmotionalAnalysis) -> "AnalysisPayload":
        return cls(**analysis.to_dict())

    def to_analysis(self) -> EmotionalAnalysis:
        return EmotionalAnalysis(
            primary_emotion=self.primary_emotion,
            emotional_score=self.emotional_score,
            stress_indicators=tuple(self.stress_indicators),
            positive_indicators=tuple(self.positive_indicators),
            recommendations=tuple(self.recommendations),
            crisis_risk=self.crisis_risk,
        )


class TextRequest(BaseModel):
    text: str = Field(default="", description="Free text (journal, mood note, dream)")


class RespondRequest(BaseModel):
    text: Optional[str] = Field(default=None, description="Text to analyze first (ignored when analysis is given)")
    analysis: Optional[AnalysisPayload] = Field(default=None, description="Result of a previous /analysis/text call")
    response_style: Optional[StyleName] = Field(default=None, description="gentle / motivational / neutral")


class RespondResponse(BaseModel):
    output: str
    meta: Dict[str, Any] = Field(default_factory=dict)


class DreamResponse(BaseModel):
    symbols: List[str] = Field(default_factory=list)


# ---------- Helpers ----------

def ensure_text_size(text: Optional[str]) -> str:
    text = text or ""
    if MAX_TEXT_CHARS > 0 and len(text) > MAX_TEXT_CHARS:
        raise HTTPException(status_code=413, detail=f"text exceeds {MAX_TEXT_CHARS} characters")
    return text


def run_analysis(text: str, *, source: str, run_id: Optional[str] = None) -> EmotionalAnalysis:
    """analyze_text() plus the privacy-safe telemetry every route shares."""
    started = monotonic_ms()
    analysis = analyze_text(text)
    log_event(
        logger,
        "text_analyzed",
        run_id=run_id,
        source=source,
        text_len=len(text),
        primary_emotion=analysis.primary_emotion,
        emotional_score=analysis.emotional_score,
        crisis_risk=analysis.crisis_risk,
        elapsed_ms=elapsed_ms(started),
    )
    if analysis.crisis_risk:
        log_alert(logger, "CRISIS_RISK_DETECTED", run_id=run_id, source=source)
    return analysis


# ---------- Routes ----------

def register_analysis_routes(app: FastAPI) -> None:
    """
    Register the /analysis/* endpoints on the given FastAPI instance.
    Called from app.py as `register_analysis_routes(app)`.
    """

    @app.post("/analysis/text", response_model=AnalysisPayload)
    def analysis_text(req: TextRequest) -> AnalysisPayload:
        text = ensure_text_size(req.text)
        analysis = run_analysis(text, source="analysis_text", run_id=new_run_id())
        return AnalysisPayload.from_analysis(analysis)

    @app.post("/analysis/respond", response_model=RespondResponse)
    def analysis_respond(req: RespondRequest) -> RespondResponse:
        run_id = new_run_id()
        if req.analysis is not None:
            analysis = req.analysis.to_analysis()
            engine = "analysis"
        elif req.text is not None:
            analysis = run_analysis(ensure_text_size(req.text), source="analysis_respond", run_id=run_id)
            engine = "text"
        else:
            raise HTTPException(status_code=400, detail="Either text or analysis is required")

        style = ResponseStyle(req.response_style) if req.response_style else DEFAULT_RESPONSE_STYLE
        output = generate_personalized_response(analysis, style)
        log_event(
            logger,
            "response_generated",
            run_id=run_id,
            input=engine,
            style=style.value,
            crisis_risk=analysis.crisis_risk,
        )
        return RespondResponse(
            output=output,
            meta={
                "response_style": style.value,
                "crisis_risk": analysis.crisis_risk,
                "emotional_score": analysis.emotional_score,
                "primary_emotion": analysis.primary_emotion,
            },
        )

    @app.post("/analysis/dream", response_model=DreamResponse)
    def analysis_dream(req: TextRequest) -> DreamResponse:
        text = ensure_text_size(req.text)
        symbols = analyze_dream(text)
        log_event(logger, "dream_analyzed", run_id=new_run_id(), text_len=len(text), symbols=len(symbols))
        return DreamResponse(symbols=symbols)
