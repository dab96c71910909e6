# -*- coding: utf-8 -*-
"""
Wellness Analyzer API
---------------------
- POST /analysis/text, /analysis/respond, /analysis/dream : rule-based text analysis
- POST /entries/journal, /entries/mood, /entries/dream    : entry records + XP + notifications
- GET  /healthz                                            : health check
Notes:
- Stateless, no conversational memory, no storage
- Does NOT log user content (lengths / scores / flags only)
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api_analysis import register_analysis_routes
from .api_entries import register_entry_routes

APP_NAME = os.getenv("WELLNESS_APP_NAME", "Wellness Analyzer")
try:
    PORT = int(os.getenv("WELLNESS_PORT", "8765"))
except ValueError:
    PORT = 8765
HOST = os.getenv("WELLNESS_HOST", "0.0.0.0")
# For release, set WELLNESS_CORS_ORIGINS to a comma-separated list of allowed origins.
ALLOWED_ORIGINS_RAW = os.getenv("WELLNESS_CORS_ORIGINS", "*")
ALLOWED_ORIGINS = [o.strip() for o in ALLOWED_ORIGINS_RAW.split(",") if o.strip()] or ["*"]

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("wellness")

# ---------- App ----------
app = FastAPI(title=APP_NAME, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    # credentials cannot be combined with a wildcard origin
    allow_credentials=ALLOWED_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_analysis_routes(app)
register_entry_routes(app)


@app.get("/healthz")
def healthz() -> Dict[str, Any]:
    return {"status": "ok", "app": APP_NAME}


# ---------- Entrypoint ----------
def main() -> None:
    import uvicorn

    logger.info("starting %s on %s:%d", APP_NAME, HOST, PORT)
    uvicorn.run("wellness_inference.app:app", host=HOST, port=PORT, log_level="info")


if __name__ == "__main__":
    main()
