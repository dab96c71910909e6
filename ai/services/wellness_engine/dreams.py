from __future__ import annotations
from typing import List

from .lexicons import DREAM_SYMBOLS


def analyze_dream(dream_text: str) -> List[str]:
    """Return "<symbol>: <meaning>" for every symbol found, in table order."""
    lower_text = (dream_text or "").lower()
    return [f"{symbol}: {meaning}" for symbol, meaning in DREAM_SYMBOLS.items() if symbol in lower_text]
