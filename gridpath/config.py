# gridpath/config.py
# ---- Tunables (overridable via environment variables) -----------------------
from __future__ import annotations
import os
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


DELAY_S        = float(os.getenv("GRIDPATH_DELAY", "0.1"))           # pause between rendered frames
HEURISTIC      = os.getenv("GRIDPATH_HEURISTIC", "manhattan")        # A* / Greedy distance estimate
LOG_LEVEL      = os.getenv("GRIDPATH_LOG_LEVEL", "INFO")
MAX_EXPANSIONS = _optional_int("GRIDPATH_MAX_EXPANSIONS")            # benchmark cap; unset = unlimited
