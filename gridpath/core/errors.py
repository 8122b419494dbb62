# gridpath/core/errors.py
# Construction failures and the explicit "no path" search outcome.
from __future__ import annotations


class InvalidGrid(ValueError):
    """Raised when an occupancy grid is empty, ragged, not 2D or not strictly 0/1."""


class NoPathFound:
    """
    Negative search outcome. Not an exception: the frontier ran dry without
    the target ever being finalized. Use the NO_PATH singleton.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_PATH"


NO_PATH = NoPathFound()
