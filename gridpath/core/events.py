# gridpath/core/events.py
from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, List, Optional

from .node import Coord


@dataclass(frozen=True)
class SearchStep:
    """
    One pop of the frontier, as seen by an external observer.

    current:  the cell just taken off the frontier
    frontier: cells discovered but not finalized after this step
    closed:   cells already finalized
    path:     start-to-target path on the step that reaches the target, else None
    """
    current: Coord
    frontier: FrozenSet[Coord]
    closed: FrozenSet[Coord]
    path: Optional[List[Coord]] = None

    @property
    def found(self) -> bool:
        return self.path is not None
