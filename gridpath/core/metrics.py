# gridpath/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional
import time, tracemalloc

from .node import Coord


@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[Coord] = field(default_factory=list)
    cost: float = float("inf")
    nodes_expanded: int = 0
    time_s: float = 0.0
    peak_kb: int = 0
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        row = asdict(self)
        row["path"] = [list(c) for c in self.path]
        row["cost"] = None if self.cost == float("inf") else self.cost
        return row


class MeasuredRun:
    """
    Context manager for wall time and (approximate) peak traced memory.
    .elapsed and .peak_kb are valid inside and after the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        # nested runs share the outer tracer instead of stopping it early
        self._owns_tracing = not tracemalloc.is_tracing()
        if self._owns_tracing:
            tracemalloc.start()
        else:
            tracemalloc.reset_peak()
        self._tracing = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        _, peak = tracemalloc.get_traced_memory()
        if self._owns_tracing:
            tracemalloc.stop()
        self._tracing = False
        self._peak_kb = max(self._peak_kb, peak // 1024)
        return False

    @property
    def elapsed(self) -> float:
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        if self._tracing:
            _, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
