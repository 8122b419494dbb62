# gridpath/benchmarks/run_all.py
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from .. import config
from ..algorithms import Algorithm, run_search
from ..core.grid import GridGraph
from ..problems.mazes import all_mazes, corners

RESULTS_JSON = Path(__file__).with_name("results.json")


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    return f"{float(x):.4f}" if x is not None else "n/a"


def benchmark(mazes: Optional[Dict[str, GridGraph]] = None, heuristic: str = config.HEURISTIC,
              max_expansions: Optional[int] = config.MAX_EXPANSIONS) -> List[dict]:
    """Run every algorithm on every maze (corner to corner) and return one row per run."""
    mazes = mazes if mazes is not None else all_mazes()
    rows = []
    for maze_name, graph in mazes.items():
        start, target = corners(graph)
        for algo in Algorithm:
            r = run_search(algo, graph, start, target, heuristic=heuristic, max_expansions=max_expansions)
            logger.info(
                "{} / {}: {} cost={} expanded={} time={}s",
                maze_name, r.algo, "OK" if r.success else "FAIL",
                r.cost, r.nodes_expanded, _fmt_time(r.time_s),
            )
            row = r.to_dict()
            row["maze"] = maze_name
            rows.append(row)
    return rows


def main(out_path: Path = RESULTS_JSON):
    rows = benchmark()
    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))
    out_path.write_text(json.dumps(out, indent=2))
    logger.info("Wrote {}", out_path)
    return out


if __name__ == "__main__":
    from ..log import setup_logger
    setup_logger(config.LOG_LEVEL)
    main()
