# gridpath/benchmarks/plot_results.py
from __future__ import annotations
import json
from collections import defaultdict
from pathlib import Path

import matplotlib.pyplot as plt
from loguru import logger

from ..core.metrics import SearchResult
from ..plots.plotting import bar_compare
from .run_all import RESULTS_JSON

OUT_DIR = RESULTS_JSON.parent


def _load_rows(path: Path = RESULTS_JSON):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m gridpath.benchmarks.run_all")
    return json.loads(path.read_text()).get("results", [])


def _to_result(row) -> SearchResult:
    return SearchResult(
        algo=row["algo"],
        success=row["success"],
        path=[tuple(c) for c in row.get("path", [])],
        cost=row["cost"] if row.get("cost") is not None else float("inf"),
        nodes_expanded=row.get("nodes_expanded") or 0,
        time_s=row.get("time_s") or 0.0,
        peak_kb=row.get("peak_kb") or 0,
    )


def _fmt_table(rows):
    # Markdown table
    lines = [
        "| Maze | Algorithm | Steps | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|",
    ]
    for r in rows:
        steps = f"{int(r['cost'])}" if r.get("success") else "no path"
        lines.append(
            f"| {r.get('maze', '')} | {r['algo']} | {steps} | {r.get('nodes_expanded')} | "
            f"{r.get('time_s', 0.0):.6f} | {r.get('peak_kb')} |"
        )
    return "\n".join(lines)


def main(results_path: Path = RESULTS_JSON, out_dir: Path = OUT_DIR):
    rows = _load_rows(results_path)
    if not rows:
        raise SystemExit("No rows to plot.")

    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(rows))
    logger.info("Wrote {}", md_path)

    by_maze = defaultdict(list)
    for row in rows:
        by_maze[row.get("maze", "grid")].append(_to_result(row))

    written = []
    for maze, results in by_maze.items():
        fig = bar_compare(results, title=f"Search Comparison: {maze} maze")
        png = out_dir / f"{maze}_comparison.png"
        fig.savefig(png, dpi=160)
        plt.close(fig)
        written.append(png)
        logger.info("Wrote {}", png)
    return written


if __name__ == "__main__":
    main()
