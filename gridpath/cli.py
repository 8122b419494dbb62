# gridpath/cli.py
# Command-line entry point: pick a maze, run one or all strategies, optionally animate or plot them.
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from . import config
from .algorithms import Algorithm, run_search
from .core.errors import InvalidGrid
from .core.grid import GridGraph
from .core.metrics import MeasuredRun, SearchResult
from .core.node import Heuristic
from .core.utils import path_length
from .log import setup_logger
from .problems.mazes import MAZES, corners, load_maze
from .render.console import animate


def parse_coord(text: str):
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}") from None
    return (x, y)


def read_grid(path: Path) -> GridGraph:
    """ASCII maps use '#' for walls and '.' for free cells; otherwise rows of 0/1 digits (spaces/commas allowed)."""
    text = Path(path).read_text()
    if "#" in text or "." in text:
        return GridGraph.from_text(text)
    digits = "\n".join(line.replace(",", "").replace(" ", "") for line in text.splitlines())
    return GridGraph.from_text(digits, wall="1", free="0")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="gridpath", description="Grid pathfinding with A*, BFS, DFS, Dijkstra and Greedy Best-First.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--maze", choices=sorted(MAZES), default="simple", help="built-in maze (default: simple)")
    src.add_argument("--grid", type=Path, help="text file with a grid ('#'/'.' or 0/1 rows)")
    ap.add_argument("--algo", default="all", help="astar, bfs, dfs, dijkstra, greedy or 'all' (default)")
    ap.add_argument("--heuristic", choices=[h.value for h in Heuristic], default=config.HEURISTIC)
    ap.add_argument("--start", type=parse_coord, default=None, help="X,Y (default: 0,0)")
    ap.add_argument("--target", type=parse_coord, default=None, help="X,Y (default: bottom-right cell)")
    ap.add_argument("--animate", action="store_true", help="draw every search step in the terminal")
    ap.add_argument("--delay", type=float, default=config.DELAY_S, help="seconds between animation frames")
    ap.add_argument("--no-color", action="store_true", help="plain-text animation frames")
    ap.add_argument("--plot", type=Path, default=None, help="save a PNG of each search (suffix added per algorithm)")
    ap.add_argument("--json", action="store_true", help="print results as JSON")
    ap.add_argument("--log-level", default=config.LOG_LEVEL)
    return ap


def _animated_run(algo: Algorithm, graph, start, target, args) -> SearchResult:
    with MeasuredRun() as meter:
        last = animate(graph, algo.steps(graph, start, target, heuristic=args.heuristic),
                       delay=args.delay, color=not args.no_color, title=f"{algo.label} Search")
    expanded = len(last.closed) if last is not None else 0
    if last is not None and last.found:
        return SearchResult(algo.label, True, last.path, float(path_length(last.path)), expanded, meter.elapsed, meter.peak_kb)
    return SearchResult(algo.label, False, [], float("inf"), expanded, meter.elapsed, meter.peak_kb)


def _plot(graph, result: SearchResult, closed, out: Path, multi: bool):
    from .plots.plotting import plot_search
    import matplotlib.pyplot as plt

    target = out.with_name(f"{out.stem}_{result.algo.replace('*', 'star').lower()}{out.suffix or '.png'}") if multi else out
    fig = plot_search(graph, result.path, closed=closed, title=f"{result.algo}: {path_length(result.path) if result.success else 'no path'}")
    fig.savefig(target, dpi=160)
    plt.close(fig)
    logger.info("Wrote {}", target)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(args.log_level)

    try:
        graph = read_grid(args.grid) if args.grid else load_maze(args.maze)
        algos = list(Algorithm) if args.algo.lower() == "all" else [Algorithm.parse(args.algo)]
        Heuristic.parse(args.heuristic)
    except (InvalidGrid, ValueError, OSError) as e:
        logger.error("{}", e)
        return 2

    default_start, default_target = corners(graph)
    start = args.start or default_start
    target = args.target or default_target
    for label, (x, y) in (("start", start), ("target", target)):
        if not graph.in_bounds(x, y):
            logger.error("{} ({},{}) is outside the {}x{} grid", label, x, y, graph.width, graph.height)
            return 2
        if not graph.is_valid(x, y):
            logger.warning("{} ({},{}) is a wall cell", label, x, y)

    logger.info("Grid {}x{}, {} -> {}", graph.width, graph.height, start, target)
    results = []
    for algo in algos:
        logger.info("Testing {}", algo.label)
        if args.animate:
            result = _animated_run(algo, graph, start, target, args)
            closed = ()
        else:
            seen = []
            result = run_search(algo, graph, start, target, heuristic=args.heuristic, observer=seen.append)
            closed = seen[-1].closed if seen else ()
        results.append(result)

        if not args.json:
            if result.success:
                print(f"{result.algo} Results:")
                print(f"Path found: {result.path}")
                print(f"Path length: {path_length(result.path)} steps")
                print(f"Nodes expanded: {result.nodes_expanded}")
                print(f"Time taken: {result.time_s * 1000:.2f}ms")
            else:
                print(f"{result.algo}: No path found" + (f" ({result.error})" if result.error else ""))
        if args.plot is not None:
            _plot(graph, result, closed, args.plot, multi=len(algos) > 1)

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    return 0 if all(r.success for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
