# gridpath/render/console.py
# ANSI terminal view of a search: consumes step events and owns all pacing, so the algorithms never sleep or print.
from __future__ import annotations
import sys
import time
from typing import Iterable, Optional, TextIO

from ..core.events import SearchStep
from ..core.grid import GridGraph

RESET = "\033[0m"
BLACK_BG = "\033[40m"
GREEN_BG = "\033[42m"
YELLOW_BG = "\033[43m"
BLUE_BG = "\033[44m"
PURPLE_BG = "\033[45m"
WHITE_TEXT = "\033[37m"
BOLD = "\033[1m"
CLEAR = "\033[H\033[2J"

# cell glyphs, in priority order when a cell belongs to several sets
WALL, PATH, CURRENT, OPEN, CLOSED, UNVISITED = " ■ ", " P ", " C ", " O ", " X ", " · "


def _paint(glyph: str, background: str, color: bool) -> str:
    return f"{background}{WHITE_TEXT}{glyph}{RESET}" if color else glyph


def render_frame(graph: GridGraph, step: Optional[SearchStep] = None, title: str = "Pathfinding Visualization",
                 color: bool = True, legend: bool = True) -> str:
    """One full frame as a string: header, numbered grid, legend and frontier/closed counts."""
    path = set(step.path) if step is not None and step.path else set()
    current = step.current if step is not None else None
    frontier = step.frontier if step is not None else frozenset()
    closed = step.closed if step is not None else frozenset()

    header = f"{BOLD}=== {title} ==={RESET}" if color else f"=== {title} ==="
    lines = [header, f"Grid Size: {graph.width}x{graph.height}", ""]
    lines.append("    " + "".join(f"{x:2d} " for x in range(graph.width)))
    lines.append("   ╔" + "═" * (graph.width * 3) + "╗")

    for y in range(graph.height):
        row = []
        for x in range(graph.width):
            c = (x, y)
            if not graph.is_valid(x, y):
                row.append(_paint(WALL, BLACK_BG, color))
            elif c in path:
                row.append(_paint(PATH, GREEN_BG, color))
            elif c == current:
                row.append(_paint(CURRENT, PURPLE_BG, color))
            elif c in frontier:
                row.append(_paint(OPEN, YELLOW_BG, color))
            elif c in closed:
                row.append(_paint(CLOSED, BLUE_BG, color))
            else:
                row.append(UNVISITED)
        lines.append(f"{y:2d} ║" + "".join(row) + "║")
    lines.append("   ╚" + "═" * (graph.width * 3) + "╝")

    if legend:
        lines += [
            "",
            "Legend:",
            _paint(WALL, BLACK_BG, color) + " Wall",
            _paint(CURRENT, PURPLE_BG, color) + " Current Node",
            _paint(OPEN, YELLOW_BG, color) + " Open Set",
            _paint(CLOSED, BLUE_BG, color) + " Closed Set",
            _paint(PATH, GREEN_BG, color) + " Path",
            UNVISITED + " Unvisited",
        ]
    if step is not None:
        lines += [
            "",
            f"Current Node: ({current[0]},{current[1]})",
            f"Open Set Size: {len(frontier)}",
            f"Closed Set Size: {len(closed)}",
        ]
    return "\n".join(lines)


def animate(graph: GridGraph, steps: Iterable[SearchStep], delay: float = 0.1, stream: TextIO = None,
            clear: bool = True, color: bool = True, title: str = "Pathfinding Visualization") -> Optional[SearchStep]:
    """
    Pull steps one at a time, draw each frame and sleep `delay` seconds between them.
    Returns the last step seen (its .path is set when the target was reached).
    """
    out = stream if stream is not None else sys.stdout
    last = None
    for step in steps:
        last = step
        if clear:
            out.write(CLEAR)
        out.write(render_frame(graph, step, title=title, color=color) + "\n")
        out.flush()
        if delay > 0:
            time.sleep(delay)
    return last
