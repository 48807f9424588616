"""Wall detailing: local rewrite rules that turn raw wall fill into edge, corner and facade tiles.

Rules are plain data. A rule holds one or more match windows (rows of
matchers, anchored at the window's top-left cell) and the cells to write when
any window matches. A matcher is either an exact tile id or a frozenset of
acceptable ids.

Detailing runs in two phases:

* cleanup: the ``CLEANUP_RULES`` remove wall shapes that have no detail tile
  (one-cell-thin walls, double diagonal corners). Full scans repeat until a
  scan rewrites nothing.
* detailing: each step in ``DETAIL_STEPS`` is one full scan. Later steps read
  ids written by earlier ones (facades key off top edges and outer corners),
  so the step order is part of the algorithm.

Scans walk columns left to right and each column top to bottom, applying every
rule of the scan at each cell in order; a rewrite is visible to the rules that
follow it in the same scan.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, NamedTuple, Optional, Tuple, Union

from config import tuning
from dungeon.errors import DetailRewriteError
from dungeon.tiles import TileGrid

Matcher = Union[int, FrozenSet[int]]
Window = Tuple[Tuple[Matcher, ...], ...]

G = tuning.GROUND_01_TILE_ID
W = tuning.WALL_01_TILE_ID
WALLS = tuning.WALL_TILE_IDS


class RewriteRule(NamedTuple):
    name: str
    windows: Tuple[Window, ...]
    writes: Tuple[Tuple[int, int, int], ...]  # (dx, dy, tile_id)

    @property
    def width(self) -> int:
        return len(self.windows[0][0])

    @property
    def height(self) -> int:
        return len(self.windows[0])


def _fill_window(width: int, height: int, tile_id: int) -> Tuple[Tuple[int, int, int], ...]:
    return tuple((dx, dy, tile_id) for dy in range(height) for dx in range(width))


THIN_HORIZONTAL_WALL = RewriteRule(
    "thin_horizontal_wall",
    (((G,), (W,), (G,)),),
    ((0, 0, W),),
)
THIN_VERTICAL_WALL = RewriteRule(
    "thin_vertical_wall",
    (((G, W, G),),),
    ((0, 0, W),),
)
DOUBLE_CORNER_HORIZONTAL = RewriteRule(
    "double_corner_horizontal",
    (
        ((W, W, G),
         (G, W, W)),
        ((G, W, W),
         (W, W, G)),
    ),
    _fill_window(3, 2, W),
)
DOUBLE_CORNER_VERTICAL = RewriteRule(
    "double_corner_vertical",
    (
        ((W, G),
         (W, W),
         (G, W)),
        ((G, W),
         (W, W),
         (W, G)),
    ),
    _fill_window(2, 3, W),
)

CLEANUP_RULES = (
    THIN_HORIZONTAL_WALL,
    THIN_VERTICAL_WALL,
    DOUBLE_CORNER_HORIZONTAL,
    DOUBLE_CORNER_VERTICAL,
)

INNER_CORNER_RULES = (
    RewriteRule("inner_ul", (((WALLS, WALLS), (WALLS, G)),), ((0, 0, tuning.WALL_INNER_UL_ID),)),
    RewriteRule("inner_ur", (((WALLS, WALLS), (G, WALLS)),), ((1, 0, tuning.WALL_INNER_UR_ID),)),
    RewriteRule("inner_dl", (((WALLS, G), (WALLS, WALLS)),), ((0, 1, tuning.WALL_INNER_DL_ID),)),
    RewriteRule("inner_dr", (((G, WALLS), (WALLS, WALLS)),), ((1, 1, tuning.WALL_INNER_DR_ID),)),
)
OUTER_CORNER_RULES = (
    RewriteRule("outer_ul", (((G, G), (G, WALLS)),), ((1, 1, tuning.WALL_OUTER_UL_ID),)),
    RewriteRule("outer_ur", (((G, G), (WALLS, G)),), ((0, 1, tuning.WALL_OUTER_UR_ID),)),
    RewriteRule("outer_dl", (((G, WALLS), (G, G)),), ((1, 0, tuning.WALL_OUTER_DL_ID),)),
    RewriteRule("outer_dr", (((WALLS, G), (G, G)),), ((0, 0, tuning.WALL_OUTER_DR_ID),)),
)
VERTICAL_EDGE_RULES = (
    RewriteRule("left_wall", (((W, G),),), ((0, 0, tuning.WALL_LEFT_TILE_ID),)),
    RewriteRule("right_wall", (((G, W),),), ((1, 0, tuning.WALL_RIGHT_TILE_ID),)),
)
HORIZONTAL_EDGE_RULES = (
    RewriteRule("bottom_wall", (((G,), (W,)),), ((0, 1, tuning.WALL_DOWN_TILE_ID),)),
    RewriteRule("top_wall", (((W,), (G,)),), ((0, 0, tuning.WALL_UP_TILE_ID),)),
)
FACADE_RULES = (
    RewriteRule(
        "center_facade",
        (((tuning.WALL_UP_TILE_ID,), (G,)),),
        ((0, 1, tuning.FACADE_CENTER_TILE_ID),),
    ),
    RewriteRule(
        "left_facade",
        (((tuning.WALL_OUTER_DL_ID,), (G,)),),
        ((0, 1, tuning.FACADE_LEFT_TILE_ID),),
    ),
    RewriteRule(
        "right_facade",
        (((tuning.WALL_OUTER_DR_ID,), (G,)),),
        ((0, 1, tuning.FACADE_RIGHT_TILE_ID),),
    ),
)

DETAIL_STEPS = (
    INNER_CORNER_RULES,
    OUTER_CORNER_RULES,
    VERTICAL_EDGE_RULES,
    HORIZONTAL_EDGE_RULES,
    FACADE_RULES,
)


def _cell_matches(tile_id: Optional[int], matcher: Matcher) -> bool:
    if tile_id is None:
        return False
    if isinstance(matcher, frozenset):
        return tile_id in matcher
    return tile_id == matcher


def matches(grid: TileGrid, rule: RewriteRule, x: int, y: int) -> bool:
    if x + rule.width > grid.width or y + rule.height > grid.height:
        return False
    for window in rule.windows:
        if all(
            _cell_matches(grid.tile_id(x + dx, y + dy), matcher)
            for dy, row in enumerate(window)
            for dx, matcher in enumerate(row)
        ):
            return True
    return False


def try_rewrite(grid: TileGrid, rule: RewriteRule, x: int, y: int) -> bool:
    """Apply ``rule`` with its window anchored at (x, y); returns True if it fired."""
    if not matches(grid, rule, x, y):
        return False
    for dx, dy, tile_id in rule.writes:
        grid.set(x + dx, y + dy, tile_id)
    return True


def scan(grid: TileGrid, rules: Iterable[RewriteRule]) -> int:
    """One full pass of ``rules`` over the grid; returns how many times a rule fired."""
    rules = tuple(rules)
    fired = 0
    for x in range(grid.width):
        for y in range(grid.height):
            for rule in rules:
                if try_rewrite(grid, rule, x, y):
                    fired += 1
    return fired


def cleanup_pass(grid: TileGrid) -> int:
    return scan(grid, CLEANUP_RULES)


def run_cleanup(grid: TileGrid, max_passes: int = tuning.DETAIL_MAX_PASSES) -> int:
    """Rescan with the cleanup rules until a pass changes nothing; returns the pass count."""
    for passes in range(1, max_passes + 1):
        if cleanup_pass(grid) == 0:
            return passes
    raise DetailRewriteError(max_passes)


def apply_detail_steps(grid: TileGrid) -> None:
    for step in DETAIL_STEPS:
        scan(grid, step)


def apply_wall_details(grid: TileGrid, max_passes: int = tuning.DETAIL_MAX_PASSES) -> None:
    passes = run_cleanup(grid, max_passes)
    logging.debug("Wall cleanup settled after %d passes", passes)
    apply_detail_steps(grid)
