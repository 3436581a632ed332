"""Checks that decide whether a loaded map can be played.

A grid is a list of equal-length rows without line endings. The tiles are
``1`` for a wall, ``0`` for floor, ``C`` for a collectable, ``E`` for the
exit and ``P`` for the player. The bonus game also allows ``M`` for an enemy.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

__all__ = [
    "MANDATORY_TILES",
    "BONUS_TILES",
    "DEFAULT_BLOCKERS",
    "InvalidMap",
    "find_player",
    "count_tile",
    "check_walls",
    "check_characters",
    "flood_fill",
    "validate_map",
]

MANDATORY_TILES = frozenset("01CEP")
BONUS_TILES = frozenset("01CEPM")
DEFAULT_BLOCKERS = frozenset("1ME")

Position = tuple[int, int]


class InvalidMap(ValueError):
    """Raised when a map breaks one of the game's rules."""


def find_player(grid: Sequence[str]) -> Optional[Position]:
    """Return the ``(x, y)`` of the first ``P`` in row order, or ``None``."""
    for y, row in enumerate(grid):
        x = row.find("P")
        if x != -1:
            return x, y
    return None


def count_tile(grid: Sequence[str], tile: str) -> int:
    """Count how many cells of the grid hold ``tile``."""
    return sum(row.count(tile) for row in grid)


def check_walls(grid: Sequence[str]) -> None:
    """Raise InvalidMap unless the grid is rectangular and walled in."""
    if not grid or not grid[0]:
        raise InvalidMap("INVALID_MAP\nMap not closed!")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise InvalidMap("INVALID_MAP\nMap not closed!")
    if set(grid[0]) != {"1"} or set(grid[-1]) != {"1"}:
        raise InvalidMap("INVALID_MAP\nMap not closed!")
    if any(row[0] != "1" or row[-1] != "1" for row in grid):
        raise InvalidMap("INVALID_MAP\nMap not closed!")


def check_characters(grid: Sequence[str], allowed: Iterable[str]) -> None:
    """Raise InvalidMap if any cell holds a tile outside ``allowed``."""
    permitted = frozenset(allowed)
    for row in grid:
        if not set(row) <= permitted:
            raise InvalidMap("INVALID_MAP: Invalid character")


def flood_fill(
    grid: Sequence[str],
    start: Position,
    blockers: Iterable[str] = DEFAULT_BLOCKERS,
) -> set[Position]:
    """Return every ``(x, y)`` reachable from ``start`` in four directions.

    Cells holding a tile from ``blockers`` are never entered; the start cell
    is always part of the result.
    """
    stopping = frozenset(blockers)
    height = len(grid)
    seen: set[Position] = {start}
    pending = [start]
    while pending:
        x, y = pending.pop()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (nx, ny) in seen or not (0 <= ny < height and 0 <= nx < len(grid[ny])):
                continue
            if grid[ny][nx] in stopping:
                continue
            seen.add((nx, ny))
            pending.append((nx, ny))
    return seen


def validate_map(grid: Sequence[str], bonus: bool = False) -> Position:
    """Check every rule and return the player's starting ``(x, y)``.

    The exit blocks movement during the reachability check, so only the
    collectables have to be reachable from the start.
    """
    if not grid:
        raise InvalidMap("INVALID MAP")
    if count_tile(grid, "E") != 1 or count_tile(grid, "P") != 1:
        raise InvalidMap("INVALID_MAP\nMissing value")
    collectables = count_tile(grid, "C")
    if collectables <= 0:
        raise InvalidMap("INVALIDMAP\nCollectables missin!")
    check_walls(grid)
    check_characters(grid, BONUS_TILES if bonus else MANDATORY_TILES)
    if count_tile(grid, "0") <= 0:
        raise InvalidMap("INVALID_MAP\nBG MISSING!")
    start = find_player(grid)
    assert start is not None
    reached = flood_fill(grid, start)
    found = sum(1 for x, y in reached if grid[y][x] == "C")
    if found != collectables:
        raise InvalidMap("INVALID MAP! BACKTRACKING")
    return start