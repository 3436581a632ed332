"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

import enum
from typing import Optional, Sequence

from .validation import count_tile, find_player

__all__ = ["Direction", "Outcome", "GameOver", "Game", "direction_for_key"]

_WALKABLE = frozenset("C0P")


class Direction(enum.Enum):
    """A step on the grid, as ``(dx, dy)``."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Outcome(enum.Enum):
    """What a single move led to."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    LOST = "lost"


class GameOver(RuntimeError):
    """Raised when a move is attempted after the game has ended."""


_KEYS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

_ARROW_KEYS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def direction_for_key(key: str, bonus: bool = False) -> Optional[Direction]:
    """Map a key name to a direction, or ``None`` if the key does not move.

    WASD always moves; the arrow keys move only in the bonus game.
    """
    name = key.lower()
    if name in _KEYS:
        return _KEYS[name]
    if bonus and name in _ARROW_KEYS:
        return _ARROW_KEYS[name]
    return None


class Game:
    """A game in progress on a validated grid.

    The player is tracked by ``position``; its starting cell becomes floor.
    In the bonus game, stepping onto an enemy ``M`` loses the game.
    """

    def __init__(self, grid: Sequence[str], bonus: bool = False) -> None:
        start = find_player(grid)
        if start is None:
            raise ValueError("the grid has no player")
        self.bonus = bonus
        self._cells = [list(row) for row in grid]
        x, y = start
        self._cells[y][x] = "0"
        self.position = start
        self.remaining = count_tile(grid, "C")
        self.moves = 0
        # The default player sprite is the one shown when walking left.
        self.facing = Direction.LEFT
        self.outcome: Optional[Outcome] = None

    @property
    def rows(self) -> tuple[str, ...]:
        """The current grid, without the player drawn in."""
        return tuple("".join(row) for row in self._cells)

    @property
    def finished(self) -> bool:
        return self.outcome in (Outcome.WON, Outcome.LOST)

    def tile_at(self, x: int, y: int) -> Optional[str]:
        if 0 <= y < len(self._cells) and 0 <= x < len(self._cells[y]):
            return self._cells[y][x]
        return None

    def move(self, direction: Direction) -> Outcome:
        """Try to step one cell in ``direction`` and report what happened."""
        if self.finished:
            raise GameOver("the game is over")
        x, y = self.position
        nx, ny = x + direction.dx, y + direction.dy
        tile = self.tile_at(nx, ny)
        if tile == "E" and self.remaining == 0:
            self.outcome = Outcome.WON
            return self.outcome
        if self.bonus and tile == "M":
            self.outcome = Outcome.LOST
            return self.outcome
        if tile not in _WALKABLE:
            return Outcome.BLOCKED
        if tile == "C":
            self.remaining -= 1
            self._cells[ny][nx] = "0"
        self.position = (nx, ny)
        self.facing = direction
        self.moves += 1
        self.outcome = Outcome.MOVED
        return self.outcome