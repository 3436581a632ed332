"""Drawing the game and running it in a window."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

import pygame

from .cformat import c_printf
from .game import Direction, Game, Outcome, direction_for_key
from .mapfile import MapError, has_ber_extension, load_map
from .validation import InvalidMap, validate_map

__all__ = [
    "TILE",
    "WALL_BLINK_FRAMES",
    "TEXTURE_DIR",
    "TEXTURE_FILES",
    "BONUS_TEXTURE_FILES",
    "Renderer",
    "run",
    "main",
]

TILE = 48
WALL_BLINK_FRAMES = 400
TEXTURE_DIR = Path("textures")
WINDOW_TITLE = "SO_LONG"
LABEL_COLOUR = (0xFF, 0x00, 0x00)

TEXTURE_FILES = {
    "player": "pikachu.xpm",
    "wall": "walls.xpm",
    "exit": "exit.xpm",
    "rocks": "rocks.xpm",
    "sea": "sea.xpm",
    "coll": "rarecandy.xpm",
    "ground": "sand.xpm",
}

BONUS_TEXTURE_FILES = {
    "right": "right.xpm",
    "up": "up.xpm",
    "down": "down.xpm",
    "wall2": "wall2.xpm",
    "enemy": "enemy.xpm",
}

# Plain tiles used until real textures are loaded.
_FALLBACK_COLOURS = {
    "player": (250, 220, 40),
    "wall": (110, 80, 50),
    "exit": (40, 200, 90),
    "rocks": (90, 90, 100),
    "sea": (30, 90, 200),
    "coll": (200, 40, 160),
    "ground": (230, 210, 150),
    "right": (250, 180, 40),
    "up": (250, 150, 40),
    "down": (250, 120, 40),
    "wall2": (150, 110, 70),
    "enemy": (180, 20, 20),
}

_FACING_TEXTURES = {
    Direction.RIGHT: "right",
    Direction.UP: "up",
    Direction.DOWN: "down",
    Direction.LEFT: "player",
}

_TILE_TEXTURES = {"0": "ground", "E": "exit", "C": "coll"}


def _texture_names(bonus: bool) -> dict[str, str]:
    names = dict(TEXTURE_FILES)
    if bonus:
        names.update(BONUS_TEXTURE_FILES)
    return names


def _solid(colour: tuple[int, int, int]) -> pygame.Surface:
    tile = pygame.Surface((TILE, TILE))
    tile.fill(colour)
    return tile


class Renderer:
    """Draws a game onto a surface, one 48-pixel tile per cell.

    ``textures`` maps texture names to surfaces; it starts out with plain
    coloured tiles. In the bonus game the inner walls alternate between two
    textures every ``WALL_BLINK_FRAMES`` frames and the move count is shown.
    """

    def __init__(self, game: Game) -> None:
        self.game = game
        self.textures: dict[str, pygame.Surface] = {
            name: _solid(_FALLBACK_COLOURS[name]) for name in _texture_names(game.bonus)
        }
        self.frame = 0
        self.alternate_wall = True
        self._font: Optional[pygame.font.Font] = None

    @property
    def size(self) -> tuple[int, int]:
        """The window size in pixels that fits the whole map."""
        rows = self.game.rows
        width = len(rows[0]) if rows else 0
        return width * TILE, len(rows) * TILE

    def _tick(self) -> None:
        self.frame += 1
        if self.frame >= WALL_BLINK_FRAMES:
            self.frame = 0
            self.alternate_wall = not self.alternate_wall

    def _texture_for(self, tile: str, y: int, last_row: int) -> Optional[str]:
        if tile == "1":
            if y == 0:
                return "sea"
            if y == last_row:
                return "rocks"
            if self.game.bonus and self.alternate_wall:
                return "wall2"
            return "wall"
        if tile == "M":
            return "enemy" if self.game.bonus else None
        return _TILE_TEXTURES.get(tile)

    def _player_texture(self) -> str:
        if not self.game.bonus:
            return "player"
        return _FACING_TEXTURES[self.game.facing]

    def _draw_moves(self, surface: pygame.Surface) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 20)
        surface.blit(self._font.render("Moves: ", True, LABEL_COLOUR), (10, 20))
        surface.blit(self._font.render(str(self.game.moves), True, LABEL_COLOUR), (80, 20))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw one frame of the game onto ``surface``."""
        if self.game.bonus:
            self._tick()
        rows = self.game.rows
        last_row = len(rows) - 1
        for y, row in enumerate(rows):
            for x, tile in enumerate(row):
                name = self._texture_for(tile, y, last_row)
                if name is not None:
                    surface.blit(self.textures[name], (x * TILE, y * TILE))
        px, py = self.game.position
        surface.blit(self.textures[self._player_texture()], (px * TILE, py * TILE))
        if self.game.bonus:
            self._draw_moves(surface)


def _load_textures(directory: Path, bonus: bool) -> dict[str, pygame.Surface]:
    return {
        name: pygame.image.load(str(directory / filename)).convert_alpha()
        for name, filename in _texture_names(bonus).items()
    }


def _play(renderer: Renderer, screen: pygame.Surface) -> int:
    game = renderer.game
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                c_printf("ESC PRESSED")
                return 0
            direction = direction_for_key(pygame.key.name(event.key), game.bonus)
            if direction is None:
                continue
            outcome = game.move(direction)
            if outcome is Outcome.WON:
                c_printf("YOU WON\n")
                return 0
            if outcome is Outcome.LOST:
                c_printf("YOU LOST!\n")
                return 0
            if outcome is Outcome.MOVED and not game.bonus:
                c_printf("PLAYER MOVES : %d\n", game.moves)
        screen.fill((0, 0, 0))
        renderer.draw(screen)
        pygame.display.flip()
        clock.tick(60)


def run(path: str, bonus: bool = False) -> int:
    """Load and check the map at ``path``, then play it in a window."""
    try:
        grid = load_map(path)
        validate_map(grid, bonus)
    except (MapError, InvalidMap) as exc:
        c_printf("%s\n", str(exc))
        return 0
    renderer = Renderer(Game(grid, bonus))
    pygame.init()
    try:
        screen = pygame.display.set_mode(renderer.size)
        pygame.display.set_caption(WINDOW_TITLE)
        try:
            renderer.textures = _load_textures(TEXTURE_DIR, bonus)
        except (pygame.error, OSError):
            c_printf("ERROR WHILE LOADING IMAGE!")
            return 0
        if not bonus:
            c_printf("Player Moves : %d\n", 0)
        return _play(renderer, screen)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``[--bonus] MAP.ber``."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = bool(args) and args[0] == "--bonus"
    if bonus:
        args = args[1:]
    prefix = "Error\n" if bonus else ""
    if len(args) != 1:
        c_printf("%sINSERT MAP!", prefix)
        return 0
    path = args[0]
    if not has_ber_extension(path):
        c_printf("%sNOT BER MAP", prefix)
        return 0
    return run(path, bonus)