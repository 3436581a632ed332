import pygame
import pytest

from solong_game.app import TILE, WALL_BLINK_FRAMES, Renderer, main, run
from solong_game.game import Direction, Game

GRID = ["111111", "1P0C01", "1000E1", "111111"]
BONUS_GRID = ["111111", "1P0CM1", "1000E1", "111111"]


def _colour(renderer, name):
    return renderer.textures[name].get_at((0, 0))


def _cell(surface, x, y):
    return surface.get_at((x * TILE + 24, y * TILE + 24))


@pytest.fixture
def renderer():
    return Renderer(Game(GRID))


def test_size_fits_map(renderer):
    assert renderer.size == (len(GRID[0]) * TILE, len(GRID) * TILE)


def test_fallback_textures_are_distinct():
    bonus = Renderer(Game(BONUS_GRID, bonus=True))
    colours = {tuple(_colour(bonus, name)) for name in bonus.textures}
    assert len(colours) == len(bonus.textures)


def test_mandatory_has_no_bonus_textures(renderer):
    assert "enemy" not in renderer.textures
    assert "wall2" not in renderer.textures


def test_walls_by_row(renderer):
    surface = pygame.Surface(renderer.size)
    renderer.draw(surface)
    assert _cell(surface, 2, 0) == _colour(renderer, "sea")
    assert _cell(surface, 2, 3) == _colour(renderer, "rocks")
    assert _cell(surface, 0, 1) == _colour(renderer, "wall")


def test_tiles_and_player(renderer):
    surface = pygame.Surface(renderer.size)
    renderer.draw(surface)
    assert _cell(surface, 1, 1) == _colour(renderer, "player")
    assert _cell(surface, 3, 1) == _colour(renderer, "coll")
    assert _cell(surface, 4, 2) == _colour(renderer, "exit")
    assert _cell(surface, 2, 1) == _colour(renderer, "ground")


def test_player_redrawn_after_move(renderer):
    renderer.game.move(Direction.RIGHT)
    surface = pygame.Surface(renderer.size)
    renderer.draw(surface)
    assert _cell(surface, 2, 1) == _colour(renderer, "player")
    assert _cell(surface, 1, 1) == _colour(renderer, "ground")


def test_collected_item_becomes_ground(renderer):
    renderer.game.move(Direction.RIGHT)
    renderer.game.move(Direction.RIGHT)
    renderer.game.move(Direction.RIGHT)
    surface = pygame.Surface(renderer.size)
    renderer.draw(surface)
    assert _cell(surface, 3, 1) == _colour(renderer, "ground")


def test_bonus_enemy_and_facing():
    bonus = Renderer(Game(BONUS_GRID, bonus=True))
    bonus.game.move(Direction.DOWN)
    surface = pygame.Surface(bonus.size)
    bonus.draw(surface)
    assert _cell(surface, 4, 1) == _colour(bonus, "enemy")
    assert _cell(surface, 1, 2) == _colour(bonus, "down")


def test_bonus_wall_blinks():
    bonus = Renderer(Game(BONUS_GRID, bonus=True))
    surface = pygame.Surface(bonus.size)
    for _ in range(WALL_BLINK_FRAMES - 1):
        bonus.draw(surface)
    assert _cell(surface, 0, 1) == _colour(bonus, "wall2")
    bonus.draw(surface)
    assert _cell(surface, 0, 1) == _colour(bonus, "wall")
    assert bonus.frame == 0


def test_main_needs_one_map(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "INSERT MAP!"


def test_main_bonus_needs_one_map(capsys):
    assert main(["--bonus", "a.ber", "b.ber"]) == 0
    assert capsys.readouterr().out == "Error\nINSERT MAP!"


def test_main_rejects_other_extension(capsys):
    assert main(["map.txt"]) == 0
    assert capsys.readouterr().out == "NOT BER MAP"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 0
    assert "MAP NOT FOUND" in capsys.readouterr().out


def test_run_invalid_map(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("11111\n1P0C1\n11111\n")
    assert run(str(path)) == 0
    assert "Missing value" in capsys.readouterr().out


def test_run_unreachable_collectable(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("111111\n1P0E01\n1001C1\n111111\n")
    assert run(str(path), bonus=True) == 0
    assert "BACKTRACKING" in capsys.readouterr().out