import pytest

from gorillas.app import explosion_appearance, world_to_screen
from gorillas.game import Game


@pytest.fixture
def game():
    return Game(announce=lambda message: None)


def test_world_corners_map_to_screen_corners():
    assert world_to_screen(-10.0, -1.0, 800, 600) == pytest.approx((0.0, 600.0))
    assert world_to_screen(10.0, 10.0, 800, 600) == pytest.approx((800.0, 0.0))


def test_world_center_maps_to_screen_center():
    sx, sy = world_to_screen(0.0, 4.5, 800, 600)
    assert sx == pytest.approx(800 / 2)
    assert sy == pytest.approx(600 / 2)


def test_higher_world_y_is_higher_on_screen():
    _, low = world_to_screen(0.0, 1.0, 800, 600)
    _, high = world_to_screen(0.0, 5.0, 800, 600)
    assert high < low


def test_no_explosion_has_no_appearance(game):
    assert explosion_appearance(game) is None


def test_fresh_explosion_appearance(game):
    game.trigger_explosion(1.0, 2.0)
    look = explosion_appearance(game)
    assert (look.x, look.y) == (1.0, 2.0)
    assert look.scale == pytest.approx(0.2)
    assert look.color == pytest.approx((1.0, 1.0, 0.0))


def test_explosion_grows_and_reddens(game):
    game.trigger_explosion(0.0, 0.0)
    first = explosion_appearance(game)
    game.update_explosion(game.explosion_duration / 2)
    later = explosion_appearance(game)
    assert later.scale > first.scale
    assert later.color[1] < first.color[1]
    assert later.color[0] == 1.0


def test_explosion_disappears_after_duration(game):
    game.trigger_explosion(0.0, 0.0)
    game.update_explosion(game.explosion_duration)
    assert explosion_appearance(game) is None