"""Keyboard controls: moving the shooter, aiming and firing."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from gorillas.game import Game

MOVE_STEP = 0.005
POWER_STEP = 0.02
ANGLE_STEP = 0.2
POWER_RANGE = (1.0, 20.0)
ANGLE_RANGE = (0.0, 90.0)
PLAYER_RANGES = {1: (-10.0, -6.0), 2: (6.0, 9.0)}


class Key(Enum):
    """Keys the game reacts to."""

    A = auto()
    D = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()
    ESCAPE = auto()


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def fire(game: Game) -> bool:
    """Launch the projectile from the current player; return False if already flying."""
    if game.in_flight:
        return False
    game.in_flight = True
    game.flight_time = 0.0
    x, y = game.shooter.pos
    launch = (x + 0.5, y + 0.5)
    if game.current_player == 1:
        game.launch_position_p1 = launch
    else:
        game.launch_position_p2 = launch
    game.announce(
        f"DISPARO do Player {game.current_player}"
        f" | Angulo={game.angle_deg:g} Forca={game.power:g}"
    )
    return True


def process_input(game: Game, pressed: Iterable[Key]) -> bool:
    """Apply one frame of held keys to ``game``.

    Returns True when the player asked to quit.
    """
    keys = frozenset(pressed)

    shooter = game.shooter
    x, y = shooter.pos
    if Key.A in keys:
        x -= MOVE_STEP
    if Key.D in keys:
        x += MOVE_STEP
    shooter.pos = (clamp(x, *PLAYER_RANGES[game.current_player]), y)

    changed = False
    for key, step in ((Key.UP, POWER_STEP), (Key.DOWN, -POWER_STEP)):
        if key in keys:
            game.power = clamp(game.power + step, *POWER_RANGE)
            changed = True
    for key, step in ((Key.LEFT, -ANGLE_STEP), (Key.RIGHT, ANGLE_STEP)):
        if key in keys:
            game.angle_deg = clamp(game.angle_deg + step, *ANGLE_RANGE)
            changed = True
    if changed:
        game.announce(f"Angle={game.angle_deg:g}  Force={game.power:g}")

    if Key.SPACE in keys:
        fire(game)

    return Key.ESCAPE in keys