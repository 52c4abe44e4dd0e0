"""Core game state: players, buildings, projectile flight and explosions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable

Vec2 = tuple[float, float]

PROJECTILE_SIZE: Vec2 = (0.4, 0.4)
ARENA_LEFT = -12.0
ARENA_RIGHT = 12.0
ARENA_BOTTOM = -5.0
ARENA_TOP = 15.0


@dataclass
class Building:
    """A building: ``pos`` is its lower-left corner, ``size`` its width and height."""

    pos: Vec2
    size: Vec2

    @property
    def center(self) -> Vec2:
        return (self.pos[0] + self.size[0] * 0.5, self.pos[1] + self.size[1] * 0.5)


@dataclass
class Player:
    """A player: lower-left corner, size and score."""

    pos: Vec2
    size: Vec2 = (1.0, 1.0)
    score: int = 0

    @property
    def center(self) -> Vec2:
        return (self.pos[0] + self.size[0] * 0.5, self.pos[1] + self.size[1] * 0.5)


def _default_buildings() -> list[Building]:
    return [
        Building((-3.0, 0.0), (2.0, 3.0)),
        Building((0.0, 0.0), (2.0, 5.0)),
        Building((3.0, 0.0), (2.0, 4.0)),
    ]


def check_collision_bb(center1: Vec2, size1: Vec2, center2: Vec2, size2: Vec2) -> bool:
    """Return True if two axis-aligned boxes, given by centre and size, overlap.

    Boxes that merely touch count as overlapping.
    """
    half1 = (size1[0] * 0.5, size1[1] * 0.5)
    half2 = (size2[0] * 0.5, size2[1] * 0.5)

    left_a, right_a = center1[0] - half1[0], center1[0] + half1[0]
    bottom_a, top_a = center1[1] - half1[1], center1[1] + half1[1]
    left_b, right_b = center2[0] - half2[0], center2[0] + half2[0]
    bottom_b, top_b = center2[1] - half2[1], center2[1] + half2[1]

    if right_a < left_b or left_a > right_b:
        return False
    if top_a < bottom_b or bottom_a > top_b:
        return False
    return True


@dataclass
class Game:
    """Whole state of a two-player artillery match."""

    buildings: list[Building] = field(default_factory=_default_buildings)
    p1: Player = field(default_factory=lambda: Player((-8.5, 1.0)))
    p2: Player = field(default_factory=lambda: Player((8.0, 1.0)))
    launch_position_p1: Vec2 = (-8.0, 1.5)
    launch_position_p2: Vec2 = (8.0, 1.5)
    current_player: int = 1
    angle_deg: float = 45.0
    power: float = 5.0
    gravity: float = 9.8
    explosion_duration: float = 0.5
    announce: Callable[[str], None] = print
    projectile_x: float = field(default=0.0, init=False)
    projectile_y: float = field(default=0.0, init=False)
    in_flight: bool = field(default=False, init=False)
    flight_time: float = field(default=0.0, init=False)
    show_explosion: bool = field(default=False, init=False)
    explosion_time: float = field(default=0.0, init=False)
    explosion_x: float = field(default=0.0, init=False)
    explosion_y: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.reset_projectile()

    @property
    def shooter(self) -> Player:
        return self.p1 if self.current_player == 1 else self.p2

    @property
    def target(self) -> Player:
        return self.p2 if self.current_player == 1 else self.p1

    @property
    def launch_position(self) -> Vec2:
        return self.launch_position_p1 if self.current_player == 1 else self.launch_position_p2

    def reset_projectile(self) -> None:
        """Stop the projectile and place it at the current player's launch point."""
        self.in_flight = False
        self.flight_time = 0.0
        self.projectile_x, self.projectile_y = self.launch_position

    def next_turn(self) -> None:
        """Hand control to the other player."""
        self.current_player = 2 if self.current_player == 1 else 1
        self.reset_projectile()
        self.announce(f"Agora é a vez do Jogador {self.current_player}!")

    def trigger_explosion(self, x: float, y: float) -> None:
        """Start the explosion animation at (x, y)."""
        self.show_explosion = True
        self.explosion_time = 0.0
        self.explosion_x = x
        self.explosion_y = y

    def _projectile_hits(self, center: Vec2, size: Vec2) -> bool:
        return check_collision_bb(
            center, size, (self.projectile_x, self.projectile_y), PROJECTILE_SIZE
        )

    def update_projectile(self, dt: float) -> None:
        """Advance the projectile by ``dt`` seconds and resolve collisions."""
        if not self.in_flight:
            base_x, base_y = self.shooter.pos
            self.projectile_x = base_x + 0.5
            self.projectile_y = base_y + 0.5
            return

        self.flight_time += dt
        t = self.flight_time
        rad = math.radians(self.angle_deg)
        direction = 1.0 if self.current_player == 1 else -1.0
        start_x, start_y = self.launch_position

        self.projectile_x = start_x + direction * self.power * math.cos(rad) * t
        self.projectile_y = (
            start_y + self.power * math.sin(rad) * t - 0.5 * self.gravity * t * t
        )

        if any(self._projectile_hits(b.center, b.size) for b in self.buildings):
            self.announce("Colidiu em um prédio!")
            self.trigger_explosion(self.projectile_x, self.projectile_y)
            self.next_turn()
            return

        target = self.target
        if self._projectile_hits(target.center, target.size):
            target_number = 2 if self.current_player == 1 else 1
            self.announce(f"Acertou o Jogador {target_number}!")
            self.shooter.score += 1
            self.announce(f"Placar -> P1={self.p1.score}  P2={self.p2.score}")
            self.trigger_explosion(self.projectile_x, self.projectile_y)
            self.next_turn()
            return

        off_map = not (
            ARENA_LEFT <= self.projectile_x <= ARENA_RIGHT
            and ARENA_BOTTOM <= self.projectile_y <= ARENA_TOP
        )
        if off_map:
            self.announce("Projétil saiu do mapa.")
            self.next_turn()

    def update_explosion(self, dt: float) -> None:
        """Advance the explosion animation, ending it after its duration."""
        if not self.show_explosion:
            return
        self.explosion_time += dt
        if self.explosion_time >= self.explosion_duration:
            self.show_explosion = False