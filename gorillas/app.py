"""Window, rendering and main loop of the game."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

import pygame

from gorillas.controls import Key, process_input
from gorillas.game import Game

WIN_WIDTH = 800
WIN_HEIGHT = 600
TITLE = "Gorillas 3D – Universidade"
FPS = 60

VIEW_LEFT, VIEW_RIGHT = -10.0, 10.0
VIEW_BOTTOM, VIEW_TOP = -1.0, 10.0
SPHERE_RADIUS = 0.2

TEXTURE_FILES = {
    "background": "city_bg.jpg",
    "building": "building_texture_2.jpg",
    "p1": "player1_texture.png",
    "p2": "player2_texture.png",
}
FALLBACK_COLORS = {
    "background": (40, 50, 80),
    "building": (110, 110, 120),
    "p1": (200, 60, 60),
    "p2": (60, 90, 200),
}

_KEYMAP = {
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}


@dataclass(frozen=True)
class ExplosionLook:
    """Where and how to draw the explosion: centre, sphere scale and RGB colour in 0..1."""

    x: float
    y: float
    scale: float
    color: tuple[float, float, float]


def world_to_screen(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    """Map world coordinates of the fixed camera to pixel coordinates."""
    sx = (x - VIEW_LEFT) / (VIEW_RIGHT - VIEW_LEFT) * width
    sy = (VIEW_TOP - y) / (VIEW_TOP - VIEW_BOTTOM) * height
    return sx, sy


def explosion_appearance(game: Game) -> ExplosionLook | None:
    """Return how the explosion looks now, or None when there is none."""
    if not game.show_explosion:
        return None
    t = game.explosion_time / game.explosion_duration
    return ExplosionLook(
        x=game.explosion_x,
        y=game.explosion_y,
        scale=0.2 + 1.3 * t,
        color=(1.0, 1.0 - t, 0.0),
    )


def _to_rgb(color: tuple[float, float, float]) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(c * 255))) for c in color)  # type: ignore[return-value]


def _world_rect(pos, size, width: int, height: int) -> pygame.Rect:
    left, top = world_to_screen(pos[0], pos[1] + size[1], width, height)
    right, bottom = world_to_screen(pos[0] + size[0], pos[1], width, height)
    return pygame.Rect(round(left), round(top), round(right - left), round(bottom - top))


def _load_texture(path: str) -> pygame.Surface | None:
    try:
        return pygame.image.load(path).convert_alpha()
    except (pygame.error, OSError):
        print(f"Falha ao carregar {path}", file=sys.stderr)
        return None


def _soften(surface: pygame.Surface) -> pygame.Surface:
    width, height = surface.get_size()
    small = pygame.transform.smoothscale(surface, (max(1, width // 2), max(1, height // 2)))
    return pygame.transform.smoothscale(small, (width, height))


def _make_background(texture: pygame.Surface | None, size: tuple[int, int]) -> pygame.Surface:
    background = pygame.Surface(size)
    if texture is None:
        background.fill(FALLBACK_COLORS["background"])
        return background
    background.blit(pygame.transform.smoothscale(texture, size), (0, 0))
    return _soften(background)


def _draw_box(screen, rect: pygame.Rect, texture, fallback) -> None:
    if rect.width <= 0 or rect.height <= 0:
        return
    if texture is None:
        screen.fill(fallback, rect)
    else:
        screen.blit(pygame.transform.scale(texture, rect.size), rect)


def _draw_sphere(screen, center, scale: float, color) -> None:
    width, height = screen.get_size()
    sx, sy = world_to_screen(center[0], center[1], width, height)
    radius = max(1, round(SPHERE_RADIUS * scale * width / (VIEW_RIGHT - VIEW_LEFT)))
    pygame.draw.circle(screen, _to_rgb(color), (round(sx), round(sy)), radius)


def _draw(screen, game: Game, background, textures) -> None:
    width, height = screen.get_size()
    screen.blit(background, (0, 0))
    for building in game.buildings:
        rect = _world_rect(building.pos, building.size, width, height)
        _draw_box(screen, rect, textures["building"], FALLBACK_COLORS["building"])
    for name, player in (("p1", game.p1), ("p2", game.p2)):
        rect = _world_rect(player.pos, player.size, width, height)
        _draw_box(screen, rect, textures[name], FALLBACK_COLORS[name])
    _draw_sphere(screen, (game.projectile_x, game.projectile_y), 1.0, (1.0, 1.0, 1.0))
    look = explosion_appearance(game)
    if look is not None:
        _draw_sphere(screen, (look.x, look.y), look.scale, look.color)


def _pressed_keys() -> set[Key]:
    state = pygame.key.get_pressed()
    return {key for code, key in _KEYMAP.items() if state[code]}


def main(argv=None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="gorillas", description="Two-player artillery duel.")
    parser.parse_args(argv)

    try:
        pygame.init()
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
    except pygame.error:
        print("Erro ao criar janela.", file=sys.stderr)
        pygame.quit()
        return -1
    pygame.display.set_caption(TITLE)

    textures = {name: _load_texture(path) for name, path in TEXTURE_FILES.items()}
    background = _make_background(textures["background"], screen.get_size())
    game = Game()

    print("Controles:")
    print("[A/D] mover | Left/Right ajusta Angulo | Up/Down ajusta Forca | Espaco dispara")

    clock = pygame.time.Clock()
    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        if process_input(game, _pressed_keys()):
            running = False

        game.update_projectile(dt)
        game.update_explosion(dt)

        _draw(screen, game, background, textures)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())