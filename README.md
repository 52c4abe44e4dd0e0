# gorillas

A two-player artillery game for the desktop. Two players stand on opposite
sides of a small city skyline and take turns lobbing a projectile over three
buildings. A projectile that strikes a building explodes and ends the turn;
one that hits the opponent explodes and scores a point for the shooter. A
shot that leaves the arena passes the turn without an explosion.

## Installing

```
pip install .
```

The game window (800×600) is drawn with pygame.

## Playing

```
gorillas
```

The command takes no options besides `--help`.

Only the player whose turn it is can act:

| Key           | Action                                   |
|---------------|------------------------------------------|
| A / D         | move left / right within your own area   |
| Left / Right  | lower / raise the launch angle (0–90°)   |
| Up / Down     | raise / lower the launch force (1–20)    |
| Space         | fire                                     |
| Escape        | quit                                     |

Player 1 starts on the left and fires to the right; player 2 stands on the
right and fires to the left. The angle and force are shared between the
players and kept from one turn to the next. Shots, aim changes, turn
changes, hits and the score are reported in the terminal, in Portuguese.

### Images

On start the game looks in the current directory for `city_bg.jpg`
(background, drawn softened), `building_texture_2.jpg`,
`player1_texture.png` and `player2_texture.png`. None of these ship with the
package. Any image that cannot be loaded is reported on standard error and
replaced by a plain coloured fill, so the game is playable without them.

## Using the game logic

The rules work without a window, which is useful for experiments and tests:

```python
from gorillas.game import Game
from gorillas.controls import fire

game = Game(announce=lambda message: None)
fire(game)
while game.in_flight:
    game.update_projectile(0.01)
print(game.current_player, game.p1.score, game.p2.score)
```

- `gorillas.game.Game` holds the whole match: `buildings`, players `p1` and
  `p2` (`Player` with `pos`, `size`, `score`), `angle_deg`, `power`,
  `gravity`, the projectile and the explosion state. Its methods are
  `update_projectile(dt)`, `update_explosion(dt)`, `reset_projectile()`,
  `next_turn()` and `trigger_explosion(x, y)`. Messages go through the
  `announce` callable, `print` by default.
- `gorillas.game.check_collision_bb(center1, size1, center2, size2)` tests
  two axis-aligned boxes, given by centre and size, for overlap; boxes that
  only touch count as overlapping.
- `gorillas.controls.process_input(game, pressed)` applies one frame of
  held `Key` values and returns True when Escape is among them;
  `fire(game)` launches the projectile unless one is already in flight.
- `gorillas.app.world_to_screen(x, y, width, height)` maps world
  coordinates to pixels, and `explosion_appearance(game)` gives the current
  explosion's centre, scale and colour, or None.
- `gorillas.geometry.generate_sphere_vertices(radius, stacks, slices)`
  builds a triangulated sphere mesh as interleaved `(x, y, z, r, g, b)`
  values; `TEXTURED_CUBE_VERTICES` holds a unit cube as `(x, y, z, u, v)`.

## What it does not do

The window draws the scene flat, as rectangles and circles; the sphere and
cube meshes in `gorillas.geometry` are available as data but are not used
for drawing. There is no computer opponent, no network play, no sound and
no saved scores: a match lasts as long as the window is open.

## Running the tests

```
pip install .[test]
pytest
```