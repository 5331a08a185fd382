# quadkit

quadkit is game logic for small 2D games. It is plain Python and needs no
third-party packages. Each module holds the state of a simulation and the
rules that change it. Nothing is drawn, so you can use the modules with any
front end or run them headless in tests.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `quadkit.geometry` | `Vec2` (vector arithmetic, `length`, `normalize`) and `Rect` (`overlaps`, `contains`) |
| `quadkit.platformer` | Platformer physics that moves one pixel at a time: `World`, `Actor`, `Solid` and `Tile` |
| `quadkit.curve` | `Curve`, which samples key points into a `BatchedCurve` for fast lookup |
| `quadkit.emission` | Particle configuration: `EmitterConfig`, `Color`, `ColorCurve`, emission shapes (`PointEmission`, `RectEmission`, `SphereEmission`), particle meshes (`RectangleMesh`, `CircleMesh`, `CustomMesh`), `BlendMode`, `AtlasConfig` and `ParticleMaterial` |
| `quadkit.emitter` | The particle simulation: `Particle`, `Emitter` and `EmittersCache` |
| `quadkit.camera` | Angle helpers (`short_angle_dist`, `angle_lerp`, `wrap_rotation`) and `CameraRig` |
| `quadkit.life` | Conway's Game of Life: `LifeGrid`, `CellState` and `next_state` |
| `quadkit.snake` | `SnakeGame` and `Direction`. The board is 16×16 unless you choose another size |
| `quadkit.arkanoid` | `Arkanoid`, a brick breaker with a 10×10 wall of blocks |
| `quadkit.asteroids` | `AsteroidsGame` with `Ship`, `Bullet`, `Asteroid` and `wrap_around` |

## Platformer physics

A `World` holds static tile layers, moving solids and actors. Actors move one
pixel at a time. When a move is less than a whole pixel, the fraction is kept
and added to the next move.

```python
from quadkit.geometry import Vec2
from quadkit.platformer import Tile, World

world = World()
tiles = [Tile.EMPTY] * 40 * 18 + [Tile.SOLID] * 40
world.add_static_tiled_layer(tiles, 8.0, 8.0, 40, 1)

player = world.add_actor(Vec2(50.0, 80.0), 8, 8)
platform = world.add_solid(Vec2(170.0, 130.0), 32, 8)

on_ground = world.collide_check(player, world.actor_pos(player) + Vec2(0.0, 1.0))
world.move_h(player, 1.5)
world.move_v(player, 3.0)             # returns False when blocked
world.solid_move(platform, 1.0, 0.0)  # carries riders, pushes actors
print(world.squished(player))
```

`Tile.JUMP_THROUGH` tiles stop an actor that falls onto them from above. An
actor moving up or sideways passes through them. After `world.descent(actor)`
the actor also falls through them.

A solid that pushes an actor into something it cannot pass marks the actor
as squished, and `world.squished(actor)` then returns `True`.

## Particles

```python
from quadkit.emission import BlendMode, EmitterConfig
from quadkit.emitter import Emitter
from quadkit.geometry import Vec2

emitter = Emitter(EmitterConfig(lifetime=0.5, amount=5, blend_mode=BlendMode.ADDITIVE))
particles = emitter.draw(Vec2(50.0, 50.0), 1 / 60)  # move the emitter, advance one frame
emitter.emit(Vec2(0.0, 0.0), 10)                    # burst that ignores amount and emitting
```

- `draw` returns the particles that are alive, with their position, rotation, size, colour and texture rectangle (`uv`).
- `emitter.update(dt)` advances the simulation and leaves the emitter where it is.
- An emitter holds at most `Emitter.MAX_PARTICLES` particles and raises `OverflowError` beyond that.
- With `size_curve` set, particle size follows a `Curve` over each particle's lifetime. Only linear interpolation is supported, and `Interpolation.BEZIER` raises `ValueError`.
- `EmittersCache` keeps a pool of emitters for effects that fire often. Call `cache.spawn(pos)` to start one and `cache.draw(dt)` once per frame. Emitters that have finished go back to the pool.

## Mini games and camera

Each game takes the current time, or the frame time, together with the keys
that are held down:

```python
from quadkit.snake import Direction, SnakeGame

game = SnakeGame()
game.reset(now=0.0)
game.steer(Direction.DOWN)
moved = game.tick(now=0.5)
```

- `Arkanoid.update(dt, left, right, space)` returns the blocks broken in that frame.
- `AsteroidsGame.update(now, up, left, right, space)` advances one round. `ship_vertices()` gives the corners of the ship triangle.
- `LifeGrid.step()` advances the Game of Life by one generation.
- `CameraRig.step(keys, wheel_y)` takes lower-case key names (`w`, `s`, `a`, `d`, `left`, `right`, `up`, `down`, `ctrl`, `q`, `escape`). It returns `False` when `q` or `escape` is held.

## What quadkit does not do

quadkit has no rendering, window, input polling, audio or text layout, and it
has no command to run. Your own program reads the keyboard and the clock,
passes them to these classes, and draws the state that comes back.