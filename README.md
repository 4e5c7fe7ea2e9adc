# spriteworks

spriteworks holds the building blocks of a 2D sprite game. It has vector
maths and collision tests between points, rectangles and circles. It has
actors with components attached to them, and collision shapes that fire
enter, stay and end callbacks. It also has timed events and keyboard state
tracking. Images and sprite sheets are held in memory and drawn onto an
off-screen back buffer with Pillow.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Modules

- `spriteworks.vecmath`: `Vector2D`, `IntPoint`, `Color` and `Transform`.
  Also `clamp`, `clamp_min`, `clamp_max` and `lerp`. `collision(left_type,
  left, right_type, right)` dispatches on `CollisionType` (`RECT`, `CIRCLE`)
  to `rect_to_rect`, `circle_to_circle`, `rect_to_circle` and
  `circle_to_rect`. `point_to_rect` and `point_to_circle` are available
  directly.
- `spriteworks.delegate`: `EngineDelegate`, a list of callables that are
  called in order. Add to it with `+=`.
- `spriteworks.time_event`: `TimeEvent.push_event(time, function,
  is_update=False, loop=False)` and `TimeEvent.update(delta_time)`. These
  give one-shot, repeating and every-tick-until-due callbacks.
- `spriteworks.engine_object`: `EngineObject`, which has a name and flags
  for active and debug. `destroy(time)` destroys the object at once or after
  `time` seconds of `release_time_check` calls.
- `spriteworks.text`: `to_upper`, which upper-cases ASCII letters only.
- `spriteworks.rng`: `EngineRandom`, with `random_int` (inclusive) and
  `random_float`. It is seeded from the clock unless a seed is given.
- `spriteworks.timer`: `EngineTimer`, which measures frame delta time. The
  clock can be injected.
- `spriteworks.enginepath`, `spriteworks.directory`,
  `spriteworks.engine_file`: `EnginePath`, `EngineDirectory` (sorted
  listing, optionally recursive) and `EngineFile` (binary read and write, a
  context manager). Also `EngineResources`.
- `spriteworks.engine_input`: `EngineInput` tracks the down, press, up and
  free state of each key. It takes a `key_state(code)` callable that reports
  whether a key is held. `bind_action(key, KeyEvent.DOWN, fn)` and similar
  calls attach actions, which `event_check` runs.
- `spriteworks.image`: `EngineImage` can be created blank or loaded from
  `.png` or `.bmp`. It has `copy_to_bit`, `copy_to_trans` (colour-keyed,
  magenta by default), `copy_to_alpha`, `get_color`, and simple rectangle,
  ellipse and text drawing.
- `spriteworks.sprite`: `EngineSprite`, an ordered list of `SpriteData`
  frames (an image and a region of it).
- `spriteworks.image_manager`: `ImageManager` stores images and sprites by
  upper-cased key. `load` and `load_folder` add them. `cutting_sprite`,
  `cutting_sprite_by_size` and `cutting_sprite_from_image` cut sheets into
  frames. `find_sprite` and `find_image` look them up.
- `spriteworks.window`: `EngineWindow`, an off-screen window image and back
  buffer, resized by `set_window_pos_and_scale`.
- `spriteworks.core_debug`: per-frame debug text and shape overlays.
  `core_output_string` and `core_debug_render` queue them, and
  `print_engine_debug_render(back_buffer)` draws them.
- `spriteworks.component` and `spriteworks.actor`: `ActorComponent`,
  `SceneComponent`, `Actor` and `GameMode`.
  `Actor.create_default_sub_object(type)` attaches a component.
  `begin_pending_components()` starts every component created since the
  last call.
- `spriteworks.collision`: `Collision2D`, a rectangle or circle component
  in a numbered group. It has `collision`, `collision_once`,
  `collision_all` and `collision_event_check`. The callbacks are set with
  `set_collision_enter`, `set_collision_stay` and `set_collision_end`.

## A quick taste

```python
from spriteworks.vecmath import Transform, Vector2D, CollisionType, collision

a = Transform(scale=Vector2D(10, 10), location=Vector2D(0, 0))
b = Transform(scale=Vector2D(10, 10), location=Vector2D(8, 0))
assert collision(CollisionType.RECT, a, CollisionType.CIRCLE, b)
```

```python
from spriteworks.time_event import TimeEvent

events = TimeEvent()
fired = []
events.push_event(1.0, lambda: fired.append("boom"))
events.update(0.5)
events.update(0.6)
assert fired == ["boom"]
```

Misuse that the package detects raises `spriteworks.debug.EngineError`.
Examples are an unknown key, a sprite index out of range, an image that is
not loaded, or a negative collision group.

## What it does not do

The package has no level or world object and no main loop that ticks,
renders, checks collisions and releases actors frame by frame. Actors and
collision shapes use their `world` attribute if you set one. That object
must supply `camera_pos`, a `collisions` mapping from group number to
shapes, `push_collision` and `push_check_collision`. You provide it and
drive the frame yourself. The package has no animated sprite renderer
component either. It opens no on-screen window and plays no sound.

## Running the tests

```
pytest
```