# catdefense

The engine core of a small 2D game, built on pygame. It has the window and event
loop, scene management, object and control containers, resource caching, audio
playback, and the geometry helpers that game objects use.

## Modules

- `catdefense.point.Point`: a dataclass holding a 2D point or vector (`x`, `y`,
  both 0 by default). It supports `+` and `-` between points, `*` and `/` by a
  number (`*` works on either side), and has `normalize()`, `dot()`, `magnitude()`
  and `magnitude_squared()`. Normalizing the zero vector gives `Point(0, 0)`.
- `catdefense.collider`:
  - `is_point_in_rect(pnt, rect_pos, rect_size)` checks the half-open rectangle
    that starts at `rect_pos`.
  - `is_rect_overlap(r1_min, r1_max, r2_min, r2_max)` checks two rectangles given
    by their corners. Rectangles that only touch do not overlap.
  - `is_circle_overlap(c1, r1, c2, r2)` checks two circles. Circles that only touch
    do not overlap.
  - `is_point_in_bitmap(pnt, bitmap)` is true when the pixel at `pnt` has a
    non-zero alpha.
- `catdefense.errors.EngineError`: a `RuntimeError` that is raised when loading a
  resource, starting audio or creating the display fails.
- `catdefense.log`:
  - `LogType` has the members `VERBOSE`, `DEBUGGING`, `INFO`, `WARN` and `ERROR`.
  - `Logger(enabled, log_verbose, file_path)` prints lines of the form
    `[INFO] message` and appends them to the log file. Verbose messages are written
    only when `log_verbose` is set.
  - `configure()` replaces the process-wide logger and empties its file.
  - `log(log_type, *args)` writes through the process-wide logger. It is disabled
    until `configure()` turns it on.
- `catdefense.objects`:
  - `GameObject` has `visible`, `position`, `size` and `anchor`, with `draw(surface)`
    and `update(delta_time)` hooks that do nothing by default.
  - `Control` has `on_key_down`, `on_key_up`, `on_mouse_down`, `on_mouse_up`,
    `on_mouse_move` and `on_mouse_scroll` handlers that do nothing by default.
- `catdefense.group.Group`: an ordered container of objects and controls, and itself
  both an object and a control.
  - It updates and draws its visible objects, and passes every input event to all
    of its controls.
  - Objects may add or remove group members during an update. An object removed
    earlier in the same pass is not updated.
  - `add_object`, `insert_object`, `add_control`, `add_control_object`,
    `remove_object`, `remove_control`, `remove_control_object`, `objects()`,
    `controls()` and `clear()` manage the contents. Members are matched by
    identity. Removing something that is not in the group raises `ValueError`.
- `catdefense.scene.Scene`: an abstract `Group`.
  - Subclasses implement `initialize()`.
  - `terminate()` clears the scene.
  - `draw(surface)` fills the surface with black before it draws the objects.
- `catdefense.resources.Resources`: loads images, fonts and sounds from
  `<root>/images/`, `<root>/fonts/` and `<root>/audios/` and caches them. The
  default root is `Resource`.
  - `get_bitmap(name, width, height)` can return a scaled copy.
  - `get_sample_instance(name)` returns a `SampleInstance` that has its own gain,
    looping and start position.
  - `release_unused()` drops cached items that nothing else refers to.
  - `Resources.get_instance()` returns a shared instance.
- `catdefense.audio.AudioPlayer`:
  - `play_audio` plays a sound once at `sfx_volume`.
  - `play_bgm` and `stop_bgm` start and stop looping music at `bgm_volume`.
  - `play_sample`, `stop_sample`, `change_sample_volume`, `change_sample_position`
    and `get_sample_length` work on sample instances. Positions and lengths are in
    seconds.
  - A negative volume raises `EngineError`, and so does a position outside the
    sample.
- `catdefense.engine.GameEngine`: owns the scenes and runs the game.
  - `add_new_scene`, `get_scene`, `change_scene` and `active_scene` manage the
    scenes.
  - `update`, `draw` and `handle_event` drive a frame.
  - `start(...)` opens the window and runs the event loop until the window is
    closed.
  - `screen_size()`, `mouse_position()` and `is_key_down()` report the window
    size, mouse position and key state.
  - `GameEngine.get_instance()` returns a shared engine.

## Install

```
pip install catdefense
```

## Example

```python
from catdefense.engine import GameEngine
from catdefense.scene import Scene


class TitleScene(Scene):
    def initialize(self):
        pass


engine = GameEngine.get_instance()
engine.add_new_scene("title", TitleScene())
engine.start("title", icon=None)
```

By default `start` loads the window icon `icon.png` through `Resources`. Pass
`icon=None` when there is no such image.

## Scene rules

- A change asked for with `engine.change_scene(name)` takes effect at the start of
  the next update. The old scene is terminated and the new one is initialized.
- Adding two scenes with the same name raises `ValueError`.
- Switching to, starting with or fetching a scene that was never added also raises
  `ValueError`.
- Each update's `delta_time` is capped at `delta_time_threshold` (0.05 s by
  default). This stops fast objects from passing through each other when a frame
  lags.

## What this package does not include

This package is the engine layer only. It provides no game content: no units,
towers, enemies, maps, menus or play screens, and no command to launch a game. You
build those yourself as `GameObject`, `Control` and `Scene` subclasses and run them
with `GameEngine.start`.