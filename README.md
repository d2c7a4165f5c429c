# pokered

A small top-down game skeleton built on pygame. It opens a resizable
1920×1080 window titled "Pokemon Red", runs a frame loop with delta timing,
and routes window-close and mouse-button input through a prioritised event
bus. A camera can be panned with the W, A, S and D keys; each frame the window
is cleared to black and a thick red line is drawn in world coordinates
through the camera.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
pokered
```

At start-up a log file `./log/MM-DD-YYYY.log` is created (along with the
`./log` directory) and opened for appending. Close the window to quit. If the
window cannot be created, the command prints
`An error occur while loading the game !` to standard error and exits with
status 84; otherwise it exits with status 0.

## What it does not do

There is no game content yet: no maps, tiles, sprites, characters, menus or
battles, and nothing is saved. The only thing drawn is the fixed red line
described above.

## Using the pieces

The modules can also be used on their own.

### `pokered.position`

Frozen dataclasses `Vector2f(x, y)` and `Size2f(width, height)`, built with
`vector2f(x, y)` and `size2f(width, height)` (values are converted to float).
`to_tuple()` gives a plain pair; `vector_from_tuple()` and `size_from_tuple()`
go the other way.

### `pokered.delta`

`create_delta(multiplier)` returns a zeroed `Delta`. Call
`update(elapsed_microseconds)` once per frame: it sets `original` to the
elapsed time in seconds, `delta` to that times `multiplier`, adds `delta` to
`total_elapsed`, and returns `delta`.

### `pokered.logger`

`init_logger(path)` returns an enabled `Logger` that writes to standard output
and appends to `path` (creating the file and its immediate parent directory
if needed; with `None` or an unopenable path it logs to the console only).
`Logger.info(message, *args)` formats the message printf-style, writes
`[HH:MM:SS] - [INFO] - message` and returns that line, or `None` when the
logger is disabled. `close()` releases the file, and a `Logger` can be used
as a context manager. The helpers `last_index_of`, `create_dir` and
`create_file_with_path` are available too.

### `pokered.events`

An `EventBus` holds `EventHandler`s registered from a `HandlerInfo`
(priority, target event, target scene, whether to skip canceled events, and
the function to call). Handlers are kept ordered by `EventPriority`, highest
first; among equal priorities the most recently registered comes first.
`process(context, data)` calls each handler whose `EventType` matches
`data.type` and whose `Scene` is `Scene.ALL` or equals `context.scene`,
skipping canceled events for handlers that ignore them, and counts calls in
`call_count`. The bus also has `remove`, `clear`, `sort(key)` (with
`priority_ascending` or `priority_descending` as keys), `dump(logger)`,
iteration and `len()`. Mouse events carry a `MouseEvent` payload.

```python
from pokered.events import EventBus, EventData, EventPriority, EventType, HandlerInfo, Scene

bus = EventBus()
bus.register(HandlerInfo(
    priority=EventPriority.HIGH,
    target_event=EventType.PRE_UPDATE,
    target_scene=Scene.ALL,
    ignore_canceled=False,
    handling_function=lambda context, data: print("tick"),
))
```

### `pokered.resolver`

`process_backend_event(context, event)` turns pygame `QUIT`,
`MOUSEBUTTONUP` and `MOUSEBUTTONDOWN` events into `WINDOW_CLOSED`,
`MOUSE_RELEASED` and `MOUSE_PRESSED` events on `context.handlers`.
`resolve_button` and `to_backend_button` map mouse buttons; only the left
button is mapped, others give `None`.

### `pokered.camera`

`create_camera(context, offset, size)` returns a `Camera` at the origin and
registers `camera_movement_handler` on `context.handlers` for `PRE_UPDATE` in
`Scene.GAME`. `to_local` and `to_global` convert between world and
camera-relative positions; `draw_line(CameraLine(...))` draws a thick line
onto `context.window`. `line_triangles(line)` returns the six vertices of the
two triangles covering a line (none for a zero-length line).

### `pokered.game`

`GameContext` holds the window, clock, camera, scene, delta, logger and event
bus. `load_game`, `launch_game` and `destroy_game` set up, run and tear down
the game (`load_game` raises `GameLoadError` if the window cannot be created),
and `main()` is what the `pokered` command runs.