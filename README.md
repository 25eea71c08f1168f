# raycub

A first-person raycaster for grid maps. It reads a plain-text map and places
the player at the start marker. It then casts one ray per screen column and
draws sky, floor and textured walls into an RGBA pixel buffer. The buffer is
shown in a pygame window.

## Installing

    pip install raycub

To run the test suite, install the `test` extra:

    pip install "raycub[test]"
    pytest

## Running

    raycub path/to/level.cub

The command takes exactly one argument, the map file. With any other number of
arguments it prints a usage line and exits with status 1. It also exits with
status 1 in these cases:

- the map cannot be read
- the map is empty
- the map has no start marker
- a wall texture cannot be loaded

The window is 1920×1280, titled "Cub3D", and can be resized.

### Map format

Each line of the file is one row of the grid.

- `0` is open floor. The player can only move through `0` cells.
- Any character that sorts above `0`, such as `1`, is a wall for the rays.
- `N`, `S`, `E` or `W` marks where the player starts and which way they face.
  The player stands in the middle of that cell, and the cell becomes floor. If
  there are several markers, the last one wins.

Rays that leave the map are treated as if they hit a wall.

Example:

    1111111
    1000001
    1001001
    10N0001
    1111111

### Wall textures

Wall textures are XPM42 files, read relative to the current directory:

| File                       | Used for walls facing |
|----------------------------|-----------------------|
| `textures/bluestone.xpm42` | north                 |
| `textures/eagle.xpm42`     | south                 |
| `textures/mossy.xpm42`     | west                  |
| `textures/redbrick.xpm42`  | east                  |

### Controls

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | step left / right   |
| Left / Right | turn                |
| Escape       | quit                |

The player moves 0.1 cells per step and turns 0.03 radians per step. Movement
checks each axis separately against a player radius of 0.2, so the player
slides along walls.

## Using it as a library

### `raycub.xpm42`

- `load_xpm42(path)` and `parse_xpm42(text)` decode XPM42 data into an `Xpm`.
  An `Xpm` has a `texture`, a `color_count`, a `cpp` and a `mode` (`c` for
  colour, `m` for monochrome).
- Malformed data raises `MlxError(ErrorCode.INVXPM)`.
- A path without `.xpm42` raises `INVEXT`.
- A file that cannot be opened raises `INVFILE`.

### `raycub.image`

- `Texture` holds RGBA bytes and has `get_pixel(x, y)`.
- `Image` is a drawable RGBA buffer with these methods:
  - `put_pixel`
  - `get_pixel`
  - `fill`
  - `resize`, which uses nearest-neighbour sampling
  - `add_instance`
  - `set_instance_depth`
- Out-of-range coordinates raise `INVPOS`.
- Sizes that are zero or larger than 32767 raise `INVDIM`.
- `texture_to_image(texture)` copies a texture into a new image.

### `raycub.renderqueue`

- `DrawCall` pairs an image with the index of one of its instances.
- `sort_render_queue` orders draw calls by depth.
- `remove_image_calls` takes every draw call for one image out of a queue.

### `raycub.context`

- `Mlx` is a headless window context. It owns images and a depth-sorted render
  queue.
- It accepts loop, key, close and resize hooks.
- `send_key` delivers key events and `is_key_down` reports held keys.
- `run_frame()` runs the loop hooks and returns the draw calls for the frame,
  back to front.
- `loop()` repeats frames until `close_window()` is called.
- `projection_matrix()` gives the view projection matrix.
- `set_setting` and `get_setting` change global options. The options are the
  members of `Setting`: `STRETCH_IMAGE`, `FULLSCREEN`, `MAXIMIZED`,
  `DECORATED` and `HEADLESS`.
- `Mlx` works as a context manager; leaving the block calls `terminate()`.

### `raycub.world`

- `read_map_file(path)` reads map rows.
- `Game.from_lines(lines)` builds the game state. It raises `ValueError` for an
  empty map or a map without a start marker.
- `Game.is_free(x, y)` tells whether a position is open floor.

### `raycub.movement`

- `move_forward`, `move_backward`, `move_left` and `move_right` move the player
  with wall collision.
- `turn_left` and `turn_right` rotate the view.
- `handle_key(game, key)` applies one `Key` and returns `False` for Escape.

### `raycub.render`

- `cast_ray` runs the grid stepping for one column and returns a `Ray`.
- `render_frame(game, image)` draws a whole frame into an image.

### `raycub.app`

- `load_walls(base_dir)` loads the four wall textures into a `Walls`.
- `main(argv)` is the `raycub` command.

### Errors

Errors are raised as `raycub.errors.MlxError`, which carries an `ErrorCode`.
`strerror(code)` gives the description of a code.

## What it does not do

- **Images:** there is no PNG loader; textures must be XPM42.
- **Text:** there is no text or font drawing.
- **Input:** there is no mouse, scroll or cursor handling.
- **Screen:** the context itself never opens a screen or draws to one. Only the
  `raycub` command shows frames, by copying the image into a pygame window.
- **Map checks:** maps are not checked for closed walls.
- **Map settings:** maps carry no texture paths or colours. The textures and
  the sky and floor colours are fixed.