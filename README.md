# sunlife

A cellular automaton on an 80 × 60 grid, seeded with a symmetric "sun"
pattern. The board is drawn in an 800 × 600 pygame window and its
generations are recorded to an animated, endlessly looping GIF.

## Rules

The grid is bounded: it does not wrap around at its edges, and cells
outside it count as dead. On each generation a live cell stays alive if
it has two or three live neighbours and dies otherwise. Dead cells stay
dead; no new cells are born, so the pattern can only shrink.

## Installing

```
pip install .
```

## Running

```
sunlife
```

A window opens and shows the board. It advances one generation every
eighth frame, at 60 frames per second, and each generation is added to
the GIF. Once the requested number of generations has been recorded,
the program pauses for three seconds, writes the GIF and exits. Closing
the window earlier stops the program, and the GIF keeps the frames
recorded up to that point.

Options:

- `--output PATH` – where to write the GIF (default `conway_sun.gif` in
  the current directory).
- `--frames N` – how many generations to record (default 300; must be at
  least 1).

```
sunlife --output sun.gif --frames 100
```

## Using the library

```python
from sunlife.game_of_life import GameOfLife
from sunlife.framebuffer import Framebuffer
from sunlife.patterns import Pattern, pattern_coordinates, create_sun_pattern
from sunlife.app import setup_sun_pattern, create_gif_frame, record_gif

game = GameOfLife(80, 60)
setup_sun_pattern(game)          # the sun pattern at offset (15, 15)

game.update()
print(game.is_alive(40, 30))

# Draw the board into an off-screen framebuffer and save it as an image
fb = Framebuffer(80, 60)
game.render(fb)                  # live cells white, dead cells black
print(fb.pixel_at(0, 0))         # (0, 0, 0, 255)
fb.render_to_file("board.png")   # format follows the file extension

# Palette indices for one frame, row by row: 1 for a live cell, 0 for a dead one
indices = create_gif_frame(game)

# Advance 50 generations and save each as a GIF frame, without a window
record_gif(game, "run.gif", 50)
```

Modules:

- `sunlife.patterns` – the `Pattern` enum, `pattern_coordinates(pattern)`
  giving the live `(x, y)` cells of a pattern, and `create_sun_pattern()`
  giving the sun pattern with its default offset.
- `sunlife.game_of_life` – `GameOfLife`, the grid with `set_cell`,
  `is_alive`, `update`, `render` and `initialize_with_pattern`.
  Writes outside the grid are ignored.
- `sunlife.framebuffer` – `Framebuffer`, an RGBA image buffer with
  `set_pixel` (out-of-range writes ignored), `pixel_at` (raises
  `IndexError` out of range), `render_to_file` and `present(surface, scale)`
  for drawing onto a pygame surface.
- `sunlife.app` – `setup_sun_pattern`, `create_gif_frame`, `record_gif`
  (raises `ValueError` for fewer than one frame) and `main`, the entry
  point of the `sunlife` command.

## Running the tests

```
pip install ".[test]"
pytest
```