"""The cell grid and its generation rules."""

from __future__ import annotations

from itertools import product

from .framebuffer import BLACK, WHITE, Framebuffer
from .patterns import Pattern, pattern_coordinates

_OFFSETS = [(dx, dy) for dx, dy in product((-1, 0, 1), repeat=2) if (dx, dy) != (0, 0)]


class GameOfLife:
    """A bounded grid of cells; cells outside the grid count as dead."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells = [[False] * width for _ in range(height)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set one cell; coordinates outside the grid are ignored."""
        if self._in_bounds(x, y):
            self._cells[y][x] = alive

    def is_alive(self, x: int, y: int) -> bool:
        return self._in_bounds(x, y) and self._cells[y][x]

    def _count_neighbors(self, x: int, y: int) -> int:
        return sum(self.is_alive(x + dx, y + dy) for dx, dy in _OFFSETS)

    def _next_state(self, x: int, y: int) -> bool:
        alive = self._cells[y][x]
        if not alive:
            # Dead cells keep their state under these rules.
            return False
        return self._count_neighbors(x, y) in (2, 3)

    def update(self) -> None:
        """Advance the grid by one generation."""
        self._cells = [
            [self._next_state(x, y) for x in range(self.width)]
            for y in range(self.height)
        ]

    def render(self, framebuffer: Framebuffer) -> None:
        """Paint live cells white and dead cells black."""
        for y, row in enumerate(self._cells):
            for x, alive in enumerate(row):
                framebuffer.set_pixel(x, y, WHITE if alive else BLACK)

    def initialize_with_pattern(self, pattern: Pattern, offset_x: int, offset_y: int) -> None:
        """Bring the pattern's cells to life, shifted by the given offset."""
        for x, y in pattern_coordinates(pattern):
            self.set_cell(offset_x + x, offset_y + y, True)