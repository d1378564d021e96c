"""An off-screen RGBA pixel buffer that can be shown in a window or saved."""

from __future__ import annotations

from PIL import Image

Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)


def _rgba(color: tuple[int, ...]) -> Color:
    if len(color) == 3:
        return (color[0], color[1], color[2], 255)
    if len(color) == 4:
        return (color[0], color[1], color[2], color[3])
    raise ValueError(f"colour must have 3 or 4 components, got {len(color)}")


class Framebuffer:
    """A fixed-size image buffer with bounds-checked pixel writes."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.color_buffer = Image.new("RGBA", (width, height), BLACK)
        self.background_color: Color = BLACK
        self.current_color: Color = WHITE

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: tuple[int, ...]) -> None:
        """Paint one pixel; coordinates outside the buffer are ignored."""
        if self._in_bounds(x, y):
            self.color_buffer.putpixel((x, y), _rgba(color))

    def pixel_at(self, x: int, y: int) -> Color:
        """Return the colour of one pixel."""
        if not self._in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside {self.width}x{self.height}")
        return _rgba(self.color_buffer.getpixel((x, y)))

    def set_background_color(self, color: tuple[int, ...]) -> None:
        self.background_color = _rgba(color)

    def render_to_file(self, file_path) -> None:
        """Write the buffer to an image file; the format follows the extension."""
        self.color_buffer.save(file_path)

    def present(self, surface, scale: float) -> None:
        """Draw the buffer onto a pygame surface, scaled from the top-left corner."""
        import pygame

        surface.fill(BLACK[:3])
        source = pygame.image.frombuffer(
            self.color_buffer.tobytes(), (self.width, self.height), "RGBA"
        )
        size = (int(self.width * scale), int(self.height * scale))
        surface.blit(pygame.transform.scale(source, size), (0, 0))
        if pygame.display.get_init() and surface is pygame.display.get_surface():
            pygame.display.flip()