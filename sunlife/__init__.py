"""A bounded cellular automaton seeded with a sun pattern, with window display and GIF recording."""

__version__ = "0.1.0"
__all__ = ["patterns", "framebuffer", "game_of_life", "app"]