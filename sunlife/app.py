"""Windowed sun-pattern simulation that records its first generations to a GIF."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from PIL import Image

from .framebuffer import Framebuffer
from .game_of_life import GameOfLife
from .patterns import create_sun_pattern

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
GAME_WIDTH = 80
GAME_HEIGHT = 60
TARGET_FPS = 60
UPDATE_RATE = 8
MAX_GIF_FRAMES = 300
DEFAULT_OUTPUT = "conway_sun.gif"

_PALETTE = [0, 0, 0, 255, 255, 255]


def setup_sun_pattern(game: GameOfLife) -> None:
    """Place the sun pattern at its default offset."""
    pattern, x, y = create_sun_pattern()
    game.initialize_with_pattern(pattern, x, y)


def create_gif_frame(game: GameOfLife) -> bytes:
    """Return row-major palette indices: 1 for a live cell, 0 for a dead one."""
    return bytes(
        int(game.is_alive(x, y)) for y in range(game.height) for x in range(game.width)
    )


def _frame_image(game: GameOfLife) -> Image.Image:
    image = Image.frombytes("P", (game.width, game.height), create_gif_frame(game))
    image.putpalette(_PALETTE)
    return image


def _save_gif(images: list[Image.Image], path) -> None:
    first, *rest = images
    first.save(path, format="GIF", save_all=True, append_images=rest, loop=0, optimize=False)


def record_gif(game: GameOfLife, path, frames: int) -> int:
    """Advance the game ``frames`` times, saving each generation as a GIF frame."""
    if frames < 1:
        raise ValueError("at least one frame is required")
    images = []
    for _ in range(frames):
        game.update()
        images.append(_frame_image(game))
    _save_gif(images, path)
    return len(images)


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Run the sun pattern and record it as a GIF.")
    parser.add_argument("--output", type=Path, default=Path(DEFAULT_OUTPUT))
    parser.add_argument("--frames", type=int, default=MAX_GIF_FRAMES)
    args = parser.parse_args(argv)
    if args.frames < 1:
        parser.error("--frames must be at least 1")
    return args


def main(argv=None) -> int:
    args = _parse_args(argv)

    import pygame

    scale = min(WINDOW_WIDTH / GAME_WIDTH, WINDOW_HEIGHT / GAME_HEIGHT)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Conway's Game of Life")
        clock = pygame.time.Clock()

        framebuffer = Framebuffer(GAME_WIDTH, GAME_HEIGHT)
        game = GameOfLife(GAME_WIDTH, GAME_HEIGHT)
        setup_sun_pattern(game)

        images: list[Image.Image] = []
        frame_counter = 0
        closed = False
        while not closed:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break

            if frame_counter % UPDATE_RATE == 0:
                game.update()
                if len(images) < args.frames:
                    images.append(_frame_image(game))
                    if len(images) >= args.frames:
                        time.sleep(3)
                        break

            framebuffer.set_background_color((0, 0, 0))
            game.render(framebuffer)
            framebuffer.present(screen, scale)
            clock.tick(TARGET_FPS)
            frame_counter += 1

        if images:
            _save_gif(images, args.output)
    finally:
        pygame.quit()
    return 0