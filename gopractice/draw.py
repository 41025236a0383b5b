"""Draw square frames into an image through a drawing callback."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from PIL import Image

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def draw_square(
    left: int, top: int, base: int, draw: Callable[[int, int], None] | None
) -> None:
    """Call ``draw`` for every point on the outline of a square."""
    if draw is None:
        return
    right = left + base
    bottom = top + base
    for x in range(left, right + 1):
        draw(x, top)
        draw(x, bottom)
    for y in range(top, bottom + 1):
        draw(left, y)
        draw(right, y)


def draw_squares(width: int = 300, height: int = 200) -> Image.Image:
    """Return an image with a thick red frame and a thin blue one."""
    image = Image.new("RGBA", (width, height))
    thick = False

    def set_pixel(x: int, y: int, color: tuple[int, int, int, int]) -> None:
        if 0 <= x < width and 0 <= y < height:
            image.putpixel((x, y), color)

    def frame(x: int, y: int) -> None:
        if thick:
            for x0 in range(x - 1, x + 2):
                for y0 in range(y - 1, y + 2):
                    set_pixel(x0, y0, RED)
        else:
            set_pixel(x, y, BLUE)

    thick = True
    draw_square(30, 20, 50, frame)
    thick = False
    draw_square(100, 120, 35, frame)
    return image


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write an image with two square frames.")
    parser.add_argument("output", nargs="?", default="squares.png")
    args = parser.parse_args(argv)
    try:
        draw_squares().save(args.output, "PNG")
    except OSError:
        return 1
    return 0