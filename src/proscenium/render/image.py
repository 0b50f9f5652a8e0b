"""Export a character grid to an image."""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from .screen import Screen


def screen_to_image(
    screen: Screen,
    cell: tuple[int, int] = (8, 16),
    foreground: tuple[int, int, int] = (20, 20, 20),
    background: tuple[int, int, int] = (245, 245, 240),
) -> Image.Image:
    """Draw every non-blank cell of the screen into an RGB image.

    Args:
        screen: The grid to draw
        cell: Size of one character cell in pixels (width, height)
        foreground: Text color
        background: Fill color

    Returns:
        PIL Image of size (width * cell_w, height * cell_h)
    """
    cell_w, cell_h = cell
    img = Image.new("RGB", (max(screen.width, 1) * cell_w, max(screen.height, 1) * cell_h), background)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for row_idx, row in enumerate(screen.rows()):
        for col_idx, char in enumerate(row):
            if char != " ":
                draw.text((col_idx * cell_w, row_idx * cell_h), char, fill=foreground, font=font)

    return img


def save_screen(screen: Screen, path: str | Path, **kwargs) -> Path:
    """Render the screen to an image file. Format follows the file extension."""
    path = Path(path)
    screen_to_image(screen, **kwargs).save(str(path))
    return path
