"""Performers and the character grid they draw into."""

from .block import Block, BlockPerformer
from .button import ButtonPerformer, split_value
from .image import save_screen, screen_to_image
from .screen import Cue, Screen, format_screen, make_screen, perform

__all__ = [
    "Block",
    "BlockPerformer",
    "ButtonPerformer",
    "Cue",
    "Screen",
    "format_screen",
    "make_screen",
    "perform",
    "save_screen",
    "screen_to_image",
    "split_value",
]
