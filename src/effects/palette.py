"""
Color Palette
=============

Neon colors shared by the game renderer and the effect presets.

Colors are stored as RGB tuples. Anything that accepts a color also
accepts a palette name, a '#rrggbb' string, or a pygame.Color; use
resolve_color() to turn any of those into an RGB tuple at draw time.
"""

from typing import Dict, Tuple, Union

import pygame


RGB = Tuple[int, int, int]
ColorLike = Union[str, Tuple[int, ...], pygame.Color]


COLORS: Dict[str, RGB] = {
    'cyan': (0, 255, 255),
    'magenta': (255, 0, 255),
    'yellow': (255, 255, 0),
    'white': (255, 255, 255),
    'void_purple': (26, 0, 51),
    'black': (0, 0, 0),
    'green': (0, 255, 0),
    'orange': (255, 136, 0),
}


def resolve_color(value: ColorLike) -> RGB:
    """
    Convert a color-like value to an RGB tuple.

    Args:
        value: Palette name, hex string, RGB(A) tuple, or pygame.Color

    Returns:
        (r, g, b) tuple

    Raises:
        ValueError: If the value is a string pygame does not recognize
    """
    if isinstance(value, str) and value in COLORS:
        return COLORS[value]
    color = pygame.Color(value)
    return (color.r, color.g, color.b)
