"""
Renderer
========

Thin drawing layer over a pygame surface.

Effects never touch pygame directly: they ask the renderer for a filled
circle and wrap translucent draws in an alpha block:

    >>> renderer = Renderer(screen)
    >>> with renderer.alpha(0.5):
    ...     renderer.draw_circle(100, 100, 4, 'cyan')

The alpha block always restores the previous opacity, even when the draw
inside it raises.
"""

from contextlib import contextmanager
from typing import Iterator

import pygame

from .palette import ColorLike, resolve_color


class Renderer:
    """Draws primitives onto a pygame surface with a scoped global alpha."""

    def __init__(self, surface: pygame.Surface):
        """
        Args:
            surface: Target surface (usually the display surface)
        """
        self.surface = surface
        self._alpha = 1.0

    @property
    def global_alpha(self) -> float:
        """Current opacity in [0, 1]."""
        return self._alpha

    @contextmanager
    def alpha(self, value: float) -> Iterator['Renderer']:
        """
        Temporarily set the global opacity.

        Args:
            value: Opacity, clamped to [0, 1]
        """
        previous = self._alpha
        self._alpha = min(1.0, max(0.0, float(value)))
        try:
            yield self
        finally:
            self._alpha = previous

    def clear(self, color: ColorLike = 'black') -> None:
        """Fill the whole surface."""
        self.surface.fill(resolve_color(color))

    def draw_circle(
        self,
        x: float,
        y: float,
        radius: float,
        color: ColorLike,
        fill: bool = True
    ) -> None:
        """
        Draw a circle using the current global alpha.

        Args:
            x: Center X
            y: Center Y
            radius: Circle radius (sub-pixel radii round up to 1)
            color: Any color accepted by resolve_color()
            fill: Filled disk if True, 1px ring otherwise
        """
        if self._alpha <= 0:
            return

        rgb = resolve_color(color)
        r = max(1, int(round(radius)))
        width = 0 if fill else 1

        if self._alpha >= 1.0:
            pygame.draw.circle(self.surface, rgb, (int(x), int(y)), r, width)
            return

        # Translucent: draw into a scratch surface covering only the visible
        # part of the circle, then blit it in place
        cx, cy = int(x), int(y)
        bounds = pygame.Rect(cx - r - 1, cy - r - 1, r * 2 + 2, r * 2 + 2)
        visible = bounds.clip(self.surface.get_rect())
        if visible.width == 0 or visible.height == 0:
            return

        scratch = pygame.Surface(visible.size, pygame.SRCALPHA)
        pygame.draw.circle(
            scratch, (*rgb, int(255 * self._alpha)),
            (cx - visible.x, cy - visible.y), r, width
        )
        self.surface.blit(scratch, visible.topleft)
