"""
Effects Module
==============

Visual effects for the artillery game.

Classes:
    Particle - A single decaying point
    ParticleSystem - Owns and drives all live particles
    Renderer - Drawing layer with scoped alpha over a pygame surface

Palette:
    COLORS - Named neon colors
    resolve_color - Turn any color-like value into an RGB tuple
"""

from .palette import COLORS, resolve_color
from .renderer import Renderer
from .particles import Particle, ParticleSystem


__all__ = [
    'COLORS',
    'resolve_color',
    'Renderer',
    'Particle',
    'ParticleSystem',
]
