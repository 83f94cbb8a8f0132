"""
Game Module
===========

The parts of artillery game state that effects interact with.

Classes:
    GameState - Gravity, players and glitch bookkeeping
    Player - A tank and its owner
    GlitchEvent - One entry of the glitch table
    GlitchEventSystem - Rolls, applies and reverts per-turn glitches
"""

from .state import GameState, Player, TANK_TYPES, DEFAULT_GRAVITY
from .events import GlitchEvent, GlitchEventSystem, GLITCH_EVENTS


__all__ = [
    'GameState',
    'Player',
    'TANK_TYPES',
    'DEFAULT_GRAVITY',
    'GlitchEvent',
    'GlitchEventSystem',
    'GLITCH_EVENTS',
]
