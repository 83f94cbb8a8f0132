"""
Void Artillery FX - Source Package
==================================

Visual effects and per-turn glitch events for a 2D artillery game.

Modules:
    effects/ - Particles, palette, and the drawing layer
    game/    - Game state slice and glitch events
    utils/   - Logging
"""

__version__ = "1.0.0"
