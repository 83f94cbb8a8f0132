"""
Configuration file for Void Artillery FX
========================================

All particle presets, glitch event tuning, and demo window options are
centralized here. Modify these values to experiment with different effects.

Usage:
    from config import Config
    cfg = Config()
    print(cfg.EXPLOSION_COUNT)
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class Config:
    """
    Central configuration for the entire project.

    Sections:
    1. Screen Settings - Demo window
    2. Palette - Named colors used as effect defaults
    3. Presets - Explosion, sparks, and trail ranges
    4. Glitch Events - Per-turn modifier tuning
    5. System - Logging, seeding, limits
    """

    # =========================================================================
    # SCREEN SETTINGS
    # =========================================================================

    SCREEN_WIDTH: int = 1280
    SCREEN_HEIGHT: int = 720
    FPS: int = 60

    # =========================================================================
    # PALETTE
    # =========================================================================

    # Named effect colors live in src/effects/palette.py; these pick from it
    COLOR_BACKGROUND: str = 'void_purple'
    COLOR_EXPLOSION: str = 'white'
    COLOR_SPARKS: str = 'yellow'
    COLOR_TRAIL: str = 'cyan'

    # =========================================================================
    # PRESETS
    # =========================================================================

    # Explosion - big outward burst on projectile impact
    EXPLOSION_COUNT: int = 50
    EXPLOSION_SPEED_RANGE: Tuple[float, float] = (3.0, 12.0)
    EXPLOSION_RADIUS_RANGE: Tuple[float, float] = (2.0, 6.0)
    EXPLOSION_LIFE_RANGE: Tuple[float, float] = (0.3, 1.0)
    EXPLOSION_GRAVITY: float = 0.15
    EXPLOSION_FRICTION: float = 0.96

    # Sparks - small burst for bounces and hits
    SPARKS_COUNT: int = 10
    SPARKS_SPEED_RANGE: Tuple[float, float] = (2.0, 6.0)
    SPARKS_RADIUS_RANGE: Tuple[float, float] = (1.0, 3.0)
    SPARKS_LIFE_RANGE: Tuple[float, float] = (0.2, 0.5)
    SPARKS_GRAVITY: float = 0.05
    SPARKS_FRICTION: float = 0.95

    # Trail - single particle drifting mostly downward behind a projectile
    TRAIL_SPEED_RANGE: Tuple[float, float] = (0.5, 1.5)
    TRAIL_ANGLE_SPREAD: float = 0.3  # Radians either side of straight down
    TRAIL_RADIUS_RANGE: Tuple[float, float] = (2.0, 4.0)
    TRAIL_LIFE_RANGE: Tuple[float, float] = (0.2, 0.4)
    TRAIL_GRAVITY: float = 0.0
    TRAIL_FRICTION: float = 0.9

    # =========================================================================
    # GLITCH EVENTS
    # =========================================================================

    # Chance that a glitch triggers at the start of a turn
    GLITCH_TRIGGER_CHANCE: float = 0.3

    # Sparks burst shown when a glitch is applied
    GLITCH_FEEDBACK_COUNT: int = 30

    # =========================================================================
    # SYSTEM SETTINGS
    # =========================================================================

    # Particle cap (None = unbounded)
    MAX_PARTICLES: Optional[int] = None

    # Logging
    LOG_DIR: str = 'logs'
    LOG_LEVEL: str = 'INFO'
    LOG_TO_FILE: bool = False

    # Random seed for the effect generator (None for random)
    SEED: Optional[int] = None

    def __post_init__(self):
        """Validation."""
        assert self.SCREEN_WIDTH > 0 and self.SCREEN_HEIGHT > 0, "Screen size must be positive"
        assert self.FPS > 0, "FPS must be positive"
        for name in ('EXPLOSION', 'SPARKS', 'TRAIL'):
            for kind in ('SPEED', 'RADIUS', 'LIFE'):
                low, high = getattr(self, f'{name}_{kind}_RANGE')
                assert low <= high, f"{name}_{kind}_RANGE must be (low, high)"
        assert self.EXPLOSION_COUNT >= 0, "Explosion count must be non-negative"
        assert self.SPARKS_COUNT >= 0, "Sparks count must be non-negative"
        assert 0 <= self.GLITCH_TRIGGER_CHANCE <= 1, "Glitch trigger chance must be in [0, 1]"
        assert self.MAX_PARTICLES is None or self.MAX_PARTICLES > 0, "MAX_PARTICLES must be positive or None"
        assert self.LOG_LEVEL in ('DEBUG', 'INFO', 'WARNING', 'ERROR'), "Unknown LOG_LEVEL"


# Global config instance for easy importing
config = Config()


if __name__ == "__main__":
    # Print configuration summary
    cfg = Config()
    print("=" * 60)
    print("Void Artillery FX - Configuration Summary")
    print("=" * 60)
    print(f"\nScreen: {cfg.SCREEN_WIDTH}x{cfg.SCREEN_HEIGHT} @ {cfg.FPS} FPS")
    print(f"\nExplosion: {cfg.EXPLOSION_COUNT} particles, speed {cfg.EXPLOSION_SPEED_RANGE}")
    print(f"Sparks: {cfg.SPARKS_COUNT} particles, speed {cfg.SPARKS_SPEED_RANGE}")
    print(f"Trail: speed {cfg.TRAIL_SPEED_RANGE}, spread {cfg.TRAIL_ANGLE_SPREAD}")
    print(f"\nGlitch chance: {cfg.GLITCH_TRIGGER_CHANCE:.0%}")
    print(f"Max particles: {cfg.MAX_PARTICLES or 'unbounded'}")
    print("=" * 60)
