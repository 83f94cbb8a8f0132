"""
Particle System
===============

Transient decorative effects for the artillery game:
    - Explosions on projectile impact
    - Sparks for bounces and hits
    - Trails behind projectiles in flight

Motion is a plain per-frame step: gravity and velocity are applied once
per update() call and are NOT scaled by dt. Only the lifetime countdown
uses dt, so particle speed is tied to frame rate. Life drives both the
fade (alpha) and, when shrink is on, the radius.

Randomness comes from an injectable generator (anything with a
uniform(low, high) method, numpy's Generator by default) so tests can
pass a seeded or scripted source.

Example:
    >>> particles = ParticleSystem(rng=np.random.default_rng(42))
    >>> particles.explosion(x=640, y=360)
    >>> particles.update(1 / 60)
    >>> particles.draw(renderer)
"""

import math
from typing import Any, Dict, Iterator, List, Optional, Protocol, Tuple

import numpy as np

from config import Config
from .palette import COLORS, ColorLike
from .renderer import Renderer
from src.utils.logger import get_logger


_logger = get_logger(__name__)


# Defaults used when a spawn option is omitted
DEFAULT_SPEED_RANGE = (2.0, 8.0)
DEFAULT_RADIUS_RANGE = (2.0, 5.0)
DEFAULT_LIFE_RANGE = (0.5, 1.5)  # Seconds
DEFAULT_GRAVITY = 0.1
DEFAULT_FRICTION = 0.98
DEFAULT_COLOR = COLORS['white']

# Smallest radius ever drawn, so fully shrunk particles stay visible while fading
MIN_DRAW_RADIUS = 0.5


class RandomSource(Protocol):
    """Anything that can draw a uniform float, e.g. numpy.random.Generator."""

    def uniform(self, low: float, high: float) -> float:
        ...


class Particle:
    """
    A single decaying point with position, velocity, radius and lifetime.

    Any option left out (or passed as None) is filled from its default;
    ranged defaults are drawn from the random source at construction time.
    """

    def __init__(
        self,
        x: float,
        y: float,
        options: Optional[Dict[str, Any]] = None,
        rng: Optional[RandomSource] = None,
        **overrides: Any
    ):
        """
        Args:
            x: Initial X position
            y: Initial Y position
            options: Spawn options (angle, speed, color, radius, life,
                gravity, friction, shrink)
            rng: Random source for unset ranged options
            **overrides: Same keys as options, applied on top of them
        """
        opts = dict(options or {})
        opts.update(overrides)
        # Bare particles get a fresh generator; systems pass their shared one
        rng = rng if rng is not None else np.random.default_rng()

        def pick(key: str, low: float, high: float) -> float:
            value = opts.get(key)
            return float(rng.uniform(low, high)) if value is None else value

        def get(key: str, default: Any) -> Any:
            value = opts.get(key)
            return default if value is None else value

        self.x = x
        self.y = y

        # Velocity
        self.angle = pick('angle', 0.0, 2 * math.pi)
        self.speed = pick('speed', *DEFAULT_SPEED_RANGE)
        self.vx = math.cos(self.angle) * self.speed
        self.vy = math.sin(self.angle) * self.speed

        # Appearance
        self.color: ColorLike = get('color', DEFAULT_COLOR)
        self.radius = pick('radius', *DEFAULT_RADIUS_RANGE)
        self.original_radius = self.radius

        # Lifetime
        self.life = pick('life', *DEFAULT_LIFE_RANGE)
        self.max_life = self.life

        # Physics
        self.gravity = get('gravity', DEFAULT_GRAVITY)
        self.friction = get('friction', DEFAULT_FRICTION)
        self.shrink = bool(get('shrink', True))

        self.dead = False

    @property
    def life_fraction(self) -> float:
        """Remaining life over initial life; 0 when max_life is 0."""
        return self.life / self.max_life if self.max_life else 0.0

    def update(self, dt: float) -> None:
        """
        Advance one frame.

        Args:
            dt: Elapsed seconds; only the lifetime uses it
        """
        self.vy += self.gravity

        self.vx *= self.friction
        self.vy *= self.friction

        self.x += self.vx
        self.y += self.vy

        self.life -= dt

        # Radius may go negative here; draw() clamps it
        if self.shrink:
            self.radius = self.original_radius * self.life_fraction

        if self.life <= 0 or self.radius <= 0:
            self.dead = True

    def draw(self, renderer: Renderer) -> None:
        """Draw as a filled disk faded by remaining life."""
        alpha = max(0.0, self.life_fraction)
        with renderer.alpha(alpha):
            renderer.draw_circle(self.x, self.y, max(MIN_DRAW_RADIUS, self.radius), self.color)

    def __repr__(self) -> str:
        state = 'dead' if self.dead else 'alive'
        return (
            f"Particle(x={self.x:.1f}, y={self.y:.1f}, "
            f"life={self.life:.2f}/{self.max_life:.2f}, {state})"
        )


class ParticleSystem:
    """
    Owns every live particle of a game session.

    One instance per session, created by the game and handed to whatever
    needs to spawn or draw effects.

    Features:
        - Generic spawn/burst plus explosion, sparks and trail presets
        - Dead particles removed on every update
        - Optional particle cap (oldest dropped first)
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        max_particles: Optional[int] = None,
        config: Optional[Config] = None
    ):
        """
        Args:
            rng: Random source shared by every spawned particle
            max_particles: Cap on live particles (None = unbounded)
            config: Preset ranges; defaults to Config()
        """
        self.config = config or Config()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.SEED)
        self.max_particles = max_particles
        self.particles: List[Particle] = []

    @classmethod
    def from_config(cls, config: Config) -> 'ParticleSystem':
        """Build a system using the config's seed, cap and presets."""
        return cls(
            rng=np.random.default_rng(config.SEED),
            max_particles=config.MAX_PARTICLES,
            config=config,
        )

    # -------------------------------------------------------------------------
    # Spawning
    # -------------------------------------------------------------------------

    def spawn(
        self,
        x: float,
        y: float,
        options: Optional[Dict[str, Any]] = None,
        **overrides: Any
    ) -> Particle:
        """Create one particle and add it to the system."""
        particle = Particle(x, y, options, rng=self.rng, **overrides)
        self._add_particle(particle)
        return particle

    def burst(
        self,
        x: float,
        y: float,
        count: int,
        options: Optional[Dict[str, Any]] = None,
        **overrides: Any
    ) -> List[Particle]:
        """
        Spawn count particles sharing the same options.

        Options left unset are re-rolled for every particle.
        """
        return [self.spawn(x, y, options, **overrides) for _ in range(count)]

    def explosion(
        self,
        x: float,
        y: float,
        count: Optional[int] = None,
        color: Optional[ColorLike] = None
    ) -> None:
        """
        Outward burst for projectile impacts.

        Args:
            x: Center X
            y: Center Y
            count: Number of particles (default 50)
            color: Particle color (default white)
        """
        cfg = self.config
        count = cfg.EXPLOSION_COUNT if count is None else count
        color = COLORS[cfg.COLOR_EXPLOSION] if color is None else color

        for _ in range(count):
            self.spawn(x, y, {
                'color': color,
                'speed': self._uniform(cfg.EXPLOSION_SPEED_RANGE),
                'radius': self._uniform(cfg.EXPLOSION_RADIUS_RANGE),
                'life': self._uniform(cfg.EXPLOSION_LIFE_RANGE),
                'gravity': cfg.EXPLOSION_GRAVITY,
                'friction': cfg.EXPLOSION_FRICTION,
            })
        _logger.debug(f"Explosion at ({x:.0f}, {y:.0f}): {count} particles, total={self.count}")

    def sparks(
        self,
        x: float,
        y: float,
        count: Optional[int] = None,
        color: Optional[ColorLike] = None
    ) -> None:
        """
        Small spark burst for bounces and hits.

        Args:
            x: Center X
            y: Center Y
            count: Number of particles (default 10)
            color: Particle color (default yellow)
        """
        cfg = self.config
        count = cfg.SPARKS_COUNT if count is None else count
        color = COLORS[cfg.COLOR_SPARKS] if color is None else color

        for _ in range(count):
            self.spawn(x, y, {
                'color': color,
                'speed': self._uniform(cfg.SPARKS_SPEED_RANGE),
                'radius': self._uniform(cfg.SPARKS_RADIUS_RANGE),
                'life': self._uniform(cfg.SPARKS_LIFE_RANGE),
                'gravity': cfg.SPARKS_GRAVITY,
                'friction': cfg.SPARKS_FRICTION,
            })

    def trail(self, x: float, y: float, color: Optional[ColorLike] = None) -> Particle:
        """Single slow particle drifting mostly downward (screen coordinates)."""
        cfg = self.config
        color = COLORS[cfg.COLOR_TRAIL] if color is None else color
        spread = cfg.TRAIL_ANGLE_SPREAD

        return self.spawn(x, y, {
            'color': color,
            'speed': self._uniform(cfg.TRAIL_SPEED_RANGE),
            'angle': math.pi / 2 + self._uniform((-spread, spread)),
            'radius': self._uniform(cfg.TRAIL_RADIUS_RANGE),
            'life': self._uniform(cfg.TRAIL_LIFE_RANGE),
            'gravity': cfg.TRAIL_GRAVITY,
            'friction': cfg.TRAIL_FRICTION,
        })

    # -------------------------------------------------------------------------
    # Frame loop
    # -------------------------------------------------------------------------

    def update(self, dt: float) -> None:
        """Update all particles and remove dead ones."""
        for particle in self.particles:
            particle.update(dt)
        self.particles = [p for p in self.particles if not p.dead]

    def draw(self, renderer: Renderer) -> None:
        """Draw all particles in collection order."""
        for particle in self.particles:
            particle.draw(renderer)

    def clear(self) -> None:
        """Remove all particles."""
        if self.particles:
            _logger.debug(f"Cleared {len(self.particles)} particles")
        self.particles = []

    @property
    def count(self) -> int:
        """Number of live particles."""
        return len(self.particles)

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _uniform(self, bounds: Tuple[float, float]) -> float:
        low, high = bounds
        return float(self.rng.uniform(low, high))

    def _add_particle(self, particle: Particle) -> None:
        """Add a particle, dropping the oldest ones if the cap is reached."""
        if self.max_particles is not None and len(self.particles) >= self.max_particles:
            overflow = len(self.particles) - self.max_particles + 1
            del self.particles[:overflow]
        self.particles.append(particle)
