"""
Glitch Events
=============

Per-turn random modifiers for the artillery game.

At the start of each turn there is a GLITCH_TRIGGER_CHANCE (30%) chance
that one of five glitches is picked uniformly and applied to the game
state. Glitches that overwrite a value (gravity, tank type) stash the
original on the state and put it back when reverted; health glitches are
permanent and their revert does nothing.

Example:
    >>> glitches = GlitchEventSystem(rng=np.random.default_rng(), particles=particles)
    >>> event = glitches.on_turn_start(state)
    >>> if event:
    ...     print(event.name)
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from config import Config
from src.effects.particles import ParticleSystem
from src.utils.logger import get_logger
from .state import GameState, TANK_TYPES


_logger = get_logger(__name__)


HEAL_AMOUNT = 25
TAX_AMOUNT = 10
GRAVITY_FLUX_RANGE = (0.5, 2.0)  # Multiplier on current gravity


@dataclass(frozen=True)
class GlitchEvent:
    """One entry of the glitch table."""
    name: str
    color: str
    description: str
    apply: Callable[[GameState, np.random.Generator], None]
    revert: Callable[[GameState], None]


# =============================================================================
# EFFECT HANDLERS
# =============================================================================

def _stash_gravity(state: GameState) -> None:
    if state.original_gravity is None:
        state.original_gravity = state.gravity


def _restore_gravity(state: GameState) -> None:
    if state.original_gravity is not None:
        state.gravity = state.original_gravity
        state.original_gravity = None


def _apply_gravity_flux(state: GameState, rng) -> None:
    _stash_gravity(state)
    state.gravity = state.original_gravity * float(rng.uniform(*GRAVITY_FLUX_RANGE))


def _apply_low_gravity(state: GameState, rng) -> None:
    _stash_gravity(state)
    state.gravity = state.original_gravity * 0.5


def _apply_arsenal_glitch(state: GameState, rng) -> None:
    player = state.player
    if state.original_tank_type is None:
        state.original_tank_type = player.tank_type
        state.glitched_player = state.current_player
    choices = [t for t in TANK_TYPES if t != player.tank_type]
    player.tank_type = choices[int(rng.integers(len(choices)))]


def _revert_arsenal_glitch(state: GameState) -> None:
    if state.original_tank_type is not None:
        state.players[state.glitched_player].tank_type = state.original_tank_type
        state.original_tank_type = None
        state.glitched_player = None


def _apply_vital_surge(state: GameState, rng) -> None:
    for player in state.players:
        if player.alive:
            player.health = min(player.max_health, player.health + HEAL_AMOUNT)


def _apply_void_tax(state: GameState, rng) -> None:
    for player in state.players:
        if player.alive:
            player.health = max(1, player.health - TAX_AMOUNT)


def _permanent(state: GameState) -> None:
    pass


GLITCH_EVENTS: List[GlitchEvent] = [
    GlitchEvent(
        name='GRAVITY FLUX',
        color='#aa00ff',
        description='Gravity scrambled for the round',
        apply=_apply_gravity_flux,
        revert=_restore_gravity,
    ),
    GlitchEvent(
        name='LOW GRAVITY',
        color='#00ffff',
        description='Gravity halved for the round',
        apply=_apply_low_gravity,
        revert=_restore_gravity,
    ),
    GlitchEvent(
        name='ARSENAL GLITCH',
        color='#ff8800',
        description='Current tank swaps to a random type',
        apply=_apply_arsenal_glitch,
        revert=_revert_arsenal_glitch,
    ),
    GlitchEvent(
        name='VITAL SURGE',
        color='#00ff00',
        description=f'All tanks heal {HEAL_AMOUNT} HP',
        apply=_apply_vital_surge,
        revert=_permanent,
    ),
    GlitchEvent(
        name='VOID TAX',
        color='#ff00ff',
        description=f'All tanks lose {TAX_AMOUNT} HP (never lethal)',
        apply=_apply_void_tax,
        revert=_permanent,
    ),
]


# =============================================================================
# EVENT SYSTEM
# =============================================================================

class GlitchEventSystem:
    """
    Rolls, applies and reverts glitch events.

    At most one glitch is active at a time. When a particle system is
    attached, applying a glitch fires a sparks burst in the glitch color.
    """

    def __init__(
        self,
        rng=None,
        trigger_chance: Optional[float] = None,
        particles: Optional[ParticleSystem] = None,
        config: Optional[Config] = None,
        feedback_position: Optional[Tuple[float, float]] = None
    ):
        """
        Args:
            rng: Random source with random(), integers() and uniform()
            trigger_chance: Per-turn trigger probability (default 0.3)
            particles: Optional particle system for visual feedback
            config: Source of defaults; Config() if omitted
            feedback_position: Where feedback sparks appear (default:
                horizontal center, upper third of the screen)
        """
        self.config = config or Config()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.SEED)
        self.trigger_chance = (
            self.config.GLITCH_TRIGGER_CHANCE if trigger_chance is None else trigger_chance
        )
        self.particles = particles
        self.feedback_position = feedback_position or (
            self.config.SCREEN_WIDTH / 2, self.config.SCREEN_HEIGHT / 3
        )
        self._active: Optional[GlitchEvent] = None

    @property
    def active_event(self) -> Optional[GlitchEvent]:
        """The glitch currently in effect, if any."""
        return self._active

    @staticmethod
    def all_events() -> List[GlitchEvent]:
        """Every glitch in the table (for debugging/UI)."""
        return list(GLITCH_EVENTS)

    def roll_for_event(self) -> Optional[GlitchEvent]:
        """
        Roll for this turn's glitch.

        Returns:
            A uniformly chosen glitch with probability trigger_chance,
            otherwise None
        """
        if float(self.rng.random()) >= self.trigger_chance:
            return None
        return GLITCH_EVENTS[int(self.rng.integers(len(GLITCH_EVENTS)))]

    def apply_event(self, state: GameState, event: GlitchEvent) -> None:
        """Apply a glitch, reverting any glitch still active first."""
        if self._active is not None:
            self.revert_event(state)

        event.apply(state, self.rng)
        self._active = event
        state.active_event = event.name
        _logger.info(f"Glitch applied: {event.name} ({event.description})")

        if self.particles is not None:
            x, y = self.feedback_position
            self.particles.sparks(x, y, self.config.GLITCH_FEEDBACK_COUNT, event.color)

    def revert_event(self, state: GameState) -> None:
        """Undo the active glitch, if any. Safe to call repeatedly."""
        if self._active is None:
            return
        self._active.revert(state)
        _logger.info(f"Glitch reverted: {self._active.name}")
        self._active = None
        state.active_event = None

    def on_turn_start(self, state: GameState) -> Optional[GlitchEvent]:
        """
        Revert last turn's glitch and roll a new one.

        Returns:
            The glitch applied this turn, or None
        """
        self.revert_event(state)
        event = self.roll_for_event()
        if event is not None:
            self.apply_event(state, event)
        return event
