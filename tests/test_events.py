"""
Tests for glitch events and the game state slice.

These tests verify:
    - The 30% trigger roll and uniform pick
    - Each glitch's effect and revert
    - One active glitch at a time
    - Particle feedback on apply
"""

import numpy as np
import pytest

from src.effects.particles import ParticleSystem
from src.game.events import GLITCH_EVENTS, GlitchEventSystem, HEAL_AMOUNT, TAX_AMOUNT
from src.game.state import DEFAULT_GRAVITY, TANK_TYPES, GameState
from tests.conftest import ScriptedRng


def event_named(name):
    return next(e for e in GLITCH_EVENTS if e.name == name)


@pytest.fixture
def state():
    """Fresh two-player game."""
    return GameState.new_game()


class TestGameState:
    """Test the state helpers."""

    def test_new_game_defaults(self, state):
        """New games start with default gravity and full health."""
        assert state.gravity == DEFAULT_GRAVITY
        assert len(state.players) == 2
        assert all(p.health == 100 for p in state.players)
        assert state.active_event is None

    def test_advance_turn_skips_dead(self):
        """Dead players are skipped."""
        state = GameState.new_game(3)
        state.players[1].health = 0
        assert state.advance_turn() is state.players[2]
        assert state.turn_count == 1


class TestRoll:
    """Test the per-turn roll."""

    def test_table_has_five_entries(self):
        """There are exactly five glitches."""
        assert len(GlitchEventSystem.all_events()) == 5

    def test_roll_below_chance_triggers(self):
        """A draw under the trigger chance picks a glitch."""
        glitches = GlitchEventSystem(rng=ScriptedRng(randoms=[0.29], integers=[3]))
        assert glitches.roll_for_event() is GLITCH_EVENTS[3]

    def test_roll_at_or_above_chance_skips(self):
        """A draw at or above the trigger chance means no glitch."""
        glitches = GlitchEventSystem(rng=ScriptedRng(randoms=[0.3, 0.9]))
        assert glitches.roll_for_event() is None
        assert glitches.roll_for_event() is None

    def test_trigger_rate_near_thirty_percent(self):
        """Over many turns roughly 30% trigger."""
        glitches = GlitchEventSystem(rng=np.random.default_rng(11))
        hits = sum(glitches.roll_for_event() is not None for _ in range(5000))
        assert 0.27 < hits / 5000 < 0.33

    def test_custom_trigger_chance(self):
        """Chance 1.0 always triggers, 0.0 never does."""
        always = GlitchEventSystem(rng=np.random.default_rng(0), trigger_chance=1.0)
        never = GlitchEventSystem(rng=np.random.default_rng(0), trigger_chance=0.0)
        assert all(always.roll_for_event() is not None for _ in range(50))
        assert all(never.roll_for_event() is None for _ in range(50))


class TestGlitchEffects:
    """Test each glitch's apply and revert."""

    def test_gravity_flux(self, state):
        """Gravity scaled within range, then restored exactly."""
        glitches = GlitchEventSystem(rng=ScriptedRng(fractions=[1.0]))
        glitches.apply_event(state, event_named('GRAVITY FLUX'))
        assert state.gravity == pytest.approx(DEFAULT_GRAVITY * 2.0)
        assert state.original_gravity == DEFAULT_GRAVITY
        glitches.revert_event(state)
        assert state.gravity == DEFAULT_GRAVITY
        assert state.original_gravity is None

    def test_low_gravity(self, state):
        """Gravity halved, then restored."""
        glitches = GlitchEventSystem(rng=ScriptedRng())
        glitches.apply_event(state, event_named('LOW GRAVITY'))
        assert state.gravity == pytest.approx(DEFAULT_GRAVITY / 2)
        glitches.revert_event(state)
        assert state.gravity == DEFAULT_GRAVITY

    def test_arsenal_glitch(self, state):
        """Current tank gets a different type, restored on revert."""
        glitches = GlitchEventSystem(rng=ScriptedRng(integers=[1]))
        original = state.player.tank_type
        glitches.apply_event(state, event_named('ARSENAL GLITCH'))
        assert state.player.tank_type != original
        assert state.player.tank_type in TANK_TYPES
        glitches.revert_event(state)
        assert state.player.tank_type == original

    def test_arsenal_revert_after_turn_change(self, state):
        """Revert restores the tank that was glitched, not the current one."""
        glitches = GlitchEventSystem(rng=ScriptedRng())
        glitches.apply_event(state, event_named('ARSENAL GLITCH'))
        glitched = state.player
        state.advance_turn()
        glitches.revert_event(state)
        assert glitched.tank_type == 'SIEGE'
        assert state.player.tank_type == 'SIEGE'

    def test_vital_surge_caps_health(self, state):
        """Heal is capped at max health and skips the dead."""
        state.players[0].health = 90
        state.players[1].health = 0
        glitches = GlitchEventSystem(rng=ScriptedRng())
        glitches.apply_event(state, event_named('VITAL SURGE'))
        assert state.players[0].health == 100
        assert state.players[1].health == 0

        state.players[0].health = 50
        glitches.apply_event(state, event_named('VITAL SURGE'))
        assert state.players[0].health == 50 + HEAL_AMOUNT

    def test_void_tax_never_lethal(self, state):
        """Tax floors at 1 HP and is permanent."""
        state.players[0].health = 5
        glitches = GlitchEventSystem(rng=ScriptedRng())
        glitches.apply_event(state, event_named('VOID TAX'))
        assert state.players[0].health == 1
        assert state.players[1].health == 100 - TAX_AMOUNT
        glitches.revert_event(state)
        assert state.players[1].health == 100 - TAX_AMOUNT


class TestEventSystem:
    """Test active-event bookkeeping."""

    def test_apply_records_active(self, state):
        """Applying sets the active glitch on system and state."""
        glitches = GlitchEventSystem(rng=ScriptedRng())
        event = event_named('LOW GRAVITY')
        glitches.apply_event(state, event)
        assert glitches.active_event is event
        assert state.active_event == 'LOW GRAVITY'

    def test_apply_reverts_previous(self, state):
        """A new glitch reverts the one still active."""
        glitches = GlitchEventSystem(rng=ScriptedRng())
        glitches.apply_event(state, event_named('LOW GRAVITY'))
        glitches.apply_event(state, event_named('ARSENAL GLITCH'))
        assert state.gravity == DEFAULT_GRAVITY
        assert glitches.active_event.name == 'ARSENAL GLITCH'

    def test_stacked_gravity_glitches_restore_baseline(self, state):
        """Two gravity glitches in a row still revert to the baseline."""
        glitches = GlitchEventSystem(rng=ScriptedRng())
        glitches.apply_event(state, event_named('LOW GRAVITY'))
        glitches.apply_event(state, event_named('GRAVITY FLUX'))
        glitches.revert_event(state)
        assert state.gravity == DEFAULT_GRAVITY

    def test_revert_is_idempotent(self, state):
        """Reverting with nothing active is a no-op."""
        glitches = GlitchEventSystem(rng=ScriptedRng())
        glitches.revert_event(state)
        glitches.apply_event(state, event_named('LOW GRAVITY'))
        glitches.revert_event(state)
        glitches.revert_event(state)
        assert state.gravity == DEFAULT_GRAVITY
        assert state.active_event is None
        assert glitches.active_event is None

    def test_on_turn_start_rolls_and_applies(self, state):
        """A triggering roll applies the picked glitch."""
        glitches = GlitchEventSystem(rng=ScriptedRng(randoms=[0.1], integers=[1]))
        event = glitches.on_turn_start(state)
        assert event is GLITCH_EVENTS[1]
        assert state.active_event == event.name

    def test_on_turn_start_reverts_when_no_roll(self, state):
        """A quiet turn still clears last turn's glitch."""
        glitches = GlitchEventSystem(rng=ScriptedRng(randoms=[0.1, 0.99], integers=[1]))
        glitches.on_turn_start(state)
        assert glitches.on_turn_start(state) is None
        assert state.gravity == DEFAULT_GRAVITY
        assert state.active_event is None

    def test_feedback_sparks(self, state):
        """An attached particle system gets a sparks burst in the glitch color."""
        particles = ParticleSystem(rng=np.random.default_rng(0))
        glitches = GlitchEventSystem(
            rng=ScriptedRng(), particles=particles, feedback_position=(50, 60)
        )
        event = event_named('VOID TAX')
        glitches.apply_event(state, event)
        assert particles.count == glitches.config.GLITCH_FEEDBACK_COUNT
        assert all(p.color == event.color for p in particles)
        assert all((p.x, p.y) == (50, 60) for p in particles)

    def test_apply_logs(self, state, caplog):
        """Applying and reverting are logged at INFO."""
        glitches = GlitchEventSystem(rng=ScriptedRng())
        with caplog.at_level('INFO', logger='vfx'):
            glitches.apply_event(state, event_named('LOW GRAVITY'))
            glitches.revert_event(state)
        assert 'Glitch applied: LOW GRAVITY' in caplog.text
        assert 'Glitch reverted: LOW GRAVITY' in caplog.text
