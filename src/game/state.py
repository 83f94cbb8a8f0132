"""
Game State
==========

The slice of artillery game state that per-turn glitch events read and
mutate. Terrain, projectiles and the turn loop live with the host game.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from src.effects.palette import COLORS


DEFAULT_GRAVITY = 0.3
NUM_PLAYERS = 2

TANK_TYPES = ['SIEGE', 'PHANTOM', 'CHAOS']


@dataclass
class Player:
    """A tank and its owner."""
    name: str
    color: tuple
    health: int = 100
    max_health: int = 100
    tank_type: str = 'SIEGE'

    @property
    def alive(self) -> bool:
        return self.health > 0


@dataclass
class GameState:
    """
    Shared per-game state.

    original_gravity, original_tank_type and glitched_player hold what a
    glitch overwrote, so it can be reverted at the end of the round.
    """
    players: List[Player] = field(default_factory=list)
    current_player: int = 0
    turn_count: int = 0
    gravity: float = DEFAULT_GRAVITY

    # Glitch event state
    active_event: Optional[str] = None
    original_gravity: Optional[float] = None
    original_tank_type: Optional[str] = None
    glitched_player: Optional[int] = None

    @property
    def player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.current_player]

    @classmethod
    def new_game(cls, num_players: int = NUM_PLAYERS) -> 'GameState':
        """Fresh state with default players."""
        colors = [COLORS['cyan'], COLORS['magenta'], COLORS['green'], COLORS['orange']]
        players = [
            Player(name=f'P{i + 1}', color=colors[i % len(colors)])
            for i in range(num_players)
        ]
        return cls(players=players)

    def advance_turn(self) -> Player:
        """Move to the next living player and return them."""
        self.turn_count += 1
        for _ in range(len(self.players)):
            self.current_player = (self.current_player + 1) % len(self.players)
            if self.player.alive:
                break
        return self.player
