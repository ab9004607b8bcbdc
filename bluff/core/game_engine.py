"""
Core game engine holding the table state and round transitions.
"""

from enum import Enum
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field

from .cards import Card, CardSource
from .player import Player
from .random_source import RandomSource


NUM_PLAYERS = 4
HAND_SIZE = 5
MAX_CARDS_PER_PLAY = 3


class GamePhase(Enum):
    """Current game phase."""
    SETUP = "setup"
    ROUND = "round"
    ROUND_OVER = "round_over"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Complete game state."""
    rng: RandomSource = field(default_factory=RandomSource)
    human_name: str = "Human"
    bot_names: List[str] = field(default_factory=lambda: ["Bot1", "Bot2", "Bot3"])

    phase: GamePhase = GamePhase.SETUP
    round_number: int = 0
    players: List[Player] = field(default_factory=list)
    card_source: Optional[CardSource] = None

    # Bomb risks survived, keyed by player_id; always 0..2
    survive_counts: Dict[int, int] = field(default_factory=dict)

    # Round state
    focus_card: Optional[Card] = None
    active_index: int = 0
    any_challenge_this_round: bool = False

    # Game history
    action_log: List[Dict[str, Any]] = field(default_factory=list)

    winner: Optional[Player] = None

    def __post_init__(self):
        """Initialize game state."""
        if self.card_source is None:
            self.card_source = CardSource(self.rng)
        if not self.players:
            self.setup_game()

    def setup_game(self) -> None:
        """Seat the human and three bots and pick a random first player."""
        names = [self.human_name] + list(self.bot_names)
        if len(names) != NUM_PLAYERS:
            raise ValueError(f"The table seats exactly {NUM_PLAYERS} players, got {len(names)}")
        self.players = [Player(player_id=i, name=name) for i, name in enumerate(names)]
        self.survive_counts = {p.player_id: 0 for p in self.players}
        self.active_index = self.rng.randint(0, len(self.players) - 1)
        self.round_number = 0
        self._log_action("game_start", {
            "players": [p.name for p in self.players],
            "first_player": self.players[self.active_index].name,
        })

    # Player registry

    def get_alive_players(self) -> List[Player]:
        """Get all alive players."""
        return [p for p in self.players if p.is_alive]

    def get_player(self, player_id: int) -> Optional[Player]:
        """Get player by id."""
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def get_player_index(self, player_id: int) -> Optional[int]:
        """Seat position of a player, or None if unknown."""
        for idx, player in enumerate(self.players):
            if player.player_id == player_id:
                return idx
        return None

    @property
    def active_player(self) -> Player:
        return self.players[self.active_index]

    def count_alive(self) -> int:
        return len(self.get_alive_players())

    def count_alive_with_cards(self) -> int:
        return sum(1 for p in self.players if p.can_act)

    def next_player_with_cards(self, start: int) -> Optional[int]:
        """
        Index of the next alive player holding cards after position start,
        wrapping around the table. Pass -1 to search from seat 0.
        Returns None if nobody can act.
        """
        n = len(self.players)
        for offset in range(1, n + 1):
            idx = (start + offset) % n
            if self.players[idx].can_act:
                return idx
        return None

    # Survive counter

    def get_survive_count(self, player_id: int) -> int:
        return self.survive_counts.get(player_id, 0)

    def record_survival(self, player_id: int) -> int:
        self.survive_counts[player_id] = self.get_survive_count(player_id) + 1
        return self.survive_counts[player_id]

    def reset_survivals(self, player_id: int) -> None:
        self.survive_counts[player_id] = 0

    # Rounds

    def deal_new_hands(self) -> None:
        """Reshuffle the full deck and deal a fresh hand to every alive player."""
        self.card_source.reset()
        for player in self.players:
            if player.is_alive:
                player.set_hand(self.card_source.deal(HAND_SIZE))

    def start_round(self, focus_card: Card) -> None:
        """Open a new round around the given focus card."""
        self.phase = GamePhase.ROUND
        self.round_number += 1
        self.focus_card = focus_card
        self.any_challenge_this_round = False
        for player in self.players:
            player.clear_play()
        self._log_action("round_start", {
            "focus_card": focus_card.value,
            "first_player": self.active_player.name,
        })

    def end_round(self) -> None:
        """Close the round and re-deal for the next one."""
        self.phase = GamePhase.ROUND_OVER
        self._log_action("round_over", {"alive": [p.name for p in self.get_alive_players()]})
        self.deal_new_hands()
        self.any_challenge_this_round = False

    def is_game_over(self) -> bool:
        """The game continues only while two or more players can act."""
        return self.count_alive_with_cards() <= 1

    def eliminate_player(self, player_id: int, reason: str = "bomb") -> None:
        """Eliminate a player."""
        player = self.get_player(player_id)
        if player and player.is_alive:
            player.eliminate()
            self.reset_survivals(player_id)
            self._log_action("player_eliminated", {
                "player": player.name,
                "reason": reason,
            })

    def check_winner(self) -> Optional[Player]:
        """First alive player in seat order, if any."""
        for player in self.players:
            if player.is_alive:
                return player
        return None

    def end_game(self) -> Optional[Player]:
        """End the game and return the winner."""
        self.phase = GamePhase.GAME_OVER
        self.winner = self.check_winner()
        self._log_action("game_over", {
            "winner": self.winner.name if self.winner else None,
            "rounds": self.round_number,
        })
        return self.winner

    def _log_action(self, action_type: str, data: Dict[str, Any]) -> None:
        """Log a game action."""
        self.action_log.append({
            "type": action_type,
            "phase": self.phase.value,
            "round": self.round_number,
            "data": data
        })

    def get_game_summary(self) -> Dict[str, Any]:
        """Get a summary of the current game state."""
        return {
            "phase": self.phase.value,
            "round": self.round_number,
            "focus_card": self.focus_card.value if self.focus_card else None,
            "alive_players": [p.name for p in self.get_alive_players()],
            "survive_counts": {p.name: self.get_survive_count(p.player_id) for p in self.players},
            "winner": self.winner.name if self.winner else None,
        }
