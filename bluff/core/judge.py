"""
Judge/Dealer system for challenge resolution and game narration.
"""

from typing import Callable, List, Optional, Sequence
from dataclasses import dataclass

from .cards import Card, format_cards
from .game_engine import GameState
from .player import Player
from .random_source import RandomSource
from ..config.game_config import GameConfig, default_config


# A player who already survived this many bomb risks dies on the next one
MAX_BOMB_SURVIVALS = 2
# The bomb explodes with probability 1 / BOMB_ODDS
BOMB_ODDS = 3


def play_is_correct(played: Optional[Sequence[Card]], focus_card: Card) -> bool:
    """
    Check a hidden play against the focus card.

    A play is correct only if it holds at least one card and every card is
    the focus card or Magic. A missing or empty play is never correct.
    """
    if not played:
        return False
    return all(card == focus_card or card.is_wildcard for card in played)


@dataclass
class ChallengeResult:
    """Outcome of a resolved challenge."""
    challenger_id: int
    played_by_id: int
    revealed: List[Card]
    correct_play: bool
    at_fault_id: int
    eliminated: bool
    forced: bool = False
    round_over: bool = True


class Judge:
    """Judge that reveals challenged plays and applies the bomb policy."""

    def __init__(self, game_state: GameState, config: GameConfig = default_config,
                 rng: Optional[RandomSource] = None):
        self.game_state = game_state
        self.config = config
        self.rng = rng or game_state.rng
        self.announcements: List[str] = []
        # Seats that must hear narration even when it is not printed
        self.listeners: List[Callable[[str], None]] = []

    def announce(self, message: str) -> None:
        """Make a judge announcement."""
        self.announcements.append(message)
        if self.config.use_judge_announcements:
            print(f"[JUDGE] {message}")
        for listener in self.listeners:
            listener(message)

    def add_listener(self, listener: Callable[[str], None]) -> None:
        """Register a callback that receives every announcement."""
        self.listeners.append(listener)

    def apply_bomb_risk(self, subject: Player) -> bool:
        """
        Run the bomb for the player at fault.

        With MAX_BOMB_SURVIVALS risks already survived the bomb always
        explodes. Otherwise it explodes one time in BOMB_ODDS. Explosion
        eliminates the player and resets their count; survival increments it.

        Returns:
            True if the player was eliminated
        """
        state = self.game_state
        survived = state.get_survive_count(subject.player_id)

        if survived >= MAX_BOMB_SURVIVALS:
            self.announce(f"Bomb exploded! {subject.name} has died (3rd time bomb)!")
            state.eliminate_player(subject.player_id, reason="third bomb")
            exploded = True
        elif self.rng.randint(0, BOMB_ODDS - 1) == 0:
            self.announce(f"Bomb exploded! {subject.name} has died.")
            state.eliminate_player(subject.player_id, reason="bomb")
            exploded = True
        else:
            state.record_survival(subject.player_id)
            self.announce(f"Bomb did not explode this time! {subject.name} has survived.")
            exploded = False

        state._log_action("bomb", {
            "player": subject.name,
            "exploded": exploded,
            "survive_count": state.get_survive_count(subject.player_id),
        })
        return exploded

    def resolve_challenge(self, challenger: Player, played_by: Player, forced: bool = False) -> ChallengeResult:
        """
        Reveal the challenged play and punish whoever was wrong.

        If the play was incorrect the player who played is at fault,
        otherwise the challenger is. Afterwards the challenger becomes the
        active player. A challenge always ends the round.
        """
        state = self.game_state
        revealed = list(played_by.last_play or [])

        if revealed:
            self.announce(f"Revealing cards of {played_by.name}: {format_cards(revealed)}")
        else:
            self.announce(f"Revealing cards of {played_by.name}: (no record of played cards)")

        correct = play_is_correct(revealed, state.focus_card)
        if correct:
            self.announce(f"{challenger.name} was wrong to question!")
            at_fault = challenger
        else:
            self.announce(f"{played_by.name} played wrongly!")
            self.announce(f"{challenger.name} was right to question!")
            at_fault = played_by

        state.any_challenge_this_round = True
        state._log_action("challenge", {
            "challenger": challenger.name,
            "played_by": played_by.name,
            "revealed": [card.value for card in revealed],
            "correct_play": correct,
            "forced": forced,
        })

        eliminated = self.apply_bomb_risk(at_fault)
        self._hand_turn_to(challenger)

        return ChallengeResult(
            challenger_id=challenger.player_id,
            played_by_id=played_by.player_id,
            revealed=revealed,
            correct_play=correct,
            at_fault_id=at_fault.player_id,
            eliminated=eliminated,
            forced=forced,
        )

    def _hand_turn_to(self, challenger: Player) -> None:
        """Point the turn at the challenger, falling back to the first player who can act."""
        state = self.game_state
        idx = state.get_player_index(challenger.player_id)
        if idx is None:
            fallback = state.next_player_with_cards(-1)
            idx = fallback if fallback is not None else 0
        state.active_index = idx
