"""
Console agent for the human player.
"""

from typing import Callable, List

from .base_agent import BaseAgent, AgentContext
from .input_validation import ParseResult, parse_bounded_int, parse_card_index, parse_yes_no
from ..core import Player, GameState, MAX_CARDS_PER_PLAY
from ..config.game_config import GameConfig, default_config


class HumanAgent(BaseAgent):
    """
    Reads the human's choices from the console.
    
    Malformed or out-of-range answers are reported and asked again; nothing
    is removed from the hand until every index has been collected.
    """
    
    def __init__(self, player: Player, config: GameConfig = default_config,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        super().__init__(player, config)
        self.input_func = input_func
        self.output_func = output_func
    
    def show_hand(self, game_state: GameState) -> None:
        if not self.player.is_alive:
            return
        self.output_func("--- Your Hand ---")
        self.output_func(self.player.describe_hand())
        self.output_func("")
    
    def hear(self, message: str) -> None:
        # Printed announcements already reach the console
        if not self.config.use_judge_announcements:
            self.output_func(message)
    
    def choose_play(self, context: AgentContext) -> List[int]:
        hand = context.hand
        self.output_func("Your hand:")
        self.output_func("  ".join(f"{i + 1}: {card}" for i, card in enumerate(hand)))
        
        max_count = min(MAX_CARDS_PER_PLAY, len(hand))
        count = self._prompt(
            f"How many cards you want to play (1-{max_count})? ",
            lambda text: parse_bounded_int(text, 1, max_count),
        )
        
        chosen: List[int] = []
        while len(chosen) < count:
            idx = self._prompt(
                f"Enter index #{len(chosen) + 1}: ",
                lambda text: parse_card_index(text, len(hand), chosen),
            )
            chosen.append(idx)
        return chosen
    
    def decide_challenge(self, context: AgentContext) -> bool:
        answer = self.input_func("Question previous player (y/n)? ")
        return parse_yes_no(answer)
    
    def _prompt(self, prompt: str, parse: Callable[[str], ParseResult]) -> int:
        """Ask until the parser accepts the answer."""
        while True:
            result = parse(self.input_func(prompt))
            if result.ok:
                return result.value
            self.output_func(f"{result.error}\nTry again.")
