"""
Bot agent with fixed-probability random behavior.
"""

from typing import List

from .base_agent import BaseAgent, AgentContext
from ..core import Player, RandomSource, MAX_CARDS_PER_PLAY
from ..config.game_config import GameConfig, default_config


class BotAgent(BaseAgent):
    """
    Simple bot:
    - Play: a uniformly random count of 1-3 cards taken from the end of the hand
    - Challenge: question the previous player with a fixed probability
    """
    
    def __init__(self, player: Player, rng: RandomSource, config: GameConfig = default_config):
        super().__init__(player, config)
        self.rng = rng
    
    def choose_play(self, context: AgentContext) -> List[int]:
        count = min(self.rng.randint(1, MAX_CARDS_PER_PLAY), len(context.hand))
        last = len(context.hand) - 1
        return [last - i for i in range(count)]
    
    def decide_challenge(self, context: AgentContext) -> bool:
        return self.rng.randint(0, 99) < self.config.bot_challenge_percent
