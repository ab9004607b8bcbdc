"""
Base agent interface for players at the table.
"""

from typing import List, Optional
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..core import Player, GameState, Card
from ..config.game_config import GameConfig, default_config


@dataclass
class AgentContext:
    """Context information provided to an agent."""
    player: Player
    game_state: GameState
    focus_card: Optional[Card]
    hand: List[Card]
    # Player whose hidden play is up for a challenge, if any
    previous_player: Optional[Player] = None
    previous_play_count: int = 0


class BaseAgent(ABC):
    """
    Abstract base class for all player agents.
    
    This defines the interface that all agent implementations must follow.
    """
    
    def __init__(self, player: Player, config: GameConfig = default_config):
        """
        Initialize the agent.
        
        Args:
            player: The player this agent represents
            config: Game configuration
        """
        self.player = player
        self.config = config
    
    @abstractmethod
    def choose_play(self, context: AgentContext) -> List[int]:
        """
        Pick the cards to play face down.
        
        Args:
            context: Current game context
            
        Returns:
            Distinct 0-based hand indices (1 to 3 of them), in play order
        """
        pass
    
    @abstractmethod
    def decide_challenge(self, context: AgentContext) -> bool:
        """
        Decide whether to question the previous player's hidden play.
        
        Args:
            context: Current game context
            
        Returns:
            True to challenge
        """
        pass
    
    def show_hand(self, game_state: GameState) -> None:
        """Called after every deal. Only agents with a private display use it."""
        pass
    
    def hear(self, message: str) -> None:
        """Receives every judge announcement. Bots ignore them."""
        pass
    
    def build_context(self, game_state: GameState, previous_player: Optional[Player] = None) -> AgentContext:
        """
        Build context for the agent.
        
        Only the card count of the previous play is exposed, never its content.
        """
        previous_play_count = 0
        if previous_player is not None and previous_player.last_play is not None:
            previous_play_count = len(previous_player.last_play)
        
        return AgentContext(
            player=self.player,
            game_state=game_state,
            focus_card=game_state.focus_card,
            hand=list(self.player.hand),
            previous_player=previous_player,
            previous_play_count=previous_play_count,
        )
