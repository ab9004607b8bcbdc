"""
Player class representing a seat at the table.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence
from enum import Enum

from .cards import Card, format_cards
from .exceptions import InvalidSelectionError


class PlayerStatus(Enum):
    """Player status in the game."""
    ALIVE = "alive"
    ELIMINATED = "eliminated"


@dataclass
class Player:
    """Represents a player in the game."""
    player_id: int
    name: str
    status: PlayerStatus = PlayerStatus.ALIVE
    
    hand: List[Card] = field(default_factory=list)
    # Hidden until a challenge reveals it. None means no play recorded this
    # round, which is different from an empty play.
    last_play: Optional[List[Card]] = None
    
    def __str__(self) -> str:
        return self.name
    
    @property
    def is_alive(self) -> bool:
        """Check if player is alive."""
        return self.status == PlayerStatus.ALIVE
    
    @property
    def has_cards(self) -> bool:
        return len(self.hand) > 0
    
    @property
    def can_act(self) -> bool:
        """Alive and holding at least one card."""
        return self.is_alive and self.has_cards
    
    def set_hand(self, cards: Sequence[Card]) -> None:
        """Replace the hand wholesale."""
        self.hand = list(cards)
    
    def remove_cards(self, indices: Sequence[int]) -> List[Card]:
        """
        Remove several cards by 0-based index in one call.
        
        The whole batch is validated before anything is removed. Cards are
        taken out in descending index order so earlier removals never shift
        later ones, and are returned in the order the indices were given.
        
        Raises:
            InvalidSelectionError: on an empty batch, an index outside the
                hand, or a repeated index
        """
        indices = list(indices)
        if not indices:
            raise InvalidSelectionError(self.name, indices, "No cards selected")
        for idx in indices:
            if idx < 0 or idx >= len(self.hand):
                raise InvalidSelectionError(
                    self.name, indices, f"Index {idx} out of range for hand of {len(self.hand)}"
                )
        if len(set(indices)) != len(indices):
            raise InvalidSelectionError(self.name, indices, "Duplicate index in selection")
        
        removed = {}
        for idx in sorted(indices, reverse=True):
            removed[idx] = self.hand.pop(idx)
        return [removed[idx] for idx in indices]
    
    def record_play(self, cards: Sequence[Card]) -> None:
        """Store the hidden play for a possible challenge."""
        self.last_play = list(cards)
    
    def clear_play(self) -> None:
        self.last_play = None
    
    def eliminate(self) -> None:
        """Mark player as eliminated."""
        self.status = PlayerStatus.ELIMINATED
    
    def describe_hand(self) -> str:
        return f"{self.name}: {format_cards(self.hand)}"
