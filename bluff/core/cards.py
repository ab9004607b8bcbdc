"""
Card vocabulary and the card source that deals hands.
"""

from enum import Enum
from typing import List, Sequence

from .random_source import RandomSource


class Card(Enum):
    """Card faces. MAGIC is the wildcard."""
    SUN = "Sun"
    STAR = "Star"
    MOON = "Moon"
    MAGIC = "Magic"
    
    def __str__(self) -> str:
        return self.value
    
    @property
    def is_wildcard(self) -> bool:
        return self is Card.MAGIC


# Magic is never announced as the focus card
FOCUS_CARDS: List[Card] = [Card.SUN, Card.STAR, Card.MOON]

DECK_SIZE = 20


def get_card_distribution() -> List[Card]:
    """
    Get the fixed deck composition.
    Returns: 6 Sun, 6 Star, 6 Moon and 2 Magic (20 cards)
    """
    return (
        [Card.SUN] * 6
        + [Card.STAR] * 6
        + [Card.MOON] * 6
        + [Card.MAGIC] * 2
    )


def format_cards(cards: Sequence[Card]) -> str:
    """Render cards for display, e.g. 'Sun Magic Moon'."""
    return " ".join(str(card) for card in cards)


class CardSource:
    """Shuffled deck that deals hands from its end."""
    
    def __init__(self, rng: RandomSource):
        self.rng = rng
        self.cards: List[Card] = []
        self.reset()
    
    def __len__(self) -> int:
        return len(self.cards)
    
    def reset(self) -> None:
        """Refill with the full 20-card deck and shuffle it."""
        self.cards = get_card_distribution()
        self.rng.shuffle(self.cards)
    
    def deal(self, n: int) -> List[Card]:
        """
        Remove and return up to n cards from the end of the deck.
        
        Under-supply is not an error: if fewer than n cards remain,
        all remaining cards are returned.
        """
        hand = []
        for _ in range(n):
            if not self.cards:
                break
            hand.append(self.cards.pop())
        return hand
