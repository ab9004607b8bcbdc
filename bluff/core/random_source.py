"""
Process-wide random source shared by every component that needs randomness.
"""

import random
from typing import List, Any, Optional


class RandomSource:
    """
    Single seeded random stream for a game.
    
    Created once per process by the game driver and passed to the card source,
    the judge and the bots. Tests substitute any object exposing the same
    two methods.
    """
    
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)
    
    def randint(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""
        return self._random.randint(low, high)
    
    def shuffle(self, items: List[Any]) -> None:
        """Shuffle a list in place (Fisher-Yates)."""
        self._random.shuffle(items)
