"""
Exceptions for invalid player actions.
"""


class InvalidSelectionError(ValueError):
    """Raised when a set of hand indices cannot be played as a batch."""
    
    def __init__(self, player_name: str, indices, message: str = ""):
        self.player_name = player_name
        self.indices = list(indices)
        self.message = message or f"Invalid card selection {self.indices} for {player_name}"
        super().__init__(self.message)
