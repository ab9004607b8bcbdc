"""
Game configuration and constants.
"""

from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class GameConfig:
    """Configuration for game parameters."""
    
    # Table
    human_name: str = "Human"
    bot_names: List[str] = field(default_factory=lambda: ["Bot1", "Bot2", "Bot3"])
    seat_agent_type: str = "human"  # Options: "human" or "bot" (bot fills the human seat for simulations)
    
    # Bot settings
    bot_challenge_percent: int = 30  # Chance (0-100) that a bot challenges the previous play
    
    # Judge announcements
    use_judge_announcements: bool = True
    
    random_seed: Optional[int] = None  # Seed for the shared random source (generated if not provided)


# Default configuration instance
default_config = GameConfig()
