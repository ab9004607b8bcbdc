"""
Configuration loader for YAML-based game configurations.
"""

import yaml
from pathlib import Path
from typing import Optional

from .game_config import GameConfig

AGENT_TYPES = ("human", "bot")


def validate_config(config: GameConfig) -> GameConfig:
    """
    Check the table roster and bot settings.
    
    Raises:
        ValueError: If the roster is not one human plus three distinct bots,
            the seat agent type is unknown, or the challenge percent is
            outside 0..100
    """
    names = [config.human_name] + list(config.bot_names)
    if len(config.bot_names) != 3:
        raise ValueError(f"Exactly 3 bot names are required, got {len(config.bot_names)}")
    if len(set(names)) != len(names):
        raise ValueError(f"Player names must be distinct: {names}")
    if config.seat_agent_type not in AGENT_TYPES:
        raise ValueError(
            f"Unknown seat_agent_type: {config.seat_agent_type}. "
            f"Must be one of {', '.join(AGENT_TYPES)}"
        )
    if not 0 <= config.bot_challenge_percent <= 100:
        raise ValueError(f"bot_challenge_percent must be within 0..100, got {config.bot_challenge_percent}")
    return config


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load game configuration from a YAML file.
    
    Args:
        config_path: Path to the YAML configuration file
        
    Returns:
        GameConfig instance with values from YAML file
        
    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
        ValueError: If the resulting configuration is invalid
    """
    config_file = Path(config_path)
    
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(config_file, 'r') as f:
        config_dict = yaml.safe_load(f)
    
    config = GameConfig()
    if config_dict is None:
        return config
    
    for key, value in config_dict.items():
        if hasattr(config, key):
            setattr(config, key, value)
        else:
            # Warn about unknown keys but don't fail
            print(f"Warning: Unknown config key '{key}' in YAML file")
    
    return validate_config(config)


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load configuration from YAML file or return a fresh default.
    
    Args:
        config_path: Optional path to YAML config file. If None, returns default config.
        
    Returns:
        GameConfig instance
    """
    if config_path is None:
        return GameConfig()
    
    return load_config_from_yaml(config_path)
