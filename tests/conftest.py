"""
Pytest fixtures for bomb bluff tests.
"""

import pytest
from typing import List

from bluff.core import GameState, Judge
from bluff.agents import BotAgent
from bluff.config.game_config import GameConfig
from tests.fakes import ScriptedRandom, BOMB, CHALLENGE, NEVER_EXPLODE, NEVER_CHALLENGE


@pytest.fixture
def game_config():
    """Test game configuration."""
    return GameConfig(
        seat_agent_type="bot",
        use_judge_announcements=False  # Disable for cleaner test output
    )


@pytest.fixture
def scripted_rng():
    """Random source that never explodes and never challenges by default."""
    return ScriptedRandom({BOMB: NEVER_EXPLODE, CHALLENGE: NEVER_CHALLENGE})


@pytest.fixture
def game_state(scripted_rng):
    """Create a fresh game state; the scripted first-player draw picks seat 0."""
    return GameState(rng=scripted_rng)


@pytest.fixture
def judge(game_state, game_config):
    """Create a judge instance."""
    return Judge(game_state, game_config)


@pytest.fixture
def bot_agents(game_state, game_config):
    """A bot for every seat, sharing the game's random source."""
    return {
        player.player_id: BotAgent(player, game_state.rng, game_config)
        for player in game_state.players
    }


@pytest.fixture
def output_lines() -> List[str]:
    """Collects what an agent writes to the console."""
    return []
