"""
Core game engine components: cards, players, table state and rule enforcement.
"""

from .cards import Card, CardSource, FOCUS_CARDS, DECK_SIZE, get_card_distribution, format_cards
from .exceptions import InvalidSelectionError
from .game_engine import GameState, GamePhase, NUM_PLAYERS, HAND_SIZE, MAX_CARDS_PER_PLAY
from .player import Player, PlayerStatus
from .random_source import RandomSource
from .judge import Judge, ChallengeResult, play_is_correct, MAX_BOMB_SURVIVALS, BOMB_ODDS

__all__ = [
    'Card',
    'CardSource',
    'FOCUS_CARDS',
    'DECK_SIZE',
    'get_card_distribution',
    'format_cards',
    'InvalidSelectionError',
    'GameState',
    'GamePhase',
    'NUM_PLAYERS',
    'HAND_SIZE',
    'MAX_CARDS_PER_PLAY',
    'Player',
    'PlayerStatus',
    'RandomSource',
    'Judge',
    'ChallengeResult',
    'play_is_correct',
    'MAX_BOMB_SURVIVALS',
    'BOMB_ODDS',
]
