"""
Agent implementations for players at the table.
"""

from .base_agent import BaseAgent, AgentContext
from .bot_agent import BotAgent
from .human_agent import HumanAgent
from .input_validation import ParseResult, parse_bounded_int, parse_card_index, parse_yes_no

__all__ = [
    'BaseAgent',
    'AgentContext',
    'BotAgent',
    'HumanAgent',
    'ParseResult',
    'parse_bounded_int',
    'parse_card_index',
    'parse_yes_no',
]
