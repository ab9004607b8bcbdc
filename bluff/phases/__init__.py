"""
Phase handlers for the turns of a round.
"""

from .turn_phase import TurnHandler

__all__ = ['TurnHandler']
