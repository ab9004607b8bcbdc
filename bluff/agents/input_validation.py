"""
Parsing of raw console answers into validated values.

Each parser returns a ParseResult instead of raising, so the caller can
re-prompt until it gets a success.
"""

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class ParseResult:
    """Either a parsed value or the reason the input was rejected."""
    value: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: int) -> "ParseResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(error=error)


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except (ValueError, AttributeError):
        return None


def parse_bounded_int(text: str, low: int, high: int) -> ParseResult:
    """Parse an integer within [low, high]."""
    value = _parse_int(text)
    if value is None:
        return ParseResult.failure("Invalid input! Please enter an integer.")
    if value < low or value > high:
        return ParseResult.failure(f"Number of cards must be between {low} and {high}.")
    return ParseResult.success(value)


def parse_card_index(text: str, hand_size: int, chosen: Sequence[int] = ()) -> ParseResult:
    """
    Parse a 1-based hand index and convert it to 0-based.

    Rejects non-integers, positions outside the hand and positions that
    are already in chosen (0-based).
    """
    value = _parse_int(text)
    if value is None:
        return ParseResult.failure("Invalid input! Please enter an integer.")
    idx = value - 1
    if idx < 0 or idx >= hand_size:
        return ParseResult.failure("Index out of range.")
    if idx in chosen:
        return ParseResult.failure("Index already chosen.")
    return ParseResult.success(idx)


def parse_yes_no(text: str) -> bool:
    """Only an answer starting with 'y' or 'Y' counts as yes."""
    answer = (text or "").strip()
    return answer[:1] in ("y", "Y")
