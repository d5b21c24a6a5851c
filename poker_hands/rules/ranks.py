"""Card value, suit and card definitions.

Value order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Value and Suit enums with token parsing
- Card representation
- Parse errors raised for malformed card text
- Sorting utilities
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List


class CardParseError(ValueError):
    """Base class for errors raised while parsing card text."""


class BadSuit(CardParseError):
    """Raised when a token does not name a known suit."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid suit: {token!r}")


class BadValue(CardParseError):
    """Raised when a token does not name a known card value."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid value: {token!r}")


class BadCard(CardParseError):
    """Raised when a card or hand token is malformed as a whole."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid card: {reason}")


class Value(IntEnum):
    """Card values ordered by strength (higher value = stronger card).

    The integer of each member is its face value, with Ace counted high (14).
    Arithmetic works on the plain integer, e.g. ``Value.FIVE + 1 == 6``.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Highest value

    def __str__(self) -> str:
        return VALUE_SYMBOLS[self]

    @classmethod
    def parse(cls, token: str) -> "Value":
        """Parse a value token such as 'a', '10' or 'K' (case-insensitive).

        Raises:
            BadValue: If the token is not one of a, 2-10, j, q, k
        """
        try:
            return SYMBOL_TO_VALUE[token.lower()]
        except KeyError:
            raise BadValue(token) from None


class Suit(IntEnum):
    """Card suits. Order has no ranking meaning; only flush equality matters."""

    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3

    def __str__(self) -> str:
        return SUIT_SYMBOLS[self]

    @classmethod
    def parse(cls, token: str) -> "Suit":
        """Parse a suit letter h, d, c or s (case-insensitive).

        Raises:
            BadSuit: If the token is not a known suit letter
        """
        try:
            return SYMBOL_TO_SUIT[token.lower()]
        except KeyError:
            raise BadSuit(token) from None


# Value symbols for display
VALUE_SYMBOLS = {
    Value.TWO: "2",
    Value.THREE: "3",
    Value.FOUR: "4",
    Value.FIVE: "5",
    Value.SIX: "6",
    Value.SEVEN: "7",
    Value.EIGHT: "8",
    Value.NINE: "9",
    Value.TEN: "10",
    Value.JACK: "J",
    Value.QUEEN: "Q",
    Value.KING: "K",
    Value.ACE: "A",
}

# Suit symbols for display
SUIT_SYMBOLS = {
    Suit.HEART: "h",
    Suit.DIAMOND: "d",
    Suit.CLUB: "c",
    Suit.SPADE: "s",
}

# Lowercase symbol to member mappings (for parsing)
SYMBOL_TO_VALUE = {v.lower(): k for k, v in VALUE_SYMBOLS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with value and suit.

    Cards are ordered by value first (for sorting hands), then by suit.
    Immutable and hashable for use in sets.
    """

    value: Value
    suit: Suit

    def __str__(self) -> str:
        return str(self.value) + str(self.suit)

    def __repr__(self) -> str:
        return f"Card({self})"

    @classmethod
    def parse(cls, token: str) -> "Card":
        """Parse a card from a string like 'Ah', '2H' or '10d'.

        The last character is the suit and everything before it is the value.
        The suit is checked first, so a token that is wrong in both places
        reports the suit.

        Args:
            token: Card string in format "VALUE+SUIT"

        Returns:
            Card object

        Raises:
            BadCard: If the token is not 2 or 3 characters long
            BadSuit: If the last character is not a suit letter
            BadValue: If the prefix is not a value token
        """
        if len(token) not in (2, 3):
            raise BadCard("invalid length")

        suit = Suit.parse(token[-1])
        value = Value.parse(token[:-1])
        return cls(value=value, suit=suit)


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by value (descending), then by suit.

    Args:
        cards: Card objects

    Returns:
        New sorted list of cards, highest first
    """
    return sorted(cards, reverse=True)


def compare_values(value1: Value, value2: Value) -> int:
    """Compare two values.

    Returns:
        Positive if value1 > value2, negative if value1 < value2, zero if equal
    """
    return int(value1) - int(value2)
