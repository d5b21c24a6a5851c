"""Poker rules implementations.

This module provides:
- Card, value and suit definitions (ranks.py)
- Hand classification and comparison (hands.py)
"""

from .ranks import (
    Value,
    Suit,
    Card,
    CardParseError,
    BadSuit,
    BadValue,
    BadCard,
    VALUE_SYMBOLS,
    SUIT_SYMBOLS,
    sort_cards,
    compare_values,
)

from .hands import (
    HAND_SIZE,
    TIEBREAK_SIZES,
    Category,
    HandRank,
    Hand,
    group_values,
    classify_cards,
    compare_hands,
    can_beat,
    find_winners,
    make_cards_from_string,
)

__all__ = [
    # Ranks
    "Value",
    "Suit",
    "Card",
    "CardParseError",
    "BadSuit",
    "BadValue",
    "BadCard",
    "VALUE_SYMBOLS",
    "SUIT_SYMBOLS",
    "sort_cards",
    "compare_values",
    # Hands
    "HAND_SIZE",
    "TIEBREAK_SIZES",
    "Category",
    "HandRank",
    "Hand",
    "group_values",
    "classify_cards",
    "compare_hands",
    "can_beat",
    "find_winners",
    "make_cards_from_string",
]
