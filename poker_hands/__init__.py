"""Poker Hands - five-card poker hand parsing and ranking.

Parses card notation such as "As 10s Ks Qs Js" and classifies five-card
hands into totally ordered ranks for picking a winner.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.rules import Card, Hand, HandRank, Suit, Value

__all__ = ["__version__", "Card", "Hand", "HandRank", "Suit", "Value"]
