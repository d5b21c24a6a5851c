"""Five-card hand classification, parsing, and comparison.

Categories (low to high):
- High card, Pair, Two pair, Set (three of a kind)
- Straight, Flush, Full house, Bomb (four of a kind)
- Straight flush, Royal straight flush

Comparison rules:
- Category first; any hand of a higher category wins
- Same category: the tie-break values are compared left to right
- The wheel (A-5-4-3-2) is a five-high straight
- Suits never break ties
"""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

from .ranks import (
    BadCard,
    Card,
    Value,
    sort_cards,
)

logger = logging.getLogger(__name__)

HAND_SIZE = 5


class Category(IntEnum):
    """Hand categories ordered by strength."""

    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    SET = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    BOMB = 8
    STRAIGHT_FLUSH = 9
    ROYAL_STRAIGHT_FLUSH = 10

    THREE_OF_A_KIND = 4
    FOUR_OF_A_KIND = 8

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


# Number of tie-break values each category carries
TIEBREAK_SIZES = {
    Category.HIGH_CARD: 5,
    Category.PAIR: 4,  # pair, 3 kickers
    Category.TWO_PAIR: 3,  # high pair, low pair, kicker
    Category.SET: 3,  # trip, 2 kickers
    Category.STRAIGHT: 1,
    Category.FLUSH: 5,
    Category.FULL_HOUSE: 2,  # trip, pair
    Category.BOMB: 2,  # quad, kicker
    Category.STRAIGHT_FLUSH: 1,
    Category.ROYAL_STRAIGHT_FLUSH: 0,
}


@dataclass(frozen=True, order=True)
class HandRank:
    """Classification of a five-card hand.

    Ranks order by category, then by ``tiebreak`` compared lexicographically,
    so the usual comparison operators decide which of two hands wins.

    Attributes:
        category: The hand category
        tiebreak: Values that break ties inside the category, most significant
            first (e.g. ``(KING, ACE, NINE, FOUR)`` for a pair of kings)
    """

    category: Category
    tiebreak: Tuple[Value, ...] = field(default=())

    def __post_init__(self):
        expected = TIEBREAK_SIZES[self.category]
        if len(self.tiebreak) != expected:
            raise ValueError(
                f"{self.category.name} takes {expected} tie-break values, "
                f"got {len(self.tiebreak)}"
            )

    def __str__(self) -> str:
        values = " ".join(str(v) for v in self.tiebreak)
        return f"{self.category.name}({values})"

    @property
    def primary(self) -> Value:
        """The defining value: the paired/tripled/quad value or the high card."""
        if not self.tiebreak:
            return Value.ACE
        return self.tiebreak[0]


@dataclass(frozen=True)
class Hand:
    """Exactly five cards, sorted high to low, and their rank.

    Attributes:
        cards: The five cards sorted descending by value, then suit
        rank: HandRank computed when the hand is built
    """

    cards: Tuple[Card, ...]
    rank: HandRank = field(compare=False)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Hand":
        """Build a hand from already parsed cards.

        Raises:
            BadCard: If there are not exactly five cards, or all five share
                one value (only possible with repeated cards)
        """
        ordered = sort_cards(cards)
        if len(ordered) != HAND_SIZE:
            raise BadCard("invalid number of cards")
        if ordered[0].value == ordered[-1].value:
            raise BadCard("five cards of the same value")
        return cls(cards=tuple(ordered), rank=classify_cards(ordered))

    @classmethod
    def parse(cls, text: str) -> "Hand":
        """Parse a hand from a string like "As 10s Ks Qs Js".

        Tokens are separated by any whitespace and may appear in any order.
        The first bad token aborts the parse; the card count is checked
        only once every token has parsed.

        Raises:
            BadSuit, BadValue, BadCard: As raised by Card.parse, or BadCard
                when the text does not hold exactly five cards
        """
        return cls.from_cards([Card.parse(token) for token in text.split()])


def group_values(cards: Sequence[Card]) -> List[Tuple[Value, int]]:
    """Run-length groups of equal values, largest group first.

    Args:
        cards: Cards sorted descending by value

    Returns:
        (value, count) pairs sorted by count, then value, both descending
    """
    groups: List[Tuple[Value, int]] = []
    for card in cards:
        if groups and groups[-1][0] == card.value:
            groups[-1] = (card.value, groups[-1][1] + 1)
        else:
            groups.append((card.value, 1))
    groups.sort(key=lambda g: (g[1], g[0]), reverse=True)
    return groups


def _is_flush(cards: Sequence[Card]) -> bool:
    suit = cards[0].suit
    return all(card.suit == suit for card in cards)


def _is_straight(cards: Sequence[Card]) -> bool:
    for high, low in zip(cards, cards[1:]):
        if high.value == low.value + 1:
            continue
        # Ace followed by five: A-5-4-3-2
        if high.value == Value.ACE and low.value == Value.FIVE:
            continue
        return False
    return True


def _straight_high(cards: Sequence[Card]) -> Value:
    if cards[0].value == Value.ACE and cards[1].value == Value.FIVE:
        return Value.FIVE
    return cards[0].value


def classify_cards(cards: Sequence[Card]) -> HandRank:
    """Classify five cards sorted descending by value.

    Args:
        cards: Exactly five cards, highest first

    Returns:
        HandRank carrying the category and its tie-break values
    """
    groups = group_values(cards)
    values = tuple(value for value, _ in groups)
    largest = groups[0][1]

    if len(groups) == 5:
        flush = _is_flush(cards)
        straight = _is_straight(cards)
        if flush and straight:
            if cards[1].value == Value.KING:
                rank = HandRank(Category.ROYAL_STRAIGHT_FLUSH)
            else:
                rank = HandRank(Category.STRAIGHT_FLUSH, (_straight_high(cards),))
        elif flush:
            rank = HandRank(Category.FLUSH, values)
        elif straight:
            rank = HandRank(Category.STRAIGHT, (_straight_high(cards),))
        else:
            rank = HandRank(Category.HIGH_CARD, values)
    elif len(groups) == 4:
        rank = HandRank(Category.PAIR, values)
    elif len(groups) == 3:
        category = Category.TWO_PAIR if largest == 2 else Category.SET
        rank = HandRank(category, values)
    elif len(groups) == 2:
        category = Category.FULL_HOUSE if largest == 3 else Category.BOMB
        rank = HandRank(category, values)
    else:
        raise AssertionError(f"Unexpected value groups: {groups}")

    logger.debug("classified %s as %s", " ".join(str(c) for c in cards), rank)
    return rank


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Returns:
        Positive if hand1 wins, negative if hand2 wins, zero on a tie
    """
    if hand1.rank > hand2.rank:
        return 1
    if hand1.rank < hand2.rank:
        return -1
    return 0


def can_beat(hand1: Hand, hand2: Hand) -> bool:
    """Check if hand1 strictly beats hand2."""
    return hand1.rank > hand2.rank


def find_winners(hands: Sequence[Hand]) -> List[int]:
    """Indices of every hand holding the best rank (more than one on a split).

    Raises:
        ValueError: If no hands are given
    """
    if not hands:
        raise ValueError("find_winners() needs at least one hand")
    best = max(hand.rank for hand in hands)
    return [i for i, hand in enumerate(hands) if hand.rank == best]


# Helper for building hands in tests and examples


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "Ah Kd 10c".

    Unlike Hand.parse, any number of cards is accepted.
    """
    return [Card.parse(cs) for cs in s.split()]
