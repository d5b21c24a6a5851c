"""Vectorized hand strength evaluation.

This module provides:
- Card index encoding (card -> 0..51 and back)
- Integer strength scores that order exactly like HandRank
- Batched classification of many hands at once with NumPy

Key insight: a HandRank fits into one integer. The category takes the top
bits and each tie-break value takes four bits below it, most significant
first, so comparing integers compares ranks:

    strength = category << 20 | t0 << 16 | t1 << 12 | t2 << 8 | t3 << 4 | t4

evaluate_batch() reproduces classify_cards() with array operations only and
must stay in parity with hand_strength(hand.rank).
"""

import logging
from typing import Sequence

import numpy as np

from poker_hands.rules.hands import HAND_SIZE, Category, Hand, HandRank
from poker_hands.rules.ranks import Card, Suit, Value

logger = logging.getLogger(__name__)


# Bits per tie-break value (values go up to 14)
STRENGTH_BITS = 4
CATEGORY_SHIFT = STRENGTH_BITS * HAND_SIZE

# Card encoding: 0-51 for a standard deck (4 suits x 13 values)
# card_idx = suit * 13 + (value - 2)
NUM_VALUES = 13
NUM_CARDS = 52

# Place value of each tie-break slot, most significant first
_SLOT_WEIGHTS = 1 << (STRENGTH_BITS * np.arange(HAND_SIZE - 1, -1, -1, dtype=np.int64))
_WHEEL = np.array([Value.ACE, Value.FIVE, Value.FOUR, Value.THREE, Value.TWO], dtype=np.int64)
_VALUE_SLOTS = np.arange(Value.ACE + 1, dtype=np.int64)


class BatchEvalError(ValueError):
    """Raised when a batch of card indices cannot be evaluated."""

    pass


def card_to_idx(card: Card) -> int:
    """Convert Card to index 0-51."""
    return int(card.suit) * NUM_VALUES + (int(card.value) - Value.TWO)


def idx_to_card(idx: int) -> Card:
    """Convert index 0-51 to Card."""
    if not 0 <= idx < NUM_CARDS:
        raise BatchEvalError(f"Card index out of range: {idx}")
    return Card(value=Value(idx % NUM_VALUES + Value.TWO), suit=Suit(idx // NUM_VALUES))


def hand_strength(rank: HandRank) -> int:
    """Pack a HandRank into an integer with the same ordering.

    Args:
        rank: The rank to encode

    Returns:
        Non-negative integer; higher means a stronger hand
    """
    strength = int(rank.category) << CATEGORY_SHIFT
    for slot, value in enumerate(rank.tiebreak):
        strength |= int(value) << (STRENGTH_BITS * (HAND_SIZE - 1 - slot))
    return strength


def encode_hands(hands: Sequence[Hand]) -> np.ndarray:
    """Encode hands as an (N, 5) array of card indices."""
    rows = [[card_to_idx(card) for card in hand.cards] for hand in hands]
    return np.array(rows, dtype=np.int64).reshape(-1, HAND_SIZE)


def evaluate_batch(card_indices) -> np.ndarray:
    """Compute strength scores for a batch of five-card hands.

    Args:
        card_indices: Array-like of shape (N, 5) holding card indices 0-51.
            Row order within a hand does not matter.

    Returns:
        int64 array of shape (N,), equal to hand_strength() of each row's rank

    Raises:
        BatchEvalError: On a wrong shape, an index outside 0-51, or a row
            holding five cards of one value
    """
    idx = np.asarray(card_indices, dtype=np.int64)
    if idx.ndim != 2 or idx.shape[1] != HAND_SIZE:
        raise BatchEvalError(f"Expected shape (N, {HAND_SIZE}), got {idx.shape}")
    if idx.size and (idx.min() < 0 or idx.max() >= NUM_CARDS):
        raise BatchEvalError("Card indices must be in range 0-51")

    values = -np.sort(-(idx % NUM_VALUES + Value.TWO), axis=1)
    suits = idx // NUM_VALUES

    # counts[n, v] = number of cards of value v in hand n
    counts = (values[:, :, None] == _VALUE_SLOTS).sum(axis=1)
    distinct = (counts > 0).sum(axis=1)
    largest = counts.max(axis=1)
    if np.any(distinct == 1):
        raise BatchEvalError("A hand cannot hold five cards of one value")

    is_flush = (suits == suits[:, :1]).all(axis=1) & (distinct == HAND_SIZE)
    is_wheel = (values == _WHEEL).all(axis=1)
    is_straight = (distinct == HAND_SIZE) & ((values[:, 0] - values[:, -1] == 4) | is_wheel)
    is_royal = is_flush & is_straight & (values[:, 1] == Value.KING)

    category = np.select(
        [
            is_royal,
            is_flush & is_straight,
            is_flush,
            is_straight,
            distinct == 5,
            distinct == 4,
            (distinct == 3) & (largest == 2),
            distinct == 3,
            largest == 3,
        ],
        [
            int(Category.ROYAL_STRAIGHT_FLUSH),
            int(Category.STRAIGHT_FLUSH),
            int(Category.FLUSH),
            int(Category.STRAIGHT),
            int(Category.HIGH_CARD),
            int(Category.PAIR),
            int(Category.TWO_PAIR),
            int(Category.SET),
            int(Category.FULL_HOUSE),
        ],
        default=int(Category.BOMB),
    ).astype(np.int64)

    # Order values by (count, value) descending; absent values sort last
    group_key = np.where(counts > 0, counts * (1 << STRENGTH_BITS) + _VALUE_SLOTS, -1)
    order = np.argsort(-group_key, axis=1, kind="stable")[:, :HAND_SIZE]
    present = np.take_along_axis(group_key, order, axis=1) > 0
    tiebreak = np.where(present, order, 0)
    payload = (tiebreak * _SLOT_WEIGHTS).sum(axis=1)

    straight_high = np.where(is_wheel, int(Value.FIVE), values[:, 0])
    payload = np.where(is_straight, straight_high * _SLOT_WEIGHTS[0], payload)
    payload = np.where(is_royal, 0, payload)

    logger.debug("evaluated %d hands", len(idx))
    return (category << CATEGORY_SHIFT) | payload


def batch_winners(card_indices) -> np.ndarray:
    """Row indices of every hand holding the best strength in the batch.

    Raises:
        BatchEvalError: If the batch is empty or invalid
    """
    strengths = evaluate_batch(card_indices)
    if strengths.size == 0:
        raise BatchEvalError("Cannot pick winners from an empty batch")
    return np.flatnonzero(strengths == strengths.max())
