"""Hand strength encoding and batched evaluation.

This module provides:
- hand_strength: HandRank -> order-preserving integer
- evaluate_batch: NumPy classifier for (N, 5) card index arrays
- batch_winners: best rows of a batch
"""

from .batch_eval import (
    STRENGTH_BITS,
    CATEGORY_SHIFT,
    NUM_CARDS,
    BatchEvalError,
    card_to_idx,
    idx_to_card,
    hand_strength,
    encode_hands,
    evaluate_batch,
    batch_winners,
)

__all__ = [
    "STRENGTH_BITS",
    "CATEGORY_SHIFT",
    "NUM_CARDS",
    "BatchEvalError",
    "card_to_idx",
    "idx_to_card",
    "hand_strength",
    "encode_hands",
    "evaluate_batch",
    "batch_winners",
]
