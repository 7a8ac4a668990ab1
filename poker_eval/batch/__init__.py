"""Batched evaluation.

This module provides:
- Array encoding of hands (encoding.py)
- Tensor classification of many hands at once (tensor_eval.py)
"""

from .encoding import (
    HandEncodingError,
    card_to_idx,
    idx_to_card,
    encode_hand,
    encode_hands,
    decode_hand,
)

from .tensor_eval import (
    TensorHandClassifier,
    hands_to_tensor,
)

__all__ = [
    # Encoding
    "HandEncodingError",
    "card_to_idx",
    "idx_to_card",
    "encode_hand",
    "encode_hands",
    "decode_hand",
    # Tensor classification
    "TensorHandClassifier",
    "hands_to_tensor",
]
