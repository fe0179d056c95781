"""Pseudo-random round outcome derivation.

The outcome is a pure function of the block seed, the participant and the
round nonce, so every node replaying the same request reaches the same
result. The nonce keeps repeated plays by one participant within one block
from sharing an outcome.

The seed is known before a request is included, so outcomes are
predictable to anyone who can time their submission. Fine for small
stakes only.
"""

import logging
from uuid import UUID

from .host import Hasher, blake2_256

logger = logging.getLogger(__name__)

# Win iff the leading digest byte is below this (128/256 = 50%)
WIN_THRESHOLD = 128


def encode_outcome_input(seed: bytes, participant: UUID, nonce: int) -> bytes:
    """Concatenate seed, raw participant bytes and the nonce as u64 little-endian."""
    return seed + participant.bytes + nonce.to_bytes(8, "little")


def derive_outcome(
    seed: bytes,
    participant: UUID,
    nonce: int,
    hasher: Hasher = blake2_256,
) -> bool:
    """Return True if the participant wins this round.

    Args:
        seed: Randomness seed of the current block.
        participant: Authenticated identity of the player.
        nonce: Current round nonce (before increment).
        hasher: Hash function applied to the encoded inputs.

    Raises:
        ValueError: If the hasher returns an empty digest.
    """
    digest = hasher(encode_outcome_input(seed, participant, nonce))
    if not digest:
        raise ValueError("Hasher returned an empty digest")

    won = digest[0] < WIN_THRESHOLD
    logger.debug(
        "Outcome derived: participant=%s, nonce=%d, leading_byte=%d, won=%s",
        str(participant)[:8],
        nonce,
        digest[0],
        won,
    )
    return won
