"""Tests for round outcome derivation.

Critical scenarios tested:
- Same (seed, participant, nonce) always gives the same outcome
- Each input can flip the outcome
- Leading digest byte threshold (127 wins, 128 loses)
- Input encoding layout
"""

from uuid import UUID

import pytest

from coinflip.services.game.engine import (
    WIN_THRESHOLD,
    blake2_256,
    derive_outcome,
    encode_outcome_input,
)

from .conftest import FIXED_SEED, PARTICIPANT_1_ID, PARTICIPANT_2_ID


def leading_byte_hasher(value: int):
    """Hasher returning a digest that starts with value."""
    return lambda data: bytes([value]) + bytes(31)


class TestDeterminism:
    """Replaying a derivation must always agree."""

    def test_same_inputs_same_outcome(self):
        first = derive_outcome(FIXED_SEED, PARTICIPANT_1_ID, 7)
        for _ in range(10):
            assert derive_outcome(FIXED_SEED, PARTICIPANT_1_ID, 7) == first

    def test_default_hasher_is_blake2_256(self):
        encoded = encode_outcome_input(FIXED_SEED, PARTICIPANT_1_ID, 3)
        expected = blake2_256(encoded)[0] < WIN_THRESHOLD
        assert derive_outcome(FIXED_SEED, PARTICIPANT_1_ID, 3) == expected

    def test_nonce_decorrelates_outcomes(self):
        """Across many nonces the same participant sees both outcomes."""
        outcomes = {derive_outcome(FIXED_SEED, PARTICIPANT_1_ID, n) for n in range(64)}
        assert outcomes == {True, False}

    def test_win_rate_is_about_half(self):
        wins = sum(derive_outcome(FIXED_SEED, PARTICIPANT_1_ID, n) for n in range(1000))
        assert 400 < wins < 600


class TestEachInputCanFlipOutcome:
    """With a digest that exposes one input byte, changing that input flips the result."""

    def test_seed_flips_outcome(self):
        hasher = lambda data: data  # noqa: E731 - digest[0] is seed[0]
        low_seed = bytes([0]) + bytes(31)
        high_seed = bytes([200]) + bytes(31)

        assert derive_outcome(low_seed, PARTICIPANT_1_ID, 0, hasher) is True
        assert derive_outcome(high_seed, PARTICIPANT_1_ID, 0, hasher) is False

    def test_participant_flips_outcome(self):
        hasher = lambda data: data[len(FIXED_SEED):]  # noqa: E731 - digest[0] is participant byte 0
        low = UUID("01000000-0000-0000-0000-000000000000")
        high = UUID("ff000000-0000-0000-0000-000000000000")

        assert derive_outcome(FIXED_SEED, low, 0, hasher) is True
        assert derive_outcome(FIXED_SEED, high, 0, hasher) is False

    def test_nonce_flips_outcome(self):
        hasher = lambda data: data[-8:]  # noqa: E731 - digest[0] is the nonce's low byte
        assert derive_outcome(FIXED_SEED, PARTICIPANT_1_ID, 5, hasher) is True
        assert derive_outcome(FIXED_SEED, PARTICIPANT_1_ID, 250, hasher) is False


class TestThreshold:
    """A round is won iff the leading digest byte is below 128."""

    @pytest.mark.parametrize(
        ("leading_byte", "expected"),
        [(0, True), (127, True), (128, False), (255, False)],
    )
    def test_leading_byte_boundary(self, leading_byte: int, expected: bool):
        result = derive_outcome(
            FIXED_SEED, PARTICIPANT_1_ID, 0, leading_byte_hasher(leading_byte)
        )
        assert result is expected

    def test_empty_digest_rejected(self):
        with pytest.raises(ValueError):
            derive_outcome(FIXED_SEED, PARTICIPANT_1_ID, 0, lambda data: b"")


class TestEncoding:
    """Seed, raw participant bytes and u64 little-endian nonce, concatenated."""

    def test_layout(self):
        encoded = encode_outcome_input(FIXED_SEED, PARTICIPANT_2_ID, 1)

        assert len(encoded) == 32 + 16 + 8
        assert encoded[:32] == FIXED_SEED
        assert encoded[32:48] == PARTICIPANT_2_ID.bytes
        assert encoded[48:] == b"\x01" + bytes(7)

    def test_max_nonce_encodes(self):
        encoded = encode_outcome_input(FIXED_SEED, PARTICIPANT_1_ID, 2**64 - 1)
        assert encoded[-8:] == b"\xff" * 8
