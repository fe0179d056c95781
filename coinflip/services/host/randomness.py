"""Per-block randomness seed for the dev host."""

import logging

from coinflip.services.game.engine.host import blake2_256

logger = logging.getLogger(__name__)

SEED_LENGTH = 32


class BlockRandomness:
    """Seed that changes once per block.

    Each new seed is BLAKE2b-256 of the previous seed followed by the new
    block number as u64 little-endian.
    """

    def __init__(self, genesis_seed: bytes = bytes(SEED_LENGTH)) -> None:
        if len(genesis_seed) != SEED_LENGTH:
            raise ValueError(f"Genesis seed must be {SEED_LENGTH} bytes")
        self._seed = genesis_seed
        self.block_number = 0

    def current_seed(self) -> bytes:
        return self._seed

    def new_block(self) -> bytes:
        self.block_number += 1
        self._seed = blake2_256(self._seed + self.block_number.to_bytes(8, "little"))
        logger.debug("New block: number=%d, seed=%s", self.block_number, self._seed.hex()[:16])
        return self._seed
