"""Interfaces the host ledger passes to the game module at construction time."""

import hashlib
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol
from uuid import UUID

Hasher = Callable[[bytes], bytes]


def blake2_256(data: bytes) -> bytes:
    """BLAKE2b with a 32-byte digest."""
    return hashlib.blake2b(data, digest_size=32).digest()


class IdentityVerifier(Protocol):
    def authenticate(self, origin: Any) -> UUID:
        """Return the identity behind origin or raise AuthError."""
        ...


class BalanceLedger(Protocol):
    def withdraw(self, identity: UUID, amount: int, keep_alive: bool = True) -> None:
        """Remove amount from identity's balance or raise InsufficientFundsError."""
        ...

    def deposit_into_existing(self, identity: UUID, amount: int) -> None:
        """Add amount to an existing account or raise LedgerError."""
        ...


class RandomnessSource(Protocol):
    def current_seed(self) -> bytes:
        """Seed valid for the current execution context (block)."""
        ...


@dataclass
class HostInterface:
    """Collaborators consumed by the game engine."""

    identity: IdentityVerifier
    ledger: BalanceLedger
    randomness: RandomnessSource
    hasher: Hasher = field(default=blake2_256)
