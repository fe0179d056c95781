"""Dev host - in-process implementations of the ledger collaborators."""

from .identity import TokenIdentityVerifier
from .ledger import InMemoryBalanceLedger
from .randomness import BlockRandomness
from .runtime import GameRuntime

__all__ = [
    "TokenIdentityVerifier",
    "InMemoryBalanceLedger",
    "BlockRandomness",
    "GameRuntime",
]
