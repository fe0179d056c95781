from typing import Annotated

from pydantic import BaseModel, Field

# Balances are unsigned 128-bit quantities, nonces unsigned 64-bit counters
MAX_BALANCE = 2**128 - 1
MAX_NONCE = 2**64 - 1

Balance = Annotated[int, Field(ge=0, le=MAX_BALANCE)]
Nonce = Annotated[int, Field(ge=0, le=MAX_NONCE)]


def saturating_add(balance: int, amount: int) -> int:
    return min(balance + amount, MAX_BALANCE)


def wrapping_increment(nonce: int) -> int:
    return (nonce + 1) & MAX_NONCE


# Game state as stored by the host ledger
class GameState(BaseModel):
    """Core game state - the three persistent slots of the game module.

    wager is None until the game has been configured. pot and nonce
    start at zero when the module is installed.
    """

    wager: Balance | None = None
    pot: Balance = 0
    nonce: Nonce = 0

    @property
    def is_configured(self) -> bool:
        return self.wager is not None
