"""Pydantic schemas for the game HTTP surface."""

from uuid import UUID

from pydantic import BaseModel, Field

from coinflip.schemas.game_engine import Balance, Nonce
from coinflip.services.game.engine.events import AnyGameEvent


class ConfigureWagerRequest(BaseModel):
    """Request body for configuring the wager."""

    amount: Balance = Field(..., description="Cost to play one round")


class GameStateResponse(BaseModel):
    """All three game slots."""

    wager: Balance | None = Field(None, description="Cost of one round, null until configured")
    pot: Balance
    nonce: Nonce


class WagerResponse(BaseModel):
    wager: Balance | None


class PotResponse(BaseModel):
    pot: Balance


class NonceResponse(BaseModel):
    nonce: Nonce


class ActionResponse(BaseModel):
    """Response from an applied request."""

    events: list[AnyGameEvent] = Field(
        default_factory=list, description="Notifications emitted by the request"
    )


class PlayResponse(ActionResponse):
    """Response from a played round."""

    participant: UUID
    winnings: Balance = Field(..., description="Zero on a loss")


class BalanceResponse(BaseModel):
    """Dev ledger balance of the caller."""

    account: UUID
    balance: Balance
