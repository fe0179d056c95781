"""Game event types - notifications emitted on successful state transitions.

Events describe what a request did, enabling:
- Observers to follow payouts without re-reading state
- Audit logging of every round
- Catch-up for clients that missed notifications
"""

from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, Field

from coinflip.schemas.game_engine import Balance


class GameEvent(BaseModel):
    """Base class for all game events."""

    event_type: str
    seq: int = 0  # Sequence number assigned by the notification sink


class WagerConfigured(GameEvent):
    """The wager was set for the first time and the pot seeded with it."""

    event_type: Literal["wager_configured"] = "wager_configured"
    amount: Balance


class RoundPlayed(GameEvent):
    """A participant paid the wager and played one round."""

    event_type: Literal["round_played"] = "round_played"
    participant: UUID
    winnings: Balance = Field(
        ..., description="Pre-round pot on a win, zero on a loss"
    )


# Union of all event types for type checking
AnyGameEvent = Annotated[
    WagerConfigured | RoundPlayed,
    Field(discriminator="event_type"),
]
