"""Game action types - explicit requests submitted to the game module."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from coinflip.schemas.game_engine import Balance


class ConfigureWagerAction(BaseModel):
    """Set the cost of one round and seed the pot (first call only)."""

    action_type: Literal["configure_wager"] = "configure_wager"
    amount: Balance = Field(..., description="Cost to play one round")


class PlayAction(BaseModel):
    """Pay the wager into the pot and flip for the whole pot."""

    action_type: Literal["play"] = "play"


# Union type for all game actions
GameAction = Annotated[
    ConfigureWagerAction | PlayAction,
    Field(discriminator="action_type"),
]


def build_action_from_payload(payload: dict) -> GameAction:
    """Build a typed action from a raw payload dict.

    Args:
        payload: Dict with 'action_type' key and action-specific fields.

    Returns:
        The appropriate GameAction subtype.

    Raises:
        ValueError: If action_type is missing or unknown.
        pydantic.ValidationError: If the action fields are malformed.
    """
    action_type = payload.get("action_type")

    if action_type == "configure_wager":
        return ConfigureWagerAction.model_validate(payload)
    elif action_type == "play":
        return PlayAction.model_validate(payload)
    else:
        raise ValueError(f"Unknown action type: {action_type}")
