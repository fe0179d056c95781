"""Wager configuration logic."""

import logging

from coinflip.schemas.game_engine import GameState

from .events import WagerConfigured
from .validation import ProcessResult

logger = logging.getLogger(__name__)


def process_configure_wager(state: GameState, amount: int) -> ProcessResult:
    """Set the wager and seed the pot with it, once.

    If a wager is already set the request still succeeds but changes
    nothing and emits no event.

    Args:
        state: Current game state.
        amount: Cost of one round. Zero is allowed and makes play free.

    Returns:
        ProcessResult with the (possibly unchanged) state and events.
    """
    if state.is_configured:
        logger.info(
            "Wager already configured: current=%d, requested=%d (no-op)",
            state.wager,
            amount,
        )
        return ProcessResult.ok(state, [])

    new_state = state.model_copy(update={"wager": amount, "pot": amount})
    logger.info("Wager configured: amount=%d, pot=%d", amount, amount)
    return ProcessResult.ok(new_state, [WagerConfigured(amount=amount)])
