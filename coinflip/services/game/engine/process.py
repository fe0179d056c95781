"""Main entry point for game action processing.

This module provides the primary interface for processing game actions:
- process_action(): Authenticates, validates and processes any game action
- Dispatches to specialized handlers based on action type
- Returns ProcessResult with new state and events
"""

import logging
from typing import Any

from coinflip.schemas.game_engine import GameState

from .actions import ConfigureWagerAction, GameAction, PlayAction
from .configure import process_configure_wager
from .errors import AuthError
from .host import HostInterface
from .play import process_play
from .validation import ProcessResult, validate_action

logger = logging.getLogger(__name__)


def process_action(
    state: GameState,
    action: GameAction,
    origin: Any,
    host: HostInterface,
) -> ProcessResult:
    """Process a game action and return the result.

    This is the main entry point for all game actions. It:
    1. Authenticates the origin through the host's identity verifier
    2. Validates the action is legal given current state
    3. Dispatches to the appropriate handler
    4. Returns ProcessResult with new state and events

    The input state is never modified. On failure the result carries no
    state and no events.

    Args:
        state: Current game state.
        action: The action to process.
        origin: Credential of the submitter, interpreted by host.identity.
        host: Collaborators provided by the host ledger.

    Returns:
        ProcessResult containing:
        - success: Whether the action was applied
        - state: The new game state (if successful)
        - events: Notifications to emit (if successful)
        - error_code/error_message: Error details (if failed)

    Raises:
        FatalInvariantError: If a payout that cannot fail was refused.

    Example:
        >>> result = process_action(state, PlayAction(), token, host)
        >>> if result.success:
        ...     store.commit(state, result.state)
        ... else:
        ...     reject(result.error_code, result.error_message)
    """
    action_type = type(action).__name__
    logger.info("Processing action: type=%s", action_type)
    logger.debug("Action details: %s", action)

    try:
        participant = host.identity.authenticate(origin)
    except AuthError as e:
        logger.warning("Authentication failed: action=%s, reason=%s", action_type, e.message)
        return ProcessResult.failure(e.code, e.message)

    validation = validate_action(state, action)
    if not validation.is_valid:
        logger.warning(
            "Action validation failed: code=%s, message=%s, participant=%s, action=%s",
            validation.error_code,
            validation.error_message,
            participant,
            action_type,
        )
        return ProcessResult.failure(
            validation.error_code or "VALIDATION_ERROR",
            validation.error_message or "Invalid action",
        )

    if isinstance(action, ConfigureWagerAction):
        result = process_configure_wager(state, action.amount)

    elif isinstance(action, PlayAction):
        result = process_play(state, participant, host)

    else:
        logger.error("Unknown action type received: %s", action_type)
        return ProcessResult.failure(
            "UNKNOWN_ACTION",
            f"Unknown action type: {action_type}",
        )

    if result.success:
        logger.info(
            "Action processed successfully: type=%s, participant=%s, events_generated=%d",
            action_type,
            participant,
            len(result.events),
        )
    else:
        logger.warning(
            "Action processing failed: type=%s, participant=%s, error=%s",
            action_type,
            participant,
            result.error_code,
        )

    return result
