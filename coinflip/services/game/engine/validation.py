"""Validation layer for game actions and ProcessResult pattern.

Separates validation from processing logic:
- validate_action() checks if an action is valid given current state
- ProcessResult replaces exceptions for control flow
"""

import logging
from dataclasses import dataclass, field

from coinflip.schemas.game_engine import GameState

from .actions import ConfigureWagerAction, GameAction, PlayAction
from .errors import NotConfiguredError
from .events import AnyGameEvent

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Result of processing a game action.

    A failed result never carries a state: the caller keeps its prior
    state untouched and emits nothing.
    """

    state: GameState | None = None
    events: list[AnyGameEvent] = field(default_factory=list)
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(
        cls,
        state: GameState,
        events: list[AnyGameEvent] | None = None,
    ) -> "ProcessResult":
        """Create a successful result with new state and events."""
        return cls(
            state=state,
            events=events or [],
            success=True,
        )

    @classmethod
    def failure(cls, code: str, message: str) -> "ProcessResult":
        """Create a failure result with error details."""
        return cls(
            state=None,
            events=[],
            success=False,
            error_code=code,
            error_message=message,
        )


@dataclass
class ValidationResult:
    """Result of validating an action before processing."""

    is_valid: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True)

    @classmethod
    def error(cls, code: str, message: str) -> "ValidationResult":
        """Create a validation failure with error details."""
        return cls(
            is_valid=False,
            error_code=code,
            error_message=message,
        )


def validate_action(state: GameState, action: GameAction) -> ValidationResult:
    """Validate an action against the current state.

    Configuring is always valid (it is a no-op once configured). Playing
    requires a configured wager. Funds are checked later by the ledger.
    """
    action_type = type(action).__name__
    logger.debug(
        "Validating action: type=%s, configured=%s",
        action_type,
        state.is_configured,
    )

    if isinstance(action, ConfigureWagerAction):
        return ValidationResult.ok()

    if isinstance(action, PlayAction):
        if not state.is_configured:
            logger.warning("Validation failed: %s", NotConfiguredError.code)
            return ValidationResult.error(
                NotConfiguredError.code,
                "Wager amount has not been configured",
            )
        return ValidationResult.ok()

    logger.warning("Validation failed: UNKNOWN_ACTION, type=%s", action_type)
    return ValidationResult.error(
        "UNKNOWN_ACTION",
        f"Unknown action type: {action_type}",
    )
