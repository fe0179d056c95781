"""Game engine module - deterministic state-transition logic.

This module provides the core game engine with:
- Action types for the two requests (configure wager, play)
- Event types for notifications
- ProcessResult pattern for error handling
- Host interfaces injected by the ledger (identity, balances, randomness)

Usage:
    from coinflip.services.game.engine import (
        process_action,
        HostInterface,
        PlayAction,
    )

    result = process_action(state, PlayAction(), origin, host)

    if result.success:
        new_state = result.state
        events = result.events  # Hand these to the notification sink
    else:
        print(f"Error: {result.error_code} - {result.error_message}")
"""

# Actions - explicit requests
from .actions import (
    ConfigureWagerAction,
    GameAction,
    PlayAction,
    build_action_from_payload,
)

# Errors
from .errors import (
    AuthError,
    FatalInvariantError,
    GameError,
    InsufficientFundsError,
    LedgerError,
    NotConfiguredError,
)

# Events - notifications
from .events import AnyGameEvent, GameEvent, RoundPlayed, WagerConfigured

# Host collaborators
from .host import (
    BalanceLedger,
    Hasher,
    HostInterface,
    IdentityVerifier,
    RandomnessSource,
    blake2_256,
)

# Outcome derivation
from .outcome import WIN_THRESHOLD, derive_outcome, encode_outcome_input

# Main processing
from .process import process_action

# Result types
from .validation import ProcessResult, ValidationResult, validate_action

__all__ = [
    # Actions
    "GameAction",
    "ConfigureWagerAction",
    "PlayAction",
    "build_action_from_payload",
    # Errors
    "GameError",
    "AuthError",
    "NotConfiguredError",
    "InsufficientFundsError",
    "LedgerError",
    "FatalInvariantError",
    # Events
    "GameEvent",
    "AnyGameEvent",
    "WagerConfigured",
    "RoundPlayed",
    # Host
    "HostInterface",
    "IdentityVerifier",
    "BalanceLedger",
    "RandomnessSource",
    "Hasher",
    "blake2_256",
    # Outcome
    "WIN_THRESHOLD",
    "derive_outcome",
    "encode_outcome_input",
    # Processing
    "process_action",
    # Validation
    "ProcessResult",
    "ValidationResult",
    "validate_action",
]
