"""Error types raised at the game module's collaborator seams.

GameError subclasses are recoverable: process_action turns them into a
failed ProcessResult with no state change. FatalInvariantError is not a
GameError and is never converted; it must abort the host.
"""


class GameError(Exception):
    """Base class for request-level errors carrying a client error code."""

    code = "GAME_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthError(GameError):
    """The request origin could not be authenticated."""

    code = "AUTH_ERROR"


class NotConfiguredError(GameError):
    """A round was requested before the wager was configured."""

    code = "NOT_CONFIGURED"


class InsufficientFundsError(GameError):
    """The balance ledger refused to withdraw the wager."""

    code = "INSUFFICIENT_FUNDS"


class LedgerError(GameError):
    """The balance ledger refused a transfer for any other reason."""

    code = "LEDGER_ERROR"


class FatalInvariantError(RuntimeError):
    """A transfer that cannot fail has failed.

    Raised when the winning payout is refused after the wager was already
    withdrawn from the same account.
    """
