"""Round play logic."""

import logging
from uuid import UUID

from coinflip.schemas.game_engine import GameState, saturating_add, wrapping_increment

from .errors import FatalInvariantError, GameError, NotConfiguredError
from .events import RoundPlayed
from .host import HostInterface
from .outcome import derive_outcome
from .validation import ProcessResult

logger = logging.getLogger(__name__)


def process_play(state: GameState, participant: UUID, host: HostInterface) -> ProcessResult:
    """Play one round for an authenticated participant.

    The wager withdrawal is the last step that may fail. Once it has
    succeeded the round always completes:
    - a win pays the whole pre-round pot and empties it
    - the withdrawn wager is added to the pot either way
    - the nonce advances by one, wrapping at 2**64

    Args:
        state: Current game state.
        participant: Identity returned by the host's identity verifier.
        host: Ledger, randomness and hashing collaborators.

    Returns:
        ProcessResult with the new state and a RoundPlayed event, or a
        failure if the wager could not be withdrawn.

    Raises:
        FatalInvariantError: If the winning payout is refused by the ledger.
    """
    wager = state.wager
    if wager is None:
        logger.error("process_play called before the wager was configured")
        return ProcessResult.failure(
            NotConfiguredError.code, "Wager amount has not been configured"
        )

    try:
        host.ledger.withdraw(participant, wager, keep_alive=True)
    except GameError as e:
        logger.warning(
            "Wager withdrawal refused: participant=%s, wager=%d, code=%s",
            participant,
            wager,
            e.code,
        )
        return ProcessResult.failure(e.code, e.message)

    # Committed from here on: nothing below may return a failure
    pot = state.pot
    winnings = 0
    won = derive_outcome(
        host.randomness.current_seed(),
        participant,
        state.nonce,
        host.hasher,
    )

    if won:
        try:
            host.ledger.deposit_into_existing(participant, pot)
        except GameError as e:
            logger.critical(
                "Payout refused after withdrawal: participant=%s, pot=%d, code=%s",
                participant,
                pot,
                e.code,
            )
            raise FatalInvariantError(
                f"Payout of {pot} to {participant} failed after wager withdrawal"
            ) from e
        winnings = pot
        pot = 0

    pot = saturating_add(pot, wager)
    nonce = wrapping_increment(state.nonce)

    new_state = state.model_copy(update={"pot": pot, "nonce": nonce})
    logger.info(
        "Round played: participant=%s, won=%s, winnings=%d, pot=%d, nonce=%d",
        str(participant)[:8],
        won,
        winnings,
        pot,
        nonce,
    )
    return ProcessResult.ok(
        new_state,
        [RoundPlayed(participant=participant, winnings=winnings)],
    )
