"""REST endpoints for the coinflip game module."""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from coinflip.dependencies.auth import RequestOrigin
from coinflip.dependencies.game import CurrentRuntime
from coinflip.schemas.game import (
    ActionResponse,
    ConfigureWagerRequest,
    GameStateResponse,
    NonceResponse,
    PlayResponse,
    PotResponse,
    WagerResponse,
)
from coinflip.services.game import ProcessResult
from coinflip.services.game.engine import (
    AuthError,
    InsufficientFundsError,
    NotConfiguredError,
    RoundPlayed,
)
from coinflip.services.game.engine.events import AnyGameEvent

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/game", tags=["game"])

ERROR_STATUS = {
    AuthError.code: status.HTTP_401_UNAUTHORIZED,
    NotConfiguredError.code: status.HTTP_409_CONFLICT,
    InsufficientFundsError.code: status.HTTP_402_PAYMENT_REQUIRED,
}


def _raise_for_failure(result: ProcessResult) -> None:
    if result.success:
        return

    status_code = ERROR_STATUS.get(result.error_code or "", status.HTTP_400_BAD_REQUEST)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    raise HTTPException(
        status_code=status_code,
        detail={"error_code": result.error_code, "message": result.error_message},
        headers=headers,
    )


@router.get("/state", response_model=GameStateResponse)
def get_state(runtime: CurrentRuntime):
    """Get all three game slots."""
    state = runtime.module.get_state()
    return GameStateResponse(wager=state.wager, pot=state.pot, nonce=state.nonce)


@router.get("/wager", response_model=WagerResponse)
def get_wager(runtime: CurrentRuntime):
    return WagerResponse(wager=runtime.module.get_wager())


@router.get("/pot", response_model=PotResponse)
def get_pot(runtime: CurrentRuntime):
    return PotResponse(pot=runtime.module.get_pot())


@router.get("/nonce", response_model=NonceResponse)
def get_nonce(runtime: CurrentRuntime):
    return NonceResponse(nonce=runtime.module.get_nonce())


@router.post("/wager", response_model=ActionResponse)
def configure_wager(
    runtime: CurrentRuntime,
    origin: RequestOrigin,
    request: ConfigureWagerRequest,
):
    """Configure the wager and seed the pot.

    Only the first successful call has an effect; later calls succeed
    without changing anything and return no events.

    Raises:
        HTTPException 401: If the origin is not authenticated.
    """
    logger.info("POST /game/wager - amount: %d", request.amount)

    result = runtime.configure_wager(origin, request.amount)
    _raise_for_failure(result)

    return ActionResponse(events=result.events)


@router.post("/play", response_model=PlayResponse)
def play(runtime: CurrentRuntime, origin: RequestOrigin):
    """Pay the wager and play one round.

    Raises:
        HTTPException 401: If the origin is not authenticated.
        HTTPException 409: If the wager has not been configured.
        HTTPException 402: If the caller cannot afford the wager.
    """
    logger.info("POST /game/play")

    result = runtime.play(origin)
    _raise_for_failure(result)

    round_played = next(e for e in result.events if isinstance(e, RoundPlayed))
    logger.info(
        "Round played via API: participant=%s, winnings=%d",
        round_played.participant,
        round_played.winnings,
    )
    return PlayResponse(
        events=result.events,
        participant=round_played.participant,
        winnings=round_played.winnings,
    )


@router.get("/notifications", response_model=list[AnyGameEvent])
def get_notifications(
    runtime: CurrentRuntime,
    since: int = Query(0, ge=0, description="First sequence number to return"),
):
    """Get emitted notifications, oldest first."""
    return runtime.module.sink.since(since)
