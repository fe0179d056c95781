"""REST endpoints for the dev host's balance ledger."""

import logging

from fastapi import APIRouter, HTTPException, status

from coinflip.dependencies.auth import RequestOrigin
from coinflip.dependencies.game import CurrentRuntime
from coinflip.schemas.game import BalanceResponse
from coinflip.services.game.engine import AuthError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ledger", tags=["ledger"])


def _unauthorized(e: AuthError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"error_code": e.code, "message": e.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.get("/balance", response_model=BalanceResponse)
def get_balance(runtime: CurrentRuntime, origin: RequestOrigin):
    """Get the caller's balance."""
    try:
        account, balance = runtime.balance(origin)
    except AuthError as e:
        raise _unauthorized(e)
    return BalanceResponse(account=account, balance=balance)


@router.post("/faucet", response_model=BalanceResponse)
def faucet(runtime: CurrentRuntime, origin: RequestOrigin):
    """Credit the caller with the configured faucet amount."""
    try:
        account, balance = runtime.faucet(origin)
    except AuthError as e:
        raise _unauthorized(e)
    logger.info("POST /ledger/faucet - account: %s, balance: %d", account, balance)
    return BalanceResponse(account=account, balance=balance)
