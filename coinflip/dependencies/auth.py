import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

logger = logging.getLogger(__name__)


async def get_request_origin(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(HTTPBearer(auto_error=False)),
    ],
) -> str | None:
    """Get the raw bearer token to hand to the game module as the origin.

    The token is not verified here: the module's identity verifier
    authenticates it, so an unsigned request is rejected as AUTH_ERROR by
    the module itself.
    """
    if credentials is None:
        logger.debug("Request has no authorization header")
        return None
    logger.debug("Origin token extracted from request")
    return credentials.credentials


RequestOrigin = Annotated[str | None, Depends(get_request_origin)]
