"""Bearer-token identity verification for the dev host."""

import logging
from typing import Any
from uuid import UUID

import jwt

from coinflip.services.game.engine.errors import AuthError

logger = logging.getLogger(__name__)

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


class TokenIdentityVerifier:
    """Authenticates an origin given as a signed JWT whose 'sub' is a UUID."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        audience: str = "authenticated",
    ) -> None:
        if algorithm not in HMAC_ALGORITHMS:
            raise ValueError(f"Algorithm {algorithm} not allowed, expected one of {HMAC_ALGORITHMS}")
        self._secret = secret
        self._algorithm = algorithm
        self._audience = audience

    def authenticate(self, origin: Any) -> UUID:
        if not origin or not isinstance(origin, str):
            logger.warning("Authentication failed: unsigned origin")
            raise AuthError("Request origin is not signed")

        try:
            payload = jwt.decode(
                origin,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Authentication failed: token expired")
            raise AuthError("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.warning("Authentication failed: invalid token - %s", e)
            raise AuthError(f"Invalid token: {e}")

        subject = payload.get("sub")
        try:
            identity = UUID(str(subject))
        except ValueError:
            logger.warning("Authentication failed: subject is not a UUID - %s", subject)
            raise AuthError("Token subject is not a valid account id")

        logger.debug("Origin authenticated: %s", identity)
        return identity

    def issue(self, identity: UUID, **claims: Any) -> str:
        """Sign a token for identity (dev tooling and tests)."""
        payload = {"sub": str(identity), "aud": self._audience, **claims}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)
