import logging
import sys
from functools import lru_cache
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App config
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    DEBUG: bool = False

    # Origin authentication
    AUTH_JWT_SECRET: str
    AUTH_JWT_ALGORITHM: str = "HS256"
    AUTH_JWT_AUDIENCE: str = "authenticated"

    # Dev ledger
    EXISTENTIAL_DEPOSIT: int = 1
    FAUCET_AMOUNT: int = 1000
    GENESIS_SEED: str = "00" * 32

    # State backend
    STATE_BACKEND: Literal["memory", "redis"] = "memory"
    UPSTASH_REDIS_REST_URL: str | None = None
    UPSTASH_REDIS_REST_TOKEN: str | None = None
    REDIS_KEY_PREFIX: str = "coinflip"

    @field_validator("AUTH_JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("AUTH_JWT_SECRET cannot be empty")
        return v

    @field_validator("AUTH_JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if v not in ("HS256", "HS384", "HS512"):
            raise ValueError("AUTH_JWT_ALGORITHM must be an HMAC algorithm (HS256/HS384/HS512)")
        return v

    @field_validator("EXISTENTIAL_DEPOSIT", "FAUCET_AMOUNT")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Balance settings must be non-negative")
        return v

    @field_validator("GENESIS_SEED")
    @classmethod
    def validate_genesis_seed(cls, v: str) -> str:
        try:
            seed = bytes.fromhex(v)
        except ValueError:
            raise ValueError("GENESIS_SEED must be hex encoded")
        if len(seed) != 32:
            raise ValueError("GENESIS_SEED must encode exactly 32 bytes")
        return v

    @model_validator(mode="after")
    def validate_redis_backend(self) -> "Settings":
        if self.STATE_BACKEND != "redis":
            return self
        if not self.UPSTASH_REDIS_REST_URL or not self.UPSTASH_REDIS_REST_URL.startswith("https://"):
            raise ValueError("UPSTASH_REDIS_REST_URL must be a valid HTTPS URL")
        if not self.UPSTASH_REDIS_REST_TOKEN or not self.UPSTASH_REDIS_REST_TOKEN.strip():
            raise ValueError("UPSTASH_REDIS_REST_TOKEN cannot be empty")
        return self

    @property
    def genesis_seed_bytes(self) -> bytes:
        return bytes.fromhex(self.GENESIS_SEED)


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if debug else logging.INFO
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    configure_logging(settings.DEBUG)
    logger.info("Settings loaded successfully")
    logger.debug("State backend: %s", settings.STATE_BACKEND)
    return settings
