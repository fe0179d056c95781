import logging
from typing import Annotated

from fastapi import Depends

from coinflip.config import Settings, get_settings
from coinflip.services.game import (
    GameModule,
    InMemoryGameStateStore,
    InMemoryNotificationSink,
    RedisGameStateStore,
    RedisNotificationSink,
)
from coinflip.services.game.engine import HostInterface
from coinflip.services.host import (
    BlockRandomness,
    GameRuntime,
    InMemoryBalanceLedger,
    TokenIdentityVerifier,
)

from .redis import get_redis_client

logger = logging.getLogger(__name__)

_game_runtime: GameRuntime | None = None


def build_game_runtime(settings: Settings) -> GameRuntime:
    """Wire a game module to the dev host collaborators described by settings."""
    if settings.STATE_BACKEND == "redis":
        client = get_redis_client()
        store = RedisGameStateStore(client, prefix=settings.REDIS_KEY_PREFIX)
        sink = RedisNotificationSink(client, prefix=settings.REDIS_KEY_PREFIX)
    else:
        store = InMemoryGameStateStore()
        sink = InMemoryNotificationSink()

    def module_factory(host: HostInterface) -> GameModule:
        return GameModule(store=store, host=host, sink=sink)

    return GameRuntime.build(
        module_factory,
        identity=TokenIdentityVerifier(
            settings.AUTH_JWT_SECRET,
            algorithm=settings.AUTH_JWT_ALGORITHM,
            audience=settings.AUTH_JWT_AUDIENCE,
        ),
        ledger=InMemoryBalanceLedger(existential_deposit=settings.EXISTENTIAL_DEPOSIT),
        randomness=BlockRandomness(settings.genesis_seed_bytes),
        faucet_amount=settings.FAUCET_AMOUNT,
    )


def get_game_runtime() -> GameRuntime:
    """Get the singleton game runtime, building it on first use."""
    global _game_runtime
    if _game_runtime is None:
        settings = get_settings()
        logger.info("Initializing game runtime: backend=%s", settings.STATE_BACKEND)
        _game_runtime = build_game_runtime(settings)
    return _game_runtime


def reset_game_runtime() -> None:
    global _game_runtime
    _game_runtime = None


CurrentRuntime = Annotated[GameRuntime, Depends(get_game_runtime)]
