import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coinflip.config import get_settings
from coinflip.dependencies.game import get_game_runtime, reset_game_runtime
from coinflip.dependencies.redis import close_redis_client
from coinflip.routers import game, ledger

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Coinflip API")
    logger.debug("Debug mode: %s", settings.DEBUG)

    get_game_runtime()
    logger.info("Game runtime initialized")

    yield

    logger.info("Shutting down Coinflip API")
    reset_game_runtime()
    close_redis_client()
    logger.info("Game runtime and Redis cleanup complete")


app = FastAPI(
    title="Coinflip API",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.debug("CORS configured with origins: %s", settings.CORS_ORIGINS)

app.include_router(game.router, prefix="/api/v1")
app.include_router(ledger.router, prefix="/api/v1")
logger.debug("Routers registered: /api/v1/game, /api/v1/ledger")


@app.get("/")
def root():
    return {"message": "Coinflip API"}


@app.get("/health")
def health():
    return {"status": "healthy"}
