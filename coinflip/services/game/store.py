"""Game state repositories.

The module's three slots (wager, pot, nonce) live in a store injected by
the host. Each slot is readable on its own; a missing slot reads as its
initial value.
"""

import logging
from abc import ABC, abstractmethod

from upstash_redis import Redis

from coinflip.schemas.game_engine import GameState

logger = logging.getLogger(__name__)


class GameStateStore(ABC):
    """Typed accessors for the persistent game slots."""

    @abstractmethod
    def get_wager(self) -> int | None: ...

    @abstractmethod
    def set_wager(self, wager: int) -> None: ...

    @abstractmethod
    def get_pot(self) -> int: ...

    @abstractmethod
    def set_pot(self, pot: int) -> None: ...

    @abstractmethod
    def get_nonce(self) -> int: ...

    @abstractmethod
    def set_nonce(self, nonce: int) -> None: ...

    def load(self) -> GameState:
        """Snapshot all three slots."""
        return GameState(
            wager=self.get_wager(),
            pot=self.get_pot(),
            nonce=self.get_nonce(),
        )

    def commit(self, before: GameState, after: GameState) -> None:
        """Write the slots that changed between two snapshots."""
        if after.wager != before.wager and after.wager is not None:
            self.set_wager(after.wager)
        if after.pot != before.pot:
            self.set_pot(after.pot)
        if after.nonce != before.nonce:
            self.set_nonce(after.nonce)


class InMemoryGameStateStore(GameStateStore):
    def __init__(self, state: GameState | None = None) -> None:
        state = state or GameState()
        self._wager = state.wager
        self._pot = state.pot
        self._nonce = state.nonce

    def get_wager(self) -> int | None:
        return self._wager

    def set_wager(self, wager: int) -> None:
        self._wager = wager

    def get_pot(self) -> int:
        return self._pot

    def set_pot(self, pot: int) -> None:
        self._pot = pot

    def get_nonce(self) -> int:
        return self._nonce

    def set_nonce(self, nonce: int) -> None:
        self._nonce = nonce


class RedisGameStateStore(GameStateStore):
    """Slots stored as decimal strings under '<prefix>:wager|pot|nonce'."""

    def __init__(self, client: Redis, prefix: str = "coinflip") -> None:
        self._client = client
        self._prefix = prefix

    def _key(self, slot: str) -> str:
        return f"{self._prefix}:{slot}"

    def _get_int(self, slot: str) -> int | None:
        raw = self._client.get(self._key(slot))
        if raw is None:
            return None
        return int(raw)

    def get_wager(self) -> int | None:
        return self._get_int("wager")

    def set_wager(self, wager: int) -> None:
        self._client.set(self._key("wager"), str(wager))

    def get_pot(self) -> int:
        return self._get_int("pot") or 0

    def set_pot(self, pot: int) -> None:
        self._client.set(self._key("pot"), str(pot))

    def get_nonce(self) -> int:
        return self._get_int("nonce") or 0

    def set_nonce(self, nonce: int) -> None:
        self._client.set(self._key("nonce"), str(nonce))

    def commit(self, before: GameState, after: GameState) -> None:
        """Write all changed slots in a single MSET."""
        values: dict[str, str] = {}
        if after.wager != before.wager and after.wager is not None:
            values[self._key("wager")] = str(after.wager)
        if after.pot != before.pot:
            values[self._key("pot")] = str(after.pot)
        if after.nonce != before.nonce:
            values[self._key("nonce")] = str(after.nonce)

        if not values:
            logger.debug("No slots changed, skipping Redis write")
            return

        self._client.mset(values)
        logger.debug("Committed slots to Redis: %s", sorted(values))
