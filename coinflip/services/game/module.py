"""Game module facade used by the host ledger.

Loads the current state from the store, runs the pure engine, and on
success commits the new state and emits its events. A failed request
touches neither the store nor the sink.
"""

import logging
from typing import Any

from coinflip.schemas.game_engine import GameState

from .engine import (
    ConfigureWagerAction,
    GameAction,
    HostInterface,
    PlayAction,
    ProcessResult,
    process_action,
)
from .notifications import NotificationSink
from .store import GameStateStore

logger = logging.getLogger(__name__)


class GameModule:
    def __init__(
        self,
        store: GameStateStore,
        host: HostInterface,
        sink: NotificationSink,
    ) -> None:
        self.store = store
        self.host = host
        self.sink = sink

    def configure_wager(self, origin: Any, amount: int) -> ProcessResult:
        return self.apply(ConfigureWagerAction(amount=amount), origin)

    def play(self, origin: Any) -> ProcessResult:
        return self.apply(PlayAction(), origin)

    def apply(self, action: GameAction, origin: Any) -> ProcessResult:
        """Apply one request against the stored state."""
        before = self.store.load()
        result = process_action(before, action, origin, self.host)

        if not result.success or result.state is None:
            return result

        self.store.commit(before, result.state)
        for event in result.events:
            self.sink.emit(event)

        logger.debug(
            "Request applied: wager=%s, pot=%d, nonce=%d",
            result.state.wager,
            result.state.pot,
            result.state.nonce,
        )
        return result

    def get_wager(self) -> int | None:
        return self.store.get_wager()

    def get_pot(self) -> int:
        return self.store.get_pot()

    def get_nonce(self) -> int:
        return self.store.get_nonce()

    def get_state(self) -> GameState:
        return self.store.load()
