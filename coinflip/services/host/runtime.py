"""Dev host runtime - wires the game module to in-process collaborators.

Requests are applied one at a time under a lock, and every applied
request closes a block so the next one sees a fresh randomness seed.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any
from uuid import UUID

from coinflip.services.game import GameModule, ProcessResult
from coinflip.services.game.engine import HostInterface

from .identity import TokenIdentityVerifier
from .ledger import InMemoryBalanceLedger
from .randomness import BlockRandomness

logger = logging.getLogger(__name__)


class GameRuntime:
    def __init__(
        self,
        module: GameModule,
        identity: TokenIdentityVerifier,
        ledger: InMemoryBalanceLedger,
        randomness: BlockRandomness,
        faucet_amount: int = 0,
    ) -> None:
        self.module = module
        self.identity = identity
        self.ledger = ledger
        self.randomness = randomness
        self.faucet_amount = faucet_amount
        self._lock = threading.Lock()

    @classmethod
    def build(
        cls,
        module_factory: Callable[[HostInterface], GameModule],
        identity: TokenIdentityVerifier,
        ledger: InMemoryBalanceLedger,
        randomness: BlockRandomness,
        faucet_amount: int = 0,
    ) -> "GameRuntime":
        """Create a runtime whose module uses the given collaborators.

        module_factory receives the HostInterface and returns a GameModule.
        """
        host = HostInterface(identity=identity, ledger=ledger, randomness=randomness)
        return cls(module_factory(host), identity, ledger, randomness, faucet_amount)

    def configure_wager(self, origin: Any, amount: int) -> ProcessResult:
        with self._lock:
            return self._finish(self.module.configure_wager(origin, amount))

    def play(self, origin: Any) -> ProcessResult:
        with self._lock:
            return self._finish(self.module.play(origin))

    def faucet(self, origin: Any) -> tuple[UUID, int]:
        """Endow the authenticated caller with the faucet amount.

        Raises:
            AuthError: If origin cannot be authenticated.
        """
        with self._lock:
            identity = self.identity.authenticate(origin)
            return identity, self.ledger.endow(identity, self.faucet_amount)

    def balance(self, origin: Any) -> tuple[UUID, int]:
        with self._lock:
            identity = self.identity.authenticate(origin)
            return identity, self.ledger.balance_of(identity)

    def _finish(self, result: ProcessResult) -> ProcessResult:
        if result.success:
            self.randomness.new_block()
            logger.debug("Block closed: number=%d", self.randomness.block_number)
        return result
