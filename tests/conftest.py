"""Shared fixtures for game module tests."""

import os
from typing import Any
from uuid import UUID

import pytest

os.environ.setdefault("AUTH_JWT_SECRET", "test-secret-with-at-least-32-bytes!!")

from coinflip.services.game import (  # noqa: E402
    GameModule,
    InMemoryGameStateStore,
    InMemoryNotificationSink,
)
from coinflip.services.game.engine import AuthError, HostInterface, LedgerError  # noqa: E402
from coinflip.services.host import InMemoryBalanceLedger  # noqa: E402

# Fixed UUIDs for deterministic testing
PARTICIPANT_1_ID = UUID("00000000-0000-0000-0000-000000000001")
PARTICIPANT_2_ID = UUID("00000000-0000-0000-0000-000000000002")

STARTING_BALANCE = 1000
FIXED_SEED = bytes(range(32))

WIN_DIGEST = bytes(32)  # leading byte 0
LOSS_DIGEST = bytes([255]) * 32  # leading byte 255


class StaticIdentityVerifier:
    """Treats a UUID origin as signed by that account; anything else is unsigned."""

    def authenticate(self, origin: Any) -> UUID:
        if not isinstance(origin, UUID):
            raise AuthError("Request origin is not signed")
        return origin


class FixedRandomness:
    def __init__(self, seed: bytes = FIXED_SEED) -> None:
        self.seed = seed

    def current_seed(self) -> bytes:
        return self.seed


class ScriptedHasher:
    """Hasher that forces round outcomes in order, then keeps losing."""

    def __init__(self, outcomes: list[bool] | None = None) -> None:
        self.outcomes = list(outcomes or [])
        self.inputs: list[bytes] = []

    def __call__(self, data: bytes) -> bytes:
        self.inputs.append(data)
        if self.outcomes and self.outcomes.pop(0):
            return WIN_DIGEST
        return LOSS_DIGEST


class RefusingDepositLedger(InMemoryBalanceLedger):
    """Ledger whose payouts always fail after a successful withdrawal."""

    def deposit_into_existing(self, identity: UUID, amount: int) -> None:
        raise LedgerError(f"Account {identity} does not exist")


def create_ledger(existential_deposit: int = 1, balance: int = STARTING_BALANCE) -> InMemoryBalanceLedger:
    """Helper to create a ledger with both participants endowed."""
    ledger = InMemoryBalanceLedger(existential_deposit=existential_deposit)
    ledger.endow(PARTICIPANT_1_ID, balance)
    ledger.endow(PARTICIPANT_2_ID, balance)
    return ledger


def create_host(
    ledger: InMemoryBalanceLedger | None = None,
    hasher: ScriptedHasher | None = None,
) -> HostInterface:
    """Helper to create host collaborators with forced outcomes."""
    return HostInterface(
        identity=StaticIdentityVerifier(),
        ledger=ledger if ledger is not None else create_ledger(),
        randomness=FixedRandomness(),
        hasher=hasher if hasher is not None else ScriptedHasher(),
    )


@pytest.fixture
def ledger() -> InMemoryBalanceLedger:
    """Ledger with both participants holding the starting balance."""
    return create_ledger()


@pytest.fixture
def hasher() -> ScriptedHasher:
    """Hasher that loses every round unless outcomes are queued."""
    return ScriptedHasher()


@pytest.fixture
def host(ledger: InMemoryBalanceLedger, hasher: ScriptedHasher) -> HostInterface:
    return create_host(ledger, hasher)


@pytest.fixture
def store() -> InMemoryGameStateStore:
    """Freshly installed game state (unconfigured)."""
    return InMemoryGameStateStore()


@pytest.fixture
def sink() -> InMemoryNotificationSink:
    return InMemoryNotificationSink()


@pytest.fixture
def module(
    store: InMemoryGameStateStore,
    host: HostInterface,
    sink: InMemoryNotificationSink,
) -> GameModule:
    """Unconfigured game module."""
    return GameModule(store=store, host=host, sink=sink)


@pytest.fixture
def configured_module(module: GameModule) -> GameModule:
    """Game module configured with a wager of 100."""
    result = module.configure_wager(PARTICIPANT_1_ID, 100)
    assert result.success
    return module
