"""In-memory balance ledger with an existential deposit.

An account exists from its first endowment until its balance drops
below the existential deposit. With a zero existential deposit accounts
are never reaped. Withdrawals with keep_alive refuse to reap the account,
so a deposit into it afterwards cannot fail for lack of an account.
"""

import logging
from uuid import UUID

from coinflip.schemas.game_engine import MAX_BALANCE, saturating_add
from coinflip.services.game.engine.errors import InsufficientFundsError, LedgerError

logger = logging.getLogger(__name__)


class InMemoryBalanceLedger:
    def __init__(self, existential_deposit: int = 1) -> None:
        if existential_deposit < 0:
            raise ValueError("existential_deposit must be non-negative")
        self.existential_deposit = existential_deposit
        self._balances: dict[UUID, int] = {}

    def balance_of(self, identity: UUID) -> int:
        return self._balances.get(identity, 0)

    def total_issuance(self) -> int:
        return sum(self._balances.values())

    def endow(self, identity: UUID, amount: int) -> int:
        """Credit amount to identity, creating the account if needed."""
        balance = saturating_add(self.balance_of(identity), amount)
        self._set_balance(identity, balance)
        logger.info("Account endowed: identity=%s, amount=%d, balance=%d", identity, amount, balance)
        return balance

    def withdraw(self, identity: UUID, amount: int, keep_alive: bool = True) -> None:
        if identity not in self._balances:
            raise InsufficientFundsError(f"Account {identity} does not exist")

        balance = self._balances[identity]
        if amount > balance:
            raise InsufficientFundsError(
                f"Balance {balance} is too low to withdraw {amount}"
            )

        remaining = balance - amount
        if keep_alive and remaining < self.existential_deposit:
            raise InsufficientFundsError(
                f"Withdrawing {amount} would leave {remaining}, "
                f"below the existential deposit of {self.existential_deposit}"
            )

        self._set_balance(identity, remaining)
        logger.debug("Withdrawn: identity=%s, amount=%d, balance=%d", identity, amount, remaining)

    def deposit_into_existing(self, identity: UUID, amount: int) -> None:
        if identity not in self._balances:
            raise LedgerError(f"Account {identity} does not exist")

        balance = self._balances[identity] + amount
        if balance > MAX_BALANCE:
            raise LedgerError(f"Depositing {amount} would overflow the balance of {identity}")

        self._balances[identity] = balance
        logger.debug("Deposited: identity=%s, amount=%d, balance=%d", identity, amount, balance)

    def _set_balance(self, identity: UUID, balance: int) -> None:
        if balance < self.existential_deposit:
            self._balances.pop(identity, None)
        else:
            self._balances[identity] = balance
