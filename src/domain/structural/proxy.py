"""Proxy: a bank account guarded by a pin check.

``BankAccountProxy`` exposes the same interface as the real account and only
forwards calls whose pin matches. Refused calls never reach the real account.
"""

import hmac
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class TransactionResult(BaseModel):
    """Outcome of one account operation."""

    accepted: bool
    message: str
    balance: Optional[float] = None


class BankAccount(ABC):
    """Subject interface."""

    @abstractmethod
    def deposit(self, amount: float, pin: str) -> TransactionResult:
        """Add money to the account."""

    @abstractmethod
    def withdraw(self, amount: float, pin: str) -> TransactionResult:
        """Take money out of the account."""

    @abstractmethod
    def get_balance(self, pin: str) -> TransactionResult:
        """Report the current balance."""


class RealBankAccount(BankAccount):
    """Real subject. Ignores the pin; access control is the proxy's job."""

    def __init__(self, initial_balance: float = 0.0):
        self._balance = initial_balance

    def deposit(self, amount: float, pin: str) -> TransactionResult:
        if amount <= 0:
            return TransactionResult(
                accepted=False,
                message="Deposit amount must be positive.",
                balance=self._balance,
            )
        self._balance += amount
        return TransactionResult(
            accepted=True,
            message=f"Deposited: {amount:g}, New Balance: {self._balance:g}",
            balance=self._balance,
        )

    def withdraw(self, amount: float, pin: str) -> TransactionResult:
        if amount <= 0 or amount > self._balance:
            return TransactionResult(
                accepted=False,
                message="Withdrawal amount must be positive and less than or equal to the balance.",
                balance=self._balance,
            )
        self._balance -= amount
        return TransactionResult(
            accepted=True,
            message=f"Withdrew: {amount:g}, New Balance: {self._balance:g}",
            balance=self._balance,
        )

    def get_balance(self, pin: str) -> TransactionResult:
        return TransactionResult(
            accepted=True,
            message=f"Current Balance: {self._balance:g}",
            balance=self._balance,
        )


class BankAccountProxy(BankAccount):
    """Protection proxy creating and owning the real account."""

    def __init__(self, initial_balance: float, pin: str):
        self._real_account = RealBankAccount(initial_balance)
        self._pin = pin

    def authenticate(self, pin: str) -> bool:
        return hmac.compare_digest(pin.encode("utf-8"), self._pin.encode("utf-8"))

    def deposit(self, amount: float, pin: str) -> TransactionResult:
        if not self.authenticate(pin):
            return TransactionResult(accepted=False, message="Authentication failed. Cannot deposit.")
        return self._real_account.deposit(amount, pin)

    def withdraw(self, amount: float, pin: str) -> TransactionResult:
        if not self.authenticate(pin):
            return TransactionResult(accepted=False, message="Authentication failed. Cannot withdraw.")
        return self._real_account.withdraw(amount, pin)

    def get_balance(self, pin: str) -> TransactionResult:
        if not self.authenticate(pin):
            return TransactionResult(
                accepted=False,
                message="Authentication failed. Cannot retrieve balance.",
                balance=0.0,
            )
        return self._real_account.get_balance(pin)
