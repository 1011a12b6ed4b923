"""Factory method: create a payment object of the requested kind."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Kind(IntEnum):
    """Supported payment kinds."""

    CASH = 1
    CREDIT = 2


class InsufficientBalanceError(Exception):
    """Raised when a payment exceeds the available balance."""


@dataclass
class Payment:
    """A payment method holding a balance."""

    balance: float

    def pay(self, money: float) -> None:
        """Deduct money from the balance."""
        if self.balance < 0 or self.balance < money:
            raise InsufficientBalanceError("balance not enough")
        self.balance -= money


class CashPay(Payment):
    """Cash payment."""


class CreditPay(Payment):
    """Credit payment."""


_KINDS: dict[Kind, type[Payment]] = {Kind.CASH: CashPay, Kind.CREDIT: CreditPay}


def generate_payment(kind: int, balance: float) -> Payment:
    """Return a payment of the given kind holding the given balance."""
    try:
        payment_kind = Kind(kind)
    except ValueError:
        raise ValueError(f"payment kind not supported: {kind!r}") from None
    return _KINDS[payment_kind](balance)