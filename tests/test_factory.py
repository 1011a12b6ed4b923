import pytest

from patternkit.factory import (
    CashPay,
    CreditPay,
    InsufficientBalanceError,
    Kind,
    generate_payment,
)

BALANCE = 100.00


def test_generate_payment_cash():
    payment = generate_payment(1, BALANCE)
    assert type(payment) is CashPay
    assert payment.balance == BALANCE
    payment.pay(30)
    assert payment.balance == 70


def test_generate_payment_credit():
    payment = generate_payment(2, BALANCE)
    assert type(payment) is CreditPay
    assert payment.balance == BALANCE


def test_generate_payment_unsupported():
    with pytest.raises(ValueError):
        generate_payment(3, BALANCE)


def test_cash_pay():
    payment = generate_payment(Kind.CASH, BALANCE)
    payment.pay(20)
    assert payment.balance == 80


def test_pay_insufficient_balance():
    payment = generate_payment(Kind.CREDIT, 10)
    with pytest.raises(InsufficientBalanceError):
        payment.pay(20)
    assert payment.balance == 10


def test_pay_negative_balance():
    payment = CashPay(-1)
    with pytest.raises(InsufficientBalanceError):
        payment.pay(-5)


def test_pay_exact_balance():
    payment = CashPay(20)
    payment.pay(20)
    assert payment.balance == 0