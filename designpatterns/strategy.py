"""Strategy: pay the same payment by interchangeable methods."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class PaymentContext:
    """The details of one payment."""

    name: str
    card_id: str
    money: int


class PaymentStrategy(ABC):
    """A way of paying."""

    @abstractmethod
    def pay(self, context: PaymentContext) -> None:
        """Carry out the payment described by ``context``."""


class Cash(PaymentStrategy):
    """Pays in cash."""

    def pay(self, context: PaymentContext) -> None:
        print(f"Pay ${context.money} to {context.name} by cash", end="")


class Bank(PaymentStrategy):
    """Pays from a bank account."""

    def pay(self, context: PaymentContext) -> None:
        print(
            f"Pay ${context.money} to {context.name} "
            f"by bank account {context.card_id}",
            end="",
        )


class Payment:
    """A payment together with the strategy used to make it."""

    def __init__(
        self, name: str, card_id: str, money: int, strategy: PaymentStrategy
    ) -> None:
        self.context = PaymentContext(name, card_id, money)
        self.strategy = strategy

    def pay(self) -> None:
        self.strategy.pay(self.context)