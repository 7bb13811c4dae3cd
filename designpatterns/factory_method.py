"""Factory method: factories that create arithmetic operators."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Operator(ABC):
    """A binary operation on the operands ``a`` and ``b``."""

    def __init__(self, a: int = 0, b: int = 0) -> None:
        self.a = a
        self.b = b

    @abstractmethod
    def result(self) -> int:
        """Return the outcome of the operation."""


class PlusOperator(Operator):
    """Adds the operands."""

    def result(self) -> int:
        return self.a + self.b


class MinusOperator(Operator):
    """Subtracts ``b`` from ``a``."""

    def result(self) -> int:
        return self.a - self.b


class OperatorFactory(ABC):
    """Creates operators."""

    @abstractmethod
    def create(self) -> Operator:
        """Return a new operator."""


class PlusOperatorFactory(OperatorFactory):
    """Creates :class:`PlusOperator` instances."""

    def create(self) -> Operator:
        return PlusOperator()


class MinusOperatorFactory(OperatorFactory):
    """Creates :class:`MinusOperator` instances."""

    def create(self) -> Operator:
        return MinusOperator()