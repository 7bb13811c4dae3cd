"""Decorator: wrap a calculation with extra arithmetic steps."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """Something that calculates a number."""

    @abstractmethod
    def calc(self) -> int:
        """Return the calculated number."""


class ConcreteComponent(Component):
    """The base calculation, always zero."""

    def calc(self) -> int:
        return 0


class MulDecorator(Component):
    """Multiplies the wrapped result by ``num``."""

    def __init__(self, component: Component, num: int) -> None:
        self.component = component
        self.num = num

    def calc(self) -> int:
        return self.component.calc() * self.num


class AddDecorator(Component):
    """Adds ``num`` to the wrapped result."""

    def __init__(self, component: Component, num: int) -> None:
        self.component = component
        self.num = num

    def calc(self) -> int:
        return self.component.calc() + self.num


def wrap_mul_decorator(component: Component, num: int) -> Component:
    """Wrap ``component`` so its result is multiplied by ``num``."""
    return MulDecorator(component, num)


def wrap_add_decorator(component: Component, num: int) -> Component:
    """Wrap ``component`` so ``num`` is added to its result."""
    return AddDecorator(component, num)