"""Adapter: present an adaptee through the target interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Target(ABC):
    """The interface clients expect."""

    @abstractmethod
    def request(self) -> str:
        """Perform the request."""


class Adaptee:
    """An existing class with an incompatible interface."""

    def specific_request(self) -> str:
        return "adaptee method"


class Adapter(Target):
    """Turns an Adaptee into a Target."""

    def __init__(self, adaptee: Adaptee) -> None:
        self._adaptee = adaptee

    def request(self) -> str:
        return self._adaptee.specific_request()


def new_adaptee() -> Adaptee:
    """Return a new adaptee."""
    return Adaptee()


def new_adapter(adaptee: Adaptee) -> Target:
    """Wrap an adaptee so it can be used as a target."""
    return Adapter(adaptee)