"""Proxy: wrap a real subject with work before and after each call."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Subject(ABC):
    """Something that does work and reports it as a string."""

    @abstractmethod
    def do(self) -> str:
        """Do the work."""


class RealSubject(Subject):
    """The object that does the actual work."""

    def do(self) -> str:
        return "real"


class Proxy(Subject):
    """Stands in for a :class:`RealSubject`."""

    def __init__(self, real: RealSubject | None = None) -> None:
        self._real = real if real is not None else RealSubject()

    def do(self) -> str:
        # Checks such as caching or permissions would go before and after.
        return f"pre:{self._real.do()}:after"