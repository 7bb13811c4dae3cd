"""Simple factory: choose a greeting implementation by a numeric kind."""

from __future__ import annotations

from abc import ABC, abstractmethod


class API(ABC):
    """Something that greets a person by name."""

    @abstractmethod
    def say(self, name: str) -> str:
        """Return a greeting for ``name``."""


class HiAPI(API):
    """Greets with "Hi"."""

    def say(self, name: str) -> str:
        return f"Hi, {name}"


class HelloAPI(API):
    """Greets with "Hello"."""

    def say(self, name: str) -> str:
        return f"Hello, {name}"


_KINDS: dict[int, type[API]] = {1: HiAPI, 2: HelloAPI}


def new_api(kind: int) -> API:
    """Return the greeting implementation for ``kind`` (1 or 2)."""
    try:
        return _KINDS[kind]()
    except KeyError:
        raise ValueError(f"unknown API kind: {kind!r}") from None