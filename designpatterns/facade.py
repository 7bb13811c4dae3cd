"""Facade: one entry point over two subsystem modules."""

from __future__ import annotations


class AModuleAPI:
    """The first subsystem."""

    def test_a(self) -> str:
        return "A module running"


class BModuleAPI:
    """The second subsystem."""

    def test_b(self) -> str:
        return "B module running"


class FacadeAPI:
    """Runs both subsystems through a single call."""

    def __init__(self, a: AModuleAPI, b: BModuleAPI) -> None:
        self._a = a
        self._b = b

    def test(self) -> str:
        return f"{self._a.test_a()}\n{self._b.test_b()}"


def new_a_module_api() -> AModuleAPI:
    """Return a new first subsystem."""
    return AModuleAPI()


def new_b_module_api() -> BModuleAPI:
    """Return a new second subsystem."""
    return BModuleAPI()


def new_api() -> FacadeAPI:
    """Return a facade wired to fresh subsystems."""
    return FacadeAPI(new_a_module_api(), new_b_module_api())