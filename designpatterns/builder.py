"""Builder: a director drives builders through the same steps."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Builder(ABC):
    """Builds a product in three parts."""

    @abstractmethod
    def part1(self) -> None:
        """Build the first part."""

    @abstractmethod
    def part2(self) -> None:
        """Build the second part."""

    @abstractmethod
    def part3(self) -> None:
        """Build the third part."""


class Director:
    """Runs a builder through its parts in order."""

    def __init__(self, builder: Builder) -> None:
        self.builder = builder

    def construct(self) -> None:
        self.builder.part1()
        self.builder.part2()
        self.builder.part3()


class Builder1(Builder):
    """Builds a string by appending digits."""

    def __init__(self) -> None:
        self.result = ""

    def part1(self) -> None:
        self.result += "1"

    def part2(self) -> None:
        self.result += "2"

    def part3(self) -> None:
        self.result += "3"


class Builder2(Builder):
    """Builds an integer by summing parts."""

    def __init__(self) -> None:
        self.result = 0

    def part1(self) -> None:
        self.result += 1

    def part2(self) -> None:
        self.result += 2

    def part3(self) -> None:
        self.result += 3