"""State: a day-of-week context whose behaviour follows its current day."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Week(ABC):
    """A day of the week, acting as a state of :class:`DayContext`."""

    def today(self) -> str:
        """Print the name of this day and return it."""
        name = type(self).__name__
        print(name)
        return name

    @abstractmethod
    def next(self, context: DayContext) -> None:
        """Move ``context`` on to the following day."""


class Sunday(Week):
    def next(self, context: DayContext) -> None:
        context.current = Monday()


class Monday(Week):
    def next(self, context: DayContext) -> None:
        context.current = Tuesday()


class Tuesday(Week):
    def next(self, context: DayContext) -> None:
        context.current = Wednesday()


class Wednesday(Week):
    def next(self, context: DayContext) -> None:
        context.current = Thursday()


class Thursday(Week):
    def next(self, context: DayContext) -> None:
        context.current = Friday()


class Friday(Week):
    def next(self, context: DayContext) -> None:
        context.current = Saturday()


class Saturday(Week):
    def next(self, context: DayContext) -> None:
        context.current = Sunday()


class DayContext:
    """Tracks the current day, starting on Sunday."""

    def __init__(self) -> None:
        self.current: Week = Sunday()

    def today(self) -> str:
        """Print the current day's name and return it."""
        return self.current.today()

    def next(self) -> None:
        self.current.next(self)