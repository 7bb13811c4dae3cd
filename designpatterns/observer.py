"""Observer: readers notified when a subject's content changes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Receives updates from a subject."""

    @abstractmethod
    def update(self, subject: "Subject") -> str:
        """Handle a change in the subject."""


class Subject:
    """Holds content and notifies attached observers when it changes."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self._context = ""

    @property
    def context(self) -> str:
        return self._context

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def update_context(self, context: str) -> None:
        self._context = context
        self._notify()

    def _notify(self) -> None:
        for observer in self._observers:
            observer.update(self)


class Reader(Observer):
    """An observer that prints what it receives."""

    def __init__(self, name: str) -> None:
        self.name = name

    def update(self, subject: Subject) -> str:
        message = f"{self.name} receive {subject.context}"
        print(message)
        return message