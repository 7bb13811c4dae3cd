"""Memento: save and restore a game's progress."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameMemento:
    """A saved snapshot of a game's state."""

    hp: int
    mp: int


@dataclass
class Game:
    """A game with hit points and magic points."""

    hp: int = 0
    mp: int = 0

    def play(self, mp_delta: int, hp_delta: int) -> None:
        self.mp += mp_delta
        self.hp += hp_delta

    def save(self) -> GameMemento:
        """Return a snapshot of the current state."""
        return GameMemento(hp=self.hp, mp=self.mp)

    def load(self, memento: GameMemento) -> None:
        """Restore the state stored in the memento."""
        if not isinstance(memento, GameMemento):
            raise TypeError(f"expected a GameMemento, got {type(memento).__name__}")
        self.mp = memento.mp
        self.hp = memento.hp

    def status(self) -> str:
        """Print the current state and return the printed line."""
        line = f"Current HP:{self.hp}, MP:{self.mp}"
        print(line)
        return line