"""Command: buttons bound to interchangeable motherboard commands."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Command(ABC):
    """An action that can be executed."""

    @abstractmethod
    def execute(self) -> None:
        """Run the action."""


class MotherBoard:
    """The receiver that carries out the commands."""

    def start(self) -> str:
        message = "system starting"
        print(message)
        return message

    def reboot(self) -> str:
        message = "system rebooting"
        print(message)
        return message


class StartCommand(Command):
    """Starts a motherboard."""

    def __init__(self, motherboard: MotherBoard) -> None:
        self._motherboard = motherboard

    def execute(self) -> None:
        self._motherboard.start()


class RebootCommand(Command):
    """Reboots a motherboard."""

    def __init__(self, motherboard: MotherBoard) -> None:
        self._motherboard = motherboard

    def execute(self) -> None:
        self._motherboard.reboot()


class Box:
    """A case with two buttons, each bound to a command."""

    def __init__(self, button1: Command, button2: Command) -> None:
        self._button1 = button1
        self._button2 = button2

    def press_button1(self) -> None:
        self._button1.execute()

    def press_button2(self) -> None:
        self._button2.execute()