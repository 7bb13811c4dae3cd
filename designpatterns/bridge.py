"""Bridge: message kinds decoupled from the channels that send them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MessageImplementer(ABC):
    """A channel that delivers text to a recipient."""

    @abstractmethod
    def send(self, text: str, to: str) -> None:
        """Send ``text`` to ``to``."""


class MessageSMS(MessageImplementer):
    def send(self, text: str, to: str) -> None:
        print(f"send {text} to {to} via SMS", end="")


class MessageEmail(MessageImplementer):
    def send(self, text: str, to: str) -> None:
        print(f"send {text} to {to} via Email", end="")


def via_sms() -> MessageImplementer:
    return MessageSMS()


def via_email() -> MessageImplementer:
    return MessageEmail()


class CommonMessage:
    """A plain message."""

    def __init__(self, method: MessageImplementer) -> None:
        self.method = method

    def send_message(self, text: str, to: str) -> None:
        self.method.send(text, to)


class UrgencyMessage:
    """A message marked as urgent."""

    def __init__(self, method: MessageImplementer) -> None:
        self.method = method

    def send_message(self, text: str, to: str) -> None:
        self.method.send(f"[Urgency] {text}", to)