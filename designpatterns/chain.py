"""Chain of responsibility: fee requests passed up a line of managers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Manager(ABC):
    """Someone who may approve fee requests."""

    @abstractmethod
    def have_right(self, money: int) -> bool:
        """Return whether this manager may decide on ``money``."""

    @abstractmethod
    def handle_fee_request(self, name: str, money: int) -> bool:
        """Decide on the request and return whether it was permitted."""


class ProjectManager(Manager):
    def have_right(self, money: int) -> bool:
        return money < 500

    def handle_fee_request(self, name: str, money: int) -> bool:
        if name == "bob":
            print(f"Project manager permit {name} {money} fee request")
            return True
        print(f"Project manager don't permit {name} {money} fee request")
        return False


class DepManager(Manager):
    def have_right(self, money: int) -> bool:
        return money < 5000

    def handle_fee_request(self, name: str, money: int) -> bool:
        if name == "tom":
            print(f"Dep manager permit {name} {money} fee request")
            return True
        print(f"Dep manager don't permit {name} {money} fee request")
        return False


class GeneralManager(Manager):
    def have_right(self, money: int) -> bool:
        return True

    def handle_fee_request(self, name: str, money: int) -> bool:
        if name == "ada":
            print(f"General manager permit {name} {money} fee request")
            return True
        print(f"General manager don't permit {name} {money} fee request")
        return False


class RequestChain(Manager):
    """A link in the chain: its manager decides, or it passes the request on."""

    def __init__(
        self, manager: Manager, successor: RequestChain | None = None
    ) -> None:
        self.manager = manager
        self.successor = successor

    def have_right(self, money: int) -> bool:
        return True

    def handle_fee_request(self, name: str, money: int) -> bool:
        if self.manager.have_right(money):
            return self.manager.handle_fee_request(name, money)
        if self.successor is not None:
            return self.successor.handle_fee_request(name, money)
        return False


def new_project_manager_chain() -> RequestChain:
    return RequestChain(ProjectManager())


def new_dep_manager_chain() -> RequestChain:
    return RequestChain(DepManager())


def new_general_manager_chain() -> RequestChain:
    return RequestChain(GeneralManager())