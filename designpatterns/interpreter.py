"""Interpreter: evaluate left-to-right sums and differences of integers."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Node(ABC):
    """A node of the expression tree."""

    @abstractmethod
    def interpret(self) -> int:
        """Return the value of this node."""


class ValNode(Node):
    """A literal integer."""

    def __init__(self, val: int) -> None:
        self.val = val

    def interpret(self) -> int:
        return self.val


class AddNode(Node):
    """The sum of two nodes."""

    def __init__(self, left: Node, right: Node) -> None:
        self.left = left
        self.right = right

    def interpret(self) -> int:
        return self.left.interpret() + self.right.interpret()


class MinNode(Node):
    """The difference of two nodes."""

    def __init__(self, left: Node, right: Node) -> None:
        self.left = left
        self.right = right

    def interpret(self) -> int:
        return self.left.interpret() - self.right.interpret()


def _to_int(token: str) -> int:
    """Read a decimal integer; anything else counts as zero."""
    return int(token) if _INTEGER.fullmatch(token) else 0


class Parser:
    """Parses space-separated expressions such as ``"1 + 2 - 3"``."""

    def __init__(self) -> None:
        self._prev: Node | None = None

    def parse(self, exp: str) -> None:
        self._prev = None
        tokens = iter(exp.split(" "))
        for token in tokens:
            if token in ("+", "-"):
                if self._prev is None:
                    raise ValueError(f"operator {token!r} has no left operand")
                try:
                    right = ValNode(_to_int(next(tokens)))
                except StopIteration:
                    raise ValueError(
                        f"operator {token!r} has no right operand"
                    ) from None
                node_type = AddNode if token == "+" else MinNode
                self._prev = node_type(self._prev, right)
            else:
                self._prev = ValNode(_to_int(token))

    def result(self) -> Node | None:
        """Return the root of the last parsed expression."""
        return self._prev