"""Composite: a tree of leaves and composites printed as an outline."""

from __future__ import annotations

from enum import Enum


class NodeKind(Enum):
    """The kinds of node :func:`new_component` can create."""

    LEAF = 0
    COMPOSITE = 1


class Component:
    """A named node in the tree."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.parent: Component | None = None

    def add_child(self, child: Component) -> None:
        """Add a child; plain components ignore this."""

    def display(self, prefix: str = "") -> None:
        """Print this node; plain components print nothing."""


class Leaf(Component):
    """A node without children."""

    def display(self, prefix: str = "") -> None:
        print(f"{prefix}-{self.name}")


class Composite(Component):
    """A node that holds children."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.children: list[Component] = []

    def add_child(self, child: Component) -> None:
        child.parent = self
        self.children.append(child)

    def display(self, prefix: str = "") -> None:
        print(f"{prefix}+{self.name}")
        for child in self.children:
            child.display(prefix + " ")


def new_component(kind: NodeKind, name: str) -> Component:
    """Return a new node of ``kind`` called ``name``."""
    if kind is NodeKind.LEAF:
        return Leaf(name)
    if kind is NodeKind.COMPOSITE:
        return Composite(name)
    raise ValueError(f"unknown node kind: {kind!r}")