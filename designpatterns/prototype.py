"""Prototype: a registry of objects that are copied on demand."""

from __future__ import annotations

import copy


class Cloneable:
    """An object that can produce a copy of itself."""

    def clone(self) -> Cloneable:
        """Return a shallow copy of this object."""
        return copy.copy(self)


class PrototypeManager:
    """Keeps prototypes by name."""

    def __init__(self) -> None:
        self._prototypes: dict[str, Cloneable] = {}

    def get(self, name: str) -> Cloneable | None:
        """Return the prototype registered as ``name``, or None."""
        return self._prototypes.get(name)

    def set(self, name: str, prototype: Cloneable) -> None:
        """Register ``prototype`` under ``name``."""
        self._prototypes[name] = prototype