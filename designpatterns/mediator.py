"""Mediator: computer parts that talk only through a shared mediator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CDDriver:
    """Reads raw data from a disc."""

    data: str = ""

    def read_data(self) -> None:
        self.data = "music,image"
        print(f"CDDriver: reading data {self.data}")
        get_mediator_instance().changed(self)


@dataclass
class CPU:
    """Splits raw data into its sound and video parts."""

    video: str = ""
    sound: str = ""

    def process(self, data: str) -> None:
        parts = data.split(",")
        if len(parts) < 2:
            raise ValueError(f"expected 'sound,video' data, got {data!r}")
        self.sound, self.video = parts[0], parts[1]
        print(f"CPU: split data with Sound {self.sound}, Video {self.video}")
        get_mediator_instance().changed(self)


@dataclass
class VideoCard:
    """Displays video data."""

    data: str = ""

    def display(self, data: str) -> None:
        self.data = data
        print(f"VideoCard: display {self.data}")
        get_mediator_instance().changed(self)


@dataclass
class SoundCard:
    """Plays sound data."""

    data: str = ""

    def play(self, data: str) -> None:
        self.data = data
        print(f"SoundCard: play {self.data}")
        get_mediator_instance().changed(self)


@dataclass
class Mediator:
    """Routes changes from one part to the parts that depend on it."""

    cd: CDDriver | None = None
    cpu: CPU | None = None
    video: VideoCard | None = None
    sound: SoundCard | None = None

    def changed(self, component: object) -> None:
        """React to a change reported by ``component``."""
        if isinstance(component, CDDriver):
            self.cpu.process(component.data)
        elif isinstance(component, CPU):
            self.sound.play(component.sound)
            self.video.display(component.video)


_mediator: Mediator | None = None


def get_mediator_instance() -> Mediator:
    """Return the shared mediator, creating it on first use."""
    global _mediator
    if _mediator is None:
        _mediator = Mediator()
    return _mediator