"""Flyweight: image viewers that share loaded image data."""

from __future__ import annotations


class ImageFlyweight:
    """Image data loaded once and shared between viewers."""

    def __init__(self, filename: str) -> None:
        self._data = f"image data {filename}"

    @property
    def data(self) -> str:
        return self._data


class ImageFlyweightFactory:
    """Hands out one shared image per file name."""

    def __init__(self) -> None:
        self._images: dict[str, ImageFlyweight] = {}

    def get(self, filename: str) -> ImageFlyweight:
        """Return the image for ``filename``, loading it on first use."""
        image = self._images.get(filename)
        if image is None:
            image = ImageFlyweight(filename)
            self._images[filename] = image
        return image


_factory: ImageFlyweightFactory | None = None


def get_image_flyweight_factory() -> ImageFlyweightFactory:
    """Return the shared image factory, creating it on first use."""
    global _factory
    if _factory is None:
        _factory = ImageFlyweightFactory()
    return _factory


class ImageViewer:
    """Shows an image obtained from the shared factory."""

    def __init__(self, filename: str) -> None:
        self.image = get_image_flyweight_factory().get(filename)

    @property
    def data(self) -> str:
        return self.image.data

    def display(self) -> str:
        """Print the displayed line and return it."""
        line = f"Display: {self.data}"
        print(line)
        return line