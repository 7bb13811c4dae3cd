"""Template method: a fixed download procedure with pluggable steps."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Downloader(ABC):
    """Downloads a resource in fixed steps; subclasses supply the transfer."""

    def __init__(self) -> None:
        self.uri = ""

    def download(self, uri: str) -> None:
        self.uri = uri
        print("prepare downloading")
        print(self._download())
        print(self._save())
        print("finish downloading")

    @abstractmethod
    def _download(self) -> str:
        """Transfer the resource at the current uri and describe it."""

    def _save(self) -> str:
        return "default save"


class HTTPDownloader(Downloader):
    """Downloads over HTTP and saves in its own way."""

    def _download(self) -> str:
        return f"download {self.uri} via http"

    def _save(self) -> str:
        return "http save"


class FTPDownloader(Downloader):
    """Downloads over FTP and uses the default save."""

    def _download(self) -> str:
        return f"download {self.uri} via ftp"


def new_http_downloader() -> Downloader:
    """Return a new HTTP downloader."""
    return HTTPDownloader()


def new_ftp_downloader() -> Downloader:
    """Return a new FTP downloader."""
    return FTPDownloader()