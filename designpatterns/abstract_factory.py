"""Abstract factory: families of order storage objects."""

from __future__ import annotations

from abc import ABC, abstractmethod


class OrderMainDAO(ABC):
    """Stores the main order record."""

    @abstractmethod
    def save_order_main(self) -> str:
        """Save the main record and return the message reported."""


class OrderDetailDAO(ABC):
    """Stores the order detail record."""

    @abstractmethod
    def save_order_detail(self) -> str:
        """Save the detail record and return the message reported."""


class DAOFactory(ABC):
    """Creates a matching pair of order storage objects."""

    @abstractmethod
    def create_order_main_dao(self) -> OrderMainDAO:
        """Return a main record store."""

    @abstractmethod
    def create_order_detail_dao(self) -> OrderDetailDAO:
        """Return a detail record store."""


class RDBMainDAO(OrderMainDAO):
    """Relational database storage for the main record."""

    def save_order_main(self) -> str:
        message = "rdb main save"
        print(message)
        return message


class RDBDetailDAO(OrderDetailDAO):
    """Relational database storage for the detail record."""

    def save_order_detail(self) -> str:
        message = "rdb detail save"
        print(message)
        return message


class RDBDAOFactory(DAOFactory):
    """Creates relational database stores."""

    def create_order_main_dao(self) -> OrderMainDAO:
        return RDBMainDAO()

    def create_order_detail_dao(self) -> OrderDetailDAO:
        return RDBDetailDAO()


class XMLMainDAO(OrderMainDAO):
    """XML storage for the main record."""

    def save_order_main(self) -> str:
        message = "xml main save"
        print(message)
        return message


class XMLDetailDAO(OrderDetailDAO):
    """XML storage for the detail record."""

    def save_order_detail(self) -> str:
        message = "xml detail save"
        print(message, end="")
        return message


class XMLDAOFactory(DAOFactory):
    """Creates XML stores."""

    def create_order_main_dao(self) -> OrderMainDAO:
        return XMLMainDAO()

    def create_order_detail_dao(self) -> OrderDetailDAO:
        return XMLDetailDAO()