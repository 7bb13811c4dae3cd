"""Visitor: operations applied to a collection of customers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Visitor(ABC):
    """An operation on customers."""

    @abstractmethod
    def visit(self, customer: Customer) -> None:
        """Apply the operation to ``customer``."""


class Customer(ABC):
    """Something a visitor can visit."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Let ``visitor`` visit this customer."""


class EnterpriseCustomer(Customer):
    def __init__(self, name: str) -> None:
        self.name = name

    def accept(self, visitor: Visitor) -> None:
        visitor.visit(self)


class IndividualCustomer(Customer):
    def __init__(self, name: str) -> None:
        self.name = name

    def accept(self, visitor: Visitor) -> None:
        visitor.visit(self)


class CustomerCol(Customer):
    """A collection of customers visited in the order they were added."""

    def __init__(self) -> None:
        self.customers: list[Customer] = []

    def add(self, customer: Customer) -> None:
        self.customers.append(customer)

    def accept(self, visitor: Visitor) -> None:
        for customer in self.customers:
            customer.accept(visitor)


class ServiceRequestVisitor(Visitor):
    """Serves every kind of customer."""

    def visit(self, customer: Customer) -> None:
        if isinstance(customer, EnterpriseCustomer):
            print(f"serving enterprise customer {customer.name}")
        elif isinstance(customer, IndividualCustomer):
            print(f"serving individual customer {customer.name}")


class AnalysisVisitor(Visitor):
    """Analyses enterprise customers only."""

    def visit(self, customer: Customer) -> None:
        if isinstance(customer, EnterpriseCustomer):
            print(f"analysis enterprise customer {customer.name}")