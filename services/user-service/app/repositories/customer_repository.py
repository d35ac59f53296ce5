"""
Customer repository interface (Abstract Base Class).

Defines the contract for customer persistence independent of the
underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..domain.entities import Customer


class ICustomerRepository(ABC):
    """Abstract repository interface for customer data operations."""

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """
        Insert a customer.

        Args:
            customer: Validated customer with id 0

        Returns:
            The stored customer carrying its assigned id
        """
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        """
        Persist the current state of an existing customer.

        Returns:
            The stored customer
        """
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Find a customer by id, None when absent."""
        pass

    @abstractmethod
    async def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Find a customer by CPF, None when absent."""
        pass
