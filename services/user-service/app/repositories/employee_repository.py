"""
Employee repository interface (Abstract Base Class).

Defines the contract for employee persistence independent of the
underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..domain.entities import Employee


class IEmployeeRepository(ABC):
    """Abstract repository interface for employee data operations."""

    @abstractmethod
    async def create(self, employee: Employee) -> Employee:
        """
        Insert an employee.

        Args:
            employee: Validated employee with id 0 and a hashed password

        Returns:
            The stored employee carrying its assigned id
        """
        pass

    @abstractmethod
    async def update(self, employee: Employee) -> Employee:
        """Persist the current state of an existing employee."""
        pass

    @abstractmethod
    async def delete(self, employee: Employee) -> int:
        """
        Hard-delete an employee.

        Returns:
            Number of affected rows
        """
        pass

    @abstractmethod
    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Find an employee by id, None when absent."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Employee]:
        """Find an employee by email, None when absent."""
        pass

    @abstractmethod
    async def get_all(self, skip: int = 0, take: int = 10) -> List[Employee]:
        """
        List employees ordered by id.

        Args:
            skip: Number of rows to skip
            take: Maximum number of rows to return

        Returns:
            List of employees, empty when none match
        """
        pass
