"""
Employee application service.

Orchestrates employee registration, update, removal and listing. Domain
validation failures are reported back as error responses instead of being
raised to the caller.
"""

from typing import List, Optional

from ..domain.entities import Employee
from ..domain.exceptions import EMPLOYEE_VALIDATION_ERRORS
from ..domain.result import Err, Result
from ..infrastructure.password_hasher import IPasswordHasher
from ..logging_config import get_logger
from ..models import EmployeeRequest, EmployeeResponse, EmployeeUpdate
from ..repositories.employee_repository import IEmployeeRepository

logger = get_logger(__name__)

EMPLOYEE_NOT_FOUND = "Employee not found."


class EmployeeManager:
    """Employee use cases."""

    def __init__(self, repository: IEmployeeRepository, password_hasher: IPasswordHasher):
        """
        Initialize manager.

        Args:
            repository: Employee persistence port
            password_hasher: Hashes plaintext passwords on registration
        """
        self.repository = repository
        self.password_hasher = password_hasher

    async def create(self, request: EmployeeRequest) -> EmployeeResponse:
        """
        Register a new, active employee.

        The plaintext password is validated as part of the entity, then
        replaced by its hash before the employee is stored.

        Args:
            request: Employee registration data

        Returns:
            Response built from the stored employee, or an error response
            carrying the validation message
        """
        result = Employee.try_create(
            request.cpf,
            request.name,
            request.surname,
            request.email,
            request.birth_date,
            request.password,
            request.role,
            True,
        )
        failure = self._failure_response(result)
        if failure:
            return failure

        employee = result.value.set_password(self.password_hasher.hash(request.password))
        created = await self.repository.create(employee)
        logger.info("Employee created", employee_id=created.id, role=created.role.value)
        return EmployeeResponse.from_entity(created)

    async def update(self, request: EmployeeUpdate) -> EmployeeResponse:
        """
        Apply new values to an existing employee.

        The password in the request is stored as given.

        Args:
            request: Update data, ``id`` selects the employee

        Returns:
            Response built from the stored employee, or an error response
            when the employee does not exist or the new values are invalid
        """
        employee = await self.repository.get_by_id(request.id)
        if employee is None:
            logger.info("Employee update skipped, not found", employee_id=request.id)
            return EmployeeResponse.failure(EMPLOYEE_NOT_FOUND)

        result = employee.try_update(
            request.cpf,
            request.name,
            request.surname,
            request.email,
            request.birth_date,
            request.password,
            request.role,
            request.is_active,
        )
        failure = self._failure_response(result)
        if failure:
            return failure

        stored = await self.repository.update(result.value)
        logger.info("Employee updated", employee_id=stored.id)
        return EmployeeResponse.from_entity(stored)

    async def delete(self, employee_id: int) -> int:
        """
        Remove an employee.

        Returns:
            Number of deleted rows, 0 when the employee does not exist
        """
        employee = await self.repository.get_by_id(employee_id)
        if employee is None:
            return 0

        count = await self.repository.delete(employee)
        logger.info("Employee deleted", employee_id=employee_id, affected=count)
        return count

    async def get_all(self, skip: int = 0, take: int = 10) -> List[EmployeeResponse]:
        employees = await self.repository.get_all(skip=skip, take=take)
        return [EmployeeResponse.from_entity(employee) for employee in employees or []]

    async def get_by_id(self, employee_id: int) -> Optional[EmployeeResponse]:
        employee = await self.repository.get_by_id(employee_id)
        if employee is None:
            return None
        return EmployeeResponse.from_entity(employee)

    async def get_by_email(self, email: str) -> Optional[EmployeeResponse]:
        employee = await self.repository.get_by_email(email)
        if employee is None:
            return None
        return EmployeeResponse.from_entity(employee)

    @staticmethod
    def _failure_response(result: Result[Employee]) -> Optional[EmployeeResponse]:
        """Turn a failed validation into an error response, None on success."""
        if not isinstance(result, Err):
            return None

        if not isinstance(result.error, EMPLOYEE_VALIDATION_ERRORS):
            raise result.error

        logger.warning(
            "Employee validation failed",
            error_type=type(result.error).__name__,
            reason=result.message,
        )
        return EmployeeResponse.failure(f"Message: {result.message}")
