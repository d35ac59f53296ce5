"""
Dependency functions for the user service.

Wires the application managers to their PostgreSQL repositories and the
HMAC password hasher.
"""

from fastapi import Depends

from .config import settings
from .db.connection import db_manager
from .infrastructure.password_hasher import HmacPasswordHasher, IPasswordHasher
from .repositories.customer_repository import ICustomerRepository
from .repositories.employee_repository import IEmployeeRepository
from .repositories.postgres_customer_repository import PostgresCustomerRepository
from .repositories.postgres_employee_repository import PostgresEmployeeRepository
from .services.customer_manager import CustomerManager
from .services.employee_manager import EmployeeManager


def get_customer_repository() -> ICustomerRepository:
    return PostgresCustomerRepository(db_manager)


def get_employee_repository() -> IEmployeeRepository:
    return PostgresEmployeeRepository(db_manager)


def get_password_hasher() -> IPasswordHasher:
    return HmacPasswordHasher(settings.PASSWORD_SECRET_KEY)


def get_customer_manager(
    repository: ICustomerRepository = Depends(get_customer_repository),
) -> CustomerManager:
    """Build a customer manager for the current request."""
    return CustomerManager(repository)


def get_employee_manager(
    repository: IEmployeeRepository = Depends(get_employee_repository),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> EmployeeManager:
    """Build an employee manager for the current request."""
    return EmployeeManager(repository, password_hasher)


__all__ = [
    "get_customer_manager",
    "get_customer_repository",
    "get_employee_manager",
    "get_employee_repository",
    "get_password_hasher",
]
