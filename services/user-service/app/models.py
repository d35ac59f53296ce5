"""
Pydantic models for request/response schemas.

Response objects report failures through ``error`` / ``error_message``
instead of raising, so callers can map them straight to a status code.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from .domain.entities import Customer, Employee, EmployeeRole

# Request Models


class CustomerRequest(BaseModel):
    """Model for customer registration."""

    cpf: str = ""
    name: str = ""
    surname: str = ""
    email: str = ""
    birth_date: date = date.min

    def to_entity(self) -> Customer:
        """Build an active customer from the request."""
        return Customer.create(
            self.cpf, self.name, self.surname, self.email, self.birth_date, True
        )


class CustomerUpdate(BaseModel):
    """Model for updating a customer."""

    id: int = 0
    cpf: str = ""
    name: str = ""
    surname: str = ""
    email: str = ""
    birth_date: date = date.min
    is_active: bool = True

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerUpdate":
        return cls(
            id=customer.id,
            cpf=customer.cpf,
            name=customer.name,
            surname=customer.surname,
            email=customer.email,
            birth_date=customer.birth_date,
            is_active=customer.is_active,
        )

    def to_entity(self) -> Customer:
        return Customer.create(
            self.cpf,
            self.name,
            self.surname,
            self.email,
            self.birth_date,
            self.is_active,
            self.id,
        )


class EmployeeRequest(BaseModel):
    """Model for employee registration. ``password`` is plaintext."""

    cpf: str = ""
    name: str = ""
    surname: str = ""
    email: str = ""
    birth_date: date = date.min
    password: str = ""
    role: EmployeeRole


class EmployeeUpdate(BaseModel):
    """
    Model for updating an employee.

    ``password`` is stored as given; it is not hashed again on update.
    """

    id: int = 0
    cpf: str = ""
    name: str = ""
    surname: str = ""
    email: str = ""
    birth_date: date = date.min
    password: str = ""
    role: EmployeeRole
    is_active: bool = True

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeUpdate":
        return cls(
            id=employee.id,
            cpf=employee.cpf,
            name=employee.name,
            surname=employee.surname,
            email=employee.email,
            birth_date=employee.birth_date,
            password=employee.password,
            role=employee.role,
            is_active=employee.is_active,
        )

    def to_entity(self) -> Employee:
        return Employee.create(
            self.cpf,
            self.name,
            self.surname,
            self.email,
            self.birth_date,
            self.password,
            self.role,
            self.is_active,
            self.id,
        )


# Response Models


class CustomerResponse(BaseModel):
    """Model for customer data in responses."""

    id: int = 0
    cpf: Optional[str] = None
    name: Optional[str] = None
    surname: Optional[str] = None
    email: Optional[str] = None
    birth_date: Optional[date] = None
    is_active: bool = False
    error: bool = False
    error_message: str = ""

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            cpf=customer.cpf,
            name=customer.name,
            surname=customer.surname,
            email=customer.email,
            birth_date=customer.birth_date,
            is_active=customer.is_active,
        )

    @classmethod
    def failure(cls, message: str) -> "CustomerResponse":
        return cls(error=True, error_message=message)


class EmployeeResponse(BaseModel):
    """Model for employee data in responses. The password hash is never exposed."""

    id: int = 0
    cpf: Optional[str] = None
    name: Optional[str] = None
    surname: Optional[str] = None
    email: Optional[str] = None
    birth_date: Optional[date] = None
    role: Optional[EmployeeRole] = None
    is_active: bool = False
    error: bool = False
    error_message: str = ""

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            cpf=employee.cpf,
            name=employee.name,
            surname=employee.surname,
            email=employee.email,
            birth_date=employee.birth_date,
            role=employee.role,
            is_active=employee.is_active,
        )

    @classmethod
    def failure(cls, message: str) -> "EmployeeResponse":
        return cls(error=True, error_message=message)


class ProblemDetails(BaseModel):
    """Error body returned for not-found and unhandled failures."""

    title: str
    status: int
    detail: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    database: str
    timestamp: datetime = Field(default_factory=datetime.now)
