"""
Domain entities for customers and employees.

Both aggregates embed the same personal-data field group and are validated
every time a value is built. Entities are immutable: updates return a new,
re-validated value and leave the original untouched.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from .exceptions import (
    BirthDateTooSmallError,
    CpfEmptyError,
    DomainValidationError,
    EmailEmptyError,
    InvalidAttributeError,
    InvalidCpfError,
    InvalidEmailError,
    NameEmptyError,
    PasswordEmptyError,
    SurnameEmptyError,
)
from .result import Err, Ok, Result
from .validators import is_valid_cpf, is_valid_email


class EmployeeRole(str, Enum):
    """Roles an employee can hold."""

    ADMIN = "Admin"
    MANAGER = "Manager"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _coerce_role(role):
    """Return the matching EmployeeRole, or the raw value when unknown."""
    try:
        return EmployeeRole(role)
    except ValueError:
        return role


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class PersonalData:
    """
    Value object holding the fields shared by customers and employees.

    Attributes:
        cpf: Brazilian taxpayer ID, 11 digits
        name: Given name
        surname: Family name
        email: Contact email address
        birth_date: Date of birth
    """

    cpf: str
    name: str
    surname: str
    email: str
    birth_date: date


# ==================== SHARED VALIDATION ====================


def check_cpf_format(personal: PersonalData) -> Optional[DomainValidationError]:
    if not is_valid_cpf(personal.cpf):
        return InvalidCpfError()
    return None


def check_email_format(personal: PersonalData) -> Optional[DomainValidationError]:
    if not is_valid_email(personal.email):
        return InvalidEmailError()
    return None


def validate_customer(personal: PersonalData) -> Optional[DomainValidationError]:
    """Return the first broken customer rule, or None."""
    return check_cpf_format(personal) or check_email_format(personal)


def validate_employee(personal: PersonalData, password: str) -> Optional[DomainValidationError]:
    """
    Return the first broken employee rule, or None.

    Rules are checked in a fixed order: CPF presence, CPF format, name,
    surname, email presence, email format, birth date, password.
    """
    if not personal.cpf:
        return CpfEmptyError()
    error = check_cpf_format(personal)
    if error:
        return error
    if not personal.name:
        return NameEmptyError()
    if not personal.surname:
        return SurnameEmptyError()
    if not personal.email:
        return EmailEmptyError()
    error = check_email_format(personal)
    if error:
        return error
    if personal.birth_date is None or _as_date(personal.birth_date) <= date.min:
        return BirthDateTooSmallError()
    if not password:
        return PasswordEmptyError()
    return None


class _PersonFields:
    """Read-only shortcuts to the embedded personal data."""

    personal: PersonalData

    @property
    def cpf(self) -> str:
        return self.personal.cpf

    @property
    def name(self) -> str:
        return self.personal.name

    @property
    def surname(self) -> str:
        return self.personal.surname

    @property
    def email(self) -> str:
        return self.personal.email

    @property
    def birth_date(self) -> date:
        return self.personal.birth_date


# ==================== CUSTOMER ====================


@dataclass(frozen=True)
class Customer(_PersonFields):
    """
    Customer aggregate.

    Identity is 0 until storage assigns one on insert.
    """

    personal: PersonalData
    is_active: bool = True
    id: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def try_create(
        cls,
        cpf: str,
        name: str,
        surname: str,
        email: str,
        birth_date: date,
        is_active: bool,
        id: int = 0,
    ) -> Result["Customer"]:
        """
        Build a new customer and validate it.

        Returns:
            Ok with the customer, or Err with InvalidCpfError / InvalidEmailError
        """
        customer = cls(
            personal=PersonalData(cpf, name, surname, email, birth_date),
            is_active=is_active,
            id=id,
            created_at=_now(),
        )
        return customer._validated()

    @classmethod
    def create(
        cls,
        cpf: str,
        name: str,
        surname: str,
        email: str,
        birth_date: date,
        is_active: bool,
        id: int = 0,
    ) -> "Customer":
        """
        Build a new customer.

        Raises:
            InvalidCpfError: If the CPF is malformed
            InvalidEmailError: If the email is malformed
        """
        return cls.try_create(cpf, name, surname, email, birth_date, is_active, id).unwrap()

    def try_update(
        self,
        cpf: str,
        name: str,
        surname: str,
        email: str,
        birth_date: date,
        is_active: bool,
    ) -> Result["Customer"]:
        """Return a re-validated copy carrying the new values."""
        updated = replace(
            self,
            personal=PersonalData(cpf, name, surname, email, birth_date),
            is_active=is_active,
            updated_at=_now(),
        )
        return updated._validated()

    def update(
        self,
        cpf: str,
        name: str,
        surname: str,
        email: str,
        birth_date: date,
        is_active: bool,
    ) -> "Customer":
        return self.try_update(cpf, name, surname, email, birth_date, is_active).unwrap()

    def with_id(self, id: int) -> "Customer":
        return replace(self, id=id)

    def _validated(self) -> Result["Customer"]:
        error = validate_customer(self.personal)
        if error:
            return Err(error)
        return Ok(self)


# ==================== EMPLOYEE ====================


@dataclass(frozen=True)
class Employee(_PersonFields):
    """
    Employee aggregate.

    ``password`` is an opaque hash. The entity never derives it from a
    plaintext value; callers hash first and hand the result in.
    """

    personal: PersonalData
    password: str
    role: EmployeeRole
    is_active: bool = True
    id: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def try_create(
        cls,
        cpf: str,
        name: str,
        surname: str,
        email: str,
        birth_date: date,
        password: str,
        role: EmployeeRole,
        is_active: bool,
        id: int = 0,
    ) -> Result["Employee"]:
        """
        Build a new employee and validate it.

        Returns:
            Ok with the employee, or Err with the first broken rule. An
            unknown role is reported as InvalidAttributeError after the
            personal-data rules pass.
        """
        employee = cls(
            personal=PersonalData(cpf, name, surname, email, birth_date),
            password=password,
            role=_coerce_role(role),
            is_active=is_active,
            id=id,
            created_at=_now(),
        )
        return employee._validated()

    @classmethod
    def create(
        cls,
        cpf: str,
        name: str,
        surname: str,
        email: str,
        birth_date: date,
        password: str,
        role: EmployeeRole,
        is_active: bool,
        id: int = 0,
    ) -> "Employee":
        """
        Build a new employee.

        Raises:
            DomainValidationError: The first broken rule, see validate_employee
        """
        return cls.try_create(
            cpf, name, surname, email, birth_date, password, role, is_active, id
        ).unwrap()

    def try_update(
        self,
        cpf: str,
        name: str,
        surname: str,
        email: str,
        birth_date: date,
        password: str,
        role: EmployeeRole,
        is_active: bool,
    ) -> Result["Employee"]:
        """Return a re-validated copy carrying the new values, Err on an unknown role too."""
        updated = replace(
            self,
            personal=PersonalData(cpf, name, surname, email, birth_date),
            password=password,
            role=_coerce_role(role),
            is_active=is_active,
            updated_at=_now(),
        )
        return updated._validated()

    def update(
        self,
        cpf: str,
        name: str,
        surname: str,
        email: str,
        birth_date: date,
        password: str,
        role: EmployeeRole,
        is_active: bool,
    ) -> "Employee":
        return self.try_update(
            cpf, name, surname, email, birth_date, password, role, is_active
        ).unwrap()

    def set_password(self, password_hash: str) -> "Employee":
        """Replace the stored hash. No validation is applied."""
        return replace(self, password=password_hash)

    def with_id(self, id: int) -> "Employee":
        return replace(self, id=id)

    def _validated(self) -> Result["Employee"]:
        error = validate_employee(self.personal, self.password)
        if error is None and not isinstance(self.role, EmployeeRole):
            error = InvalidAttributeError("role")
        if error:
            return Err(error)
        return Ok(self)
