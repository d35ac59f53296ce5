"""
PostgreSQL implementation of the employee repository.
"""

from typing import List, Optional

import asyncpg

from ..db.connection import DatabaseManager, affected_rows
from ..domain.entities import Employee, EmployeeRole, PersonalData
from ..logging_config import get_logger
from .employee_repository import IEmployeeRepository

logger = get_logger(__name__)

EMPLOYEE_COLUMNS = (
    "id, cpf, name, surname, email, birth_date, password, role, "
    "is_active, created_at, updated_at"
)


class PostgresEmployeeRepository(IEmployeeRepository):
    """PostgreSQL implementation for employee persistence."""

    def __init__(self, db: DatabaseManager):
        self.db = db

    async def create(self, employee: Employee) -> Employee:
        row = await self.db.fetchrow(
            f"""
            INSERT INTO employees
                (cpf, name, surname, email, birth_date, password, role, is_active, created_at)
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, COALESCE($9, NOW()))
            RETURNING {EMPLOYEE_COLUMNS}
            """,
            employee.cpf,
            employee.name,
            employee.surname,
            employee.email,
            employee.birth_date,
            employee.password,
            employee.role.value,
            employee.is_active,
            employee.created_at,
        )
        logger.debug("Employee inserted", employee_id=row["id"])
        return self._map_to_entity(row)

    async def update(self, employee: Employee) -> Employee:
        row = await self.db.fetchrow(
            f"""
            UPDATE employees
            SET cpf = $2, name = $3, surname = $4, email = $5, birth_date = $6,
                password = $7, role = $8, is_active = $9, updated_at = COALESCE($10, NOW())
            WHERE id = $1
            RETURNING {EMPLOYEE_COLUMNS}
            """,
            employee.id,
            employee.cpf,
            employee.name,
            employee.surname,
            employee.email,
            employee.birth_date,
            employee.password,
            employee.role.value,
            employee.is_active,
            employee.updated_at,
        )
        if row is None:
            return employee
        return self._map_to_entity(row)

    async def delete(self, employee: Employee) -> int:
        status = await self.db.execute("DELETE FROM employees WHERE id = $1", employee.id)
        count = affected_rows(status)
        logger.debug("Employee deleted", employee_id=employee.id, affected=count)
        return count

    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        row = await self.db.fetchrow(
            f"SELECT {EMPLOYEE_COLUMNS} FROM employees WHERE id = $1", employee_id
        )
        return self._map_to_entity(row) if row else None

    async def get_by_email(self, email: str) -> Optional[Employee]:
        row = await self.db.fetchrow(
            f"SELECT {EMPLOYEE_COLUMNS} FROM employees WHERE email = $1", email
        )
        return self._map_to_entity(row) if row else None

    async def get_all(self, skip: int = 0, take: int = 10) -> List[Employee]:
        rows = await self.db.fetch(
            f"SELECT {EMPLOYEE_COLUMNS} FROM employees ORDER BY id OFFSET $1 LIMIT $2",
            skip,
            take,
        )
        return [self._map_to_entity(row) for row in rows]

    @staticmethod
    def _map_to_entity(row: asyncpg.Record) -> Employee:
        """Rehydrate a stored row without re-running validation."""
        return Employee(
            personal=PersonalData(
                cpf=row["cpf"],
                name=row["name"],
                surname=row["surname"],
                email=row["email"],
                birth_date=row["birth_date"],
            ),
            password=row["password"],
            role=EmployeeRole(row["role"]),
            is_active=row["is_active"],
            id=row["id"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
