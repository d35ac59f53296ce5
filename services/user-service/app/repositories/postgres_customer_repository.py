"""
PostgreSQL implementation of the customer repository.
"""

from typing import Optional

import asyncpg

from ..db.connection import DatabaseManager
from ..domain.entities import Customer, PersonalData
from ..logging_config import get_logger
from .customer_repository import ICustomerRepository

logger = get_logger(__name__)

CUSTOMER_COLUMNS = "id, cpf, name, surname, email, birth_date, is_active, created_at, updated_at"


class PostgresCustomerRepository(ICustomerRepository):
    """PostgreSQL implementation for customer persistence."""

    def __init__(self, db: DatabaseManager):
        """
        Initialize repository.

        Args:
            db: Database manager owning the asyncpg pool
        """
        self.db = db

    async def create(self, customer: Customer) -> Customer:
        row = await self.db.fetchrow(
            f"""
            INSERT INTO customers (cpf, name, surname, email, birth_date, is_active, created_at)
            VALUES ($1, $2, $3, $4, $5, $6, COALESCE($7, NOW()))
            RETURNING {CUSTOMER_COLUMNS}
            """,
            customer.cpf,
            customer.name,
            customer.surname,
            customer.email,
            customer.birth_date,
            customer.is_active,
            customer.created_at,
        )
        logger.debug("Customer inserted", customer_id=row["id"])
        return self._map_to_entity(row)

    async def update(self, customer: Customer) -> Customer:
        row = await self.db.fetchrow(
            f"""
            UPDATE customers
            SET cpf = $2, name = $3, surname = $4, email = $5, birth_date = $6,
                is_active = $7, updated_at = COALESCE($8, NOW())
            WHERE id = $1
            RETURNING {CUSTOMER_COLUMNS}
            """,
            customer.id,
            customer.cpf,
            customer.name,
            customer.surname,
            customer.email,
            customer.birth_date,
            customer.is_active,
            customer.updated_at,
        )
        if row is None:
            return customer
        return self._map_to_entity(row)

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        row = await self.db.fetchrow(
            f"SELECT {CUSTOMER_COLUMNS} FROM customers WHERE id = $1", customer_id
        )
        return self._map_to_entity(row) if row else None

    async def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        row = await self.db.fetchrow(
            f"SELECT {CUSTOMER_COLUMNS} FROM customers WHERE cpf = $1", cpf
        )
        return self._map_to_entity(row) if row else None

    @staticmethod
    def _map_to_entity(row: asyncpg.Record) -> Customer:
        """Rehydrate a stored row without re-running validation."""
        return Customer(
            personal=PersonalData(
                cpf=row["cpf"],
                name=row["name"],
                surname=row["surname"],
                email=row["email"],
                birth_date=row["birth_date"],
            ),
            is_active=row["is_active"],
            id=row["id"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
