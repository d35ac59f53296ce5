"""
Schema bootstrap for User Service.

Creates the customers and employees tables when missing and seeds the
default administrator. Every statement is idempotent.
"""

from ..logging_config import get_logger
from .connection import DatabaseManager

logger = get_logger(__name__)

CREATE_CUSTOMERS = """
CREATE TABLE IF NOT EXISTS customers (
    id          INTEGER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    cpf         VARCHAR(11)  NOT NULL,
    name        VARCHAR(100) NOT NULL,
    surname     VARCHAR(100) NOT NULL,
    email       VARCHAR(100) NOT NULL,
    birth_date  DATE         NOT NULL,
    is_active   BOOLEAN      NOT NULL DEFAULT TRUE,
    created_at  TIMESTAMPTZ  NOT NULL DEFAULT NOW(),
    updated_at  TIMESTAMPTZ
)
"""

CREATE_EMPLOYEES = """
CREATE TABLE IF NOT EXISTS employees (
    id          INTEGER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    cpf         VARCHAR(11)  NOT NULL,
    name        VARCHAR(100) NOT NULL,
    surname     VARCHAR(100) NOT NULL,
    email       VARCHAR(100) NOT NULL,
    birth_date  DATE         NOT NULL,
    password    VARCHAR(255) NOT NULL,
    role        VARCHAR(50)  NOT NULL,
    is_active   BOOLEAN      NOT NULL DEFAULT TRUE,
    created_at  TIMESTAMPTZ  NOT NULL DEFAULT NOW(),
    updated_at  TIMESTAMPTZ
)
"""

CREATE_INDEXES = (
    "CREATE UNIQUE INDEX IF NOT EXISTS ix_customers_cpf ON customers (cpf)",
    "CREATE UNIQUE INDEX IF NOT EXISTS ix_customers_email ON customers (email)",
    "CREATE UNIQUE INDEX IF NOT EXISTS ix_employees_cpf ON employees (cpf)",
    "CREATE UNIQUE INDEX IF NOT EXISTS ix_employees_email ON employees (email)",
)

# Default administrator, password hash produced by the HMAC-SHA512 hasher.
SEED_ADMIN = """
INSERT INTO employees (cpf, name, surname, email, birth_date, password, role, is_active)
VALUES (
    '98659502000', 'Admin', 'Doe', 'admin@admin.com', DATE '1990-01-01',
    'QBYnGddxOZ/VOBgUr1koYDLMawbe/D8NaYYxOXQ0LHN8TO/ysQ5UvBZc70kbQkfXarxn+KobEuH7KpXkiElivg==',
    'Admin', TRUE
)
ON CONFLICT (cpf) DO NOTHING
"""


async def apply_schema(db: DatabaseManager, *, seed: bool = True) -> None:
    """
    Create tables and indexes, then seed the administrator.

    Args:
        db: Connected database manager
        seed: Insert the default administrator when missing
    """
    await db.execute(CREATE_CUSTOMERS)
    await db.execute(CREATE_EMPLOYEES)
    for statement in CREATE_INDEXES:
        await db.execute(statement)
    logger.info("Schema ready", tables=["customers", "employees"])

    if seed:
        await db.execute(SEED_ADMIN)
        logger.info("Default administrator seeded")
