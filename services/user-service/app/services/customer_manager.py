"""
Customer application service.

Orchestrates customer registration, update and lookup on top of the
customer repository.
"""

from typing import Optional

from ..logging_config import get_logger
from ..models import CustomerRequest, CustomerResponse, CustomerUpdate
from ..repositories.customer_repository import ICustomerRepository

logger = get_logger(__name__)

CUSTOMER_NOT_FOUND = "Customer not found."


class CustomerManager:
    """
    Customer use cases.

    Validation errors raised while building or updating a customer are not
    converted here; they propagate to the caller as DomainValidationError.
    """

    def __init__(self, repository: ICustomerRepository):
        """
        Initialize manager.

        Args:
            repository: Customer persistence port
        """
        self.repository = repository

    async def create(self, request: CustomerRequest) -> CustomerResponse:
        """
        Register a new, active customer.

        Args:
            request: Customer registration data

        Returns:
            Response built from the stored customer

        Raises:
            InvalidCpfError: If the CPF is malformed
            InvalidEmailError: If the email is malformed
        """
        customer = request.to_entity()
        created = await self.repository.create(customer)
        logger.info("Customer created", customer_id=created.id)
        return CustomerResponse.from_entity(created)

    async def update(self, request: CustomerUpdate) -> CustomerResponse:
        """
        Apply new values to an existing customer.

        Args:
            request: Update data, ``id`` selects the customer

        Returns:
            Response built from the stored customer, or an error response
            when the customer does not exist

        Raises:
            InvalidCpfError: If the new CPF is malformed
            InvalidEmailError: If the new email is malformed
        """
        customer = await self.repository.get_by_id(request.id)
        if customer is None:
            logger.info("Customer update skipped, not found", customer_id=request.id)
            return CustomerResponse.failure(CUSTOMER_NOT_FOUND)

        updated = customer.update(
            request.cpf,
            request.name,
            request.surname,
            request.email,
            request.birth_date,
            request.is_active,
        )
        stored = await self.repository.update(updated)
        logger.info("Customer updated", customer_id=stored.id)
        return CustomerResponse.from_entity(stored)

    async def get_by_id(self, customer_id: int) -> Optional[CustomerResponse]:
        customer = await self.repository.get_by_id(customer_id)
        if customer is None:
            return None
        return CustomerResponse.from_entity(customer)

    async def get_by_cpf(self, cpf: str) -> Optional[CustomerResponse]:
        customer = await self.repository.get_by_cpf(cpf)
        if customer is None:
            return None
        return CustomerResponse.from_entity(customer)
