"""
Customer endpoints.

Maps customer manager results to HTTP status codes. Domain validation errors
raised by the manager are turned into 400 responses by the application-wide
exception handler.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..auth import require_authentication
from ..dependencies import get_customer_manager
from ..models import CustomerRequest, CustomerResponse, CustomerUpdate, ProblemDetails
from ..services.customer_manager import CustomerManager

router = APIRouter(tags=["customer"], dependencies=[Depends(require_authentication)])

CUSTOMER_NOT_FOUND = ProblemDetails(
    title="Customer not found",
    status=status.HTTP_404_NOT_FOUND,
    detail="The requested customer could not be found.",
)


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=CUSTOMER_NOT_FOUND.model_dump())


def _bad_request(result: CustomerResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=result.model_dump(mode="json")
    )


@router.put("/customer", response_model=CustomerResponse)
async def update_customer(
    request: CustomerUpdate,
    manager: CustomerManager = Depends(get_customer_manager),
):
    """Update a customer. Unknown ids answer 400 with the error response."""
    result = await manager.update(request)
    return _bad_request(result) if result.error else result


@router.post("/customer", response_model=CustomerResponse)
async def create_customer(
    request: CustomerRequest,
    manager: CustomerManager = Depends(get_customer_manager),
):
    """Register a customer."""
    result = await manager.create(request)
    return _bad_request(result) if result.error else result


@router.get("/customer/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: int,
    manager: CustomerManager = Depends(get_customer_manager),
):
    customer = await manager.get_by_id(customer_id)
    if customer is None:
        return _not_found()
    return customer


@router.get("/cpf/{cpf}", response_model=CustomerResponse)
async def get_customer_by_cpf(
    cpf: str,
    manager: CustomerManager = Depends(get_customer_manager),
):
    customer = await manager.get_by_cpf(cpf)
    if customer is None:
        return _not_found()
    return customer
