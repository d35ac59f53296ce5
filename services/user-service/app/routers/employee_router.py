"""
Employee endpoints.

Maps employee manager results to HTTP status codes.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from ..auth import require_authentication
from ..dependencies import get_employee_manager
from ..models import EmployeeRequest, EmployeeResponse, EmployeeUpdate, ProblemDetails
from ..services.employee_manager import EmployeeManager

router = APIRouter(
    prefix="/employee",
    tags=["employee"],
    dependencies=[Depends(require_authentication)],
)

EMPLOYEE_NOT_FOUND = ProblemDetails(
    title="Employee not found",
    status=status.HTTP_404_NOT_FOUND,
    detail="The requested employee could not be found.",
)


def _bad_request(result: EmployeeResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=result.model_dump(mode="json")
    )


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    request: EmployeeRequest,
    response: Response,
    manager: EmployeeManager = Depends(get_employee_manager),
):
    """Register an employee. Validation failures answer 400 with the error response."""
    result = await manager.create(request)
    if result.error:
        return _bad_request(result)

    response.headers["Location"] = f"/employee/{result.id}"
    return result


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    request: EmployeeUpdate,
    manager: EmployeeManager = Depends(get_employee_manager),
):
    """Update an employee. The id in the path wins over the body."""
    result = await manager.update(request.model_copy(update={"id": employee_id}))
    return _bad_request(result) if result.error else result


@router.delete("/{employee_id}", response_model=int)
async def delete_employee(
    employee_id: int,
    manager: EmployeeManager = Depends(get_employee_manager),
) -> int:
    """Delete an employee and return the number of removed rows."""
    return await manager.delete(employee_id)


@router.get("", response_model=List[EmployeeResponse])
async def list_employees(
    skip: int = Query(0, ge=0),
    take: int = Query(10, ge=1, le=100),
    manager: EmployeeManager = Depends(get_employee_manager),
):
    """List employees page by page. An empty page answers 204."""
    employees = await manager.get_all(skip=skip, take=take)
    if not employees:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return employees


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    manager: EmployeeManager = Depends(get_employee_manager),
):
    employee = await manager.get_by_id(employee_id)
    if employee is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content=EMPLOYEE_NOT_FOUND.model_dump()
        )
    return employee
