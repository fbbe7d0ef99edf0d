"""
Employee Directory Backend: Employee Route Handlers
====================================================

What:  All /employees endpoints.
How:   Extracts path/query/body values, delegates to EmployeeService, and
       wraps the result. Errors are raised as app exceptions and turned into
       status codes by the global handlers in main.py.

Route Inventory:
    GET  /employees                              list all (404 when empty)
    GET  /employees/details/{id}                 one employee (404 when absent)
    GET  /employees/department/{departmentId}    employees in a department
    GET  /employees/role/{roleId}                employees holding a role
    GET  /employees/sort-by-name?order=ASC|DESC  all, sorted by name
    POST /employees/new                          create (201)
    POST /employees/update/{id}                  update ({} when absent)
    POST /employees/delete                       delete ({} when absent)
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from app.schemas.employee import (
    EmployeeCreate,
    EmployeeDeleteRequest,
    EmployeeDetailResponse,
    EmployeeDetails,
    EmployeeListResponse,
    EmployeeUpdate,
    ErrorResponse,
    MessageResponse,
)
from app.services.employee_service import employee_service
from app.services.store import EntityStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get(
    "",
    response_model=EmployeeListResponse,
    responses={
        404: {"description": "No employees exist", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="List all employees with department and role",
)
async def list_employees(store: EntityStore = Depends(get_store)) -> EmployeeListResponse:
    employees = await employee_service.list_all_employees(store)
    return EmployeeListResponse(employees=employees)


@router.get(
    "/sort-by-name",
    response_model=EmployeeListResponse,
    responses={
        400: {"description": "Unknown sort order", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="List employees sorted by name",
)
async def list_employees_sorted_by_name(
    order: str = Query(default="ASC", description="Sort direction: ASC or DESC"),
    store: EntityStore = Depends(get_store),
) -> EmployeeListResponse:
    employees = await employee_service.list_employees_sorted_by_name(store, order)
    return EmployeeListResponse(employees=employees)


@router.get(
    "/details/{employee_id}",
    response_model=EmployeeDetailResponse,
    responses={
        404: {"description": "Employee not found", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Get one employee with department and role",
)
async def get_employee(
    employee_id: int, store: EntityStore = Depends(get_store)
) -> EmployeeDetailResponse:
    employee = await employee_service.get_employee_by_id(store, employee_id)
    return EmployeeDetailResponse(employee=employee)


@router.get(
    "/department/{department_id}",
    response_model=EmployeeListResponse,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List employees linked to a department",
)
async def list_employees_by_department(
    department_id: int, store: EntityStore = Depends(get_store)
) -> EmployeeListResponse:
    """An unknown or empty department yields 200 with an empty list."""
    employees = await employee_service.list_employees_by_department(store, department_id)
    return EmployeeListResponse(employees=employees)


@router.get(
    "/role/{role_id}",
    response_model=EmployeeListResponse,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List employees holding a role",
)
async def list_employees_by_role(
    role_id: int, store: EntityStore = Depends(get_store)
) -> EmployeeListResponse:
    employees = await employee_service.list_employees_by_role(store, role_id)
    return EmployeeListResponse(employees=employees)


@router.post(
    "/new",
    response_model=EmployeeDetails,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Name or email missing", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Create an employee",
)
async def create_employee(
    payload: EmployeeCreate, store: EntityStore = Depends(get_store)
) -> EmployeeDetails:
    return await employee_service.create_employee(store, payload)


@router.post(
    "/update/{employee_id}",
    response_model=EmployeeDetails,
    responses={
        200: {"description": "Updated employee, or {} when the id does not exist"},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Update an employee",
)
async def update_employee(
    employee_id: int,
    patch: EmployeeUpdate,
    store: EntityStore = Depends(get_store),
):
    """
    Rewrite an employee. An unknown id returns 200 with {}.
    """
    details = await employee_service.update_employee(store, employee_id, patch)
    if details is None:
        logger.warning("Update requested for unknown employee %s", employee_id)
        return JSONResponse(status_code=status.HTTP_200_OK, content={})
    return details


@router.post(
    "/delete",
    response_model=MessageResponse,
    responses={
        200: {"description": "Deletion message, or {} when nothing was deleted"},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Delete an employee",
)
async def delete_employee(
    payload: EmployeeDeleteRequest, store: EntityStore = Depends(get_store)
):
    result = await employee_service.delete_employee(store, payload.id)
    if result is None:
        return JSONResponse(status_code=status.HTTP_200_OK, content={})
    return result
