"""
Employee Directory Backend: Employee Service
=============================================

What:  Business logic behind every /employees endpoint: composing employee
       details, listings, create / update / delete.
How:   Uses the association resolver for department/role lookups and the
       entity store for everything else. Stateless; the store is passed in
       on every call.
Who:   Called by app.routes.employees.

Composition order:
    compose_many() takes an explicit `concurrent` flag.
    - list_all_employees and the department/role listings compose one
      employee at a time, in store order.
    - list_employees_sorted_by_name composes all employees at once with
      asyncio.gather. gather returns results in argument order, so the
      output follows the sorted query regardless of which composition
      finishes first.

Empty results:
    update_employee and delete_employee return None when no row matched.
    The routes answer those with 200 and an empty JSON object, the API's
    empty-result marker.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from app.exceptions import NotFoundError, ValidationError
from app.models import Employee, EmployeeDepartment, EmployeeRole
from app.schemas.employee import (
    DepartmentRead,
    EmployeeCreate,
    EmployeeDetails,
    EmployeeUpdate,
    MessageResponse,
    RoleRead,
    SortOrder,
)
from app.services.resolver import (
    resolve_department_for_employee,
    resolve_employees_for_department,
    resolve_employees_for_role,
    resolve_role_for_employee,
)
from app.services.store import EntityStore

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    Business logic layer for employee operations.

    Error Handling Strategy:
        StoreError from the store propagates unchanged (→ 500).
        ValidationError and NotFoundError are raised here where the API
        answers 400 / 404.
    """

    # ── Composition ───────────────────────────────────────────────────────

    async def compose_employee_details(
        self, store: EntityStore, employee: Employee
    ) -> EmployeeDetails:
        """Merge an employee with its resolved department and role."""
        department = await resolve_department_for_employee(store, employee.id)
        role = await resolve_role_for_employee(store, employee.id)

        return EmployeeDetails(
            id=employee.id,
            name=employee.name,
            email=employee.email,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
            department=DepartmentRead.model_validate(department) if department else None,
            role=RoleRead.model_validate(role) if role else None,
        )

    async def compose_many(
        self,
        store: EntityStore,
        employees: Sequence[Employee],
        concurrent: bool = False,
    ) -> List[EmployeeDetails]:
        """
        Compose details for several employees, keeping their input order.

        concurrent=False finishes each employee before starting the next;
        concurrent=True starts all of them at once.
        """
        if concurrent:
            return list(
                await asyncio.gather(
                    *(self.compose_employee_details(store, emp) for emp in employees)
                )
            )

        details: List[EmployeeDetails] = []
        for emp in employees:
            details.append(await self.compose_employee_details(store, emp))
        return details

    # ── Listings ──────────────────────────────────────────────────────────

    async def list_all_employees(self, store: EntityStore) -> List[EmployeeDetails]:
        """
        All employees with details, in store order.

        Raises:
            NotFoundError: The employees table is empty (→ 404)
        """
        employees = await store.list_employees()
        details = await self.compose_many(store, employees, concurrent=False)
        if not details:
            raise NotFoundError(resource="employee", message="No employees found")
        return details

    async def list_employees_sorted_by_name(
        self, store: EntityStore, order: str = SortOrder.ASC.value
    ) -> List[EmployeeDetails]:
        """
        All employees ordered by name, composed concurrently.

        Args:
            order: "ASC" or "DESC", case-insensitive

        Raises:
            ValidationError: Any other order value (→ 400)
        """
        try:
            direction = SortOrder(order.upper())
        except ValueError:
            raise ValidationError(
                message=f"Invalid order '{order}'. Must be one of: ASC, DESC",
                field="order",
            ) from None

        employees = await store.list_employees(order=direction)
        return await self.compose_many(store, employees, concurrent=True)

    async def get_employee_by_id(
        self, store: EntityStore, employee_id: int
    ) -> EmployeeDetails:
        """
        Raises:
            NotFoundError: No employee with this id (→ 404)
        """
        employee = await store.get_employee(employee_id)
        if employee is None:
            raise NotFoundError(resource="employee", resource_id=employee_id)
        return await self.compose_employee_details(store, employee)

    async def list_employees_by_department(
        self, store: EntityStore, department_id: int
    ) -> List[EmployeeDetails]:
        """Employees linked to the department; empty list when none."""
        employees = await resolve_employees_for_department(store, department_id)
        return await self.compose_many(store, employees, concurrent=False)

    async def list_employees_by_role(
        self, store: EntityStore, role_id: int
    ) -> List[EmployeeDetails]:
        """Employees linked to the role; empty list when none."""
        employees = await resolve_employees_for_role(store, role_id)
        return await self.compose_many(store, employees, concurrent=False)

    # ── Mutations ─────────────────────────────────────────────────────────

    async def create_employee(
        self, store: EntityStore, payload: EmployeeCreate
    ) -> EmployeeDetails:
        """
        Insert an employee and, when given, one department and one role link.

        Raises:
            ValidationError: name or email missing or empty (→ 400)
        """
        for field in ("name", "email"):
            if not getattr(payload, field):
                raise ValidationError(
                    message="Name and email are required",
                    field=field,
                )

        employee = await store.create(Employee(name=payload.name, email=payload.email))
        logger.info("Employee %s created", employee.id)

        if payload.department_id is not None:
            await store.create(
                EmployeeDepartment(employee_id=employee.id, department_id=payload.department_id)
            )
        if payload.role_id is not None:
            await store.create(EmployeeRole(employee_id=employee.id, role_id=payload.role_id))

        return await self.compose_employee_details(store, employee)

    async def update_employee(
        self, store: EntityStore, employee_id: int, patch: EmployeeUpdate
    ) -> Optional[EmployeeDetails]:
        """
        Rewrite an employee's links and scalar fields.

        Link rewrite rule: the department links are replaced only when the
        employee CURRENTLY resolves a department, and the replacement uses
        patch.department_id even when it is None. An employee without a
        department does not gain one here. Roles follow the same rule.

        Each step is its own store call; a failure part-way leaves the
        earlier steps applied.

        Returns:
            Composed details, or None when no employee has this id.
        """
        employee = await store.get_employee(employee_id)
        if employee is None:
            logger.info("Update skipped: employee %s does not exist", employee_id)
            return None

        if await resolve_department_for_employee(store, employee_id) is not None:
            await store.delete_employee_departments(employee_id)
            await store.create(
                EmployeeDepartment(employee_id=employee_id, department_id=patch.department_id)
            )

        if await resolve_role_for_employee(store, employee_id) is not None:
            await store.delete_employee_roles(employee_id)
            await store.create(EmployeeRole(employee_id=employee_id, role_id=patch.role_id))

        for field, value in patch.scalar_overrides().items():
            setattr(employee, field, value)
        employee = await store.replace_employee(employee)
        logger.info("Employee %s updated", employee_id)

        return await self.compose_employee_details(store, employee)

    async def delete_employee(
        self, store: EntityStore, employee_id: int
    ) -> Optional[MessageResponse]:
        """
        Hard-delete an employee. Its join rows are left in place.

        Returns:
            A confirmation message, or None when no row was deleted.
        """
        deleted = await store.delete_employee(employee_id)
        if deleted == 0:
            logger.info("Delete skipped: employee %s does not exist", employee_id)
            return None

        logger.info("Employee %s deleted", employee_id)
        return MessageResponse(message=f"Employee with ID {employee_id} deleted successfully")


employee_service = EmployeeService()
