"""
Employee Directory Backend: Association Resolver
=================================================

What:  Walks the employee_departments / employee_roles join tables to find
       the entities linked to an employee, department or role.
How:   One store scan for the join rows, then one primary-key lookup per
       row, awaited one after another.

Resolution rules:
    - Employee → department/role: every join row is looked up in insertion
      order and the value from the LAST row is returned. A later row that
      points at nothing (NULL or deleted target) overwrites an earlier hit
      with None. Callers normally keep one row per employee, so this only
      matters for data written outside the update path.
    - Department/role → employees: join rows whose employee was deleted are
      skipped without error.
    - No join rows → None / [].
"""

import logging
from typing import List, Optional

from app.models import Department, Employee, Role
from app.services.store import EntityStore

logger = logging.getLogger(__name__)


async def resolve_department_for_employee(
    store: EntityStore, employee_id: int
) -> Optional[Department]:
    links = await store.find_employee_departments(employee_id=employee_id)

    department: Optional[Department] = None
    for link in links:
        department = await store.get_department(link.department_id)

    if len(links) > 1:
        logger.debug(
            "Employee %s has %d department links; using the last one",
            employee_id,
            len(links),
        )
    return department


async def resolve_role_for_employee(
    store: EntityStore, employee_id: int
) -> Optional[Role]:
    links = await store.find_employee_roles(employee_id=employee_id)

    role: Optional[Role] = None
    for link in links:
        role = await store.get_role(link.role_id)

    if len(links) > 1:
        logger.debug(
            "Employee %s has %d role links; using the last one",
            employee_id,
            len(links),
        )
    return role


async def resolve_employees_for_department(
    store: EntityStore, department_id: int
) -> List[Employee]:
    employees: List[Employee] = []
    for link in await store.find_employee_departments(department_id=department_id):
        employee = await store.get_employee(link.employee_id)
        # Orphaned link: the employee was deleted after the link was written
        if employee is not None:
            employees.append(employee)
    return employees


async def resolve_employees_for_role(
    store: EntityStore, role_id: int
) -> List[Employee]:
    employees: List[Employee] = []
    for link in await store.find_employee_roles(role_id=role_id):
        employee = await store.get_employee(link.employee_id)
        if employee is not None:
            employees.append(employee)
    return employees
