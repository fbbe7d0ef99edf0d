"""
Employee Directory Backend: Seed Service
=========================================

What:  Rebuilds the schema and loads the demo directory behind GET /seed_db.
How:   Drops and recreates every table, bulk-inserts departments, roles and
       employees, then writes one department link and one role link per
       employee.

Seeded links:
    Rahul Sharma  → Engineering / Software Engineer
    Priya Singh   → Marketing   / Marketing Specialist
    Ankit Verma   → Engineering / Product Manager
"""

import logging

from app.models import Department, Employee, EmployeeDepartment, EmployeeRole, Role
from app.schemas.employee import MessageResponse
from app.services.store import EntityStore

logger = logging.getLogger(__name__)

DEPARTMENTS = ["Engineering", "Marketing"]

ROLES = ["Software Engineer", "Marketing Specialist", "Product Manager"]

EMPLOYEES = [
    ("Rahul Sharma", "rahul.sharma@example.com"),
    ("Priya Singh", "priya.singh@example.com"),
    ("Ankit Verma", "ankit.verma@example.com"),
]

# (employee index, department index, role index)
ASSIGNMENTS = [
    (0, 0, 0),
    (1, 1, 1),
    (2, 0, 2),
]


async def seed_database(store: EntityStore) -> MessageResponse:
    """Wipe the database and load the demo data set."""
    await store.reset_schema()

    departments = await store.bulk_create([Department(name=name) for name in DEPARTMENTS])
    roles = await store.bulk_create([Role(title=title) for title in ROLES])
    employees = await store.bulk_create(
        [Employee(name=name, email=email) for name, email in EMPLOYEES]
    )

    for emp_idx, dept_idx, role_idx in ASSIGNMENTS:
        await store.create(
            EmployeeDepartment(
                employee_id=employees[emp_idx].id,
                department_id=departments[dept_idx].id,
            )
        )
        await store.create(
            EmployeeRole(
                employee_id=employees[emp_idx].id,
                role_id=roles[role_idx].id,
            )
        )

    logger.info(
        "Database seeded: %d departments, %d roles, %d employees",
        len(departments),
        len(roles),
        len(employees),
    )
    return MessageResponse(message="Database seeded!")
