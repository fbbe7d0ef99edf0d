"""
Employee Directory Backend: Entity Store Tests
===============================================

What:  Store-level behavior the services rely on: error wrapping, row
       replacement, join-row ordering and deletion counts.
"""

import pytest

from app.database import Base
from app.exceptions import StoreError
from app.models import Employee, EmployeeDepartment
from app.schemas.employee import SortOrder


@pytest.mark.asyncio
async def test_sqlalchemy_errors_become_store_errors(store):
    """SQLAlchemy failures should surface as StoreError."""
    async with store._engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    with pytest.raises(StoreError) as excinfo:
        await store.list_employees()

    assert "employees" in excinfo.value.message
    assert excinfo.value.operation == "list_employees"


@pytest.mark.asyncio
async def test_replace_employee_persists_patched_row(store):
    """replace_employee should persist the patched row."""
    employee = await store.create(Employee(name="Before", email="b@example.com"))

    employee.name = "After"
    replaced = await store.replace_employee(employee)

    reloaded = await store.get_employee(employee.id)
    assert replaced.name == "After"
    assert reloaded.name == "After"
    assert reloaded.email == "b@example.com"


@pytest.mark.asyncio
async def test_join_rows_come_back_in_insertion_order(store):
    """Join rows should come back in insertion order."""
    for department_id in (3, 1, 2):
        await store.create(EmployeeDepartment(employee_id=10, department_id=department_id))

    links = await store.find_employee_departments(employee_id=10)

    assert [link.department_id for link in links] == [3, 1, 2]


@pytest.mark.asyncio
async def test_delete_counts(store):
    """Deletes should return the number of rows removed."""
    employee = await store.create(Employee(name="X", email="x@example.com"))
    await store.create(EmployeeDepartment(employee_id=employee.id, department_id=1))
    await store.create(EmployeeDepartment(employee_id=employee.id, department_id=2))

    assert await store.delete_employee_departments(employee.id) == 2
    assert await store.delete_employee(employee.id) == 1
    assert await store.delete_employee(employee.id) == 0


@pytest.mark.asyncio
async def test_list_employees_sorted(store):
    """list_employees should honour ASC and DESC."""
    await store.bulk_create([Employee(name=n, email=f"{n}@x.com") for n in ("b", "c", "a")])

    asc = await store.list_employees(order=SortOrder.ASC)
    desc = await store.list_employees(order=SortOrder.DESC)

    assert [e.name for e in asc] == ["a", "b", "c"]
    assert [e.name for e in desc] == ["c", "b", "a"]


@pytest.mark.asyncio
async def test_get_with_null_id_is_none(store):
    """A None id should return None without querying."""
    assert await store.get_department(None) is None
