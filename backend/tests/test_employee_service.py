"""
Employee Directory Backend: Employee Service Tests
===================================================

What:  Composition, listings and mutations of EmployeeService.
How:   Real temporary SQLite store; the concurrency tests replace
       compose_employee_details with a timed stand-in.

What we test:
    ✅ Composed details with and without links
    ✅ Presence checks on create
    ✅ Update rewrites links only when one already resolves
    ✅ Empty-result marker (None) for unknown ids on update/delete
    ✅ Sequential vs. concurrent composition keep input order
"""

import asyncio

import pytest

from app.exceptions import NotFoundError, ValidationError
from app.models import Department, Role
from app.schemas.employee import EmployeeCreate, EmployeeDetails, EmployeeUpdate
from app.services.employee_service import EmployeeService


@pytest.fixture
def service():
    return EmployeeService()


class TestCreate:
    """Tests for create_employee."""

    @pytest.mark.asyncio
    async def test_create_without_links(self, store, service):
        """Create without ids should leave department and role empty."""
        details = await service.create_employee(
            store, EmployeeCreate(name="A", email="a@x.com")
        )

        assert details.name == "A"
        assert details.email == "a@x.com"
        assert details.department is None
        assert details.role is None
        assert details.id is not None

    @pytest.mark.asyncio
    async def test_create_with_links(self, store, service):
        """Create with ids should link one department and one role."""
        department = await store.create(Department(name="Engineering"))
        role = await store.create(Role(title="Product Manager"))

        details = await service.create_employee(
            store,
            EmployeeCreate(
                name="B", email="b@x.com", department_id=department.id, role_id=role.id
            ),
        )

        assert details.department.name == "Engineering"
        assert details.role.title == "Product Manager"

    @pytest.mark.asyncio
    async def test_create_missing_email_rejected(self, store, service):
        """Missing email should raise ValidationError naming the field."""
        with pytest.raises(ValidationError) as excinfo:
            await service.create_employee(store, EmployeeCreate(name="A"))

        assert excinfo.value.field == "email"
        assert await store.list_employees() == []

    @pytest.mark.asyncio
    async def test_create_empty_name_rejected(self, store, service):
        """Empty name should raise ValidationError."""
        with pytest.raises(ValidationError):
            await service.create_employee(store, EmployeeCreate(name="", email="a@x.com"))


class TestUpdate:
    """Tests for update_employee and its link rewrite rule."""

    @pytest.mark.asyncio
    async def test_update_replaces_existing_department(self, store, service, make_employee):
        """An existing department link should be replaced by the new one."""
        old = await store.create(Department(name="Engineering"))
        new = await store.create(Department(name="Marketing"))
        emp = await make_employee("Priya", department_ids=[old.id])

        details = await service.update_employee(
            store, emp.id, EmployeeUpdate(department_id=new.id)
        )

        assert details.department.id == new.id
        links = await store.find_employee_departments(employee_id=emp.id)
        assert [link.department_id for link in links] == [new.id]

    @pytest.mark.asyncio
    async def test_update_does_not_add_department_when_none_exists(
        self, store, service, make_employee
    ):
        """An employee without a department should not gain one."""
        department = await store.create(Department(name="Engineering"))
        emp = await make_employee("Rahul")

        details = await service.update_employee(
            store, emp.id, EmployeeUpdate(department_id=department.id)
        )

        assert details.department is None
        assert await store.find_employee_departments(employee_id=emp.id) == []

    @pytest.mark.asyncio
    async def test_update_without_new_role_clears_existing_role(
        self, store, service, make_employee
    ):
        """No roleId should rewrite the role link to NULL."""
        role = await store.create(Role(title="Software Engineer"))
        emp = await make_employee("Ankit", role_ids=[role.id])

        details = await service.update_employee(store, emp.id, EmployeeUpdate(name="Ankit V"))

        assert details.role is None
        links = await store.find_employee_roles(employee_id=emp.id)
        assert len(links) == 1
        assert links[0].role_id is None

    @pytest.mark.asyncio
    async def test_update_overwrites_only_supplied_fields(self, store, service, make_employee):
        """Fields left out of the patch should keep their values."""
        emp = await make_employee("Old Name", email="keep@example.com")

        details = await service.update_employee(
            store, emp.id, EmployeeUpdate.model_validate({"name": "New Name"})
        )

        assert details.name == "New Name"
        assert details.email == "keep@example.com"
        stored = await store.get_employee(emp.id)
        assert stored.name == "New Name"

    @pytest.mark.asyncio
    async def test_update_unknown_employee_returns_none(self, store, service):
        """Unknown id should return None."""
        assert await service.update_employee(store, 404, EmployeeUpdate(name="X")) is None


class TestDelete:
    """Tests for delete_employee."""

    @pytest.mark.asyncio
    async def test_delete_unknown_employee_returns_none(self, store, service):
        """Unknown id should return None."""
        assert await service.delete_employee(store, 12345) is None

    @pytest.mark.asyncio
    async def test_delete_leaves_links_orphaned(self, store, service, make_employee):
        """Deleting should leave join rows in place."""
        department = await store.create(Department(name="Engineering"))
        emp = await make_employee("Temp", department_ids=[department.id])

        result = await service.delete_employee(store, emp.id)

        assert str(emp.id) in result.message
        assert await store.get_employee(emp.id) is None
        assert len(await store.find_employee_departments(employee_id=emp.id)) == 1
        assert await service.list_employees_by_department(store, department.id) == []


class TestListings:
    """Tests for the listing operations."""

    @pytest.mark.asyncio
    async def test_list_all_empty_raises_not_found(self, store, service):
        """Empty table should raise NotFoundError."""
        with pytest.raises(NotFoundError):
            await service.list_all_employees(store)

    @pytest.mark.asyncio
    async def test_list_all_seeded(self, seeded_store, service):
        """Seeded employees should come back in store order with details."""
        details = await service.list_all_employees(seeded_store)

        by_name = {d.name: d for d in details}
        assert [d.name for d in details] == ["Rahul Sharma", "Priya Singh", "Ankit Verma"]
        assert by_name["Rahul Sharma"].department.name == "Engineering"
        assert by_name["Rahul Sharma"].role.title == "Software Engineer"
        assert by_name["Priya Singh"].department.name == "Marketing"
        assert by_name["Ankit Verma"].role.title == "Product Manager"

    @pytest.mark.asyncio
    async def test_sorted_desc(self, seeded_store, service):
        """DESC should order names descending."""
        details = await service.list_employees_sorted_by_name(seeded_store, "DESC")

        assert [d.name for d in details] == ["Rahul Sharma", "Priya Singh", "Ankit Verma"]
        assert details[0].department.name == "Engineering"

    @pytest.mark.asyncio
    async def test_sorted_asc_lowercase(self, seeded_store, service):
        """Order should be case-insensitive."""
        details = await service.list_employees_sorted_by_name(seeded_store, "asc")

        assert [d.name for d in details] == ["Ankit Verma", "Priya Singh", "Rahul Sharma"]

    @pytest.mark.asyncio
    async def test_sorted_invalid_order(self, store, service):
        """Unknown order should raise ValidationError."""
        with pytest.raises(ValidationError):
            await service.list_employees_sorted_by_name(store, "sideways")

    @pytest.mark.asyncio
    async def test_get_by_id_unknown(self, store, service):
        """Unknown id should raise NotFoundError."""
        with pytest.raises(NotFoundError):
            await service.get_employee_by_id(store, 7)

    @pytest.mark.asyncio
    async def test_by_department_and_role(self, seeded_store, service):
        """Department and role listings should follow link order."""
        engineering = await service.list_employees_by_department(seeded_store, 1)
        marketing_specialists = await service.list_employees_by_role(seeded_store, 2)

        assert [d.name for d in engineering] == ["Rahul Sharma", "Ankit Verma"]
        assert [d.name for d in marketing_specialists] == ["Priya Singh"]


class TimedService(EmployeeService):
    """
    Replaces composition with a sleep that is longest for the first
    employee, so a concurrent run finishes in reverse input order.
    """

    def __init__(self, total):
        self.total = total
        self.in_flight = 0
        self.max_in_flight = 0
        self.finished = []

    async def compose_employee_details(self, store, employee):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        position = len(self.finished) + self.in_flight
        await asyncio.sleep(0.01 * (self.total - position + 1))
        self.in_flight -= 1
        self.finished.append(employee.name)
        return EmployeeDetails(id=employee.id, name=employee.name, email=employee.email)


class TestCompositionOrder:
    """Tests for sequential versus concurrent composition."""

    @pytest.mark.asyncio
    async def test_sorted_listing_composes_concurrently_but_keeps_sort_order(
        self, seeded_store
    ):
        """Sorted listing should overlap compositions and keep sort order."""
        timed = TimedService(total=3)

        details = await timed.list_employees_sorted_by_name(seeded_store, "ASC")

        assert [d.name for d in details] == ["Ankit Verma", "Priya Singh", "Rahul Sharma"]
        assert timed.max_in_flight == 3
        assert timed.finished == ["Rahul Sharma", "Priya Singh", "Ankit Verma"]

    @pytest.mark.asyncio
    async def test_list_all_composes_one_at_a_time(self, seeded_store):
        """Full listing should compose one employee at a time."""
        timed = TimedService(total=3)

        details = await timed.list_all_employees(seeded_store)

        assert timed.max_in_flight == 1
        assert timed.finished == [d.name for d in details]
