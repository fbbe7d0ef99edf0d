"""
Employee Directory Backend: Entity Store
=========================================

What:  The only code that talks to the database. Exposes create / find /
       bulk-create / destroy / replace operations over the five tables.
How:   Every public method is one unit of work: it opens its own session from
       the factory, runs its statements, commits, and closes. Nothing spans
       two calls, so callers can run store calls concurrently
       (asyncio.gather) without sharing a session.
Who:   Injected into the services through the `get_store` FastAPI dependency.
       Tests build their own instance on a temporary SQLite database.

Error Handling:
    Any SQLAlchemyError is rolled back inside its own session and re-raised
    as StoreError carrying the raw driver message. There is no rollback of
    earlier store calls in the same request.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from app.database import Base, build_session_factory, engine
from app.exceptions import StoreError
from app.models import (
    Department,
    Employee,
    EmployeeDepartment,
    EmployeeRole,
    Role,
)
from app.schemas.employee import SortOrder

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class EntityStore:
    """
    Table-level access for employees, departments, roles and their links.

    The store is created once per process and shared by all requests; it
    holds no per-request state.
    """

    def __init__(self, bind: AsyncEngine):
        self._engine = bind
        self._session_factory = build_session_factory(bind)

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.error("Store operation '%s' failed: %s", operation, exc)
                raise StoreError(message=str(exc), operation=operation) from exc

    # ── Schema ────────────────────────────────────────────────────────────

    async def reset_schema(self) -> None:
        """Drop and recreate every table. All rows are lost."""
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.drop_all)
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as exc:
            logger.error("Schema reset failed: %s", exc)
            raise StoreError(message=str(exc), operation="reset_schema") from exc
        logger.info("Schema reset: %d tables recreated", len(Base.metadata.tables))

    async def ping(self) -> None:
        """Run SELECT 1; raises StoreError when the database is unreachable."""
        async with self._session("ping") as session:
            await session.execute(text("SELECT 1"))

    # ── Generic writes ────────────────────────────────────────────────────

    async def create(self, row: ModelT) -> ModelT:
        """Insert a single row and return it with its id populated."""
        async with self._session(f"create {type(row).__name__}") as session:
            session.add(row)
            await session.flush()
        return row

    async def bulk_create(self, rows: Sequence[ModelT]) -> List[ModelT]:
        """Insert rows in one session, keeping the given order."""
        async with self._session("bulk_create") as session:
            session.add_all(rows)
            await session.flush()
        return list(rows)

    # ── Lookups by primary key ────────────────────────────────────────────

    async def _get(self, model: Type[ModelT], pk: Optional[int]) -> Optional[ModelT]:
        # A NULL reference (rewritten join row) cannot match anything
        if pk is None:
            return None
        async with self._session(f"get {model.__name__}") as session:
            return await session.get(model, pk)

    async def get_employee(self, employee_id: Optional[int]) -> Optional[Employee]:
        return await self._get(Employee, employee_id)

    async def get_department(self, department_id: Optional[int]) -> Optional[Department]:
        return await self._get(Department, department_id)

    async def get_role(self, role_id: Optional[int]) -> Optional[Role]:
        return await self._get(Role, role_id)

    # ── Employee scans and mutations ──────────────────────────────────────

    async def list_employees(self, order: Optional[SortOrder] = None) -> List[Employee]:
        """
        All employees.

        Without `order` the rows come back in the database's default order;
        with it, ORDER BY name in the given direction.
        """
        query = select(Employee)
        if order is SortOrder.DESC:
            query = query.order_by(Employee.name.desc())
        elif order is SortOrder.ASC:
            query = query.order_by(Employee.name.asc())

        async with self._session("list_employees") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def replace_employee(self, employee: Employee) -> Employee:
        """
        Write every column of `employee` over the stored row with the same id.

        `employee` is a detached instance previously returned by the store
        with its fields already patched by the caller.
        """
        async with self._session("replace_employee") as session:
            merged = await session.merge(employee)
            await session.flush()
        return merged

    async def delete_employee(self, employee_id: int) -> int:
        """Delete one employee row. Join rows are not touched. Returns rowcount."""
        async with self._session("delete_employee") as session:
            result = await session.execute(
                delete(Employee).where(Employee.id == employee_id)
            )
            return result.rowcount or 0

    # ── Join tables ───────────────────────────────────────────────────────

    async def find_employee_departments(
        self,
        employee_id: Optional[int] = None,
        department_id: Optional[int] = None,
    ) -> List[EmployeeDepartment]:
        """Join rows matching the given keys, in insertion (id) order."""
        query = select(EmployeeDepartment).order_by(EmployeeDepartment.id)
        if employee_id is not None:
            query = query.where(EmployeeDepartment.employee_id == employee_id)
        if department_id is not None:
            query = query.where(EmployeeDepartment.department_id == department_id)

        async with self._session("find_employee_departments") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def find_employee_roles(
        self,
        employee_id: Optional[int] = None,
        role_id: Optional[int] = None,
    ) -> List[EmployeeRole]:
        """Join rows matching the given keys, in insertion (id) order."""
        query = select(EmployeeRole).order_by(EmployeeRole.id)
        if employee_id is not None:
            query = query.where(EmployeeRole.employee_id == employee_id)
        if role_id is not None:
            query = query.where(EmployeeRole.role_id == role_id)

        async with self._session("find_employee_roles") as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def delete_employee_departments(self, employee_id: int) -> int:
        async with self._session("delete_employee_departments") as session:
            result = await session.execute(
                delete(EmployeeDepartment).where(EmployeeDepartment.employee_id == employee_id)
            )
            return result.rowcount or 0

    async def delete_employee_roles(self, employee_id: int) -> int:
        async with self._session("delete_employee_roles") as session:
            result = await session.execute(
                delete(EmployeeRole).where(EmployeeRole.employee_id == employee_id)
            )
            return result.rowcount or 0


# ── Process-wide instance ─────────────────────────────────────────────────
entity_store = EntityStore(engine)


def get_store() -> EntityStore:
    """FastAPI dependency returning the shared store. Overridden in tests."""
    return entity_store
