"""
Employee Directory Backend: Test Configuration (conftest.py)
=============================================================

What:  Shared pytest fixtures for the whole suite.
How:   Every test gets its own SQLite database file (aiosqlite) under
       pytest's tmp_path, wrapped in a fresh EntityStore. The HTTP client
       fixture swaps that store into the app through dependency_overrides.

Fixture Hierarchy (all function-scoped):
    ├── store:          EntityStore over an empty, fully created schema
    ├── seeded_store:   store after seed_database()
    ├── make_employee:  factory inserting an employee with optional links
    └── test_client:    HTTPX AsyncClient bound to the app and `store`
"""

import os

# Settings are read at import time; set them before anything imports app.*
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_directory.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.database import build_engine, create_tables  # noqa: E402
from app.models import Employee, EmployeeDepartment, EmployeeRole  # noqa: E402
from app.services.seed_service import seed_database  # noqa: E402
from app.services.store import EntityStore, get_store  # noqa: E402


@pytest_asyncio.fixture
async def store(tmp_path):
    """
    Provides an EntityStore over a temporary SQLite database.

    A file (not :memory:) is used because the store opens a new connection
    per call and concurrent composition needs several at once.
    """
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'directory.db'}")
    await create_tables(engine)
    try:
        yield EntityStore(engine)
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def seeded_store(store):
    """Store loaded with the /seed_db demo data (3 employees, 2 departments, 3 roles)."""
    await seed_database(store)
    return store


@pytest_asyncio.fixture
async def make_employee(store):
    """
    Factory inserting an employee plus optional join rows.

    Usage:
        emp = await make_employee("Ada", department_ids=[d1.id, d2.id])
    """

    async def _make(name, email=None, department_ids=(), role_ids=()):
        employee = await store.create(
            Employee(name=name, email=email or f"{name.lower()}@example.com")
        )
        for department_id in department_ids:
            await store.create(
                EmployeeDepartment(employee_id=employee.id, department_id=department_id)
            )
        for role_id in role_ids:
            await store.create(EmployeeRole(employee_id=employee.id, role_id=role_id))
        return employee

    return _make


@pytest_asyncio.fixture
async def test_client(store):
    """
    Provides an async HTTP test client bound to the `store` fixture.

    ASGITransport does not run the lifespan, so the module-level engine
    from DATABASE_URL is never connected.
    """
    from app.main import app

    app.dependency_overrides[get_store] = lambda: store
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
