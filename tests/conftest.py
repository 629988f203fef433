"""
Shared fixtures for the employee service tests.
"""
import os

# Set test environment before importing app modules
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.core.db import Database
from app.main import app
from app.services.employee_store import EmployeeStore


@pytest.fixture
def client():
    """App client with a fresh in-memory database per test."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def database():
    from app.models import employee  # noqa: F401

    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def store(database):
    async with database.session_factory() as session:
        yield EmployeeStore(session)


@pytest.fixture
def john():
    return {
        "name": "John Doe",
        "email": "john@example.com",
        "position": "Software Engineer",
    }


@pytest.fixture
def jane():
    return {
        "name": "Jane Smith",
        "email": "jane@example.com",
        "position": "Manager",
    }
