"""
Pytest 공통 fixture

DB 없이 돌리기 위해 get_connection 을 가짜 커넥션으로 대체한다.
"""
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.auth import create_access_token
from utils.database import get_connection


@pytest.fixture
def conn():
    """asyncpg 커넥션 대역 (fetch / fetchrow 결과를 테스트에서 지정)"""
    return AsyncMock()


@pytest.fixture
def client(conn):
    """테스트용 FastAPI 클라이언트 (lifespan 미실행)"""
    async def override_get_connection():
        yield conn

    app.dependency_overrides[get_connection] = override_get_connection
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token(data={"sub": "admin", "is_admin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token(data={"sub": "u1", "is_admin": False})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def company_row():
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "numEmployees": 1,
        "logoUrl": "http://c1.img",
    }


@pytest.fixture
def job_row():
    from decimal import Decimal

    return {
        "id": 1,
        "title": "j1",
        "salary": 100,
        "equity": Decimal("0.1"),
        "companyHandle": "c1",
    }
