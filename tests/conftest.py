"""Shared fixtures: in-memory SQLite, app client dengan override get_db, token helper."""

import os
import tempfile

# Settings dibaca saat import; set environment sebelum import modul aplikasi
os.environ.setdefault("PROJECT_NAME", "Portal Pelaporan Test")
os.environ.setdefault("POSTGRES_SERVER", "localhost")
os.environ.setdefault("POSTGRES_USER", "test")
os.environ.setdefault("POSTGRES_PASSWORD", "test")
os.environ.setdefault("POSTGRES_DB", "test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("SERVICE_NAME", "portal-pelaporan-test")
os.environ.setdefault("LOG_DIRECTORY", tempfile.mkdtemp(prefix="portal-logs-"))

from datetime import timedelta
from typing import Optional

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

import src.models  # noqa: F401
from src.auth.jwt import create_access_token
from src.core.database import get_db
from src.models.enums import RegencyType, UserRole
from src.models.evaluasi_template import EvaluationCategory
from src.models.instansi import Instansi, InstansiLevel
from src.models.region import Province, Regency, District, Village
from src.templates.default_evaluasi import DEFAULT_EVALUATION_CATEGORIES, DEFAULT_INSTANSI_LEVELS
from main import app


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def reference_data(session):
    """Tingkat instansi, band kategori default, satu instansi, dan satu rantai wilayah."""
    for level in DEFAULT_INSTANSI_LEVELS:
        session.add(InstansiLevel(**level))
    for category in DEFAULT_EVALUATION_CATEGORIES:
        session.add(EvaluationCategory(**category))

    province = Province(id=1, code="35", name="Jawa Timur")
    regency = Regency(id=1, province_id=1, code="3578", name="Surabaya", type=RegencyType.KOTA)
    district = District(id=1, regency_id=1, code="357801", name="Karang Pilang")
    village = Village(id=1, district_id=1, code="3578011001", name="Warugunung")
    instansi = Instansi(id=1, slug="dinkes-jatim", name="Dinas Kesehatan Provinsi Jawa Timur", level_id=1)
    session.add_all([province, regency, district, village, instansi])
    await session.commit()

    return {
        "province": province,
        "regency": regency,
        "district": district,
        "village": village,
        "instansi": instansi,
    }


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


def make_token(user_id: str, role: str, nama: Optional[str] = None, **claims) -> str:
    return create_access_token(
        {"sub": user_id, "role": role, "nama": nama or f"User {user_id}", **claims},
        expires_delta=timedelta(minutes=5),
    )


def auth_headers(user_id: str = "user-1", role: str = UserRole.ADMIN_KABKOTA.value) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id, role)}"}


@pytest.fixture
def user_headers():
    return auth_headers("user-1", UserRole.ADMIN_KABKOTA.value)


@pytest.fixture
def other_user_headers():
    return auth_headers("user-2", UserRole.ADMIN_KECAMATAN.value)


@pytest.fixture
def reviewer_headers():
    return auth_headers("reviewer-1", UserRole.ADMIN.value)
