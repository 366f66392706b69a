"""
Общие фикстуры для всех тестов backend'а.

Стратегия:
- Тестовое FastAPI-приложение создаётся без startup-событий (нет подключения к БД).
- Все репозитории заменяются на AsyncMock(spec=...) через dependency_overrides,
  поэтому сервисы работают настоящие, а хранилище — мок.
- get_current_user заменяется на лямбду с нужным пользователем; для проверки
  самого JWT-middleware используется клиент без этой подмены.
- Файлы devis пишутся во временную директорию (settings.UPLOAD_ROOT → tmp_path).
- SQL репозиториев проверяется на SQLite в памяти (фикстура db_session).
"""

import pytest
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from datetime import date, datetime
from typing import AsyncGenerator

from app.api.router import api_router
from app.core.base import Base
from app.core.config import settings
from app.core.dependencies import (
    get_current_user,
    get_user_repository,
    get_provider_repository,
    get_project_repository,
    get_activity_repository,
    get_quote_repository,
)
from app.models.activity import Activity
from app.models.project import Project
from app.models.provider import Provider
from app.models.user import User
from app.repositories.activity_repository import ActivityRepository
from app.repositories.project_repository import ProjectRepository
from app.repositories.provider_repository import ProviderRepository
from app.repositories.quote_repository import QuoteRepository
from app.repositories.user_repository import UserRepository
from app.services.auth_service import auth_service


# ---------------------------------------------------------------------------
# Вспомогательные функции
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Тестовое FastAPI-приложение без startup-событий."""
    test_app = FastAPI(title="Monappeloffre Test App")
    test_app.include_router(api_router, prefix="/api")
    return test_app


async def assign_id(obj):
    """side_effect для repo.save: имитирует INSERT с автоинкрементом."""
    if obj.id is None:
        obj.id = 100
    if hasattr(obj, "created_at") and obj.created_at is None:
        obj.created_at = datetime.utcnow()
    return obj


# ---------------------------------------------------------------------------
# Фикстуры сущностей
# ---------------------------------------------------------------------------

@pytest.fixture
def user_fixture() -> User:
    """Пользователь, у которого есть профиль поставщика (provider_fixture)."""
    return User(
        id=1,
        login="provider-a",
        email="a@example.com",
        password=auth_service.hash_password("password123"),
        created_at=datetime.utcnow(),
    )


@pytest.fixture
def other_user_fixture() -> User:
    """Второй пользователь — владелец other_provider_fixture."""
    return User(
        id=2,
        login="provider-b",
        email="b@example.com",
        password=auth_service.hash_password("password456"),
        created_at=datetime.utcnow(),
    )


@pytest.fixture
def provider_fixture() -> Provider:
    return Provider(id=10, id_user=1, registration_date=date(2024, 1, 15), company_name="Alpha BTP")


@pytest.fixture
def other_provider_fixture() -> Provider:
    return Provider(id=20, id_user=2, registration_date=date(2024, 2, 1), company_name="Beta Rénov")


@pytest.fixture
def activity_fixture() -> Activity:
    return Activity(id=3, name="Plomberie")


@pytest.fixture
def project_fixture(activity_fixture) -> Project:
    project = Project(id=1, name="Rénovation salle de bain", city="Lyon", created_at=datetime.utcnow())
    project.activities = [activity_fixture]
    return project


@pytest.fixture
def upload_root(tmp_path, monkeypatch):
    """Все загрузки пишутся во временную директорию теста."""
    monkeypatch.setattr(settings, "UPLOAD_ROOT", str(tmp_path))
    return tmp_path


# ---------------------------------------------------------------------------
# Мокированные репозитории
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_user_repo() -> AsyncMock:
    repo = AsyncMock(spec=UserRepository)
    repo.get_by_id.return_value = None
    repo.get_by_login.return_value = None
    repo.get_by_email.return_value = None
    repo.get_by_refresh_token.return_value = None
    return repo


@pytest.fixture
def mock_provider_repo() -> AsyncMock:
    repo = AsyncMock(spec=ProviderRepository)
    repo.get_by_id.return_value = None
    repo.get_by_user_id.return_value = None
    repo.list_all.return_value = []
    repo.save.side_effect = assign_id
    return repo


@pytest.fixture
def mock_project_repo() -> AsyncMock:
    repo = AsyncMock(spec=ProjectRepository)
    repo.get_by_id.return_value = None
    repo.get_by_ids.return_value = []
    repo.list_all.return_value = []
    repo.find_by_activity_ids.return_value = []
    return repo


@pytest.fixture
def mock_activity_repo() -> AsyncMock:
    repo = AsyncMock(spec=ActivityRepository)
    repo.list_all.return_value = []
    repo.get_by_ids.return_value = []
    return repo


@pytest.fixture
def mock_quote_repo() -> AsyncMock:
    repo = AsyncMock(spec=QuoteRepository)
    repo.get_by_id.return_value = None
    repo.list_all.return_value = []
    repo.list_by_project.return_value = []
    repo.list_by_projects_and_provider.return_value = []
    repo.save.side_effect = assign_id
    return repo


# ---------------------------------------------------------------------------
# HTTP-клиенты
# ---------------------------------------------------------------------------

def _override_repositories(
    app: FastAPI,
    users, providers, projects, activities, quotes,
) -> None:
    app.dependency_overrides[get_user_repository] = lambda: users
    app.dependency_overrides[get_provider_repository] = lambda: providers
    app.dependency_overrides[get_project_repository] = lambda: projects
    app.dependency_overrides[get_activity_repository] = lambda: activities
    app.dependency_overrides[get_quote_repository] = lambda: quotes


@pytest.fixture
async def client(
    mock_user_repo, mock_provider_repo, mock_project_repo, mock_activity_repo, mock_quote_repo,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Клиент без подмены get_current_user: запросы проходят через настоящую
    проверку JWT. Используется для auth-эндпоинтов и проверки 401/403.
    """
    app = create_test_app()
    _override_repositories(
        app, mock_user_repo, mock_provider_repo, mock_project_repo, mock_activity_repo, mock_quote_repo,
    )
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def user_client(
    user_fixture, mock_user_repo, mock_provider_repo, mock_project_repo, mock_activity_repo, mock_quote_repo,
) -> AsyncGenerator[AsyncClient, None]:
    """Клиент, аутентифицированный как user_fixture."""
    app = create_test_app()
    _override_repositories(
        app, mock_user_repo, mock_provider_repo, mock_project_repo, mock_activity_repo, mock_quote_repo,
    )
    app.dependency_overrides[get_current_user] = lambda: user_fixture
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def auth_headers(user_fixture, mock_user_repo) -> dict:
    """Заголовки с валидным JWT для user_fixture (get_by_id вернёт этого пользователя)."""
    mock_user_repo.get_by_id.return_value = user_fixture
    access_token = auth_service.create_access_token(data={"sub": str(user_fixture.id)})
    return {"Authorization": f"Bearer {access_token}"}


# ---------------------------------------------------------------------------
# Настоящая БД: SQLite в памяти
# ---------------------------------------------------------------------------

@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Сессия поверх aiosqlite с созданными таблицами и включёнными внешними ключами."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        # без PRAGMA SQLite игнорирует ON DELETE CASCADE
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
