"""
Интеграционные тесты эндпоинтов /api/providers.

Сценарии:
- POST /providers: 201 + Location + alert-заголовки, 400 при наличии id
- PUT /providers: обновление своего поставщика, 403 для чужого, создание без id
- GET /providers, GET /providers/{id} (404), GET /providers/me
- DELETE /providers/{id}: удаление своего, 403 для чужого
- 401/403 без токена
"""

import pytest
from datetime import date

from app.core.config import settings

pytestmark = pytest.mark.integration

ALERT = f"X-{settings.APP_NAME}-alert"
ERROR = f"X-{settings.APP_NAME}-error"
PARAMS = f"X-{settings.APP_NAME}-params"


# ---------------------------------------------------------------------------
# POST /providers
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_provider_returns_201_with_alert(user_client, mock_provider_repo, user_fixture):
    response = await user_client.post("/api/providers", json={"company_name": "Alpha BTP", "city": "Lyon"})

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == 100
    assert data["id_user"] == user_fixture.id
    assert data["registration_date"] == date.today().isoformat()
    assert response.headers["Location"] == "/api/providers/100"
    assert response.headers[ALERT] == f"{settings.APP_NAME}.provider.created"
    assert response.headers[PARAMS] == "100"


@pytest.mark.asyncio
async def test_create_provider_ignores_client_supplied_owner(user_client, user_fixture):
    """id_user из тела запроса не используется — только пользователь сессии."""
    response = await user_client.post("/api/providers", json={"company_name": "X", "id_user": 999})

    assert response.status_code == 201
    assert response.json()["id_user"] == user_fixture.id


@pytest.mark.asyncio
async def test_create_provider_with_id_returns_400(user_client, mock_provider_repo):
    response = await user_client.post("/api/providers", json={"id": 7, "company_name": "X"})

    assert response.status_code == 400
    assert response.headers[ERROR] == "error.idexists"
    assert response.headers[PARAMS] == "provider"
    mock_provider_repo.save.assert_not_called()


@pytest.mark.asyncio
async def test_create_provider_invalid_siret_returns_422(user_client):
    response = await user_client.post("/api/providers", json={"siret": "12AB"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_provider_without_token_is_rejected(client):
    response = await client.post("/api/providers", json={"company_name": "X"})
    assert response.status_code in (401, 403)


# ---------------------------------------------------------------------------
# PUT /providers
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_update_own_provider_returns_200(user_client, mock_provider_repo, provider_fixture):
    mock_provider_repo.get_by_id.return_value = provider_fixture

    response = await user_client.put("/api/providers", json={
        "id": provider_fixture.id,
        "company_name": "Alpha BTP SARL",
    })

    assert response.status_code == 200
    assert response.json()["company_name"] == "Alpha BTP SARL"
    assert response.headers[ALERT] == f"{settings.APP_NAME}.provider.updated"


@pytest.mark.asyncio
async def test_update_foreign_provider_returns_403(user_client, mock_provider_repo, other_provider_fixture):
    mock_provider_repo.get_by_id.return_value = other_provider_fixture

    response = await user_client.put("/api/providers", json={
        "id": other_provider_fixture.id,
        "company_name": "Hijack",
    })

    assert response.status_code == 403
    mock_provider_repo.save.assert_not_called()


@pytest.mark.asyncio
async def test_update_without_id_creates_provider(user_client, user_fixture):
    response = await user_client.put("/api/providers", json={"company_name": "New"})

    assert response.status_code == 201
    assert response.json()["id_user"] == user_fixture.id
    assert response.headers[ALERT] == f"{settings.APP_NAME}.provider.created"


# ---------------------------------------------------------------------------
# GET /providers
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_all_providers(user_client, mock_provider_repo, provider_fixture, other_provider_fixture):
    mock_provider_repo.list_all.return_value = [provider_fixture, other_provider_fixture]

    response = await user_client.get("/api/providers")

    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [10, 20]


@pytest.mark.asyncio
async def test_get_provider_by_id(user_client, mock_provider_repo, provider_fixture):
    mock_provider_repo.get_by_id.return_value = provider_fixture

    response = await user_client.get(f"/api/providers/{provider_fixture.id}")

    assert response.status_code == 200
    assert response.json()["company_name"] == "Alpha BTP"


@pytest.mark.asyncio
async def test_get_missing_provider_returns_404(user_client):
    response = await user_client.get("/api/providers/99999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Provider not found"


@pytest.mark.asyncio
async def test_get_my_provider(user_client, mock_provider_repo, provider_fixture, user_fixture):
    mock_provider_repo.get_by_user_id.return_value = provider_fixture

    response = await user_client.get("/api/providers/me")

    assert response.status_code == 200
    assert response.json()["id"] == provider_fixture.id
    mock_provider_repo.get_by_user_id.assert_called_once_with(user_fixture.id)


@pytest.mark.asyncio
async def test_get_my_provider_without_profile_returns_404(user_client):
    response = await user_client.get("/api/providers/me")
    assert response.status_code == 404


# ---------------------------------------------------------------------------
# DELETE /providers/{id}
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_delete_own_provider(user_client, mock_provider_repo, provider_fixture):
    mock_provider_repo.get_by_id.return_value = provider_fixture

    response = await user_client.delete(f"/api/providers/{provider_fixture.id}")

    assert response.status_code == 200
    assert response.headers[ALERT] == f"{settings.APP_NAME}.provider.deleted"
    mock_provider_repo.delete.assert_called_once_with(provider_fixture)


@pytest.mark.asyncio
async def test_delete_foreign_provider_returns_403(user_client, mock_provider_repo, other_provider_fixture):
    mock_provider_repo.get_by_id.return_value = other_provider_fixture

    response = await user_client.delete(f"/api/providers/{other_provider_fixture.id}")

    assert response.status_code == 403
    mock_provider_repo.delete.assert_not_called()
