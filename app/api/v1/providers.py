import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.core.alerts import entity_creation_alert, entity_update_alert, entity_deletion_alert
from app.core.dependencies import get_current_user, get_provider_service
from app.models.user import User
from app.schemas.provider import ProviderPayload, ProviderRead
from app.services.provider_service import ProviderService, ENTITY_NAME

logger = logging.getLogger(__name__)

router = APIRouter(tags=["providers"])


@router.post("", response_model=ProviderRead, status_code=201)
async def create_provider(
    payload: ProviderPayload,
    response: Response,
    current_user: User = Depends(get_current_user),
    service: ProviderService = Depends(get_provider_service),
):
    """Create the provider profile of the current user. 400 if the body carries an id."""
    logger.debug("REST request to save Provider : %s", payload)
    provider = await service.create_provider(current_user, payload)
    response.headers["Location"] = f"/api/providers/{provider.id}"
    response.headers.update(entity_creation_alert(ENTITY_NAME, provider.id))
    return provider


@router.put("", response_model=ProviderRead)
async def update_provider(
    payload: ProviderPayload,
    response: Response,
    current_user: User = Depends(get_current_user),
    service: ProviderService = Depends(get_provider_service),
):
    """Update a provider owned by the current user, or create one if no id is given."""
    logger.debug("REST request to update Provider : %s", payload)
    if payload.id is None:
        response.status_code = status.HTTP_201_CREATED
        return await create_provider(payload, response, current_user, service)
    provider = await service.update_provider(current_user, payload)
    response.headers.update(entity_update_alert(ENTITY_NAME, provider.id))
    return provider


@router.get("", response_model=List[ProviderRead])
async def get_all_providers(
    current_user: User = Depends(get_current_user),
    service: ProviderService = Depends(get_provider_service),
):
    logger.debug("REST request to get all Providers")
    return await service.list_providers()


@router.get("/me", response_model=ProviderRead)
async def get_my_provider(
    current_user: User = Depends(get_current_user),
    service: ProviderService = Depends(get_provider_service),
):
    return await service.get_provider_of(current_user)


@router.get("/{provider_id}", response_model=ProviderRead)
async def get_provider(
    provider_id: int,
    current_user: User = Depends(get_current_user),
    service: ProviderService = Depends(get_provider_service),
):
    logger.debug("REST request to get Provider : %s", provider_id)
    return await service.get_provider(provider_id)


@router.delete("/{provider_id}", status_code=status.HTTP_200_OK)
async def delete_provider(
    provider_id: int,
    response: Response,
    current_user: User = Depends(get_current_user),
    service: ProviderService = Depends(get_provider_service),
):
    logger.debug("REST request to delete Provider : %s", provider_id)
    await service.delete_provider(current_user, provider_id)
    response.headers.update(entity_deletion_alert(ENTITY_NAME, provider_id))
