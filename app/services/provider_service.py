import logging
from datetime import date
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError

from app.core.alerts import failure_alert
from app.models.activity import Activity
from app.models.provider import Provider
from app.models.user import User
from app.repositories.activity_repository import ActivityRepository
from app.repositories.provider_repository import ProviderRepository
from app.schemas.provider import ProviderPayload

logger = logging.getLogger(__name__)

ENTITY_NAME = "provider"


def _provider_exists() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Current user already has a provider profile",
        headers=failure_alert(ENTITY_NAME, "providerexists"),
    )


class ProviderService:
    def __init__(self, providers: ProviderRepository, activities: ActivityRepository):
        self.providers = providers
        self.activities = activities

    async def _load_activities(self, activity_ids: List[int]) -> List[Activity]:
        activities = await self.activities.get_by_ids(activity_ids)
        missing = set(activity_ids) - {a.id for a in activities}
        if missing:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown activity ids: {sorted(missing)}",
            )
        return activities

    async def create_provider(self, user: User, payload: ProviderPayload) -> Provider:
        if payload.id is not None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="A new provider cannot already have an ID",
                headers=failure_alert(ENTITY_NAME, "idexists"),
            )
        if await self.providers.get_by_user_id(user.id) is not None:
            raise _provider_exists()

        provider = Provider(
            id_user=user.id,
            registration_date=date.today(),
            company_name=payload.company_name,
            siret=payload.siret,
            phone=payload.phone,
            city=payload.city,
            description=payload.description,
        )
        provider.activities = await self._load_activities(payload.activity_ids)
        try:
            return await self.providers.save(provider)
        except IntegrityError:
            # Параллельный запрос успел создать профиль: сработал unique на id_user
            logger.warning("Provider profile for user %s already exists", provider.id_user)
            raise _provider_exists()

    async def update_provider(self, user: User, payload: ProviderPayload) -> Provider:
        """Без id — создание. С id — только владелец может изменить запись."""
        if payload.id is None:
            return await self.create_provider(user, payload)

        provider = await self.get_provider(payload.id)
        self._check_owner(user, provider)

        provider.company_name = payload.company_name
        provider.siret = payload.siret
        provider.phone = payload.phone
        provider.city = payload.city
        provider.description = payload.description
        provider.activities = await self._load_activities(payload.activity_ids)
        return await self.providers.save(provider)

    async def list_providers(self) -> List[Provider]:
        return await self.providers.list_all()

    async def get_provider(self, provider_id: int) -> Provider:
        provider = await self.providers.get_by_id(provider_id)
        if provider is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Provider not found")
        return provider

    async def get_provider_of(self, user: User) -> Provider:
        provider = await self.providers.get_by_user_id(user.id)
        if provider is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Provider not found")
        return provider

    async def delete_provider(self, user: User, provider_id: int) -> None:
        provider = await self.get_provider(provider_id)
        self._check_owner(user, provider)
        await self.providers.delete(provider)

    @staticmethod
    def _check_owner(user: User, provider: Provider) -> None:
        if provider.id_user != user.id:
            logger.warning("User %s tried to modify provider %s owned by user %s",
                           user.id, provider.id, provider.id_user)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
