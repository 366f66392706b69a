import logging
from typing import Optional

from fastapi import HTTPException, status

from app.models.provider import Provider
from app.models.user import User
from app.repositories.provider_repository import ProviderRepository

logger = logging.getLogger(__name__)


class IdentityService:
    """
    Связывает аутентифицированного пользователя с его профилем поставщика.

    Пользователь передаётся явно (из get_current_user), глобального
    «текущего логина» нет.
    """

    def __init__(self, providers: ProviderRepository):
        self.providers = providers

    async def resolve_current_provider(self, user: Optional[User]) -> Optional[Provider]:
        """Поставщик пользователя или None. Никогда не бросает исключение «не найдено»."""
        if user is None:
            return None
        provider = await self.providers.get_by_user_id(user.id)
        logger.debug("id User logged : %s, provider : %s", user.id, provider.id if provider else None)
        return provider

    async def require_current_provider(self, user: User) -> Provider:
        provider = await self.resolve_current_provider(user)
        if provider is None:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Current user has no provider profile",
            )
        return provider
