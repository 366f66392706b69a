from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.models.provider import Provider


class ProviderRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, provider_id: int) -> Optional[Provider]:
        result = await self.db.execute(select(Provider).where(Provider.id == provider_id))
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: int) -> Optional[Provider]:
        """Поставщик текущего пользователя: id_user уникален, поэтому не более одной записи."""
        result = await self.db.execute(select(Provider).where(Provider.id_user == user_id))
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Provider]:
        result = await self.db.execute(select(Provider).order_by(Provider.id))
        return list(result.scalars().all())

    async def save(self, provider: Provider) -> Provider:
        self.db.add(provider)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise
        await self.db.refresh(provider)
        return provider

    async def delete(self, provider: Provider) -> None:
        await self.db.delete(provider)
        await self.db.commit()
