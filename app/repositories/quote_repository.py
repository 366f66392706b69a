from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.quote import Quote


class QuoteRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, quote_id: int) -> Optional[Quote]:
        result = await self.db.execute(select(Quote).where(Quote.id == quote_id))
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Quote]:
        result = await self.db.execute(select(Quote).order_by(Quote.id))
        return list(result.scalars().all())

    async def list_by_project(self, project_id: int) -> List[Quote]:
        result = await self.db.execute(
            select(Quote).where(Quote.project_id == project_id).order_by(Quote.id)
        )
        return list(result.scalars().all())

    async def list_by_projects_and_provider(
        self,
        project_ids: Iterable[int],
        provider_id: int,
    ) -> List[Quote]:
        ids = set(project_ids)
        if not ids:
            return []
        result = await self.db.execute(
            select(Quote)
            .where(Quote.project_id.in_(ids), Quote.provider_id == provider_id)
            .order_by(Quote.id)
        )
        return list(result.scalars().all())

    async def save(self, quote: Quote) -> Quote:
        self.db.add(quote)
        await self.db.commit()
        await self.db.refresh(quote)
        return quote

    async def delete(self, quote: Quote) -> None:
        await self.db.delete(quote)
        await self.db.commit()
