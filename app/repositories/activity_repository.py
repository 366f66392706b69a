from typing import Iterable, List

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.activity import Activity


class ActivityRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> List[Activity]:
        result = await self.db.execute(select(Activity).order_by(Activity.name))
        return list(result.scalars().all())

    async def get_by_ids(self, activity_ids: Iterable[int]) -> List[Activity]:
        ids = set(activity_ids)
        if not ids:
            return []
        result = await self.db.execute(select(Activity).where(Activity.id.in_(ids)))
        return list(result.scalars().all())
