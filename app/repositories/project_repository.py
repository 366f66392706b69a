from typing import Iterable, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.models.activity import Activity
from app.models.project import Project


class ProjectRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, project_id: int) -> Optional[Project]:
        result = await self.db.execute(select(Project).where(Project.id == project_id))
        return result.scalar_one_or_none()

    async def get_by_ids(self, project_ids: Iterable[int]) -> List[Project]:
        ids = set(project_ids)
        if not ids:
            return []
        result = await self.db.execute(select(Project).where(Project.id.in_(ids)))
        return list(result.scalars().all())

    async def list_all(self) -> List[Project]:
        result = await self.db.execute(select(Project).order_by(Project.id))
        return list(result.scalars().all())

    async def find_by_activity_ids(self, activity_ids: Iterable[int]) -> List[Project]:
        """Проекты, у которых хотя бы одна активность входит в activity_ids."""
        ids = set(activity_ids)
        if not ids:
            return []
        result = await self.db.execute(
            select(Project)
            .where(Project.activities.any(Activity.id.in_(ids)))
            .order_by(Project.id)
        )
        return list(result.scalars().all())
