from typing import List

from fastapi import HTTPException, status

from app.models.activity import Activity
from app.models.project import Project
from app.models.user import User
from app.repositories.activity_repository import ActivityRepository
from app.repositories.project_repository import ProjectRepository
from app.services.identity_service import IdentityService


class ProjectService:
    def __init__(
        self,
        projects: ProjectRepository,
        activities: ActivityRepository,
        identity: IdentityService,
    ):
        self.projects = projects
        self.activities = activities
        self.identity = identity

    async def list_projects(self) -> List[Project]:
        return await self.projects.list_all()

    async def get_project(self, project_id: int) -> Project:
        project = await self.projects.get_by_id(project_id)
        if project is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
        return project

    async def list_activities(self) -> List[Activity]:
        return await self.activities.list_all()

    async def find_projects_by_activities(self, activity_ids: List[int]) -> List[Project]:
        if not activity_ids:
            return []
        return await self.projects.find_by_activity_ids(activity_ids)

    async def find_projects_for_provider(self, user: User) -> List[Project]:
        """Проекты, подходящие под активности, на которые зарегистрирован поставщик."""
        provider = await self.identity.require_current_provider(user)
        return await self.find_projects_by_activities(provider.activity_ids)
