from typing import List

from fastapi import APIRouter, Depends, Query

from app.api.params import parse_ids
from app.core.dependencies import get_current_user, get_project_service
from app.models.user import User
from app.schemas.project import ActivityRead, ProjectRead
from app.services.project_service import ProjectService

router = APIRouter(tags=["projects"])


@router.get("/projects", response_model=List[ProjectRead])
async def get_all_projects(
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    return await service.list_projects()


@router.get("/projects/{project_id}", response_model=ProjectRead)
async def get_project(
    project_id: int,
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    return await service.get_project(project_id)


@router.get("/activities", response_model=List[ActivityRead])
async def get_all_activities(
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    return await service.list_activities()


@router.post("/find-project", response_model=List[ProjectRead])
async def find_projects_by_activities(
    id_activities: List[str] = Query([], alias="idActivities"),
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    """Проекты, относящиеся хотя бы к одной из указанных активностей."""
    return await service.find_projects_by_activities(parse_ids(id_activities))


@router.post("/find-my-project", response_model=List[ProjectRead])
async def find_projects_for_current_provider(
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    return await service.find_projects_for_provider(current_user)
