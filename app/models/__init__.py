from app.models.user import User
from app.models.activity import Activity, project_activity, provider_activity
from app.models.project import Project
from app.models.provider import Provider
from app.models.quote import Quote

__all__ = [
    "User",
    "Activity", "project_activity", "provider_activity",
    "Project",
    "Provider",
    "Quote",
]
