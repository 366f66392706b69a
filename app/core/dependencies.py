from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.config import settings
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.repositories.provider_repository import ProviderRepository
from app.repositories.project_repository import ProjectRepository
from app.repositories.activity_repository import ActivityRepository
from app.repositories.quote_repository import QuoteRepository
from app.services.identity_service import IdentityService
from app.services.provider_service import ProviderService
from app.services.project_service import ProjectService
from app.services.quote_service import QuoteService


security = HTTPBearer()


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """Фабрика репозитория — инжектируется в эндпоинты через Depends."""
    return UserRepository(db)


def get_provider_repository(db: AsyncSession = Depends(get_db)) -> ProviderRepository:
    return ProviderRepository(db)


def get_project_repository(db: AsyncSession = Depends(get_db)) -> ProjectRepository:
    return ProjectRepository(db)


def get_activity_repository(db: AsyncSession = Depends(get_db)) -> ActivityRepository:
    return ActivityRepository(db)


def get_quote_repository(db: AsyncSession = Depends(get_db)) -> QuoteRepository:
    return QuoteRepository(db)


def get_identity_service(
        providers: ProviderRepository = Depends(get_provider_repository),
) -> IdentityService:
    return IdentityService(providers)


def get_provider_service(
        providers: ProviderRepository = Depends(get_provider_repository),
        activities: ActivityRepository = Depends(get_activity_repository),
) -> ProviderService:
    return ProviderService(providers, activities)


def get_project_service(
        projects: ProjectRepository = Depends(get_project_repository),
        activities: ActivityRepository = Depends(get_activity_repository),
        identity: IdentityService = Depends(get_identity_service),
) -> ProjectService:
    return ProjectService(projects, activities, identity)


def get_quote_service(
        quotes: QuoteRepository = Depends(get_quote_repository),
        projects: ProjectRepository = Depends(get_project_repository),
        identity: IdentityService = Depends(get_identity_service),
) -> QuoteService:
    return QuoteService(quotes, projects, identity)


async def get_current_user(
        credentials: HTTPAuthorizationCredentials = Depends(security),
        repo: UserRepository = Depends(get_user_repository),
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid access token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
        user_id: str = payload.get("sub")
        if user_id is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    user = await repo.get_by_id(int(user_id))
    if user is None:
        raise credentials_exception

    return user
