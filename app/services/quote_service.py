import logging
from typing import List, Sequence

from fastapi import HTTPException, UploadFile, status

from app.core.alerts import failure_alert
from app.models.project import Project
from app.models.provider import Provider
from app.models.quote import Quote
from app.models.user import User
from app.repositories.project_repository import ProjectRepository
from app.repositories.quote_repository import QuoteRepository
from app.schemas.quote import QuotePayload
from app.services import storage_service
from app.services.identity_service import IdentityService

logger = logging.getLogger(__name__)

ENTITY_NAME = "quote"


class QuoteService:
    """
    Quotes submitted by providers against customer projects.

    The provider of a quote is always the one resolved from the current user,
    never taken from the request body.
    """

    def __init__(
        self,
        quotes: QuoteRepository,
        projects: ProjectRepository,
        identity: IdentityService,
    ):
        self.quotes = quotes
        self.projects = projects
        self.identity = identity

    async def _get_project(self, project_id: int) -> Project:
        project = await self.projects.get_by_id(project_id)
        if project is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
        return project

    async def _resolve_projects(self, project_ids: Sequence[int]) -> List[Project]:
        projects = await self.projects.get_by_ids(project_ids)
        missing = set(project_ids) - {p.id for p in projects}
        if missing:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Projects not found: {sorted(missing)}",
            )
        return projects

    async def find_quotes_for_project(self, project_id: int) -> List[Quote]:
        """Все предложения по проекту, от любых поставщиков."""
        project = await self._get_project(project_id)
        return await self.quotes.list_by_project(project.id)

    async def find_quotes_for_provider_across_projects(
        self,
        provider: Provider,
        project_ids: Sequence[int],
    ) -> List[Quote]:
        if not project_ids:
            return []
        projects = await self._resolve_projects(project_ids)
        return await self.quotes.list_by_projects_and_provider(
            [p.id for p in projects], provider.id
        )

    async def find_my_quotes(self, user: User, project_ids: Sequence[int]) -> List[Quote]:
        provider = await self.identity.require_current_provider(user)
        return await self.find_quotes_for_provider_across_projects(provider, project_ids)

    async def submit_quote(self, user: User, file: UploadFile, project_id: int) -> Quote:
        """
        Store an uploaded document and link a new quote to the current provider.

        If the quote row cannot be persisted, the stored file is removed again.
        """
        provider = await self.identity.require_current_provider(user)
        project = await self._get_project(project_id)

        stored = await storage_service.save_quote_file(file)
        quote = Quote(
            file=stored.relative_path,
            filename=stored.filename,
            content_type=stored.content_type,
            size=stored.size,
            project_id=project.id,
            provider_id=provider.id,
        )
        try:
            return await self.quotes.save(quote)
        except Exception:
            logger.exception("Failed to persist quote for %s, removing stored file", stored.relative_path)
            await storage_service.delete_file(stored.relative_path)
            raise

    async def create_quote(self, user: User, payload: QuotePayload) -> Quote:
        if payload.id is not None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="A new quote cannot already have an ID",
                headers=failure_alert(ENTITY_NAME, "idexists"),
            )
        provider = await self.identity.require_current_provider(user)
        project = await self._get_project(payload.project_id)

        quote = Quote(
            file=payload.file,
            filename=payload.filename,
            project_id=project.id,
            provider_id=provider.id,
        )
        return await self.quotes.save(quote)

    async def update_quote(self, user: User, payload: QuotePayload) -> Quote:
        if payload.id is None:
            return await self.create_quote(user, payload)

        quote = await self.get_quote(payload.id)
        await self._check_owner(user, quote)
        project = await self._get_project(payload.project_id)

        quote.file = payload.file
        quote.filename = payload.filename
        quote.project_id = project.id
        return await self.quotes.save(quote)

    async def list_quotes(self) -> List[Quote]:
        return await self.quotes.list_all()

    async def get_quote(self, quote_id: int) -> Quote:
        quote = await self.quotes.get_by_id(quote_id)
        if quote is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quote not found")
        return quote

    async def delete_quote(self, user: User, quote_id: int) -> None:
        # Файл на диске не удаляется
        quote = await self.get_quote(quote_id)
        await self._check_owner(user, quote)
        await self.quotes.delete(quote)

    async def _check_owner(self, user: User, quote: Quote) -> None:
        provider = await self.identity.require_current_provider(user)
        if quote.provider_id != provider.id:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
