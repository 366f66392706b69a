import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status

from app.api.params import first_present, parse_ids
from app.core.alerts import entity_creation_alert, entity_update_alert, entity_deletion_alert
from app.core.dependencies import get_current_user, get_quote_service
from app.models.user import User
from app.schemas.quote import QuotePayload, QuoteRead
from app.services.quote_service import QuoteService, ENTITY_NAME

logger = logging.getLogger(__name__)

router = APIRouter(tags=["quotes"])


@router.post("/quotes", response_model=QuoteRead, status_code=201)
async def create_quote(
    payload: QuotePayload,
    response: Response,
    current_user: User = Depends(get_current_user),
    service: QuoteService = Depends(get_quote_service),
):
    logger.debug("REST request to save Quote : %s", payload)
    quote = await service.create_quote(current_user, payload)
    response.headers["Location"] = f"/api/quotes/{quote.id}"
    response.headers.update(entity_creation_alert(ENTITY_NAME, quote.id))
    return quote


@router.put("/quotes", response_model=QuoteRead)
async def update_quote(
    payload: QuotePayload,
    response: Response,
    current_user: User = Depends(get_current_user),
    service: QuoteService = Depends(get_quote_service),
):
    logger.debug("REST request to update Quote : %s", payload)
    if payload.id is None:
        response.status_code = status.HTTP_201_CREATED
        return await create_quote(payload, response, current_user, service)
    quote = await service.update_quote(current_user, payload)
    response.headers.update(entity_update_alert(ENTITY_NAME, quote.id))
    return quote


@router.get("/quotes", response_model=List[QuoteRead])
async def get_all_quotes(
    current_user: User = Depends(get_current_user),
    service: QuoteService = Depends(get_quote_service),
):
    logger.debug("REST request to get all Quotes")
    return await service.list_quotes()


@router.get("/quotes/{quote_id}", response_model=QuoteRead)
async def get_quote(
    quote_id: int,
    current_user: User = Depends(get_current_user),
    service: QuoteService = Depends(get_quote_service),
):
    logger.debug("REST request to get Quote : %s", quote_id)
    return await service.get_quote(quote_id)


@router.delete("/quotes/{quote_id}", status_code=status.HTTP_200_OK)
async def delete_quote(
    quote_id: int,
    response: Response,
    current_user: User = Depends(get_current_user),
    service: QuoteService = Depends(get_quote_service),
):
    logger.debug("REST request to delete Quote : %s", quote_id)
    await service.delete_quote(current_user, quote_id)
    response.headers.update(entity_deletion_alert(ENTITY_NAME, quote_id))


@router.post("/add-quote", response_model=QuoteRead, status_code=201)
async def upload_quote(
    response: Response,
    file: UploadFile = File(...),
    id_project_form: Optional[int] = Form(None, alias="idProject"),
    id_project_query: Optional[int] = Query(None, alias="idProject"),
    current_user: User = Depends(get_current_user),
    service: QuoteService = Depends(get_quote_service),
):
    """Upload a quote document for a project on behalf of the current provider."""
    id_project = first_present("idProject", id_project_form, id_project_query)
    quote = await service.submit_quote(current_user, file, id_project)
    response.headers["Location"] = f"/api/quotes/{quote.id}"
    response.headers.update(entity_creation_alert(ENTITY_NAME, quote.id))
    return quote


@router.post("/find-quote", response_model=List[QuoteRead])
async def find_quote(
    id_project_query: Optional[int] = Query(None, alias="idProject"),
    id_project_form: Optional[int] = Form(None, alias="idProject"),
    current_user: User = Depends(get_current_user),
    service: QuoteService = Depends(get_quote_service),
):
    """All quotes submitted for a project, whatever the provider."""
    id_project = first_present("idProject", id_project_query, id_project_form)
    return await service.find_quotes_for_project(id_project)


@router.post("/find-my-quote", response_model=List[QuoteRead])
async def find_quote_of_current_provider(
    id_projects: List[str] = Query([], alias="idProjects"),
    current_user: User = Depends(get_current_user),
    service: QuoteService = Depends(get_quote_service),
):
    """Quotes of the current provider for the given projects."""
    return await service.find_my_quotes(current_user, parse_ids(id_projects))
