import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import settings
from app.core.database import init_database
from app.core.db import AsyncSessionLocal
from app.core.test_data import create_test_data

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Mon appel d'offre - quotes marketplace")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        "Location",
        f"X-{settings.APP_NAME}-alert",
        f"X-{settings.APP_NAME}-error",
        f"X-{settings.APP_NAME}-params",
    ],
)

app.include_router(api_router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    await init_database()

    if settings.SEED_DATA:
        async with AsyncSessionLocal() as session:
            await create_test_data(session)

    logger.info("Приложение запущено!")


@app.get("/")
async def root():
    return {
        "app": "monappeloffre",
        "message": "Customers post projects, providers send quotes",
        "links": {
            "providers": "/api/providers",
            "projects": "/api/projects",
            "quotes": "/api/quotes",
            "docs": "/docs",
        }
    }
