from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql://monappeloffre:monappeloffre@db:5432/monappeloffre"
    SQL_ECHO: bool = False
    # При продакшн/обычной разработке лучше не пересоздавать БД на каждом старте
    RESET_DATABASE: bool = False
    SEED_DATA: bool = True

    SECRET_KEY: str = "SECRET_KEY_FOR_MONAPPELOFFRE"
    REFRESH_SECRET_KEY: str = "SECRET_KEY_FOR_MONAPPELOFFRE_refresh"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    # Файлы devis хранятся относительно рабочей директории
    UPLOAD_ROOT: str = "."
    QUOTE_UPLOAD_DIR: str = "content/devis"
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10 MB
    # Пустой список снимает ограничение по типу
    QUOTE_ALLOWED_CONTENT_TYPES: List[str] = [
        "application/pdf",
        "image/jpeg",
        "image/png",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.oasis.opendocument.text",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/vnd.oasis.opendocument.spreadsheet",
        "application/octet-stream",
    ]

    APP_NAME: str = "monappeloffreApp"
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8080",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

settings = Settings()
