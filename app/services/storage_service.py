import logging
import re
import uuid
from pathlib import Path

from fastapi import UploadFile, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from app.core.config import settings

logger = logging.getLogger(__name__)

_EXTENSION_RE = re.compile(r"^[A-Za-z0-9]{1,10}$")


class StoredFile:
    def __init__(self, relative_path: str, filename: str, content_type: str, size: int):
        self.relative_path = relative_path
        self.filename = filename
        self.content_type = content_type
        self.size = size


def upload_root() -> Path:
    return Path(settings.UPLOAD_ROOT)


def validate_file(file: UploadFile, content: bytes) -> None:
    allowed = settings.QUOTE_ALLOWED_CONTENT_TYPES
    if allowed and file.content_type not in allowed:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"File type '{file.content_type}' is not allowed. Allowed: {', '.join(allowed)}.",
        )
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Uploaded file is empty.")
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File size exceeds {settings.MAX_UPLOAD_SIZE // (1024 * 1024)} MB limit.",
        )


def make_storage_key(filename: str) -> str:
    """Имя файла на диске: сгенерированный идентификатор + расширение из исходного имени."""
    ext = filename.rsplit(".", 1)[-1] if "." in filename else ""
    if not _EXTENSION_RE.match(ext):
        ext = "bin"
    return f"{uuid.uuid4().hex}.{ext.lower()}"


def _write_bytes(destination: Path, content: bytes) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(content)


async def save_quote_file(file: UploadFile) -> StoredFile:
    """
    Save an uploaded quote document under UPLOAD_ROOT/QUOTE_UPLOAD_DIR.

    The original filename is never used as a path component. I/O errors are
    logged and reported as 500.
    """
    content = await file.read()
    validate_file(file, content)

    original_name = Path(file.filename or "file").name
    relative_path = f"{settings.QUOTE_UPLOAD_DIR.strip('/')}/{make_storage_key(original_name)}"
    destination = upload_root() / relative_path
    logger.info("Dir to save: %s", destination)

    try:
        await run_in_threadpool(_write_bytes, destination, content)
    except OSError:
        logger.exception("Failed to upload %s", original_name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to store uploaded file",
        )

    return StoredFile(relative_path, original_name, file.content_type, len(content))


async def delete_file(relative_path: str) -> None:
    """Удалить файл из UPLOAD_ROOT; отсутствие файла не считается ошибкой."""
    path = upload_root() / relative_path
    try:
        await run_in_threadpool(path.unlink, True)
    except OSError:
        logger.exception("Failed to delete stored file %s", path)
