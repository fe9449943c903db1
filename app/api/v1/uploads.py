"""Authenticated file upload endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, File, UploadFile

from app.api.v1.deps import require_staff
from app.core.config import settings
from app.core.exceptions import UploadRejectedError
from app.core.logging import get_logger
from app.services.uploads import MAX_FILES_PER_REQUEST, save_upload

logger = get_logger("app.api.v1.uploads")

router = APIRouter(
    prefix="/uploads", tags=["uploads"], dependencies=[Depends(require_staff)]
)


@router.post("/single")
async def upload_single(file: UploadFile = File(...)) -> dict[str, Any]:
    """
    Store one image (JPEG, PNG, WebP up to 5 MB) or PDF (up to 20 MB).

    Returns the public URL of the stored file.
    """
    stored = await save_upload(file, settings.FILE_UPLOAD_DIR, settings.APP_URL)
    return stored.as_dict()


@router.post("/multiple")
async def upload_multiple(files: list[UploadFile] = File(...)) -> dict[str, Any]:
    """
    Store up to ten files.

    Files that fail validation are skipped; the response lists only the
    stored ones.
    """
    if len(files) > MAX_FILES_PER_REQUEST:
        raise UploadRejectedError(
            f"At most {MAX_FILES_PER_REQUEST} files can be uploaded at once"
        )

    results = []
    for file in files:
        try:
            stored = await save_upload(file, settings.FILE_UPLOAD_DIR, settings.APP_URL)
        except UploadRejectedError as e:
            logger.warning("upload_skipped", filename=file.filename, reason=e.message)
            continue
        results.append(stored.as_dict())
    return {"files": results}
