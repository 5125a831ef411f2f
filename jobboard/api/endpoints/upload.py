"""
File upload endpoint.

Stores a single file through the configured storage backend and returns
the URL clients should use to fetch it.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status

from jobboard.core.config import settings
from jobboard.core.deps import get_current_user
from jobboard.core.storage import StorageError, storage
from jobboard.models.user import User

router = APIRouter(prefix="/upload", tags=["Upload"])
logger = logging.getLogger(__name__)


@router.post("")
async def upload_file(
    request: Request,
    file: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
):
    """
    Upload a file (resume, logo, profile picture).

    Returns:
        {"url": "<public URL of the stored file>"}
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    extension = file.filename.lower().rsplit(".", 1)[-1] if "." in file.filename else ""
    if extension not in settings.ALLOWED_UPLOAD_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File type not allowed. Allowed types: {', '.join(settings.ALLOWED_UPLOAD_EXTENSIONS)}"
        )

    contents = await file.read()
    if len(contents) > settings.MAX_UPLOAD_SIZE_BYTES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File too large. Maximum size: {settings.MAX_UPLOAD_SIZE_MB}MB"
        )
    await file.seek(0)

    try:
        key = storage.upload_file(file.file, file.filename)
    except StorageError as e:
        logger.error(f"Upload failed for user {current_user.id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to store file")

    url = storage.public_url(key, str(request.base_url))
    logger.info(f"User {current_user.id} uploaded {file.filename} as {key}")

    return {"url": url}
