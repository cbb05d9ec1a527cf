# safepin/api/v1/endpoints/upload.py
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile, status

from safepin.core.exceptions import ValidationError
from safepin.core.security import get_current_caller
from safepin.schemas.media import UploadPublic
from safepin.services import media_service
from safepin.services.storage_client import StorageClient, get_storage_client

router = APIRouter(tags=["upload"])


@router.post("/upload", response_model=UploadPublic, status_code=status.HTTP_201_CREATED)
def upload_file(
    file: Optional[UploadFile] = File(None),
    caller=Depends(get_current_caller),
    storage: StorageClient = Depends(get_storage_client),
):
    """
    Pin photos and solution images/drawings. Returns the public URL to put
    in ``image_url`` or a solution's ``content``.
    """
    if file is None:
        raise ValidationError("No file was uploaded")

    # one byte past the cap is enough to detect an oversized file
    data = file.file.read(media_service.max_upload_bytes() + 1)
    url = media_service.upload_media(
        storage,
        filename=file.filename,
        content_type=file.content_type,
        data=data,
    )
    return UploadPublic(url=url)
