# safepin/schemas/media.py
from pydantic import BaseModel


class UploadPublic(BaseModel):
    url: str
