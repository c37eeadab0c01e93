from pydantic import BaseModel
from typing import List, Optional


class UploadedImage(BaseModel):
    file_name: str
    url: str
    content_type: str
    file_size: int
    width: Optional[int] = None
    height: Optional[int] = None


class FileUploadResponse(BaseModel):
    message: str
    file_urls: List[str]
    uploaded_files: List[UploadedImage]
