from fastapi import APIRouter, Depends, File as FastAPIFile, HTTPException, UploadFile
from typing import List
import logging

from app.core.config import settings
from app.schemas.file import FileUploadResponse, UploadedImage
from app.services.auth import get_current_member_id
from app.services.media import get_image_dimensions
from app.services.s3 import delete_file_from_s3, upload_image_to_s3

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_FILE_COUNT = 10


@router.post("/upload", response_model=FileUploadResponse, summary="이미지 업로드")
async def upload_files(
    files: List[UploadFile] = FastAPIFile(...),
    current_member_id: int = Depends(get_current_member_id)
):
    """
    이미지 파일을 S3에 업로드하고 URL을 반환합니다.
    반환된 URL은 피드 작성 시 image_urls로 사용합니다.

    - 이미지가 아닌 파일이 포함되면 400 오류를 반환합니다.
    - 업로드 중 실패하면 이미 올라간 파일은 삭제됩니다.
    """
    if len(files) > MAX_FILE_COUNT:
        raise HTTPException(status_code=400, detail=f"한 번에 최대 {MAX_FILE_COUNT}개까지 업로드할 수 있습니다.")

    logger.info(f"파일 업로드 요청: member_id={current_member_id}, {len(files)}개 파일")

    file_metadata_list = []
    for file in files:
        width, height = await get_image_dimensions(file)
        if width is None or height is None:
            raise HTTPException(status_code=400, detail=f"이미지 파일만 업로드할 수 있습니다: {file.filename}")

        logger.info(f"- {file.filename}: {file.content_type}, {file.size} bytes, {width}x{height} pixels")
        file_metadata_list.append((file, width, height))

    uploaded_keys = []
    uploaded_files = []
    try:
        for file, width, height in file_metadata_list:
            s3_key = await upload_image_to_s3(file)
            uploaded_keys.append(s3_key)
            uploaded_files.append(UploadedImage(
                file_name=file.filename,
                url=settings.get_image_url(s3_key),
                content_type=file.content_type or "application/octet-stream",
                file_size=file.size or 0,
                width=width,
                height=height
            ))
    except Exception as e:
        logger.error(f"파일 업로드 중 오류 발생: {str(e)}")
        for s3_key in uploaded_keys:
            delete_file_from_s3(s3_key)
        raise HTTPException(status_code=500, detail=f"파일 업로드 중 오류가 발생했습니다: {str(e)}")

    logger.info(f"파일 업로드 완료: {len(uploaded_files)}개 파일")
    return FileUploadResponse(
        message=f"{len(uploaded_files)}개의 파일이 업로드되었습니다.",
        file_urls=[uploaded.url for uploaded in uploaded_files],
        uploaded_files=uploaded_files
    )
