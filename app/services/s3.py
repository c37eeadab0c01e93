import logging
import os
import uuid
from datetime import datetime

import boto3
from fastapi import UploadFile

from app.core.config import settings

logger = logging.getLogger(__name__)

## S3 클라이언트 설정
s3_client = boto3.client(
    's3',
    aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
    aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
    region_name=settings.AWS_REGION
)

IMAGE_PREFIX = "community/images"


def build_s3_key(filename: str) -> str:
    """
    업로드할 이미지의 S3 키를 만듭니다.

    Args:
        filename: 원본 파일명

    Returns:
        str: 예) "community/images/20231201_120000_1a2b3c4d.png"
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    file_extension = os.path.splitext(filename or "")[1].lower()
    return f"{IMAGE_PREFIX}/{timestamp}_{uuid.uuid4().hex[:8]}{file_extension}"


async def upload_image_to_s3(file: UploadFile) -> str:
    """
    이미지 파일을 S3에 업로드하고 s3_key를 반환합니다.
    """
    s3_key = build_s3_key(file.filename)
    file_content = await file.read()

    try:
        s3_client.put_object(
            Bucket=settings.AWS_BUCKET_NAME,
            Key=s3_key,
            Body=file_content,
            ContentType=file.content_type
        )
    except Exception as e:
        logger.error(f"파일 업로드 실패 ({file.filename}): {str(e)}")
        raise
    finally:
        await file.seek(0)

    logger.info(f"파일 업로드 성공: {s3_key}")
    return s3_key


def delete_file_from_s3(s3_key: str) -> bool:
    """
    S3에서 파일을 삭제합니다. 실패해도 예외를 던지지 않고 False를 반환합니다.
    """
    try:
        s3_client.delete_object(
            Bucket=settings.AWS_BUCKET_NAME,
            Key=s3_key
        )
        logger.info(f"S3 파일 삭제 성공: {s3_key}")
        return True
    except Exception as e:
        logger.error(f"S3 파일 삭제 실패 ({s3_key}): {str(e)}")
        return False
