import io
import logging
from typing import Optional, Tuple

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

# EXIF Orientation 값 중 90도/270도 회전에 해당하는 값
ROTATED_ORIENTATIONS = (5, 6, 7, 8)


async def get_image_dimensions(file: UploadFile) -> Tuple[Optional[int], Optional[int]]:
    """
    이미지 파일의 크기 정보를 반환합니다. (EXIF rotation 정보 고려)
    이미지로 읽을 수 없는 파일이면 (None, None)을 반환합니다.
    """
    try:
        contents = await file.read()
        image = Image.open(io.BytesIO(contents))
        width, height = image.size

        orientation = image.getexif().get(274, 1)  # 274는 Orientation 태그
        if orientation in ROTATED_ORIENTATIONS:
            logger.info(f"이미지 EXIF Orientation: {orientation}, width/height 교환")
            width, height = height, width

        return width, height
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"이미지 크기 확인 중 오류 발생: {str(e)}")
        return None, None
    finally:
        # 파일 포인터를 처음 위치로 되돌림
        await file.seek(0)
