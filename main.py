from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api import admin, auth, feed, file, follow, notification, post, profile
from app.core.config import settings
from app.models import registry  # noqa: F401
import logging
from contextlib import asynccontextmanager

# 로깅 설정
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# 데이터베이스 연결 정보 출력 함수
def log_database_info():
    try:
        from app.db.base import get_db
        from sqlalchemy import text

        logger.info("=" * 60)
        logger.info(f"{settings.PROJECT_NAME} 서버 시작 (v{settings.VERSION})")
        logger.info("=" * 60)

        db = next(get_db())
        try:
            db.execute(text("SELECT 1"))
            logger.info(f"데이터베이스 연결 확인: {db.get_bind().url.render_as_string(hide_password=True)}")
        finally:
            db.close()
    except Exception as e:
        logger.error(f"데이터베이스 연결 확인 중 오류 발생: {e}")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # 서버 시작 시 실행
    log_database_info()
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="기수제 커뮤니티 API 서비스",
    version=settings.VERSION,
    lifespan=lifespan
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 라우터 등록
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(feed.router, prefix="/api/feeds", tags=["feeds"])
app.include_router(post.router, prefix="/api/posts", tags=["posts"])
app.include_router(profile.router, prefix="/api/profile", tags=["profile"])
app.include_router(follow.router, prefix="/api/follows", tags=["follows"])
app.include_router(notification.router, prefix="/api/notifications", tags=["notifications"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
app.include_router(file.router, prefix="/api/files", tags=["files"])

@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
