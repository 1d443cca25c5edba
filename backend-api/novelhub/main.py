"""
NovelHub - FastAPI 메인 애플리케이션
관리자는 작가/장르/소설/회차를 등록하고, 독자는 검색/열람하며 읽기 진행도가 기록된다.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from novelhub import __version__
from novelhub.core.config import settings
from novelhub.core.database import init_db, test_db_connection, utcnow
from novelhub.core.exceptions import NovelHubError

# API 라우터 임포트
from novelhub.api.users import router as users_router
from novelhub.api.authors import router as authors_router
from novelhub.api.genres import router as genres_router
from novelhub.api.novels import router as novels_router
from novelhub.api.chapters import router as chapters_router
from novelhub.api.reading import router as reading_router
from novelhub.api.ad_placements import router as ad_placements_router

# 로깅 설정
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 시작/종료 시 실행되는 이벤트"""
    logger.info("🚀 NovelHub 시작")

    # 데이터베이스 테이블 생성 (개발용)
    if settings.ENVIRONMENT == "development":
        await init_db()

    yield

    logger.info("👋 NovelHub 종료")


# FastAPI 앱 생성
app = FastAPI(
    title="NovelHub API",
    description="웹소설 관리/열람 서비스 RPC API",
    version=__version__,
    docs_url="/docs" if settings.ENVIRONMENT == "development" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT == "development" else None,
    lifespan=lifespan
)

# CORS 미들웨어 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NovelHubError)
async def novelhub_error_handler(request: Request, exc: NovelHubError):
    """도메인 예외 → HTTP 응답 (404/409 등)"""
    logger.warning(f"{request.method} {request.url.path} 실패 ({exc.status_code}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# 라우터 등록 (프로시저 이름이 그대로 경로가 된다: /api/createNovel 등)
app.include_router(users_router, prefix="/api", tags=["👤 사용자"])
app.include_router(authors_router, prefix="/api", tags=["✍️ 작가"])
app.include_router(genres_router, prefix="/api", tags=["🏷️ 장르"])
app.include_router(novels_router, prefix="/api", tags=["📚 소설"])
app.include_router(chapters_router, prefix="/api", tags=["📄 회차"])
app.include_router(reading_router, prefix="/api", tags=["🔖 읽기 기록"])
app.include_router(ad_placements_router, prefix="/api", tags=["📢 광고 배치"])


@app.get("/api/healthcheck")
async def healthcheck():
    return {"status": "ok", "timestamp": utcnow().isoformat()}


@app.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "message": "NovelHub API",
        "version": __version__,
        "docs": "/docs",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """헬스 체크 엔드포인트 (DB 연결 포함)"""
    db_ok = await test_db_connection()
    return {
        "status": "healthy" if db_ok else "degraded",
        "environment": settings.ENVIRONMENT,
        "database": "connected" if db_ok else "unavailable",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "novelhub.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True if settings.ENVIRONMENT == "development" else False
    )
