"""
애플리케이션 설정
"""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path
from dotenv import load_dotenv


"""env 로딩 우선순위
1) OS 환경변수
2) 프로젝트 루트의 .env (repo/.env)
3) backend-api 디렉터리의 .env (repo/backend-api/.env)
"""

_DEFAULT_JWT_SECRET = "novelhub-dev-secret-change-this-in-production"

# .env 사전 로드 (OS 환경변수 우선, override=False)
_here = Path(__file__).resolve()
_repo_root_env = _here.parents[3] / ".env"  # repo/.env
_backend_env = _here.parents[2] / ".env"    # backend-api/.env
for _p in (_repo_root_env, _backend_env):
    if _p.exists():
        load_dotenv(dotenv_path=str(_p), override=False)


class Settings(BaseSettings):
    """애플리케이션 설정"""
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    DATABASE_URL: str = "sqlite+aiosqlite:///./data/novelhub.db"

    # 요청 컨텍스트 토큰 (JWT)
    JWT_SECRET_KEY: str = _DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # 관리자 전용 프로시저 보호 여부 (기본: 공개 API와 동일하게 동작)
    ADMIN_GUARD_ENABLED: bool = False

    SEARCH_DEFAULT_LIMIT: int = 20

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = 'ignore'

    @property
    def async_database_url(self) -> str:
        """드라이버가 명시되지 않은 URL을 비동기 드라이버 URL로 보정"""
        url = self.DATABASE_URL
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif url.startswith("sqlite://"):
            url = url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return url


settings = Settings()


def validate_settings():
    """설정 검증"""
    if settings.ENVIRONMENT == "production":
        if settings.JWT_SECRET_KEY == _DEFAULT_JWT_SECRET:
            raise ValueError("프로덕션 환경에서는 JWT_SECRET_KEY를 변경해야 합니다.")
    if settings.SEARCH_DEFAULT_LIMIT <= 0:
        raise ValueError("SEARCH_DEFAULT_LIMIT은 1 이상이어야 합니다.")
    return True


validate_settings()
