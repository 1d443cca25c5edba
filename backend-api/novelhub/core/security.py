"""
보안 관련 유틸리티

- 패스워드 해싱 (passlib/bcrypt)
- 요청 컨텍스트: Authorization 헤더의 Bearer 토큰으로 요청자를 식별한다.
  관리자 여부는 토큰 클레임이 아니라 DB의 users.is_admin 값을 따른다.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from novelhub.core.config import settings
from novelhub.core.database import get_db
from novelhub.models.user import User


# 패스워드 해싱 컨텍스트
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# 토큰이 없어도 요청은 통과 (익명 컨텍스트)
security = HTTPBearer(auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """패스워드 검증"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """패스워드 해싱"""
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """액세스 토큰 생성"""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str, token_type: str = "access") -> Optional[dict]:
    """토큰 검증"""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        if payload.get("type") != token_type:
            return None
        return payload
    except JWTError:
        return None


@dataclass(frozen=True)
class RequestContext:
    """요청 단위로 전달되는 호출자 정보"""
    user: Optional[User] = None

    @property
    def is_admin(self) -> bool:
        return bool(self.user is not None and self.user.is_admin)


async def get_request_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> RequestContext:
    """
    요청 컨텍스트를 만든다.
    토큰이 없거나 유효하지 않으면 익명 컨텍스트를 반환한다.
    """
    if credentials is None:
        return RequestContext()

    payload = verify_token(credentials.credentials, "access")
    if payload is None or payload.get("sub") is None:
        return RequestContext()

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        return RequestContext()

    user = await db.get(User, user_id)
    return RequestContext(user=user)


async def require_admin(ctx: RequestContext = Depends(get_request_context)) -> RequestContext:
    """관리자 전용 프로시저 보호 (ADMIN_GUARD_ENABLED일 때만 강제)"""
    if settings.ADMIN_GUARD_ENABLED and not ctx.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="관리자만 사용할 수 있습니다.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return ctx
