import logging
from datetime import datetime, UTC, timedelta
from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config import settings
from utils.errors import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)

# Bearer 토큰 인증 스키마 (헤더 누락도 401 로 직접 처리)
security = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """data 예시: {"sub": "admin", "is_admin": True}"""
    to_encode = data.copy()
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict:
    """token decoding"""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("token is expired")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("invalid token")


def get_current_user(
        credentials: HTTPAuthorizationCredentials | None = Depends(security)
) -> dict:
    """로그인 확인 후 토큰 payload 반환"""
    if credentials is None:
        raise UnauthorizedError("Not authenticated")

    payload = decode_access_token(credentials.credentials)
    if not payload.get("sub"):
        raise UnauthorizedError("invalid token")
    return payload


def require_admin(user: dict = Depends(get_current_user)) -> dict:
    """관리자 권한 확인 (아니면 403)"""
    if not user.get("is_admin"):
        logger.warning("Admin access denied: %s", user.get("sub"))
        raise ForbiddenError("Admin only")
    return user


AdminUser = Annotated[dict, Depends(require_admin)]
