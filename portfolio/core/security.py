"""
보안 관련 유틸리티

- 패스워드 해싱 (passlib, pbkdf2_sha256: salt + 반복 횟수 기반)
- 세션 쿠키 기반 단일 관리자 인증
- /admin 경로 공통 게이트 (핸들러 이전에 일괄 적용)
"""

from typing import Optional
from passlib.context import CryptContext
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware
import logging


logger = logging.getLogger(__name__)

# 패스워드 해싱 컨텍스트 (bcrypt 백엔드 버전 이슈를 피하기 위해 pbkdf2_sha256)
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

SESSION_ADMIN_KEY = "admin"
LOGIN_PATH = "/admin/login"
LOGOUT_PATH = "/admin/logout"
ADMIN_PREFIX = "/admin"

# 게이트 예외 경로
OPEN_ADMIN_PATHS = frozenset({LOGIN_PATH, LOGOUT_PATH})
# 리다이렉트 대신 JSON 401을 돌려주는 경로 (AJAX)
JSON_ADMIN_PATHS = frozenset({"/admin/upload-image"})


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """패스워드 검증 (해시 형식이 깨져 있으면 False)"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """패스워드 해싱"""
    return pwd_context.hash(password)


def is_admin_path(path: str) -> bool:
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + "/")


def get_session_admin(request: Request) -> Optional[str]:
    """세션에 기록된 관리자 이름 (없으면 None)"""
    value = request.session.get(SESSION_ADMIN_KEY)
    return value if isinstance(value, str) and value else None


def is_authenticated(request: Request) -> bool:
    return get_session_admin(request) is not None


def login_session(request: Request, username: str) -> None:
    request.session[SESSION_ADMIN_KEY] = username


def logout_session(request: Request) -> None:
    """세션 데이터 전체 삭제"""
    request.session.clear()


def get_current_admin(request: Request) -> str:
    """현재 관리자 이름 의존성 (게이트 통과 이후에만 호출됨)"""
    username = get_session_admin(request)
    if username is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return username


class AdminGateMiddleware(BaseHTTPMiddleware):
    """/admin 하위 모든 경로에 대한 인증 게이트

    SessionMiddleware 안쪽에 위치해야 request.session 을 읽을 수 있다.
    """

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if is_admin_path(path) and path not in OPEN_ADMIN_PATHS and not is_authenticated(request):
            if path in JSON_ADMIN_PATHS:
                return JSONResponse({"error": "Unauthorized"}, status_code=status.HTTP_401_UNAUTHORIZED)
            logger.debug("[gate] anonymous request to %s redirected to login", path)
            return RedirectResponse(LOGIN_PATH, status_code=status.HTTP_302_FOUND)
        return await call_next(request)
