"""
포트폴리오 사이트 - FastAPI 메인 애플리케이션
공개 페이지 + 세션 기반 단일 관리자 콘솔
"""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging
import secrets
import uvicorn

from portfolio.core.config import Settings, settings, validate_settings
from portfolio.core.context import AppContext
from portfolio.core.database import Store
from portfolio.core.security import AdminGateMiddleware
from portfolio.core.templating import create_templates

from portfolio.api.pages import router as pages_router
from portfolio.api.files import router as files_router
from portfolio.api.auth import router as auth_router
from portfolio.api.dashboard import router as dashboard_router
from portfolio.api.profile import router as profile_router
from portfolio.api.skills import router as skills_router
from portfolio.api.projects import router as projects_router
from portfolio.api.blogs import router as blogs_router
from portfolio.api.services import router as services_router
from portfolio.api.education import router as education_router
from portfolio.api.messages import router as messages_router
from portfolio.api.email_settings import router as email_settings_router
from portfolio.api.site_content import router as site_content_router
from portfolio.api.uploads import router as uploads_router

# 로깅 설정
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """앱 팩토리: 저장소/템플릿/미들웨어/라우터 구성"""
    app_settings = app_settings or settings
    validate_settings(app_settings)

    store = Store(app_settings.database_url, echo=app_settings.DEBUG)
    templates = create_templates(app_settings.TEMPLATES_DIR)
    ctx = AppContext(settings=app_settings, store=store, templates=templates)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """시작 시 스키마 생성 + 시드, 종료 시 엔진 정리"""
        logger.info("🚀 Portfolio server starting (%s)", app_settings.ENVIRONMENT)
        await store.initialize(app_settings.DEFAULT_ADMIN_USERNAME, app_settings.DEFAULT_ADMIN_PASSWORD)
        yield
        await store.dispose()
        logger.info("👋 Portfolio server stopped")

    app = FastAPI(
        title="Portfolio",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.ctx = ctx

    # 게이트는 세션 미들웨어 안쪽에 있어야 한다 (나중에 추가한 쪽이 바깥)
    app.add_middleware(AdminGateMiddleware)
    secret_key = app_settings.SESSION_SECRET_KEY or secrets.token_urlsafe(32)
    if not app_settings.SESSION_SECRET_KEY:
        logger.info("SESSION_SECRET_KEY not set; sessions will not survive a restart")
    app.add_middleware(
        SessionMiddleware,
        secret_key=secret_key,
        session_cookie=app_settings.SESSION_COOKIE,
        max_age=app_settings.SESSION_MAX_AGE,
        same_site="lax",
        https_only=app_settings.ENVIRONMENT == "production",
    )

    app.mount("/static", StaticFiles(directory=app_settings.STATIC_DIR), name="static")

    # 공개
    app.include_router(pages_router, tags=["pages"])
    app.include_router(files_router, tags=["files"])
    # 관리자
    app.include_router(auth_router, tags=["auth"])
    app.include_router(dashboard_router, prefix="/admin", tags=["admin"])
    app.include_router(profile_router, prefix="/admin", tags=["admin"])
    app.include_router(skills_router, prefix="/admin", tags=["admin"])
    app.include_router(projects_router, prefix="/admin", tags=["admin"])
    app.include_router(blogs_router, prefix="/admin", tags=["admin"])
    app.include_router(services_router, prefix="/admin", tags=["admin"])
    app.include_router(education_router, prefix="/admin", tags=["admin"])
    app.include_router(messages_router, prefix="/admin", tags=["admin"])
    app.include_router(email_settings_router, prefix="/admin", tags=["admin"])
    app.include_router(site_content_router, prefix="/admin", tags=["admin"])
    app.include_router(uploads_router, prefix="/admin", tags=["admin"])

    return app


app = create_app()


def run() -> None:
    """콘솔 스크립트 진입점"""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
