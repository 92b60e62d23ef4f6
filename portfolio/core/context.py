"""
애플리케이션 컨텍스트 (시작 시 한 번 생성, app.state.ctx 로 공유)
"""

from dataclasses import dataclass
from fastapi import Request
from fastapi.templating import Jinja2Templates

from portfolio.core.config import Settings
from portfolio.core.database import Store


@dataclass
class AppContext:
    settings: Settings
    store: Store
    templates: Jinja2Templates


def get_context(request: Request) -> AppContext:
    return request.app.state.ctx


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.ctx.templates
