"""
템플릿 / 마크다운 렌더링
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Optional
from fastapi import Request
from fastapi.templating import Jinja2Templates
import markdown


MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]


def markdown_to_html(text: Optional[str]) -> str:
    """프로젝트/블로그 본문(markdown) → HTML"""
    return markdown.markdown(text or "", extensions=MARKDOWN_EXTENSIONS, output_format="html")


def format_date(value: Any, fmt: str = "%B %d, %Y") -> str:
    if isinstance(value, datetime):
        return value.strftime(fmt)
    return str(value or "")


def create_templates(directory: str) -> Jinja2Templates:
    """템플릿 세트 로드. 디렉터리가 없거나 비어 있으면 시작 실패."""
    path = Path(directory)
    if not path.is_dir():
        raise RuntimeError(f"Template directory not found: {directory}")
    templates = Jinja2Templates(directory=str(path))
    if not templates.env.list_templates():
        raise RuntimeError(f"No templates found in {directory}")
    templates.env.filters["datefmt"] = format_date
    return templates


def render(templates: Jinja2Templates, request: Request, name: str, context: dict, status_code: int = 200):
    return templates.TemplateResponse(request, name, context, status_code=status_code)
