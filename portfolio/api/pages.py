"""
공개 페이지 라우터

프로필이 없으면 ProfileMissingError(500). 목록이 비어 있는 것은 오류가 아니다.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from portfolio.api.deps import not_found, parse_required_form
from portfolio.core.context import AppContext, get_context, get_templates
from portfolio.core.database import get_db
from portfolio.core.templating import markdown_to_html, render
from portfolio.schemas.contact import ContactForm
from portfolio.schemas.email_settings import EmailSettingsData
from portfolio.services import (
    blog_service,
    catalog_service,
    message_service,
    profile_service,
    project_service,
    resume_service,
    settings_service,
    skill_service,
)
from portfolio.services.mail_service import dispatch_contact_notification
from portfolio.services.upload_service import read_form


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def index(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    """홈"""
    context = {
        "profile": await profile_service.get_profile(db),
        "skills": await skill_service.get_skills(db),
        "featured_projects": await project_service.get_featured_projects(db),
        "recent_blogs": await blog_service.get_recent_blogs(db),
        "experience": await resume_service.get_experience(db),
        "services": await catalog_service.get_services(db),
        "content": await settings_service.get_site_content(db),
        "page_title": "Home",
    }
    return render(templates, request, "index.html", context)


@router.get("/about")
async def about(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = {
        "profile": await profile_service.get_profile(db),
        "skills": await skill_service.get_skills(db),
        "experience": await resume_service.get_experience(db),
        "education": await resume_service.get_education(db),
        "content": await settings_service.get_site_content(db),
        "page_title": "About",
    }
    return render(templates, request, "about.html", context)


@router.get("/projects")
async def projects(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = {
        "profile": await profile_service.get_profile(db),
        "projects": await project_service.get_projects(db),
        "content": await settings_service.get_site_content(db),
        "page_title": "Projects",
    }
    return render(templates, request, "projects.html", context)


@router.get("/projects/{slug}")
async def project_detail(
    slug: str,
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    profile = await profile_service.get_profile(db)
    project = await project_service.get_project_by_slug(db, slug)
    if project is None:
        return not_found("Project not found")
    context = {
        "profile": profile,
        "project": project,
        "content_html": markdown_to_html(project.content),
        "content": await settings_service.get_site_content(db),
        "page_title": project.title,
    }
    return render(templates, request, "project_detail.html", context)


@router.get("/blogs")
async def blogs(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = {
        "profile": await profile_service.get_profile(db),
        "blogs": await blog_service.get_published_blogs(db),
        "content": await settings_service.get_site_content(db),
        "page_title": "Blog",
    }
    return render(templates, request, "blogs.html", context)


@router.get("/blogs/{slug}")
async def blog_detail(
    slug: str,
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    # 게시 여부는 보지 않는다 (slug를 아는 경우 미게시 글도 열람 가능)
    profile = await profile_service.get_profile(db)
    blog = await blog_service.get_blog_by_slug(db, slug)
    if blog is None:
        return not_found("Blog post not found")
    context = {
        "profile": profile,
        "blog": blog,
        "content_html": markdown_to_html(blog.content),
        "content": await settings_service.get_site_content(db),
        "page_title": blog.title,
    }
    return render(templates, request, "blog_detail.html", context)


@router.get("/contact")
async def contact_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = {
        "profile": await profile_service.get_profile(db),
        "content": await settings_service.get_site_content(db),
        "success": False,
        "page_title": "Contact",
    }
    return render(templates, request, "contact.html", context)


@router.post("/contact")
async def submit_contact(request: Request, ctx: AppContext = Depends(get_context)):
    """문의 저장 + (활성화 시) 백그라운드 알림 발송

    발송 결과는 응답에 반영되지 않는다.
    """
    form = parse_required_form(await read_form(request), ContactForm)

    async with ctx.store.session() as db:
        await message_service.add_message(db, form)
        email_settings = EmailSettingsData.model_validate(await settings_service.get_email_settings(db))
        profile = await profile_service.get_profile(db)
        content = await settings_service.get_site_content(db)
    logger.info("Contact message saved from %s", form.email)

    if email_settings.enabled:
        dispatch_contact_notification(
            email_settings,
            form.name,
            form.email,
            form.subject,
            form.message,
            timeout=ctx.settings.SMTP_TIMEOUT,
        )

    context = {
        "profile": profile,
        "content": content,
        "success": True,
        "page_title": "Contact",
    }
    return render(ctx.templates, request, "contact.html", context)
