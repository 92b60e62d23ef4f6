"""
관리자 프로젝트 라우터

쓰기 실패(중복 slug 등)는 로그만 남기고 목록으로 리다이렉트한다.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from portfolio.api.deps import admin_page_context, not_found, redirect_to
from portfolio.core.context import get_templates
from portfolio.core.database import Store, get_db, get_store
from portfolio.core.templating import render
from portfolio.schemas.project import ProjectForm
from portfolio.services import project_service
from portfolio.services.upload_service import decode_form, read_form


logger = logging.getLogger(__name__)

router = APIRouter()

LIST_URL = "/admin/projects"


@router.get("/projects")
async def projects_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context["projects"] = await project_service.get_projects(db)
    return render(templates, request, "admin/projects.html", context)


@router.get("/projects/add")
async def add_project_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context.update({"project": None, "action": "/admin/projects/add"})
    return render(templates, request, "admin/project_form.html", context)


@router.post("/projects/add")
async def add_project(request: Request, store: Store = Depends(get_store)):
    parsed = await read_form(request)
    async with store.session() as db:
        try:
            form = await decode_form(db, parsed, ProjectForm)
            project = await project_service.add_project(db, form)
            logger.info("Project added: %s", project.slug)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to add project")
    return redirect_to(LIST_URL)


@router.get("/projects/edit/{project_id}")
async def edit_project_page(
    project_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    project = await project_service.get_project_by_id(db, project_id)
    if project is None:
        return not_found("Project not found")
    context = await admin_page_context(db, request)
    context.update({"project": project, "action": f"/admin/projects/edit/{project_id}"})
    return render(templates, request, "admin/project_form.html", context)


@router.post("/projects/edit/{project_id}")
async def update_project(project_id: int, request: Request, store: Store = Depends(get_store)):
    parsed = await read_form(request)
    async with store.session() as db:
        try:
            form = await decode_form(db, parsed, ProjectForm)
            await project_service.update_project(db, project_id, form)
            logger.info("Project updated: %s", project_id)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to update project %s", project_id)
    return redirect_to(LIST_URL)


@router.post("/projects/delete/{project_id}")
async def delete_project(project_id: int, store: Store = Depends(get_store)):
    async with store.session() as db:
        try:
            await project_service.delete_project(db, project_id)
            logger.info("Project deleted: %s", project_id)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to delete project %s", project_id)
    return redirect_to(LIST_URL)
