"""
관리자 학력 라우터
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
from portfolio.schemas.education import EducationForm
from portfolio.services import resume_service
from portfolio.services.upload_service import decode_form, read_form


logger = logging.getLogger(__name__)

router = APIRouter()

LIST_URL = "/admin/education"


@router.get("/education")
async def education_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context["education_list"] = await resume_service.get_education(db)
    return render(templates, request, "admin/education.html", context)


@router.get("/education/add")
async def add_education_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context.update({"education": None, "action": "/admin/education/add"})
    return render(templates, request, "admin/education_form.html", context)


@router.post("/education/add")
async def add_education(request: Request, store: Store = Depends(get_store)):
    parsed = await read_form(request)
    async with store.session() as db:
        try:
            form = await decode_form(db, parsed, EducationForm)
            await resume_service.add_education(db, form)
            logger.info("Education added: %s", form.institution)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to add education")
    return redirect_to(LIST_URL)


@router.get("/education/edit/{education_id}")
async def edit_education_page(
    education_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    education = await resume_service.get_education_by_id(db, education_id)
    if education is None:
        return not_found("Education not found")
    context = await admin_page_context(db, request)
    context.update({"education": education, "action": f"/admin/education/edit/{education_id}"})
    return render(templates, request, "admin/education_form.html", context)


@router.post("/education/edit/{education_id}")
async def update_education(education_id: int, request: Request, store: Store = Depends(get_store)):
    parsed = await read_form(request)
    async with store.session() as db:
        try:
            form = await decode_form(db, parsed, EducationForm)
            await resume_service.update_education(db, education_id, form)
            logger.info("Education updated: %s", education_id)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to update education %s", education_id)
    return redirect_to(LIST_URL)


@router.post("/education/delete/{education_id}")
async def delete_education(education_id: int, store: Store = Depends(get_store)):
    async with store.session() as db:
        try:
            await resume_service.delete_education(db, education_id)
            logger.info("Education deleted: %s", education_id)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to delete education %s", education_id)
    return redirect_to(LIST_URL)
