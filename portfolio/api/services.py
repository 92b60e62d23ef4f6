"""
관리자 서비스(제공 항목) 라우터

쓰기 실패는 로그만 남기고 목록으로 리다이렉트한다.
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
from portfolio.schemas.service import ServiceForm
from portfolio.services import catalog_service
from portfolio.services.upload_service import decode_form, read_form


logger = logging.getLogger(__name__)

router = APIRouter()

LIST_URL = "/admin/services"


@router.get("/services")
async def services_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context["services"] = await catalog_service.get_services(db)
    return render(templates, request, "admin/services.html", context)


@router.get("/services/add")
async def add_service_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context.update({"service": None, "action": "/admin/services/add"})
    return render(templates, request, "admin/service_form.html", context)


@router.post("/services/add")
async def add_service(request: Request, store: Store = Depends(get_store)):
    parsed = await read_form(request)
    async with store.session() as db:
        try:
            form = await decode_form(db, parsed, ServiceForm)
            new_id = await catalog_service.add_service(db, form)
            logger.info("Service added: %s (id=%s)", form.name, new_id)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to add service")
    return redirect_to(LIST_URL)


@router.get("/services/edit/{service_id}")
async def edit_service_page(
    service_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    service = await catalog_service.get_service(db, service_id)
    if service is None:
        return not_found("Service not found")
    context = await admin_page_context(db, request)
    context.update({"service": service, "action": f"/admin/services/edit/{service_id}"})
    return render(templates, request, "admin/service_form.html", context)


@router.post("/services/edit/{service_id}")
async def update_service(service_id: int, request: Request, store: Store = Depends(get_store)):
    parsed = await read_form(request)
    async with store.session() as db:
        try:
            form = await decode_form(db, parsed, ServiceForm)
            await catalog_service.update_service(db, service_id, form)
            logger.info("Service updated: %s", service_id)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to update service %s", service_id)
    return redirect_to(LIST_URL)


@router.post("/services/delete/{service_id}")
async def delete_service(service_id: int, store: Store = Depends(get_store)):
    async with store.session() as db:
        try:
            await catalog_service.delete_service(db, service_id)
            logger.info("Service deleted: %s", service_id)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to delete service %s", service_id)
    return redirect_to(LIST_URL)
