"""
관리자 블로그 라우터 (목록에는 미게시 글 포함)
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
from portfolio.schemas.blog import BlogForm
from portfolio.services import blog_service
from portfolio.services.upload_service import decode_form, read_form


logger = logging.getLogger(__name__)

router = APIRouter()

LIST_URL = "/admin/blogs"


@router.get("/blogs")
async def blogs_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context["blogs"] = await blog_service.get_blogs(db)
    return render(templates, request, "admin/blogs.html", context)


@router.get("/blogs/add")
async def add_blog_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context.update({"blog": None, "action": "/admin/blogs/add"})
    return render(templates, request, "admin/blog_form.html", context)


@router.post("/blogs/add")
async def add_blog(request: Request, store: Store = Depends(get_store)):
    parsed = await read_form(request)
    async with store.session() as db:
        try:
            form = await decode_form(db, parsed, BlogForm)
            blog = await blog_service.add_blog(db, form)
            logger.info("Blog added: %s", blog.slug)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to add blog")
    return redirect_to(LIST_URL)


@router.get("/blogs/edit/{blog_id}")
async def edit_blog_page(
    blog_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    blog = await blog_service.get_blog_by_id(db, blog_id)
    if blog is None:
        return not_found("Blog post not found")
    context = await admin_page_context(db, request)
    context.update({"blog": blog, "action": f"/admin/blogs/edit/{blog_id}"})
    return render(templates, request, "admin/blog_form.html", context)


@router.post("/blogs/edit/{blog_id}")
async def update_blog(blog_id: int, request: Request, store: Store = Depends(get_store)):
    parsed = await read_form(request)
    async with store.session() as db:
        try:
            form = await decode_form(db, parsed, BlogForm)
            await blog_service.update_blog(db, blog_id, form)
            logger.info("Blog updated: %s", blog_id)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to update blog %s", blog_id)
    return redirect_to(LIST_URL)


@router.post("/blogs/delete/{blog_id}")
async def delete_blog(blog_id: int, store: Store = Depends(get_store)):
    async with store.session() as db:
        try:
            await blog_service.delete_blog(db, blog_id)
            logger.info("Blog deleted: %s", blog_id)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to delete blog %s", blog_id)
    return redirect_to(LIST_URL)
