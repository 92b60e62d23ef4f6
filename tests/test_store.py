import pytest
from sqlalchemy import update

from portfolio.core.database import Store
from portfolio.models import Admin, Profile, Project, Service, SiteContentItem, Skill
from portfolio.schemas.blog import BlogForm
from portfolio.schemas.project import ProjectForm
from portfolio.services.common import count_rows
from portfolio.services.defaults import SITE_CONTENT_DEFAULTS
from portfolio.services.admin_service import authenticate_admin, get_admin
from portfolio.services.blog_service import add_blog, get_blog_by_id
from portfolio.services.project_service import add_project, get_project_by_id
from portfolio.services.settings_service import (
    get_email_settings,
    get_site_content,
    get_site_content_by_section,
    update_site_content_batch,
)


@pytest.fixture
async def store(tmp_path):
    store = Store(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    await store.initialize("admin", "admin123")
    yield store
    await store.dispose()


async def test_first_boot_seeds_sample_data(store):
    async with store.session() as db:
        assert await count_rows(db, Profile) == 1
        assert await count_rows(db, Skill) == 12
        assert await count_rows(db, Project) == 2
        assert await count_rows(db, Service) == 3
        content = await get_site_content(db)
    assert len(content) == len(SITE_CONTENT_DEFAULTS)
    assert content["hero_greeting"] == "Hello!"


async def test_bootstrap_admin_must_change_password(store):
    async with store.session() as db:
        admin = await get_admin(db, "admin")
        assert admin is not None
        assert admin.must_change_password is True
        assert admin.password_hash != "admin123"
        assert await authenticate_admin(db, "admin", "admin123") is not None
        assert await authenticate_admin(db, "admin", "wrong") is None


async def test_initialize_is_idempotent(store):
    await store.initialize("admin", "admin123")
    async with store.session() as db:
        assert await count_rows(db, Skill) == 12
        assert await count_rows(db, Admin) == 1
        assert await count_rows(db, SiteContentItem) == len(SITE_CONTENT_DEFAULTS)


async def test_reseed_keeps_edited_site_content(store):
    async with store.session() as db:
        await update_site_content_batch(db, {"hero_greeting": "Howdy"})
    await store.initialize("admin", "admin123")
    async with store.session() as db:
        assert (await get_site_content(db))["hero_greeting"] == "Howdy"


async def test_reseed_skips_populated_tables(store):
    async with store.session() as db:
        await db.execute(update(Skill).values(name="Renamed"))
        await db.commit()
    await store.initialize("someone-else", "other-password")
    async with store.session() as db:
        assert await count_rows(db, Skill) == 12
        assert await get_admin(db, "someone-else") is None


async def test_batch_update_never_creates_keys(store):
    async with store.session() as db:
        updated = await update_site_content_batch(db, {"hero_greeting": "Hi", "no_such_key": "x"})
        assert updated == 1
        assert "no_such_key" not in await get_site_content(db)


async def test_site_content_grouped_by_section(store):
    async with store.session() as db:
        sections = await get_site_content_by_section(db)
    assert "hero" in sections
    keys = [item.key for item in sections["nav"]]
    assert keys == sorted(keys)


async def test_email_settings_default_row(store):
    async with store.session() as db:
        settings = await get_email_settings(db)
    assert settings.smtp_server == "smtp.gmail.com"
    assert settings.smtp_port == 587
    assert settings.enabled is False


async def test_added_project_reads_back_with_submitted_fields(store):
    form = ProjectForm.from_fields(
        {
            "title": "Round Trip Project",
            "description": "short blurb",
            "content": "# Heading\n\nbody",
            "image_url": "/images/abc",
            "demo_url": "https://demo.example.com",
            "github_url": "https://github.com/example/rt",
            "technologies": "Python, FastAPI",
            "featured": "on",
        }
    )
    async with store.session() as db:
        project_id = (await add_project(db, form)).id

    async with store.session() as db:
        project = await get_project_by_id(db, project_id)
    assert project is not None
    for field, value in form.model_dump().items():
        assert getattr(project, field) == value, field
    assert project.featured is True
    assert project.slug == "round-trip-project"
    assert project.created_at is not None


async def test_added_blog_reads_back_with_submitted_fields(store):
    form = BlogForm.from_fields(
        {
            "title": "Round Trip Post",
            "excerpt": "teaser",
            "content": "Some **markdown**",
            "image_url": "/images/def",
            "tags": "python,web",
            "published": "true",
        }
    )
    async with store.session() as db:
        blog_id = (await add_blog(db, form)).id

    async with store.session() as db:
        blog = await get_blog_by_id(db, blog_id)
    assert blog is not None
    for field, value in form.model_dump().items():
        assert getattr(blog, field) == value, field
    assert blog.published is True
    assert blog.slug == "round-trip-post"
    assert blog.created_at is not None
    assert blog.updated_at is not None


async def test_unchecked_boxes_read_back_as_false(store):
    async with store.session() as db:
        project_id = (await add_project(db, ProjectForm.from_fields({"title": "Plain", "description": "d"}))).id
        blog_id = (await add_blog(db, BlogForm.from_fields({"title": "Draft", "excerpt": "e", "content": "c"}))).id

    async with store.session() as db:
        assert (await get_project_by_id(db, project_id)).featured is False
        assert (await get_blog_by_id(db, blog_id)).published is False
