"""
최초 부팅 시드

- 사이트 문구: key 단위로 없을 때만 삽입 (기존 값은 덮어쓰지 않음)
- 그 외 테이블: 비어 있을 때만 샘플 데이터 삽입
- 여러 번 실행해도 결과가 같다.
"""

from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from portfolio.core.security import get_password_hash
from portfolio.models import (
    Admin,
    Blog,
    Education,
    EmailSettings,
    EMAIL_SETTINGS_ID,
    Experience,
    Profile,
    PROFILE_ID,
    Project,
    Service,
    SiteContentItem,
    Skill,
)
from portfolio.services.common import count_rows, utcnow
from portfolio.services.defaults import (
    DEFAULT_BLOGS,
    DEFAULT_EDUCATION,
    DEFAULT_EXPERIENCE,
    DEFAULT_PROFILE,
    DEFAULT_PROJECTS,
    DEFAULT_SERVICES,
    DEFAULT_SKILLS,
    SITE_CONTENT_DEFAULTS,
)
from portfolio.services.settings_service import DEFAULT_EMAIL_SETTINGS


logger = logging.getLogger(__name__)


async def _seed_site_content(db: AsyncSession) -> None:
    for key, value, section, description in SITE_CONTENT_DEFAULTS:
        await db.execute(
            sqlite_insert(SiteContentItem)
            .values(key=key, value=value, section=section, description=description)
            .on_conflict_do_nothing(index_elements=[SiteContentItem.key])
        )


async def seed_defaults(db: AsyncSession, admin_username: str, admin_password: str) -> None:
    """기본 데이터 시드 (idempotent)"""
    await _seed_site_content(db)

    await db.execute(
        sqlite_insert(EmailSettings)
        .values(id=EMAIL_SETTINGS_ID, **DEFAULT_EMAIL_SETTINGS)
        .on_conflict_do_nothing(index_elements=[EmailSettings.id])
    )

    if await count_rows(db, Profile) == 0:
        db.add(Profile(id=PROFILE_ID, **DEFAULT_PROFILE))

    if await count_rows(db, Admin) == 0:
        db.add(Admin(
            username=admin_username,
            password_hash=get_password_hash(admin_password),
            must_change_password=True,
        ))
        logger.warning(
            "Created bootstrap admin account '%s'. Change its password from /admin/password.",
            admin_username,
        )

    if await count_rows(db, Skill) == 0:
        for name, category, proficiency, icon in DEFAULT_SKILLS:
            db.add(Skill(name=name, category=category, proficiency=proficiency, icon=icon, icon_url=""))

    now = utcnow()
    if await count_rows(db, Project) == 0:
        for data in DEFAULT_PROJECTS:
            db.add(Project(**data, created_at=now))

    if await count_rows(db, Blog) == 0:
        for data in DEFAULT_BLOGS:
            db.add(Blog(**data, created_at=now, updated_at=now))

    if await count_rows(db, Experience) == 0:
        for data in DEFAULT_EXPERIENCE:
            db.add(Experience(**data))

    if await count_rows(db, Education) == 0:
        for data in DEFAULT_EDUCATION:
            db.add(Education(**data))

    if await count_rows(db, Service) == 0:
        for data in DEFAULT_SERVICES:
            db.add(Service(**data))

    await db.commit()
    logger.info("Default data seeded")
