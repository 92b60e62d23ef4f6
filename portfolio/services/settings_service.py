"""
이메일 설정 / 사이트 문구 서비스
"""

from sqlalchemy import select, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict, List, Mapping

from portfolio.models.email_settings import EmailSettings, EMAIL_SETTINGS_ID
from portfolio.models.site_content import SiteContentItem
from portfolio.schemas.email_settings import EmailSettingsForm


DEFAULT_EMAIL_SETTINGS = {
    "smtp_server": "smtp.gmail.com",
    "smtp_port": 587,
    "smtp_username": "",
    "smtp_password": "",
    "notification_email": "",
    "enabled": False,
}


async def get_email_settings(db: AsyncSession) -> EmailSettings:
    """이메일 설정 조회. 행이 없으면 기본값으로 만든 뒤 반환한다."""
    await db.execute(
        sqlite_insert(EmailSettings)
        .values(id=EMAIL_SETTINGS_ID, **DEFAULT_EMAIL_SETTINGS)
        .on_conflict_do_nothing(index_elements=[EmailSettings.id])
    )
    await db.commit()
    result = await db.execute(select(EmailSettings).where(EmailSettings.id == EMAIL_SETTINGS_ID))
    return result.scalar_one()


async def update_email_settings(db: AsyncSession, form: EmailSettingsForm) -> None:
    """이메일 설정 upsert (id = 1)"""
    values = form.model_dump()
    await db.execute(
        sqlite_insert(EmailSettings)
        .values(id=EMAIL_SETTINGS_ID, **values)
        .on_conflict_do_update(index_elements=[EmailSettings.id], set_=values)
    )
    await db.commit()


async def get_site_content(db: AsyncSession) -> Dict[str, str]:
    """템플릿 치환용 key → value"""
    result = await db.execute(select(SiteContentItem.key, SiteContentItem.value))
    return {key: value for key, value in result.all()}


async def get_site_content_by_section(db: AsyncSession) -> Dict[str, List[SiteContentItem]]:
    """관리 화면용 섹션별 그룹 (section, key 순)"""
    result = await db.execute(select(SiteContentItem).order_by(SiteContentItem.section, SiteContentItem.key))
    by_section: Dict[str, List[SiteContentItem]] = {}
    for item in result.scalars().all():
        by_section.setdefault(item.section, []).append(item)
    return by_section


async def update_site_content_batch(db: AsyncSession, updates: Mapping[str, str]) -> int:
    """기존 key 값만 갱신 (새 key는 만들지 않음). 갱신된 행 수 반환."""
    updated = 0
    for key, value in updates.items():
        result = await db.execute(
            update(SiteContentItem)
            .where(SiteContentItem.key == key)
            .values(value=value)
        )
        updated += result.rowcount or 0
    await db.commit()
    return updated
