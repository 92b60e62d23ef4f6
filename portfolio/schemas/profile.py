"""
프로필 폼 스키마
"""

from typing import ClassVar, Dict, Tuple

from portfolio.schemas.common import FormModel


class ProfileForm(FormModel):
    """프로필 수정(전체 덮어쓰기)"""

    file_slots: ClassVar[Dict[str, Tuple[str, str]]] = {
        "avatar_file": ("avatar_url", "images"),
        "resume_file": ("resume_url", "files"),
    }

    name: str = ""
    title: str = ""
    bio: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    github_url: str = ""
    linkedin_url: str = ""
    twitter_url: str = ""
    resume_url: str = ""
    avatar_url: str = ""
