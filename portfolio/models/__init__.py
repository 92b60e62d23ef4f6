"""
모델 패키지
"""

from .profile import Profile, PROFILE_ID
from .skill import Skill
from .project import Project
from .blog import Blog
from .experience import Experience
from .education import Education
from .message import Message
from .service import Service
from .admin import Admin
from .stored_file import StoredFile
from .email_settings import EmailSettings, EMAIL_SETTINGS_ID
from .site_content import SiteContentItem

__all__ = [
    "Profile",
    "PROFILE_ID",
    "Skill",
    "Project",
    "Blog",
    "Experience",
    "Education",
    "Message",
    "Service",
    "Admin",
    "StoredFile",
    "EmailSettings",
    "EMAIL_SETTINGS_ID",
    "SiteContentItem",
]
