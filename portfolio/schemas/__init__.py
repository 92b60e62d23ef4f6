"""
스키마 패키지
"""

from .common import FormModel
from .profile import ProfileForm
from .skill import SkillForm
from .project import ProjectForm
from .blog import BlogForm
from .education import EducationForm
from .service import ServiceForm
from .contact import ContactForm
from .auth import LoginForm, PasswordChangeForm
from .email_settings import EmailSettingsForm, EmailSettingsData, EmailTestResponse
from .upload import UploadImageResponse

__all__ = [
    "FormModel",
    "ProfileForm",
    "SkillForm",
    "ProjectForm",
    "BlogForm",
    "EducationForm",
    "ServiceForm",
    "ContactForm",
    "LoginForm",
    "PasswordChangeForm",
    "EmailSettingsForm",
    "EmailSettingsData",
    "EmailTestResponse",
    "UploadImageResponse",
]
