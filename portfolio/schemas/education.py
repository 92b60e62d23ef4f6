"""
학력 폼 스키마
"""

from portfolio.schemas.common import FormModel


class EducationForm(FormModel):
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
