"""
프로필 모델 (싱글톤 행, id = 1)
"""

from sqlalchemy import Column, Integer, String, Text

from portfolio.core.database import Base


PROFILE_ID = 1


class Profile(Base):
    """사이트 주인 프로필"""

    __tablename__ = "profile"

    id = Column(Integer, primary_key=True, default=PROFILE_ID)
    name = Column(String(200), nullable=False)
    title = Column(String(200), nullable=False)
    bio = Column(Text, nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), default="")
    location = Column(String(200), default="")
    github_url = Column(String(500), default="")
    linkedin_url = Column(String(500), default="")
    twitter_url = Column(String(500), default="")
    resume_url = Column(String(500), default="")
    avatar_url = Column(String(500), default="")

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, name={self.name})>"
