"""
애플리케이션 설정
"""

from pydantic_settings import BaseSettings
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv


"""env 로딩 우선순위
1) OS 환경변수 (Docker/배포 환경 Environment 등)
2) 프로젝트 루트의 .env
"""

_here = Path(__file__).resolve()
PACKAGE_DIR = _here.parents[1]
_repo_root_env = _here.parents[2] / ".env"
if _repo_root_env.exists():
    load_dotenv(dotenv_path=str(_repo_root_env), override=False)


DEFAULT_BOOTSTRAP_PASSWORD = "admin123"


class Settings(BaseSettings):
    """애플리케이션 설정"""
    ENVIRONMENT: str = "development"
    DEBUG: bool = False  # True면 SQL echo

    # 저장소: 파일 경로 또는 SQLAlchemy URL
    DATABASE_URL: str = "portfolio.db"

    # 리스너
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # 세션 쿠키 (비밀키 미설정 시 프로세스 시작마다 새로 생성 → 재시작하면 세션 소멸)
    SESSION_SECRET_KEY: Optional[str] = None
    SESSION_MAX_AGE: int = 14 * 24 * 60 * 60
    SESSION_COOKIE: str = "portfolio_session"

    # 최초 부팅 시 admin 테이블이 비어 있을 때만 사용
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = DEFAULT_BOOTSTRAP_PASSWORD

    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")
    STATIC_DIR: str = str(PACKAGE_DIR / "static")

    # 이메일/SMTP (접속 정보 자체는 DB email_settings 행에 저장)
    SMTP_TIMEOUT: float = 30.0

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = 'ignore'

    @property
    def database_url(self) -> str:
        """bare 경로는 aiosqlite URL로 변환한다."""
        if "://" in self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite+aiosqlite:///{self.DATABASE_URL}"


settings = Settings()


def validate_settings(current: Settings = settings) -> bool:
    """설정 검증"""
    if current.ENVIRONMENT == "production":
        if current.DEFAULT_ADMIN_PASSWORD == DEFAULT_BOOTSTRAP_PASSWORD:
            raise ValueError("프로덕션 환경에서는 DEFAULT_ADMIN_PASSWORD를 변경해야 합니다.")
    return True
