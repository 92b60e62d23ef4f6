"""
공통 테스트 픽스처

- 테스트마다 tmp_path 아래 새 SQLite 파일
- TestClient를 컨텍스트 매니저로 사용해 lifespan(스키마 생성 + 시드)을 실행
- SMTP는 기록용 가짜 객체로 교체 (실제 소켓을 열지 않음)
"""

import pytest
from fastapi.testclient import TestClient

from portfolio.core.config import Settings
from portfolio.main import create_app
from portfolio.services import mail_service


ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


class FakeSMTP:
    """smtplib.SMTP 대체: 호출 내역만 기록"""

    instances = []

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.started_tls = False
        self.logged_in = None
        self.sent = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self, context=None):
        self.started_tls = True

    def login(self, username, password):
        self.logged_in = (username, password)

    def sendmail(self, from_addr, to_addrs, msg):
        self.sent.append((from_addr, to_addrs, msg))


@pytest.fixture
def fake_smtp(monkeypatch):
    FakeSMTP.instances = []
    monkeypatch.setattr(mail_service.smtplib, "SMTP", FakeSMTP)
    return FakeSMTP


@pytest.fixture
def app_settings(tmp_path):
    return Settings(
        DATABASE_URL=str(tmp_path / "portfolio-test.db"),
        SESSION_SECRET_KEY="test-session-secret",
        DEFAULT_ADMIN_USERNAME=ADMIN_USERNAME,
        DEFAULT_ADMIN_PASSWORD=ADMIN_PASSWORD,
    )


@pytest.fixture
def client(app_settings, fake_smtp):
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client


def login(client, username=ADMIN_USERNAME, password=ADMIN_PASSWORD):
    return client.post(
        "/admin/login",
        data={"username": username, "password": password},
        follow_redirects=False,
    )


@pytest.fixture
def admin_client(client):
    response = login(client)
    assert response.status_code == 302
    return client
