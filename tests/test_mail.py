import pytest

from portfolio.schemas.email_settings import EmailSettingsData
from portfolio.services.mail_service import (
    EmailNotSentError,
    build_notification_email,
    send_notification_email,
    send_notification_email_async,
)


def make_settings(**overrides):
    values = {
        "smtp_server": "smtp.example.com",
        "smtp_port": 587,
        "smtp_username": "site@example.com",
        "smtp_password": "app-password",
        "notification_email": "owner@example.com",
        "enabled": True,
    }
    values.update(overrides)
    return EmailSettingsData(**values)


def test_notification_subject_and_escaping():
    subject, html = build_notification_email("<b>Eve</b>", "eve@example.com", "Hi", "a < b & c")
    assert subject == "New Contact Form Message: Hi"
    assert "&lt;b&gt;Eve&lt;/b&gt;" in html
    assert "a &lt; b &amp; c" in html
    assert "<b>Eve</b>" not in html


def test_disabled_settings_refuse_to_send(fake_smtp):
    with pytest.raises(EmailNotSentError, match="Email notifications are disabled"):
        send_notification_email(make_settings(enabled=False), "A", "a@example.com", "S", "B")
    assert fake_smtp.instances == []


def test_missing_credentials_refuse_to_send(fake_smtp):
    with pytest.raises(EmailNotSentError, match="Email settings not configured"):
        send_notification_email(make_settings(smtp_password=""), "A", "a@example.com", "S", "B")
    assert fake_smtp.instances == []


def test_invalid_reply_to_address_is_rejected(fake_smtp):
    with pytest.raises(EmailNotSentError, match="Invalid reply-to address"):
        send_notification_email(make_settings(), "A", "not-an-address", "S", "B")
    assert fake_smtp.instances == []


def test_send_uses_starttls_login_and_headers(fake_smtp):
    send_notification_email(make_settings(), "Alice", "alice@example.com", "Project", "Hello there")

    [smtp] = fake_smtp.instances
    assert (smtp.host, smtp.port) == ("smtp.example.com", 587)
    assert smtp.started_tls is True
    assert smtp.logged_in == ("site@example.com", "app-password")
    [(from_addr, to_addrs, raw)] = smtp.sent
    assert from_addr == "site@example.com"
    assert to_addrs == ["owner@example.com"]
    assert "Reply-To: alice@example.com" in raw
    assert "Subject: New Contact Form Message: Project" in raw


async def test_async_send_reports_failure_as_message(fake_smtp):
    error = await send_notification_email_async(make_settings(enabled=False), "A", "a@example.com", "S", "B")
    assert error == "Email notifications are disabled"


async def test_async_send_returns_none_on_success(fake_smtp):
    assert await send_notification_email_async(make_settings(), "A", "a@example.com", "S", "B") is None
    assert len(fake_smtp.instances) == 1
