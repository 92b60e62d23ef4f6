"""
문의 알림 이메일 발송 서비스

- SMTP 접속 정보는 DB email_settings 행 (EmailSettingsData 스냅샷으로 전달)
- STARTTLS + 로그인
- 발송 실패는 문의 저장 결과에 영향을 주지 않는다 (로그만 남김)
"""

from email.mime.text import MIMEText
from email_validator import validate_email, EmailNotValidError
from html import escape
from typing import Optional, Set
import smtplib
import ssl
import asyncio
import logging

from portfolio.schemas.email_settings import EmailSettingsData


logger = logging.getLogger(__name__)

DEFAULT_SMTP_TIMEOUT = 30.0
SUBJECT_PREFIX = "New Contact Form Message: "

# 진행 중인 백그라운드 발송 태스크 (GC 방지용 참조)
_pending_tasks: Set[asyncio.Task] = set()


class EmailNotSentError(Exception):
    """발송 불가/실패 (메시지는 사용자 표시용)"""


def build_notification_email(sender_name: str, sender_email: str, subject: str, body: str) -> tuple[str, str]:
    """알림 메일 제목/HTML 생성 (사용자 입력은 escape)"""
    email_subject = f"{SUBJECT_PREFIX}{subject}"
    name_html = escape(sender_name)
    email_html = escape(sender_email)
    subject_html = escape(subject)
    body_html = escape(body)
    html = f"""<!DOCTYPE html>
<html>
<head>
    <style>
        body {{ font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background-color: #0a0a14; color: #f3f4f6; padding: 20px; }}
        .container {{ max-width: 600px; margin: 0 auto; background: linear-gradient(135deg, #1a1a2e 0%, #16213e 100%); border-radius: 16px; padding: 30px; border: 1px solid #374151; }}
        .header {{ text-align: center; margin-bottom: 30px; }}
        .header h1 {{ color: #f97316; margin: 0; font-size: 24px; }}
        .header p {{ color: #9ca3af; margin-top: 8px; }}
        .info-box {{ background: rgba(249, 115, 22, 0.1); border: 1px solid rgba(249, 115, 22, 0.3); border-radius: 12px; padding: 20px; margin: 20px 0; }}
        .info-label {{ color: #f97316; font-weight: 600; min-width: 100px; display: inline-block; }}
        .message-box {{ background: rgba(255, 255, 255, 0.05); border-radius: 12px; padding: 20px; margin-top: 20px; }}
        .message-box h3 {{ color: #f97316; margin-top: 0; }}
        .message-content {{ color: #d1d5db; line-height: 1.6; white-space: pre-wrap; }}
        .footer {{ text-align: center; margin-top: 30px; padding-top: 20px; border-top: 1px solid #374151; color: #6b7280; font-size: 12px; }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>📬 New Contact Message</h1>
            <p>Someone reached out through your portfolio!</p>
        </div>
        <div class="info-box">
            <p><span class="info-label">From:</span> {name_html}</p>
            <p><span class="info-label">Email:</span> <a href="mailto:{email_html}" style="color: #60a5fa;">{email_html}</a></p>
            <p><span class="info-label">Subject:</span> {subject_html}</p>
        </div>
        <div class="message-box">
            <h3>Message</h3>
            <div class="message-content">{body_html}</div>
        </div>
        <div class="footer">
            <p>This notification was sent from your Portfolio website.</p>
            <p>Reply directly to the sender's email address above.</p>
        </div>
    </div>
</body>
</html>"""
    return email_subject, html


def _check_address(value: str, label: str) -> str:
    try:
        return validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError as e:
        raise EmailNotSentError(f"Invalid {label} address: {e}") from e


def send_notification_email(
    settings: EmailSettingsData,
    sender_name: str,
    sender_email: str,
    subject: str,
    body: str,
    timeout: float = DEFAULT_SMTP_TIMEOUT,
) -> None:
    """동기 SMTP 전송 (스레드 풀에서 실행). 실패 시 EmailNotSentError"""
    if not settings.enabled:
        raise EmailNotSentError("Email notifications are disabled")
    if not settings.smtp_username or not settings.smtp_password:
        raise EmailNotSentError("Email settings not configured")

    from_addr = _check_address(settings.smtp_username, "from")
    reply_to = _check_address(sender_email, "reply-to")
    to_addr = _check_address(settings.notification_email, "to")

    email_subject, html = build_notification_email(sender_name, sender_email, subject, body)
    msg = MIMEText(html, "html", "utf-8")
    msg["Subject"] = email_subject
    msg["From"] = from_addr
    msg["Reply-To"] = reply_to
    msg["To"] = to_addr

    context = ssl.create_default_context()
    try:
        with smtplib.SMTP(settings.smtp_server, settings.smtp_port, timeout=timeout) as server:
            server.starttls(context=context)
            server.login(settings.smtp_username, settings.smtp_password)
            server.sendmail(from_addr, [to_addr], msg.as_string())
    except (smtplib.SMTPException, OSError) as e:
        raise EmailNotSentError(f"Failed to send email: {e}") from e


async def send_notification_email_async(
    settings: EmailSettingsData,
    sender_name: str,
    sender_email: str,
    subject: str,
    body: str,
    timeout: float = DEFAULT_SMTP_TIMEOUT,
) -> Optional[str]:
    """스레드 풀에서 발송. 성공 시 None, 실패 시 오류 메시지 반환"""
    loop = asyncio.get_running_loop()
    try:
        await loop.run_in_executor(
            None, send_notification_email, settings, sender_name, sender_email, subject, body, timeout
        )
    except EmailNotSentError as e:
        logger.warning("Email notification not sent: %s", e)
        return str(e)
    logger.info("Email notification sent successfully to %s", settings.notification_email)
    return None


def dispatch_contact_notification(
    settings: EmailSettingsData,
    sender_name: str,
    sender_email: str,
    subject: str,
    body: str,
    timeout: float = DEFAULT_SMTP_TIMEOUT,
) -> asyncio.Task:
    """문의 알림을 백그라운드로 발송 (요청 응답을 기다리게 하지 않음)"""
    task = asyncio.create_task(
        send_notification_email_async(settings, sender_name, sender_email, subject, body, timeout)
    )
    _pending_tasks.add(task)
    task.add_done_callback(_pending_tasks.discard)
    return task
