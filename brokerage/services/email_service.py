"""Transactional email via the Resend API.

Dispatch is best-effort: routers queue `send_email` as a background task
after the durable write, and it never raises. The result envelope
`{success, data|error}` is for logging and tests only.
"""

from __future__ import annotations

import html as html_module
import logging
import re
from email.utils import parseaddr

import httpx
from fastapi import BackgroundTasks

from brokerage.core.config import settings
from brokerage.services.http_service import DEFAULT_RETRY_STATUSES, request_with_retries
from brokerage.types import JsonObject

logger = logging.getLogger(__name__)

RESEND_SEND_URL = "https://api.resend.com/emails"
RESEND_RETRY_BASE_DELAY = 0.5
RESEND_RETRY_MAX_DELAY = 4.0
# Provider limit per address field
RESEND_MAX_RECIPIENTS = 50


def html_to_text(content: str) -> str:
    """Convert HTML into a readable plain-text alternative."""
    text = re.sub(r"<(script|style)[^>]*>.*?</\1>", "", content, flags=re.DOTALL | re.I)
    text = re.sub(r"<br\s*/?>|</p>|</h\d>|<hr\s*/?>", "\n", text, flags=re.I)
    text = re.sub(r"<[^>]+>", " ", text)
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\s*\n\s*", "\n", text).strip()
    return html_module.unescape(text)


def email_configured() -> bool:
    return bool(settings.RESEND_API_KEY)


async def send_email(
    to: str | list[str],
    subject: str,
    html: str,
    bcc: list[str] | None = None,
) -> JsonObject:
    """
    Send one email to one or many recipients.

    Blind-copied recipients go in `bcc` and never see each other.

    Returns:
        {"success": True, "data": <provider response>} or
        {"success": False, "error": <reason>}
    """
    recipients = [to] if isinstance(to, str) else [r for r in to if r]
    blind = [r for r in bcc or [] if r]
    if not recipients and not blind:
        return {"success": False, "error": "No recipients"}

    if not email_configured():
        logger.error("RESEND_API_KEY is not configured")
        return {"success": False, "error": "Email service not configured"}

    payload: dict[str, object] = {
        "from": settings.EMAIL_FROM,
        "to": recipients,
        "subject": subject,
        "html": html,
    }
    if blind:
        payload["bcc"] = blind
        if len(blind) > RESEND_MAX_RECIPIENTS:
            logger.warning(
                "Email %r has %d bcc recipients, over the provider limit of %d",
                subject,
                len(blind),
                RESEND_MAX_RECIPIENTS,
            )
    text = html_to_text(html)
    if text:
        payload["text"] = text

    headers = {
        "Authorization": f"Bearer {settings.RESEND_API_KEY}",
        "Content-Type": "application/json",
    }

    try:
        async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as client:

            async def request_fn() -> httpx.Response:
                return await client.post(RESEND_SEND_URL, headers=headers, json=payload)

            response = await request_with_retries(
                request_fn,
                max_attempts=settings.EMAIL_MAX_ATTEMPTS,
                base_delay=RESEND_RETRY_BASE_DELAY,
                max_delay=RESEND_RETRY_MAX_DELAY,
                retry_statuses=DEFAULT_RETRY_STATUSES,
            )
    except httpx.TimeoutException:
        logger.warning("Resend timeout sending %r to %d recipient(s)", subject, len(recipients) + len(blind))
        return {"success": False, "error": "Connection timeout"}
    except Exception as e:
        logger.exception("Resend connection error sending %r", subject)
        return {"success": False, "error": f"Connection error: {e.__class__.__name__}"}

    try:
        data = response.json()
    except ValueError:
        data = {"message": response.text}

    if 200 <= response.status_code < 300:
        logger.info(
            "Email sent: %r to %d recipient(s), message_id=%s",
            subject,
            len(recipients) + len(blind),
            data.get("id") if isinstance(data, dict) else None,
        )
        return {"success": True, "data": data}

    logger.error("Resend API error %s for %r: %s", response.status_code, subject, data)
    return {"success": False, "error": data}


def queue_email(
    background_tasks: BackgroundTasks,
    to: str | list[str],
    content: tuple[str, str],
    bcc: list[str] | None = None,
) -> None:
    """Schedule `send_email` to run after the response is produced."""
    subject, html = content
    if bcc:
        background_tasks.add_task(send_email, to, subject, html, bcc)
    else:
        background_tasks.add_task(send_email, to, subject, html)


def queue_staff_email(background_tasks: BackgroundTasks, content: tuple[str, str]) -> None:
    queue_email(background_tasks, settings.ADMIN_NOTIFICATION_EMAIL, content)


def sender_address() -> str:
    """Bare address of EMAIL_FROM, used as the visible recipient of bulk sends."""
    return parseaddr(settings.EMAIL_FROM)[1] or settings.EMAIL_FROM
