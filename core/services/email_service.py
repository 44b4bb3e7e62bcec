# =============================================================================
# core/services/email_service.py - Contact Notification Email
# =============================================================================
# Sends an email to the site owner for every contact form submission.
#
# Templates live in core/templates/ (HTML + plain text). HTML output is
# autoescaped, so visitor-provided fields can't inject markup.
#
# Sending is best effort: callers get True/False, never an exception. The
# contact message is already stored by the time this runs.
# =============================================================================

import logging
from datetime import datetime, timezone
from email.message import EmailMessage
from email.utils import formataddr
from pathlib import Path
from typing import Any

import aiosmtplib
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from app.config import settings

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

_env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(["html", "xml"]),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_contact_notification(data: dict[str, Any]) -> tuple[str, str]:
    """
    Render the notification bodies.

    Args:
        data: name, email, subject, message and optional phone

    Returns:
        (html, text)
    """
    context = {
        "name": data["name"],
        "email": data["email"],
        "subject": data["subject"],
        "message": data["message"],
        "phone": data.get("phone"),
        "year": datetime.now(timezone.utc).year,
        "owner": settings.SITE_OWNER_NAME,
    }
    html = _env.get_template("contact_notification.html").render(**context)
    text = _env.get_template("contact_notification.txt").render(**context).strip()
    return html, text


def build_contact_message(data: dict[str, Any]) -> EmailMessage:
    """Build the multipart notification with Reply-To set to the visitor."""
    html, text = render_contact_notification(data)

    msg = EmailMessage()
    msg["From"] = formataddr((settings.EMAIL_FROM_NAME, settings.SMTP_USER or ""))
    msg["To"] = settings.notification_recipient or ""
    msg["Reply-To"] = data["email"]
    msg["Subject"] = f"New Contact: {data['subject']}"
    msg.set_content(text)
    msg.add_alternative(html, subtype="html")
    return msg


def _smtp_tls_options() -> dict[str, bool]:
    # 465 = implicit TLS, anything else upgrades with STARTTLS
    implicit = settings.SMTP_PORT == 465
    return {"use_tls": implicit, "start_tls": not implicit}


class EmailService:
    """Service for outgoing notification email."""

    @staticmethod
    async def send_contact_notification(data: dict[str, Any]) -> bool:
        """
        Email the site owner about a new contact message.

        Returns:
            True if the message was accepted by the SMTP server
        """
        if not settings.email_enabled:
            logger.warning("Email transport not configured, skipping contact notification")
            return False

        try:
            msg = build_contact_message(data)
            await aiosmtplib.send(
                msg,
                hostname=settings.SMTP_HOST,
                port=settings.SMTP_PORT,
                username=settings.SMTP_USER,
                password=settings.SMTP_PASS,
                timeout=settings.SMTP_TIMEOUT,
                **_smtp_tls_options(),
            )
            logger.info(f"Contact notification sent for message from {data['email']}")
            return True

        except aiosmtplib.SMTPException as e:
            logger.error(f"Failed to send contact notification: {e}")
            return False
        except Exception as e:
            logger.exception(f"Unexpected error sending contact notification: {e}")
            return False

    @staticmethod
    async def verify_connection() -> dict[str, Any]:
        """
        Check SMTP connectivity and credentials.

        Returns:
            {"success": bool, "message": str}
        """
        if not settings.email_enabled:
            return {
                "success": False,
                "message": "Email transport not configured. Check SMTP_HOST, SMTP_USER and SMTP_PASS.",
            }

        smtp = aiosmtplib.SMTP(
            hostname=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            timeout=settings.SMTP_TIMEOUT,
            **_smtp_tls_options(),
        )
        try:
            await smtp.connect()
            await smtp.login(settings.SMTP_USER, settings.SMTP_PASS)
            await smtp.quit()
            return {"success": True, "message": "Email configuration is valid"}

        except (aiosmtplib.SMTPException, OSError) as e:
            return {"success": False, "message": f"Email configuration error: {e}"}
