# =============================================================================
# app/routers/contact.py - Contact Form Endpoint
# =============================================================================
# Stores a visitor's message and notifies the site owner by email.
#
# The notification runs as a background task after the response is sent:
# a slow or failing SMTP server never delays or fails the submission.
# =============================================================================

import logging

from fastapi import APIRouter, BackgroundTasks, Request, status

from core.models import ContactMessageCreate, MessageStatus
from core.services import EmailService, messages_service
from lib.utils import client_ip

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_contact_message(
    body: ContactMessageCreate,
    request: Request,
    background_tasks: BackgroundTasks,
) -> dict:
    """
    Submit the contact form.

    Raises:
        400: Missing/invalid fields or a disposable email address
    """
    data = body.model_dump(mode="json")
    row = messages_service.create({
        **data,
        "status": MessageStatus.UNREAD.value,
        "ip_address": client_ip(request),
        "user_agent": request.headers.get("user-agent", ""),
    })
    logger.info(f"Contact message {row.get('id')} received from {body.email}")

    background_tasks.add_task(EmailService.send_contact_notification, data)

    return {"message": "Message sent successfully", "id": row.get("id")}
