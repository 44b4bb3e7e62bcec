# =============================================================================
# app/routers/admin/messages.py - Contact Message Triage
# =============================================================================
# Status flow: unread -> read -> replied. Moving to "replied" records
# replied_at.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Path, Query

from core.models import MessageStatus, MessageStatusUpdate
from core.services import messages_service
from lib.utils import utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_messages(
    status: MessageStatus | None = Query(None, description="Only messages in this state"),
) -> list[dict[str, Any]]:
    """Contact messages, newest first."""
    return messages_service.list(filters={"status": status.value if status else None})


@router.put("/{message_id}/read")
async def mark_message_read(message_id: UUID = Path(...)) -> dict[str, Any]:
    return messages_service.update(message_id, {"status": MessageStatus.READ.value})


@router.patch("/{message_id}/status")
async def update_message_status(
    body: MessageStatusUpdate,
    message_id: UUID = Path(...),
) -> dict[str, Any]:
    """Set the triage status of a message."""
    data: dict[str, Any] = {"status": body.status.value}
    if body.status == MessageStatus.REPLIED:
        data["replied_at"] = utc_now_iso()
    return messages_service.update(message_id, data)


@router.delete("/{message_id}")
async def delete_message(message_id: UUID = Path(...)) -> dict[str, str]:
    messages_service.delete(message_id)
    return {"message": "Message deleted successfully"}
