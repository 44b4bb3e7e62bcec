# =============================================================================
# core/models/contact.py - Contact Message Schemas
# =============================================================================
# These models define the API contract for the contact form:
# - ContactMessageCreate: Public form submission
# - MessageStatusUpdate: Admin status change (unread -> read -> replied)
#
# Submissions from disposable mailbox providers are rejected at validation
# time so they never reach the database or the notification email.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, EmailStr, Field, field_validator


# Temporary-inbox providers rejected by the contact form
DISPOSABLE_EMAIL_DOMAINS = frozenset({
    "10minutemail.com",
    "tempmail.com",
    "guerrillamail.com",
    "mailinator.com",
    "throwaway.email",
    "temp-mail.org",
    "fakeinbox.com",
    "trashmail.com",
    "getnada.com",
    "maildrop.cc",
    "yopmail.com",
    "mohmal.com",
    "sharklasers.com",
    "bugmenot.com",
    "dispostable.com",
    "spamgourmet.com",
    "mintemail.com",
})


def is_disposable_email(email: str) -> bool:
    """Check whether an address belongs to a known disposable domain."""
    _, _, domain = email.rpartition("@")
    return domain.strip().lower() in DISPOSABLE_EMAIL_DOMAINS


class MessageStatus(str, Enum):
    """
    Admin triage state of a contact message.

    Flow: unread -> read -> replied
    """
    UNREAD = "unread"
    READ = "read"
    REPLIED = "replied"


class ContactMessageCreate(BaseModel):
    """
    Schema for a contact form submission.

    Example:
        {
            "name": "Jane Doe",
            "email": "jane@company.com",
            "subject": "Freelance project",
            "message": "Hi, are you available in March?"
        }
    """

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=5000)
    phone: str | None = Field(default=None, max_length=30)

    @field_validator("name", "subject", "message")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Field cannot be blank")
        return value

    @field_validator("email")
    @classmethod
    def _reject_disposable(cls, value: str) -> str:
        if is_disposable_email(value):
            raise ValueError(
                "Disposable or temporary email addresses are not allowed. "
                "Please use a permanent email address."
            )
        return value


class MessageStatusUpdate(BaseModel):
    """Body for PATCH /admin/messages/{id}/status."""

    status: MessageStatus
