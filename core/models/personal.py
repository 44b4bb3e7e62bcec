# =============================================================================
# core/models/personal.py - Personal Info Schema
# =============================================================================
# personal_info is a singleton row: the admin PUT creates it on first save
# and updates it afterwards. Every field is optional in the update body.
# =============================================================================

from pydantic import (
    BaseModel,
    EmailStr,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

URL_FIELDS = (
    "website_url", "github_url", "linkedin_url", "leetcode_url",
    "twitter_url", "instagram_url", "resume_url",
)

_http_url = TypeAdapter(HttpUrl)


class PersonalInfoUpdate(BaseModel):
    """
    Body for PUT /admin/personal-info.

    URLs must parse as absolute http(s) URLs but are stored exactly as typed
    (trimmed), so "https://example.com" does not gain a trailing slash.
    """

    name: str | None = Field(default=None, min_length=1, max_length=100)
    title: str | None = Field(default=None, min_length=1, max_length=200)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=30)
    location: str | None = Field(default=None, min_length=1, max_length=100)
    website_url: str | None = Field(default=None, max_length=500)
    github_url: str | None = Field(default=None, max_length=500)
    linkedin_url: str | None = Field(default=None, max_length=500)
    leetcode_url: str | None = Field(default=None, max_length=500)
    twitter_url: str | None = Field(default=None, max_length=500)
    instagram_url: str | None = Field(default=None, max_length=500)
    resume_url: str | None = Field(default=None, max_length=500)
    bio: str | None = None
    journey: str | None = None
    degree: str | None = Field(default=None, max_length=100)
    university: str | None = Field(default=None, max_length=200)
    education_period: str | None = Field(default=None, max_length=50)
    years_of_experience: int | None = Field(default=None, ge=0)

    @field_validator(*URL_FIELDS, mode="before")
    @classmethod
    def _blank_url_is_none(cls, value):
        # Cleared inputs arrive as ""
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator(*URL_FIELDS)
    @classmethod
    def _absolute_http_url(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            _http_url.validate_python(value)
        except ValidationError:
            raise ValueError("must be an absolute http(s) URL")
        return value
