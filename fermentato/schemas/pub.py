"""Pub schemas."""
from pydantic import EmailStr, Field, field_validator

from fermentato.schemas.common import InputModel
from fermentato.services.opening_hours import WEEKDAYS

TIME_PATTERN = r"^\d{1,2}:\d{2}$"


class OpeningDay(InputModel):
    open: str | None = Field(None, pattern=TIME_PATTERN)
    close: str | None = Field(None, pattern=TIME_PATTERN)
    isClosed: bool = False


def _check_weekdays(value: dict | None) -> dict | None:
    if value is None:
        return None
    unknown = set(value) - set(WEEKDAYS)
    if unknown:
        raise ValueError(f"Unknown weekday(s): {', '.join(sorted(unknown))}")
    return value


def _check_url(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value.startswith(("http://", "https://")):
        raise ValueError("Must be a valid URL starting with http:// or https://")
    return value


class PubFields(InputModel):
    """Editable pub fields, all optional."""

    name: str | None = Field(None, min_length=1, max_length=256)
    address: str | None = Field(None, min_length=1, max_length=512)
    city: str | None = Field(None, min_length=1, max_length=128)
    region: str | None = Field(None, max_length=128)
    postal_code: str | None = Field(None, max_length=16)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    phone: str | None = Field(None, max_length=64)
    email: EmailStr | None = None
    website_url: str | None = None
    description: str | None = None
    image_url: str | None = None
    logo_url: str | None = None
    cover_image_url: str | None = None
    opening_hours: dict[str, OpeningDay] | None = None
    facebook_url: str | None = None
    instagram_url: str | None = None
    twitter_url: str | None = None
    tiktok_url: str | None = None

    @field_validator("opening_hours")
    @classmethod
    def check_opening_hours(cls, v):
        return _check_weekdays(v)

    @field_validator("website_url")
    @classmethod
    def check_website(cls, v):
        return _check_url(v)


class PubUpdate(PubFields):
    vat_number: str | None = Field(None, min_length=11, max_length=32)
    business_name: str | None = Field(None, min_length=1, max_length=256)


class PubRegistration(PubFields):
    """Registering a pub: the owner's business identity is mandatory."""

    name: str = Field(..., min_length=1, max_length=256)
    address: str = Field(..., min_length=1, max_length=512)
    city: str = Field(..., min_length=1, max_length=128)
    vat_number: str = Field(..., min_length=11, max_length=32)
    business_name: str = Field(..., min_length=1, max_length=256)


class AdminPubUpdate(PubUpdate):
    is_active: bool | None = None
    is_verified: bool | None = None
    owner_id: str | None = None


class PubRatingCreate(InputModel):
    rating: int = Field(..., ge=1, le=5)
