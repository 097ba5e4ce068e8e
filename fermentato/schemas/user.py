"""User schemas."""
from pydantic import Field

from fermentato.schemas.common import InputModel


class UserUpdate(InputModel):
    first_name: str | None = Field(None, max_length=128)
    last_name: str | None = Field(None, max_length=128)
    nickname: str | None = Field(None, min_length=2, max_length=64)
    bio: str | None = None
    profile_image_url: str | None = None
