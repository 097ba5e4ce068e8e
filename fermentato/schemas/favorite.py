"""Favorites and tasting log schemas."""
from datetime import datetime

from pydantic import Field

from fermentato.models import ItemType, TastingFormat
from fermentato.schemas.common import InputModel


class FavoriteCreate(InputModel):
    item_type: ItemType
    item_id: str


class TastingUpdate(InputModel):
    pub_id: str | None = None
    rating: int | None = Field(None, ge=1, le=5)
    format: TastingFormat | None = None
    personal_notes: str | None = None
    tasted_at: datetime | None = None


class TastingCreate(TastingUpdate):
    beer_id: str
    format: TastingFormat = TastingFormat.spina
