"""Brewery and beer schemas."""
from pydantic import Field, model_validator

from fermentato.schemas.common import InputModel


class BreweryUpdate(InputModel):
    name: str | None = Field(None, min_length=1, max_length=256)
    location: str | None = Field(None, max_length=256)
    region: str | None = Field(None, max_length=128)
    country: str | None = Field(None, max_length=128)
    description: str | None = None
    logo_url: str | None = None
    website_url: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)


class BreweryCreate(BreweryUpdate):
    name: str = Field(..., min_length=1, max_length=256)


class BeerUpdate(InputModel):
    name: str | None = Field(None, min_length=1, max_length=256)
    brewery_id: str | None = None
    style: str | None = Field(None, min_length=1, max_length=128)
    abv: float | None = Field(None, ge=0, le=100)
    ibu: int | None = Field(None, ge=0)
    description: str | None = None
    logo_url: str | None = None
    image_url: str | None = None
    bottle_image_url: str | None = None
    color: str | None = Field(None, max_length=64)
    is_bottled: bool | None = None


class BeerCreate(BeerUpdate):
    name: str = Field(..., min_length=1, max_length=256)
    style: str = Field(..., min_length=1, max_length=128)
    # Either an existing brewery id or a name (brewery is created if absent)
    brewery_name: str | None = Field(None, max_length=256)
    is_bottled: bool = False

    @model_validator(mode="after")
    def check_brewery_given(self):
        if not self.brewery_id and not self.brewery_name:
            raise ValueError("brewery_id or brewery_name is required")
        return self
