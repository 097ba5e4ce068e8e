"""Tap list and bottle list schemas.

Price inputs are left loosely typed on purpose: every accepted shape is
reduced to the canonical list by services.pricing.normalize_prices.
"""
from typing import Any

from pydantic import Field

from fermentato.models import BottleSize
from fermentato.schemas.common import InputModel


class TapListUpdate(InputModel):
    beer_id: str | None = None
    prices: list | dict | None = None
    price_small: Any = None
    price_medium: Any = None
    price_large: Any = None
    tap_number: int | None = Field(None, ge=1)
    description: str | None = None
    is_active: bool | None = None
    is_visible: bool | None = None

    def legacy_prices(self) -> dict:
        return {
            "price_small": self.price_small,
            "price_medium": self.price_medium,
            "price_large": self.price_large,
        }

    def has_price_input(self) -> bool:
        return self.prices is not None or any(v is not None for v in self.legacy_prices().values())


class TapListCreate(TapListUpdate):
    beer_id: str
    is_visible: bool = True


class BottleUpdate(InputModel):
    beer_id: str | None = None
    prices: list | dict | None = None
    # Single-size shorthand: price for `bottle_size`
    price: Any = None
    bottle_size: BottleSize | None = None
    quantity: int | None = Field(None, ge=0)
    description: str | None = None
    is_active: bool | None = None
    is_visible: bool | None = None


class BottleCreate(BottleUpdate):
    beer_id: str
    bottle_size: BottleSize = BottleSize.cl33
    is_visible: bool = True
