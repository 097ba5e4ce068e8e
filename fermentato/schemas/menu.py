"""Food menu schemas."""
from pydantic import Field

from fermentato.schemas.common import InputModel


class MenuCategoryUpdate(InputModel):
    name: str | None = Field(None, min_length=1, max_length=128)
    description: str | None = None
    is_visible: bool | None = None
    order_index: int | None = Field(None, ge=0)


class MenuCategoryCreate(MenuCategoryUpdate):
    name: str = Field(..., min_length=1, max_length=128)


class MenuItemUpdate(InputModel):
    name: str | None = Field(None, min_length=1, max_length=256)
    description: str | None = None
    price: float | None = Field(None, gt=0)
    allergens: list[str] | None = None
    is_visible: bool | None = None
    is_available: bool | None = None
    image_url: str | None = None
    order_index: int | None = Field(None, ge=0)


class MenuItemCreate(MenuItemUpdate):
    name: str = Field(..., min_length=1, max_length=256)
    price: float = Field(..., gt=0)
