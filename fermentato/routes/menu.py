"""Food menu routes, scoped to a pub."""
from fastapi import APIRouter, Depends, HTTPException, Query, Response

from fermentato.database import get_db
from fermentato.models import MenuCategory, MenuItem, User
from fermentato.schemas.menu import MenuCategoryCreate, MenuCategoryUpdate, MenuItemCreate, MenuItemUpdate
from fermentato.serializers import menu_category_to_dict, menu_item_to_dict
from fermentato.services.pubs import can_manage_pub, get_pub_for_read, get_pub_for_write
from fermentato.middleware.auth import get_current_user, get_current_user_required
from fermentato.utils import generate_id

router = APIRouter(prefix="/pubs/{pub_id}/menu", tags=["menu"])


def _get_category(db, pub_id: str, category_id: str) -> MenuCategory:
    category = db.query(MenuCategory).filter(
        MenuCategory.id == category_id,
        MenuCategory.pub_id == pub_id,
    ).first()
    if not category:
        raise HTTPException(status_code=404, detail="Menu category not found")
    return category


def _get_item(db, pub_id: str, item_id: str) -> MenuItem:
    item = (
        db.query(MenuItem)
        .join(MenuCategory, MenuItem.category_id == MenuCategory.id)
        .filter(MenuItem.id == item_id, MenuCategory.pub_id == pub_id)
        .first()
    )
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item


@router.get("")
def get_menu(
    pub_id: str,
    show_all: bool = Query(False, alias="all"),
    user: User | None = Depends(get_current_user),
    db=Depends(get_db),
):
    """Categories with their items, in display order."""
    pub = get_pub_for_read(db, pub_id, user)
    if show_all and not can_manage_pub(user, pub):
        raise HTTPException(status_code=403, detail="Not allowed to manage this pub")
    categories = [c for c in pub.menu_categories if show_all or c.is_visible]
    return [menu_category_to_dict(c, include_hidden=show_all) for c in categories]


@router.post("/categories", status_code=201)
def create_category(
    pub_id: str,
    data: MenuCategoryCreate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    pub = get_pub_for_write(db, pub_id, user)
    category = MenuCategory(
        id=generate_id(),
        pub_id=pub.id,
        name=data.name,
        description=data.description,
        is_visible=True if data.is_visible is None else data.is_visible,
        order_index=data.order_index if data.order_index is not None else len(pub.menu_categories),
    )
    db.add(category)
    db.commit()
    db.refresh(category)
    return menu_category_to_dict(category, include_hidden=True)


@router.patch("/categories/{category_id}")
def update_category(
    pub_id: str,
    category_id: str,
    data: MenuCategoryUpdate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    pub = get_pub_for_write(db, pub_id, user)
    category = _get_category(db, pub.id, category_id)
    for field, value in data.model_dump(exclude_none=True).items():
        setattr(category, field, value)
    db.commit()
    db.refresh(category)
    return menu_category_to_dict(category, include_hidden=True)


@router.delete("/categories/{category_id}", status_code=204)
def delete_category(
    pub_id: str,
    category_id: str,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    """Delete a category together with its items."""
    pub = get_pub_for_write(db, pub_id, user)
    category = _get_category(db, pub.id, category_id)
    db.delete(category)
    db.commit()
    return Response(status_code=204)


@router.post("/categories/{category_id}/items", status_code=201)
def create_item(
    pub_id: str,
    category_id: str,
    data: MenuItemCreate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    pub = get_pub_for_write(db, pub_id, user)
    category = _get_category(db, pub.id, category_id)
    item = MenuItem(
        id=generate_id(),
        category_id=category.id,
        name=data.name,
        description=data.description,
        price=round(data.price, 2),
        allergens=[a.strip() for a in (data.allergens or []) if a.strip()],
        is_visible=True if data.is_visible is None else data.is_visible,
        is_available=True if data.is_available is None else data.is_available,
        image_url=data.image_url,
        order_index=data.order_index if data.order_index is not None else len(category.items),
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return menu_item_to_dict(item)


@router.patch("/items/{item_id}")
def update_item(
    pub_id: str,
    item_id: str,
    data: MenuItemUpdate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    pub = get_pub_for_write(db, pub_id, user)
    item = _get_item(db, pub.id, item_id)
    values = data.model_dump(exclude_none=True)
    if "price" in values:
        values["price"] = round(values["price"], 2)
    if "allergens" in values:
        values["allergens"] = [a.strip() for a in values["allergens"] if a.strip()]
    for field, value in values.items():
        setattr(item, field, value)
    db.commit()
    db.refresh(item)
    return menu_item_to_dict(item)


@router.delete("/items/{item_id}", status_code=204)
def delete_item(
    pub_id: str,
    item_id: str,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    pub = get_pub_for_write(db, pub_id, user)
    item = _get_item(db, pub.id, item_id)
    db.delete(item)
    db.commit()
    return Response(status_code=204)
