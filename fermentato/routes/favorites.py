"""Favorites routes."""
from fastapi import APIRouter, Depends, HTTPException, Response

from fermentato.database import get_db
from fermentato.models import Beer, Brewery, Favorite, ItemType, Pub, User
from fermentato.schemas.favorite import FavoriteCreate
from fermentato.serializers import beer_to_dict, brewery_to_dict, favorite_to_dict, pub_to_dict
from fermentato.middleware.auth import get_current_user_required
from fermentato.utils import generate_id

router = APIRouter(prefix="/favorites", tags=["favorites"])

ITEM_MODELS = {
    ItemType.pub: (Pub, pub_to_dict),
    ItemType.brewery: (Brewery, brewery_to_dict),
    ItemType.beer: (Beer, beer_to_dict),
}


def _load_item(db, item_type: ItemType, item_id: str) -> dict | None:
    model, to_dict = ITEM_MODELS[item_type]
    obj = db.query(model).filter(model.id == item_id).first()
    return to_dict(obj) if obj else None


@router.get("")
def list_favorites(
    item_type: ItemType | None = None,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    q = db.query(Favorite).filter(Favorite.user_id == user.id)
    if item_type:
        q = q.filter(Favorite.item_type == item_type.value)
    favorites = q.order_by(Favorite.created_at.desc()).all()
    return [favorite_to_dict(f, _load_item(db, ItemType(f.item_type), f.item_id)) for f in favorites]


@router.post("", status_code=201)
def add_favorite(
    data: FavoriteCreate,
    response: Response,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    """Add a favorite. Adding one twice returns the existing row with 200."""
    item = _load_item(db, data.item_type, data.item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"{data.item_type.value.capitalize()} not found")
    existing = db.query(Favorite).filter(
        Favorite.user_id == user.id,
        Favorite.item_type == data.item_type.value,
        Favorite.item_id == data.item_id,
    ).first()
    if existing:
        response.status_code = 200
        return favorite_to_dict(existing, item)
    fav = Favorite(
        id=generate_id(),
        user_id=user.id,
        item_type=data.item_type.value,
        item_id=data.item_id,
    )
    db.add(fav)
    db.commit()
    db.refresh(fav)
    return favorite_to_dict(fav, item)


@router.get("/{item_type}/{item_id}")
def is_favorite(
    item_type: ItemType,
    item_id: str,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    exists = db.query(Favorite).filter(
        Favorite.user_id == user.id,
        Favorite.item_type == item_type.value,
        Favorite.item_id == item_id,
    ).first() is not None
    return {"is_favorite": exists}


@router.delete("/{item_type}/{item_id}", status_code=204)
def remove_favorite(
    item_type: ItemType,
    item_id: str,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    """Idempotent: removing a missing favorite is not an error."""
    db.query(Favorite).filter(
        Favorite.user_id == user.id,
        Favorite.item_type == item_type.value,
        Favorite.item_id == item_id,
    ).delete()
    db.commit()
    return Response(status_code=204)
