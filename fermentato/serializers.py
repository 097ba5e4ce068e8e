"""Model -> JSON dict helpers shared by the route modules."""
from fermentato.models import (
    Beer,
    BeerTasting,
    BottleListEntry,
    Brewery,
    Favorite,
    MenuCategory,
    MenuItem,
    Pub,
    PublicanRequest,
    Report,
    Review,
    TapListEntry,
    User,
)
from fermentato.services.opening_hours import is_open_now
from fermentato.services.pricing import display_price
from fermentato.utils import isoformat


def user_to_dict(u: User) -> dict:
    """Public account view. Never includes the password hash."""
    return {
        "id": u.id,
        "email": u.email,
        "first_name": u.first_name,
        "last_name": u.last_name,
        "nickname": u.nickname,
        "bio": u.bio,
        "profile_image_url": u.profile_image_url,
        "roles": list(u.roles or []),
        "active_role": u.active_role,
        "is_email_verified": bool(u.is_email_verified),
        "is_active": bool(u.is_active),
        "has_password": u.hashed_password is not None,
        "created_at": isoformat(u.created_at),
    }


def brewery_to_dict(b: Brewery, beer_count: int | None = None) -> dict:
    d = {
        "id": b.id,
        "name": b.name,
        "location": b.location,
        "region": b.region,
        "country": b.country,
        "description": b.description,
        "logo_url": b.logo_url,
        "website_url": b.website_url,
        "latitude": b.latitude,
        "longitude": b.longitude,
        "rating": b.rating or 0,
        "created_at": isoformat(b.created_at),
    }
    if beer_count is not None:
        d["beer_count"] = beer_count
    return d


def beer_to_dict(beer: Beer, include_brewery: bool = True) -> dict:
    d = {
        "id": beer.id,
        "name": beer.name,
        "brewery_id": beer.brewery_id,
        "style": beer.style,
        "abv": beer.abv,
        "ibu": beer.ibu,
        "description": beer.description,
        "logo_url": beer.logo_url,
        "image_url": beer.image_url,
        "bottle_image_url": beer.bottle_image_url,
        "color": beer.color,
        "is_bottled": bool(beer.is_bottled),
        "created_at": isoformat(beer.created_at),
    }
    if include_brewery and beer.brewery is not None:
        d["brewery"] = {"id": beer.brewery.id, "name": beer.brewery.name, "region": beer.brewery.region}
    return d


def pub_to_dict(p: Pub, private: bool = False) -> dict:
    """`private` adds owner-only business fields (VAT, business name)."""
    d = {
        "id": p.id,
        "name": p.name,
        "address": p.address,
        "city": p.city,
        "region": p.region,
        "postal_code": p.postal_code,
        "latitude": p.latitude,
        "longitude": p.longitude,
        "phone": p.phone,
        "email": p.email,
        "website_url": p.website_url,
        "description": p.description,
        "image_url": p.image_url,
        "logo_url": p.logo_url,
        "cover_image_url": p.cover_image_url,
        "rating": p.rating or 0,
        "is_active": bool(p.is_active),
        "is_verified": bool(p.is_verified),
        "opening_hours": p.opening_hours,
        "is_open_now": is_open_now(p.opening_hours),
        "facebook_url": p.facebook_url,
        "instagram_url": p.instagram_url,
        "twitter_url": p.twitter_url,
        "tiktok_url": p.tiktok_url,
        "owner_id": p.owner_id,
        "created_at": isoformat(p.created_at),
    }
    if private:
        d["vat_number"] = p.vat_number
        d["business_name"] = p.business_name
    return d


def tap_entry_to_dict(e: TapListEntry) -> dict:
    return {
        "id": e.id,
        "pub_id": e.pub_id,
        "beer_id": e.beer_id,
        "beer": beer_to_dict(e.beer) if e.beer else None,
        "prices": list(e.prices or []),
        "display_price": display_price(e.prices),
        "tap_number": e.tap_number,
        "description": e.description,
        "is_active": bool(e.is_active),
        "is_visible": bool(e.is_visible),
        "added_at": isoformat(e.added_at),
        "updated_at": isoformat(e.updated_at),
    }


def bottle_entry_to_dict(e: BottleListEntry) -> dict:
    return {
        "id": e.id,
        "pub_id": e.pub_id,
        "beer_id": e.beer_id,
        "beer": beer_to_dict(e.beer) if e.beer else None,
        "prices": list(e.prices or []),
        "display_price": display_price(e.prices),
        "bottle_size": e.bottle_size,
        "quantity": e.quantity,
        "description": e.description,
        "is_active": bool(e.is_active),
        "is_visible": bool(e.is_visible),
        "added_at": isoformat(e.added_at),
        "updated_at": isoformat(e.updated_at),
    }


def menu_item_to_dict(i: MenuItem) -> dict:
    return {
        "id": i.id,
        "category_id": i.category_id,
        "name": i.name,
        "description": i.description,
        "price": i.price,
        "allergens": list(i.allergens or []),
        "is_visible": bool(i.is_visible),
        "is_available": bool(i.is_available),
        "image_url": i.image_url,
        "order_index": i.order_index,
    }


def menu_category_to_dict(c: MenuCategory, include_hidden: bool = False) -> dict:
    items = [i for i in c.items if include_hidden or i.is_visible]
    return {
        "id": c.id,
        "pub_id": c.pub_id,
        "name": c.name,
        "description": c.description,
        "is_visible": bool(c.is_visible),
        "order_index": c.order_index,
        "items": [menu_item_to_dict(i) for i in items],
    }


def favorite_to_dict(f: Favorite, item: dict | None = None) -> dict:
    return {
        "id": f.id,
        "item_type": f.item_type,
        "item_id": f.item_id,
        "item": item,
        "created_at": isoformat(f.created_at),
    }


def tasting_to_dict(t: BeerTasting) -> dict:
    return {
        "id": t.id,
        "user_id": t.user_id,
        "beer_id": t.beer_id,
        "beer": beer_to_dict(t.beer) if t.beer else None,
        "pub_id": t.pub_id,
        "pub_name": t.pub.name if t.pub else None,
        "rating": t.rating,
        "format": t.format,
        "personal_notes": t.personal_notes,
        "tasted_at": isoformat(t.tasted_at),
        "created_at": isoformat(t.created_at),
    }


def review_to_dict(r: Review) -> dict:
    return {
        "id": r.id,
        "user_id": r.user_id,
        "user_name": (r.user.nickname or r.user.first_name) if r.user else None,
        "beer_id": r.beer_id,
        "beer_name": r.beer.name if r.beer else None,
        "pub_id": r.pub_id,
        "rating": r.rating,
        "comment": r.comment,
        "status": r.status,
        "reviewed_by": r.reviewed_by,
        "reviewed_at": isoformat(r.reviewed_at),
        "created_at": isoformat(r.created_at),
    }


def report_to_dict(r: Report) -> dict:
    return {
        "id": r.id,
        "reporter_id": r.reporter_id,
        "reporter_email": r.reporter.email if r.reporter else None,
        "target_type": r.target_type,
        "target_id": r.target_id,
        "reason": r.reason,
        "description": r.description,
        "status": r.status,
        "reviewed_by": r.reviewed_by,
        "reviewed_at": isoformat(r.reviewed_at),
        "created_at": isoformat(r.created_at),
    }


def publican_request_to_dict(r: PublicanRequest) -> dict:
    return {
        "id": r.id,
        "user_id": r.user_id,
        "user_email": r.user.email if r.user else None,
        "pub_name": r.pub_name,
        "pub_address": r.pub_address,
        "pub_city": r.pub_city,
        "pub_region": r.pub_region,
        "vat_number": r.vat_number,
        "phone": r.phone,
        "email": r.email,
        "description": r.description,
        "status": r.status,
        "admin_notes": r.admin_notes,
        "reviewed_by": r.reviewed_by,
        "reviewed_at": isoformat(r.reviewed_at),
        "pub_id": r.pub_id,
        "created_at": isoformat(r.created_at),
    }
