"""Admin back-office routes: users, content, moderation, analytics, maintenance."""
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from sqlalchemy import func
from fermentato.database import get_db
from fermentato.logging_config import get_logger
from fermentato.models import (
    Beer,
    BeerTasting,
    Brewery,
    Favorite,
    ItemType,
    OAuthAccount,
    Pub,
    PubRating,
    PublicanRequest,
    Report,
    ReportStatus,
    RequestStatus,
    Review,
    ReviewStatus,
    Role,
    TapListEntry,
    User,
)
from fermentato.schemas.catalog import BeerCreate, BeerUpdate, BreweryCreate, BreweryUpdate
from fermentato.schemas.pub import AdminPubUpdate
from fermentato.schemas.review import AdminDecision, RoleChange
from fermentato.serializers import (
    beer_to_dict,
    brewery_to_dict,
    pub_to_dict,
    publican_request_to_dict,
    report_to_dict,
    review_to_dict,
    user_to_dict,
)
from fermentato.services.brewery_unify import unify_breweries
from fermentato.services.catalog import create_beer, create_brewery
from fermentato.services.pubs import recompute_pub_rating
from fermentato.services.search import ilike_any, search_beers, search_breweries
from fermentato.services.seeding import DATASETS, run_dataset
from fermentato.services.sessions import destroy_user_sessions
from fermentato.middleware.auth import require_admin
from fermentato.utils import generate_id, utcnow

logger = get_logger("fermentato.routes.admin")

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def _page(rows: list, total: int, limit: int, offset: int, to_dict) -> dict:
    return {"data": [to_dict(r) for r in rows], "total": total, "limit": limit, "offset": offset}


def _get_or_404(db, model, obj_id: str, label: str):
    obj = db.query(model).filter(model.id == obj_id).first()
    if not obj:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return obj


# --- Users ---------------------------------------------------------------

@router.get("/users")
def list_users(
    q: str | None = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db=Depends(get_db),
):
    qry = db.query(User)
    if q and q.strip():
        qry = qry.filter(ilike_any((User.email, User.first_name, User.last_name, User.nickname), q.strip()))
    total = qry.count()
    users = qry.order_by(User.created_at.desc()).offset(offset).limit(limit).all()
    return _page(users, total, limit, offset, user_to_dict)


def _target_user(db, user_id: str, admin: User, action: str) -> User:
    if user_id == admin.id:
        raise HTTPException(status_code=400, detail=f"Cannot {action} your own account")
    return _get_or_404(db, User, user_id, "User")


@router.post("/users/{user_id}/suspend")
def suspend_user(user_id: str, admin: User = Depends(require_admin), db=Depends(get_db)):
    """Suspend an account and end all of its sessions."""
    user = _target_user(db, user_id, admin, "suspend")
    user.is_active = False
    destroy_user_sessions(db, user.id)
    db.commit()
    db.refresh(user)
    logger.info("Admin %s suspended user %s", admin.id, user.id)
    return user_to_dict(user)


@router.post("/users/{user_id}/activate")
def activate_user(user_id: str, admin: User = Depends(require_admin), db=Depends(get_db)):
    user = _target_user(db, user_id, admin, "activate")
    user.is_active = True
    db.commit()
    db.refresh(user)
    return user_to_dict(user)


@router.delete("/users/{user_id}", status_code=204)
def delete_user(user_id: str, admin: User = Depends(require_admin), db=Depends(get_db)):
    """Hard-delete a user and their personal data. Owned pubs are kept, without owner."""
    user = _target_user(db, user_id, admin, "delete")
    rated_pub_ids = [
        pub_id for (pub_id,) in db.query(PubRating.pub_id).filter(PubRating.user_id == user.id).distinct()
    ]
    for model, column in (
        (Favorite, Favorite.user_id),
        (BeerTasting, BeerTasting.user_id),
        (PubRating, PubRating.user_id),
        (Review, Review.user_id),
        (Report, Report.reporter_id),
        (PublicanRequest, PublicanRequest.user_id),
        (OAuthAccount, OAuthAccount.user_id),
    ):
        db.query(model).filter(column == user.id).delete(synchronize_session=False)
    db.query(Review).filter(Review.reviewed_by == user.id).update({Review.reviewed_by: None})
    db.query(Report).filter(Report.reviewed_by == user.id).update({Report.reviewed_by: None})
    db.query(PublicanRequest).filter(PublicanRequest.reviewed_by == user.id).update(
        {PublicanRequest.reviewed_by: None}
    )
    db.query(Pub).filter(Pub.owner_id == user.id).update({Pub.owner_id: None})
    for pub in db.query(Pub).filter(Pub.id.in_(rated_pub_ids)).all():
        recompute_pub_rating(db, pub)
    destroy_user_sessions(db, user.id)
    db.delete(user)
    db.commit()
    logger.info("Admin %s deleted user %s", admin.id, user_id)
    return Response(status_code=204)


@router.post("/users/{user_id}/roles")
def grant_role(user_id: str, data: RoleChange, db=Depends(get_db)):
    user = _get_or_404(db, User, user_id, "User")
    if not user.has_role(data.role):
        user.roles = [*(user.roles or []), data.role.value]
    db.commit()
    db.refresh(user)
    return user_to_dict(user)


@router.delete("/users/{user_id}/roles/{role}")
def revoke_role(user_id: str, role: Role, admin: User = Depends(require_admin), db=Depends(get_db)):
    user = _get_or_404(db, User, user_id, "User")
    if role == Role.admin and user.id == admin.id:
        raise HTTPException(status_code=400, detail="Cannot revoke your own admin role")
    remaining = [r for r in (user.roles or []) if r != role.value] or [Role.customer.value]
    user.roles = remaining
    if user.active_role not in remaining:
        user.active_role = remaining[0]
    db.commit()
    db.refresh(user)
    return user_to_dict(user)


# --- Pubs ----------------------------------------------------------------

def _admin_pub_dict(p: Pub) -> dict:
    d = pub_to_dict(p, private=True)
    d["owner"] = {"id": p.owner.id, "email": p.owner.email} if p.owner else None
    return d


@router.get("/pubs")
def list_pubs(
    q: str | None = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db=Depends(get_db),
):
    """All pubs, including suspended ones, with their owner."""
    qry = db.query(Pub)
    if q and q.strip():
        qry = qry.filter(ilike_any((Pub.name, Pub.city, Pub.address), q.strip()))
    total = qry.count()
    pubs = qry.order_by(Pub.created_at.desc()).offset(offset).limit(limit).all()
    return _page(pubs, total, limit, offset, _admin_pub_dict)


def _set_pub_flag(db, pub_id: str, **flags) -> dict:
    pub = _get_or_404(db, Pub, pub_id, "Pub")
    for field, value in flags.items():
        setattr(pub, field, value)
    db.commit()
    db.refresh(pub)
    return _admin_pub_dict(pub)


@router.post("/pubs/{pub_id}/verify")
def verify_pub(pub_id: str, db=Depends(get_db)):
    return _set_pub_flag(db, pub_id, is_verified=True)


@router.post("/pubs/{pub_id}/suspend")
def suspend_pub(pub_id: str, db=Depends(get_db)):
    return _set_pub_flag(db, pub_id, is_active=False)


@router.post("/pubs/{pub_id}/activate")
def activate_pub(pub_id: str, db=Depends(get_db)):
    return _set_pub_flag(db, pub_id, is_active=True)


@router.patch("/pubs/{pub_id}")
def update_pub(pub_id: str, data: AdminPubUpdate, db=Depends(get_db)):
    pub = _get_or_404(db, Pub, pub_id, "Pub")
    values = data.model_dump(mode="json", exclude_none=True)
    if "owner_id" in values:
        owner = _get_or_404(db, User, values["owner_id"], "Owner")
        if not owner.has_role(Role.pub_owner):
            owner.roles = [*(owner.roles or []), Role.pub_owner.value]
    for field, value in values.items():
        setattr(pub, field, value)
    db.commit()
    db.refresh(pub)
    return _admin_pub_dict(pub)


# --- Breweries and beers -------------------------------------------------

@router.get("/breweries")
def list_breweries(
    q: str | None = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db=Depends(get_db),
):
    breweries, total = search_breweries(db, q, limit=limit, offset=offset)
    return _page(breweries, total, limit, offset, brewery_to_dict)


@router.post("/breweries", status_code=201)
def admin_create_brewery(data: BreweryCreate, db=Depends(get_db)):
    return brewery_to_dict(create_brewery(db, data))


@router.patch("/breweries/{brewery_id}")
def update_brewery(brewery_id: str, data: BreweryUpdate, db=Depends(get_db)):
    brewery = _get_or_404(db, Brewery, brewery_id, "Brewery")
    for field, value in data.model_dump(exclude_none=True).items():
        setattr(brewery, field, value)
    db.commit()
    db.refresh(brewery)
    return brewery_to_dict(brewery)


@router.get("/beers")
def list_beers(
    q: str | None = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db=Depends(get_db),
):
    beers, total = search_beers(db, q, limit=limit, offset=offset)
    return _page(beers, total, limit, offset, beer_to_dict)


@router.post("/beers", status_code=201)
def admin_create_beer(data: BeerCreate, db=Depends(get_db)):
    return beer_to_dict(create_beer(db, data))


@router.patch("/beers/{beer_id}")
def update_beer(beer_id: str, data: BeerUpdate, db=Depends(get_db)):
    beer = _get_or_404(db, Beer, beer_id, "Beer")
    values = data.model_dump(exclude_none=True)
    if "brewery_id" in values:
        _get_or_404(db, Brewery, values["brewery_id"], "Brewery")
    for field, value in values.items():
        setattr(beer, field, value)
    db.commit()
    db.refresh(beer)
    return beer_to_dict(beer)


# --- Moderation ----------------------------------------------------------

@router.get("/reviews")
def list_reviews(
    status: ReviewStatus | None = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db=Depends(get_db),
):
    qry = db.query(Review)
    if status:
        qry = qry.filter(Review.status == status.value)
    total = qry.count()
    reviews = qry.order_by(Review.created_at.desc()).offset(offset).limit(limit).all()
    return _page(reviews, total, limit, offset, review_to_dict)


def _moderate_review(db, review_id: str, admin: User, status: ReviewStatus) -> dict:
    review = _get_or_404(db, Review, review_id, "Review")
    review.status = status.value
    review.reviewed_by = admin.id
    review.reviewed_at = utcnow()
    db.commit()
    db.refresh(review)
    return review_to_dict(review)


@router.post("/reviews/{review_id}/approve")
def approve_review(review_id: str, admin: User = Depends(require_admin), db=Depends(get_db)):
    return _moderate_review(db, review_id, admin, ReviewStatus.approved)


@router.post("/reviews/{review_id}/reject")
def reject_review(review_id: str, admin: User = Depends(require_admin), db=Depends(get_db)):
    return _moderate_review(db, review_id, admin, ReviewStatus.rejected)


@router.get("/reports")
def list_reports(
    status: ReportStatus | None = None,
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    db=Depends(get_db),
):
    qry = db.query(Report)
    if status:
        qry = qry.filter(Report.status == status.value)
    total = qry.count()
    reports = qry.order_by(Report.created_at.desc()).offset(offset).limit(limit).all()
    return _page(reports, total, limit, offset, report_to_dict)


def _close_report(db, report_id: str, admin: User, status: ReportStatus) -> dict:
    report = _get_or_404(db, Report, report_id, "Report")
    if report.status != ReportStatus.pending.value:
        raise HTTPException(status_code=400, detail="Report already closed")
    report.status = status.value
    report.reviewed_by = admin.id
    report.reviewed_at = utcnow()
    db.commit()
    db.refresh(report)
    return report_to_dict(report)


@router.post("/reports/{report_id}/resolve")
def resolve_report(report_id: str, admin: User = Depends(require_admin), db=Depends(get_db)):
    return _close_report(db, report_id, admin, ReportStatus.resolved)


@router.post("/reports/{report_id}/dismiss")
def dismiss_report(report_id: str, admin: User = Depends(require_admin), db=Depends(get_db)):
    return _close_report(db, report_id, admin, ReportStatus.dismissed)


# --- Publican requests ---------------------------------------------------

@router.get("/publican-requests")
def list_publican_requests(status: RequestStatus | None = None, db=Depends(get_db)):
    qry = db.query(PublicanRequest)
    if status:
        qry = qry.filter(PublicanRequest.status == status.value)
    return [publican_request_to_dict(r) for r in qry.order_by(PublicanRequest.created_at.desc()).all()]


def _pending_request(db, request_id: str) -> PublicanRequest:
    req = _get_or_404(db, PublicanRequest, request_id, "Publican request")
    if req.status != RequestStatus.pending.value:
        raise HTTPException(status_code=400, detail="Request already processed")
    return req


@router.post("/publican-requests/{request_id}/approve")
def approve_publican_request(
    request_id: str,
    data: AdminDecision,
    admin: User = Depends(require_admin),
    db=Depends(get_db),
):
    """Create the requested pub for the requester and make them a pub owner, in one commit."""
    req = _pending_request(db, request_id)
    pub = Pub(
        id=generate_id(),
        name=req.pub_name,
        address=req.pub_address,
        city=req.pub_city,
        region=req.pub_region or "",
        phone=req.phone,
        email=req.email,
        description=req.description,
        vat_number=req.vat_number,
        owner_id=req.user_id,
        is_active=True,
        is_verified=True,
        rating=0,
    )
    db.add(pub)
    db.flush()
    user = req.user
    if user and not user.has_role(Role.pub_owner):
        user.roles = [*(user.roles or []), Role.pub_owner.value]
    req.status = RequestStatus.approved.value
    req.admin_notes = data.admin_notes
    req.reviewed_by = admin.id
    req.reviewed_at = utcnow()
    req.pub_id = pub.id
    db.commit()
    db.refresh(req)
    logger.info("Admin %s approved publican request %s (pub %s)", admin.id, req.id, pub.id)
    return publican_request_to_dict(req)


@router.post("/publican-requests/{request_id}/reject")
def reject_publican_request(
    request_id: str,
    data: AdminDecision,
    admin: User = Depends(require_admin),
    db=Depends(get_db),
):
    req = _pending_request(db, request_id)
    req.status = RequestStatus.rejected.value
    req.admin_notes = data.admin_notes
    req.reviewed_by = admin.id
    req.reviewed_at = utcnow()
    db.commit()
    db.refresh(req)
    return publican_request_to_dict(req)


# --- Analytics -----------------------------------------------------------

def _month_starts(now: datetime, months: int) -> list[datetime]:
    """First day of each of the last `months` months, oldest first."""
    starts = []
    year, month = now.year, now.month
    for _ in range(months):
        starts.append(datetime(year, month, 1))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return list(reversed(starts))


def _popular_beers(db, limit: int = 10) -> list[dict]:
    scores: dict[str, dict] = {}
    fav_rows = (
        db.query(Favorite.item_id, func.count(Favorite.id))
        .filter(Favorite.item_type == ItemType.beer.value)
        .group_by(Favorite.item_id)
        .all()
    )
    for beer_id, n in fav_rows:
        scores.setdefault(beer_id, {"favorites": 0, "tastings": 0})["favorites"] = n
    tasting_rows = db.query(BeerTasting.beer_id, func.count(BeerTasting.id)).group_by(BeerTasting.beer_id).all()
    for beer_id, n in tasting_rows:
        scores.setdefault(beer_id, {"favorites": 0, "tastings": 0})["tastings"] = n
    ranked = sorted(scores.items(), key=lambda kv: -(kv[1]["favorites"] + kv[1]["tastings"]))[:limit]
    beers = {b.id: b for b in db.query(Beer).filter(Beer.id.in_([bid for bid, _ in ranked])).all()}
    return [
        {
            "beer_id": bid,
            "name": beers[bid].name,
            "brewery": beers[bid].brewery.name if beers[bid].brewery else None,
            "favorites": s["favorites"],
            "tastings": s["tastings"],
            "score": s["favorites"] + s["tastings"],
        }
        for bid, s in ranked
        if bid in beers
    ]


@router.get("/analytics")
def get_analytics(db=Depends(get_db)):
    """Platform overview: totals, 30-day growth, 6-month growth, popular beers."""
    now = utcnow()
    thirty_days_ago = now - timedelta(days=30)

    counts = {
        "users": db.query(User).count(),
        "pubs": db.query(Pub).count(),
        "active_pubs": db.query(Pub).filter(Pub.is_active.is_(True)).count(),
        "verified_pubs": db.query(Pub).filter(Pub.is_verified.is_(True)).count(),
        "breweries": db.query(Brewery).count(),
        "beers": db.query(Beer).count(),
        "active_taps": db.query(TapListEntry).filter(TapListEntry.is_active.is_(True)).count(),
        "tastings": db.query(BeerTasting).count(),
        "favorites": db.query(Favorite).count(),
        "pending_reviews": db.query(Review).filter(Review.status == ReviewStatus.pending.value).count(),
        "pending_reports": db.query(Report).filter(Report.status == ReportStatus.pending.value).count(),
        "pending_publican_requests": db.query(PublicanRequest)
        .filter(PublicanRequest.status == RequestStatus.pending.value)
        .count(),
    }

    last_30_days = {
        "new_users": db.query(User).filter(User.created_at >= thirty_days_ago).count(),
        "new_pubs": db.query(Pub).filter(Pub.created_at >= thirty_days_ago).count(),
        "tastings": db.query(BeerTasting).filter(BeerTasting.created_at >= thirty_days_ago).count(),
    }

    monthly_growth = []
    starts = _month_starts(now, 6)
    for i, start in enumerate(starts):
        end = starts[i + 1] if i + 1 < len(starts) else now + timedelta(seconds=1)
        monthly_growth.append({
            "month": start.strftime("%Y-%m"),
            "users": db.query(User).filter(User.created_at >= start, User.created_at < end).count(),
            "pubs": db.query(Pub).filter(Pub.created_at >= start, Pub.created_at < end).count(),
        })

    return {
        "counts": counts,
        "last_30_days": last_30_days,
        "monthly_growth": monthly_growth,
        "popular_beers": _popular_beers(db),
    }


# --- Maintenance ---------------------------------------------------------

@router.post("/unify-breweries")
def run_unify_breweries(db=Depends(get_db)):
    """Merge breweries whose names match once decoration words are stripped."""
    result = unify_breweries(db)
    return {"message": "ok", **result}


@router.post("/seed/{dataset}")
def run_seed(dataset: str, db=Depends(get_db)):
    if dataset not in DATASETS:
        raise HTTPException(status_code=404, detail=f"Unknown dataset: {dataset}")
    return run_dataset(db, dataset)
