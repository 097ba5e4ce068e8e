"""Beer reviews and content reports submitted by users."""
from fastapi import APIRouter, Depends, HTTPException, Query

from fermentato.database import get_db
from fermentato.models import Beer, Pub, Report, ReportTarget, Review, ReviewStatus, User
from fermentato.schemas.review import ReportCreate, ReviewCreate
from fermentato.serializers import report_to_dict, review_to_dict
from fermentato.middleware.auth import get_current_user_required
from fermentato.utils import generate_id

router = APIRouter(tags=["reviews"])

REPORT_TARGETS = {
    ReportTarget.review: Review,
    ReportTarget.user: User,
    ReportTarget.pub: Pub,
    ReportTarget.beer: Beer,
}


@router.post("/reviews", status_code=201)
def create_review(
    data: ReviewCreate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    """Submit a review. It stays hidden until an admin approves it."""
    if not db.query(Beer).filter(Beer.id == data.beer_id).first():
        raise HTTPException(status_code=404, detail="Beer not found")
    if data.pub_id and not db.query(Pub).filter(Pub.id == data.pub_id).first():
        raise HTTPException(status_code=404, detail="Pub not found")
    review = Review(
        id=generate_id(),
        user_id=user.id,
        beer_id=data.beer_id,
        pub_id=data.pub_id,
        rating=data.rating,
        comment=data.comment,
        status=ReviewStatus.pending.value,
    )
    db.add(review)
    db.commit()
    db.refresh(review)
    return review_to_dict(review)


@router.get("/beers/{beer_id}/reviews")
def get_beer_reviews(
    beer_id: str,
    limit: int = Query(20, ge=1, le=50),
    offset: int = Query(0, ge=0),
    db=Depends(get_db),
):
    if not db.query(Beer).filter(Beer.id == beer_id).first():
        raise HTTPException(status_code=404, detail="Beer not found")
    qry = db.query(Review).filter(Review.beer_id == beer_id, Review.status == ReviewStatus.approved.value)
    total = qry.count()
    reviews = qry.order_by(Review.created_at.desc()).offset(offset).limit(limit).all()
    return {"data": [review_to_dict(r) for r in reviews], "total": total, "limit": limit, "offset": offset}


@router.post("/reports", status_code=201)
def create_report(
    data: ReportCreate,
    user: User = Depends(get_current_user_required),
    db=Depends(get_db),
):
    model = REPORT_TARGETS[data.target_type]
    if not db.query(model).filter(model.id == data.target_id).first():
        raise HTTPException(status_code=404, detail=f"{data.target_type.value.capitalize()} not found")
    report = Report(
        id=generate_id(),
        reporter_id=user.id,
        target_type=data.target_type.value,
        target_id=data.target_id,
        reason=data.reason,
        description=data.description,
    )
    db.add(report)
    db.commit()
    db.refresh(report)
    return report_to_dict(report)
