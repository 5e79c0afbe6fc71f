"""
Casino and slot review endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from streamerpulse.api.deps import get_db, require_admin
from streamerpulse.core.exceptions import InvalidContentType
from streamerpulse.schemas import content as content_schemas
from streamerpulse.services.content_service import content_service_obj

router = APIRouter(
    prefix="/reviews",
    tags=["reviews"],
    responses={404: {"description": "Review not found"}}
)


@router.get("", response_model=content_schemas.ReviewList)
def list_reviews(
        review_type: str = Query(None, alias="type", description="slot or casino"),
        db: Session = Depends(get_db)
):
    """Get the ten newest reviews of one type."""
    if review_type not in {t.value for t in content_schemas.ReviewType}:
        raise InvalidContentType("Invalid or missing review type")
    return {"reviews": content_service_obj.list_reviews(db, review_type)}


@router.post(
    "",
    response_model=content_schemas.ReviewResponse,
    status_code=201,
    dependencies=[Depends(require_admin)]
)
def create_review(review: content_schemas.ReviewCreate, db: Session = Depends(get_db)):
    """Create a review. The image must already be hosted at an http(s) URL."""
    fields = review.dict()
    fields["type"] = review.type.value
    return content_service_obj.create_review(db, **fields)


@router.put(
    "/{review_id}",
    response_model=content_schemas.ReviewResponse,
    dependencies=[Depends(require_admin)]
)
def update_review(review_id: int, review: content_schemas.ReviewUpdate, db: Session = Depends(get_db)):
    """Replace the fields of a review."""
    fields = review.dict()
    fields["type"] = review.type.value
    return content_service_obj.update_review(db, review_id, **fields)


@router.delete("/{review_id}", dependencies=[Depends(require_admin)])
def delete_review(review_id: int, db: Session = Depends(get_db)):
    """Delete a review."""
    content_service_obj.delete_review(db, review_id)
    return {"message": "Review deleted"}
