"""
Stream shorts endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from streamerpulse.api.deps import get_db, require_admin
from streamerpulse.schemas import media as media_schemas
from streamerpulse.services.media_service import shorts_service_obj

router = APIRouter(
    prefix="/shorts",
    tags=["shorts"],
    responses={404: {"description": "Short not found"}}
)


@router.get("", response_model=media_schemas.ShortList)
def list_shorts(db: Session = Depends(get_db)):
    """Get all shorts, newest first."""
    return {"shorts": shorts_service_obj.list_media(db)}


@router.post(
    "",
    response_model=media_schemas.MediaResponse,
    status_code=201,
    dependencies=[Depends(require_admin)]
)
def create_short(item: media_schemas.MediaCreate, db: Session = Depends(get_db)):
    """Add a short. The thumbnail must already be hosted at an http(s) URL."""
    return shorts_service_obj.create_media(db, item.title, item.description, item.image, item.videoUrl)


@router.delete("/{short_id}", dependencies=[Depends(require_admin)])
def delete_short(short_id: int, db: Session = Depends(get_db)):
    """Delete a short."""
    shorts_service_obj.delete_media(db, short_id)
    return {"message": "Short deleted"}
