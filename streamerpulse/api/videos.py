"""
Full-length stream video endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from streamerpulse.api.deps import get_db, require_admin
from streamerpulse.schemas import media as media_schemas
from streamerpulse.services.media_service import videos_service_obj

router = APIRouter(
    prefix="/videos",
    tags=["videos"],
    responses={404: {"description": "Video not found"}}
)


@router.get("", response_model=media_schemas.VideoList)
def list_videos(db: Session = Depends(get_db)):
    """Get all videos, newest first."""
    return {"videos": videos_service_obj.list_media(db)}


@router.post(
    "",
    response_model=media_schemas.MediaResponse,
    status_code=201,
    dependencies=[Depends(require_admin)]
)
def create_video(item: media_schemas.MediaCreate, db: Session = Depends(get_db)):
    """Add a video. The thumbnail must already be hosted at an http(s) URL."""
    return videos_service_obj.create_media(db, item.title, item.description, item.image, item.videoUrl)


@router.delete("/{video_id}", dependencies=[Depends(require_admin)])
def delete_video(video_id: int, db: Session = Depends(get_db)):
    """Delete a video."""
    videos_service_obj.delete_media(db, video_id)
    return {"message": "Video deleted"}
