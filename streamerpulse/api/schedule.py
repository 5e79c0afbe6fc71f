"""
Stream schedule endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from streamerpulse.api.deps import get_db, require_admin
from streamerpulse.schemas import content as content_schemas
from streamerpulse.services.content_service import content_service_obj

router = APIRouter(
    prefix="/schedule",
    tags=["schedule"]
)


@router.get("", response_model=List[content_schemas.ScheduleResponse])
def list_schedule(db: Session = Depends(get_db)):
    """Get scheduled streams in date order."""
    return content_service_obj.list_schedule(db)


@router.post(
    "",
    response_model=content_schemas.ScheduleResponse,
    status_code=201,
    dependencies=[Depends(require_admin)]
)
def create_event(event: content_schemas.ScheduleCreate, db: Session = Depends(get_db)):
    """Schedule a stream. Title and date are required."""
    return content_service_obj.create_event(db, event.title, event.date, event.description)
