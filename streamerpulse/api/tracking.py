"""
Visitor and link click tracking endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from streamerpulse.api.deps import get_db, require_admin
from streamerpulse.schemas import tracking as tracking_schemas
from streamerpulse.services.tracking_service import tracking_service_obj

router = APIRouter(
    prefix="/tracking",
    tags=["tracking"]
)


@router.post("/visitors", status_code=201)
def track_visitor(visitor: tracking_schemas.VisitorCreate, db: Session = Depends(get_db)):
    tracking_service_obj.track_visitor(db, visitor.session_id)
    return {"message": "Visitor tracked"}


@router.get(
    "/visitors",
    response_model=List[tracking_schemas.VisitorResponse],
    dependencies=[Depends(require_admin)]
)
def list_visitors(db: Session = Depends(get_db)):
    return tracking_service_obj.list_visitors(db)


@router.post("/link-clicks", status_code=201)
def track_link_click(click: tracking_schemas.LinkClickCreate, db: Session = Depends(get_db)):
    tracking_service_obj.track_link_click(db, click.url)
    return {"message": "Link click tracked"}


@router.get(
    "/link-clicks",
    response_model=List[tracking_schemas.LinkClickResponse],
    dependencies=[Depends(require_admin)]
)
def list_link_clicks(db: Session = Depends(get_db)):
    return tracking_service_obj.list_link_clicks(db)
