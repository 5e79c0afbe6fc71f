"""
Giveaway API endpoints: content, entries and wheel spins.
"""
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from streamerpulse.api.deps import get_db, require_admin
from streamerpulse.core.exceptions import InvalidContentType
from streamerpulse.schemas import giveaway as giveaway_schemas
from streamerpulse.services.giveaway_service import giveaway_service_obj

router = APIRouter(
    prefix="/giveaway",
    tags=["giveaway"]
)

content_router = APIRouter(
    prefix="/giveaway-content",
    tags=["giveaway"],
    dependencies=[Depends(require_admin)],
    responses={404: {"description": "Content not found"}}
)


@router.get("/content", response_model=giveaway_schemas.ContentItems)
def get_giveaway_content(
        content_type: str = Query(..., alias="type", description="rewards or rules"),
        db: Session = Depends(get_db)
):
    """Get the rewards or rules blocks shown on the giveaway page."""
    if content_type not in {t.value for t in giveaway_schemas.GiveawayContentType}:
        raise InvalidContentType('Invalid type. Use "rewards" or "rules".')
    docs = giveaway_service_obj.get_content(db, content_type)
    return {
        "items": [
            {"title": d.title, "description": d.description, "image_url": d.image_url or ""}
            for d in docs
        ]
    }


@router.post("/submit-entry", response_model=giveaway_schemas.SubmissionResponse)
def submit_entry(
        entry: giveaway_schemas.EntryCreate,
        db: Session = Depends(get_db)
):
    """
    Enter the giveaway.

    Each email and each affiliate user id can enter only once.
    """
    giveaway_service_obj.submit_entry(
        db,
        affiliate_username=entry.affiliate_username,
        affiliate_user_id=entry.affiliate_user_id,
        email=entry.email
    )
    return {"success": True, "message": "Entry submitted successfully!"}


@router.post("/spin-result", response_model=giveaway_schemas.SpinResponse)
def submit_spin_result(
        spin: giveaway_schemas.SpinCreate,
        db: Session = Depends(get_db)
):
    """
    Record the prize won on the wheel.

    Requires an existing entry for the email; a second spin is rejected.
    """
    entry = giveaway_service_obj.record_spin(db, spin.email, spin.prize)
    return {"success": True, "message": "Prize recorded!", "prize": entry.prize}


@router.get(
    "/entries",
    response_model=giveaway_schemas.EntryList,
    dependencies=[Depends(require_admin)]
)
def get_entries(db: Session = Depends(get_db)):
    """List all giveaway entries, newest first."""
    entries = giveaway_service_obj.list_entries(db)
    return {"success": True, "count": len(entries), "entries": entries}


@content_router.post("", response_model=giveaway_schemas.ContentResponse, status_code=201)
def create_content(
        content: giveaway_schemas.ContentCreate,
        db: Session = Depends(get_db)
):
    """Add a rewards or rules block."""
    return giveaway_service_obj.create_content(
        db,
        content_type=content.type.value,
        title=content.title,
        description=content.description,
        image_url=content.image_url
    )


@content_router.get("", response_model=List[giveaway_schemas.ContentResponse])
def list_content(
        content_type: giveaway_schemas.GiveawayContentType = Query(..., alias="type", description="rewards or rules"),
        db: Session = Depends(get_db)
):
    """List content blocks of one type with their ids."""
    return giveaway_service_obj.get_content(db, content_type.value)


@content_router.delete("/{content_id}")
def delete_content(content_id: int, db: Session = Depends(get_db)):
    """Delete a content block."""
    giveaway_service_obj.delete_content(db, content_id)
    return {"message": "Giveaway content deleted"}
