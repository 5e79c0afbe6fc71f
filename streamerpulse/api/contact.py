"""
Contact form endpoints.
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from streamerpulse.api.deps import get_db, require_admin
from streamerpulse.schemas import contact as contact_schemas
from streamerpulse.services.contact_service import contact_service_obj

router = APIRouter(
    prefix="/contact",
    tags=["contact"],
    responses={404: {"description": "Contact not found"}}
)


@router.post("", status_code=201)
def send_message(contact: contact_schemas.ContactCreate, db: Session = Depends(get_db)):
    """Store a message from the contact form."""
    contact_service_obj.create_contact(
        db,
        first_name=contact.first_name,
        last_name=contact.last_name,
        email=contact.email,
        phone=contact.phone,
        message=contact.message
    )
    return {"message": "Message sent successfully!"}


@router.get(
    "",
    response_model=List[contact_schemas.ContactResponse],
    dependencies=[Depends(require_admin)]
)
def list_messages(db: Session = Depends(get_db)):
    """List contact messages, newest first."""
    return contact_service_obj.list_contacts(db)


@router.delete("/{contact_id}", dependencies=[Depends(require_admin)])
def delete_message(contact_id: int, db: Session = Depends(get_db)):
    """Delete a contact message."""
    contact_service_obj.delete_contact(db, contact_id)
    return {"message": "Contact deleted"}
