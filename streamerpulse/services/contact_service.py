import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from streamerpulse.core.exceptions import ContentNotFound
from streamerpulse.models.contact import Contact

logger = logging.getLogger(__name__)


class ContactService:

    def create_contact(self, db: Session, first_name: str, last_name: str, email: str,
                       message: str, phone: Optional[str] = None) -> Contact:
        contact = Contact(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            message=message
        )
        db.add(contact)
        db.commit()
        db.refresh(contact)
        logger.info(f"Contact message {contact.id} received from {email}")
        return contact

    def list_contacts(self, db: Session) -> List[Contact]:
        return db.query(Contact).order_by(Contact.created_at.desc(), Contact.id.desc()).all()

    def delete_contact(self, db: Session, contact_id: int) -> None:
        contact = db.query(Contact).filter(Contact.id == contact_id).first()
        if not contact:
            raise ContentNotFound(f"Contact {contact_id} not found")
        db.delete(contact)
        db.commit()


contact_service_obj = ContactService()
