import logging
from typing import List

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from streamerpulse.core.exceptions import (
    AlreadySpun, ContentNotFound, DuplicateEntry, EntryNotFound
)
from streamerpulse.models.giveaway import DEPOSIT_AMOUNT, GiveawayContent, GiveawayEntry

logger = logging.getLogger(__name__)


class GiveawayService:

    def submit_entry(self, db: Session, affiliate_username: str, affiliate_user_id: str, email: str) -> GiveawayEntry:
        """Register a giveaway entry. One entry per email and per affiliate user id."""
        existing = db.query(GiveawayEntry).filter(
            or_(
                GiveawayEntry.email == email,
                GiveawayEntry.affiliate_user_id == affiliate_user_id
            )
        ).first()
        if existing:
            raise DuplicateEntry("Email or affiliate user ID already registered")

        entry = GiveawayEntry(
            email=email,
            affiliate_username=affiliate_username,
            affiliate_user_id=affiliate_user_id,
            deposit_amount=DEPOSIT_AMOUNT,
            prize=None
        )
        db.add(entry)
        try:
            db.commit()
        except IntegrityError:
            # Lost a race with a concurrent submission for the same keys
            db.rollback()
            raise DuplicateEntry("Email or affiliate user ID already registered")
        db.refresh(entry)

        logger.info(f"Giveaway entry {entry.id} saved for {email} ({affiliate_user_id})")
        return entry

    def record_spin(self, db: Session, email: str, prize: str) -> GiveawayEntry:
        """Record the wheel result for an entry. Each email can spin once."""
        entry = db.query(GiveawayEntry).filter(GiveawayEntry.email == email).first()
        if not entry:
            raise EntryNotFound("No entry found for this email")
        if entry.prize:
            raise AlreadySpun("You have already spun the wheel")

        # Conditional update so two concurrent spins cannot both win
        updated = db.query(GiveawayEntry).filter(
            GiveawayEntry.id == entry.id,
            GiveawayEntry.prize.is_(None)
        ).update({"prize": prize}, synchronize_session=False)
        db.commit()
        if not updated:
            raise AlreadySpun("You have already spun the wheel")
        db.refresh(entry)

        logger.info(f"Spin result saved for {email}: {prize}")
        return entry

    def list_entries(self, db: Session) -> List[GiveawayEntry]:
        return db.query(GiveawayEntry).order_by(
            GiveawayEntry.entered_at.desc(),
            GiveawayEntry.id.desc()
        ).all()

    def get_content(self, db: Session, content_type: str) -> List[GiveawayContent]:
        return db.query(GiveawayContent).filter(
            GiveawayContent.type == content_type
        ).order_by(GiveawayContent.id.asc()).all()

    def create_content(self, db: Session, content_type: str, title: str, description: str,
                       image_url: str = None) -> GiveawayContent:
        content = GiveawayContent(
            type=content_type,
            title=title.strip(),
            description=description.strip(),
            image_url=image_url.strip() if image_url else None
        )
        db.add(content)
        db.commit()
        db.refresh(content)
        logger.info(f"Created giveaway {content_type} content {content.id}")
        return content

    def delete_content(self, db: Session, content_id: int) -> None:
        content = db.query(GiveawayContent).filter(GiveawayContent.id == content_id).first()
        if not content:
            raise ContentNotFound(f"Giveaway content {content_id} not found")
        db.delete(content)
        db.commit()


giveaway_service_obj = GiveawayService()
