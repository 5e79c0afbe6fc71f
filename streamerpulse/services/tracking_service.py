from typing import List

from sqlalchemy.orm import Session

from streamerpulse.models.tracking import LinkClick, Visitor


class TrackingService:
    """Anonymous visit and outbound link counters."""

    def track_visitor(self, db: Session, session_id: str) -> Visitor:
        visitor = Visitor(session_id=session_id)
        db.add(visitor)
        db.commit()
        db.refresh(visitor)
        return visitor

    def list_visitors(self, db: Session) -> List[Visitor]:
        return db.query(Visitor).order_by(Visitor.id.asc()).all()

    def track_link_click(self, db: Session, url: str) -> LinkClick:
        click = LinkClick(url=url)
        db.add(click)
        db.commit()
        db.refresh(click)
        return click

    def list_link_clicks(self, db: Session) -> List[LinkClick]:
        return db.query(LinkClick).order_by(LinkClick.id.asc()).all()


tracking_service_obj = TrackingService()
