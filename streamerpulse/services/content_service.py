import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from streamerpulse.core.exceptions import ContentNotFound
from streamerpulse.models.news import News
from streamerpulse.models.review import Review
from streamerpulse.models.schedule import ScheduleEvent

logger = logging.getLogger(__name__)

REVIEWS_PER_PAGE = 10


class ContentService:
    """News feed, stream schedule and casino/slot reviews."""

    def list_news(self, db: Session) -> List[News]:
        return db.query(News).order_by(News.created_at.desc(), News.id.desc()).all()

    def create_news(self, db: Session, text: str, link: Optional[str] = None) -> News:
        news = News(text=text, link=link)
        db.add(news)
        db.commit()
        db.refresh(news)
        logger.info(f"Created news item {news.id}")
        return news

    def delete_news(self, db: Session, news_id: int) -> None:
        news = db.query(News).filter(News.id == news_id).first()
        if not news:
            raise ContentNotFound(f"News item {news_id} not found")
        db.delete(news)
        db.commit()

    def list_schedule(self, db: Session) -> List[ScheduleEvent]:
        return db.query(ScheduleEvent).order_by(ScheduleEvent.date.asc(), ScheduleEvent.id.asc()).all()

    def create_event(self, db: Session, title: str, date: datetime, description: Optional[str] = None) -> ScheduleEvent:
        event = ScheduleEvent(title=title.strip(), date=date, description=description)
        db.add(event)
        db.commit()
        db.refresh(event)
        logger.info(f"Scheduled event {event.id} '{event.title}' at {date}")
        return event

    def list_reviews(self, db: Session, review_type: str) -> List[Review]:
        return db.query(Review).filter(
            Review.type == review_type
        ).order_by(
            Review.created_at.desc(),
            Review.id.desc()
        ).limit(REVIEWS_PER_PAGE).all()

    def create_review(self, db: Session, **fields) -> Review:
        review = Review(**fields)
        db.add(review)
        db.commit()
        db.refresh(review)
        logger.info(f"Created {review.type} review {review.id}")
        return review

    def update_review(self, db: Session, review_id: int, **fields) -> Review:
        review = self._get_review(db, review_id)
        for key, value in fields.items():
            setattr(review, key, value)
        db.commit()
        db.refresh(review)
        return review

    def delete_review(self, db: Session, review_id: int) -> None:
        review = self._get_review(db, review_id)
        db.delete(review)
        db.commit()

    def _get_review(self, db: Session, review_id: int) -> Review:
        review = db.query(Review).filter(Review.id == review_id).first()
        if not review:
            raise ContentNotFound(f"Review {review_id} not found")
        return review


content_service_obj = ContentService()
