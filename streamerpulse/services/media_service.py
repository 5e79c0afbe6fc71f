import logging
from typing import List

from sqlalchemy.orm import Session

from streamerpulse.core.exceptions import ContentNotFound
from streamerpulse.models.media import Short, Video

logger = logging.getLogger(__name__)


class MediaService:
    """Stream highlights: one instance per media table."""

    def __init__(self, model, label: str):
        self.model = model
        self.label = label

    def list_media(self, db: Session) -> List:
        return db.query(self.model).order_by(self.model.created_at.desc(), self.model.id.desc()).all()

    def create_media(self, db: Session, title: str, description: str, image: str, video_url: str):
        item = self.model(title=title, description=description, image=image, video_url=video_url)
        db.add(item)
        db.commit()
        db.refresh(item)
        logger.info(f"Created {self.label} {item.id} '{item.title}'")
        return item

    def delete_media(self, db: Session, media_id: int) -> None:
        item = db.query(self.model).filter(self.model.id == media_id).first()
        if not item:
            raise ContentNotFound(f"{self.label.capitalize()} {media_id} not found")
        db.delete(item)
        db.commit()
        logger.info(f"Deleted {self.label} {media_id}")


shorts_service_obj = MediaService(Short, "short")
videos_service_obj = MediaService(Video, "video")
