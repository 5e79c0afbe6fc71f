from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from streamerpulse.core.database import Base


class MediaMixin:
    """Columns shared by shorts and full-length videos."""
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    image = Column(String(500), nullable=False)
    video_url = Column(String(500), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)


class Short(MediaMixin, Base):
    __tablename__ = "shorts"


class Video(MediaMixin, Base):
    __tablename__ = "videos"
