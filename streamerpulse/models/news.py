from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from streamerpulse.core.database import Base


class News(Base):
    __tablename__ = "news"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    text = Column(Text, nullable=False)
    link = Column(String(500))
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
