from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from streamerpulse.core.database import Base


class Visitor(Base):
    __tablename__ = "visitors"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    session_id = Column(String(200), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class LinkClick(Base):
    __tablename__ = "link_clicks"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    url = Column(String(2000), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
