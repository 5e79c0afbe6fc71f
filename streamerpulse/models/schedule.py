from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from streamerpulse.core.database import Base


class ScheduleEvent(Base):
    __tablename__ = "schedule_events"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
