from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from streamerpulse.core.database import Base


class LeaderboardCache(Base):
    __tablename__ = "leaderboard_cache"

    cache_key = Column(String(100), primary_key=True)
    source = Column(String(20), nullable=False)
    data = Column(Text, nullable=False)  # JSON list of entries
    fetched_at = Column(DateTime, nullable=False)
    expires_at = Column(DateTime, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
