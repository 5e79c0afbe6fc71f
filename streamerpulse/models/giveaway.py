from sqlalchemy import Column, Integer, String, Text, DateTime, Float
from sqlalchemy.sql import func

from streamerpulse.core.database import Base

DEPOSIT_AMOUNT = 20


class GiveawayEntry(Base):
    __tablename__ = "giveaway_entries"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String(254), unique=True, nullable=False, index=True)
    affiliate_username = Column(String(100), nullable=False)
    affiliate_user_id = Column(String(100), unique=True, nullable=False, index=True)
    deposit_amount = Column(Float, nullable=False, default=DEPOSIT_AMOUNT)
    prize = Column(String(100))  # set once by the wheel spin
    entered_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)


class GiveawayContent(Base):
    __tablename__ = "giveaway_contents"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    type = Column(String(20), nullable=False, index=True)  # "rewards" or "rules"
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String(500))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
