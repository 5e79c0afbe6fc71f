from pydantic import BaseModel, Field, validator
from typing import List, Optional
from datetime import datetime
from enum import Enum
import re

EMAIL_RE = re.compile(r"^\S+@\S+\.\S+$")


def normalize_email(value: str) -> str:
    value = value.strip().lower()
    if not EMAIL_RE.match(value):
        raise ValueError("Invalid email format")
    return value


class GiveawayContentType(str, Enum):
    REWARDS = "rewards"
    RULES = "rules"


class EntryCreate(BaseModel):
    affiliate_username: str = Field(..., min_length=1, max_length=100, description="Username on the affiliate casino")
    affiliate_user_id: str = Field(..., min_length=1, max_length=100, description="User id on the affiliate casino")
    email: str = Field(..., min_length=3, max_length=254)

    @validator("affiliate_username", "affiliate_user_id")
    def strip_required(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v

    @validator("email")
    def check_email(cls, v):
        return normalize_email(v)


class SpinCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    prize: str = Field(..., min_length=1, max_length=100)

    @validator("email")
    def check_email(cls, v):
        return normalize_email(v)

    @validator("prize")
    def strip_prize(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Prize is required")
        return v


class SubmissionResponse(BaseModel):
    success: bool = True
    message: str


class SpinResponse(SubmissionResponse):
    prize: str


class EntryResponse(BaseModel):
    id: int
    affiliate_username: str
    affiliate_user_id: str
    email: str
    deposit_amount: float
    prize: Optional[str] = None
    entered_at: datetime

    class Config:
        from_attributes = True


class EntryList(BaseModel):
    success: bool = True
    count: int
    entries: List[EntryResponse]


class ContentCreate(BaseModel):
    type: GiveawayContentType
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=2000)
    image_url: Optional[str] = Field(None, max_length=500)


class ContentItem(BaseModel):
    title: str
    description: str
    image_url: str = ""


class ContentResponse(BaseModel):
    id: int
    type: GiveawayContentType
    title: str
    description: str
    image_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class ContentItems(BaseModel):
    items: List[ContentItem]
