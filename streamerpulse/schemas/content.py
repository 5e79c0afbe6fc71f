from pydantic import BaseModel, Field, validator
from typing import List, Optional
from datetime import datetime
from enum import Enum
import re

URL_RE = re.compile(r"^https?://\S+$")


def check_url(value: str) -> str:
    value = value.strip()
    if not URL_RE.match(value):
        raise ValueError("Valid http(s) URL is required")
    return value


class ReviewType(str, Enum):
    SLOT = "slot"
    CASINO = "casino"


class NewsCreate(BaseModel):
    text: str = Field(..., min_length=1, description="News text")
    link: Optional[str] = Field(None, description="Optional http(s) link")

    @validator("text")
    def strip_text(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("News text is required")
        return v

    @validator("link")
    def check_link(cls, v):
        if v is None or not v.strip():
            return None
        return check_url(v)


class NewsResponse(BaseModel):
    id: int
    text: str
    link: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class NewsList(BaseModel):
    news: List[NewsResponse]


class ScheduleCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    date: datetime
    description: Optional[str] = None


class ScheduleResponse(BaseModel):
    id: int
    title: str
    date: datetime
    description: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class ReviewBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    type: ReviewType
    image: str = Field(..., description="http(s) URL of the review image")
    rating: float = Field(..., ge=1, le=5)
    description: str = Field(..., min_length=1, max_length=1000)

    @validator("image")
    def check_image(cls, v):
        return check_url(v)

    @validator("title", "description")
    def strip_text(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v


class ReviewCreate(ReviewBase):
    pass


class ReviewUpdate(ReviewBase):
    pass


class ReviewResponse(BaseModel):
    id: int
    title: str
    type: ReviewType
    image: str
    rating: float
    description: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ReviewList(BaseModel):
    reviews: List[ReviewResponse]
