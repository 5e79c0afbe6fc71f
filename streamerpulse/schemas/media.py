from pydantic import BaseModel, Field, validator
from typing import List
from datetime import datetime

from streamerpulse.schemas.content import check_url


class MediaCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    image: str = Field(..., description="http(s) URL of the thumbnail")
    videoUrl: str = Field(..., description="http(s) URL of the video")

    @validator("title", "description")
    def strip_text(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v

    @validator("image", "videoUrl")
    def check_links(cls, v):
        return check_url(v)


class MediaResponse(BaseModel):
    id: int
    title: str
    description: str
    image: str
    videoUrl: str = Field(..., validation_alias="video_url")
    created_at: datetime

    class Config:
        from_attributes = True


class ShortList(BaseModel):
    shorts: List[MediaResponse]


class VideoList(BaseModel):
    videos: List[MediaResponse]
