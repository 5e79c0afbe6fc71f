from pydantic import BaseModel, Field
from datetime import datetime


class VisitorCreate(BaseModel):
    session_id: str = Field(..., min_length=1, max_length=200)


class VisitorResponse(BaseModel):
    id: int
    session_id: str
    created_at: datetime

    class Config:
        from_attributes = True


class LinkClickCreate(BaseModel):
    url: str = Field(..., min_length=1, max_length=2000)


class LinkClickResponse(BaseModel):
    id: int
    url: str
    created_at: datetime

    class Config:
        from_attributes = True
