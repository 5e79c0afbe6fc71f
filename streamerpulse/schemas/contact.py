from pydantic import BaseModel, Field, validator
from typing import Optional
from datetime import datetime

from streamerpulse.schemas.giveaway import normalize_email


class ContactCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=254)
    phone: Optional[str] = Field(None, max_length=50)
    message: str = Field(..., min_length=1, max_length=5000)

    @validator("first_name", "last_name", "message")
    def strip_required(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v

    @validator("email")
    def check_email(cls, v):
        return normalize_email(v)

    @validator("phone")
    def strip_phone(cls, v):
        if v is None:
            return None
        return v.strip() or None


class ContactResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    message: str
    created_at: datetime

    class Config:
        from_attributes = True
