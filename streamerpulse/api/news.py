"""
News feed endpoints.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from streamerpulse.api.deps import get_db, require_admin
from streamerpulse.schemas import content as content_schemas
from streamerpulse.services.content_service import content_service_obj

router = APIRouter(
    prefix="/news",
    tags=["news"],
    responses={404: {"description": "News item not found"}}
)


@router.get("", response_model=content_schemas.NewsList)
def list_news(db: Session = Depends(get_db)):
    """Get all news items, newest first."""
    return {"news": content_service_obj.list_news(db)}


@router.post(
    "",
    response_model=content_schemas.NewsResponse,
    status_code=201,
    dependencies=[Depends(require_admin)]
)
def create_news(news: content_schemas.NewsCreate, db: Session = Depends(get_db)):
    """Add a news item with an optional link."""
    return content_service_obj.create_news(db, news.text, news.link)


@router.delete("/{news_id}", dependencies=[Depends(require_admin)])
def delete_news(news_id: int, db: Session = Depends(get_db)):
    """Delete a news item."""
    content_service_obj.delete_news(db, news_id)
    return {"message": "News item deleted"}
