"""
Router registration for the StreamerPulse API.
"""
from fastapi import FastAPI

from streamerpulse.api import (
    contact, giveaway, health, leaderboard, news, reviews, schedule, shorts, tracking, videos
)


def include_routers(app: FastAPI) -> None:
    """Include all API routers with the FastAPI application."""
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(leaderboard.router, prefix="/api", tags=["leaderboard"])
    app.include_router(giveaway.router, prefix="/api", tags=["giveaway"])
    app.include_router(giveaway.content_router, prefix="/api", tags=["giveaway"])
    app.include_router(news.router, prefix="/api", tags=["news"])
    app.include_router(schedule.router, prefix="/api", tags=["schedule"])
    app.include_router(reviews.router, prefix="/api", tags=["reviews"])
    app.include_router(shorts.router, prefix="/api", tags=["shorts"])
    app.include_router(videos.router, prefix="/api", tags=["videos"])
    app.include_router(contact.router, prefix="/api", tags=["contact"])
    app.include_router(tracking.router, prefix="/api", tags=["tracking"])
