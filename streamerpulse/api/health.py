"""
Health check endpoint.
"""
from fastapi import APIRouter

router = APIRouter()


@router.get("")
def health():
    """Report that the backend is up."""
    return {"message": "StreamerPulse backend is running"}
