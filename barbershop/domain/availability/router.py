"""Availability router - public slot lookup"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...database import get_db
from .service import AvailabilityService

router = APIRouter(prefix="/api", tags=["Availability"])


def get_availability_service(db: Session = Depends(get_db)) -> AvailabilityService:
    """Dependency injection for AvailabilityService"""
    return AvailabilityService(db)


@router.get("/slots")
async def get_slots(
    date: Optional[str] = Query(None, description="Day to check (YYYY-MM-DD)"),
    service: AvailabilityService = Depends(get_availability_service),
):
    """Occupied times for a day, or the holiday override"""
    return service.get_slots(date)
