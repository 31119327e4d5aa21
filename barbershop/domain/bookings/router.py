"""Booking router - public booking requests and the admin booking desk"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from ...services.notification_service import NotificationDispatcher, get_notification_dispatcher
from .schemas import BookingCreate, BookingResponse, BookingUpdate, StatusUpdate, WalkInCreate
from .service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Bookings"])
admin_router = APIRouter(
    prefix="/api/admin", tags=["Admin Bookings"], dependencies=[Depends(require_admin)]
)


def get_booking_service(
    db: Session = Depends(get_db),
    notifications: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db, notifications)


@router.post("/bookings")
async def create_booking(data: BookingCreate, service: BookingService = Depends(get_booking_service)):
    """Customer booking request"""
    booking = service.create_online_booking(data)
    return {"message": "Booking sent!", "id": booking.id}


# ============================================================================
# ADMIN
# ============================================================================


@admin_router.get("/bookings")
async def get_bookings(
    status: Optional[str] = Query(None, description="Filter by booking status"),
    date: Optional[str] = Query(None, description="Filter by date (YYYY-MM-DD)"),
    service: BookingService = Depends(get_booking_service),
):
    return {"data": [BookingResponse.from_booking(b) for b in service.get_bookings(status, date)]}


@admin_router.get("/bookings/{booking_id}")
async def get_booking(booking_id: int, service: BookingService = Depends(get_booking_service)):
    return {"data": BookingResponse.from_booking(service.get_booking(booking_id))}


@admin_router.put("/bookings/{booking_id}")
async def update_booking_status(
    booking_id: int, data: StatusUpdate, service: BookingService = Depends(get_booking_service)
):
    service.update_status(booking_id, data.status)
    return {"message": "Status Updated"}


@admin_router.put("/bookings/{booking_id}/update")
async def reschedule_booking(
    booking_id: int, data: BookingUpdate, service: BookingService = Depends(get_booking_service)
):
    service.reschedule(booking_id, data)
    return {"message": "Booking updated successfully"}


@admin_router.post("/walkin")
async def create_walk_in(data: WalkInCreate, service: BookingService = Depends(get_booking_service)):
    booking = service.create_walk_in(data)
    return {"message": "Walk-in added", "id": booking.id}
