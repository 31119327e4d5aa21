"""Booking repository - Database operations for bookings"""

from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...database import commit
from ...models import STATUS_DECLINED, Booking


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def get_bookings(
        db: Session, status: Optional[str] = None, day: Optional[date] = None
    ) -> list[Booking]:
        """All bookings, newest first"""
        query = db.query(Booking)
        if status:
            query = query.filter(Booking.status == status)
        if day:
            query = query.filter(Booking.booking_date == day)
        return query.order_by(Booking.id.desc()).all()

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def create_booking(db: Session, **booking_data) -> Booking:
        booking = Booking(**booking_data)
        db.add(booking)
        commit(db)
        db.refresh(booking)
        return booking

    @staticmethod
    def update_booking(db: Session, booking: Booking, **updates) -> Booking:
        for key, value in updates.items():
            setattr(booking, key, value)
        commit(db)
        db.refresh(booking)
        return booking

    @staticmethod
    def get_occupying_bookings(db: Session, day: date) -> list[Booking]:
        """Bookings that hold a slot on the given day (everything except Declined)"""
        return (
            db.query(Booking)
            .filter(Booking.booking_date == day, Booking.status != STATUS_DECLINED)
            .order_by(Booking.booking_time.asc(), Booking.id.asc())
            .all()
        )

    @staticmethod
    def count_bookings(
        db: Session, statuses: tuple[str, ...], day: Optional[date] = None
    ) -> int:
        query = db.query(func.count(Booking.id)).filter(Booking.status.in_(statuses))
        if day is not None:
            query = query.filter(Booking.booking_date == day)
        return query.scalar() or 0
