"""Booking service - booking lifecycle and its customer/owner notifications"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ... import config
from ...errors import ConflictError, NotFoundError, ValidationError
from ...models import (
    HOLIDAY_CLOSED,
    STATUS_COMPLETED,
    STATUS_CONFIRMED,
    STATUS_PENDING,
    TYPE_ONLINE,
    TYPE_WALK_IN,
    Booking,
    Service,
)
from ...services.notification_service import (
    NotificationDispatcher,
    owner_new_booking_message,
    rescheduled_message,
    status_message,
)
from ...services.status_workflow import is_terminal, is_valid_status, validate_status_transition
from ...shared.clock import shop_today
from ...shared.validators import parse_date, parse_time, require_text, validate_phone
from ..shop.repository import ShopRepository
from .repository import BookingRepository
from .schemas import BookingCreate, BookingUpdate, WalkInCreate

logger = logging.getLogger(__name__)


class BookingService:
    """Service layer for booking business logic"""

    def __init__(self, db: Session, notifications: NotificationDispatcher):
        self.db = db
        self.notifications = notifications
        self.repo = BookingRepository()
        self.shop_repo = ShopRepository()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _require_service(self, name: Optional[str]) -> Service:
        name = require_text(name, "Service")
        service = self.shop_repo.get_service_by_name(self.db, name)
        if not service:
            raise ValidationError(f"Unknown service '{name}'")
        return service

    def _resolve_price(self, booking: Booking) -> Optional[float]:
        """Snapshot price, falling back to the current price of the service with the same name"""
        if booking.price is not None:
            return booking.price
        service = self.shop_repo.get_service_by_name(self.db, booking.service_name)
        return service.price if service else None

    def get_booking(self, booking_id: int) -> Booking:
        booking = self.repo.get_booking_by_id(self.db, booking_id)
        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    def get_bookings(self, status: Optional[str] = None, day: Optional[str] = None) -> list[Booking]:
        parsed_day = parse_date(day) if day else None
        return self.repo.get_bookings(self.db, status=status, day=parsed_day)

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------
    def create_online_booking(self, data: BookingCreate) -> Booking:
        """Customer booking request: starts Pending and notifies the owner"""
        name = require_text(data.name, "Name")
        phone = validate_phone(data.phone)
        day = parse_date(data.date)
        at = parse_time(data.time)

        # No insert on a closed day
        if self.shop_repo.get_holiday_for_date(self.db, day, status=HOLIDAY_CLOSED):
            logger.info(f"⛔ Booking rejected for {name}: shop closed on {day}")
            raise ConflictError(f"Shop is closed on {day.isoformat()}.")

        service = self._require_service(data.service)

        booking = self.repo.create_booking(
            self.db,
            shop_id=config.SHOP_ID,
            customer_name=name,
            customer_phone=phone,
            service_name=service.name,
            booking_date=day,
            booking_time=at,
            time_text=data.time.strip(),
            duration=service.duration,
            price=service.price,
            status=STATUS_PENDING,
            type=TYPE_ONLINE,
        )
        logger.info(f"📥 Booking {booking.id} created: {name} / {service.name} / {booking.date_time}")

        if config.OWNER_PHONE_NUMBER:
            self.notifications.dispatch(
                config.OWNER_PHONE_NUMBER,
                owner_new_booking_message(booking, booking.price),
                "owner_new_booking",
            )
        return booking

    def create_walk_in(self, data: WalkInCreate) -> Booking:
        """Front-desk entry for today: auto-confirmed and never notified"""
        name = require_text(data.name, "Name")
        at = parse_time(data.time)
        service = self._require_service(data.service)

        booking = self.repo.create_booking(
            self.db,
            shop_id=config.SHOP_ID,
            customer_name=name,
            customer_phone=config.WALKIN_PHONE_PLACEHOLDER,
            service_name=service.name,
            booking_date=shop_today(),
            booking_time=at,
            time_text=data.time.strip(),
            duration=service.duration,
            price=service.price,
            status=STATUS_CONFIRMED,
            type=TYPE_WALK_IN,
        )
        logger.info(f"🚶 Walk-in {booking.id} added: {name} / {service.name} / {booking.date_time}")
        return booking

    # ------------------------------------------------------------------
    # Admin changes
    # ------------------------------------------------------------------
    def update_status(self, booking_id: int, status: Optional[str]) -> Booking:
        """
        Move a booking to a new status and message the customer.

        Any status may move to any other unless strict transitions are
        enabled. The message is dispatched after the change is committed
        and its outcome never affects the result.
        """
        status = require_text(status, "Status")
        if not is_valid_status(status):
            raise ValidationError(f"Invalid status '{status}'")

        booking = self.get_booking(booking_id)
        previous = booking.status
        if config.ENFORCE_STATUS_TRANSITIONS and not validate_status_transition(previous, status):
            raise ConflictError(f"Cannot change booking from {previous} to {status}")
        if is_terminal(previous) and previous != status:
            logger.info(f"↩️ Booking {booking.id} reopened from {previous}")

        updates = {"status": status}
        if status == STATUS_COMPLETED:
            # Lock in the price the customer actually paid
            service = self.shop_repo.get_service_by_name(self.db, booking.service_name)
            if service:
                updates["price"] = service.price

        booking = self.repo.update_booking(self.db, booking, **updates)
        logger.info(f"✅ Booking {booking.id} transitioned: {previous} → {status}")

        if booking.is_online:
            body = status_message(booking, status, self._resolve_price(booking))
            if body:
                self.notifications.dispatch(booking.customer_phone, body, f"status_{status.lower()}")
        return booking

    def reschedule(self, booking_id: int, data: BookingUpdate) -> Booking:
        """
        Overwrite name, service, date and time in place; status is untouched.

        The price and duration snapshots follow the service only when the
        service itself changes, and a Completed booking keeps the price it
        was completed at. Closed holidays are not re-checked here.
        """
        name = require_text(data.name, "Name")
        day = parse_date(data.date)
        at = parse_time(data.time)
        service = self._require_service(data.service)

        booking = self.get_booking(booking_id)
        updates = {
            "customer_name": name,
            "service_name": service.name,
            "booking_date": day,
            "booking_time": at,
            "time_text": data.time.strip(),
        }
        if service.name != booking.service_name:
            updates["duration"] = service.duration
            if booking.status != STATUS_COMPLETED:
                updates["price"] = service.price

        booking = self.repo.update_booking(self.db, booking, **updates)
        logger.info(f"🗓️ Booking {booking.id} rescheduled to {booking.date_time} ({service.name})")

        if booking.is_online:
            self.notifications.dispatch(
                booking.customer_phone, rescheduled_message(booking), "booking_rescheduled"
            )
        return booking
