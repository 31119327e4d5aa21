"""Availability service - which times are already taken on a given day"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...errors import ValidationError
from ...shared.validators import parse_date
from ..bookings.repository import BookingRepository
from ..shop.repository import ShopRepository

logger = logging.getLogger(__name__)

STATUS_OPEN = "Open"


class AvailabilityService:
    """
    Reports occupied slots, not free ones: the front-end subtracts these
    from the shop's opening hours.
    """

    def __init__(self, db: Session):
        self.db = db
        self.booking_repo = BookingRepository()
        self.shop_repo = ShopRepository()

    def get_slots(self, day: Optional[str]) -> dict:
        """
        Availability for one day.

        Returns:
            {"status": holiday status, "note": ..., "data": []} when a holiday
            record exists for the date, otherwise {"status": "Open", "data": [times]}
            with every non-declined booking's time.
        """
        if not day or not day.strip():
            raise ValidationError("Date required")
        parsed = parse_date(day)

        holiday = self.shop_repo.get_holiday_for_date(self.db, parsed)
        if holiday:
            return {"status": holiday.status, "note": holiday.note, "data": []}

        # Pending requests block the slot too until they are declined
        bookings = self.booking_repo.get_occupying_bookings(self.db, parsed)
        return {"status": STATUS_OPEN, "data": [b.time_label for b in bookings]}
