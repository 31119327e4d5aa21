"""Booking domain schemas - request bodies are checked field by field in the service"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ...models import Booking


class BookingCreate(BaseModel):
    """Online booking request from the customer site"""

    # Phone numbers often arrive as JSON numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = None
    phone: Optional[str] = None
    service: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None


class WalkInCreate(BaseModel):
    """Walk-in entered at the front desk; always for today"""

    name: Optional[str] = None
    service: Optional[str] = None
    time: Optional[str] = None


class BookingUpdate(BaseModel):
    """Admin reschedule / edit"""

    name: Optional[str] = None
    service: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None


class StatusUpdate(BaseModel):
    status: Optional[str] = None


class BookingResponse(BaseModel):
    id: int
    shop_id: int
    customer_name: str
    customer_phone: str
    service_name: str
    date: date
    time: str
    date_time: str
    duration: Optional[int] = None
    price: Optional[float] = None
    status: str
    type: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=booking.id,
            shop_id=booking.shop_id,
            customer_name=booking.customer_name,
            customer_phone=booking.customer_phone,
            service_name=booking.service_name,
            date=booking.booking_date,
            time=booking.time_label,
            date_time=booking.date_time,
            duration=booking.duration,
            price=booking.price,
            status=booking.status,
            type=booking.type,
            created_at=booking.created_at,
        )
