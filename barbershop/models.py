from sqlalchemy import Column, Date, DateTime, Float, Integer, String, Text, Time
from sqlalchemy.sql import func

from .database import Base

# Booking statuses
STATUS_PENDING = "Pending"
STATUS_CONFIRMED = "Confirmed"
STATUS_DECLINED = "Declined"
STATUS_COMPLETED = "Completed"
STATUS_NO_SHOW = "No-Show"

BOOKING_STATUSES = (
    STATUS_PENDING,
    STATUS_CONFIRMED,
    STATUS_DECLINED,
    STATUS_COMPLETED,
    STATUS_NO_SHOW,
)
TERMINAL_STATUSES = (STATUS_DECLINED, STATUS_COMPLETED, STATUS_NO_SHOW)

# Booking types - only online bookings are notified
TYPE_ONLINE = "Online"
TYPE_WALK_IN = "Walk-in"

# Holiday statuses
HOLIDAY_CLOSED = "Closed"
HOLIDAY_LIMITED = "Limited"
HOLIDAY_STATUSES = (HOLIDAY_CLOSED, HOLIDAY_LIMITED)

DATE_TIME_SEPARATOR = " at "


class Shop(Base):
    __tablename__ = "shops"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(String(500), nullable=True)
    phone = Column(String(50), nullable=True)
    map_url = Column(String(500), nullable=True)
    opening_time = Column(String(10), nullable=True)  # HH:MM, informational for the front-end
    closing_time = Column(String(10), nullable=True)
    created_at = Column(DateTime, server_default=func.now())


class Service(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    shop_id = Column(Integer, nullable=False, default=1)
    # Bookings reference services by name, not by id
    name = Column(String(255), unique=True, nullable=False)
    price = Column(Float, nullable=False, default=0)
    category = Column(String(100), nullable=True)
    duration = Column(Integer, nullable=True)  # minutes
    created_at = Column(DateTime, server_default=func.now())


class Holiday(Base):
    __tablename__ = "holidays"

    id = Column(Integer, primary_key=True, index=True)
    # Not unique: the first row returned wins when a date has several
    date = Column(Date, index=True, nullable=False)
    status = Column(String(50), nullable=False, default=HOLIDAY_CLOSED)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    shop_id = Column(Integer, nullable=False, default=1)
    customer_name = Column(String(255), nullable=False)
    customer_phone = Column(String(50), nullable=False)
    service_name = Column(String(255), nullable=False)
    booking_date = Column(Date, index=True, nullable=False)
    booking_time = Column(Time, nullable=False)  # parsed, for ordering
    time_text = Column(String(20), nullable=True)  # time as entered, e.g. "10:30 AM"
    duration = Column(Integer, nullable=True)  # minutes, copied from the service
    price = Column(Float, nullable=True)  # snapshot of the service price
    status = Column(String(20), nullable=False, default=STATUS_PENDING, index=True)
    type = Column(String(20), nullable=False, default=TYPE_ONLINE)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    @property
    def time_label(self) -> str:
        """The slot as the customer or staff entered it"""
        return self.time_text or self.booking_time.strftime("%H:%M")

    @property
    def date_time(self) -> str:
        """Display form used in messages and by the admin panel: 'YYYY-MM-DD at <time>'"""
        return f"{self.booking_date.isoformat()}{DATE_TIME_SEPARATOR}{self.time_label}"

    @property
    def is_online(self) -> bool:
        return self.type == TYPE_ONLINE
