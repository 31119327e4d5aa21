"""
Booking Notification Service
Message templates for every booking event plus the dispatcher that
delivers them after the booking change has been committed.
"""

import logging
from typing import Optional, Protocol

from fastapi import BackgroundTasks, Depends

from ..config import (
    ADMIN_PANEL_URL,
    ARRIVAL_NOTICE_MINUTES,
    SHOP_ADDRESS,
    SHOP_MAP_URL,
    SHOP_NAME,
)
from ..models import (
    STATUS_COMPLETED,
    STATUS_CONFIRMED,
    STATUS_DECLINED,
    STATUS_NO_SHOW,
    Booking,
)
from .whatsapp_service import WhatsAppSender

logger = logging.getLogger(__name__)


def format_price(price: Optional[float]) -> str:
    if price is None:
        return "unknown"
    if float(price).is_integer():
        return f"₹{int(price)}"
    return f"₹{price:.2f}"


# ============================================================================
# MESSAGE TEMPLATES
# ============================================================================


def owner_new_booking_message(booking: Booking, price: Optional[float]) -> str:
    return (
        f"🔔 *New Booking Request!*\n\n"
        f"👤 {booking.customer_name}\n"
        f"📱 {booking.customer_phone}\n"
        f"✂️ {booking.service_name}\n"
        f"💰 {format_price(price)}\n"
        f"📅 {booking.date_time}\n\n"
        f"Link: {ADMIN_PANEL_URL}"
    )


def confirmed_message(booking: Booking, price: Optional[float]) -> str:
    price_line = f"💰 *Price:* {format_price(price)}\n" if price is not None else ""
    return (
        f"✅ *Booking Confirmed!*\n\n"
        f"Hi {booking.customer_name}, your appointment is locked in.\n\n"
        f"✂️ *Service:* {booking.service_name}\n"
        f"{price_line}"
        f"📅 *Time:* {booking.date_time}\n"
        f"📍 *Location:* {SHOP_ADDRESS}\n\n"
        f"⚠️ *Please arrive {ARRIVAL_NOTICE_MINUTES} mins early.*\n"
        f"Location Map: {SHOP_MAP_URL}"
    )


def declined_message(booking: Booking, price: Optional[float] = None) -> str:
    return (
        f"⚠️ *Appointment Update*\n\n"
        f"Hi {booking.customer_name}, unfortunately we cannot accept your booking for "
        f"{booking.date_time} due to high volume. Please pick a different slot on our website."
    )


def completed_message(booking: Booking, price: Optional[float] = None) -> str:
    return (
        f"👋 *Thanks for visiting!*\n\n"
        f"Hi {booking.customer_name}, thanks for choosing {SHOP_NAME}. "
        f"We hope you love your new look! See you next time."
    )


def no_show_message(booking: Booking, price: Optional[float] = None) -> str:
    return (
        f"📅 *Missed Appointment*\n\n"
        f"Hi {booking.customer_name}, we missed you today at {booking.date_time}. "
        f"Hope everything is okay! Please reschedule whenever you are ready."
    )


def rescheduled_message(booking: Booking) -> str:
    return (
        f"📅 *Appointment Updated*\n\n"
        f"Hi {booking.customer_name}, your appointment details have been changed:\n\n"
        f"✂️ *Service:* {booking.service_name}\n"
        f"🗓️ *New Time:* {booking.date_time}\n\n"
        f"⚠️ *Please arrive {ARRIVAL_NOTICE_MINUTES} mins early.*"
    )


STATUS_TEMPLATES = {
    STATUS_CONFIRMED: confirmed_message,
    STATUS_DECLINED: declined_message,
    STATUS_COMPLETED: completed_message,
    STATUS_NO_SHOW: no_show_message,
}


def status_message(booking: Booking, status: str, price: Optional[float] = None) -> Optional[str]:
    """Message for a status change, or None when the status is silent"""
    template = STATUS_TEMPLATES.get(status)
    if template is None:
        return None
    return template(booking, price)


# ============================================================================
# DISPATCH
# ============================================================================


class NotificationDispatcher(Protocol):
    def dispatch(self, to: Optional[str], body: str, message_type: str) -> None: ...


class BackgroundNotificationDispatcher:
    """Queues each message on the request's background tasks"""

    def __init__(self, background_tasks: BackgroundTasks, sender: WhatsAppSender):
        self.background_tasks = background_tasks
        self.sender = sender

    def dispatch(self, to: Optional[str], body: str, message_type: str) -> None:
        logger.info(f"📨 Queued {message_type} message for {to}")
        self.background_tasks.add_task(self._deliver, to, body, message_type)

    async def _deliver(self, to: Optional[str], body: str, message_type: str) -> None:
        sent = await self.sender.send(to, body)
        if not sent:
            logger.warning(f"⚠️ {message_type} message for {to} was not delivered")


def get_whatsapp_sender() -> WhatsAppSender:
    return WhatsAppSender()


def get_notification_dispatcher(
    background_tasks: BackgroundTasks,
    sender: WhatsAppSender = Depends(get_whatsapp_sender),
) -> NotificationDispatcher:
    """Dependency injection for the notification dispatcher"""
    return BackgroundNotificationDispatcher(background_tasks, sender)
