"""Shop-local time helpers"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from ..config import SHOP_TIMEZONE


def shop_now() -> datetime:
    return datetime.now(ZoneInfo(SHOP_TIMEZONE))


def shop_today() -> date:
    return shop_now().date()


def month_key(day: date) -> str:
    """Revenue bucket key, 'YYYY-MM'"""
    return f"{day.year:04d}-{day.month:02d}"
