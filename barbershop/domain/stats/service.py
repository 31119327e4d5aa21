"""Stats service - revenue and workload figures for the admin dashboard"""

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from ...models import STATUS_COMPLETED, STATUS_CONFIRMED, STATUS_PENDING
from ...shared.clock import month_key, shop_today
from ..bookings.repository import BookingRepository
from .repository import StatsRepository
from .schemas import MonthlyRevenue, StatsSnapshot

logger = logging.getLogger(__name__)


def resolve_price(snapshot: Optional[float], current: Optional[float]) -> float:
    """Price a completed booking contributes: snapshot, then current service price, then 0"""
    if snapshot is not None:
        return snapshot
    if current is not None:
        return current
    return 0.0


def monthly_revenue(rows: Iterable[tuple]) -> dict[str, float]:
    """Fold (booking_date, snapshot, current) rows into month → total"""
    totals: dict[str, float] = defaultdict(float)
    for booking_date, snapshot, current in rows:
        if booking_date is None:
            continue
        totals[month_key(booking_date)] += resolve_price(snapshot, current)
    return dict(totals)


class StatsService:
    """Computed fresh on every call; nothing is cached between requests"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = StatsRepository()
        self.booking_repo = BookingRepository()

    def get_stats(self, today: Optional[date] = None) -> StatsSnapshot:
        today = today or shop_today()

        rows = self.repo.get_completed_revenue_rows(self.db)
        unpriced = sum(1 for _, snapshot, current in rows if snapshot is None and current is None)
        if unpriced:
            logger.warning(f"⚠️ {unpriced} completed booking(s) have no resolvable price")

        totals = monthly_revenue(rows)
        history = [
            MonthlyRevenue(month=month, revenue=revenue)
            for month, revenue in sorted(totals.items(), reverse=True)
        ]

        return StatsSnapshot(
            today=self.booking_repo.count_bookings(
                self.db, (STATUS_CONFIRMED, STATUS_COMPLETED), day=today
            ),
            pending=self.booking_repo.count_bookings(self.db, (STATUS_PENDING,)),
            revenue=totals.get(month_key(today), 0.0),
            history=history,
        )
