"""Stats repository - read-only queries behind the admin dashboard"""

from sqlalchemy.orm import Session

from ...models import STATUS_COMPLETED, Booking, Service


class StatsRepository:
    @staticmethod
    def get_completed_revenue_rows(db: Session) -> list[tuple]:
        """
        (booking_date, snapshot price, current service price) for every
        completed booking. The service price is None when no service has
        the booking's name any more.
        """
        return (
            db.query(Booking.booking_date, Booking.price, Service.price)
            .outerjoin(Service, Booking.service_name == Service.name)
            .filter(Booking.status == STATUS_COMPLETED)
            .all()
        )
