"""Shop service - shop info plus service and holiday management"""

import logging

from sqlalchemy.orm import Session

from ...config import SHOP_ID
from ...errors import ConflictError, NotFoundError
from ...models import Holiday, Service, Shop
from ...shared.clock import shop_today
from .repository import ShopRepository
from .schemas import HolidayCreate, ServiceCreate

logger = logging.getLogger(__name__)


class ShopService:
    """Service layer for the shop's catalogue and calendar"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ShopRepository()

    def get_shop(self) -> Shop:
        shop = self.repo.get_shop(self.db, SHOP_ID)
        if not shop:
            raise NotFoundError("Shop data not found.")
        return shop

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------
    def get_services(self) -> list[Service]:
        return self.repo.get_services(self.db)

    def get_service(self, service_id: int) -> Service:
        service = self.repo.get_service(self.db, service_id)
        if not service:
            raise NotFoundError("Service not found")
        return service

    def create_service(self, data: ServiceCreate) -> Service:
        if self.repo.get_service_by_name(self.db, data.name):
            raise ConflictError(f"Service '{data.name}' already exists")
        service = self.repo.create_service(self.db, SHOP_ID, **data.model_dump())
        logger.info(f"✂️ Service {service.id} added: {service.name} ({service.price})")
        return service

    def update_service(self, service_id: int, data: ServiceCreate) -> Service:
        """
        Replace a service's fields.

        Renaming does not touch existing bookings: they keep the old name
        and their own price snapshot.
        """
        service = self.get_service(service_id)
        existing = self.repo.get_service_by_name(self.db, data.name)
        if existing and existing.id != service.id:
            raise ConflictError(f"Service '{data.name}' already exists")
        if service.name != data.name:
            logger.info(f"Service {service.id} renamed: {service.name} → {data.name}")
        return self.repo.update_service(self.db, service, **data.model_dump())

    def delete_service(self, service_id: int) -> None:
        service = self.get_service(service_id)
        self.repo.delete_service(self.db, service)
        logger.info(f"🗑️ Service {service_id} deleted")

    # ------------------------------------------------------------------
    # Holidays
    # ------------------------------------------------------------------
    def get_holidays(self) -> list[Holiday]:
        return self.repo.get_holidays(self.db)

    def get_upcoming_holidays(self) -> list[Holiday]:
        return self.repo.get_holidays(self.db, from_date=shop_today())

    def create_holiday(self, data: HolidayCreate) -> Holiday:
        holiday = self.repo.create_holiday(self.db, **data.model_dump())
        logger.info(f"📅 Holiday set for {holiday.date}: {holiday.status}")
        return holiday

    def delete_holiday(self, holiday_id: int) -> None:
        holiday = self.repo.get_holiday(self.db, holiday_id)
        if not holiday:
            raise NotFoundError("Holiday not found")
        self.repo.delete_holiday(self.db, holiday)
        logger.info(f"🗑️ Holiday {holiday_id} removed")
