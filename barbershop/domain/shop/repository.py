"""Shop repository - Database operations for shop info, services and holidays"""

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from ...database import commit
from ...models import Holiday, Service, Shop


class ShopRepository:
    """Repository for shop, service and holiday database operations"""

    @staticmethod
    def get_shop(db: Session, shop_id: int) -> Optional[Shop]:
        return db.query(Shop).filter(Shop.id == shop_id).first()

    # Services
    @staticmethod
    def get_services(db: Session) -> list[Service]:
        return db.query(Service).order_by(Service.id.asc()).all()

    @staticmethod
    def get_service(db: Session, service_id: int) -> Optional[Service]:
        return db.query(Service).filter(Service.id == service_id).first()

    @staticmethod
    def get_service_by_name(db: Session, name: str) -> Optional[Service]:
        return db.query(Service).filter(Service.name == name).first()

    @staticmethod
    def create_service(db: Session, shop_id: int, **service_data) -> Service:
        service = Service(shop_id=shop_id, **service_data)
        db.add(service)
        commit(db)
        db.refresh(service)
        return service

    @staticmethod
    def update_service(db: Session, service: Service, **updates) -> Service:
        for key, value in updates.items():
            setattr(service, key, value)
        commit(db)
        db.refresh(service)
        return service

    @staticmethod
    def delete_service(db: Session, service: Service) -> None:
        db.delete(service)
        commit(db)

    # Holidays
    @staticmethod
    def get_holidays(db: Session, from_date: Optional[date] = None) -> list[Holiday]:
        query = db.query(Holiday)
        if from_date is not None:
            query = query.filter(Holiday.date >= from_date)
        return query.order_by(Holiday.date.asc(), Holiday.id.asc()).all()

    @staticmethod
    def get_holiday(db: Session, holiday_id: int) -> Optional[Holiday]:
        return db.query(Holiday).filter(Holiday.id == holiday_id).first()

    @staticmethod
    def get_holiday_for_date(db: Session, day: date, status: Optional[str] = None) -> Optional[Holiday]:
        """First holiday row for a date; duplicates resolve to the lowest id"""
        query = db.query(Holiday).filter(Holiday.date == day)
        if status is not None:
            query = query.filter(Holiday.status == status)
        return query.order_by(Holiday.id.asc()).first()

    @staticmethod
    def create_holiday(db: Session, **holiday_data) -> Holiday:
        holiday = Holiday(**holiday_data)
        db.add(holiday)
        commit(db)
        db.refresh(holiday)
        return holiday

    @staticmethod
    def delete_holiday(db: Session, holiday: Holiday) -> None:
        db.delete(holiday)
        commit(db)
