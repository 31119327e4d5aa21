"""Shop router - public shop info, service catalogue and holiday calendar"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from .schemas import HolidayCreate, HolidayResponse, ServiceCreate, ServiceResponse, ShopResponse
from .service import ShopService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Shop"])


def get_shop_service(db: Session = Depends(get_db)) -> ShopService:
    """Dependency injection for ShopService"""
    return ShopService(db)


@router.get("/shop")
async def get_shop(service: ShopService = Depends(get_shop_service)):
    return {"data": ShopResponse.model_validate(service.get_shop())}


# ============================================================================
# SERVICES
# ============================================================================


@router.get("/services")
async def get_services(service: ShopService = Depends(get_shop_service)):
    return {"data": [ServiceResponse.model_validate(s) for s in service.get_services()]}


@router.post("/services", dependencies=[Depends(require_admin)])
async def create_service(data: ServiceCreate, service: ShopService = Depends(get_shop_service)):
    created = service.create_service(data)
    return {"msg": "Added", "id": created.id}


@router.put("/services/{service_id}", dependencies=[Depends(require_admin)])
async def update_service(
    service_id: int, data: ServiceCreate, service: ShopService = Depends(get_shop_service)
):
    service.update_service(service_id, data)
    return {"msg": "Updated"}


@router.delete("/services/{service_id}", dependencies=[Depends(require_admin)])
async def delete_service(service_id: int, service: ShopService = Depends(get_shop_service)):
    service.delete_service(service_id)
    return {"msg": "Deleted"}


# ============================================================================
# HOLIDAYS
# ============================================================================


@router.get("/holidays")
async def get_holidays(service: ShopService = Depends(get_shop_service)):
    return {"data": [HolidayResponse.model_validate(h) for h in service.get_holidays()]}


@router.get("/holidays/upcoming")
async def get_upcoming_holidays(service: ShopService = Depends(get_shop_service)):
    return {"data": [HolidayResponse.model_validate(h) for h in service.get_upcoming_holidays()]}


@router.post("/holidays", dependencies=[Depends(require_admin)])
async def create_holiday(data: HolidayCreate, service: ShopService = Depends(get_shop_service)):
    holiday = service.create_holiday(data)
    return {"msg": "Set", "id": holiday.id}


@router.delete("/holidays/{holiday_id}", dependencies=[Depends(require_admin)])
async def delete_holiday(holiday_id: int, service: ShopService = Depends(get_shop_service)):
    service.delete_holiday(holiday_id)
    return {"msg": "Removed"}
