"""Shop domain schemas - shop info, services and holidays"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ...models import HOLIDAY_CLOSED, HOLIDAY_STATUSES


class ShopResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    map_url: Optional[str] = None
    opening_time: Optional[str] = None
    closing_time: Optional[str] = None


class ServiceCreate(BaseModel):
    """Schema for creating or replacing a service"""

    name: str
    price: float
    category: Optional[str] = None
    duration: Optional[int] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Service name is required")
        return v.strip()

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        if v < 0:
            raise ValueError("Price cannot be negative")
        return v


class ServiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: float
    category: Optional[str] = None
    duration: Optional[int] = None


class HolidayCreate(BaseModel):
    date: date
    status: str = HOLIDAY_CLOSED
    note: Optional[str] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        for status in HOLIDAY_STATUSES:
            if v.strip().lower() == status.lower():
                return status
        raise ValueError(f"Holiday status must be one of: {', '.join(HOLIDAY_STATUSES)}")


class HolidayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: date
    status: str
    note: Optional[str] = None
