from pydantic import BaseModel


class MonthlyRevenue(BaseModel):
    month: str  # YYYY-MM
    revenue: float


class StatsSnapshot(BaseModel):
    today: int
    pending: int
    revenue: float
    history: list[MonthlyRevenue]
