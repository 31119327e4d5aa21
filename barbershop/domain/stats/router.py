"""Stats router - admin dashboard figures"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import require_admin
from ...database import get_db
from .service import StatsService

router = APIRouter(prefix="/api/admin", tags=["Admin Stats"], dependencies=[Depends(require_admin)])


def get_stats_service(db: Session = Depends(get_db)) -> StatsService:
    """Dependency injection for StatsService"""
    return StatsService(db)


@router.get("/stats")
async def get_stats(service: StatsService = Depends(get_stats_service)):
    return {"data": service.get_stats()}
