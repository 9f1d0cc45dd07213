from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from beerstock.core.database import get_db
from beerstock.models.beer_model import MAX_BEER_ID
from beerstock.schemas.log_schema import StockLogResponse
from beerstock.services.log_service import LogService

# 재고 이력 관련 API 라우터
router = APIRouter(prefix="/api/v1/logs", tags=["Logs"])


# 재고 이력 조회 (최신순)
@router.get("", response_model=List[StockLogResponse])
def read_logs(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    beer_id: Optional[int] = Query(None, ge=1, le=MAX_BEER_ID),
    db: Session = Depends(get_db),
):
    return LogService(db).list_logs(skip, limit, beer_id)
