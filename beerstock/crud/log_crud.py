from typing import List, Optional

from sqlalchemy.orm import Session
from beerstock.models.log_model import StockLog


# READ-ALL 재고 이력 조회 (최신순, beer_id 필터 옵션)
def get_logs(db: Session, skip: int = 0, limit: int = 100, beer_id: Optional[int] = None) -> List[StockLog]:
    query = db.query(StockLog)
    if beer_id is not None:
        query = query.filter(StockLog.beer_id == beer_id)
    return query.order_by(StockLog.id.desc()).offset(skip).limit(limit).all()


# CREATE 새로운 이력 추가 (커밋은 호출한 서비스에서)
def create_log(db: Session, log: StockLog) -> StockLog:
    db.add(log)
    db.flush()
    return log
