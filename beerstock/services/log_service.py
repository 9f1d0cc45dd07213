import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session
from beerstock.crud import log_crud
from beerstock.models.beer_model import Beer
from beerstock.models.enums import StockAction
from beerstock.models.log_model import StockLog

logger = logging.getLogger(__name__)


class LogService:
    def __init__(self, db: Session):
        self.db = db  # DB 세션

    # CREATE 작업 이력 추가 (커밋은 호출한 서비스의 트랜잭션에서)
    def record(self, beer: Beer, action: StockAction, delta: int = 0) -> StockLog:
        log = StockLog(
            beer_id=beer.id,
            beer_name=beer.name,
            action=action,
            delta=delta,
            quantity=beer.quantity,
            timestamp=datetime.now(timezone.utc),
        )
        log = log_crud.create_log(self.db, log)
        logger.debug("재고 이력 기록: %s %s (delta=%d)", action.value, beer.name, delta)
        return log

    # READ 이력 목록 조회
    def list_logs(self, skip: int = 0, limit: int = 100, beer_id: Optional[int] = None):
        return log_crud.get_logs(self.db, skip, limit, beer_id)
