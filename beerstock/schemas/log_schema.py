from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional

from beerstock.models.enums import StockAction


# 재고 이력 조회 응답 시 사용 (출력용)
class StockLogResponse(BaseModel):
    id: int                          # 고유 ID
    beer_id: Optional[int] = None    # 맥주 ID (삭제된 맥주일 수 있음)
    beer_name: str                   # 맥주 이름
    action: StockAction              # 작업 종류 (등록, 삭제, 입고, 출고)
    delta: int                       # 변경 수량
    quantity: int                    # 작업 후 수량
    timestamp: datetime              # 이벤트 발생 시각

    model_config = ConfigDict(from_attributes=True)  # SQLAlchemy ORM 객체를 자동으로 변환 가능하게 설정
