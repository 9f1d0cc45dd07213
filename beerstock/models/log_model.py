from sqlalchemy import Column, Integer, String, BigInteger, DateTime, Enum
from beerstock.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함
from beerstock.models.enums import StockAction


class StockLog(Base):

    __tablename__ = "stock_log"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)

    # 맥주 관련 정보 (삭제 후에도 이력 유지를 위해 FK 없이 저장)
    beer_id = Column(BigInteger, nullable=True, index=True)  # 맥주 고유 ID
    beer_name = Column(String(200), nullable=False)          # 맥주 이름

    # 작업 관련 정보
    action = Column(Enum(StockAction, name="stock_action"), nullable=False)  # 수행된 작업
    delta = Column(Integer, nullable=False, default=0)                       # 변경 수량
    quantity = Column(Integer, nullable=False)                               # 작업 후 수량

    # 이벤트 발생 시간
    timestamp = Column(DateTime(timezone=True), nullable=False)  # 로그 발생 시각
