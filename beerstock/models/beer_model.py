from sqlalchemy import Column, String, Integer, BigInteger, Enum
from beerstock.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함
from beerstock.models.enums import BeerType


# BIGINT 최대값 (이보다 큰 ID는 DB에 존재할 수 없음)
MAX_BEER_ID = 2 ** 63 - 1


class Beer(Base):
    __tablename__ = "beer"  # DB 테이블명 지정

    # 고유 ID, 자동 증가 (SQLite 호환을 위해 Integer 변형 지정)
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)

    # 맥주 이름
    name = Column(String(200), nullable=False, unique=True)  # 필수, 중복 불가

    # 브랜드
    brand = Column(String(200), nullable=False)  # 필수 입력

    # 최대 보관 수량
    max_quantity = Column(Integer, nullable=False)  # 필수 입력

    # 현재 수량 (0 <= quantity <= max_quantity)
    quantity = Column(Integer, nullable=False)  # 필수 입력

    # 맥주 종류
    type = Column(Enum(BeerType, name="beer_type"), nullable=False)

    def __repr__(self):
        return f"<Beer id={self.id} name={self.name!r} quantity={self.quantity}/{self.max_quantity}>"
