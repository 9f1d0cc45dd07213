import logging
from contextlib import contextmanager
from typing import List

from sqlalchemy.orm import Session
from beerstock.core.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockExceededError,
    BeerStockUnderflowError,
)
from beerstock.crud import beer_crud
from beerstock.mappers import beer_mapper
from beerstock.models.beer_model import Beer, MAX_BEER_ID
from beerstock.models.enums import StockAction
from beerstock.schemas.beer_schema import BeerDTO
from beerstock.services.log_service import LogService

logger = logging.getLogger(__name__)


class BeerService:
    """
    맥주 재고 관련 비즈니스 로직을 관리하는 서비스 클래스

    이름 중복과 최대 수량(0 <= quantity <= max_quantity) 규칙은 여기서만 검사한다.
    변경 작업과 그 이력은 하나의 트랜잭션으로 커밋된다.
    """
    def __init__(self, db: Session):
        self.db = db
        self.log_service = LogService(db)

    # CREATE 맥주 등록
    def create_beer(self, beer_dto: BeerDTO) -> BeerDTO:
        self._verify_if_is_already_registered(beer_dto.name)

        beer = beer_mapper.to_model(beer_dto)
        beer.id = None  # ID는 DB에서 부여
        with self._transaction():
            saved = beer_crud.save_beer(self.db, beer)
            self.log_service.record(saved, StockAction.CREATE, saved.quantity)

        logger.info("맥주 등록: %s (id=%s)", saved.name, saved.id)
        return beer_mapper.to_dto(saved)

    # READ 이름으로 조회
    def find_by_name(self, name: str) -> BeerDTO:
        beer = beer_crud.get_beer_by_name(self.db, name)
        if beer is None:
            raise BeerNotFoundError.by_name(name)
        return beer_mapper.to_dto(beer)

    # READ 전체 목록 조회
    def list_all(self) -> List[BeerDTO]:
        return [beer_mapper.to_dto(beer) for beer in beer_crud.get_beers(self.db)]

    # DELETE ID로 삭제
    def delete_by_id(self, beer_id: int) -> None:
        beer = self._verify_if_exists(beer_id)

        # 삭제 후에는 엔티티 값을 읽을 수 없으므로 이력을 먼저 추가
        with self._transaction():
            self.log_service.record(beer, StockAction.DELETE, beer.quantity)
            beer_crud.delete_beer(self.db, beer_id)
        logger.info("맥주 삭제: id=%s", beer_id)

    # UPDATE 재고 증가 (입고)
    def increment(self, beer_id: int, quantity_to_increment: int) -> BeerDTO:
        beer = self._verify_if_exists(beer_id)

        quantity_after_increment = beer.quantity + quantity_to_increment
        self._verify_within_capacity(beer, quantity_after_increment, quantity_to_increment)

        return self._apply_quantity(beer, quantity_after_increment, StockAction.INCREMENT, quantity_to_increment)

    # UPDATE 재고 감소 (출고)
    def decrement(self, beer_id: int, quantity_to_decrement: int) -> BeerDTO:
        beer = self._verify_if_exists(beer_id)

        quantity_after_decrement = beer.quantity - quantity_to_decrement
        self._verify_within_capacity(beer, quantity_after_decrement, quantity_to_decrement)

        return self._apply_quantity(beer, quantity_after_decrement, StockAction.DECREMENT, quantity_to_decrement)

    def _apply_quantity(self, beer: Beer, new_quantity: int, action: StockAction, delta: int) -> BeerDTO:
        old_quantity = beer.quantity
        with self._transaction():
            beer.quantity = new_quantity
            saved = beer_crud.save_beer(self.db, beer)
            self.log_service.record(saved, action, delta)

        logger.info("재고 변경: %s 수량 %d → %d", saved.name, old_quantity, saved.quantity)
        return beer_mapper.to_dto(saved)

    # 0 <= 변경 후 수량 <= max_quantity 검사 (음수 delta 포함)
    def _verify_within_capacity(self, beer: Beer, new_quantity: int, delta: int) -> None:
        if new_quantity > beer.max_quantity:
            logger.warning(
                "재고 초과: id=%s, %d → %d > %d",
                beer.id, beer.quantity, new_quantity, beer.max_quantity,
            )
            raise BeerStockExceededError(beer.id, delta)
        if new_quantity < 0:
            logger.warning("재고 부족: id=%s, %d → %d < 0", beer.id, beer.quantity, new_quantity)
            raise BeerStockUnderflowError(beer.id, delta)

    # 작업 단위 커밋, 실패 시 전체 롤백
    @contextmanager
    def _transaction(self):
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _verify_if_is_already_registered(self, name: str) -> None:
        if beer_crud.get_beer_by_name(self.db, name) is not None:
            logger.warning("이미 등록된 맥주: %s", name)
            raise BeerAlreadyRegisteredError(name)

    def _verify_if_exists(self, beer_id: int) -> Beer:
        # BIGINT 범위 밖의 ID는 조회 없이 없는 것으로 처리
        if not 0 < beer_id <= MAX_BEER_ID:
            raise BeerNotFoundError.by_id(beer_id)
        beer = beer_crud.get_beer_by_id(self.db, beer_id)
        if beer is None:
            raise BeerNotFoundError.by_id(beer_id)
        return beer
