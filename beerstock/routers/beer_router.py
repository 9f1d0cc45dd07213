from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from beerstock.core.database import get_db
from beerstock.schemas.beer_schema import BeerDTO, QuantityDTO
from beerstock.services.beer_service import BeerService

# 맥주 재고 관련 API 라우터
router = APIRouter(prefix="/api/v1/beers", tags=["Beers"])


# 서비스 의존성 (테스트에서 교체 가능)
def get_beer_service(db: Session = Depends(get_db)) -> BeerService:
    return BeerService(db)


# 맥주 등록
@router.post("", response_model=BeerDTO, status_code=status.HTTP_201_CREATED)
def create_beer(beer: BeerDTO, service: BeerService = Depends(get_beer_service)):
    return service.create_beer(beer)


# 이름으로 조회
@router.get("/{name}", response_model=BeerDTO)
def find_by_name(name: str, service: BeerService = Depends(get_beer_service)):
    return service.find_by_name(name)


# 전체 목록 조회
@router.get("", response_model=List[BeerDTO])
def list_beers(service: BeerService = Depends(get_beer_service)):
    return service.list_all()


# ID로 삭제
@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_by_id(beer_id: int, service: BeerService = Depends(get_beer_service)):
    service.delete_by_id(beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# 재고 증가 (입고)
@router.patch("/{beer_id}/increment", response_model=BeerDTO)
def increment(beer_id: int, quantity_dto: QuantityDTO, service: BeerService = Depends(get_beer_service)):
    return service.increment(beer_id, quantity_dto.quantity)


# 재고 감소 (출고)
@router.patch("/{beer_id}/decrement", response_model=BeerDTO)
def decrement(beer_id: int, quantity_dto: QuantityDTO, service: BeerService = Depends(get_beer_service)):
    return service.decrement(beer_id, quantity_dto.quantity)
