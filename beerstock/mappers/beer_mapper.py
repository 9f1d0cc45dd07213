from beerstock.models.beer_model import Beer
from beerstock.schemas.beer_schema import BeerDTO


# DTO -> 엔티티 변환
def to_model(beer_dto: BeerDTO) -> Beer:
    return Beer(**beer_dto.model_dump())


# 엔티티 -> DTO 변환
def to_dto(beer: Beer) -> BeerDTO:
    return BeerDTO.model_validate(beer)
