from beerstock.mappers import beer_mapper
from beerstock.models.beer_model import Beer
from beerstock.models.enums import BeerType
from tests.builders import make_beer_dto

COLUMNS = ("id", "name", "brand", "max_quantity", "quantity", "type")


def test_to_model_copies_every_field():
    beer_dto = make_beer_dto(type=BeerType.STOUT)

    beer = beer_mapper.to_model(beer_dto)

    assert isinstance(beer, Beer)
    for column in COLUMNS:
        assert getattr(beer, column) == getattr(beer_dto, column)


def test_entity_round_trips_through_dto():
    beer = Beer(id=7, name="Guinness", brand="Diageo", max_quantity=30, quantity=12, type=BeerType.STOUT)

    restored = beer_mapper.to_model(beer_mapper.to_dto(beer))

    for column in COLUMNS:
        assert getattr(restored, column) == getattr(beer, column)
