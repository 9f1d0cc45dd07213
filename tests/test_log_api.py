import pytest

from beerstock.core.exceptions import BeerStockExceededError
from beerstock.models.enums import StockAction
from beerstock.services.beer_service import BeerService
from beerstock.services.log_service import LogService
from tests.builders import make_beer_dto

LOG_API_URL_PATH = "/api/v1/logs"


def test_every_mutation_is_recorded_newest_first(db):
    service = BeerService(db)
    beer = service.create_beer(make_beer_dto())
    service.increment(beer.id, 10)
    service.decrement(beer.id, 5)
    service.delete_by_id(beer.id)

    logs = LogService(db).list_logs()

    assert [log.action for log in logs] == [
        StockAction.DELETE,
        StockAction.DECREMENT,
        StockAction.INCREMENT,
        StockAction.CREATE,
    ]
    assert [log.quantity for log in logs] == [15, 15, 20, 10]
    assert all(log.beer_name == "Brahma" for log in logs)


def test_rejected_mutation_is_not_recorded(db):
    service = BeerService(db)
    beer = service.create_beer(make_beer_dto())

    with pytest.raises(BeerStockExceededError):
        service.increment(beer.id, 45)

    assert len(LogService(db).list_logs()) == 1


def test_logs_endpoint_filters_by_beer_id(client, db):
    service = BeerService(db)
    brahma = service.create_beer(make_beer_dto())
    guinness = service.create_beer(make_beer_dto(name="Guinness", brand="Diageo", type="STOUT"))
    service.increment(guinness.id, 3)

    response = client.get(LOG_API_URL_PATH, params={"beer_id": guinness.id})

    assert response.status_code == 200
    body = response.json()
    assert [log["action"] for log in body] == ["INCREMENT", "CREATE"]
    assert body[0]["delta"] == 3
    assert body[0]["quantity"] == 13

    response = client.get(LOG_API_URL_PATH, params={"beer_id": brahma.id})
    assert len(response.json()) == 1


def test_logs_endpoint_paginates(client, db):
    service = BeerService(db)
    beer = service.create_beer(make_beer_dto())
    for _ in range(3):
        service.increment(beer.id, 1)

    response = client.get(LOG_API_URL_PATH, params={"skip": 1, "limit": 2})

    assert response.status_code == 200
    assert [log["quantity"] for log in response.json()] == [12, 11]


def test_logs_endpoint_rejects_invalid_limit(client):
    assert client.get(LOG_API_URL_PATH, params={"limit": 0}).status_code == 400
