from beerstock.models.beer_model import Beer
from beerstock.models.log_model import StockLog
from beerstock.models.enums import BeerType, StockAction

__all__ = ["Beer", "StockLog", "BeerType", "StockAction"]
