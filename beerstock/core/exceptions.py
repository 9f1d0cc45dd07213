"""Errors raised by the service layer.

Each error knows the HTTP status it maps to; ``beerstock.main`` registers a
single handler that turns any :class:`BeerStockError` into a JSON response.
"""


class BeerStockError(Exception):
    """Base class for request-scoped beer stock failures."""

    status_code = 400

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class BeerAlreadyRegisteredError(BeerStockError):
    status_code = 400

    def __init__(self, beer_name: str):
        super().__init__(f"Beer with name {beer_name} already registered in the system.")


class BeerNotFoundError(BeerStockError):
    status_code = 404

    @classmethod
    def by_name(cls, beer_name: str) -> "BeerNotFoundError":
        return cls(f"Beer with name {beer_name} not found in the system.")

    @classmethod
    def by_id(cls, beer_id: int) -> "BeerNotFoundError":
        return cls(f"Beer with id {beer_id} not found in the system.")


class BeerStockExceededError(BeerStockError):
    """Increment would push quantity past ``max_quantity``."""

    status_code = 400

    def __init__(self, beer_id: int, quantity_to_increment: int):
        super().__init__(
            f"Beers with {beer_id} to increment informed exceeds "
            f"the max stock capacity: {quantity_to_increment}"
        )


class BeerStockUnderflowError(BeerStockError):
    """Decrement would push quantity below zero."""

    status_code = 400

    def __init__(self, beer_id: int, quantity_to_decrement: int):
        super().__init__(
            f"Beers with {beer_id} to decrement informed is greater "
            f"than the available stock: {quantity_to_decrement}"
        )
