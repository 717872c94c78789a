"""Errors raised by the beer stock service.

Each error is a caller-facing rejection rather than a system fault and
carries the HTTP status the API answers with.
"""

from fastapi import status


class BeerStockError(Exception):
    """Base class for beer stock service errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class BeerAlreadyRegisteredError(BeerStockError):
    """Raised when creating a beer whose name is already taken."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Beer with name {name} already registered in the system.")


class BeerNotFoundError(BeerStockError):
    """Raised when no beer matches the requested name or id."""

    status_code = status.HTTP_404_NOT_FOUND

    @classmethod
    def with_name(cls, name: str) -> "BeerNotFoundError":
        return cls(f"Beer not found with name {name}")

    @classmethod
    def with_id(cls, beer_id: int) -> "BeerNotFoundError":
        return cls(f"Beer not found with ID {beer_id}")


class BeerStockExceededError(BeerStockError):
    """Raised when an increment would push quantity above the beer's max."""

    def __init__(self, beer_id: int, quantity_to_increment: int):
        self.beer_id = beer_id
        self.quantity = quantity_to_increment
        super().__init__(
            f"Beers with {beer_id} ID informed exceeds the max stock capacity: "
            f"{quantity_to_increment}"
        )


class BeerStockDoesNotContainError(BeerStockError):
    """Raised when a decrement would push quantity below zero."""

    def __init__(self, beer_id: int, quantity_to_decrement: int):
        self.beer_id = beer_id
        self.quantity = quantity_to_decrement
        super().__init__(
            f"Beers with {beer_id} ID does not contains value to decrement: "
            f"{quantity_to_decrement}"
        )
