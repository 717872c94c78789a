"""MongoDB document models for BeerStock."""

from beerstock.models.beer import Beer, BeerType
from beerstock.models.counter import Counter

__all__ = [
    "Beer",
    "BeerType",
    "Counter",
]
