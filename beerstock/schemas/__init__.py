"""Pydantic schemas for BeerStock API."""

from beerstock.schemas.beer import BeerCreate, BeerDTO, QuantityDTO

__all__ = [
    "BeerCreate",
    "BeerDTO",
    "QuantityDTO",
]
