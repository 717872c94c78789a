"""API routers for BeerStock."""

from beerstock.routers import beers

__all__ = ["beers"]
