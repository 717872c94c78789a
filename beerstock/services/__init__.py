"""Services for BeerStock application."""

from beerstock.services.beer_service import BeerService

__all__ = ["BeerService"]
