"""Beer stock service.

Orchestrates the repository and the mapper and enforces the stock rules:
names are unique, and a beer's quantity stays within ``[0, max]``. Every
precondition is checked before the repository is written, so a rejected
call leaves the stored record untouched.
"""

import logging

from beerstock import mapper
from beerstock.exceptions import (
    BeerAlreadyRegisteredError,
    BeerNotFoundError,
    BeerStockDoesNotContainError,
    BeerStockExceededError,
)
from beerstock.models import Beer
from beerstock.repository import BeerRepository
from beerstock.schemas import BeerDTO

logger = logging.getLogger(__name__)


class BeerService:
    """Stateless service over an injected beer repository."""

    def __init__(self, repository: BeerRepository):
        self.repository = repository

    async def create_beer(self, beer_dto: BeerDTO) -> BeerDTO:
        """Register a new beer.

        Any id on ``beer_dto`` is ignored; the repository assigns a fresh one.

        Raises:
            BeerAlreadyRegisteredError: If a beer with the same name exists.
        """
        await self._verify_if_is_already_registered(beer_dto.name)
        new_beer = mapper.to_model(beer_dto.model_copy(update={"id": None}))
        saved_beer = await self.repository.save(new_beer)
        logger.info("Registered beer %s with ID %s", saved_beer.name, saved_beer.id)
        return mapper.to_dto(saved_beer)

    async def find_by_name(self, name: str) -> BeerDTO:
        """Get a beer by its unique name.

        Raises:
            BeerNotFoundError: If no beer has that name.
        """
        found_beer = await self.repository.find_by_name(name)
        if found_beer is None:
            raise BeerNotFoundError.with_name(name)
        return mapper.to_dto(found_beer)

    async def list_all(self) -> list[BeerDTO]:
        """List every registered beer."""
        return [mapper.to_dto(beer) for beer in await self.repository.find_all()]

    async def delete_by_id(self, beer_id: int) -> None:
        """Delete a beer.

        Raises:
            BeerNotFoundError: If no beer has that id.
        """
        await self._verify_if_exists(beer_id)
        await self.repository.delete_by_id(beer_id)
        logger.info("Deleted beer with ID %d", beer_id)

    async def increment(self, beer_id: int, quantity_to_increment: int) -> BeerDTO:
        """Add stock to a beer.

        Raises:
            BeerNotFoundError: If no beer has that id.
            BeerStockExceededError: If the new quantity would exceed the beer's max.
            BeerStockDoesNotContainError: If a negative amount would take the
                quantity below zero.
        """
        beer_to_increment = await self._verify_if_exists(beer_id)
        quantity_after_increment = beer_to_increment.quantity + quantity_to_increment
        if quantity_after_increment > beer_to_increment.max:
            logger.warning(
                "Rejected increment of %d for beer %d: %d would exceed max %d",
                quantity_to_increment, beer_id, quantity_after_increment, beer_to_increment.max,
            )
            raise BeerStockExceededError(beer_id, quantity_to_increment)
        if quantity_after_increment < 0:
            logger.warning(
                "Rejected increment of %d for beer %d: only %d in stock",
                quantity_to_increment, beer_id, beer_to_increment.quantity,
            )
            raise BeerStockDoesNotContainError(beer_id, quantity_to_increment)

        beer_to_increment.quantity = quantity_after_increment
        incremented_beer = await self.repository.save(beer_to_increment)
        logger.info("Incremented beer %d stock to %d", beer_id, incremented_beer.quantity)
        return mapper.to_dto(incremented_beer)

    async def decrement(self, beer_id: int, quantity_to_decrement: int) -> BeerDTO:
        """Remove stock from a beer. The stock may reach exactly zero.

        Raises:
            BeerNotFoundError: If no beer has that id.
            BeerStockDoesNotContainError: If the new quantity would be negative.
            BeerStockExceededError: If a negative amount would take the
                quantity above the beer's max.
        """
        beer_to_decrement = await self._verify_if_exists(beer_id)
        quantity_after_decrement = beer_to_decrement.quantity - quantity_to_decrement
        if quantity_after_decrement < 0:
            logger.warning(
                "Rejected decrement of %d for beer %d: only %d in stock",
                quantity_to_decrement, beer_id, beer_to_decrement.quantity,
            )
            raise BeerStockDoesNotContainError(beer_id, quantity_to_decrement)
        if quantity_after_decrement > beer_to_decrement.max:
            logger.warning(
                "Rejected decrement of %d for beer %d: %d would exceed max %d",
                quantity_to_decrement, beer_id, quantity_after_decrement, beer_to_decrement.max,
            )
            raise BeerStockExceededError(beer_id, quantity_to_decrement)

        beer_to_decrement.quantity = quantity_after_decrement
        decremented_beer = await self.repository.save(beer_to_decrement)
        logger.info("Decremented beer %d stock to %d", beer_id, decremented_beer.quantity)
        return mapper.to_dto(decremented_beer)

    async def _verify_if_is_already_registered(self, name: str) -> None:
        if await self.repository.find_by_name(name) is not None:
            logger.warning("Rejected registration of duplicate beer %s", name)
            raise BeerAlreadyRegisteredError(name)

    async def _verify_if_exists(self, beer_id: int) -> Beer:
        beer = await self.repository.find_by_id(beer_id)
        if beer is None:
            raise BeerNotFoundError.with_id(beer_id)
        return beer
