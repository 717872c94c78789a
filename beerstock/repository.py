"""Persistence of Beer documents in MongoDB."""

import logging

from pymongo.errors import DuplicateKeyError

from beerstock.exceptions import BeerAlreadyRegisteredError
from beerstock.models import Beer, Counter

logger = logging.getLogger(__name__)

# Name of the counter document that numbers beers
BEER_SEQUENCE = "beers"


class BeerRepository:
    """Store of beer records keyed by numeric id, unique on name."""

    async def find_by_name(self, name: str) -> Beer | None:
        return await Beer.find_one(Beer.name == name)

    async def find_by_id(self, beer_id: int) -> Beer | None:
        return await Beer.find_one(Beer.id == beer_id)

    async def find_all(self) -> list[Beer]:
        return await Beer.find_all().sort(+Beer.id).to_list()

    async def save(self, beer: Beer) -> Beer:
        """Insert or update a beer, assigning its id on first save.

        A beer without an id is always inserted, never upserted, so a new
        record cannot replace an existing one.

        Raises:
            BeerAlreadyRegisteredError: If another beer already uses the name.
        """
        try:
            if beer.id is None:
                beer.id = await Counter.next_value(BEER_SEQUENCE)
                logger.debug("Assigned id %d to beer %s", beer.id, beer.name)
                await beer.insert()
            else:
                await beer.save()
        except DuplicateKeyError as e:
            logger.debug("Duplicate beer name %s: %s", beer.name, e)
            raise BeerAlreadyRegisteredError(beer.name) from e
        return beer

    async def delete_by_id(self, beer_id: int) -> None:
        await Beer.find(Beer.id == beer_id).delete()
