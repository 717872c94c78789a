"""Beer stock endpoints.

Service errors propagate as ``BeerStockError`` and are turned into HTTP
responses by the handler registered in ``beerstock.main``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from beerstock.repository import BeerRepository
from beerstock.schemas import BeerCreate, BeerDTO, QuantityDTO
from beerstock.services import BeerService

router = APIRouter()


def get_beer_repository() -> BeerRepository:
    """Provide the repository backing the beer service."""
    return BeerRepository()


def get_beer_service(
    repository: Annotated[BeerRepository, Depends(get_beer_repository)],
) -> BeerService:
    """Provide a beer service bound to the request's repository."""
    return BeerService(repository)


BeerServiceDep = Annotated[BeerService, Depends(get_beer_service)]


@router.post("", response_model=BeerDTO, status_code=status.HTTP_201_CREATED)
async def create_beer(beer: BeerCreate, service: BeerServiceDep) -> BeerDTO:
    """Register a new beer."""
    return await service.create_beer(BeerDTO(**beer.model_dump()))


@router.get("", response_model=list[BeerDTO])
async def list_beers(service: BeerServiceDep) -> list[BeerDTO]:
    """List all registered beers."""
    return await service.list_all()


@router.get("/{name}", response_model=BeerDTO)
async def find_by_name(name: str, service: BeerServiceDep) -> BeerDTO:
    """Get a beer by name."""
    return await service.find_by_name(name)


@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_by_id(beer_id: int, service: BeerServiceDep) -> None:
    """Delete a beer by ID."""
    await service.delete_by_id(beer_id)


@router.patch("/{beer_id}/increment", response_model=BeerDTO)
async def increment(beer_id: int, quantity: QuantityDTO, service: BeerServiceDep) -> BeerDTO:
    """Add bottles to a beer's stock, up to its max."""
    return await service.increment(beer_id, quantity.quantity)


@router.patch("/{beer_id}/decrement", response_model=BeerDTO)
async def decrement(beer_id: int, quantity: QuantityDTO, service: BeerServiceDep) -> BeerDTO:
    """Remove bottles from a beer's stock, down to zero."""
    return await service.decrement(beer_id, quantity.quantity)
