"""Translation between BeerDTO and the Beer document.

Field-for-field copies in both directions with no other behaviour.
"""

from beerstock.models import Beer
from beerstock.schemas import BeerDTO


def to_model(dto: BeerDTO) -> Beer:
    """Build a Beer document from its transport representation."""
    return Beer(
        id=dto.id,
        name=dto.name,
        brand=dto.brand,
        max=dto.max,
        quantity=dto.quantity,
        type=dto.type,
    )


def to_dto(beer: Beer) -> BeerDTO:
    """Build the transport representation of a Beer document."""
    return BeerDTO.model_validate(beer)
