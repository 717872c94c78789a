"""Beer document model for MongoDB."""

import enum
from typing import Optional

from beanie import Document, Indexed


class BeerType(str, enum.Enum):
    """Style of a beer."""

    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"

    @property
    def description(self) -> str:
        """Human readable name of the style."""
        if self is BeerType.IPA:
            return "IPA"
        return self.value.capitalize()


class Beer(Document):
    """Beer document model representing one stock line."""

    # Sequential numeric id assigned by the repository on first save
    id: Optional[int] = None

    name: Indexed(str, unique=True)
    brand: str
    max: int
    quantity: int
    type: BeerType

    class Settings:
        name = "beers"

    def __repr__(self) -> str:
        return f"<Beer(id={self.id}, name={self.name}, quantity={self.quantity}/{self.max})>"
