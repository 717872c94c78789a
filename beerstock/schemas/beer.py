"""Pydantic schemas for the Beer model."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from beerstock.models.beer import BeerType


class BeerBase(BaseModel):
    """Base beer schema with common fields."""

    name: str = Field(..., min_length=1, max_length=200)
    brand: str = Field(..., min_length=1, max_length=200)
    max: int = Field(..., ge=1, le=500, description="Maximum stock capacity")
    quantity: int = Field(..., ge=0, description="Current stock level")
    type: BeerType

    @model_validator(mode="after")
    def check_quantity_within_max(self) -> "BeerBase":
        """Reject a stock level above the beer's capacity."""
        if self.quantity > self.max:
            raise ValueError(f"quantity {self.quantity} exceeds max {self.max}")
        return self


class BeerCreate(BeerBase):
    """Schema for registering a beer. The id is assigned on save."""

    quantity: int = Field(..., ge=0, le=100, description="Initial stock level")


class BeerDTO(BeerBase):
    """Transport representation of a stored beer."""

    id: int | None = None

    model_config = ConfigDict(from_attributes=True)


class QuantityDTO(BaseModel):
    """Amount to add to or remove from a beer's stock."""

    quantity: int = Field(..., ge=1, le=100)
