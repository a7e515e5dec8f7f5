"""Cheapest destination result model."""

from pydantic import BaseModel, ConfigDict


class CheapestDestination(BaseModel):
    """Destination with the lowest final price among registered tariffs."""

    model_config = ConfigDict(frozen=True)

    destination: str
    price: float
