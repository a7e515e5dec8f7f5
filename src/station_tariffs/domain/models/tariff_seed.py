"""Tariff seed domain model."""

from pydantic import BaseModel, ConfigDict, Field


class TariffSeed(BaseModel):
    """A tariff to preload into the registry at startup.

    Only the shape is checked here; price limits and discount range are
    enforced when the tariff itself is constructed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    destination: str
    price: float
    discount_percent: int | None = Field(
        default=None, description="Discount in percent; None means a flat tariff"
    )
