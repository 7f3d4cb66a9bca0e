from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


class ConversionOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from", description="Source currency code")
    to: str = Field(..., description="Target currency code")
    value: float = Field(..., description="Amount in the source currency")
    result: float = Field(..., description="Amount in the target currency")
    base: str = Field(..., description="Pivot currency of the rate table")


class HealthOut(BaseModel):
    status: str
    version: str
    rates_url: str
