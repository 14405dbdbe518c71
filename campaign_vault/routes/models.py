"""Pydantic request bodies for API endpoints."""

from typing import Any

from pydantic import BaseModel, model_validator


class CopyCatalogBody(BaseModel):
    target: str


class MergeCatalogBody(BaseModel):
    target: str
    overwrite: bool = False


class FindBody(BaseModel):
    where: dict[str, Any] = {}


class UpdateHitPoints(BaseModel):
    amount: int | None = None
    current: int | None = None
    max: int | None = None

    @model_validator(mode="after")
    def _amount_or_current(self) -> "UpdateHitPoints":
        if (self.amount is None) == (self.current is None):
            raise ValueError("Send either amount or current")
        return self


class UpdateLocation(BaseModel):
    discovered: bool
