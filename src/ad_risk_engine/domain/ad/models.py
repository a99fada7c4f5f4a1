"""Classified-ad domain models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SellerInfo(BaseModel):
    """Seller profile as extracted from the listing page.

    ``None`` means the value is unknown. ``review_count == 0`` is a real
    signal and is never collapsed into "unknown".
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str | None = None
    account_age: int | None = Field(default=None, alias="accountAge")
    review_count: int | None = Field(default=None, ge=0, alias="reviewCount")
    similar_items_count: int | None = Field(default=None, ge=0, alias="similarItemsCount")


class AdRecord(BaseModel):
    """Normalized listing attributes supplied by the extraction layer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str = ""
    description: str = ""
    price: float | None = None
    category: str = "unknown"
    location: str | None = None
    photos_count: int = Field(default=0, ge=0, alias="photosCount")
    seller: SellerInfo | None = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("category", mode="before")
    @classmethod
    def _default_category(cls, value: Any) -> Any:
        if value is None or not str(value).strip():
            return "unknown"
        return str(value).strip()

    @field_validator("seller", mode="before")
    @classmethod
    def _drop_malformed_seller(cls, value: Any) -> Any:
        if isinstance(value, SellerInfo):
            return value
        if not isinstance(value, dict):
            return None
        try:
            return SellerInfo.model_validate(value)
        except ValueError:
            return None
