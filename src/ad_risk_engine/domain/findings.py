"""Risk tiers, threat findings and assessment structures."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RiskTier(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _TIER_RANK[self]


_TIER_RANK = {RiskTier.LOW: 1, RiskTier.MEDIUM: 2, RiskTier.HIGH: 3}


class SourceKind(str, Enum):
    TEXT = "text"
    PRICE = "price"
    SELLER = "seller"
    BEHAVIOR = "behavior"
    PATTERN = "pattern"


class ThreatKind(str, Enum):
    KEYWORD = "keyword"
    PRICE_PATTERN = "price_pattern"
    PRICE_TOO_LOW = "price_too_low"
    NEW_ACCOUNT = "new_account"
    NO_REVIEWS = "no_reviews"
    MULTIPLE_ITEMS = "multiple_items"
    SINGLE_PHOTO = "single_photo"
    VAGUE_LOCATION = "vague_location"
    PATTERN_MATCH = "pattern_match"


class ThreatFinding(BaseModel):
    """One piece of evidence. Two findings are duplicates iff kind and descriptor match."""

    model_config = ConfigDict(frozen=True)

    kind: ThreatKind
    risk_tier: RiskTier
    descriptor: str
    weight: float = Field(default=0.0, ge=0.0)
    category: str | None = None
    keyword: str | None = None
    description: str | None = None
    match_count: int | None = Field(default=None, ge=0)

    @property
    def identity(self) -> tuple[ThreatKind, str]:
        return (self.kind, self.descriptor)


class PartialResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: SourceKind | str
    score: float = Field(default=0.0, ge=0.0)
    findings: tuple[ThreatFinding, ...] = ()


class RiskAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    risk_score: float = Field(ge=0.0)
    risk_level: RiskTier
    threats: tuple[ThreatFinding, ...] = ()
    recommendations: tuple[str, ...] = ()
    timestamp: datetime

    @property
    def is_flagged(self) -> bool:
        return self.risk_level is not RiskTier.LOW

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
