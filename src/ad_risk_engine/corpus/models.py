"""Rule corpus structures and document schemas."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from ad_risk_engine.domain.findings import RiskTier


class PatternDocumentEntry(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pattern: str = Field(min_length=1)
    risk_level: RiskTier
    description: str = ""


class KeywordDocument(RootModel[dict[str, dict[RiskTier, list[str]]]]):
    """``{category: {"low"|"medium"|"high": [keyword, ...]}}``"""

    @field_validator("root")
    @classmethod
    def _reject_blank_keywords(
        cls, value: dict[str, dict[RiskTier, list[str]]]
    ) -> dict[str, dict[RiskTier, list[str]]]:
        for category, tiers in value.items():
            for tier, words in tiers.items():
                if any(not word.strip() for word in words):
                    raise ValueError(f"blank keyword in {category}/{tier.value}")
        return value


class PatternDocument(RootModel[dict[str, PatternDocumentEntry]]):
    """``{name: {"pattern": regex, "risk_level": tier, "description": text}}``"""


@dataclass(frozen=True)
class PatternRule:
    name: str
    pattern: str
    regex: re.Pattern[str]
    risk_tier: RiskTier
    description: str


@dataclass(frozen=True)
class RuleCorpus:
    """Read-only keyword and pattern tables shared by every analysis."""

    keywords: Mapping[str, Mapping[RiskTier, tuple[str, ...]]]
    patterns: Mapping[str, PatternRule]

    def iter_keywords(self):
        for category, tiers in self.keywords.items():
            for tier, words in tiers.items():
                for keyword in words:
                    yield category, tier, keyword

    @property
    def keyword_count(self) -> int:
        return sum(len(words) for tiers in self.keywords.values() for words in tiers.values())
