"""Scoring model: every weight, threshold and fixed text used by the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ad_risk_engine.domain.findings import RiskTier


def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(dict(mapping))


DEFAULT_TIER_WEIGHTS: Mapping[RiskTier, float] = _frozen(
    {RiskTier.LOW: 5.0, RiskTier.MEDIUM: 15.0, RiskTier.HIGH: 30.0}
)

DEFAULT_FUSION_WEIGHTS: Mapping[str, float] = _frozen(
    {
        "text": 0.25,
        "price": 0.2,
        "seller": 0.2,
        "behavior": 0.15,
        "pattern": 0.2,
    }
)

DEFAULT_PRICE_FLOORS: Mapping[str, float] = _frozen(
    {
        "informatique": 50.0,
        "telephonie": 30.0,
        "electromenager": 20.0,
        "vehicules": 500.0,
    }
)

DEFAULT_RECOMMENDATIONS: Mapping[RiskTier, tuple[str, ...]] = _frozen(
    {
        RiskTier.HIGH: (
            "⚠️ ATTENTION : Cette annonce présente plusieurs signaux d'alarme",
            "❌ Évitez cette annonce ou soyez extrêmement prudent",
            "🔍 Vérifiez l'identité du vendeur avant tout contact",
        ),
        RiskTier.MEDIUM: (
            "⚡ Prudence recommandée pour cette annonce",
            "🤝 Privilégiez la remise en main propre",
            "💳 Évitez les paiements avant rencontre",
        ),
        RiskTier.LOW: (
            "✅ Annonce qui semble normale",
            "🛡️ Respectez les bonnes pratiques de sécurité",
        ),
    }
)


@dataclass(frozen=True)
class PriceRules:
    round_modulus: int = 100
    round_minimum: float = 200.0
    round_points: float = 10.0
    psychological_endings: frozenset[int] = frozenset({95, 99})
    psychological_points: float = 5.0
    too_low_points: float = 50.0
    floors: Mapping[str, float] = field(default_factory=lambda: DEFAULT_PRICE_FLOORS)
    default_floor: float = 10.0

    def floor_for(self, category: str) -> float:
        return self.floors.get(category, self.default_floor)


@dataclass(frozen=True)
class SellerRules:
    new_account_days: int = 30
    new_account_points: float = 20.0
    no_reviews_points: float = 15.0
    similar_items_limit: int = 5
    multiple_items_points: float = 30.0


@dataclass(frozen=True)
class BehaviorRules:
    single_photo_points: float = 15.0
    vague_location_points: float = 20.0
    vague_location_terms: tuple[str, ...] = ("région", "proche", "alentours", "secteur", "environ")


@dataclass(frozen=True)
class ScoringModel:
    """Versioned bundle of scoring constants.

    Tier thresholds are inclusive lower bounds: a score equal to
    ``high_threshold`` is high, a score equal to ``medium_threshold`` is medium.
    """

    version: str = "2024.1"
    tier_weights: Mapping[RiskTier, float] = field(default_factory=lambda: DEFAULT_TIER_WEIGHTS)
    fusion_weights: Mapping[str, float] = field(default_factory=lambda: DEFAULT_FUSION_WEIGHTS)
    default_fusion_weight: float = 0.1
    high_threshold: float = 60.0
    medium_threshold: float = 30.0
    price: PriceRules = field(default_factory=PriceRules)
    seller: SellerRules = field(default_factory=SellerRules)
    behavior: BehaviorRules = field(default_factory=BehaviorRules)
    recommendations: Mapping[RiskTier, tuple[str, ...]] = field(
        default_factory=lambda: DEFAULT_RECOMMENDATIONS
    )

    def tier_weight(self, tier: RiskTier | str) -> float:
        try:
            return self.tier_weights[RiskTier(tier)]
        except (KeyError, ValueError):
            return self.tier_weights[RiskTier.LOW]

    def fusion_weight(self, source: object) -> float:
        key = str(getattr(source, "value", source))
        return self.fusion_weights.get(key, self.default_fusion_weight)


DEFAULT_SCORING_MODEL = ScoringModel()
