"""Price anomalies: round figures, retail-style endings and per-category floors."""

from __future__ import annotations

from ad_risk_engine.domain.findings import (
    PartialResult,
    RiskTier,
    SourceKind,
    ThreatFinding,
    ThreatKind,
)
from ad_risk_engine.scoring.model import DEFAULT_SCORING_MODEL, ScoringModel

ROUND_PRICE_REASON = "Prix rond suspect pour objet de valeur"
PSYCHOLOGICAL_PRICE_REASON = "Prix psychologique inhabituel sur LeBonCoin"
TOO_LOW_REASON = "Prix anormalement bas pour cette catégorie"


def is_price_suspiciously_low(
    price: float,
    category: str,
    model: ScoringModel = DEFAULT_SCORING_MODEL,
) -> bool:
    return price < model.price.floor_for(category)


def analyze_price(
    price: float | None,
    category: str,
    model: ScoringModel = DEFAULT_SCORING_MODEL,
) -> PartialResult:
    if price is None or price <= 0:
        return PartialResult(source=SourceKind.PRICE)

    rules = model.price
    findings: list[ThreatFinding] = []
    score = 0.0
    remainder = price % rules.round_modulus

    if remainder == 0 and price > rules.round_minimum:
        score += rules.round_points
        findings.append(
            ThreatFinding(
                kind=ThreatKind.PRICE_PATTERN,
                risk_tier=RiskTier.LOW,
                descriptor=ROUND_PRICE_REASON,
                weight=rules.round_points,
            )
        )

    if remainder in rules.psychological_endings:
        score += rules.psychological_points
        findings.append(
            ThreatFinding(
                kind=ThreatKind.PRICE_PATTERN,
                risk_tier=RiskTier.LOW,
                descriptor=PSYCHOLOGICAL_PRICE_REASON,
                weight=rules.psychological_points,
            )
        )

    if is_price_suspiciously_low(price, category, model):
        score += rules.too_low_points
        findings.append(
            ThreatFinding(
                kind=ThreatKind.PRICE_TOO_LOW,
                risk_tier=RiskTier.HIGH,
                descriptor=TOO_LOW_REASON,
                weight=rules.too_low_points,
                category=category,
            )
        )

    return PartialResult(source=SourceKind.PRICE, score=score, findings=tuple(findings))
