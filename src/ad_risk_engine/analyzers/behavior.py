"""Listing presentation signals: photo count and location precision."""

from __future__ import annotations

from ad_risk_engine.domain.findings import (
    PartialResult,
    RiskTier,
    SourceKind,
    ThreatFinding,
    ThreatKind,
)
from ad_risk_engine.scoring.model import DEFAULT_SCORING_MODEL, ScoringModel

SINGLE_PHOTO_REASON = "Une seule photo fournie"
VAGUE_LOCATION_REASON = "Localisation volontairement vague"


def is_location_vague(location: str | None, model: ScoringModel = DEFAULT_SCORING_MODEL) -> bool:
    if location is None or not location.strip():
        return True
    lowered = location.lower()
    return any(term in lowered for term in model.behavior.vague_location_terms)


def analyze_behavior(
    photos_count: int,
    location: str | None,
    model: ScoringModel = DEFAULT_SCORING_MODEL,
) -> PartialResult:
    rules = model.behavior
    findings: list[ThreatFinding] = []
    score = 0.0

    if photos_count == 1:
        score += rules.single_photo_points
        findings.append(
            ThreatFinding(
                kind=ThreatKind.SINGLE_PHOTO,
                risk_tier=RiskTier.MEDIUM,
                descriptor=SINGLE_PHOTO_REASON,
                weight=rules.single_photo_points,
            )
        )

    if is_location_vague(location, model):
        score += rules.vague_location_points
        findings.append(
            ThreatFinding(
                kind=ThreatKind.VAGUE_LOCATION,
                risk_tier=RiskTier.MEDIUM,
                descriptor=VAGUE_LOCATION_REASON,
                weight=rules.vague_location_points,
            )
        )

    return PartialResult(source=SourceKind.BEHAVIOR, score=score, findings=tuple(findings))
