"""Fusion of partial results into one risk assessment."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Callable, Iterable

from ad_risk_engine.domain.findings import (
    PartialResult,
    RiskAssessment,
    RiskTier,
    ThreatFinding,
)
from ad_risk_engine.scoring.model import DEFAULT_SCORING_MODEL, ScoringModel

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def fuse_scores(
    partials: Iterable[PartialResult],
    model: ScoringModel = DEFAULT_SCORING_MODEL,
) -> float:
    return sum(partial.score * model.fusion_weight(partial.source) for partial in partials)


def consolidate_threats(partials: Iterable[PartialResult]) -> tuple[ThreatFinding, ...]:
    """Flatten, drop repeated (kind, descriptor) pairs, order high to low.

    The first occurrence of a duplicate wins and equal tiers keep input order.
    """
    seen: set[tuple[object, str]] = set()
    unique: list[ThreatFinding] = []
    for partial in partials:
        for finding in partial.findings:
            if finding.identity in seen:
                continue
            seen.add(finding.identity)
            unique.append(finding)
    return tuple(sorted(unique, key=lambda finding: -finding.risk_tier.rank))


def determine_risk_level(score: float, model: ScoringModel = DEFAULT_SCORING_MODEL) -> RiskTier:
    if score >= model.high_threshold:
        return RiskTier.HIGH
    if score >= model.medium_threshold:
        return RiskTier.MEDIUM
    return RiskTier.LOW


def generate_recommendations(
    level: RiskTier,
    model: ScoringModel = DEFAULT_SCORING_MODEL,
) -> tuple[str, ...]:
    return tuple(model.recommendations[level])


def aggregate(
    partials: Iterable[PartialResult],
    *,
    model: ScoringModel = DEFAULT_SCORING_MODEL,
    clock: Clock = utc_now,
) -> RiskAssessment:
    collected = list(partials)
    score = fuse_scores(collected, model)
    level = determine_risk_level(score, model)
    threats = consolidate_threats(collected)
    logger.debug(
        "assessment fused: score=%.2f level=%s threats=%d model=%s",
        score,
        level.value,
        len(threats),
        model.version,
    )
    return RiskAssessment(
        risk_score=score,
        risk_level=level,
        threats=threats,
        recommendations=generate_recommendations(level, model),
        timestamp=clock(),
    )
