from __future__ import annotations

import pytest

from ad_risk_engine.domain.findings import (
    PartialResult,
    RiskTier,
    SourceKind,
    ThreatFinding,
    ThreatKind,
)
from ad_risk_engine.orchestrator.aggregator import (
    aggregate,
    consolidate_threats,
    determine_risk_level,
    fuse_scores,
    generate_recommendations,
)


def _finding(kind: ThreatKind, descriptor: str, tier: RiskTier) -> ThreatFinding:
    return ThreatFinding(kind=kind, risk_tier=tier, descriptor=descriptor, weight=1)


def test_fusion_uses_per_source_weights() -> None:
    partials = [
        PartialResult(source=SourceKind.TEXT, score=100),
        PartialResult(source=SourceKind.PRICE, score=100),
        PartialResult(source=SourceKind.SELLER, score=100),
        PartialResult(source=SourceKind.BEHAVIOR, score=100),
        PartialResult(source=SourceKind.PATTERN, score=100),
    ]
    assert fuse_scores(partials) == pytest.approx(100.0)


def test_unknown_source_defaults_to_small_weight() -> None:
    assert fuse_scores([PartialResult(source="reputation", score=50)]) == pytest.approx(5.0)


def test_fusion_is_order_insensitive() -> None:
    partials = [
        PartialResult(source=SourceKind.TEXT, score=40),
        PartialResult(source=SourceKind.SELLER, score=65),
        PartialResult(source=SourceKind.BEHAVIOR, score=35),
    ]
    assert fuse_scores(partials) == pytest.approx(fuse_scores(list(reversed(partials))))


@pytest.mark.parametrize(
    ("score", "level"),
    [
        (0, RiskTier.LOW),
        (29.99, RiskTier.LOW),
        (30, RiskTier.MEDIUM),
        (59.99, RiskTier.MEDIUM),
        (60, RiskTier.HIGH),
        (250, RiskTier.HIGH),
    ],
)
def test_tier_thresholds_are_inclusive_lower_bounds(score: float, level: RiskTier) -> None:
    assert determine_risk_level(score) is level


def test_duplicates_keep_first_occurrence() -> None:
    first = ThreatFinding(
        kind=ThreatKind.KEYWORD, risk_tier=RiskTier.LOW, descriptor="vite", weight=5, category="urgence"
    )
    second = ThreatFinding(
        kind=ThreatKind.KEYWORD, risk_tier=RiskTier.HIGH, descriptor="vite", weight=30, category="autre"
    )
    threats = consolidate_threats(
        [
            PartialResult(source=SourceKind.TEXT, findings=(first,)),
            PartialResult(source=SourceKind.PATTERN, findings=(second,)),
        ]
    )
    assert threats == (first,)


def test_same_descriptor_different_kind_is_kept() -> None:
    keyword = _finding(ThreatKind.KEYWORD, "shipping_only", RiskTier.MEDIUM)
    pattern = _finding(ThreatKind.PATTERN_MATCH, "shipping_only", RiskTier.MEDIUM)
    threats = consolidate_threats([PartialResult(source=SourceKind.TEXT, findings=(keyword, pattern))])
    assert len(threats) == 2


def test_sort_is_descending_and_stable() -> None:
    low_a = _finding(ThreatKind.KEYWORD, "a", RiskTier.LOW)
    high_b = _finding(ThreatKind.KEYWORD, "b", RiskTier.HIGH)
    medium_c = _finding(ThreatKind.KEYWORD, "c", RiskTier.MEDIUM)
    low_d = _finding(ThreatKind.KEYWORD, "d", RiskTier.LOW)
    high_e = _finding(ThreatKind.PATTERN_MATCH, "e", RiskTier.HIGH)
    medium_f = _finding(ThreatKind.SINGLE_PHOTO, "f", RiskTier.MEDIUM)
    threats = consolidate_threats(
        [
            PartialResult(source=SourceKind.TEXT, findings=(low_a, high_b, medium_c, low_d)),
            PartialResult(source=SourceKind.PATTERN, findings=(high_e, medium_f)),
        ]
    )
    assert [t.descriptor for t in threats] == ["b", "e", "c", "f", "a", "d"]


def test_recommendations_depend_only_on_level() -> None:
    assert len(generate_recommendations(RiskTier.HIGH)) == 3
    assert len(generate_recommendations(RiskTier.MEDIUM)) == 3
    assert len(generate_recommendations(RiskTier.LOW)) == 2
    assert generate_recommendations(RiskTier.LOW)[0].endswith("Annonce qui semble normale")


def test_aggregate_builds_full_assessment(fixed_clock) -> None:
    finding = _finding(ThreatKind.MULTIPLE_ITEMS, "Vendeur avec beaucoup d'objets identiques", RiskTier.HIGH)
    assessment = aggregate(
        [
            PartialResult(source=SourceKind.SELLER, score=300, findings=(finding,)),
            PartialResult(source=SourceKind.PRICE),
        ],
        clock=fixed_clock,
    )
    assert assessment.risk_score == pytest.approx(60.0)
    assert assessment.risk_level is RiskTier.HIGH
    assert assessment.threats == (finding,)
    assert assessment.recommendations == generate_recommendations(RiskTier.HIGH)
    assert assessment.timestamp == fixed_clock()
    assert assessment.is_flagged


def test_empty_input_is_low_risk(fixed_clock) -> None:
    assessment = aggregate([], clock=fixed_clock)
    assert assessment.risk_score == 0
    assert assessment.risk_level is RiskTier.LOW
    assert assessment.threats == ()
    assert not assessment.is_flagged
