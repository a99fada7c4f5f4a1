from __future__ import annotations

import pytest

from ad_risk_engine.analyzers.price import (
    PSYCHOLOGICAL_PRICE_REASON,
    ROUND_PRICE_REASON,
    TOO_LOW_REASON,
    analyze_price,
    is_price_suspiciously_low,
)
from ad_risk_engine.domain.findings import RiskTier, SourceKind, ThreatKind


@pytest.mark.parametrize("price", [None, 0, -15])
def test_missing_or_non_positive_price_is_neutral(price) -> None:
    result = analyze_price(price, "telephonie")
    assert result.source == SourceKind.PRICE
    assert result.score == 0
    assert result.findings == ()


def test_round_price_above_two_hundred() -> None:
    result = analyze_price(300, "telephonie")
    assert result.score == 10
    assert [f.descriptor for f in result.findings] == [ROUND_PRICE_REASON]
    assert result.findings[0].kind == ThreatKind.PRICE_PATTERN
    assert result.findings[0].risk_tier == RiskTier.LOW


def test_two_hundred_is_not_a_suspicious_round_price() -> None:
    result = analyze_price(200, "telephonie")
    assert result.score == 0
    assert result.findings == ()


def test_psychological_price_on_unknown_category() -> None:
    result = analyze_price(299, "unknown")
    assert result.score == 5
    assert len(result.findings) == 1
    finding = result.findings[0]
    assert finding.descriptor == PSYCHOLOGICAL_PRICE_REASON
    assert finding.risk_tier == RiskTier.LOW
    assert not is_price_suspiciously_low(299, "unknown")


def test_price_ending_in_95_is_psychological() -> None:
    result = analyze_price(195, "unknown")
    assert [f.descriptor for f in result.findings] == [PSYCHOLOGICAL_PRICE_REASON]


@pytest.mark.parametrize(
    ("category", "price", "expected"),
    [
        ("informatique", 49, True),
        ("informatique", 50, False),
        ("telephonie", 29, True),
        ("electromenager", 19, True),
        ("vehicules", 499, True),
        ("vehicules", 500, False),
        ("livres", 9, True),
        ("livres", 10, False),
    ],
)
def test_category_floors(category: str, price: float, expected: bool) -> None:
    assert is_price_suspiciously_low(price, category) is expected


def test_too_low_price_is_high_tier() -> None:
    result = analyze_price(5, "telephonie")
    assert result.score == 50
    finding = result.findings[-1]
    assert finding.kind == ThreatKind.PRICE_TOO_LOW
    assert finding.descriptor == TOO_LOW_REASON
    assert finding.risk_tier == RiskTier.HIGH
    assert finding.category == "telephonie"


def test_rules_stack_for_cheap_round_vehicle() -> None:
    result = analyze_price(400, "vehicules")
    assert result.score == 60
    assert [f.kind for f in result.findings] == [ThreatKind.PRICE_PATTERN, ThreatKind.PRICE_TOO_LOW]
