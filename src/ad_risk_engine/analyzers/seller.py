"""Seller profile signals."""

from __future__ import annotations

from ad_risk_engine.domain.ad.models import SellerInfo
from ad_risk_engine.domain.findings import (
    PartialResult,
    RiskTier,
    SourceKind,
    ThreatFinding,
    ThreatKind,
)
from ad_risk_engine.scoring.model import DEFAULT_SCORING_MODEL, ScoringModel

NEW_ACCOUNT_REASON = "Compte créé récemment"
NO_REVIEWS_REASON = "Aucun avis sur le vendeur"
MULTIPLE_ITEMS_REASON = "Vendeur avec beaucoup d'objets identiques"


def analyze_seller(
    seller: SellerInfo | None,
    model: ScoringModel = DEFAULT_SCORING_MODEL,
) -> PartialResult:
    if not isinstance(seller, SellerInfo):
        return PartialResult(source=SourceKind.SELLER)

    rules = model.seller
    findings: list[ThreatFinding] = []
    score = 0.0

    if seller.account_age is not None and seller.account_age < rules.new_account_days:
        score += rules.new_account_points
        findings.append(
            ThreatFinding(
                kind=ThreatKind.NEW_ACCOUNT,
                risk_tier=RiskTier.MEDIUM,
                descriptor=NEW_ACCOUNT_REASON,
                weight=rules.new_account_points,
            )
        )

    # zero reviews is a signal, unknown (None) is not
    if seller.review_count == 0:
        score += rules.no_reviews_points
        findings.append(
            ThreatFinding(
                kind=ThreatKind.NO_REVIEWS,
                risk_tier=RiskTier.MEDIUM,
                descriptor=NO_REVIEWS_REASON,
                weight=rules.no_reviews_points,
            )
        )

    if seller.similar_items_count is not None and seller.similar_items_count > rules.similar_items_limit:
        score += rules.multiple_items_points
        findings.append(
            ThreatFinding(
                kind=ThreatKind.MULTIPLE_ITEMS,
                risk_tier=RiskTier.HIGH,
                descriptor=MULTIPLE_ITEMS_REASON,
                weight=rules.multiple_items_points,
            )
        )

    return PartialResult(source=SourceKind.SELLER, score=score, findings=tuple(findings))
