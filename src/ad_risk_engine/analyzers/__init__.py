"""Sub-analyzers: pure functions from a slice of an ad to a partial result."""

from __future__ import annotations

from ad_risk_engine.analyzers.behavior import analyze_behavior, is_location_vague
from ad_risk_engine.analyzers.keywords import analyze_keywords
from ad_risk_engine.analyzers.patterns import analyze_patterns
from ad_risk_engine.analyzers.price import analyze_price, is_price_suspiciously_low
from ad_risk_engine.analyzers.seller import analyze_seller
from ad_risk_engine.corpus.models import RuleCorpus
from ad_risk_engine.domain.ad.models import AdRecord
from ad_risk_engine.domain.findings import PartialResult
from ad_risk_engine.scoring.model import DEFAULT_SCORING_MODEL, ScoringModel


def run_all(
    ad: AdRecord,
    corpus: RuleCorpus,
    model: ScoringModel = DEFAULT_SCORING_MODEL,
) -> list[PartialResult]:
    """Run the five analyzers in text, price, seller, behavior, pattern order."""
    return [
        analyze_keywords(ad.title, ad.description, corpus, model),
        analyze_price(ad.price, ad.category, model),
        analyze_seller(ad.seller, model),
        analyze_behavior(ad.photos_count, ad.location, model),
        analyze_patterns(ad.title, ad.description, corpus, model),
    ]


__all__ = [
    "analyze_behavior",
    "analyze_keywords",
    "analyze_patterns",
    "analyze_price",
    "analyze_seller",
    "is_location_vague",
    "is_price_suspiciously_low",
    "run_all",
]
