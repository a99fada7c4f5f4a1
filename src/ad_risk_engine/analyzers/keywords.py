"""Keyword hits from the rule corpus in title and description."""

from __future__ import annotations

from ad_risk_engine.corpus.models import RuleCorpus
from ad_risk_engine.domain.findings import PartialResult, SourceKind, ThreatFinding, ThreatKind
from ad_risk_engine.scoring.model import DEFAULT_SCORING_MODEL, ScoringModel


def analyze_keywords(
    title: str,
    description: str,
    corpus: RuleCorpus,
    model: ScoringModel = DEFAULT_SCORING_MODEL,
) -> PartialResult:
    full_text = f"{title or ''} {description or ''}".lower()
    findings: list[ThreatFinding] = []
    score = 0.0

    for category, tier, keyword in corpus.iter_keywords():
        if keyword.lower() not in full_text:
            continue
        weight = model.tier_weight(tier)
        score += weight
        findings.append(
            ThreatFinding(
                kind=ThreatKind.KEYWORD,
                risk_tier=tier,
                descriptor=keyword,
                weight=weight,
                category=category,
                keyword=keyword,
            )
        )

    return PartialResult(source=SourceKind.TEXT, score=score, findings=tuple(findings))
