"""Corpus regex patterns applied to title and description."""

from __future__ import annotations

from ad_risk_engine.corpus.models import RuleCorpus
from ad_risk_engine.domain.findings import PartialResult, SourceKind, ThreatFinding, ThreatKind
from ad_risk_engine.scoring.model import DEFAULT_SCORING_MODEL, ScoringModel


def analyze_patterns(
    title: str,
    description: str,
    corpus: RuleCorpus,
    model: ScoringModel = DEFAULT_SCORING_MODEL,
) -> PartialResult:
    full_text = f"{title or ''} {description or ''}".lower()
    findings: list[ThreatFinding] = []
    score = 0.0

    for name, rule in corpus.patterns.items():
        count = sum(1 for _ in rule.regex.finditer(full_text))
        if not count:
            continue
        weight = model.tier_weight(rule.risk_tier)
        score += weight * count
        findings.append(
            ThreatFinding(
                kind=ThreatKind.PATTERN_MATCH,
                risk_tier=rule.risk_tier,
                descriptor=name,
                weight=weight,
                description=rule.description,
                match_count=count,
            )
        )

    return PartialResult(source=SourceKind.PATTERN, score=score, findings=tuple(findings))
