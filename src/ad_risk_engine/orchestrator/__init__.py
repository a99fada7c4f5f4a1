"""Assessment orchestration: score fusion and the RiskAnalyzer facade."""

from ad_risk_engine.orchestrator.aggregator import (
    aggregate,
    consolidate_threats,
    determine_risk_level,
    fuse_scores,
    generate_recommendations,
)
from ad_risk_engine.orchestrator.service import CorpusState, RiskAnalyzer, create_analyzer

__all__ = [
    "CorpusState",
    "RiskAnalyzer",
    "aggregate",
    "consolidate_threats",
    "create_analyzer",
    "determine_risk_level",
    "fuse_scores",
    "generate_recommendations",
]
