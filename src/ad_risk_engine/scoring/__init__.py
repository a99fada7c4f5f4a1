"""Scoring utilities."""

from .model import DEFAULT_SCORING_MODEL, BehaviorRules, PriceRules, ScoringModel, SellerRules

__all__ = ["DEFAULT_SCORING_MODEL", "ScoringModel", "PriceRules", "SellerRules", "BehaviorRules"]
