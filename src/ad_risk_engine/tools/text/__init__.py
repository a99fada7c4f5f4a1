"""Text analysis tools."""

from ad_risk_engine.tools.text.analyzer import (
    EMPTY_FEATURES,
    TextFeatures,
    analyze_text,
    calculate_overall_risk,
    preprocess_text,
)

__all__ = [
    "EMPTY_FEATURES",
    "TextFeatures",
    "analyze_text",
    "calculate_overall_risk",
    "preprocess_text",
]
