"""Custom exceptions for ad_risk_engine."""


class AdRiskError(Exception):
    """Base exception for application-level errors."""


class ConfigError(AdRiskError):
    """Raised when configuration cannot be loaded or validated."""


class CorpusLoadError(AdRiskError):
    """Raised when the rule corpus is unreachable, malformed or holds an invalid pattern."""
