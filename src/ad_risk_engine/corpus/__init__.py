"""Rule corpus loading."""

from ad_risk_engine.corpus.loader import (
    CorpusSource,
    DirectoryCorpusSource,
    MappingCorpusSource,
    PackageCorpusSource,
    load_corpus,
)
from ad_risk_engine.corpus.models import PatternRule, RuleCorpus

__all__ = [
    "CorpusSource",
    "DirectoryCorpusSource",
    "MappingCorpusSource",
    "PackageCorpusSource",
    "PatternRule",
    "RuleCorpus",
    "load_corpus",
]
