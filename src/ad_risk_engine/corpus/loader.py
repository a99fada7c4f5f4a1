"""Rule corpus sources and the validating loader."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
import re
from types import MappingProxyType
from typing import Any, Mapping, Protocol

import yaml
from pydantic import ValidationError

from ad_risk_engine.core.errors import CorpusLoadError
from ad_risk_engine.corpus.models import (
    KeywordDocument,
    PatternDocument,
    PatternRule,
    RuleCorpus,
)

logger = logging.getLogger(__name__)

BUNDLED_DATA_DIR = Path(__file__).resolve().parent / "data"
KEYWORDS_DOCUMENT = "suspicious-keywords"
PATTERNS_DOCUMENT = "scam-patterns"
_PATTERNS_WRAPPER_KEY = "text_patterns"
_SUFFIXES = (".json", ".yaml", ".yml")


class CorpusSource(Protocol):
    def fetch(self, name: str) -> Any:
        """Return the decoded document registered under ``name``."""


@dataclass(frozen=True)
class DirectoryCorpusSource:
    """Reads ``<name>.json`` (or ``.yaml``/``.yml``) documents from a directory."""

    directory: Path

    def _resolve(self, name: str) -> Path:
        for suffix in _SUFFIXES:
            candidate = self.directory / f"{name}{suffix}"
            if candidate.is_file():
                return candidate
        raise CorpusLoadError(f"Corpus document '{name}' not found in {self.directory}")

    def fetch(self, name: str) -> Any:
        path = self._resolve(name)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CorpusLoadError(f"Cannot read corpus document {path}: {exc}") from exc
        try:
            if path.suffix == ".json":
                return json.loads(raw)
            return yaml.safe_load(raw)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise CorpusLoadError(f"Corpus document {path} is not decodable: {exc}") from exc


@dataclass(frozen=True)
class PackageCorpusSource(DirectoryCorpusSource):
    """The corpus bundled with the package."""

    directory: Path = BUNDLED_DATA_DIR


@dataclass(frozen=True)
class MappingCorpusSource:
    documents: Mapping[str, Any] = field(default_factory=dict)

    def fetch(self, name: str) -> Any:
        if name not in self.documents:
            raise CorpusLoadError(f"Corpus document '{name}' is not available.")
        return json.loads(json.dumps(self.documents[name]))


def _unwrap_patterns(payload: Any) -> Any:
    if isinstance(payload, dict) and set(payload) == {_PATTERNS_WRAPPER_KEY}:
        return payload[_PATTERNS_WRAPPER_KEY]
    return payload


def _build_keywords(payload: Any) -> Mapping:
    try:
        document = KeywordDocument.model_validate(payload)
    except ValidationError as exc:
        raise CorpusLoadError(f"Malformed keyword document: {exc}") from exc
    return MappingProxyType(
        {
            category: MappingProxyType({tier: tuple(words) for tier, words in tiers.items()})
            for category, tiers in document.root.items()
        }
    )


def _build_patterns(payload: Any) -> Mapping:
    try:
        document = PatternDocument.model_validate(_unwrap_patterns(payload))
    except ValidationError as exc:
        raise CorpusLoadError(f"Malformed pattern document: {exc}") from exc

    rules: dict[str, PatternRule] = {}
    for name, entry in document.root.items():
        try:
            regex = re.compile(entry.pattern, re.IGNORECASE)
        except re.error as exc:
            raise CorpusLoadError(f"Pattern '{name}' is not a valid regex: {exc}") from exc
        rules[name] = PatternRule(
            name=name,
            pattern=entry.pattern,
            regex=regex,
            risk_tier=entry.risk_level,
            description=entry.description,
        )
    return MappingProxyType(rules)


def load_corpus(
    source: CorpusSource | None = None,
    *,
    keywords_document: str = KEYWORDS_DOCUMENT,
    patterns_document: str = PATTERNS_DOCUMENT,
) -> RuleCorpus:
    """Fetch, validate and compile both rule documents.

    Any failure, whether an unreachable source, undecodable content, a shape
    violation or an invalid regex, surfaces as ``CorpusLoadError``.
    """
    active = source or PackageCorpusSource()
    logger.info("loading rule corpus from %r", active)
    try:
        keywords_payload = active.fetch(keywords_document)
        patterns_payload = active.fetch(patterns_document)
    except CorpusLoadError:
        raise
    except Exception as exc:
        raise CorpusLoadError(f"Corpus source failed: {exc}") from exc

    corpus = RuleCorpus(
        keywords=_build_keywords(keywords_payload),
        patterns=_build_patterns(patterns_payload),
    )
    logger.info(
        "rule corpus loaded: %d keywords, %d patterns",
        corpus.keyword_count,
        len(corpus.patterns),
    )
    return corpus
