"""RiskAnalyzer facade: owns the rule corpus and runs the scoring pipeline."""

from __future__ import annotations

import asyncio
from enum import Enum
import logging
from pathlib import Path
from typing import Any, Callable, Mapping

from ad_risk_engine.analyzers import run_all
from ad_risk_engine.config.settings import AppConfig
from ad_risk_engine.core.errors import CorpusLoadError
from ad_risk_engine.corpus.loader import (
    KEYWORDS_DOCUMENT,
    PATTERNS_DOCUMENT,
    CorpusSource,
    DirectoryCorpusSource,
    PackageCorpusSource,
    load_corpus,
)
from ad_risk_engine.corpus.models import RuleCorpus
from ad_risk_engine.domain.ad.models import AdRecord
from ad_risk_engine.domain.ad.parse import parse_ad_payload
from ad_risk_engine.domain.findings import RiskAssessment
from ad_risk_engine.orchestrator.aggregator import Clock, aggregate, utc_now
from ad_risk_engine.scoring.model import DEFAULT_SCORING_MODEL, ScoringModel

logger = logging.getLogger(__name__)

CorpusLoader = Callable[..., RuleCorpus]


class CorpusState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class RiskAnalyzer:
    """Single entry point for scoring listings.

    The corpus is loaded at most once per instance. Concurrent callers that
    arrive while the load is in flight await the same task. A failed load is
    terminal: every later call re-raises the same ``CorpusLoadError`` and a new
    instance must be built to try again.
    """

    def __init__(
        self,
        source: CorpusSource | None = None,
        *,
        keywords_document: str = KEYWORDS_DOCUMENT,
        patterns_document: str = PATTERNS_DOCUMENT,
        model: ScoringModel = DEFAULT_SCORING_MODEL,
        clock: Clock = utc_now,
        loader: CorpusLoader = load_corpus,
    ) -> None:
        self._source = source or PackageCorpusSource()
        self._keywords_document = keywords_document
        self._patterns_document = patterns_document
        self._model = model
        self._clock = clock
        self._loader = loader
        self._state = CorpusState.UNINITIALIZED
        self._pending: asyncio.Task[RuleCorpus] | None = None
        self._corpus: RuleCorpus | None = None
        self._error: CorpusLoadError | None = None

    @property
    def state(self) -> CorpusState:
        return self._state

    @property
    def corpus(self) -> RuleCorpus | None:
        return self._corpus

    @property
    def model(self) -> ScoringModel:
        return self._model

    def _set_state(self, state: CorpusState) -> None:
        logger.debug("corpus state %s -> %s", self._state.value, state.value)
        self._state = state

    async def _load(self) -> RuleCorpus:
        try:
            corpus = await asyncio.to_thread(
                self._loader,
                self._source,
                keywords_document=self._keywords_document,
                patterns_document=self._patterns_document,
            )
        except asyncio.CancelledError:
            # the shared load itself was cancelled; the next caller starts a fresh one
            self._pending = None
            self._set_state(CorpusState.UNINITIALIZED)
            raise
        except CorpusLoadError as exc:
            self._fail(exc)
            raise
        except Exception as exc:
            error = CorpusLoadError(f"Corpus load failed: {exc}")
            self._fail(error)
            raise error from exc
        self._corpus = corpus
        self._set_state(CorpusState.READY)
        return corpus

    def _fail(self, error: CorpusLoadError) -> None:
        logger.exception("rule corpus unavailable: %s", error)
        self._error = error
        self._set_state(CorpusState.FAILED)

    async def initialize(self) -> RuleCorpus:
        if self._state is CorpusState.READY and self._corpus is not None:
            return self._corpus
        if self._state is CorpusState.FAILED and self._error is not None:
            raise self._error
        # no await between the check and the assignment, so only one task is created
        if self._pending is None:
            self._set_state(CorpusState.LOADING)
            self._pending = asyncio.ensure_future(self._load())
        # a cancelled caller must not cancel the load the other callers share
        return await asyncio.shield(self._pending)

    async def analyze_ad(self, ad: AdRecord | Mapping[str, Any]) -> RiskAssessment:
        record = ad if isinstance(ad, AdRecord) else parse_ad_payload(dict(ad))
        corpus = await self.initialize()
        assessment = aggregate(run_all(record, corpus, self._model), model=self._model, clock=self._clock)
        if assessment.is_flagged:
            logger.info(
                "listing flagged: level=%s score=%.2f threats=%d",
                assessment.risk_level.value,
                assessment.risk_score,
                len(assessment.threats),
            )
        return assessment

    def analyze_ad_sync(self, ad: AdRecord | Mapping[str, Any]) -> RiskAssessment:
        return asyncio.run(self.analyze_ad(ad))


def create_analyzer(config: AppConfig | None = None, **kwargs: Any) -> RiskAnalyzer:
    cfg = config or AppConfig()
    source: CorpusSource
    if cfg.corpus_dir:
        source = DirectoryCorpusSource(Path(cfg.corpus_dir).expanduser())
    else:
        source = PackageCorpusSource()
    return RiskAnalyzer(
        source,
        keywords_document=cfg.keywords_document,
        patterns_document=cfg.patterns_document,
        **kwargs,
    )
