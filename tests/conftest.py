from __future__ import annotations

from datetime import datetime, timezone

import pytest

from ad_risk_engine.corpus.loader import MappingCorpusSource, load_corpus
from ad_risk_engine.corpus.models import RuleCorpus
from ad_risk_engine.domain.ad.models import AdRecord

FIXED_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

SMALL_KEYWORDS = {
    "urgence": {"high": ["urgent"], "medium": ["rapidement"], "low": ["vite"]},
    "paiement": {"high": ["western union"], "low": ["paypal"]},
}
SMALL_PATTERNS = {
    "phone_number": {
        "pattern": r"0[1-9](?:\d{2}){4}",
        "risk_level": "high",
        "description": "Numéro de téléphone",
    },
    "shipping_only": {
        "pattern": r"envoi (?:uniquement|seulement)",
        "risk_level": "medium",
        "description": "Expédition uniquement",
    },
}


@pytest.fixture(scope="session")
def bundled_corpus() -> RuleCorpus:
    return load_corpus()


@pytest.fixture
def small_source() -> MappingCorpusSource:
    return MappingCorpusSource(
        {"suspicious-keywords": SMALL_KEYWORDS, "scam-patterns": SMALL_PATTERNS}
    )


@pytest.fixture
def small_corpus(small_source: MappingCorpusSource) -> RuleCorpus:
    return load_corpus(small_source)


@pytest.fixture
def make_ad():
    def _make(**overrides: object) -> AdRecord:
        payload: dict[str, object] = {
            "title": "Table basse bois",
            "description": "Bon état, à récupérer sur place",
            "price": 45,
            "category": "meubles",
            "location": "Lyon 3e",
            "photosCount": 4,
            "seller": {"accountAge": 400, "reviewCount": 12, "similarItemsCount": 1},
        }
        payload.update(overrides)
        return AdRecord.model_validate(payload)

    return _make


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME
