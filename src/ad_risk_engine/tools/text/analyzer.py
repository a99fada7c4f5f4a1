"""Deep text feature extraction for French listing text."""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass, field
import re
from typing import Any

_FRENCH_STOP_WORDS = frozenset(
    {
        "le", "de", "et", "à", "un", "il", "être", "en", "avoir", "que", "pour",
        "dans", "ce", "son", "une", "sur", "avec", "ne", "se", "pas", "tout", "plus",
        "par", "grand", "les", "des", "est", "du", "la",
    }
)

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_PUNCTUATION_RE = re.compile(r"[.!?]")
_VOWEL_RE = re.compile(r"[aeiouAEIOU]")

_URGENCY_INDICATORS = (
    (re.compile(r"urgente?", re.IGNORECASE), 3),
    (re.compile(r"rapidement", re.IGNORECASE), 2),
    (re.compile(r"vite", re.IGNORECASE), 2),
    (re.compile(r"immédiatement", re.IGNORECASE), 3),
    (re.compile(r"tout de suite", re.IGNORECASE), 2),
    (re.compile(r"départ demain", re.IGNORECASE), 4),
    (re.compile(r"partir ce soir", re.IGNORECASE), 4),
    (re.compile(r"fin de semaine", re.IGNORECASE), 2),
    (re.compile(r"déménagement", re.IGNORECASE), 1),
    (re.compile(r"liquidation", re.IGNORECASE), 3),
    (re.compile(r"braderie", re.IGNORECASE), 2),
    (re.compile(r"!{2,}"), 1),
)
_EMOTIONAL_INDICATORS = (
    (re.compile(r"maladie", re.IGNORECASE), 3),
    (re.compile(r"décès", re.IGNORECASE), 4),
    (re.compile(r"divorce", re.IGNORECASE), 3),
    (re.compile(r"difficultés financières", re.IGNORECASE), 4),
    (re.compile(r"au chômage", re.IGNORECASE), 3),
    (re.compile(r"pour ma fille", re.IGNORECASE), 2),
    (re.compile(r"pour mon fils", re.IGNORECASE), 2),
    (re.compile(r"cadeau", re.IGNORECASE), 1),
    (re.compile(r"anniversaire", re.IGNORECASE), 1),
    (re.compile(r"surprise", re.IGNORECASE), 2),
    (re.compile(r"personne âgée", re.IGNORECASE), 3),
    (re.compile(r"handicapé", re.IGNORECASE), 3),
    (re.compile(r"hôpital", re.IGNORECASE), 3),
)
# (name, regex, risk, description)
_SUSPICIOUS_PATTERNS = (
    ("phone_in_text", re.compile(r"0[1-9](?:[0-9]{8})"), "high", "Numéro de téléphone dans le texte"),
    (
        "email_in_text",
        re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"),
        "high",
        "Email dans le texte",
    ),
    ("foreign_phone", re.compile(r"\+(?!33)[0-9]{10,15}"), "high", "Numéro étranger"),
    (
        "external_platform",
        re.compile(r"facebook|instagram|whatsapp|telegram|signal|viber", re.IGNORECASE),
        "medium",
        "Mention d'autres plateformes",
    ),
    (
        "payment_methods",
        re.compile(r"western union|moneygram|paypal famille|bitcoin|crypto", re.IGNORECASE),
        "high",
        "Méthodes de paiement suspectes",
    ),
    (
        "shipping_only",
        re.compile(r"expédition uniquement|envoi seulement|pas de remise", re.IGNORECASE),
        "medium",
        "Expédition uniquement",
    ),
    (
        "price_justification",
        re.compile(r"prix sacrifié|bradé|liquidation|perte financière", re.IGNORECASE),
        "medium",
        "Justification de prix bas",
    ),
    (
        "authenticity_claims",
        re.compile(r"100% authentique|garantie authenticité|certificat", re.IGNORECASE),
        "low",
        "Revendications d'authenticité",
    ),
    ("repeated_chars", re.compile(r"([a-zA-Z])\1{3,}"), "low", "Caractères répétés"),
    ("excessive_caps", re.compile(r"[A-Z]{5,}"), "low", "Majuscules excessives"),
)
_CONTACT_PATTERNS = (
    ("phone", re.compile(r"tel|téléphone|appel|appelle", re.IGNORECASE)),
    ("sms", re.compile(r"sms|texto|message", re.IGNORECASE)),
    ("email", re.compile(r"mail|email|e-mail", re.IGNORECASE)),
    ("social", re.compile(r"facebook|instagram|snap", re.IGNORECASE)),
    ("messaging", re.compile(r"whatsapp|telegram|signal", re.IGNORECASE)),
)
_PRICE_KEYWORDS = (
    "négociable", "débattable", "ferme", "fixe", "bradé", "sacrifié",
    "liquidation", "affaire", "occasion", "bon prix", "pas cher",
    "gratuit", "offert", "cadeau", "bonus",
)
_LOCATION_KEYWORDS = (
    "région", "secteur", "alentours", "environ", "proche", "loin",
    "déplacement", "livraison", "expédition", "envoi", "poste",
    "remise", "rdv", "rendez-vous",
)
_PATTERN_RISK_WEIGHTS = {"high": 10, "medium": 5, "low": 2}


@dataclass(frozen=True)
class SentenceStats:
    count: int = 0
    avg_length: float = 0.0
    sentences: tuple[str, ...] = ()


@dataclass(frozen=True)
class IndicatorMatch:
    pattern: str
    matches: int
    weight: int


@dataclass(frozen=True)
class IndicatorScore:
    score: int = 0
    matches: tuple[IndicatorMatch, ...] = ()


@dataclass(frozen=True)
class SuspiciousPattern:
    name: str
    description: str
    risk: str
    matches: tuple[str, ...]
    count: int


@dataclass(frozen=True)
class LanguageQuality:
    score: int = 0
    issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class ContactAttempt:
    type: str
    count: int
    matches: tuple[str, ...]


@dataclass(frozen=True)
class KeywordCount:
    keyword: str
    count: int


@dataclass(frozen=True)
class TextFeatures:
    original_text: str = ""
    clean_text: str = ""
    length: int = 0
    word_count: int = 0
    sentences: SentenceStats = field(default_factory=SentenceStats)
    urgency: IndicatorScore = field(default_factory=IndicatorScore)
    emotional: IndicatorScore = field(default_factory=IndicatorScore)
    suspicious_patterns: tuple[SuspiciousPattern, ...] = ()
    readability_score: int = 0
    language_quality: LanguageQuality = field(default_factory=LanguageQuality)
    contact_attempts: tuple[ContactAttempt, ...] = ()
    price_keywords: tuple[KeywordCount, ...] = ()
    location_keywords: tuple[KeywordCount, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


EMPTY_FEATURES = TextFeatures()


def _matches(pattern: re.Pattern[str], text: str) -> tuple[str, ...]:
    return tuple(match.group(0) for match in pattern.finditer(text))


def preprocess_text(text: str) -> str:
    lowered = _NON_WORD_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", lowered).strip()


def count_words(clean_text: str) -> int:
    return sum(
        1 for word in clean_text.split() if len(word) > 1 and word not in _FRENCH_STOP_WORDS
    )


def split_sentences(text: str) -> SentenceStats:
    pieces = [piece for piece in _SENTENCE_SPLIT_RE.split(text) if piece.strip()]
    if not pieces:
        return SentenceStats()
    avg_length = sum(len(piece) for piece in pieces) / len(pieces)
    return SentenceStats(
        count=len(pieces),
        avg_length=avg_length,
        sentences=tuple(piece.strip() for piece in pieces),
    )


def _indicator_score(text: str, indicators: tuple[tuple[re.Pattern[str], int], ...]) -> IndicatorScore:
    score = 0
    matches: list[IndicatorMatch] = []
    for pattern, weight in indicators:
        found = len(_matches(pattern, text))
        if found:
            score += weight * found
            matches.append(IndicatorMatch(pattern=pattern.pattern, matches=found, weight=weight))
    return IndicatorScore(score=score, matches=tuple(matches))


def urgency_score(text: str) -> IndicatorScore:
    return _indicator_score(text, _URGENCY_INDICATORS)


def emotional_score(text: str) -> IndicatorScore:
    return _indicator_score(text, _EMOTIONAL_INDICATORS)


def detect_suspicious_patterns(text: str) -> tuple[SuspiciousPattern, ...]:
    detected: list[SuspiciousPattern] = []
    for name, pattern, risk, description in _SUSPICIOUS_PATTERNS:
        found = _matches(pattern, text)
        if found:
            detected.append(
                SuspiciousPattern(
                    name=name,
                    description=description,
                    risk=risk,
                    matches=found,
                    count=len(found),
                )
            )
    return tuple(detected)


def readability_score(clean_text: str) -> int:
    words = len(clean_text.split())
    sentences = len(_SENTENCE_SPLIT_RE.split(clean_text))
    avg_words_per_sentence = words / sentences if sentences else 0

    score = 100
    if avg_words_per_sentence > 20:
        score -= 20
    elif avg_words_per_sentence > 15:
        score -= 10
    if words < 10:
        score -= 30
    if not _PUNCTUATION_RE.search(clean_text) and words > 20:
        score -= 15
    return max(0, min(100, score))


def assess_language_quality(text: str) -> LanguageQuality:
    score = 100
    issues: list[str] = []

    counts = Counter(word for word in text.lower().split() if len(word) > 3)
    for word, count in counts.items():
        if count > 3:
            score -= 5
            issues.append(f'Répétition excessive: "{word}" ({count} fois)')

    vowel_ratio = len(_VOWEL_RE.findall(text)) / len(text) if text else 0.0
    if vowel_ratio < 0.2:
        score -= 20
        issues.append("Ratio de voyelles anormalement bas")

    return LanguageQuality(score=max(0, score), issues=tuple(issues))


def detect_contact_attempts(text: str) -> tuple[ContactAttempt, ...]:
    detected: list[ContactAttempt] = []
    for contact_type, pattern in _CONTACT_PATTERNS:
        found = _matches(pattern, text)
        if found:
            detected.append(ContactAttempt(type=contact_type, count=len(found), matches=found))
    return tuple(detected)


def _extract_keywords(text: str, vocabulary: tuple[str, ...]) -> tuple[KeywordCount, ...]:
    found: list[KeywordCount] = []
    for keyword in vocabulary:
        count = len(re.findall(re.escape(keyword), text, flags=re.IGNORECASE))
        if count:
            found.append(KeywordCount(keyword=keyword, count=count))
    return tuple(found)


def extract_price_keywords(text: str) -> tuple[KeywordCount, ...]:
    return _extract_keywords(text, _PRICE_KEYWORDS)


def extract_location_keywords(text: str) -> tuple[KeywordCount, ...]:
    return _extract_keywords(text, _LOCATION_KEYWORDS)


def analyze_text(text: Any) -> TextFeatures:
    """Extract every text feature from a free-text string.

    ``None``, non-string and empty input return ``EMPTY_FEATURES``.
    """
    if not isinstance(text, str) or not text:
        return EMPTY_FEATURES

    clean_text = preprocess_text(text)
    return TextFeatures(
        original_text=text,
        clean_text=clean_text,
        length=len(text),
        word_count=count_words(clean_text),
        sentences=split_sentences(text),
        urgency=urgency_score(text),
        emotional=emotional_score(text),
        suspicious_patterns=detect_suspicious_patterns(text),
        readability_score=readability_score(clean_text),
        language_quality=assess_language_quality(text),
        contact_attempts=detect_contact_attempts(text),
        price_keywords=extract_price_keywords(text),
        location_keywords=extract_location_keywords(text),
    )


def calculate_overall_risk(features: TextFeatures) -> float:
    """Fold text features into a single 0-100 risk figure."""
    risk = features.urgency.score * 2.0
    risk += features.emotional.score * 1.5
    for pattern in features.suspicious_patterns:
        risk += _PATTERN_RISK_WEIGHTS.get(pattern.risk, 0) * pattern.count
    risk += (100 - features.language_quality.score) * 0.3
    risk += len(features.contact_attempts) * 5
    return max(0.0, min(100.0, risk))
