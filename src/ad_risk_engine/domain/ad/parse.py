"""Input normalization for ad payloads handed over by the extraction layer."""

from __future__ import annotations

import json
import re
from typing import Any

from ad_risk_engine.domain.ad.models import AdRecord

_PRICE_DIGITS_RE = re.compile(r"(\d+(?:\s?\d+)*)")
_SPACES_RE = re.compile(r"\s")


def parse_price_text(raw: Any) -> float | None:
    """Turn a displayed price such as ``"1 200 €"`` into a number.

    Only the integer part of the first number is kept, as listing cards show
    whole euros. Returns ``None`` when no digits are present.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return float(raw)
    match = _PRICE_DIGITS_RE.search(str(raw))
    if match is None:
        return None
    return float(int(_SPACES_RE.sub("", match.group(1))))


def _coerce_count(raw: Any) -> int:
    if isinstance(raw, bool):
        return 0
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return 0
    return value if value > 0 else 0


def _coerce_optional_text(raw: Any) -> str | None:
    if raw is None:
        return None
    value = str(raw).strip()
    return value or None


def parse_ad_payload(raw: str | dict[str, Any]) -> AdRecord:
    """Build an ``AdRecord`` from a JSON string or a mapping.

    Loose values coming from scraped pages are normalized: price strings are
    parsed, photo counts are coerced to non-negative integers and a seller
    value that is not an object is dropped.
    """
    if isinstance(raw, str):
        payload = json.loads(raw)
    else:
        payload = raw
    if not isinstance(payload, dict):
        raise ValueError("Ad payload must be a JSON object.")

    data = dict(payload)
    if "price" in data:
        data["price"] = parse_price_text(data.get("price"))
    for key in ("photosCount", "photos_count"):
        if key in data:
            data[key] = _coerce_count(data[key])
    if "location" in data:
        data["location"] = _coerce_optional_text(data.get("location"))
    return AdRecord.model_validate(data)
