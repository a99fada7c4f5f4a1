"""Ad domain models and payload parsing."""

from ad_risk_engine.domain.ad.models import AdRecord, SellerInfo
from ad_risk_engine.domain.ad.parse import parse_ad_payload, parse_price_text

__all__ = ["AdRecord", "SellerInfo", "parse_ad_payload", "parse_price_text"]
