"""Utility modules."""

from brokerage.utils.normalization import (
    new_record_id,
    newest_first,
    normalize_email,
    normalize_search,
    parse_iso,
    parse_price_bound,
    price_to_number,
    utc_now_iso,
)

__all__ = [
    "new_record_id",
    "newest_first",
    "normalize_email",
    "normalize_search",
    "parse_iso",
    "parse_price_bound",
    "price_to_number",
    "utc_now_iso",
]
