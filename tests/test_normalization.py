import re

from brokerage.utils import new_record_id, newest_first, normalize_email, parse_iso, parse_price_bound, price_to_number, utc_now_iso


class TestPriceToNumber:
    def test_currency_and_separators(self):
        assert price_to_number("₦85,000,000") == 85000000.0

    def test_suffix_is_ignored(self):
        assert price_to_number("₦3,500,000/yr") == 3500000.0

    def test_decimal_point_is_dropped(self):
        assert price_to_number("$1,200.50") == 120050.0

    def test_no_digits(self):
        assert price_to_number("Price on request") is None
        assert price_to_number("") is None
        assert price_to_number(None) is None


class TestParsePriceBound:
    def test_decimal_and_exponent(self):
        assert parse_price_bound("1000.50") == 1000.5
        assert parse_price_bound(" 1.5e6 ") == 1500000.0

    def test_unparsable_means_no_bound(self):
        assert parse_price_bound("1,000") is None
        assert parse_price_bound("abc") is None
        assert parse_price_bound("nan") is None
        assert parse_price_bound("inf") is None
        assert parse_price_bound("") is None
        assert parse_price_bound(None) is None


class TestRecordIds:
    def test_shape(self):
        record_id = new_record_id("inquiry_")
        assert re.fullmatch(r"inquiry_\d{13}_[0-9a-z]{9}", record_id)

    def test_unique(self):
        assert len({new_record_id("x_") for _ in range(200)}) == 200


class TestTimestamps:
    def test_utc_now_iso_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_now_iso())

    def test_parse_iso_round_trip(self):
        stamp = utc_now_iso()
        assert parse_iso(stamp) is not None
        assert parse_iso("not a date") is None

    def test_newest_first(self):
        records = [
            {"id": "a", "createdAt": "2026-01-01T00:00:00.000Z"},
            {"id": "b", "createdAt": "2026-03-01T00:00:00.000Z"},
            {"id": "c"},
        ]
        assert [r["id"] for r in newest_first(records)] == ["b", "a", "c"]


def test_normalize_email():
    assert normalize_email("  Ada@Example.COM ") == "ada@example.com"
    assert normalize_email(None) == ""
