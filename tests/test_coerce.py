"""Tests for config/coerce.py — boundary parsing of loose document values."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from act_pricing.config.coerce import (
    coerce_number,
    normalize_county,
    normalize_county_fees,
    normalize_event_date,
    parse_truthy,
    valid_postcode,
)


@pytest.mark.parametrize("value", [True, 1, "true", "TRUE", " yes ", "on", "1"])
def test_truthy_values(value):
    assert parse_truthy(value) is True


@pytest.mark.parametrize("value", [False, 0, 2, None, "", "false", "off", "no", "0", [], {}])
def test_falsy_values(value):
    assert parse_truthy(value) is False


class TestCoerceNumber:
    def test_numbers_and_numeric_strings(self):
        assert coerce_number(50) == 50.0
        assert coerce_number("42.5") == 42.5
        assert coerce_number("£1,250") == 1250.0

    def test_malformed_falls_back(self):
        assert coerce_number("abc") == 0.0
        assert coerce_number(None) == 0.0
        assert coerce_number("") == 0.0
        assert coerce_number({"fee": 3}) == 0.0

    def test_non_finite_falls_back(self):
        assert coerce_number(float("nan")) == 0.0
        assert coerce_number("inf") == 0.0

    def test_bool_is_not_a_number(self):
        assert coerce_number(True) == 0.0

    def test_custom_default(self):
        assert coerce_number("n/a", default=1.33) == 1.33


def test_normalize_county():
    assert normalize_county("  Greater_Manchester ") == "greater manchester"
    assert normalize_county(None) == ""


class TestCountyFees:
    def test_mapping_of_numbers(self):
        assert normalize_county_fees({"Kent": 50, "Greater_London": "35"}) == {
            "kent": 50.0,
            "greater london": 35.0,
        }

    def test_mapping_of_nested_fee_objects(self):
        assert normalize_county_fees({"Kent": {"fee": 50}, "Surrey": {"price": 40}}) == {
            "kent": 50.0,
            "surrey": 40.0,
        }

    def test_list_of_records(self):
        raw = [{"county": "Kent", "fee": 50}, {"name": "Essex", "value": 45}, {"key": "Surrey", "price": 40}]
        assert normalize_county_fees(raw) == {"kent": 50.0, "essex": 45.0, "surrey": 40.0}

    def test_list_of_pairs(self):
        assert normalize_county_fees([["Kent", 50], ("Essex", "45")]) == {"kent": 50.0, "essex": 45.0}

    def test_first_entry_wins(self):
        assert normalize_county_fees([["Kent", 50], ["KENT", 80]]) == {"kent": 50.0}

    def test_junk_dropped(self):
        assert normalize_county_fees([{"fee": 10}, ["", 5], "Kent", 7]) == {}
        assert normalize_county_fees(None) == {}
        assert normalize_county_fees("Kent=50") == {}

    def test_unparseable_fee_is_zero(self):
        assert normalize_county_fees({"Kent": "call us"}) == {"kent": 0.0}


class TestPostcodeAndDate:
    def test_valid_postcode_extracted_and_compacted(self):
        assert valid_postcode("12 High St, Maidstone me14 1xx") == "ME141XX"
        assert valid_postcode("SW1A 2AA") == "SW1A2AA"

    def test_outcode_alone_is_not_a_postcode(self):
        assert valid_postcode("SW1A") == ""
        assert valid_postcode(None) == ""

    def test_event_date_forms(self):
        assert normalize_event_date("2026-06-20") == "2026-06-20"
        assert normalize_event_date("2026-06-20T19:30:00Z") == "2026-06-20"
        assert normalize_event_date(date(2026, 6, 20)) == "2026-06-20"
        assert normalize_event_date(datetime(2026, 6, 20, 19, 30)) == "2026-06-20"

    def test_unusable_dates(self):
        assert normalize_event_date(None) == ""
        assert normalize_event_date("June") == ""
        assert normalize_event_date("2026-13-45") == ""
