"""Tests for engine/pricing.py — end-to-end act pricing."""

from __future__ import annotations

import logging

import pytest

from act_pricing.config.act import load_act
from act_pricing.engine.pricing import apply_margin, calculate_act_pricing, round_half_up

from helpers import StubDistanceClient, make_trip, member

VENUE = "The Barn, Maidstone ME14 1XX"
LONDON_VENUE = "Westminster SW1A 2AA"
DATE = "2026-06-20"


# ═══════════════════════════════════════════════════════════════════════════
# Rounding and margin
# ═══════════════════════════════════════════════════════════════════════════

class TestRounding:
    def test_half_rounds_up(self):
        assert round_half_up(1396.5) == 1397
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3

    def test_below_half_rounds_down(self):
        assert round_half_up(1396.49) == 1396
        assert round_half_up(1197.0) == 1197

    def test_apply_margin(self):
        assert apply_margin(1050, 1.33) == (1397, 347)
        assert apply_margin(0, 1.33) == (0, 0)


# ═══════════════════════════════════════════════════════════════════════════
# County path
# ═══════════════════════════════════════════════════════════════════════════

class TestCountyPricing:
    def test_kent_flat_fee(self, county_act, stub_client):
        result = calculate_act_pricing(county_act, None, VENUE, DATE, distance_client=stub_client)
        assert result.decision == "county"
        assert result.county == "Kent"
        assert result.lineup_size == "Trio"
        assert result.travel_eligible_count == 3
        assert result.base_fee_total == 900
        assert result.travel_fee_total == 150
        assert result.before_margin_subtotal == 1050
        assert result.total == 1397
        assert result.margin_added_approx == 347
        assert result.travel_calculated is True
        assert stub_client.calls == []

    def test_explicit_county_without_address(self, county_act):
        result = calculate_act_pricing(county_act, "Kent", None, None)
        assert result.decision == "county"
        assert result.total == 1397

    def test_managers_not_charged_travel(self, county_act, trio):
        county_act["lineups"] = [{"actSize": "Trio + Manager", "bandMembers": trio + [
            member("Max", fee=0, essential=False, instrument="Band Manager"),
        ]}]
        result = calculate_act_pricing(county_act, "Kent", VENUE, DATE)
        assert result.travel_eligible_count == 3
        assert result.travel_fee_total == 150

    def test_string_flag_accepted(self, county_act):
        county_act["useCountyTravelFee"] = "yes"
        assert calculate_act_pricing(county_act, "Kent").decision == "county"

    def test_county_fee_list_shape(self, county_act):
        county_act["countyFees"] = [{"county": "Kent", "fee": "50"}]
        assert calculate_act_pricing(county_act, "Kent").total == 1397


# ═══════════════════════════════════════════════════════════════════════════
# MU path
# ═══════════════════════════════════════════════════════════════════════════

class TestMuPricing:
    def test_mu_rates_applied(self, mu_act, stub_client):
        result = calculate_act_pricing(mu_act, None, LONDON_VENUE, DATE, distance_client=stub_client)
        assert result.decision == "mu"
        assert result.travel_calculated is True
        assert result.travel_fee_total == pytest.approx(3 * 82.46)
        assert len(result.member_travel) == 3
        assert result.total == round_half_up((900 + result.travel_fee_total) * 1.33)
        assert {c[1] for c in stub_client.calls} == {"SW1A2AA"}
        assert {c[2] for c in stub_client.calls} == {DATE}

    def test_no_destination_or_date_prices_base_only(self, county_act, stub_client):
        result = calculate_act_pricing(county_act, None, "Flat 2, Main St", None, distance_client=stub_client)
        assert result.decision == "mu"
        assert result.travel_calculated is False
        assert result.travel_fee_total == 0
        assert result.total == round_half_up(900 * 1.33)
        assert stub_client.calls == []

    def test_missing_date_only(self, mu_act, stub_client):
        result = calculate_act_pricing(mu_act, None, LONDON_VENUE, "", distance_client=stub_client)
        assert result.travel_calculated is False
        assert result.total == 1197

    def test_county_not_in_table_falls_back_to_mu(self, county_act, stub_client):
        result = calculate_act_pricing(county_act, "Surrey", LONDON_VENUE, DATE, distance_client=stub_client)
        assert result.decision == "mu"
        assert result.county == "Surrey"
        assert len(stub_client.calls) == 3

    def test_zero_county_fee_falls_back_to_mu(self, county_act, stub_client):
        county_act["countyFees"] = {"kent": 0}
        result = calculate_act_pricing(county_act, None, VENUE, DATE, distance_client=stub_client)
        assert result.decision == "mu"

    def test_failed_lookup_skips_member(self, mu_act):
        client = StubDistanceClient(default=make_trip(), failing={"CT12AA"})
        result = calculate_act_pricing(mu_act, None, LONDON_VENUE, DATE, distance_client=client)
        assert result.skipped_members == ["Ben"]
        assert result.travel_fee_total == pytest.approx(2 * 82.46)
        assert result.total == round_half_up(result.before_margin_subtotal * 1.33)

    def test_every_lookup_failing_still_prices(self, mu_act):
        client = StubDistanceClient(failing={"ME141XX", "CT12AA", "TN11AA"})
        result = calculate_act_pricing(mu_act, None, LONDON_VENUE, DATE, distance_client=client)
        assert result.travel_fee_total == 0
        assert result.total == 1197
        assert len(result.skipped_members) == 3

    def test_address_object_destination(self, mu_act, stub_client):
        address = {"formattedAddress": "Westminster, London", "postcode": "SW1A 2AA"}
        result = calculate_act_pricing(mu_act, None, address, DATE, distance_client=stub_client)
        assert result.county == "Greater London"
        assert stub_client.calls[0][1] == "SW1A2AA"


# ═══════════════════════════════════════════════════════════════════════════
# Special paths
# ═══════════════════════════════════════════════════════════════════════════

class TestSpecialPaths:
    def test_test_act_forced_price(self, county_act):
        county_act["isTest"] = True
        result = calculate_act_pricing(county_act, "Kent", VENUE, DATE)
        assert result.total == 0.5
        assert result.forced_test_price is True
        assert result.travel_calculated is False

    def test_test_flag_under_act_data(self):
        result = calculate_act_pricing({"actData": {"isTest": "true"}})
        assert result.total == 0.5
        assert result.forced_test_price is True

    def test_missing_act(self):
        result = calculate_act_pricing(None, "Kent", VENUE, DATE)
        assert result.total == 0
        assert result.travel_calculated is False

    @pytest.mark.parametrize("document", [["x"], "abc", 5])
    def test_non_object_act_treated_as_missing(self, document):
        result = calculate_act_pricing(document, "Kent", VENUE, DATE)
        assert result.total == 0
        assert result.travel_calculated is False
        assert result.trace[-1].message == "act document is not an object"

    def test_no_usable_lineup(self):
        result = calculate_act_pricing({"lineups": [{"actSize": "Duo"}]}, "Kent", VENUE, DATE)
        assert result.total is None
        assert result.travel_calculated is False

    def test_northern_team_substitution(self, northern_act):
        result = calculate_act_pricing(northern_act, "Lancashire", None, None)
        assert result.northern_team_used is True
        assert result.base_fee_total == 400
        assert result.travel_eligible_count == 2
        assert result.travel_fee_total == 60
        assert result.total == round_half_up(460 * 1.33)

    def test_northern_county_from_address(self, northern_act):
        result = calculate_act_pricing(northern_act, None, "Preston PR1 2AA", DATE)
        assert result.county == "Lancashire"
        assert result.northern_team_used is True

    def test_southern_gig_uses_lineup(self, northern_act):
        result = calculate_act_pricing(northern_act, None, VENUE, DATE)
        assert result.northern_team_used is False
        assert result.base_fee_total == 900

    def test_unit_number_in_address_keeps_venue_county(self, northern_act):
        result = calculate_act_pricing(northern_act, None, "Unit B2, Riverside Park, Maidstone ME14 1XX", DATE)
        assert result.county == "Kent"
        assert result.northern_team_used is False

    def test_margin_override(self, county_act):
        county_act["pricing"] = {"marginMultiplier": 1.5}
        result = calculate_act_pricing(county_act, "Kent")
        assert result.margin_multiplier == 1.5
        assert result.total == 1575

    def test_explicit_lineup(self, county_act):
        five_piece = county_act["lineups"][0]
        result = calculate_act_pricing(county_act, "Kent", selected_lineup=five_piece)
        assert result.lineup_size == "5-Piece"
        assert result.base_fee_total == 1500
        assert result.travel_fee_total == 250

    def test_non_essential_members_add_nothing(self, county_act, trio):
        county_act["lineups"] = [{"actSize": "Trio + dep", "bandMembers": trio + [member("Dep", essential=False)]}]
        result = calculate_act_pricing(county_act, "Kent")
        assert result.base_fee_total == 900
        assert result.travel_fee_total == 200

    def test_accepts_hydrated_act(self, county_act):
        assert calculate_act_pricing(load_act(county_act), "Kent").total == 1397


# ═══════════════════════════════════════════════════════════════════════════
# Properties
# ═══════════════════════════════════════════════════════════════════════════

def test_idempotent_with_stub_client(mu_act, stub_client):
    first = calculate_act_pricing(mu_act, None, LONDON_VENUE, DATE, distance_client=stub_client)
    second = calculate_act_pricing(mu_act, None, LONDON_VENUE, DATE, distance_client=stub_client)
    assert first.model_dump() == second.model_dump()


def test_does_not_mutate_input(county_act):
    snapshot = repr(county_act)
    calculate_act_pricing(county_act, "Kent", VENUE, DATE)
    assert repr(county_act) == snapshot


def test_trace_records_decision(county_act):
    result = calculate_act_pricing(county_act, None, VENUE, DATE)
    steps = [e.step for e in result.trace]
    assert steps[0] == "lineup"
    assert "policy" in steps
    assert steps[-1] == "total"


def test_trace_goes_to_injected_logger(county_act, caplog):
    log = logging.getLogger("quote-audit")
    with caplog.at_level(logging.DEBUG, logger="quote-audit"):
        calculate_act_pricing(county_act, "Kent", VENUE, DATE, log=log)
    assert any(r.name == "quote-audit" and "final price" in r.getMessage() for r in caplog.records)
