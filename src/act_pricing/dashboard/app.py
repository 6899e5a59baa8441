"""Act pricing quote desk — Streamlit dashboard.

Layout: sidebar inputs (act document, venue, date, lineup) → main area with
headline metrics, fee build-up table, price waterfall, and decision trail.

Run with:
    streamlit run src/act_pricing/dashboard/app.py
"""

from __future__ import annotations

import json
import logging
from datetime import date

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from act_pricing.config.act import load_act
from act_pricing.config.settings import settings
from act_pricing.engine.card import compute_card_base_price, travel_summary
from act_pricing.engine.pricing import calculate_act_pricing
from act_pricing.api.narrative import generate_quote_narrative
from act_pricing.services.distance_client import HttpDistanceClient

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
)

_SAMPLE_ACT = {
    "name": "Sample Function Band",
    "useCountyTravelFee": True,
    "countyFees": {"Kent": 50, "Surrey": 40, "Greater London": 35},
    "lineups": [
        {
            "actSize": "4-Piece",
            "bandMembers": [
                {"firstName": "Lead", "instrument": "Vocals", "isEssential": True, "fee": 300, "postCode": "ME14 1XX"},
                {"firstName": "Guitar", "instrument": "Guitar", "isEssential": True, "fee": 250, "postCode": "CT1 2AA"},
                {"firstName": "Bass", "instrument": "Bass", "isEssential": True, "fee": 250, "postCode": "TN1 1AA"},
                {"firstName": "Drums", "instrument": "Drums", "isEssential": True, "fee": 250, "postCode": "SE1 7PB",
                 "additionalRoles": [{"role": "Sound engineer", "isEssential": True, "additionalFee": 50}]},
            ],
        },
    ],
}

st.set_page_config(page_title="Act Pricing", page_icon="🎸", layout="wide")

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.header("Quote Inputs")

with st.sidebar.expander("Act document", expanded=True):
    act_text = st.text_area("Act JSON", value=json.dumps(_SAMPLE_ACT, indent=2), height=320)

with st.sidebar.expander("Event", expanded=True):
    address = st.text_input("Venue address / postcode", value="Maidstone ME14 1XX")
    county = st.text_input("County (optional)", value="")
    event_date = st.date_input("Event date", value=date.today())

with st.sidebar.expander("Travel API"):
    api_url = st.text_input("Travel-data base URL", value=settings.travel_api_base_url)

run_clicked = st.sidebar.button("Get Quote", type="primary", use_container_width=True)

# ---------------------------------------------------------------------------
# Main area
# ---------------------------------------------------------------------------
st.title("Act Pricing")

try:
    act_doc = json.loads(act_text) if act_text.strip() else None
except json.JSONDecodeError as e:
    st.error(f"Act JSON is not valid: {e}")
    st.stop()

if act_doc is not None and not isinstance(act_doc, dict):
    st.error(f"Act JSON must be an object, got {type(act_doc).__name__}.")
    st.stop()

if act_doc:
    act = load_act(act_doc)
    card = compute_card_base_price(act)
    summary = travel_summary(act)
    c1, c2, c3 = st.columns(3)
    c1.metric("Card price (from)", f"£{card.base_price:,}")
    c2.metric("Travel model", summary.type)
    c3.metric("Lineups", len(act.lineups))

if not run_clicked:
    st.info("Set the venue and date in the sidebar, then press **Get Quote**.")
    st.stop()

result = calculate_act_pricing(
    act_doc,
    county or None,
    address or None,
    event_date.isoformat() if event_date else None,
    distance_client=HttpDistanceClient(base_url=api_url),
)

if result.total is None or result.decision is None:
    st.warning(generate_quote_narrative(result))
    st.stop()

m1, m2, m3, m4 = st.columns(4)
m1.metric("Total", f"£{result.total:,}")
m2.metric("Base fees", f"£{result.base_fee_total:,.2f}")
m3.metric("Travel", f"£{result.travel_fee_total:,.2f}", help=f"Decision: {result.decision}")
m4.metric("Margin", f"×{result.margin_multiplier}", f"≈ £{result.margin_added_approx:,}")

if not result.travel_calculated:
    st.warning("Travel was not calculated: no destination or event date.")
if result.skipped_members:
    st.warning(f"No travel priced for: {', '.join(result.skipped_members)}")

left, right = st.columns(2)

with left:
    st.subheader("Fee build-up")
    fee_rows = pd.DataFrame(
        [
            {"Member": f.name, "Base (£)": f.member_base, "Roles (£)": f.roles_total, "Total (£)": f.member_total}
            for f in result.member_fees
        ]
    )
    st.dataframe(fee_rows, use_container_width=True, hide_index=True)

    if result.member_travel:
        st.subheader("MU travel")
        travel_rows = pd.DataFrame(
            [
                {
                    "Member": c.name,
                    "From": c.origin,
                    "Miles": round(c.total_distance_miles, 1),
                    "Hours": round(c.total_duration_hours, 2),
                    "Fuel (£)": round(c.fuel_fee, 2),
                    "Time (£)": round(c.time_fee, 2),
                    "Late (£)": c.late_fee,
                    "Tolls (£)": c.toll_fee,
                    "Cost (£)": round(c.cost, 2),
                }
                for c in result.member_travel
            ]
        )
        st.dataframe(travel_rows, use_container_width=True, hide_index=True)

with right:
    st.subheader("Price waterfall")
    fig = go.Figure(go.Waterfall(
        orientation="v",
        measure=["relative", "relative", "relative", "total"],
        x=["Base fees", "Travel", "Margin", "Total"],
        y=[
            result.base_fee_total,
            result.travel_fee_total,
            result.total - result.before_margin_subtotal,
            result.total,
        ],
        text=[
            f"£{result.base_fee_total:,.0f}",
            f"£{result.travel_fee_total:,.0f}",
            f"£{result.total - result.before_margin_subtotal:,.0f}",
            f"£{result.total:,}",
        ],
        textposition="outside",
    ))
    fig.update_layout(height=380, margin=dict(l=10, r=10, t=10, b=10), showlegend=False)
    st.plotly_chart(fig, use_container_width=True)

with st.expander("Decision trail"):
    trail_rows = pd.DataFrame(
        [{"Step": e.step, "Message": e.message, "Data": json.dumps(e.data, default=str)} for e in result.trace]
    )
    st.dataframe(trail_rows, use_container_width=True, hide_index=True)

with st.expander("Narrative"):
    st.code(generate_quote_narrative(result), language=None)
