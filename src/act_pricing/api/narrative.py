"""Narrative generator — plain-English explanation of a quote.

Turns a ``PricingResult`` into a short text block an agent can paste into
an enquiry reply or read while checking why a price looks off.
"""

from __future__ import annotations

from act_pricing.models.results import PricingResult


def generate_quote_narrative(result: PricingResult) -> str:
    """Explain how ``result.total`` was reached.

    Covers the soft-failure paths, the travel decision, the fee build-up
    and the decision trail.
    """
    if result.forced_test_price:
        return f"Test listing: priced at the nominal £{result.total:.2f}; no fees or travel applied."
    if result.total is None:
        return "No lineup with a member list was found for this act, so no price could be calculated."
    if result.decision is None:
        return "No act was supplied; the quote defaults to £0."

    sections: list[str] = []

    sections.append("=" * 60)
    sections.append("QUOTE SUMMARY")
    sections.append("=" * 60)
    sections.append(
        f"Lineup: {result.lineup_size or 'unnamed'}"
        f"{' (northern team)' if result.northern_team_used else ''}\n"
        f"County: {result.county or 'not resolved'}\n"
        f"Travel pricing: {'county flat fee' if result.decision == 'county' else 'MU rates'}\n"
        f"Total: £{result.total:,}"
    )

    sections.append("")
    sections.append("=" * 60)
    sections.append("BUILD-UP")
    sections.append("=" * 60)
    sections.append(f"Base fees:  £{result.base_fee_total:,.2f}")
    for fee in result.member_fees:
        if fee.member_total:
            sections.append(f"  {fee.name:30s}  £{fee.member_total:8.2f}")

    if result.travel_calculated:
        sections.append(
            f"Travel:     £{result.travel_fee_total:,.2f} "
            f"({result.travel_eligible_count} travelling member(s))"
        )
        for cost in result.member_travel:
            sections.append(
                f"  {cost.name:30s}  £{cost.cost:8.2f}  "
                f"({cost.total_distance_miles:.0f} mi, {cost.total_duration_hours:.1f} h)"
            )
    else:
        sections.append("Travel:     not calculated (no destination or event date)")

    if result.skipped_members:
        sections.append(f"No travel priced for: {', '.join(result.skipped_members)}")

    sections.append(f"Subtotal:   £{result.before_margin_subtotal:,.2f}")
    sections.append(
        f"Margin:     ×{result.margin_multiplier} (≈ £{result.margin_added_approx:,} added)"
    )

    if result.trace:
        sections.append("")
        sections.append("=" * 60)
        sections.append("DECISION TRAIL")
        sections.append("=" * 60)
        for event in result.trace:
            sections.append(f"[{event.step}] {event.message}")

    return "\n".join(sections)
