"""Configuration models — act documents, rate card, runtime settings."""

from act_pricing.config.act import Act, Lineup, Member, Role, load_act, load_lineup
from act_pricing.config.rates import RateCard

__all__ = [
    "Act",
    "Lineup",
    "Member",
    "Role",
    "RateCard",
    "load_act",
    "load_lineup",
]
