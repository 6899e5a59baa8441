"""Static reference data — postcode areas and regional groupings."""

from act_pricing.data.outcodes import OUTCODES_BY_COUNTY
from act_pricing.data.regions import NORTHERN_COUNTIES

__all__ = ["OUTCODES_BY_COUNTY", "NORTHERN_COUNTIES"]
