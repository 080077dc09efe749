"""
Domain service: Aggregate impact of the waitlist.
"""
from typing import Optional

from native_yards.config import settings
from native_yards.domain.models import ImpactStats
from native_yards.utils.rounding import round_half_up


class ImpactCalculator:
    """
    Turns a waitlist size into headline impact numbers.

    Assumes an average pledged yard of avg_yard_acres and a net benefit of
    co2_tons_per_acre tons of CO2 per acre per year (sequestration plus
    eliminated lawn-care emissions).
    """

    def __init__(
        self,
        avg_yard_acres: Optional[float] = None,
        co2_tons_per_acre: Optional[float] = None,
    ):
        self.avg_yard_acres = avg_yard_acres if avg_yard_acres is not None else settings.avg_yard_acres
        self.co2_tons_per_acre = (
            co2_tons_per_acre if co2_tons_per_acre is not None else settings.co2_tons_per_acre
        )

    def calculate(self, yard_count: Optional[int]) -> ImpactStats:
        """
        Calculate impact statistics.

        Args:
            yard_count: Number of waitlist signups; None is treated as 0

        Returns:
            ImpactStats with total yards and yearly CO2 tons saved
        """
        total_yards = yard_count or 0
        co2_saved = round_half_up(total_yards * self.avg_yard_acres * self.co2_tons_per_acre)
        return ImpactStats(total_yards=total_yards, co2_saved_tons=co2_saved)
