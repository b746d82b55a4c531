"""
Irish income tax rate tables by tax year.

Each table holds the figures needed for a single-person liability:
- Income tax: standard rate (20%) up to the band cutoff, higher rate (40%) above
- USC: simplified two-tier schedule on gross income
- PRSI: flat rate on gross income above a weekly-equivalent threshold

New years are added to RATE_TABLES; the calculation itself never changes.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class RateTable:
    """Rates and thresholds for one tax year."""
    tax_year: int

    # Income tax bands
    standard_rate_cutoff: Decimal
    standard_rate: Decimal
    higher_rate: Decimal

    # USC (Universal Social Charge)
    usc_exemption_threshold: Decimal  # Income at or below this pays no USC
    usc_band_cutoff: Decimal
    usc_lower_rate: Decimal
    usc_upper_rate: Decimal

    # PRSI (Pay Related Social Insurance)
    prsi_threshold: Decimal
    prsi_rate: Decimal


RATES_2023 = RateTable(
    tax_year=2023,
    standard_rate_cutoff=Decimal("36800"),  # Single person
    standard_rate=Decimal("0.20"),
    higher_rate=Decimal("0.40"),
    usc_exemption_threshold=Decimal("13000"),
    usc_band_cutoff=Decimal("22920"),
    usc_lower_rate=Decimal("0.02"),
    usc_upper_rate=Decimal("0.045"),
    prsi_threshold=Decimal("18304"),  # €352 per week
    prsi_rate=Decimal("0.04"),  # Class A1
)

RATE_TABLES: dict[int, RateTable] = {
    RATES_2023.tax_year: RATES_2023,
}


def supported_years() -> list[int]:
    """Tax years with a registered rate table, oldest first."""
    return sorted(RATE_TABLES)


def rates_for(year: Optional[int] = None) -> RateTable:
    """
    Select the rate table for a tax year.

    - Known year: its own table
    - No year, or a year after the newest table: the newest table
    - Year between two tables: the latest table not after it
    - Year before the oldest table: the oldest table
    """
    years = supported_years()

    if year is None:
        return RATE_TABLES[years[-1]]

    if year in RATE_TABLES:
        return RATE_TABLES[year]

    earlier = [y for y in years if y <= year]
    if earlier:
        return RATE_TABLES[earlier[-1]]

    return RATE_TABLES[years[0]]
