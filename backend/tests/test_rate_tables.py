"""
Tests for rate table lookup by tax year.
"""
import pytest
from dataclasses import FrozenInstanceError, replace
from decimal import Decimal

from taxfiler.services import rate_tables
from taxfiler.services.rate_tables import RATES_2023, RATE_TABLES, rates_for, supported_years


@pytest.fixture
def extra_years(monkeypatch):
    """Register a 2025 table alongside 2023."""
    rates_2025 = replace(RATES_2023, tax_year=2025, standard_rate_cutoff=Decimal("44000"))
    monkeypatch.setitem(rate_tables.RATE_TABLES, 2025, rates_2025)
    return rates_2025


class TestRates2023:
    """The shipped 2023 figures."""

    def test_income_tax_bands(self):
        assert RATES_2023.standard_rate_cutoff == Decimal("36800")
        assert RATES_2023.standard_rate == Decimal("0.20")
        assert RATES_2023.higher_rate == Decimal("0.40")

    def test_levies(self):
        assert RATES_2023.usc_exemption_threshold == Decimal("13000")
        assert RATES_2023.usc_band_cutoff == Decimal("22920")
        assert RATES_2023.usc_lower_rate == Decimal("0.02")
        assert RATES_2023.usc_upper_rate == Decimal("0.045")
        assert RATES_2023.prsi_threshold == Decimal("18304")
        assert RATES_2023.prsi_rate == Decimal("0.04")

    def test_tables_are_immutable(self):
        with pytest.raises(FrozenInstanceError):
            RATES_2023.standard_rate = Decimal("0.25")


class TestRatesFor:
    """Test year -> table selection."""

    def test_supported_years(self):
        assert supported_years() == [2023]
        assert RATE_TABLES[2023] is RATES_2023

    def test_known_year(self):
        assert rates_for(2023) is RATES_2023

    def test_no_year_uses_latest(self):
        assert rates_for() is RATES_2023
        assert rates_for(None) is RATES_2023

    def test_later_year_uses_latest(self):
        assert rates_for(2024) is RATES_2023

    def test_earlier_year_uses_oldest(self):
        assert rates_for(2019) is RATES_2023

    def test_no_year_with_several_tables(self, extra_years):
        assert supported_years() == [2023, 2025]
        assert rates_for() is extra_years

    def test_gap_year_uses_previous_table(self, extra_years):
        """2024 has no table of its own: 2023 rates still apply."""
        assert rates_for(2024) is RATES_2023

    def test_exact_match_with_several_tables(self, extra_years):
        assert rates_for(2025) is extra_years
        assert rates_for(2023) is RATES_2023

    def test_future_year_with_several_tables(self, extra_years):
        assert rates_for(2030) is extra_years
