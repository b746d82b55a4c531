"""
Irish Income Tax Liability Calculator

Computes a PAYE-style liability for a single person:
- Income tax: 20% standard rate up to the band cutoff, 40% above
- Tax credits reduce gross tax (never below zero)
- USC on gross income (simplified: 2% / 4.5%)
- PRSI at 4% of gross income above the threshold

Key points:
- Deductions reduce taxable income, credits reduce tax
- USC and PRSI are cliffs, not marginal bands: crossing the threshold
  charges the rate on the whole gross income
- Inputs that are missing, negative or not numbers count as 0
"""

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from .rate_tables import RateTable, rates_for


ZERO = Decimal("0")

# Amounts outside 1e-30 .. 1e30 count as 0
MAX_AMOUNT_EXPONENT = 30


def parse_number_or_zero(value: Any) -> Decimal:
    """
    Convert a raw input (query string, JSON value) to a non-negative Decimal.

    Anything that is not a finite, non-negative number of sane magnitude
    becomes 0.
    """
    if value is None or isinstance(value, bool):
        return ZERO

    if isinstance(value, float):
        if not math.isfinite(value):
            return ZERO
        value = repr(value)

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return ZERO

    try:
        number = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return ZERO

    if not number.is_finite() or number <= 0:
        return ZERO

    # Exponents near the context limits overflow in the band arithmetic
    if abs(number.adjusted()) > MAX_AMOUNT_EXPONENT:
        return ZERO

    return number


@dataclass(frozen=True)
class TaxInput:
    """Normalized calculator inputs."""
    gross_income: Decimal = ZERO
    deductions: Decimal = ZERO
    tax_credits: Decimal = ZERO
    year: Optional[int] = None

    @classmethod
    def from_raw(
        cls,
        income: Any = None,
        deductions: Any = None,
        tax_credits: Any = None,
        year: Any = None
    ) -> "TaxInput":
        """Build an input from unvalidated request values."""
        return cls(
            gross_income=parse_number_or_zero(income),
            deductions=parse_number_or_zero(deductions),
            tax_credits=parse_number_or_zero(tax_credits),
            year=_parse_year(year),
        )


@dataclass(frozen=True)
class TaxResult:
    """Liability breakdown for one calculation."""
    tax_year: int

    gross_income: Decimal
    taxable_income: Decimal

    # Income tax
    tax_at_standard_rate: Decimal
    tax_at_higher_rate: Decimal
    gross_tax: Decimal
    tax_credits: Decimal
    net_tax: Decimal

    # Levies
    usc: Decimal
    prsi: Decimal

    # Totals
    total_tax_liability: Decimal
    net_income: Decimal
    effective_tax_rate: Decimal  # Percentage, unrounded

    @property
    def effective_tax_rate_display(self) -> str:
        """Effective rate with exactly two decimals, e.g. '21.63'."""
        rounded = self.effective_tax_rate.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return f"{rounded:.2f}"

    def to_dict(self) -> dict:
        """Wire representation shared by the API and client previews."""
        return {
            "grossIncome": float(self.gross_income),
            "taxableIncome": float(self.taxable_income),
            "taxAtStandardRate": float(self.tax_at_standard_rate),
            "taxAtHigherRate": float(self.tax_at_higher_rate),
            "grossTax": float(self.gross_tax),
            "taxCredits": float(self.tax_credits),
            "netTax": float(self.net_tax),
            "usc": float(self.usc),
            "prsi": float(self.prsi),
            "totalTaxLiability": float(self.total_tax_liability),
            "netIncome": float(self.net_income),
            "effectiveTaxRate": self.effective_tax_rate_display,
        }


class IncomeTaxCalculator:
    """
    Calculator for Irish income tax, USC and PRSI.

    Stateless apart from the rate table chosen at construction, so one
    instance can serve any number of calculations.
    """

    def __init__(self, tax_year: Optional[int] = None, rates: Optional[RateTable] = None):
        self.rates = rates or rates_for(tax_year)

    def calculate(self, tax_input: TaxInput) -> TaxResult:
        """Calculate the liability for normalized inputs."""
        rates = self.rates
        gross_income = tax_input.gross_income

        taxable_income = max(ZERO, gross_income - tax_input.deductions)

        standard, higher = self.calculate_income_tax_bands(taxable_income)
        gross_tax = standard + higher

        # Credits come off the tax, not the income
        net_tax = max(ZERO, gross_tax - tax_input.tax_credits)

        usc = self.calculate_usc(gross_income)
        prsi = self.calculate_prsi(gross_income)

        total = net_tax + usc + prsi
        net_income = gross_income - total

        if gross_income > 0:
            effective_rate = total / gross_income * 100
        else:
            effective_rate = ZERO

        return TaxResult(
            tax_year=rates.tax_year,
            gross_income=gross_income,
            taxable_income=taxable_income,
            tax_at_standard_rate=standard,
            tax_at_higher_rate=higher,
            gross_tax=gross_tax,
            tax_credits=tax_input.tax_credits,
            net_tax=net_tax,
            usc=usc,
            prsi=prsi,
            total_tax_liability=total,
            net_income=net_income,
            effective_tax_rate=effective_rate,
        )

    def calculate_income_tax_bands(self, taxable_income: Decimal) -> tuple[Decimal, Decimal]:
        """Split income tax into (standard rate, higher rate) portions."""
        rates = self.rates

        if taxable_income <= rates.standard_rate_cutoff:
            return taxable_income * rates.standard_rate, ZERO

        standard = rates.standard_rate_cutoff * rates.standard_rate
        higher = (taxable_income - rates.standard_rate_cutoff) * rates.higher_rate
        return standard, higher

    def calculate_usc(self, gross_income: Decimal) -> Decimal:
        """USC on gross income. Not marginal at the exemption threshold."""
        rates = self.rates

        if gross_income <= rates.usc_exemption_threshold:
            return ZERO

        if gross_income <= rates.usc_band_cutoff:
            return gross_income * rates.usc_lower_rate

        return (
            rates.usc_band_cutoff * rates.usc_lower_rate
            + (gross_income - rates.usc_band_cutoff) * rates.usc_upper_rate
        )

    def calculate_prsi(self, gross_income: Decimal) -> Decimal:
        """PRSI on the whole gross income once above the threshold."""
        if gross_income > self.rates.prsi_threshold:
            return gross_income * self.rates.prsi_rate
        return ZERO


def calculate_income_tax(
    income: Any = None,
    deductions: Any = None,
    tax_credits: Any = None,
    year: Any = None
) -> TaxResult:
    """Normalize raw inputs and calculate the liability. Never raises."""
    tax_input = TaxInput.from_raw(income, deductions, tax_credits, year)
    return IncomeTaxCalculator(tax_input.year).calculate(tax_input)


def _parse_year(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None
