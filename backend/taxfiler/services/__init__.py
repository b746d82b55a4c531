from .income_tax_calculator import (
    IncomeTaxCalculator,
    TaxInput,
    TaxResult,
    calculate_income_tax,
    parse_number_or_zero,
)
from .rate_tables import RateTable, RATE_TABLES, rates_for, supported_years
from .filing_deadlines import FilingDeadline, get_filing_deadlines

__all__ = [
    "IncomeTaxCalculator",
    "TaxInput",
    "TaxResult",
    "calculate_income_tax",
    "parse_number_or_zero",
    "RateTable",
    "RATE_TABLES",
    "rates_for",
    "supported_years",
    "FilingDeadline",
    "get_filing_deadlines",
]
