"""Tax calculation router."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Query

from ..schemas import RateTableResponse, TaxCalculationEnvelope
from ..services import calculate_income_tax, get_filing_deadlines, RATE_TABLES, supported_years

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tax", tags=["tax"])


@router.get("/calculate", response_model=TaxCalculationEnvelope)
async def calculate_tax(
    income: Optional[str] = Query(None, description="Gross income"),
    deductions: Optional[str] = Query(None, description="Total deductions"),
    tax_credits: Optional[str] = Query(None, alias="taxCredits", description="Total tax credits"),
    year: Optional[str] = Query(None, description="Tax year (defaults to the latest rate table)")
) -> dict:
    """
    Calculate income tax, USC and PRSI from query parameters.

    Missing or invalid values are treated as 0, so this never fails
    on bad input.
    """
    result = calculate_income_tax(income, deductions, tax_credits, year)
    logger.debug("Calculated liability for tax year %s", result.tax_year)
    return {"success": True, "data": result.to_dict()}


@router.post("/calculate", response_model=TaxCalculationEnvelope)
async def calculate_tax_from_body(payload: Any = Body(None)) -> dict:
    """Same as GET /calculate, reading the fields from a JSON body."""
    fields = payload if isinstance(payload, dict) else {}

    result = calculate_income_tax(
        fields.get("income"),
        fields.get("deductions"),
        fields.get("taxCredits"),
        fields.get("year")
    )
    return {"success": True, "data": result.to_dict()}


@router.get("/rates")
async def get_rate_tables() -> dict:
    """Rate tables available to the calculator, oldest year first."""
    return {
        "success": True,
        "data": [
            RateTableResponse.model_validate(RATE_TABLES[year]).model_dump()
            for year in supported_years()
        ]
    }


@router.get("/deadlines")
async def get_deadlines() -> dict:
    """Irish filing and payment deadlines for the current year."""
    deadlines = get_filing_deadlines()
    return {
        "success": True,
        "data": [d.to_dict() for d in deadlines]
    }
