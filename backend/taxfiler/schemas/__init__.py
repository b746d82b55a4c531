from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Optional

MIN_TAX_YEAR = 2000
MAX_TAX_YEAR = 2100


class TaxReturnCreate(BaseModel):
    income: Decimal = Field(ge=0)
    deductions: Decimal = Field(Decimal("0"), ge=0)
    tax_credits: Decimal = Field(Decimal("0"), ge=0, alias="taxCredits")
    year: int = Field(ge=MIN_TAX_YEAR, le=MAX_TAX_YEAR)

    class Config:
        populate_by_name = True


class TaxReturnUpdate(BaseModel):
    income: Optional[Decimal] = Field(None, ge=0)
    deductions: Optional[Decimal] = Field(None, ge=0)
    tax_credits: Optional[Decimal] = Field(None, ge=0, alias="taxCredits")
    year: Optional[int] = Field(None, ge=MIN_TAX_YEAR, le=MAX_TAX_YEAR)

    class Config:
        populate_by_name = True


class TaxReturnResponse(BaseModel):
    id: int
    user_id: str = Field(alias="userId")
    income: float
    deductions: float
    tax_credits: float = Field(alias="taxCredits")
    year: int
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class TaxCalculationResponse(BaseModel):
    grossIncome: float
    taxableIncome: float
    taxAtStandardRate: float
    taxAtHigherRate: float
    grossTax: float
    taxCredits: float
    netTax: float
    usc: float
    prsi: float
    totalTaxLiability: float
    netIncome: float
    effectiveTaxRate: str


class RateTableResponse(BaseModel):
    tax_year: int
    standard_rate_cutoff: float
    standard_rate: float
    higher_rate: float
    usc_exemption_threshold: float
    usc_band_cutoff: float
    usc_lower_rate: float
    usc_upper_rate: float
    prsi_threshold: float
    prsi_rate: float

    class Config:
        from_attributes = True


class TaxCalculationEnvelope(BaseModel):
    success: bool = True
    data: TaxCalculationResponse
