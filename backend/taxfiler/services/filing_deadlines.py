"""
Irish self-assessment filing deadlines.

- Oct 31: Income tax return (Form 11) for the previous year
- Dec 15: CGT on gains made Jan-Nov
- Jan 31 (following year): Preliminary / balancing self-assessed income tax
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class FilingDeadline:
    """A dated filing or payment obligation."""
    due_date: date
    description: str
    tax_type: str

    def to_dict(self) -> dict:
        return {
            "date": self.due_date.isoformat(),
            "description": self.description,
            "taxType": self.tax_type,
        }


def get_filing_deadlines(today: Optional[date] = None) -> list[FilingDeadline]:
    """Deadlines for the calendar year of `today`, in date order."""
    year = (today or date.today()).year

    return [
        FilingDeadline(
            due_date=date(year, 10, 31),
            description="Income Tax Return Deadline",
            tax_type="Income Tax",
        ),
        FilingDeadline(
            due_date=date(year, 12, 15),
            description="Capital Gains Tax Payment Deadline",
            tax_type="CGT",
        ),
        FilingDeadline(
            due_date=date(year + 1, 1, 31),
            description="Tax Payment Deadline for Self-Assessed Income Tax",
            tax_type="Income Tax",
        ),
    ]
