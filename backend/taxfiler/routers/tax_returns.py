"""Tax return router: saved returns, readable and editable by their owner only."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import get_db, TaxReturn
from ..schemas import TaxReturnCreate, TaxReturnUpdate, TaxReturnResponse
from ..services import IncomeTaxCalculator, TaxInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tax", tags=["tax returns"])


def get_current_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """
    Identity of the caller, as established by the upstream auth layer.

    The auth layer forwards the authenticated user's ID in X-User-Id.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Authentication required")
    return x_user_id.strip()


def _get_owned_return(return_id: int, user_id: str, db: Session, action: str) -> TaxReturn:
    tax_return = db.query(TaxReturn).filter(TaxReturn.id == return_id).first()
    if not tax_return:
        raise HTTPException(status_code=404, detail="Tax return not found")

    if not tax_return.is_owned_by(user_id):
        logger.warning("User %s denied %s access to tax return %s", user_id, action, return_id)
        raise HTTPException(
            status_code=403,
            detail=f"Access denied. You can only {action} your own tax returns."
        )
    return tax_return


def _serialize(tax_return: TaxReturn) -> dict:
    return TaxReturnResponse.model_validate(tax_return).model_dump(by_alias=True, mode="json")


def _commit(db: Session):
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Database error while saving tax return")
        raise


@router.post("/create", status_code=201)
async def create_tax_return(
    payload: TaxReturnCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> dict:
    """Create a new tax return for the authenticated user."""
    tax_return = TaxReturn(
        user_id=user_id,
        income=payload.income,
        deductions=payload.deductions,
        tax_credits=payload.tax_credits,
        year=payload.year,
    )
    db.add(tax_return)
    _commit(db)
    db.refresh(tax_return)

    logger.info("Created tax return %s for user %s (year %s)", tax_return.id, user_id, tax_return.year)
    return {
        "success": True,
        "message": "Tax return created successfully",
        "data": _serialize(tax_return)
    }


@router.get("/user/{owner_id}")
async def get_user_tax_returns(
    owner_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> list[dict]:
    """
    Get all tax returns for a user, most recent year first.

    Returns a bare list, not the success/data envelope.
    """
    if owner_id != user_id:
        logger.warning("User %s denied access to tax returns of user %s", user_id, owner_id)
        raise HTTPException(
            status_code=403,
            detail="Access denied. You can only view your own tax returns."
        )

    tax_returns = db.query(TaxReturn).filter(
        TaxReturn.user_id == owner_id
    ).order_by(TaxReturn.year.desc(), TaxReturn.id.desc()).all()

    return [_serialize(r) for r in tax_returns]


@router.get("/return/{return_id}")
async def get_tax_return(
    return_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> dict:
    """Get a specific tax return by ID."""
    tax_return = _get_owned_return(return_id, user_id, db, "view")
    return {"success": True, "data": _serialize(tax_return)}


@router.put("/return/{return_id}")
async def update_tax_return(
    return_id: int,
    payload: TaxReturnUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> dict:
    """Update a tax return. Fields left out of the body are unchanged."""
    tax_return = _get_owned_return(return_id, user_id, db, "update")

    if payload.income is not None:
        tax_return.income = payload.income
    if payload.deductions is not None:
        tax_return.deductions = payload.deductions
    if payload.tax_credits is not None:
        tax_return.tax_credits = payload.tax_credits
    if payload.year is not None:
        tax_return.year = payload.year

    _commit(db)
    db.refresh(tax_return)

    return {
        "success": True,
        "message": "Tax return updated successfully",
        "data": _serialize(tax_return)
    }


@router.delete("/return/{return_id}")
async def delete_tax_return(
    return_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> dict:
    """Delete a tax return."""
    tax_return = _get_owned_return(return_id, user_id, db, "delete")

    db.delete(tax_return)
    _commit(db)

    logger.info("Deleted tax return %s for user %s", return_id, user_id)
    return {"success": True, "message": "Tax return deleted successfully"}


@router.get("/return/{return_id}/calculation")
async def calculate_saved_return(
    return_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
) -> dict:
    """Calculate the liability for a saved return using its year's rates."""
    tax_return = _get_owned_return(return_id, user_id, db, "view")

    tax_input = TaxInput.from_raw(
        tax_return.income,
        tax_return.deductions,
        tax_return.tax_credits,
        tax_return.year
    )
    result = IncomeTaxCalculator(tax_input.year).calculate(tax_input)

    return {
        "success": True,
        "data": {
            "taxReturnId": tax_return.id,
            "year": tax_return.year,
            "ratesYear": result.tax_year,
            "calculation": result.to_dict()
        }
    }
