"""Amortization routes: raw loan input in, rendered schedule out."""

import logging
from decimal import Decimal

from fastapi import APIRouter, HTTPException

from loan_amortization.api.schemas import (
    AmortizationRequest,
    AmortizationResponse,
    LoanInputResponse,
    ScheduleEntryResponse,
    SummaryResponse,
)
from loan_amortization.config import settings
from loan_amortization.engine.amortization import compute_amortization
from loan_amortization.errors import LoanInputError
from loan_amortization.models.loan import AmortizationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.api_prefix, tags=["amortization"])


def _money(value: Decimal) -> float:
    places = settings.response_decimal_places
    if places is None:
        return float(value)
    return round(float(value), places)


def _result_to_response(result: AmortizationResult) -> AmortizationResponse:
    """Convert engine AmortizationResult to API response."""
    loan = result.inputs
    inputs = LoanInputResponse(
        principal=_money(loan.principal),
        annual_interest_rate=float(loan.annual_interest_rate),
        term_months=loan.term_months,
        starting_date=loan.starting_date,
        remaining_months=loan.remaining_months,
    )

    s = result.summary
    summary = SummaryResponse(
        total_pay=_money(s.total_pay),
        total_interest=_money(s.total_interest),
        monthly_repayment=_money(s.monthly_repayment),
    )

    schedule = [
        ScheduleEntryResponse(
            status=e.status.value,
            payment=_money(e.payment),
            interest=_money(e.interest),
            principal=_money(e.principal),
            balance=_money(e.balance),
            date=e.date,
        )
        for e in result.schedule
    ]

    return AmortizationResponse(
        inputs=inputs,
        summary=summary,
        schedule=schedule,
        paid_count=len(result.paid_entries),
        not_paid_count=len(result.not_paid_entries),
        outstanding_balance=_money(result.outstanding_balance),
    )


@router.post("/amortization", response_model=AmortizationResponse)
async def amortize(req: AmortizationRequest):
    """Compute the summary and month-by-month schedule for a fixed-rate loan."""
    try:
        result = compute_amortization(req.model_dump(exclude_unset=True))
    except LoanInputError as e:
        logger.info("Rejected loan input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return _result_to_response(result)
