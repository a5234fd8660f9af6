"""Amortization schedule computation for fixed-rate installment loans.

Pure functions: Decimal in, frozen dataclass out. No I/O.
Amounts are carried at full Decimal context precision; rounding is left to
whatever renders the result.
"""

import logging
from collections.abc import Mapping
from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from loan_amortization.engine.validation import validate_loan_input
from loan_amortization.models.loan import (
    AmortizationResult,
    LoanInput,
    LoanSummary,
    PaymentStatus,
    PeriodBreakdown,
    ScheduleEntry,
)

logger = logging.getLogger(__name__)


def monthly_rate(annual_interest_rate: Decimal) -> Decimal:
    """Annual percent rate -> monthly decimal rate (12 -> 0.01)."""
    return (annual_interest_rate / 12) / 100


def effective_term(term_months: int) -> int:
    """A term of 0 months is treated as a single payment."""
    return 1 if term_months == 0 else term_months


def monthly_payment(principal: Decimal, rate: Decimal, term_months: int) -> Decimal:
    """Fixed annuity payment for a monthly rate over term_months periods.

    payment = P * r / (1 - (1 + r)^-n), or P / n when r is zero or too small
    to register against 1 at the current Decimal precision.
    """
    n = effective_term(term_months)
    if rate == 0:
        return principal / n
    denominator = 1 - (1 + rate) ** -n
    if denominator == 0:
        return principal / n
    return principal * (rate / denominator)


def next_period_date(previous: date) -> date:
    """One calendar month after `previous`.

    Day-of-month is clamped to the end of shorter months: Jan 31 gives
    Feb 28 (or 29). The clamped day carries forward, so the next step is Mar 28.
    """
    return previous + relativedelta(months=1)


def amortize_period(
    balance: Decimal, rate: Decimal, payment: Decimal, on: date
) -> PeriodBreakdown:
    """Split one fixed payment into interest and principal."""
    interest = balance * rate
    principal_paid = payment - interest
    return PeriodBreakdown(
        payment=payment,
        interest=interest,
        principal=principal_paid,
        balance=balance - principal_paid,
        date=on,
    )


def payment_status(period: int, term_months: int, remaining_months: int) -> PaymentStatus:
    """Label a period paid or not paid given how many payments remain.

    term_months must already be the effective term.
    """
    if remaining_months == term_months:
        return PaymentStatus.NOT_PAID
    months_paid = term_months - remaining_months
    return PaymentStatus.PAID if period <= months_paid else PaymentStatus.NOT_PAID


def amortization_schedule(
    loan: LoanInput, pmt: Decimal | None = None
) -> tuple[ScheduleEntry, ...]:
    """Roll the balance and date forward over every period of the loan.

    The payment is fixed before the loop starts (computed here unless passed
    in) and the loop bound never changes; status labels do not affect any
    amount.
    """
    n_periods = loan.effective_term_months
    rate = loan.monthly_rate
    if pmt is None:
        pmt = monthly_payment(loan.principal, rate, n_periods)

    entries: list[ScheduleEntry] = []
    balance = loan.principal
    running_date = loan.starting_date

    for period in range(1, n_periods + 1):
        running_date = next_period_date(running_date)
        step = amortize_period(balance, rate, pmt, running_date)
        entries.append(ScheduleEntry(
            period=period,
            status=payment_status(period, n_periods, loan.remaining_months),
            payment=step.payment,
            interest=step.interest,
            principal=step.principal,
            balance=step.balance,
            date=step.date,
        ))
        balance = step.balance

    return tuple(entries)


def loan_summary(principal: Decimal, payment: Decimal, term_months: int) -> LoanSummary:
    total_pay = payment * effective_term(term_months)
    return LoanSummary(
        total_pay=total_pay,
        total_interest=total_pay - principal,
        monthly_repayment=payment,
    )


def compute_amortization(data: Mapping[str, object]) -> AmortizationResult:
    """Validate raw loan input and compute its summary and full schedule.

    Args:
        data: Mapping with principal, annual_interest_rate (percent),
            term_months, starting_date and remaining_months.

    Raises:
        MissingFieldError, InvalidTypeError: before anything is computed.
    """
    loan = validate_loan_input(data)
    n_periods = loan.effective_term_months
    rate = loan.monthly_rate
    pmt = monthly_payment(loan.principal, rate, n_periods)

    logger.debug(
        "Amortizing %s at %s%% over %d months (%d remaining): payment %s",
        loan.principal, loan.annual_interest_rate, n_periods, loan.remaining_months, pmt,
    )

    # Echo the normalized inputs: coerced term, rate rebuilt from the monthly rate
    inputs = LoanInput(
        principal=loan.principal,
        annual_interest_rate=rate * 12 * 100,
        term_months=n_periods,
        starting_date=loan.starting_date,
        remaining_months=loan.remaining_months,
    )

    return AmortizationResult(
        inputs=inputs,
        summary=loan_summary(loan.principal, pmt, n_periods),
        schedule=amortization_schedule(loan, pmt),
    )
