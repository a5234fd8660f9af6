from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class PaymentStatus(Enum):
    PAID = "paid"
    NOT_PAID = "not_paid"


@dataclass(frozen=True)
class LoanInput:
    principal: Decimal
    annual_interest_rate: Decimal  # Percent per year, e.g. Decimal("12") for 12%
    term_months: int  # As supplied; 0 is treated as 1
    starting_date: date  # Day before the first payment period
    remaining_months: int  # Payments still outstanding as of now

    @property
    def effective_term_months(self) -> int:
        return 1 if self.term_months == 0 else self.term_months

    @property
    def monthly_rate(self) -> Decimal:
        return (self.annual_interest_rate / 12) / 100


@dataclass(frozen=True)
class PeriodBreakdown:
    """One period's split of the fixed payment into interest and principal."""
    payment: Decimal
    interest: Decimal
    principal: Decimal
    balance: Decimal  # After this period's principal is applied
    date: date


@dataclass(frozen=True)
class ScheduleEntry:
    period: int
    status: PaymentStatus
    payment: Decimal
    interest: Decimal
    principal: Decimal
    balance: Decimal
    date: date

    @property
    def is_paid(self) -> bool:
        return self.status is PaymentStatus.PAID


@dataclass(frozen=True)
class LoanSummary:
    total_pay: Decimal
    total_interest: Decimal
    monthly_repayment: Decimal


@dataclass(frozen=True)
class AmortizationResult:
    inputs: LoanInput
    summary: LoanSummary
    schedule: tuple[ScheduleEntry, ...]

    @property
    def paid_entries(self) -> tuple[ScheduleEntry, ...]:
        return tuple(e for e in self.schedule if e.is_paid)

    @property
    def not_paid_entries(self) -> tuple[ScheduleEntry, ...]:
        return tuple(e for e in self.schedule if not e.is_paid)

    @property
    def outstanding_balance(self) -> Decimal:
        """Balance still owed as of now.

        Balance prior to the first unpaid period: the full principal when
        nothing has been paid, the final balance when everything has.
        """
        balance = self.inputs.principal
        for entry in self.schedule:
            if not entry.is_paid:
                break
            balance = entry.balance
        return balance
