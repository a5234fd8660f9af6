"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class AmortizationRequest(BaseModel):
    # All optional here so that every missing field is reported at once
    principal: Decimal | None = Field(None, description="Loan amount")
    annual_interest_rate: Decimal | None = Field(None, description="Annual rate in percent, e.g. 12")
    term_months: int | None = Field(None, description="Loan term in months (0 is treated as 1)")
    starting_date: date | None = Field(None, description="Day before the first payment period")
    remaining_months: int | None = Field(None, description="Payments still outstanding")


# ---- Response schemas ----

class LoanInputResponse(BaseModel):
    principal: float
    annual_interest_rate: float
    term_months: int
    starting_date: date
    remaining_months: int


class SummaryResponse(BaseModel):
    total_pay: float
    total_interest: float
    monthly_repayment: float


class ScheduleEntryResponse(BaseModel):
    status: str
    payment: float
    interest: float
    principal: float
    balance: float
    date: date


class AmortizationResponse(BaseModel):
    inputs: LoanInputResponse
    summary: SummaryResponse
    schedule: list[ScheduleEntryResponse]
    paid_count: int
    not_paid_count: int
    outstanding_balance: float
