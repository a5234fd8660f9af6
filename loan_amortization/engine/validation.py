"""Raw loan input validation.

Turns a caller-supplied mapping into a LoanInput or raises before any
computation happens. Range problems (zero/negative rate, zero term) are not
errors here; only missing fields and wrong shapes are.
"""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from loan_amortization.errors import InvalidTypeError, MissingFieldError
from loan_amortization.models.loan import LoanInput

REQUIRED_FIELDS = (
    "principal",
    "annual_interest_rate",
    "term_months",
    "starting_date",
    "remaining_months",
)


def _to_decimal(field: str, value: object) -> Decimal:
    if isinstance(value, bool):
        raise InvalidTypeError(field, value, "a number")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        # str() so 0.1 becomes Decimal("0.1"), not its binary expansion
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidTypeError(field, value, "a number") from None
    else:
        raise InvalidTypeError(field, value, "a number")
    if not result.is_finite():
        raise InvalidTypeError(field, value, "a finite number")
    return result


def _to_int(field: str, value: object) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _to_decimal(field, value)
    if number != number.to_integral_value():
        raise InvalidTypeError(field, value, "a whole number of months")
    return int(number)


def _to_date(field: str, value: object) -> date:
    # datetime is a date subclass; keep only the calendar part
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidTypeError(field, value, "a date")


def validate_loan_input(data: Mapping[str, object]) -> LoanInput:
    """Validate a raw input mapping and return a normalized LoanInput.

    Raises:
        MissingFieldError: one or more required fields absent (or None);
            all of them are listed.
        InvalidTypeError: a field is present but has the wrong shape.
    """
    missing = [f for f in REQUIRED_FIELDS if data.get(f) is None]
    if missing:
        raise MissingFieldError(missing)

    return LoanInput(
        principal=_to_decimal("principal", data["principal"]),
        annual_interest_rate=_to_decimal("annual_interest_rate", data["annual_interest_rate"]),
        term_months=_to_int("term_months", data["term_months"]),
        starting_date=_to_date("starting_date", data["starting_date"]),
        remaining_months=_to_int("remaining_months", data["remaining_months"]),
    )
