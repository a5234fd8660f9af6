"""Input errors raised before any amortization math runs."""


class LoanInputError(ValueError):
    """Base class for malformed loan input."""


class MissingFieldError(LoanInputError):
    def __init__(self, fields: list[str] | tuple[str, ...]):
        self.fields = tuple(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class InvalidTypeError(LoanInputError):
    def __init__(self, field: str, value: object, expected: str):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be {expected}, got {type(value).__name__}")
