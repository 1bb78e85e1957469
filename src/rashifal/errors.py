"""Failure taxonomy for the horoscope pipeline."""


class HoroscopeError(Exception):
    """Terminal failure for a whole request. No partial horoscope is produced."""


class InvalidInputError(HoroscopeError):
    """Caller supplied a non-finite longitude, malformed date key, or unknown timezone."""


class InvariantViolationError(HoroscopeError):
    """A computed value left its contractual range.

    Distinct from InvalidInputError: this signals a programming-contract
    violation and carries the offending values for operators.
    """

    def __init__(self, message: str, **detail: object) -> None:
        super().__init__(message)
        self.detail = detail

    def __str__(self) -> str:
        if not self.detail:
            return super().__str__()
        extra = ", ".join(f"{k}={v!r}" for k, v in self.detail.items())
        return f"{super().__str__()} ({extra})"
