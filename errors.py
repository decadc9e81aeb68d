## Modified By: Callam
## Project: Lotto Estimator
## Purpose of File: Engine Error Types
## Description:
## The estimator fails in exactly one way for well-formed input: not enough history.
## Draw records that cannot be coerced into a HistoricalDraw raise InvalidDrawError.


class InsufficientDataError(ValueError):
    """Raised when fewer historical draws are supplied than the engine needs."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"At least {required} historical draws are required to estimate probabilities "
            f"(got {available})."
        )


class InvalidDrawError(ValueError):
    """Raised when a raw draw record is missing fields or has unusable values."""
