"""Errors raised by ingestion and comparison."""


class InsightsError(ValueError):
    """Base error for input that cannot be analyzed."""


class FormatError(InsightsError):
    """Raised when the CSV header lacks required columns."""

    def __init__(self, missing_columns: list[str]) -> None:
        self.missing_columns = tuple(missing_columns)
        super().__init__(
            "CSV missing required columns: " + ", ".join(self.missing_columns)
        )


class InsufficientDataError(InsightsError):
    """Raised when there are too few days to fill both periods."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Not enough data. Need at least {required} days.")
