"""Domain error codes for the prices module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_DATE = "INVALID_DATE"
    INVALID_AGE = "INVALID_AGE"
    INVALID_COST = "INVALID_COST"
    UNKNOWN_CATEGORY = "UNKNOWN_CATEGORY"
    UNKNOWN_BASE_PRICE = "UNKNOWN_BASE_PRICE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidDateError(DomainError):
    """Raised when a date cannot be read as a calendar date."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid date format, expected YYYY-MM-DD",
        )
        self.value = value


class InvalidAgeError(DomainError):
    """Raised when an age is not a non-negative integer."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_AGE,
            message="Age must be a non-negative integer",
        )
        self.value = value


class InvalidCostError(DomainError):
    """Raised when a base cost is not a non-negative integer."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_COST,
            message="Cost must be a non-negative integer",
        )
        self.value = value


class UnknownCategoryError(DomainError):
    """Raised when a ticket category is neither day nor night."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_CATEGORY,
            message="Unknown ticket category",
        )
        self.value = value


class UnknownBasePriceError(DomainError):
    """Raised when no base price is stored for a category."""

    def __init__(self, category: object) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_BASE_PRICE,
            message="No base price for ticket category",
        )
        self.category = category
