"""
Exception hierarchy for edustats.

All exceptions inherit from EduStatsError to allow catching any
library-specific error. Every class carries a stable ``code`` string
(EmptyData, InsufficientData, ConstantData, InvalidArgument) so a
presentation layer can map the failure to a localized message without
parsing the text.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class EduStatsError(Exception):
    """Base exception for all edustats errors."""
    code = "Error"


class ValidationError(EduStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    code = "ValidationError"


class EmptyDataError(ValidationError):
    """
    No numeric observations to analyse.

    Raised for an empty sample, an empty grouped table, or a grouped
    table whose frequencies sum to zero.
    """
    code = "EmptyData"


class InsufficientDataError(ValidationError):
    """
    Fewer observations than the computation requires.

    Attributes:
        required: Minimum number of observations needed
        actual: Number of observations supplied
    """
    code = "InsufficientData"

    def __init__(
        self,
        message: str,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.required = required
        self.actual = actual


class ConstantDataError(ValidationError):
    """
    All observations are identical.

    Raised when a zero range makes a computation impossible (binning,
    standardization).

    Attributes:
        value: The single repeated value, if known
    """
    code = "ConstantData"

    def __init__(self, message: str, value: float | None = None):
        super().__init__(message)
        self.value = value


class InvalidArgumentError(ValidationError):
    """
    Argument outside the domain of a combinatorial function.

    Attributes:
        argument: Name of the offending argument
        value: The rejected value
    """
    code = "InvalidArgument"

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        value: object = None,
    ):
        super().__init__(message)
        self.argument = argument
        self.value = value
