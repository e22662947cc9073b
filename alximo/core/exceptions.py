"""
Exception hierarchy for alximo.

All exceptions inherit from AlximoError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class AlximoError(Exception):
    """Base exception for all alximo errors."""
    pass


class ValidationError(AlximoError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, including
    unrecognized option strings such as an unknown alternative hypothesis.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when sample vectors differ in length, when two variable sets
    disagree on their number of observations, or when an array has more
    than two dimensions.
    """
    pass


class DegreesOfFreedomError(ValidationError):
    """
    Normalization factor is not positive.

    Raised when the number of observations does not exceed the requested
    delta degrees of freedom, so that (n_observations - ddof) <= 0.

    Attributes:
        n_observations: Number of observations per variable
        ddof: Resolved delta degrees of freedom
    """

    def __init__(
        self,
        message: str,
        n_observations: int | None = None,
        ddof: int | None = None,
    ):
        super().__init__(message)
        self.n_observations = n_observations
        self.ddof = ddof


class NumericalError(AlximoError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class ZeroVarianceError(NumericalError):
    """
    A variable has zero variance, so its correlation is 0/0.

    Raised instead of returning NaN coefficients.

    Attributes:
        variables: Indices of the constant variables, if known
    """

    def __init__(
        self,
        message: str,
        variables: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.variables = variables
