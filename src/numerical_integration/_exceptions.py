"""Exceptions for fixed-step quadrature."""


class QuadratureWarning(UserWarning):
    """Warning for quadrature issues (e.g., non-finite integrand values)."""

    pass
