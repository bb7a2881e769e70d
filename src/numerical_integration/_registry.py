"""Lookup of integration methods by name."""

from typing import Dict, Type

from numerical_integration._gauss import GaussLegendre2
from numerical_integration._method import IntegrationMethod
from numerical_integration._rectangle import (
    LeftRectangle,
    MiddleRectangle,
    RightRectangle,
)
from numerical_integration._simpson import Simpson
from numerical_integration._trapezoid import Trapezoid

METHODS: Dict[str, Type[IntegrationMethod]] = {
    "left_rectangle": LeftRectangle,
    "right_rectangle": RightRectangle,
    "middle_rectangle": MiddleRectangle,
    "trapezoid": Trapezoid,
    "simpson": Simpson,
    "gauss": GaussLegendre2,
}


def integration_method(name: str, a: float, b: float) -> IntegrationMethod:
    """
    Construct an integration method by name.

    Parameters
    ----------
    name : str
        One of the keys of ``METHODS``.
    a, b : float
        Integration bounds.

    Returns
    -------
    IntegrationMethod

    Raises
    ------
    ValueError
        If ``name`` is not a known method.

    Examples
    --------
    >>> from numerical_integration import integration_method
    >>> integration_method("simpson", 0.0, 1.0)
    Simpson(0.0, 1.0)
    """
    if name not in METHODS:
        raise ValueError(
            f"method must be one of {', '.join(map(repr, METHODS))}, "
            f"got {name!r}"
        )

    return METHODS[name](a, b)
