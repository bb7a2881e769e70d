"""
numerical_integration: fixed-step quadrature of single-variable functions.

Integration methods (composite rules over ``n`` equal subintervals):
    LeftRectangle, RightRectangle, MiddleRectangle, Trapezoid, Simpson,
    GaussLegendre2

Method lookup:
    METHODS, integration_method

Integrands and intervals:
    IntegrableFunction, as_integrable, Interval

Exceptions:
    QuadratureWarning
"""

from numerical_integration._exceptions import QuadratureWarning
from numerical_integration._function import IntegrableFunction, as_integrable
from numerical_integration._gauss import GaussLegendre2
from numerical_integration._interval import Interval
from numerical_integration._method import IntegrationMethod
from numerical_integration._rectangle import (
    LeftRectangle,
    MiddleRectangle,
    RightRectangle,
)
from numerical_integration._registry import METHODS, integration_method
from numerical_integration._simpson import Simpson
from numerical_integration._trapezoid import Trapezoid

__all__ = [
    # Methods
    "IntegrationMethod",
    "LeftRectangle",
    "RightRectangle",
    "MiddleRectangle",
    "Trapezoid",
    "Simpson",
    "GaussLegendre2",
    # Lookup
    "METHODS",
    "integration_method",
    # Integrands and intervals
    "IntegrableFunction",
    "as_integrable",
    "Interval",
    # Exceptions
    "QuadratureWarning",
]

__version__ = "0.1.0"
