"""Rectangle rules."""

from torch import Tensor

from numerical_integration._function import IntegrableFunction
from numerical_integration._method import IntegrationMethod, _evaluate


class LeftRectangle(IntegrationMethod):
    """
    Composite left rectangle rule.

    Each subinterval contributes ``h * f(left endpoint)``. Exact for constant
    functions; the error is O(h).

    Examples
    --------
    >>> from numerical_integration import LeftRectangle
    >>> LeftRectangle(0.0, 1.0).integrate(lambda x: x, 2)
    tensor(0.2500, dtype=torch.float64)
    """

    order = 0

    def _integrate(
        self, f: IntegrableFunction, nodes: Tensor, h: float
    ) -> Tensor:
        return h * _evaluate(f, nodes[:-1]).sum(dim=0)


class RightRectangle(IntegrationMethod):
    """
    Composite right rectangle rule.

    Each subinterval contributes ``h * f(right endpoint)``. Exact for constant
    functions; the error is O(h).

    Examples
    --------
    >>> from numerical_integration import RightRectangle
    >>> RightRectangle(0.0, 1.0).integrate(lambda x: x, 2)
    tensor(0.7500, dtype=torch.float64)
    """

    order = 0

    def _integrate(
        self, f: IntegrableFunction, nodes: Tensor, h: float
    ) -> Tensor:
        return h * _evaluate(f, nodes[1:]).sum(dim=0)


class MiddleRectangle(IntegrationMethod):
    """
    Composite midpoint rule.

    Each subinterval contributes ``h * f(midpoint)``. Exact for linear
    functions; the error is O(h^2).
    """

    order = 1

    def _integrate(
        self, f: IntegrableFunction, nodes: Tensor, h: float
    ) -> Tensor:
        return h * _evaluate(f, nodes[:-1] + h / 2).sum(dim=0)
