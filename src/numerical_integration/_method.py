"""Base class for fixed-step integration methods."""

import numbers
import warnings
from abc import ABC, abstractmethod
from typing import Callable, Optional, Union

import torch
from torch import Tensor

from numerical_integration._exceptions import QuadratureWarning
from numerical_integration._function import IntegrableFunction, as_integrable
from numerical_integration._interval import Interval


def _evaluate(f: IntegrableFunction, x: Tensor) -> Tensor:
    """Evaluate ``f`` at ``x``, broadcasting scalar results to ``x.shape``."""
    values = f(x)

    if not isinstance(values, Tensor):
        values = torch.as_tensor(values, dtype=x.dtype, device=x.device)

    if values.dim() == 0:
        values = values.expand(x.shape)

    return values


class IntegrationMethod(ABC):
    """
    Composite fixed-step quadrature over an interval [a, b].

    The interval is split into ``n`` subintervals of width ``h = (b - a) / n``.
    Subclasses define how each subinterval is sampled and weighted.

    Parameters
    ----------
    a : float
        Left integration bound.
    b : float
        Right integration bound. May be smaller than ``a``, in which case the
        result changes sign.

    Attributes
    ----------
    order : int
        Highest polynomial degree integrated exactly by the composite rule.
    """

    order: int

    def __init__(self, a: float, b: float):
        self._interval = Interval(a, b)

    @property
    def left_border(self) -> float:
        return self._interval.left

    @property
    def right_border(self) -> float:
        return self._interval.right

    @property
    def interval(self) -> Interval:
        """Copy of the integration interval."""
        return Interval(self._interval.left, self._interval.right)

    def set_integration_borders(self, a: float, b: float) -> None:
        self._interval.set(a, b)

    def copy(self) -> "IntegrationMethod":
        return self.__copy__()

    def __copy__(self) -> "IntegrationMethod":
        return type(self)(self.left_border, self.right_border)

    def __eq__(self, other) -> bool:
        if not isinstance(other, IntegrationMethod):
            return NotImplemented
        return (
            type(self) is type(other) and self._interval == other._interval
        )

    def __repr__(self) -> str:
        name = type(self).__name__
        return f"{name}({self.left_border!r}, {self.right_border!r})"

    def integrate(
        self,
        f: Union[IntegrableFunction, Callable[[Tensor], Tensor]],
        n: int,
        *,
        vectorized: Optional[bool] = None,
        dtype: torch.dtype = torch.float64,
        device: Optional[torch.device] = None,
    ) -> Tensor:
        """
        Integrate ``f`` over the interval using ``n`` subintervals.

        Parameters
        ----------
        f : IntegrableFunction or callable
            Integrand. Receives a tensor of sample points and returns the
            function values elementwise.
        n : int
            Number of equal-width subintervals.
        vectorized : bool, optional
            Whether ``f`` accepts a tensor of sample points. If False, ``f``
            is called once per point with a Python ``float``. Defaults to
            ``f.vectorized`` for :class:`IntegrableFunction` instances and to
            True for plain callables.
        dtype : torch.dtype
            Data type of the sample points.
        device : torch.device, optional
            Device of the sample points.

        Returns
        -------
        Tensor
            Integral approximation. 0-dim for scalar integrands, otherwise the
            trailing shape of the integrand values.

        Raises
        ------
        TypeError
            If ``n`` is not an integer or ``f`` is not callable.
        ValueError
            If ``n < 1``.

        Warns
        -----
        QuadratureWarning
            If the integrand produced non-finite values.

        Notes
        -----
        Differentiable with respect to parameters captured in f's closure.
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError(f"n must be an integer, got {type(n).__name__}")
        if n < 1:
            raise ValueError(f"n must be at least 1, got {n}")

        f = as_integrable(f, vectorized=vectorized)

        a = self.left_border
        h = (self.right_border - a) / n

        # Subinterval i spans [nodes[i], nodes[i + 1]]
        nodes = a + h * torch.arange(n + 1, dtype=dtype, device=device)

        result = self._integrate(f, nodes, h)

        if not torch.all(torch.isfinite(result)):
            warnings.warn(
                f"{type(self).__name__} produced a non-finite result on "
                f"[{self.left_border}, {self.right_border}] with n={n}",
                QuadratureWarning,
            )

        return result

    @abstractmethod
    def _integrate(
        self, f: IntegrableFunction, nodes: Tensor, h: float
    ) -> Tensor:
        """
        Sum the rule over all subintervals.

        Parameters
        ----------
        f : IntegrableFunction
            Integrand.
        nodes : Tensor
            Subinterval endpoints, shape (n + 1,).
        h : float
            Signed subinterval width.
        """
        ...
