"""Integrand capability."""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Union

import torch
from torch import Tensor


class IntegrableFunction(ABC):
    """
    Base class for functions that can be integrated.

    Subclasses implement :meth:`evaluate`. By default it receives a tensor of
    sample points and must act elementwise, returning values with the same
    leading shape. A scalar return value is broadcast to every sample point.

    Subclasses that set ``vectorized = False`` receive one Python ``float`` per
    call instead, so plain ``math`` functions and ``if`` branches work.

    Attributes
    ----------
    vectorized : bool
        Whether :meth:`evaluate` accepts a tensor of sample points.

    Examples
    --------
    >>> from numerical_integration import IntegrableFunction, LeftRectangle
    >>> class Square(IntegrableFunction):
    ...     def evaluate(self, x):
    ...         return x * x
    >>> LeftRectangle(0.0, 3.0).integrate(Square(), 3)
    tensor(5., dtype=torch.float64)

    >>> import math
    >>> class Cos(IntegrableFunction):
    ...     vectorized = False
    ...     def evaluate(self, x):
    ...         return math.cos(x)
    >>> LeftRectangle(0.0, math.pi).integrate(Cos(), 2)
    tensor(1.5708, dtype=torch.float64)
    """

    vectorized: bool = True

    @abstractmethod
    def evaluate(self, x: Tensor) -> Tensor:
        """Evaluate the function at sample points ``x``."""
        ...

    def __call__(self, x: Tensor) -> Tensor:
        return self.evaluate(x)


class _CallableFunction(IntegrableFunction):
    """Adapter for plain callables such as ``torch.cos`` or lambdas."""

    def __init__(self, f: Callable[[Tensor], Tensor]):
        self.f = f

    def evaluate(self, x: Tensor) -> Tensor:
        return self.f(x)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.f!r})"


class _PointwiseFunction(IntegrableFunction):
    """
    Evaluate a scalar function one sample point at a time.

    Each point is passed as a Python ``float`` and the results are stacked
    back into a tensor shaped like the sample points.
    """

    def __init__(self, f: Callable[[float], float]):
        self.f = f

    def evaluate(self, x: Tensor) -> Tensor:
        values = [
            torch.as_tensor(self.f(point), dtype=x.dtype, device=x.device)
            for point in x.reshape(-1).tolist()
        ]

        result = torch.stack(values)

        return result.reshape(x.shape + result.shape[1:])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.f!r})"


def as_integrable(
    f: Union[IntegrableFunction, Callable[[Tensor], Tensor]],
    *,
    vectorized: Optional[bool] = None,
) -> IntegrableFunction:
    """
    Return ``f`` as a vectorized :class:`IntegrableFunction`.

    Parameters
    ----------
    f : IntegrableFunction or callable
        Integrand. Plain callables are wrapped.
    vectorized : bool, optional
        Whether ``f`` accepts a tensor of sample points. If False, ``f`` is
        called once per point with a Python ``float``. Defaults to
        ``f.vectorized`` for :class:`IntegrableFunction` instances and to
        True for plain callables.

    Returns
    -------
    IntegrableFunction

    Raises
    ------
    TypeError
        If ``f`` is not callable.

    Examples
    --------
    >>> import math
    >>> import torch
    >>> from numerical_integration import as_integrable
    >>> f = as_integrable(math.cos, vectorized=False)
    >>> f(torch.tensor([0.0], dtype=torch.float64))
    tensor([1.], dtype=torch.float64)
    """
    if not isinstance(f, IntegrableFunction):
        if not callable(f):
            raise TypeError(
                f"integrand must be callable, got {type(f).__name__}"
            )
        f = _CallableFunction(f)

    if vectorized is None:
        vectorized = f.vectorized

    if not vectorized:
        return _PointwiseFunction(f.evaluate)

    return f
