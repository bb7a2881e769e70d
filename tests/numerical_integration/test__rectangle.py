import math

import numpy as np
import pytest
import scipy.integrate
import torch

N = 100000
EPSILON = 1e-3


class TestLeftRectangle:
    def test_square(self):
        """Integrate x^2 from 0 to 3 = 9.0"""
        from numerical_integration import LeftRectangle

        result = LeftRectangle(0.0, 3.0).integrate(lambda x: x * x, N)

        assert result.item() == pytest.approx(9.0, abs=EPSILON)

    def test_samples_left_endpoints(self):
        """x on [0, 1] with n=2 samples 0 and 0.5"""
        from numerical_integration import LeftRectangle

        result = LeftRectangle(0.0, 1.0).integrate(lambda x: x, 2)

        assert result.item() == pytest.approx(0.25, rel=1e-12)

    def test_underestimates_increasing_function(self):
        from numerical_integration import LeftRectangle

        result = LeftRectangle(0.0, 1.0).integrate(torch.exp, 10)

        assert result.item() < math.e - 1


class TestRightRectangle:
    def test_cos(self):
        """Integrate cos(x) from pi/4 to pi/2 = sin(pi/2) - sin(pi/4)"""
        from numerical_integration import RightRectangle

        a = math.pi / 4
        b = math.pi / 2

        result = RightRectangle(a, b).integrate(torch.cos, N)

        assert result.item() == pytest.approx(
            math.sin(b) - math.sin(a), abs=EPSILON
        )

    def test_samples_right_endpoints(self):
        """x on [0, 1] with n=2 samples 0.5 and 1"""
        from numerical_integration import RightRectangle

        result = RightRectangle(0.0, 1.0).integrate(lambda x: x, 2)

        assert result.item() == pytest.approx(0.75, rel=1e-12)

    def test_overestimates_increasing_function(self):
        from numerical_integration import RightRectangle

        result = RightRectangle(0.0, 1.0).integrate(torch.exp, 10)

        assert result.item() > math.e - 1


class TestMiddleRectangle:
    def test_linear(self):
        """Integrate 1 - x from 2 to 4 = -4.0"""
        from numerical_integration import MiddleRectangle

        result = MiddleRectangle(2.0, 4.0).integrate(lambda x: 1.0 - x, N)

        assert result.item() == pytest.approx(-4.0, abs=EPSILON)

    def test_exact_for_linear(self):
        from numerical_integration import MiddleRectangle

        result = MiddleRectangle(2.0, 4.0).integrate(lambda x: 1.0 - x, 3)

        assert result.item() == pytest.approx(-4.0, rel=1e-12)

    def test_matches_scipy(self):
        """Compare with scipy.integrate.quad"""
        from numerical_integration import MiddleRectangle

        result = MiddleRectangle(-1.0, 1.0).integrate(
            lambda x: torch.exp(-(x**2)), 1000
        )
        expected, _ = scipy.integrate.quad(lambda x: np.exp(-(x**2)), -1, 1)

        assert result.item() == pytest.approx(expected, rel=1e-6)

    def test_more_accurate_than_left_rectangle(self):
        from numerical_integration import LeftRectangle, MiddleRectangle

        exact = math.e - 1

        left = LeftRectangle(0.0, 1.0).integrate(torch.exp, 10)
        middle = MiddleRectangle(0.0, 1.0).integrate(torch.exp, 10)

        assert abs(middle.item() - exact) < abs(left.item() - exact)
