import warnings

import pytest

from numerical_integration import QuadratureWarning


class TestExceptions:
    def test_quadrature_warning_is_user_warning(self):
        assert issubclass(QuadratureWarning, UserWarning)

    def test_quadrature_warning_can_be_raised(self):
        with pytest.warns(QuadratureWarning, match="test"):
            warnings.warn("test", QuadratureWarning)
