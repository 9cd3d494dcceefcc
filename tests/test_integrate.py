import math

import numpy.testing as npt
import pytest

from lcsrpy.errors import NumericalError
from lcsrpy.functions.integrate import QAGSConfig, integrate
from lcsrpy.functions.special import dilog, gamma_inc_zero


def test_integrate_polynomial():
    npt.assert_allclose(integrate(lambda x: 3.0 * x * x, 0.0, 2.0), 8.0, rtol=1e-12)


def test_integrate_reports_domain_errors():
    with pytest.raises(NumericalError) as info:
        integrate(lambda x: math.log(x - 1.0), 0.0, 0.5, QAGSConfig(), kernel="log", point=3.0)
    assert info.value.kernel == "log"
    assert info.value.point == 3.0
    assert info.value.upper == 0.5
    assert "upper bound = 0.5" in str(info.value)


def test_integrate_reports_non_finite_results():
    with pytest.raises(NumericalError, match="non-finite|kernel"):
        integrate(lambda x: math.inf, 0.0, 1.0, kernel="kernel")


def test_dilog():
    npt.assert_allclose(dilog(0.0), 0.0, atol=1e-15)
    npt.assert_allclose(dilog(1.0), math.pi**2 / 6.0, rtol=1e-12)
    npt.assert_allclose(dilog(-1.0), -math.pi**2 / 12.0, rtol=1e-12)
    # real part above the branch point
    npt.assert_allclose(dilog(2.0), math.pi**2 / 4.0, rtol=1e-12)


def test_incomplete_gamma_at_zero_order():
    # Gamma(0, 1) = E1(1)
    npt.assert_allclose(gamma_inc_zero(1.0), 0.21938393439552, rtol=1e-12)
