import numpy as np
import numpy.testing as npt
import pytest
from scipy.integrate import quad

from lcsrpy.form_factors.pi_lcdas import PionLCDAs
from lcsrpy.parameters import Parameters


@pytest.fixture
def lcdas():
    return PionLCDAs(Parameters.defaults())


@pytest.fixture
def at_scale(lcdas):
    return lcdas.at_scale(1.5)


def _derivative(f, u, h=1e-5):
    return (f(u + h) - f(u - h)) / (2.0 * h)


def test_moments_at_the_input_scale(lcdas):
    parameters = Parameters.defaults()
    npt.assert_allclose(lcdas.a2pi(1.0), parameters["pi::a2@1GeV"](), rtol=1e-12)
    npt.assert_allclose(lcdas.deltapipi(1.0), parameters["pi::delta^2@1GeV"](), rtol=1e-12)


def test_moments_decrease_with_the_scale(lcdas):
    assert abs(lcdas.a2pi(2.0)) < abs(lcdas.a2pi(1.0))
    assert abs(lcdas.a4pi(2.0)) < abs(lcdas.a4pi(1.0))
    assert abs(lcdas.f3pi(2.0)) < abs(lcdas.f3pi(1.0))


def test_mupi_is_the_chiral_ratio(lcdas):
    parameters = Parameters.defaults()
    mpi = parameters["mass::pi^+"]()
    m_ud = lcdas.model.m_u_msbar(2.0) + lcdas.model.m_d_msbar(2.0)
    npt.assert_allclose(lcdas.mupi(2.0), mpi**2 / m_ud, rtol=1e-12)


@pytest.mark.parametrize("name", ["phi", "phi3p", "phi3s"])
def test_distribution_amplitudes_are_normalised(at_scale, name):
    value, _ = quad(getattr(at_scale, name), 0.0, 1.0)
    npt.assert_allclose(value, 1.0, rtol=1e-10)


def test_twist_four_integral(at_scale):
    npt.assert_allclose(at_scale.psi4_i(0.0), 0.0, atol=1e-15)
    npt.assert_allclose(at_scale.psi4_i(1.0), 0.0, atol=1e-15)
    for u in (0.1, 0.4, 0.75):
        value, _ = quad(at_scale.psi4, 0.0, u)
        npt.assert_allclose(at_scale.psi4_i(u), value, rtol=1e-10)


@pytest.mark.parametrize("u", [0.05, 0.3, 0.5, 0.8])
def test_derivatives(at_scale, u):
    npt.assert_allclose(at_scale.phi3s_d1(u), _derivative(at_scale.phi3s, u), rtol=1e-6, atol=1e-9)
    npt.assert_allclose(at_scale.phi4_d1(u), _derivative(at_scale.phi4, u), rtol=1e-5, atol=1e-9)
    npt.assert_allclose(at_scale.phi4_d2(u), _derivative(at_scale.phi4_d1, u), rtol=1e-5, atol=1e-8)


def test_endpoints_are_finite(at_scale):
    for u in (0.0, 1.0):
        assert np.isfinite(at_scale.phi4(u))
        assert np.isfinite(at_scale.phi4_d2(u))


def test_forwarding_methods_match_the_snapshot(lcdas, at_scale):
    assert lcdas.phi(0.3, 1.5) == at_scale.phi(0.3)
    assert lcdas.psi4_i(0.3, 1.5) == at_scale.psi4_i(0.3)
    assert "pi::a2@1GeV" in lcdas.used_parameter_names
