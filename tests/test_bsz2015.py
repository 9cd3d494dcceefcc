import numpy.testing as npt
import pytest

from lcsrpy.form_factors.bsz2015 import TRANSITIONS, BSZ2015FormFactors
from lcsrpy.parameters import Parameters


@pytest.fixture
def parameters():
    return Parameters.defaults()


@pytest.mark.parametrize("process", list(TRANSITIONS))
def test_normalisation_at_zero_recoil_of_the_lepton_pair(parameters, process):
    ff = BSZ2015FormFactors(process, parameters)
    # z(0) - z_0 vanishes, only the constant coefficient survives
    npt.assert_allclose(ff.f_p(0.0), parameters[f"{process}::alpha^f+_0@BSZ2015"](), rtol=1e-12)
    npt.assert_allclose(ff.f_t(0.0), parameters[f"{process}::alpha^fT_0@BSZ2015"](), rtol=1e-12)
    assert ff.f_0(0.0) == ff.f_p(0.0)
    assert ff.f_plus_T(0.0) == 0.0


def test_form_factors_rise_towards_the_pole(parameters):
    ff = BSZ2015FormFactors("D->K", parameters)
    q2_max = (ff.constants.m_B - ff.constants.m_P) ** 2
    assert ff.f_p(q2_max) > ff.f_p(0.0)
    assert ff.f_0(q2_max) > 0.0


def test_coefficients_are_read_through_the_registry(parameters):
    ff = BSZ2015FormFactors("D->pi", parameters)
    before = ff.f_p(1.0)
    parameters["D->pi::alpha^f+_1@BSZ2015"] = 0.0
    parameters["D->pi::alpha^f+_2@BSZ2015"] = 0.0
    after = ff.f_p(1.0)
    assert before != after
    m2 = TRANSITIONS["D->pi"].m2_Br1m
    npt.assert_allclose(after, parameters["D->pi::alpha^f+_0@BSZ2015"]() / (1.0 - 1.0 / m2))
    assert "D->pi::alpha^f0_1@BSZ2015" in ff.used_parameter_names
