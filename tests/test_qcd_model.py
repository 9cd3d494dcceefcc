import numpy.testing as npt
import pytest

from lcsrpy.errors import ConfigurationError, NumericalError
from lcsrpy.models import StandardModel, WilsonScanModel, make_model
from lcsrpy.models import qcd
from lcsrpy.options import HeavyQuark, LeptonFlavor, Options
from lcsrpy.parameters import Parameters


@pytest.fixture
def parameters():
    return Parameters.defaults()


def test_alpha_s_at_the_z_mass(parameters):
    model = StandardModel(parameters)
    npt.assert_allclose(model.alpha_s(91.1876), parameters["QCD::alpha_s(MZ)"](), rtol=1e-8)


def test_alpha_s_grows_towards_low_scales(parameters):
    model = StandardModel(parameters)
    values = [model.alpha_s(mu) for mu in (10.0, 4.0, 2.0, 1.5, 1.0)]
    assert all(a < b for a, b in zip(values[:-1], values[1:]))
    # rough size of the coupling at the charm scale
    assert 0.3 < model.alpha_s(1.5) < 0.4


def test_alpha_s_rejects_unphysical_scales():
    with pytest.raises(NumericalError):
        qcd.alpha_s(0.0, 0.1179, 91.1876, 4.18, 1.27)


def test_charm_mass_at_its_own_scale(parameters):
    model = StandardModel(parameters)
    npt.assert_allclose(model.m_c_msbar(1.27), 1.27, rtol=1e-12)
    # masses decrease with the scale
    assert model.m_c_msbar(3.0) < 1.27 < model.m_c_msbar(1.1)


def test_light_mass_running_round_trip(parameters):
    model = StandardModel(parameters)
    m_s_1 = model.m_s_msbar(1.0)
    back = qcd.run_mass(m_s_1, 1.0, 2.0, model.alpha_s, 4.18, 1.27)
    npt.assert_allclose(back, parameters["mass::s(2GeV)"](), rtol=1e-10)
    assert model.running_mass("s", 2.0) == model.m_s_msbar(2.0)
    with pytest.raises(ConfigurationError):
        model.running_mass("t", 2.0)


def test_beta_coefficients_for_five_flavours():
    beta0, beta1, beta2, _ = qcd.beta_coefficients(5)
    npt.assert_allclose([beta0, beta1, beta2], [23.0 / 3.0, 116.0 / 3.0, 9769.0 / 54.0])


def test_standard_model_ckm(parameters):
    model = StandardModel(parameters)
    npt.assert_allclose(abs(model.ckm_cd()), 0.2265, rtol=5e-3)
    npt.assert_allclose(abs(model.ckm_cs()), 0.9735, rtol=5e-3)
    wc = model.wilson_coefficients(HeavyQuark.DOWN, LeptonFlavor.MUON)
    assert wc.cvl == 1.0 and wc.ct == 0.0


def test_wilson_scan_model(parameters):
    parameters["scmunumu::Re{cT}"] = 0.1
    parameters["scmunumu::Im{cT}"] = 0.2
    model = make_model("WET", parameters, Options())
    assert isinstance(model, WilsonScanModel)
    npt.assert_allclose(abs(model.ckm_cs()), parameters["CKM::abs(V_cs)"]())

    wc = model.wilson_coefficients(HeavyQuark.STRANGE, LeptonFlavor.MUON)
    assert wc.ct == 0.1 + 0.2j
    assert model.wilson_coefficients("s", "mu", cp_conjugate=True).ct == 0.1 - 0.2j
    assert model.wilson_coefficients(HeavyQuark.DOWN, LeptonFlavor.MUON).ct == 0.0
    assert "scmunumu::Re{cT}" in model.used_parameter_names


def test_unknown_model(parameters):
    with pytest.raises(ConfigurationError, match="Unknown model"):
        make_model("MSSM", parameters)


def test_alpha_s_cache_follows_the_inputs(parameters):
    model = StandardModel(parameters)
    before = model.alpha_s(2.0)
    assert model.alpha_s(2.0) == before
    assert qcd.alpha_s.cache_info().hits > 0

    parameters["QCD::alpha_s(MZ)"] = 0.125
    assert model.alpha_s(2.0) > before
