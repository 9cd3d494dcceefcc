import numpy as np
import numpy.testing as npt
import pytest
from scipy.integrate import quad

from lcsrpy.decays import DToPseudoscalarLeptonNeutrino
from lcsrpy.decays.d_to_psd_l_nu import ZERO_AMPLITUDES
from lcsrpy.errors import ConfigurationError, NumericalError
from lcsrpy.options import Options
from lcsrpy.parameters import Parameters


@pytest.fixture
def parameters():
    return Parameters.defaults()


@pytest.fixture
def d_to_k_mu(parameters):
    return DToPseudoscalarLeptonNeutrino(parameters, Options())


@pytest.fixture
def d_to_pi_e(parameters):
    return DToPseudoscalarLeptonNeutrino(
        parameters, Options({"Q": "d", "q": "d", "I": "1", "l": "e"})
    )


@pytest.fixture
def tensor(parameters):
    parameters["dcmunumu::Re{cT}"] = 0.3
    parameters["dcmunumu::Im{cT}"] = 0.1
    parameters["dcmunumu::Re{cSL}"] = 0.2
    return DToPseudoscalarLeptonNeutrino(
        parameters, Options({"Q": "d", "q": "u", "I": "1", "l": "mu", "model": "WET"})
    )


def test_default_options(d_to_k_mu):
    assert d_to_k_mu.descriptor.process == "D->K"
    assert d_to_k_mu.options["form-factors"] == "BSZ2015"
    assert "D->K::alpha^f+_0@BSZ2015" in d_to_k_mu.used_parameter_names
    assert "life_time::D_d" in d_to_k_mu.used_parameter_names
    assert "scmunumu::mu" in d_to_k_mu.used_parameter_names


def test_amplitudes_vanish_outside_of_the_phase_space(d_to_k_mu):
    s_min, s_max = d_to_k_mu.phase_space()
    for s in (0.5 * s_min, s_max + 0.01):
        amp = d_to_k_mu.amplitudes(s)
        assert amp == ZERO_AMPLITUDES
        assert amp.v == 0.99
        assert d_to_k_mu.normalized_differential_decay_width(s) == 0.0
        assert d_to_k_mu.normalized_two_differential_decay_width(s, 0.3) == 0.0


def test_standard_model_amplitudes(d_to_pi_e):
    amp = d_to_pi_e.amplitudes(1.0)
    assert amp.h_S == 0.0 and amp.h_T == 0.0
    assert amp.h_tS == amp.h_t
    assert amp.NF > 0.0 and amp.p > 0.0


def test_pdf_is_normalised(d_to_k_mu):
    s_min, s_max = d_to_k_mu.phase_space()
    npt.assert_allclose(d_to_k_mu.integrated_pdf_q2(s_min, s_max) * (s_max - s_min), 1.0, rtol=1e-12)
    value, _ = quad(d_to_k_mu.differential_pdf_q2, s_min, s_max, epsrel=1e-6)
    npt.assert_allclose(value, 1.0, rtol=1e-3)


def test_pdf_in_the_recoil(d_to_k_mu):
    m_D, m_P = d_to_k_mu.m_D(), d_to_k_mu.m_P()
    w_max = (m_D**2 + m_P**2 - d_to_k_mu.m_l() ** 2) / (2.0 * m_D * m_P)
    value, _ = quad(d_to_k_mu.differential_pdf_w, 1.0, w_max, epsrel=1e-6)
    npt.assert_allclose(value, 1.0, rtol=1e-3)
    npt.assert_allclose(d_to_k_mu.integrated_pdf_w(1.0, w_max) * (w_max - 1.0), 1.0, rtol=1e-3)


def test_branching_ratio_includes_the_ckm_element(d_to_pi_e):
    s_min, s_max = d_to_pi_e.phase_space()
    normalized = d_to_pi_e.normalized_integrated_branching_ratio(s_min, s_max)
    br = d_to_pi_e.integrated_branching_ratio(s_min, s_max)
    assert normalized > 0.0
    npt.assert_allclose(br / normalized, abs(d_to_pi_e.model.ckm_cd()) ** 2, rtol=1e-10)
    # of the order of a percent
    assert 1e-4 < br < 2e-2


def test_decay_width_splits_into_vector_and_scalar_parts(d_to_k_mu):
    s_min, s_max = d_to_k_mu.phase_space()
    total = d_to_k_mu.normalized_integrated_decay_width(s_min, s_max)
    parts = d_to_k_mu.normalized_integrated_decay_width_p(
        s_min, s_max
    ) + d_to_k_mu.normalized_integrated_decay_width_0(s_min, s_max)
    npt.assert_allclose(parts, total, rtol=1e-3)


def test_angular_observables_are_bounded(d_to_k_mu):
    s_min, s_max = d_to_k_mu.phase_space()
    assert -1.0 <= d_to_k_mu.integrated_lepton_polarization(s_min, s_max) <= 1.0
    assert d_to_k_mu.integrated_flat_term(s_min, s_max) >= 0.0
    assert abs(d_to_k_mu.integrated_a_fb_leptonic(s_min, s_max)) < 0.5
    assert np.isfinite(d_to_k_mu.differential_a_fb_leptonic(1.0))


@pytest.mark.parametrize("s", [0.3, 1.0, 1.8])
def test_angular_integral_of_the_two_fold_distribution(tensor, s):
    width, _ = quad(lambda c: tensor.normalized_two_differential_decay_width(s, c), -1.0, 1.0)
    npt.assert_allclose(width, tensor.normalized_differential_decay_width(s), rtol=1e-10)

    forward, _ = quad(lambda c: tensor.normalized_two_differential_decay_width(s, c), 0.0, 1.0)
    backward, _ = quad(lambda c: tensor.normalized_two_differential_decay_width(s, c), -1.0, 0.0)
    npt.assert_allclose(
        (forward - backward) / width, tensor.differential_a_fb_leptonic(s), rtol=1e-8
    )


def test_cp_conjugation_keeps_the_rate(parameters):
    parameters["dcmunumu::Im{cT}"] = 0.2
    options = {"Q": "d", "q": "u", "I": "1", "model": "WET"}
    decay = DToPseudoscalarLeptonNeutrino(parameters, Options(options))
    conjugate = DToPseudoscalarLeptonNeutrino(parameters, Options(options, **{"cp-conjugate": "true"}))
    npt.assert_allclose(
        decay.normalized_differential_decay_width(1.0),
        conjugate.normalized_differential_decay_width(1.0),
        rtol=1e-12,
    )


def test_unsupported_process(parameters):
    with pytest.raises(ConfigurationError, match="Unsupported combination"):
        DToPseudoscalarLeptonNeutrino(parameters, Options({"Q": "d", "q": "d", "I": "1/2"}))


def test_unknown_form_factors(parameters):
    with pytest.raises(ConfigurationError, match="Unknown form factors"):
        DToPseudoscalarLeptonNeutrino(parameters, Options({"form-factors": "KKMO2009"}))


def test_invalid_option_value(parameters):
    with pytest.raises(ConfigurationError):
        DToPseudoscalarLeptonNeutrino(parameters, Options({"l": "x"}))


def test_diagnostics_forward_to_the_form_factors(d_to_k_mu):
    assert len(d_to_k_mu.diagnostics()) == 0


def test_non_finite_form_factor_raises(d_to_pi_e, monkeypatch):
    monkeypatch.setattr(d_to_pi_e.form_factors, "f_p", lambda s: float("nan"))
    with pytest.raises(NumericalError, match="f_p") as info:
        d_to_pi_e.differential_branching_ratio(1.0)
    assert info.value.point == 1.0


def test_degenerate_quark_masses_raise(d_to_pi_e, monkeypatch):
    monkeypatch.setattr(d_to_pi_e.model, "m_c_msbar", d_to_pi_e.flavor.m_light)
    with pytest.raises(NumericalError, match="h_S"):
        d_to_pi_e.amplitudes(1.0)


def test_normalized_branching_ratio_does_not_depend_on_the_ckm(parameters):
    decay = DToPseudoscalarLeptonNeutrino(parameters, Options({"Q": "d", "q": "u", "I": "1", "l": "e"}))
    s_min, s_max = 0.5, 1.5
    normalized = decay.normalized_integrated_branching_ratio(s_min, s_max)
    br = decay.integrated_branching_ratio(s_min, s_max)

    parameters["CKM::lambda"] = 1.1 * parameters["CKM::lambda"]()

    npt.assert_allclose(decay.normalized_integrated_branching_ratio(s_min, s_max), normalized, rtol=1e-12)
    assert abs(decay.integrated_branching_ratio(s_min, s_max) - br) > 1e-3 * br


@pytest.fixture
def d_to_pi_e_kkmo(parameters):
    return DToPseudoscalarLeptonNeutrino(
        parameters,
        Options({"Q": "d", "q": "d", "I": "1", "l": "e", "form-factors": "KKMO2009"}),
    )


def test_sum_rule_form_factors_in_the_decay(d_to_pi_e_kkmo):
    assert d_to_pi_e_kkmo.descriptor.process == "D->pi"
    assert "D->pi::M^2@KKMO2009" in d_to_pi_e_kkmo.used_parameter_names

    amp = d_to_pi_e_kkmo.amplitudes(0.5)
    assert np.isfinite(abs(amp.h_0)) and abs(amp.h_0) > 0.0
    assert np.isfinite(abs(amp.h_t))
    assert d_to_pi_e_kkmo.differential_branching_ratio(0.5) > 0.0


def test_sum_rule_form_factors_fail_above_the_charm_mass(d_to_pi_e_kkmo):
    # valid only for q2 below m_c^2
    with pytest.raises(NumericalError):
        d_to_pi_e_kkmo.differential_branching_ratio(2.9)
