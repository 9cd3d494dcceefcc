import math

import numpy.testing as npt
import pytest

from lcsrpy.errors import NumericalError
from lcsrpy.form_factors import AnalyticFormFactorDToPiKKMO2009, make_form_factors
from lcsrpy.options import Options
from lcsrpy.parameters import Parameters

KKMO = AnalyticFormFactorDToPiKKMO2009


def _thresholds(s0: float) -> dict[str, float]:
    values = {}
    for family in ("+", "0", "T"):
        values[f"D->pi::s_0^{family}(0)@KKMO2009"] = s0
        values[f"D->pi::s_0^{family}'(0)@KKMO2009"] = 0.0
        values[f"D->pi::s_0^{family}''(0)@KKMO2009"] = 0.0
    return values


@pytest.fixture
def parameters():
    return Parameters.defaults()


@pytest.fixture
def ff(parameters):
    return KKMO(parameters, Options())


def test_rho_1_at_the_charm_scale():
    npt.assert_allclose(
        [KKMO.rho_1(s, 1.27, 1.4) for s in (6.5, 7.0, 7.5)],
        [12.18147851, 13.32862075, 14.38862240],
        rtol=1e-8,
    )


def test_rho_1_at_the_bottom_scale():
    npt.assert_allclose(
        [KKMO.rho_1(s, 4.16, 4.16) for s in (19.6, 22.05, 25.2)],
        [-5.05150, -4.62757, 0.67764],
        rtol=1e-5,
    )


def test_rho_1_vanishes_at_threshold():
    npt.assert_allclose(KKMO.rho_1(1.27**2 * (1.0 + 1e-12), 1.27, 1.4), 0.0, atol=1e-9)


def test_delta_1_is_finite():
    assert math.isfinite(KKMO.delta_1(1.27, 1.5, 2.0))


def test_thresholds_are_quadratic_in_q2(parameters):
    parameters["D->pi::s_0^+'(0)@KKMO2009"] = 0.1
    parameters["D->pi::s_0^+''(0)@KKMO2009"] = 0.02
    ff = KKMO(parameters)
    npt.assert_allclose(ff.s0D(2.0), 7.0 + 0.2 + 0.5 * 0.02 * 4.0)
    assert ff.s0tilD(2.0) == 7.0


@pytest.mark.parametrize("family", ["p", "0", "T"])
def test_rescale_factors_are_one_at_zero(ff, family):
    factor = getattr(ff, f"rescale_factor_{family}")
    npt.assert_allclose(factor(0.0), 1.0, rtol=1e-12)


def test_rescaling_can_be_switched_off(parameters):
    ff = KKMO(parameters, Options({"rescale-borel": "false"}))
    assert ff.rescale_factor_p(0.5) == 1.0
    assert ff.rescale_factor_0(0.5) == 1.0
    assert ff.rescale_factor_T(0.5) == 1.0


def test_scalar_and_vector_form_factors_agree_at_zero(ff):
    assert ff.f_0(0.0) == ff.f_p(0.0)
    assert ff.f_0(1e-8) == ff.f_p(1e-8)


def test_tensor_form_factor_f_plus_T_vanishes(ff):
    assert ff.f_plus_T(0.5) == 0.0


def test_form_factors_at_maximal_recoil(ff):
    fp = ff.f_p(0.0)
    ft = ff.f_t(0.0)
    assert math.isfinite(fp) and fp > 0.0
    assert math.isfinite(ft)


def test_decay_constant(ff):
    f_D = ff.decay_constant()
    assert math.isfinite(f_D) and f_D > 0.0


def test_derivative_sum_rule_gives_a_mass(ff):
    # select_weight = 1 multiplies the integrand by s(u) > m_c^2
    M2 = ff.M2()
    F = ff.F_lo_tw2(0.0, M2, 0.0)
    F_D1M2inv = ff.F_lo_tw2(0.0, M2, 1.0)
    assert F_D1M2inv / F > ff.m_c_msbar(ff.mu()) ** 2


def test_dependencies_are_tracked(ff):
    names = ff.used_parameter_names
    assert "D->pi::M^2@KKMO2009" in names
    assert "pi::a2@1GeV" in names
    assert "QCD::alpha_s(MZ)" in names
    assert ff.depends_on(["QCD::cond_GG"])


def test_factory(parameters):
    assert isinstance(make_form_factors("D->pi::KKMO2009", parameters), KKMO)


def test_form_factors_grow_with_q2(ff):
    # pole-like rise below q2 = m_c^2
    assert ff.f_p(1.0) > ff.f_p(0.0) > ff.f_p(-1.0) > 0.0
    assert ff.f_t(1.0) > ff.f_t(0.0)


def test_scalar_form_factor_below_the_charm_mass(ff):
    f0 = ff.f_0(0.5)
    assert math.isfinite(f0) and f0 > 0.0
    assert math.isfinite(ff.f_0(-0.5))


def test_decay_constant_of_the_d_meson(ff):
    # two-point sum rule, of the order of 0.2 GeV
    assert 0.1 < ff.decay_constant() < 0.5


def test_duality_masses_of_the_d_meson(ff):
    for mass in (ff.MDp_lcsr, ff.MD0_lcsr, ff.MDT_lcsr):
        value = mass(0.0)
        assert math.isfinite(value) and value > 0.0


def test_sum_rule_fails_above_the_charm_mass(ff):
    with pytest.raises(NumericalError):
        ff.f_p(10.0)


# The diagnostics are evaluated at q2 = 10, above the range of validity of the
# D-meson inputs. This set uses heavy-quark inputs (m_c = 4.164, m_D = 5.279) for
# which all diagnostics are defined. The published B -> pi numbers of the sum rule
# depend on a different running of the masses and moments and are not reproduced.
HEAVY_QUARK_PARAMETERS = {
    "decay-constant::pi": 0.1307,
    "mass::D_d": 5.279,
    "mass::pi^+": 0.13957,
    "mass::c(MSbar)": 4.164,
    "mass::b(MSbar)": 4.18,
    "D->pi::M^2@KKMO2009": 18.0,
    "D->pi::Mp^2@KKMO2009": 5.0,
    "D->pi::mu@KKMO2009": 3.0,
    "D->pi::sp_0^B@KKMO2009": 35.6,
    **_thresholds(35.75),
}

DIAGNOSTICS_LABELS = [
    "rho_1(s = 6.5, m_c = 1.27, mu = 1.4), [KKMO:2009A]",
    "rho_1(s = 7.0, m_c = 1.27, mu = 1.4), [KKMO:2009A]",
    "rho_1(s = 7.5, m_c = 1.27, mu = 1.4), [KKMO:2009A]",
    "f_D, [KKMO:2009A]",
    "rescale_factor_p(s =  0.0), [KKMO:2009A]",
    "rescale_factor_p(s = 10.0), [KKMO:2009A]",
    "rescale_factor_0(s =  0.0), [KKMO:2009A]",
    "rescale_factor_0(s = 10.0), [KKMO:2009A]",
    "rescale_factor_T(s =  0.0), [KKMO:2009A]",
    "rescale_factor_T(s = 10.0), [KKMO:2009A]",
    "M_D(f_+, q2 =  0.0), [KKMO:2009A]",
    "M_D(f_+, q2 = 10.0), [KKMO:2009A]",
    "M_D(f_0, q2 =  0.0), [KKMO:2009A]",
    "M_D(f_0, q2 = 10.0), [KKMO:2009A]",
    "M_D(f_T, q2 =  0.0), [KKMO:2009A]",
    "M_D(f_T, q2 = 10.0), [KKMO:2009A]",
]


@pytest.fixture(scope="module")
def heavy_diagnostics():
    parameters = Parameters.defaults().override(HEAVY_QUARK_PARAMETERS)
    return KKMO(parameters, Options()).diagnostics()


def test_diagnostics_labels_and_order(heavy_diagnostics):
    assert [entry.description for entry in heavy_diagnostics] == DIAGNOSTICS_LABELS
    frame = heavy_diagnostics.to_frame()
    assert list(frame.columns) == ["description", "value"]
    assert list(frame["description"]) == DIAGNOSTICS_LABELS


def test_diagnostics_values(heavy_diagnostics):
    values = heavy_diagnostics.values()
    assert all(math.isfinite(v) for v in values)

    npt.assert_allclose(values[:3], [12.18147851, 13.32862075, 14.38862240], rtol=1e-8)
    assert values[3] > 0.0
    # rescale factors are one at q2 = 0 by construction
    npt.assert_allclose([values[4], values[6], values[8]], 1.0, rtol=1e-12)
    assert all(v > 0.0 for v in (values[5], values[7], values[9]))
    assert all(v > 0.0 for v in values[10:])
