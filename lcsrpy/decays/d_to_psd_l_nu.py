"""
Semileptonic decays D -> P l nu of a D meson into a pseudoscalar meson.

The observables are built from the helicity amplitudes of the weak effective
theory including scalar and tensor operators [DDS:2014A]. Quantities prefixed
with ``normalized`` are computed for ``|V_cQ| = 1``.
"""

from dataclasses import dataclass
import cmath
from math import pi, sqrt
from typing import Callable

import lcsrpy.log as log_
from lcsrpy import kinematics
from lcsrpy.diagnostics import Diagnostics
from lcsrpy.errors import NumericalError
from lcsrpy.form_factors.factory import make_form_factors
from lcsrpy.functions.integrate import QAGSConfig, integrate
from lcsrpy.models.model import Model, make_model, sector_name
from lcsrpy.options import HeavyQuark, Options
from lcsrpy.parameters import Parameters, ParameterUser
from lcsrpy.process import resolve

DEFAULT_OPTIONS = {
    "form-factors": "BSZ2015",
    "model": "SM",
    "cp-conjugate": "false",
    "l": "mu",
    "Q": "s",
    "q": "d",
    "I": "1",
}


@dataclass(frozen=True)
class Amplitudes:
    """Helicity amplitudes and kinematic factors at one value of ``s``."""

    h_0: complex
    h_t: complex
    h_S: complex
    h_T: complex
    h_tS: complex
    v: float
    p: float
    NF: float


# outside of the phase space; v < 1 keeps sqrt(1 - v) finite
ZERO_AMPLITUDES = Amplitudes(0j, 0j, 0j, 0j, 0j, v=0.99, p=0.0, NF=0.0)


@dataclass(frozen=True)
class FlavorBundle:
    """Quantities that depend on the down-type quark of the c -> Q transition."""

    m_light: Callable[[float], float]
    v_cQ: Callable[[], complex]


def flavor_bundle(model: Model, heavy: HeavyQuark) -> FlavorBundle:
    match heavy:
        case HeavyQuark.DOWN:
            return FlavorBundle(m_light=model.m_d_msbar, v_cQ=model.ckm_cd)
        case HeavyQuark.STRANGE:
            return FlavorBundle(m_light=model.m_s_msbar, v_cQ=model.ckm_cs)


class DToPseudoscalarLeptonNeutrino(ParameterUser):
    """
    Observables of the decay D -> P l nu.

    Args:
        parameters (Parameters): Registry of all inputs.
        options (Options, optional): Recognised keys are ``form-factors``,
            ``model``, ``cp-conjugate``, ``l`` (e, mu, tau), ``Q`` (d, s),
            ``q`` (u, d, s) and ``I`` (1, 0, 1/2). See ``DEFAULT_OPTIONS``.

    Raises:
        ConfigurationError: For an unsupported combination of ``Q``, ``q`` and
            ``I``, unknown model or form factor names and invalid option values.
    """

    def __init__(self, parameters: Parameters, options: Options | None = None):
        super().__init__()
        self.log = log_.lcsr_logger(self.__class__.__module__)
        self.options = Options(options).with_defaults(DEFAULT_OPTIONS)

        self.lepton = self.options.lepton()
        self.heavy = self.options.heavy_quark()
        self.descriptor = resolve(
            self.heavy, self.options.spectator_quark(), self.options.isospin()
        )
        self.cp_conjugate = self.options.get_bool("cp-conjugate", False)

        self.model = make_model(self.options.get_str("model", "SM"), parameters, self.options)
        self.form_factors = make_form_factors(
            f"{self.descriptor.process}::{self.options.get_str('form-factors', 'BSZ2015')}",
            parameters,
            self.options,
        )
        self.flavor = flavor_bundle(self.model, self.heavy)

        self.m_D = self.used_parameter(parameters, self.descriptor.mass_parent)
        self.tau_D = self.used_parameter(parameters, f"life_time::{self.descriptor.parent}")
        self.m_P = self.used_parameter(parameters, self.descriptor.mass_daughter)
        self.m_l = self.used_parameter(parameters, f"mass::{self.lepton.value}")
        self.g_fermi = self.used_parameter(parameters, "WET::G_Fermi")
        self.hbar = self.used_parameter(parameters, "QM::hbar")
        self.mu = self.used_parameter(
            parameters, f"{sector_name(self.heavy, self.lepton)}::mu"
        )
        self.isospin_factor = self.descriptor.isospin_factor

        self.config = QAGSConfig(epsrel=0.5e-3)

        self.uses(self.form_factors)
        self.uses(self.model)
        self.log.debug(
            f"{self.descriptor.parent} -> {self.descriptor.daughter} {self.lepton.value} nu "
            f"with {self.options.get_str('form-factors', 'BSZ2015')} form factors"
        )

    def _integrate(self, f: Callable[[float], float], s_min: float, s_max: float, kernel: str) -> float:
        return integrate(f, s_min, s_max, self.config, kernel=kernel)

    def phase_space(self) -> tuple[float, float]:
        return kinematics.phase_space_bounds(self.m_D(), self.m_P(), self.m_l())

    def amplitudes(self, s: float) -> Amplitudes:
        s_min, s_max = self.phase_space()
        if not s_min <= s <= s_max:
            return ZERO_AMPLITUDES

        wc = self.model.wilson_coefficients(self.heavy, self.lepton, self.cp_conjugate)
        # cvl = 1 in the SM, gV carries only the new physics part
        gV = wc.cvr + (wc.cvl - 1.0)
        gS = wc.csr + wc.csl
        gT = wc.ct

        fp = self.form_factors.f_p(s)
        f0 = self.form_factors.f_0(s)
        fT = self.form_factors.f_t(s)
        for name, value in (("f_p", fp), ("f_0", f0), ("f_t", fT)):
            if not cmath.isfinite(value):
                raise NumericalError(name, f"non-finite form factor {value}", point=s)

        mu = self.mu()
        mc_at_mu = self.model.m_c_msbar(mu)
        mQ_at_mu = self.flavor.m_light(mu)
        if mc_at_mu == mQ_at_mu:
            raise NumericalError("h_S", "m_c(mu) equals the light quark mass", point=s)

        m_D, m_P = self.m_D(), self.m_P()
        m_D2, m_P2 = m_D * m_D, m_P * m_P
        p = kinematics.momentum(m_D, m_P, s)
        v = kinematics.lepton_velocity(self.m_l(), s)
        NF = v * v * s * self.g_fermi() ** 2 / (256.0 * pi**3 * m_D2)
        isospin = self.isospin_factor

        h_0 = isospin * 2.0 * m_D * p * fp * (1.0 + gV) / sqrt(s)
        h_t = isospin * (1.0 + gV) * (m_D2 - m_P2) * f0 / sqrt(s)
        h_S = -isospin * gS * (m_D2 - m_P2) * f0 / (mc_at_mu - mQ_at_mu)
        h_T = -isospin * 2.0 * m_D * p * fT * gT / (m_D + m_P)

        return Amplitudes(
            h_0=h_0,
            h_t=h_t,
            h_S=h_S,
            h_T=h_T,
            h_tS=h_t - h_S / sqrt(1.0 - v),
            v=v,
            p=p,
            NF=NF,
        )

    # Differential observables

    def normalized_two_differential_decay_width(self, s: float, cos_theta_l: float) -> float:
        c2 = cos_theta_l * cos_theta_l
        s2 = 1.0 - c2
        c_2theta = 2.0 * c2 - 1.0
        amp = self.amplitudes(s)
        ml_hat = sqrt(1.0 - amp.v)

        return 2.0 * amp.NF * amp.p * (
            abs(amp.h_0) ** 2 * s2
            + (1.0 - amp.v) * abs(amp.h_0 * cos_theta_l - amp.h_tS) ** 2
            + 8.0 * (
                ((2.0 - amp.v) + amp.v * c_2theta) * abs(amp.h_T) ** 2
                - ml_hat * (amp.h_T * (amp.h_0.conjugate() - amp.h_tS.conjugate() * cos_theta_l)).real
            )
        )

    def two_differential_decay_width(self, s: float, cos_theta_l: float) -> float:
        return self.normalized_two_differential_decay_width(s, cos_theta_l) * abs(self.flavor.v_cQ()) ** 2

    def normalized_differential_decay_width(self, s: float) -> float:
        amp = self.amplitudes(s)
        return 4.0 / 3.0 * amp.NF * amp.p * (
            abs(amp.h_0) ** 2 * (3.0 - amp.v)
            + 3.0 * abs(amp.h_tS) ** 2 * (1.0 - amp.v)
            + 16.0 * abs(amp.h_T) ** 2 * (3.0 - 2.0 * amp.v)
            - 24.0 * sqrt(1.0 - amp.v) * (amp.h_T * amp.h_0.conjugate()).real
        )

    def normalized_differential_decay_width_p(self, s: float) -> float:
        amp = self.amplitudes(s)
        return 4.0 / 3.0 * amp.NF * amp.p * abs(amp.h_0) ** 2 * (3.0 - amp.v)

    def normalized_differential_decay_width_0(self, s: float) -> float:
        amp = self.amplitudes(s)
        return 4.0 / 3.0 * amp.NF * amp.p * 3.0 * abs(amp.h_t) ** 2 * (1.0 - amp.v)

    def _numerator_a_fb_leptonic(self, s: float) -> float:
        # int_0^1 minus int_-1^0 of the two-fold distribution
        amp = self.amplitudes(s)
        return -4.0 * amp.NF * amp.p * (
            (amp.h_0 * amp.h_tS.conjugate()).real * (1.0 - amp.v)
            - 4.0 * sqrt(1.0 - amp.v) * (amp.h_T * amp.h_tS.conjugate()).real
        )

    def _numerator_flat_term(self, s: float) -> float:
        amp = self.amplitudes(s)
        return amp.NF * amp.p * (
            (abs(amp.h_0) ** 2 + abs(amp.h_tS) ** 2) * (1.0 - amp.v)
            + 16.0 * abs(amp.h_T) ** 2
            - 8.0 * sqrt(1.0 - amp.v) * (amp.h_T * amp.h_0.conjugate()).real
        )

    def _numerator_lepton_polarization(self, s: float) -> float:
        amp = self.amplitudes(s)
        ml_hat = sqrt(1.0 - amp.v)
        h_0_2, h_T_2 = abs(amp.h_0) ** 2, abs(amp.h_T) ** 2

        d_gamma_plus = (
            (h_0_2 + 3.0 * abs(amp.h_t) ** 2) * (1.0 - amp.v) / 2.0
            + 3.0 / 2.0 * abs(amp.h_S) ** 2
            + 8.0 * h_T_2
            - ml_hat * (3.0 * amp.h_t * amp.h_S.conjugate() + 4.0 * amp.h_0 * amp.h_T.conjugate()).real
        )
        d_gamma_minus = (
            h_0_2
            + 16.0 * h_T_2 * (1.0 - amp.v)
            - 8.0 * ml_hat * (amp.h_0 * amp.h_T.conjugate()).real
        )
        return 8.0 / 3.0 * amp.NF * amp.p * (d_gamma_plus - d_gamma_minus)

    def differential_decay_width(self, s: float) -> float:
        return self.normalized_differential_decay_width(s) * abs(self.flavor.v_cQ()) ** 2

    def differential_branching_ratio(self, s: float) -> float:
        return self.differential_decay_width(s) * self.tau_D() / self.hbar()

    def normalized_differential_branching_ratio(self, s: float) -> float:
        return self.normalized_differential_decay_width(s) * self.tau_D() / self.hbar()

    def differential_a_fb_leptonic(self, s: float) -> float:
        return self._numerator_a_fb_leptonic(s) / self.normalized_differential_decay_width(s)

    def differential_flat_term(self, s: float) -> float:
        return self._numerator_flat_term(s) / self.normalized_differential_decay_width(s)

    def differential_lepton_polarization(self, s: float) -> float:
        return self._numerator_lepton_polarization(s) / self.normalized_differential_decay_width(s)

    def differential_pdf_q2(self, q2: float) -> float:
        """Probability density in q2, normalised over the full phase space."""
        q2_min, q2_max = self.phase_space()
        numerator = self.normalized_differential_branching_ratio(q2)
        denominator = self._integrate(
            self.normalized_differential_branching_ratio, q2_min, q2_max, "pdf_q2"
        )
        return numerator / denominator

    def differential_pdf_w(self, w: float) -> float:
        m_D, m_P = self.m_D(), self.m_P()
        q2 = kinematics.q2_from_w(m_D, m_P, w)
        return kinematics.dq2_dw(m_D, m_P) * self.differential_pdf_q2(q2)

    # Integrated observables

    def integrated_branching_ratio(self, s_min: float, s_max: float) -> float:
        return self._integrate(self.differential_branching_ratio, s_min, s_max, "branching_ratio")

    def normalized_integrated_branching_ratio(self, s_min: float, s_max: float) -> float:
        return self._integrate(
            self.normalized_differential_branching_ratio, s_min, s_max, "normalized_branching_ratio"
        )

    def normalized_integrated_decay_width(self, s_min: float, s_max: float) -> float:
        return self._integrate(self.normalized_differential_decay_width, s_min, s_max, "decay_width")

    def normalized_integrated_decay_width_p(self, s_min: float, s_max: float) -> float:
        return self._integrate(self.normalized_differential_decay_width_p, s_min, s_max, "decay_width_p")

    def normalized_integrated_decay_width_0(self, s_min: float, s_max: float) -> float:
        return self._integrate(self.normalized_differential_decay_width_0, s_min, s_max, "decay_width_0")

    def _integrated_ratio(self, numerator: Callable[[float], float], s_min: float, s_max: float, kernel: str) -> float:
        integrated_numerator = self._integrate(numerator, s_min, s_max, kernel)
        integrated_denominator = self._integrate(
            self.normalized_differential_decay_width, s_min, s_max, "decay_width"
        )
        return integrated_numerator / integrated_denominator

    def integrated_a_fb_leptonic(self, s_min: float, s_max: float) -> float:
        return self._integrated_ratio(self._numerator_a_fb_leptonic, s_min, s_max, "a_fb_leptonic")

    def integrated_flat_term(self, s_min: float, s_max: float) -> float:
        return self._integrated_ratio(self._numerator_flat_term, s_min, s_max, "flat_term")

    def integrated_lepton_polarization(self, s_min: float, s_max: float) -> float:
        return self._integrated_ratio(
            self._numerator_lepton_polarization, s_min, s_max, "lepton_polarization"
        )

    def integrated_pdf_q2(self, q2_min: float, q2_max: float) -> float:
        """Mean of the q2 probability density over the bin [q2_min, q2_max]."""
        q2_abs_min, q2_abs_max = self.phase_space()
        f = self.normalized_differential_branching_ratio
        numerator = self._integrate(f, q2_min, q2_max, "pdf_q2")
        denominator = self._integrate(f, q2_abs_min, q2_abs_max, "pdf_q2")
        return numerator / denominator / (q2_max - q2_min)

    def integrated_pdf_w(self, w_min: float, w_max: float) -> float:
        m_D, m_P = self.m_D(), self.m_P()
        q2_max = kinematics.q2_from_w(m_D, m_P, w_min)
        q2_min = kinematics.q2_from_w(m_D, m_P, w_max)
        return self.integrated_pdf_q2(q2_min, q2_max) * (q2_max - q2_min) / (w_max - w_min)

    def diagnostics(self) -> Diagnostics:
        return self.form_factors.diagnostics()
