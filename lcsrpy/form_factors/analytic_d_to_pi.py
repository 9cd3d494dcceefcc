"""
D -> pi form factors from light-cone sum rules with pion distribution amplitudes.

The sum rules for f_+, f_0 and f_T are evaluated at leading order up to twist four
and at next-to-leading order in alpha_s up to twist three [KKMO:2009A]. The decay
constant f_D enters through its own two-point sum rule.

All quantities are integrals of the form

    F(q2, M2) = int du exp(-s(u) / M2) K(u, q2)

with ``s(u) = (mc2 - q2 (1 - u) + mpi2 u (1 - u)) / u``. Every kernel accepts a
``select_weight`` argument in [0, 1]. At ``select_weight = 1`` the integrand is
multiplied by ``s(u)``, which yields the derivative of the sum rule w.r.t. ``-1/M2``.
The ratio of both is the square of the mass of the lowest lying state, as predicted
by the sum rule.
"""

from dataclasses import dataclass
from math import exp, log, pi, sqrt
from typing import Callable

import lcsrpy.log as log_
from lcsrpy.diagnostics import Diagnostics
from lcsrpy.form_factors import kkmo2009_kernels as nlo
from lcsrpy.form_factors.form_factors import FormFactors
from lcsrpy.form_factors.pi_lcdas import PionLCDAs, PionLCDAsAtScale
from lcsrpy.functions import cpu_numba as kernels
from lcsrpy.functions.integrate import QAGSConfig, integrate
from lcsrpy.functions.special import dilog, gamma_inc_zero
from lcsrpy.models.model import Model, make_model
from lcsrpy.options import Options
from lcsrpy.parameters import Parameters

PI2 = pi * pi

# lower bound of the u integration
U_MIN = 1.0e-10
# offsets from the integrable endpoint singularities
EPS_S = 1.0e-10
EPS_R2 = 1.0e-12
EPS_U = 1.0e-10


@dataclass(frozen=True)
class SumRuleScale:
    """Scale dependent inputs, evaluated once per form factor call."""

    mu: float
    mc: float
    alpha_s: float
    lcda: PionLCDAsAtScale

    @property
    def mc2(self) -> float:
        return self.mc * self.mc

    @property
    def lmu(self) -> float:
        return 2.0 * log(self.mc / self.mu)


class AnalyticFormFactorDToPiKKMO2009(FormFactors):
    """
    Light-cone sum rule for the D -> pi form factors.

    Args:
        parameters (Parameters): Registry of the inputs, see ``D->pi::*@KKMO2009``.
        options (Options, optional): ``rescale-borel`` (bool, default true) switches
            the q2-dependent rescaling of the Borel parameter.
        model (Model, optional): Source of alpha_s and the running charm mass.
            A Standard Model instance is created if omitted.
    """

    def __init__(
        self,
        parameters: Parameters,
        options: Options | None = None,
        model: Model | None = None,
    ):
        super().__init__()
        options = Options(options)
        self.log = log_.lcsr_logger(self.__class__.__module__)

        self.model = model if model is not None else make_model("SM", parameters, options)

        self.MD = self.used_parameter(parameters, "mass::D_d")
        self.mpi = self.used_parameter(parameters, "mass::pi^+")
        self.fpi = self.used_parameter(parameters, "decay-constant::pi")

        self.M2 = self.used_parameter(parameters, "D->pi::M^2@KKMO2009")
        self.Mprime2 = self.used_parameter(parameters, "D->pi::Mp^2@KKMO2009")
        self._s0_plus = [
            self.used_parameter(parameters, f"D->pi::s_0^+{d}(0)@KKMO2009")
            for d in ("", "'", "''")
        ]
        self._s0_zero = [
            self.used_parameter(parameters, f"D->pi::s_0^0{d}(0)@KKMO2009")
            for d in ("", "'", "''")
        ]
        self._s0_T = [
            self.used_parameter(parameters, f"D->pi::s_0^T{d}(0)@KKMO2009")
            for d in ("", "'", "''")
        ]
        self.sprime0B = self.used_parameter(parameters, "D->pi::sp_0^B@KKMO2009")
        self.mu = self.used_parameter(parameters, "D->pi::mu@KKMO2009")
        self.zeta_nnlo = self.used_parameter(parameters, "D->pi::zeta(NNLO)@KKMO2009")

        self.m02 = self.used_parameter(parameters, "QCD::m_0^2")
        self.cond_GG = self.used_parameter(parameters, "QCD::cond_GG")
        self.r_vac = self.used_parameter(parameters, "QCD::r_vac")

        self.pi = PionLCDAs(parameters, options, self.model)
        self.config = QAGSConfig(epsrel=1.0e-3)

        self.rescale_borel = options.get_bool("rescale-borel", True)
        if self.rescale_borel:
            self.rescale_factor_p = self._rescale_factor_p
            self.rescale_factor_0 = self._rescale_factor_0
            self.rescale_factor_T = self._rescale_factor_T
        else:
            self.rescale_factor_p = self._no_rescale_factor
            self.rescale_factor_0 = self._no_rescale_factor
            self.rescale_factor_T = self._no_rescale_factor

        self.uses(self.model)
        self.uses(self.pi)
        self.log.debug(f"KKMO2009 form factors created, rescale-borel = {self.rescale_borel}")

    # Inputs

    def m_c_msbar(self, mu: float) -> float:
        return self.model.m_c_msbar(mu)

    def _scale(self) -> SumRuleScale:
        mu = self.mu()
        return SumRuleScale(
            mu=mu,
            mc=self.m_c_msbar(mu),
            alpha_s=self.model.alpha_s(mu),
            lcda=self.pi.at_scale(mu),
        )

    @staticmethod
    def _threshold(coefficients, q2: float) -> float:
        s0, s0_p, s0_pp = (c() for c in coefficients)
        return s0 + s0_p * q2 + s0_pp * 0.5 * q2 * q2

    def s0D(self, q2: float) -> float:
        return self._threshold(self._s0_plus, q2)

    def s0tilD(self, q2: float) -> float:
        return self._threshold(self._s0_zero, q2)

    def s0TD(self, q2: float) -> float:
        return self._threshold(self._s0_T, q2)

    def _integrate(
        self, integrand: Callable[[float], float], lower: float, upper: float, kernel: str, q2: float
    ) -> float:
        return integrate(integrand, lower, upper, self.config, kernel=kernel, point=q2)

    # Two-point sum rule

    @staticmethod
    def rho_1(s: float, mc: float, mu: float) -> float:
        """NLO spectral density of the two-point correlator of pseudoscalar currents."""
        mc2 = mc * mc
        x = mc2 / s
        lnx = log(x)
        ln1mx = log(1.0 - x)
        re_li2_x = dilog(x)
        lnmumc = log(mu / mc)

        return s / 2.0 * (1.0 - x) * (
            (1.0 - x) * (4.0 * re_li2_x + 2.0 * lnx * ln1mx - (5.0 - 2.0 * x) * ln1mx)
            + (1.0 - 2.0 * x) * (3.0 - x) * lnx
            + 3.0 * (1.0 - 3.0 * x) * 2.0 * lnmumc
            + (17.0 - 33.0 * x) / 2.0
        )

    @staticmethod
    def delta_1(mc: float, mu: float, Mprime2: float) -> float:
        mc2 = mc * mc
        mu2 = mu * mu
        gamma = gamma_inc_zero(mc2 / Mprime2)

        return -3.0 / 2.0 * (
            gamma * exp(mc2 / Mprime2)
            - 1.0
            - (1.0 - mc2 / Mprime2) * (log(mu2 / mc2) + 4.0 / 3.0)
        )

    def _condensates(self, sc: SumRuleScale):
        fpi = self.fpi()
        cond_qq_mu = -fpi * fpi * self.pi.mupi(sc.mu) / 2.0
        cond_qq_1 = -fpi * fpi * self.pi.mupi(1.0) / 2.0
        return cond_qq_mu, cond_qq_1, self.model.alpha_s(1.0)

    def _two_point_condensate_terms(self, sc: SumRuleScale, Mprime2: float, r_vac: float) -> float:
        mc, mc2 = sc.mc, sc.mc2
        mc4 = mc2 * mc2
        Mprime4 = Mprime2 * Mprime2
        cond_qq_mu, cond_qq_1, alpha_s_1 = self._condensates(sc)

        return (
            -mc * cond_qq_mu * (1.0 + 4.0 * sc.alpha_s / (3.0 * pi) * self.delta_1(mc, sc.mu, Mprime2))
            - mc * cond_qq_1 * self.m02() / (2.0 * Mprime2) * (1.0 - mc2 / (2.0 * Mprime2))
            + self.cond_GG() / 12.0
            - 16.0 * pi * alpha_s_1 * cond_qq_1 * cond_qq_1 * r_vac / (27.0 * Mprime2)
            * (1.0 - mc2 / (4.0 * Mprime2) - mc4 / (12.0 * Mprime4))
        )

    def _two_point_integrand(self, sc: SumRuleScale, Mprime2: float, s_power: int):
        mc, mc2, mu = sc.mc, sc.mc2, sc.mu
        a = 4.0 * sc.alpha_s / (3.0 * pi)

        def integrand(s: float) -> float:
            # s_power = 0 is the sum rule itself, 1 its derivative w.r.t. -1/Mprime2
            return exp(-s / Mprime2) * s**s_power * (
                (s - mc2) * (s - mc2) / s + a * self.rho_1(s, mc, mu)
            )

        return integrand

    def decay_constant(self) -> float:
        """
        Decay constant of the D meson from the two-point sum rule at the Borel
        parameter ``Mp^2``.
        """
        sc = self._scale()
        MD2 = self.MD() ** 2
        MD4 = MD2 * MD2
        Mprime2 = self.Mprime2()
        mc2 = sc.mc2

        integral = self._integrate(
            self._two_point_integrand(sc, Mprime2, 0),
            mc2 + EPS_S,
            self.sprime0B(),
            "decay_constant",
            0.0,
        )

        result = exp(MD2 / Mprime2) / MD4 * (
            3.0 * mc2 / (8.0 * PI2) * integral
            + mc2 * exp(-mc2 / Mprime2) * self._two_point_condensate_terms(sc, Mprime2, self.r_vac())
        )
        return sqrt(result)

    def MD_svz(self) -> float:
        """Mass of the D meson as predicted by the two-point sum rule."""
        sc = self._scale()
        Mprime2 = self.Mprime2()
        Mprime4 = Mprime2 * Mprime2
        mc, mc2, mu = sc.mc, sc.mc2, sc.mu
        mc4 = mc2 * mc2
        cond_qq_mu, cond_qq_1, alpha_s_1 = self._condensates(sc)
        a = 4.0 * sc.alpha_s / (3.0 * pi)

        integral_numerator = self._integrate(
            self._two_point_integrand(sc, Mprime2, 1), mc2 + EPS_S, self.sprime0B(), "MD_svz", 0.0
        )
        integral_denominator = self._integrate(
            self._two_point_integrand(sc, Mprime2, 0), mc2 + EPS_S, self.sprime0B(), "MD_svz", 0.0
        )

        # the four-quark condensate enters the numerator without r_vac
        numerator = (
            3.0 * mc2 / (8.0 * PI2) * integral_numerator
            + mc4 * exp(-mc2 / Mprime2) * self._two_point_condensate_terms(sc, Mprime2, 1.0)
            + mc2 * exp(-mc2 / Mprime2) * (
                -mc * cond_qq_mu * a * self.delta_1(mc, mu, Mprime2)
                - mc * cond_qq_1 * self.m02() / (2.0 * Mprime2) * (mc2 - Mprime2)
                + 16.0 * pi * alpha_s_1 * cond_qq_1 * cond_qq_1 / (27.0 * 4.0 * Mprime4)
                * (4.0 * Mprime4 - 2.0 * Mprime2 * mc2 - mc4)
            )
        )
        denominator = (
            3.0 * mc2 / (8.0 * PI2) * integral_denominator
            + mc2 * exp(-mc2 / Mprime2) * self._two_point_condensate_terms(sc, Mprime2, self.r_vac())
        )
        return sqrt(numerator / denominator)

    # Leading-order integrands

    def _borel(self, u: float, q2: float, M2: float, select_weight: float, sc: SumRuleScale):
        mpi2 = self.mpi() ** 2
        s_u = (sc.mc2 - q2 * (1.0 - u) + mpi2 * u * (1.0 - u)) / u
        weight = (1.0 - select_weight) + select_weight * s_u
        return weight * exp(-s_u / M2)

    def F_lo_tw2_integrand(self, u: float, q2: float, M2: float, select_weight: float, sc: SumRuleScale) -> float:
        return self._borel(u, q2, M2, select_weight, sc) / u * sc.lcda.phi(u)

    def F_lo_tw3_integrand(self, u: float, q2: float, M2: float, select_weight: float, sc: SumRuleScale) -> float:
        mc, mc2 = sc.mc, sc.mc2
        mpi2 = self.mpi() ** 2
        fpi = self.fpi()
        lcda = sc.lcda
        omega3pi = lcda.omega3

        u2 = u * u
        den = mc2 - q2 + u2 * mpi2
        phi3s = lcda.phi3s(u)
        tw3a = lcda.phi3p(u) + (
            phi3s / u
            - (mc2 + q2 - u2 * mpi2) / (2.0 * den) * lcda.phi3s_d1(u)
            - (2.0 * u * mpi2 * mc2) / (den * den) * phi3s
        ) / 3.0
        tw3b = (
            2.0 / u * (mc2 - q2 - u2 * mpi2) / den
            * (kernels.i3_d1(u, omega3pi) - (2.0 * u * mpi2) / den * kernels.i3(u, omega3pi))
        )
        tw3c = (
            3.0 * mpi2 / den
            * (kernels.i3bar_d1(u, omega3pi) - (2.0 * u * mpi2) / den * kernels.i3bar(u, omega3pi))
        )

        return self._borel(u, q2, M2, select_weight, sc) * (
            lcda.mupi / mc * tw3a - lcda.f3 / (mc * fpi) * (tw3b + tw3c)
        )

    def F_lo_tw4_integrand(self, u: float, q2: float, M2: float, select_weight: float, sc: SumRuleScale) -> float:
        mc2 = sc.mc2
        mpi2 = self.mpi() ** 2
        mpi4 = mpi2 * mpi2
        lcda = sc.lcda
        a2pi, deltapipi, omega4pi = lcda.a2, lcda.delta2, lcda.omega4

        u2 = u * u
        den = mc2 - q2 + u2 * mpi2
        i4bar = kernels.i4bar(u, mpi2, a2pi, deltapipi, omega4pi)

        tw4psi = u * lcda.psi4(u) + (mc2 - q2 - u2 * mpi2) / den * lcda.psi4_i(u)
        tw4phi = (
            lcda.phi4_d2(u)
            - 6.0 * u * mpi2 / den * lcda.phi4_d1(u)
            + 12.0 * u * mpi4 / (den * den) * lcda.phi4(u)
        ) * mc2 * u / (4.0 * den)
        tw4I4 = (
            kernels.i4_d1(u, mpi2, a2pi, deltapipi)
            - 2.0 * u * mpi2 / den * kernels.i4(u, mpi2, a2pi, deltapipi)
        )
        tw4I4bar1 = (
            u * kernels.i4bar_d1(u, mpi2, a2pi, deltapipi, omega4pi)
            + (mc2 - q2 - 3.0 * u2 * mpi2) / den * i4bar
        ) * 2.0 * u * mpi2 / den
        tw4I4bar2 = (
            i4bar + 6.0 * u * mpi2 / den * kernels.i4bar_i(u, mpi2, a2pi, deltapipi, omega4pi)
        ) * 2.0 * u * mpi2 * (mc2 - q2 - u2 * mpi2) / den

        return (
            self._borel(u, q2, M2, select_weight, sc)
            * (tw4psi - tw4phi - tw4I4 - tw4I4bar1 - tw4I4bar2) / den
        )

    def Ftil_lo_tw3_integrand(self, u: float, q2: float, M2: float, select_weight: float, sc: SumRuleScale) -> float:
        mc, mc2 = sc.mc, sc.mc2
        mpi2 = self.mpi() ** 2
        lcda = sc.lcda
        omega3pi = lcda.omega3

        u2 = u * u
        den = mc2 - q2 + u2 * mpi2
        tw3a = lcda.phi3p(u) / u + 1.0 / (6.0 * u) * lcda.phi3s_d1(u)
        tw3b = mpi2 / den * (
            kernels.i3til_d1(u, omega3pi) - (2.0 * u * mpi2) / den * kernels.i3til(u, omega3pi)
        )

        return self._borel(u, q2, M2, select_weight, sc) * (
            lcda.mupi / mc * tw3a + lcda.f3 / (mc * self.fpi()) * tw3b
        )

    def Ftil_lo_tw4_integrand(self, u: float, q2: float, M2: float, select_weight: float, sc: SumRuleScale) -> float:
        mc2 = sc.mc2
        mpi2 = self.mpi() ** 2
        mpi4 = mpi2 * mpi2
        lcda = sc.lcda
        a2pi, deltapipi, omega4pi = lcda.a2, lcda.delta2, lcda.omega4

        u2 = u * u
        den = mc2 - q2 + u2 * mpi2
        tw4psi = lcda.psi4(u) - (2.0 * u * mpi2) / den * lcda.psi4_i(u)
        tw4I4bar = (
            -kernels.i4bar_d1(u, mpi2, a2pi, deltapipi, omega4pi)
            + (6.0 * u * mpi2) / den * kernels.i4bar(u, mpi2, a2pi, deltapipi, omega4pi)
            + (12.0 * u2 * mpi4) / (den * den) * kernels.i4bar_i(u, mpi2, a2pi, deltapipi, omega4pi)
        ) * 2.0 * u * mpi2 / den

        return self._borel(u, q2, M2, select_weight, sc) * (tw4psi + tw4I4bar) / den

    def FT_lo_tw2_integrand(self, u: float, q2: float, M2: float, select_weight: float, sc: SumRuleScale) -> float:
        return self._borel(u, q2, M2, select_weight, sc) / u * sc.lcda.phi(u)

    def FT_lo_tw3_integrand(self, u: float, q2: float, M2: float, select_weight: float, sc: SumRuleScale) -> float:
        mc, mc2 = sc.mc, sc.mc2
        mpi2 = self.mpi() ** 2
        lcda = sc.lcda

        den = mc2 - q2 + u * u * mpi2
        return (
            -mc * lcda.mupi * self._borel(u, q2, M2, select_weight, sc)
            * (lcda.phi3s_d1(u) - 2.0 * u * mpi2 * lcda.phi3s(u) / den) / (3.0 * den)
        )

    def FT_lo_tw4_integrand(self, u: float, q2: float, M2: float, select_weight: float, sc: SumRuleScale) -> float:
        mc2 = sc.mc2
        mpi2 = self.mpi() ** 2
        mpi4 = mpi2 * mpi2
        lcda = sc.lcda
        a2pi, deltapipi, omega4pi = lcda.a2, lcda.delta2, lcda.omega4

        den = mc2 - q2 + u * u * mpi2
        phi4, phi4_d1 = lcda.phi4(u), lcda.phi4_d1(u)
        tw4phi1 = (phi4_d1 - 2.0 * u * mpi2 * phi4 / den) / 4.0
        tw4phi2 = (
            -mc2 * u
            * (lcda.phi4_d2(u) - 6.0 * u * mpi2 * phi4_d1 / den + 12.0 * u * mpi4 * phi4 / (den * den))
            / (4.0 * den)
        )
        tw4I4T = -(
            kernels.i4t_d1(u, mpi2, a2pi, deltapipi, omega4pi)
            - 2.0 * u * mpi2 * kernels.i4t(u, mpi2, a2pi, deltapipi, omega4pi) / den
        )

        return self._borel(u, q2, M2, select_weight, sc) * (tw4phi1 + tw4phi2 + tw4I4T) / den

    # Leading-order sum rules

    def _u0(self, q2: float, s0: float, mc2: float) -> float:
        return max(U_MIN, (mc2 - q2) / (s0 - q2))

    def _lo(
        self,
        name: str,
        integrand,
        q2: float,
        M2: float,
        select_weight: float,
        s0: float,
        upper: float,
        prefactor_power: int,
    ) -> float:
        sc = self._scale()
        u0 = self._u0(q2, s0, sc.mc2)
        value = self._integrate(
            lambda u: integrand(u, q2, M2, select_weight, sc), u0, upper, name, q2
        )
        # mc2 fpi for f_+ and f_0, mc fpi for f_T
        return sc.mc**prefactor_power * self.fpi() * value

    def _s0_plus_or_zero(self, q2: float, select_corr: float) -> float:
        return self.s0D(q2) * (1.0 - select_corr) + self.s0tilD(q2) * select_corr

    def F_lo_tw2(self, q2: float, M2: float | None = None, select_weight: float = 0.0, select_corr: float = 0.0) -> float:
        """
        Leading-order twist-2 contribution to the sum rule of f_+.

        Args:
            q2: Momentum transfer squared.
            M2: Borel parameter. Defaults to the rescaled Borel parameter of f_+.
            select_weight: 0 for the sum rule, 1 for its derivative w.r.t. -1/M2.
            select_corr: 0 uses the threshold of f_+, 1 that of f_0.
        """
        M2 = self.M2() * self.rescale_factor_p(q2) if M2 is None else M2
        return self._lo(
            "F_lo_tw2", self.F_lo_tw2_integrand, q2, M2, select_weight,
            self._s0_plus_or_zero(q2, select_corr), 1.0, 2,
        )

    def F_lo_tw3(self, q2: float, M2: float | None = None, select_weight: float = 0.0, select_corr: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_p(q2) if M2 is None else M2
        return self._lo(
            "F_lo_tw3", self.F_lo_tw3_integrand, q2, M2, select_weight,
            self._s0_plus_or_zero(q2, select_corr), 1.0, 2,
        )

    def F_lo_tw4(self, q2: float, M2: float | None = None, select_weight: float = 0.0, select_corr: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_p(q2) if M2 is None else M2
        return self._lo(
            "F_lo_tw4", self.F_lo_tw4_integrand, q2, M2, select_weight,
            self._s0_plus_or_zero(q2, select_corr), 1.0 - EPS_U, 2,
        )

    def Ftil_lo_tw3(self, q2: float, M2: float | None = None, select_weight: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_0(q2) if M2 is None else M2
        return self._lo(
            "Ftil_lo_tw3", self.Ftil_lo_tw3_integrand, q2, M2, select_weight,
            self.s0tilD(q2), 1.0, 2,
        )

    def Ftil_lo_tw4(self, q2: float, M2: float | None = None, select_weight: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_0(q2) if M2 is None else M2
        return self._lo(
            "Ftil_lo_tw4", self.Ftil_lo_tw4_integrand, q2, M2, select_weight,
            self.s0tilD(q2), 1.0 - EPS_U, 2,
        )

    def FT_lo_tw2(self, q2: float, M2: float | None = None, select_weight: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_T(q2) if M2 is None else M2
        return self._lo(
            "FT_lo_tw2", self.FT_lo_tw2_integrand, q2, M2, select_weight,
            self.s0TD(q2), 1.0, 1,
        )

    def FT_lo_tw3(self, q2: float, M2: float | None = None, select_weight: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_T(q2) if M2 is None else M2
        return self._lo(
            "FT_lo_tw3", self.FT_lo_tw3_integrand, q2, M2, select_weight,
            self.s0TD(q2), 1.0, 1,
        )

    def FT_lo_tw4(self, q2: float, M2: float | None = None, select_weight: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_T(q2) if M2 is None else M2
        return self._lo(
            "FT_lo_tw4", self.FT_lo_tw4_integrand, q2, M2, select_weight,
            self.s0TD(q2), 1.0 - EPS_U, 1,
        )

    # Next-to-leading-order sum rules

    def _nlo(self, name: str, kernel, q2: float, M2: float, select_weight: float, s0: float, sc: SumRuleScale) -> float:
        mc2 = sc.mc2
        r1 = q2 / mc2

        def integrand(r2: float) -> float:
            weight = (1.0 - select_weight) + select_weight * mc2 * r2
            return kernel(r1, r2) * weight * exp(-mc2 * r2 / M2)

        return self._integrate(integrand, 1.0 + EPS_R2, s0 / mc2, name, q2)

    def F_nlo_tw2(self, q2: float, M2: float | None = None, select_weight: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_p(q2) if M2 is None else M2
        sc = self._scale()
        mc2, mu = sc.mc2, sc.mu
        a2pi, a4pi = sc.lcda.a2, sc.lcda.a4

        def kernel(r1: float, r2: float) -> float:
            return -2.0 * (
                kernels.t1_tw2_theta_rhom1(r1, r2, mc2, mu, a2pi, a4pi)
                + kernels.t1_tw2_theta_1mrho(r1, r2, mc2, mu, a2pi, a4pi)
                + nlo.t1_tw2_delta(r1, r2, mc2, mu, a2pi, a4pi)
            )

        return mc2 * self.fpi() * self._nlo("F_nlo_tw2", kernel, q2, M2, select_weight, self.s0D(q2), sc)

    def F_nlo_tw3(self, q2: float, M2: float | None = None, select_weight: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_p(q2) if M2 is None else M2
        sc = self._scale()
        mc2, lmu = sc.mc2, sc.lmu
        r1 = q2 / mc2

        def kernel(r1: float, r2: float) -> float:
            return 2.0 / (r2 - r1) * (
                nlo.t1_tw3_p_theta_rhom1(r1, r2, lmu)
                + kernels.t1_tw3_p_theta_1mrho(r1, r2, lmu)
                + nlo.t1_tw3_p_delta_rhom1(r1, r2, lmu)
            ) + 1.0 / 3.0 * (
                nlo.t1_tw3_sigma_theta_rhom1(r1, r2, lmu)
                + kernels.t1_tw3_sigma_theta_1mrho(r1, r2, lmu)
                + nlo.t1_tw3_sigma_delta_rhom1(r1, r2, lmu)
            )

        integral = self._nlo("F_nlo_tw3", kernel, q2, M2, select_weight, self.s0D(q2), sc)
        weight = (1.0 - select_weight) + select_weight * mc2
        subtraction = (
            2.0 / (1.0 - r1) * (4.0 - 3.0 * lmu)
            + 2.0 * (1.0 + r1) / (1.0 - r1) ** 2 * (4.0 - 3.0 * lmu)
        ) * weight * exp(-mc2 / M2)
        return self.fpi() * sc.lcda.mupi * sc.mc * (integral - subtraction)

    def Ftil_nlo_tw2(self, q2: float, M2: float | None = None, select_weight: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_0(q2) if M2 is None else M2
        sc = self._scale()
        a2pi, a4pi = sc.lcda.a2, sc.lcda.a4

        def kernel(r1: float, r2: float) -> float:
            return (
                kernels.t1til_tw2_theta_1mrho(r1, r2, a2pi, a4pi)
                + kernels.t1til_tw2_theta_rhom1(r1, r2, a2pi, a4pi)
                + kernels.t1til_tw2_delta(r1, r2, a2pi, a4pi)
            )

        return sc.mc2 * self.fpi() * self._nlo("Ftil_nlo_tw2", kernel, q2, M2, select_weight, self.s0tilD(q2), sc)

    def Ftil_nlo_tw3(self, q2: float, M2: float | None = None, select_weight: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_0(q2) if M2 is None else M2
        sc = self._scale()
        lmu = sc.lmu

        def kernel(r1: float, r2: float) -> float:
            return 1.0 / (r2 * (r2 - r1)) * (
                nlo.t1til_tw3_p_theta_rhom1(r1, r2, lmu)
                + kernels.t1til_tw3_p_theta_1mrho(r1, r2, lmu)
                + nlo.t1til_tw3_p_delta_rhom1(r1, r2, lmu)
            ) + 1.0 / (3.0 * r2 * (r2 - r1) ** 2) * (
                kernels.t1til_tw3_sigma_theta_1mrho(r1, r2, lmu)
                + nlo.t1til_tw3_sigma_theta_rhom1(r1, r2, lmu)
                + nlo.t1til_tw3_sigma_delta_rhom1(r1, r2, lmu)
            )

        return self.fpi() * sc.lcda.mupi * sc.mc * self._nlo(
            "Ftil_nlo_tw3", kernel, q2, M2, select_weight, self.s0tilD(q2), sc
        )

    def FT_nlo_tw2(self, q2: float, M2: float | None = None, select_weight: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_T(q2) if M2 is None else M2
        sc = self._scale()
        mc2, mu = sc.mc2, sc.mu
        a2pi, a4pi = sc.lcda.a2, sc.lcda.a4

        def kernel(r1: float, r2: float) -> float:
            return 2.0 * (
                kernels.t1t_tw2_theta_rhom1(r1, r2, mc2, mu, a2pi, a4pi)
                + kernels.t1t_tw2_theta_1mrho(r1, r2, mc2, mu, a2pi, a4pi)
                + nlo.t1t_tw2_delta(r1, r2, mc2, mu, a2pi, a4pi)
            )

        return sc.mc * self.fpi() * self._nlo("FT_nlo_tw2", kernel, q2, M2, select_weight, self.s0TD(q2), sc)

    def FT_nlo_tw3(self, q2: float, M2: float | None = None, select_weight: float = 0.0) -> float:
        M2 = self.M2() * self.rescale_factor_T(q2) if M2 is None else M2
        sc = self._scale()
        mc2, lmu = sc.mc2, sc.lmu

        def kernel(r1: float, r2: float) -> float:
            return 2.0 / (r2 - r1) ** 2 * (
                nlo.t1t_tw3_p_theta_rhom1(r1, r2, lmu)
                + kernels.t1t_tw3_p_theta_1mrho(r1, r2, lmu)
                + nlo.t1t_tw3_p_delta_rhom1(r1, r2, lmu)
            ) + 2.0 / (3.0 * r2 * (r2 - r1) ** 3) * (
                kernels.t1t_tw3_sigma_theta_1mrho(r1, r2, lmu)
                + nlo.t1t_tw3_sigma_theta_rhom1(r1, r2, lmu)
                + nlo.t1t_tw3_sigma_delta_rhom1(r1, r2, lmu)
            )

        integral = self._nlo("FT_nlo_tw3", kernel, q2, M2, select_weight, self.s0TD(q2), sc)
        weight = (1.0 - select_weight) + select_weight * mc2
        subtraction = 4.0 * (4.0 - 3.0 * lmu) * weight * exp(-mc2 / M2) / (1.0 - q2 / mc2) ** 2
        return self.fpi() * sc.lcda.mupi * (integral - subtraction)

    # Rescaling of the Borel parameter

    def _no_rescale_factor(self, q2: float) -> float:
        return 1.0

    def _moment_ratio(
        self,
        name: str,
        integrand_q2: Callable[[float], float],
        integrand_zero: Callable[[float], float],
        u0_q2: float,
        u0_zero: float,
        q2: float,
    ) -> float:
        numerator_zero = self._integrate(lambda u: u * integrand_zero(u), u0_zero, 1.0, name, 0.0)
        numerator_q2 = self._integrate(lambda u: u * integrand_q2(u), u0_q2, 1.0, name, q2)
        denominator_zero = self._integrate(integrand_zero, u0_zero, 1.0, name, 0.0)
        denominator_q2 = self._integrate(integrand_q2, u0_q2, 1.0, name, q2)

        result = numerator_zero / numerator_q2 / denominator_zero * denominator_q2
        self.log.numerics("%s(%g) = %.8f", name, q2, result)
        return result

    def _rescale_factor_p(self, q2: float) -> float:
        sc = self._scale()
        M2 = self.M2()
        s0 = self.s0D(q2)

        def F(u: float, s: float) -> float:
            return self.F_lo_tw2_integrand(u, s, M2, 0.0, sc) + self.F_lo_tw3_integrand(u, s, M2, 0.0, sc)

        return self._moment_ratio(
            "rescale_factor_p",
            lambda u: F(u, q2),
            lambda u: F(u, 0.0),
            self._u0(q2, s0, sc.mc2),
            max(U_MIN, sc.mc2 / s0),
            q2,
        )

    def _rescale_factor_0(self, q2: float) -> float:
        sc = self._scale()
        M2 = self.M2()
        MD2 = self.MD() ** 2
        mpi = self.mpi()
        mpi2 = mpi * mpi
        s0 = self.s0tilD(q2)

        def F(u: float, s: float) -> float:
            return self.F_lo_tw2_integrand(u, s, M2, 0.0, sc) + self.F_lo_tw3_integrand(u, s, M2, 0.0, sc)

        def mixture(u: float) -> float:
            Ftil = self.Ftil_lo_tw3_integrand(u, q2, M2, 0.0, sc)
            # the second denominator carries m_pi, not m_pi^2, as in the published fit
            return 2.0 * q2 / (MD2 - mpi2) * Ftil + (1.0 - q2 / (MD2 - mpi)) * F(u, q2)

        return self._moment_ratio(
            "rescale_factor_0",
            mixture,
            lambda u: F(u, 0.0),
            self._u0(q2, s0, sc.mc2),
            max(U_MIN, sc.mc2 / s0),
            q2,
        )

    def _rescale_factor_T(self, q2: float) -> float:
        sc = self._scale()
        M2 = self.M2()
        s0 = self.s0TD(q2)

        def FT(u: float, s: float) -> float:
            return self.FT_lo_tw2_integrand(u, s, M2, 0.0, sc) + self.FT_lo_tw3_integrand(u, s, M2, 0.0, sc)

        return self._moment_ratio(
            "rescale_factor_T",
            lambda u: FT(u, q2),
            lambda u: FT(u, 0.0),
            self._u0(q2, s0, sc.mc2),
            max(U_MIN, sc.mc2 / s0),
            q2,
        )

    # Duality checks

    @staticmethod
    def _mass_from_ratio(MD2: float) -> float:
        if MD2 < 0.0:
            return 0.0
        return sqrt(MD2)

    def MDp_lcsr(self, q2: float) -> float:
        """Mass of the D meson as predicted by the sum rule for f_+."""
        M2 = self.M2() * self.rescale_factor_p(q2)
        a = self.model.alpha_s(self.mu()) / (3.0 * pi)

        F_lo = self.F_lo_tw2(q2, M2, 0.0) + self.F_lo_tw3(q2, M2, 0.0) + self.F_lo_tw4(q2, M2, 0.0)
        F_lo_D1M2inv = self.F_lo_tw2(q2, M2, 1.0) + self.F_lo_tw3(q2, M2, 1.0) + self.F_lo_tw4(q2, M2, 1.0)
        F_nlo = self.F_nlo_tw2(q2, M2, 0.0) + self.F_nlo_tw3(q2, M2, 0.0)
        F_nlo_D1M2inv = self.F_nlo_tw2(q2, M2, 1.0) + self.F_nlo_tw3(q2, M2, 1.0)

        F = F_lo + a * F_nlo
        F_D1M2inv = F_lo_D1M2inv + a * F_nlo_D1M2inv
        return self._mass_from_ratio(F_D1M2inv / F)

    def MD0_lcsr(self, q2: float) -> float:
        """Mass of the D meson as predicted by the sum rule for f_0."""
        MD2 = self.MD() ** 2
        mpi = self.mpi()
        mpi2 = mpi * mpi
        # Ftil is singular at q2 = 0
        q2 = q2 if abs(q2) > 1e-3 else 1e-3
        M2 = self.M2() * self.rescale_factor_0(q2)
        a = self.model.alpha_s(self.mu()) / (3.0 * pi)

        F_lo = self.F_lo_tw2(q2, M2, 0.0, 1.0) + self.F_lo_tw3(q2, M2, 0.0, 1.0) + self.F_lo_tw4(q2, M2, 0.0, 1.0)
        F_lo_D1M2inv = self.F_lo_tw2(q2, M2, 1.0, 1.0) + self.F_lo_tw3(q2, M2, 1.0, 1.0) + self.F_lo_tw4(q2, M2, 1.0, 1.0)
        F_nlo = self.F_nlo_tw2(q2, M2, 0.0) + self.F_nlo_tw3(q2, M2, 0.0)
        F_nlo_D1M2inv = self.F_nlo_tw2(q2, M2, 1.0) + self.F_nlo_tw3(q2, M2, 1.0)
        Ftil_lo = self.Ftil_lo_tw3(q2, M2, 0.0) + self.Ftil_lo_tw4(q2, M2, 0.0)
        Ftil_lo_D1M2inv = self.Ftil_lo_tw3(q2, M2, 1.0) + self.Ftil_lo_tw4(q2, M2, 1.0)
        Ftil_nlo = self.Ftil_nlo_tw2(q2, M2, 0.0) + self.Ftil_nlo_tw3(q2, M2, 0.0)
        Ftil_nlo_D1M2inv = self.Ftil_nlo_tw2(q2, M2, 1.0) + self.Ftil_nlo_tw3(q2, M2, 1.0)

        F = F_lo + a * F_nlo
        F_D1M2inv = F_lo_D1M2inv + a * F_nlo_D1M2inv
        Ftil = Ftil_lo + a * Ftil_nlo
        Ftil_D1M2inv = Ftil_lo_D1M2inv + a * Ftil_nlo_D1M2inv

        denominator = 2.0 * q2 / (MD2 - mpi2) * Ftil + (1.0 - q2 / (MD2 - mpi)) * F
        numerator = 2.0 * q2 / (MD2 - mpi2) * Ftil_D1M2inv + (1.0 - q2 / (MD2 - mpi)) * F_D1M2inv
        return self._mass_from_ratio(numerator / denominator)

    def MDT_lcsr(self, q2: float) -> float:
        """Mass of the D meson as predicted by the sum rule for f_T."""
        # rescaled with the factor of f_+
        M2 = self.M2() * self.rescale_factor_p(q2)
        a = self.model.alpha_s(self.mu()) / (3.0 * pi)

        FT_lo = self.FT_lo_tw2(q2, M2, 0.0) + self.FT_lo_tw3(q2, M2, 0.0) + self.FT_lo_tw4(q2, M2, 0.0)
        FT_lo_D1M2inv = self.FT_lo_tw2(q2, M2, 1.0) + self.FT_lo_tw3(q2, M2, 1.0) + self.FT_lo_tw4(q2, M2, 1.0)
        FT_nlo = self.FT_nlo_tw2(q2, M2, 0.0) + self.FT_nlo_tw3(q2, M2, 0.0)
        FT_nlo_D1M2inv = self.FT_nlo_tw2(q2, M2, 1.0) + self.FT_nlo_tw3(q2, M2, 1.0)

        FT = FT_lo + a * FT_nlo
        FT_D1M2inv = FT_lo_D1M2inv + a * FT_nlo_D1M2inv
        return self._mass_from_ratio(FT_D1M2inv / FT)

    # Form factors

    def f_p(self, q2: float) -> float:
        MD2 = self.MD() ** 2
        M2 = self.M2() * self.rescale_factor_p(q2)
        fD = self.decay_constant()

        F_lo = self.F_lo_tw2(q2, M2) + self.F_lo_tw3(q2, M2) + self.F_lo_tw4(q2, M2)
        F_nlo = self.F_nlo_tw2(q2, M2) + self.F_nlo_tw3(q2, M2)
        # estimate of the NNLO correction, |F_nnlo / F_nlo| = |F_nlo / F_lo|
        F_nnlo = F_nlo * F_nlo / F_lo * self.zeta_nnlo()
        a = self.model.alpha_s(self.mu()) / (3.0 * pi)

        return exp(MD2 / M2) / (2.0 * MD2 * fD) * (F_lo + a * F_nlo + a * a * F_nnlo)

    def f_0(self, q2: float) -> float:
        if abs(q2) < 1e-6:
            return self.f_p(q2)

        MD2 = self.MD() ** 2
        mpi = self.mpi()
        mpi2 = mpi * mpi
        M2 = self.M2() * self.rescale_factor_0(q2)
        fD = self.decay_constant()

        F_lo = self.F_lo_tw2(q2, M2) + self.F_lo_tw3(q2, M2) + self.F_lo_tw4(q2, M2)
        F_nlo = self.F_nlo_tw2(q2, M2) + self.F_nlo_tw3(q2, M2)
        Ftil_lo = self.Ftil_lo_tw3(q2, M2) + self.Ftil_lo_tw4(q2, M2)
        Ftil_nlo = self.Ftil_nlo_tw2(q2, M2) + self.Ftil_nlo_tw3(q2, M2)
        a = self.model.alpha_s(self.mu()) / (3.0 * pi)

        return exp(MD2 / M2) / (2.0 * MD2 * fD) * (
            2.0 * q2 / (MD2 - mpi2) * (Ftil_lo + a * Ftil_nlo)
            + (1.0 - q2 / (MD2 - mpi)) * (F_lo + a * F_nlo)
        )

    def f_t(self, q2: float) -> float:
        MD = self.MD()
        MD2 = MD * MD
        M2 = self.M2() * self.rescale_factor_T(q2)
        fD = self.decay_constant()

        FT_lo = self.FT_lo_tw2(q2, M2) + self.FT_lo_tw3(q2, M2) + self.FT_lo_tw4(q2, M2)
        FT_nlo = self.FT_nlo_tw2(q2, M2) + self.FT_nlo_tw3(q2, M2)
        a = self.model.alpha_s(self.mu()) / (3.0 * pi)

        return exp(MD2 / M2) / (2.0 * MD2 * fD) * (MD + self.mpi()) * (FT_lo + a * FT_nlo)

    def f_plus_T(self, q2: float) -> float:
        return 0.0

    def diagnostics(self) -> Diagnostics:
        results = Diagnostics()

        for s in (6.5, 7.0, 7.5):
            results.add(
                self.rho_1(s, 1.27, 1.4),
                f"rho_1(s = {s}, m_c = 1.27, mu = 1.4), [KKMO:2009A]",
            )

        results.add(self.decay_constant(), "f_D, [KKMO:2009A]")

        for name, factor in (
            ("p", self.rescale_factor_p),
            ("0", self.rescale_factor_0),
            ("T", self.rescale_factor_T),
        ):
            results.add(factor(0.0), f"rescale_factor_{name}(s =  0.0), [KKMO:2009A]")
            results.add(factor(10.0), f"rescale_factor_{name}(s = 10.0), [KKMO:2009A]")

        for label, mass in (
            ("f_+", self.MDp_lcsr),
            ("f_0", self.MD0_lcsr),
            ("f_T", self.MDT_lcsr),
        ):
            results.add(mass(0.0), f"M_D({label}, q2 =  0.0), [KKMO:2009A]")
            results.add(mass(10.0), f"M_D({label}, q2 = 10.0), [KKMO:2009A]")

        return results
