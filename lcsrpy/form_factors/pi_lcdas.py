"""
Light-cone distribution amplitudes of the pion up to twist four.

The non-perturbative moments are inputs at 1 GeV and evolve to the scale of the
sum rule at leading logarithmic accuracy, ``X(mu) = X(1 GeV) L^(gamma_X / beta0)``
with ``L = alpha_s(mu) / alpha_s(1 GeV)``.
"""

import logging
from dataclasses import dataclass
from math import log

from lcsrpy.models.model import Model, StandardModel
from lcsrpy.options import Options
from lcsrpy.parameters import Parameters, ParameterUser

# four active flavours
BETA0 = 25.0 / 3.0

GAMMA_A2 = 50.0 / 9.0
GAMMA_A4 = 364.0 / 45.0
GAMMA_F3 = 55.0 / 9.0
GAMMA_OMEGA3 = 49.0 / 9.0
GAMMA_DELTA2 = 32.0 / 9.0
GAMMA_OMEGA4 = 10.0 / 3.0


def _c2_half(x: float) -> float:
    return 0.5 * (3.0 * x * x - 1.0)


def _c4_half(x: float) -> float:
    x2 = x * x
    return (35.0 * x2 * x2 - 30.0 * x2 + 3.0) / 8.0


def _c2_three_halves(x: float) -> float:
    return 1.5 * (5.0 * x * x - 1.0)


def _c4_three_halves(x: float) -> float:
    x2 = x * x
    return 15.0 / 8.0 * (21.0 * x2 * x2 - 14.0 * x2 + 1.0)


def _log(u: float) -> float:
    # every logarithm below is multiplied by a power of u, so 0 is the limit
    return log(u) if u > 0.0 else 0.0


@dataclass(frozen=True)
class PionLCDAsAtScale:
    """
    The pion LCDAs at a fixed renormalisation scale.

    Attributes
    ----------
    mu : float
        Renormalisation scale.
    a2, a4 : float
        Gegenbauer moments of the twist-2 LCDA.
    f3 : float
        Normalisation of the twist-3 three-particle LCDA.
    omega3 : float
        Shape parameter of the twist-3 three-particle LCDA.
    delta2 : float
        Normalisation of the twist-4 LCDAs.
    omega4 : float
        Shape parameter of the twist-4 LCDAs.
    mupi : float
        Chiral parameter m_pi^2 / (m_u + m_d).
    rho2 : float
        Squared ratio of the light quark masses to ``mupi``.
    fpi : float
        Pion decay constant.

    """

    mu: float
    a2: float
    a4: float
    f3: float
    omega3: float
    delta2: float
    omega4: float
    mupi: float
    rho2: float
    fpi: float

    @property
    def r3(self) -> float:
        return self.f3 / (self.fpi * self.mupi)

    def phi(self, u: float) -> float:
        """Twist-2 LCDA, truncated after the fourth Gegenbauer moment."""
        x = 2.0 * u - 1.0
        return 6.0 * u * (1.0 - u) * (
            1.0 + self.a2 * _c2_three_halves(x) + self.a4 * _c4_three_halves(x)
        )

    def phi3p(self, u: float) -> float:
        x = 2.0 * u - 1.0
        r3, rho2 = self.r3, self.rho2
        return (
            1.0
            + (30.0 * r3 - 2.5 * rho2) * _c2_half(x)
            + (-3.0 * r3 * self.omega3 - 27.0 / 20.0 * rho2 - 81.0 / 10.0 * rho2 * self.a2)
            * _c4_half(x)
        )

    def _phi3s_coefficient(self) -> float:
        r3, rho2 = self.r3, self.rho2
        return 5.0 * r3 - 0.5 * r3 * self.omega3 - 7.0 / 20.0 * rho2 - 3.0 / 5.0 * rho2 * self.a2

    def phi3s(self, u: float) -> float:
        x = 2.0 * u - 1.0
        return 6.0 * u * (1.0 - u) * (1.0 + self._phi3s_coefficient() * _c2_three_halves(x))

    def phi3s_d1(self, u: float) -> float:
        x = 2.0 * u - 1.0
        c = self._phi3s_coefficient()
        return -6.0 * x * (1.0 + c * _c2_three_halves(x)) + 6.0 * u * (1.0 - u) * c * 30.0 * x

    def phi4(self, u: float) -> float:
        ubar = 1.0 - u
        t = u * ubar
        g_u = 2.0 * u**3 * (10.0 - 15.0 * u + 6.0 * u * u)
        g_ubar = 2.0 * ubar**3 * (10.0 - 15.0 * ubar + 6.0 * ubar * ubar)
        return 200.0 / 3.0 * self.delta2 * t * t + 8.0 * self.delta2 * self.omega4 * (
            t * (2.0 + 13.0 * t) + g_u * _log(u) + g_ubar * _log(ubar)
        )

    def phi4_d1(self, u: float) -> float:
        ubar = 1.0 - u
        t = u * ubar
        dt = 1.0 - 2.0 * u
        h = 2.0 * u * u * (10.0 - 15.0 * u + 6.0 * u * u) - 2.0 * ubar * ubar * (
            10.0 - 15.0 * ubar + 6.0 * ubar * ubar
        )
        return 400.0 / 3.0 * self.delta2 * t * dt + 8.0 * self.delta2 * self.omega4 * (
            (2.0 + 26.0 * t) * dt + 60.0 * t * t * (_log(u) - _log(ubar)) + h
        )

    def phi4_d2(self, u: float) -> float:
        ubar = 1.0 - u
        t = u * ubar
        dt = 1.0 - 2.0 * u
        dh = (
            40.0 * u - 90.0 * u * u + 48.0 * u**3
            + 40.0 * ubar - 90.0 * ubar * ubar + 48.0 * ubar**3
        )
        return 400.0 / 3.0 * self.delta2 * (dt * dt - 2.0 * t) + 8.0 * self.delta2 * self.omega4 * (
            26.0 * dt * dt
            - 2.0 * (2.0 + 26.0 * t)
            + 120.0 * t * dt * (_log(u) - _log(ubar))
            + 60.0 * t
            + dh
        )

    def psi4(self, u: float) -> float:
        return 20.0 / 3.0 * self.delta2 * _c2_half(2.0 * u - 1.0)

    def psi4_i(self, u: float) -> float:
        """Integral of ``psi4`` from 0 to ``u``."""
        return -20.0 / 3.0 * self.delta2 * u * (1.0 - u) * (2.0 * u - 1.0)


class PionLCDAs(ParameterUser):
    """
    Pion LCDAs and their moments as functions of the renormalisation scale.

    Args:
        parameters (Parameters): Registry holding the moments at 1 GeV.
        options (Options, optional): Options, passed on to the model.
        model (Model, optional): Source of the strong coupling and of the light
            quark masses. A Standard Model instance is created if omitted.
    """

    def __init__(
        self,
        parameters: Parameters,
        options: Options | None = None,
        model: Model | None = None,
    ):
        super().__init__()
        self.log = logging.getLogger(self.__class__.__module__)
        self.model = model if model is not None else StandardModel(parameters, options)

        self._a2 = self.used_parameter(parameters, "pi::a2@1GeV")
        self._a4 = self.used_parameter(parameters, "pi::a4@1GeV")
        self._f3 = self.used_parameter(parameters, "pi::f3@1GeV")
        self._omega3 = self.used_parameter(parameters, "pi::omega3@1GeV")
        self._omega4 = self.used_parameter(parameters, "pi::omega4@1GeV")
        self._delta2 = self.used_parameter(parameters, "pi::delta^2@1GeV")
        self._fpi = self.used_parameter(parameters, "decay-constant::pi")
        self._mpi = self.used_parameter(parameters, "mass::pi^+")

        self.uses(self.model)

    def _evolution(self, mu: float, gamma: float) -> float:
        L = self.model.alpha_s(mu) / self.model.alpha_s(1.0)
        return L ** (gamma / BETA0)

    def a2pi(self, mu: float) -> float:
        return self._a2() * self._evolution(mu, GAMMA_A2)

    def a4pi(self, mu: float) -> float:
        return self._a4() * self._evolution(mu, GAMMA_A4)

    def f3pi(self, mu: float) -> float:
        return self._f3() * self._evolution(mu, GAMMA_F3)

    def omega3pi(self, mu: float) -> float:
        return self._omega3() * self._evolution(mu, GAMMA_OMEGA3)

    def omega4pi(self, mu: float) -> float:
        return self._omega4() * self._evolution(mu, GAMMA_OMEGA4)

    def deltapipi(self, mu: float) -> float:
        return self._delta2() * self._evolution(mu, GAMMA_DELTA2)

    def _m_ud(self, mu: float) -> float:
        return self.model.m_u_msbar(mu) + self.model.m_d_msbar(mu)

    def mupi(self, mu: float) -> float:
        mpi = self._mpi()
        return mpi * mpi / self._m_ud(mu)

    def at_scale(self, mu: float) -> PionLCDAsAtScale:
        """
        Evaluates all moments once at the scale ``mu``.

        Args:
            mu (float): Renormalisation scale.

        Returns:
            PionLCDAsAtScale: Immutable snapshot, cheap to evaluate in integrands.
        """
        mupi = self.mupi(mu)
        rho = self._m_ud(mu) / mupi
        snapshot = PionLCDAsAtScale(
            mu=mu,
            a2=self.a2pi(mu),
            a4=self.a4pi(mu),
            f3=self.f3pi(mu),
            omega3=self.omega3pi(mu),
            delta2=self.deltapipi(mu),
            omega4=self.omega4pi(mu),
            mupi=mupi,
            rho2=rho * rho,
            fpi=self._fpi(),
        )
        self.log.debug(f"Pion LCDAs at mu = {mu}: {snapshot}")
        return snapshot

    def phi(self, u: float, mu: float) -> float:
        return self.at_scale(mu).phi(u)

    def phi3p(self, u: float, mu: float) -> float:
        return self.at_scale(mu).phi3p(u)

    def phi3s(self, u: float, mu: float) -> float:
        return self.at_scale(mu).phi3s(u)

    def phi3s_d1(self, u: float, mu: float) -> float:
        return self.at_scale(mu).phi3s_d1(u)

    def phi4(self, u: float, mu: float) -> float:
        return self.at_scale(mu).phi4(u)

    def phi4_d1(self, u: float, mu: float) -> float:
        return self.at_scale(mu).phi4_d1(u)

    def phi4_d2(self, u: float, mu: float) -> float:
        return self.at_scale(mu).phi4_d2(u)

    def psi4(self, u: float, mu: float) -> float:
        return self.at_scale(mu).psi4(u)

    def psi4_i(self, u: float, mu: float) -> float:
        return self.at_scale(mu).psi4_i(u)
