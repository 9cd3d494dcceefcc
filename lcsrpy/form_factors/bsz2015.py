"""Parametrisation of P -> P form factors as a series in the conformal variable z."""

import cmath
from dataclasses import dataclass
from math import sqrt

from lcsrpy.form_factors.form_factors import FormFactors
from lcsrpy.options import Options
from lcsrpy.parameters import Parameters


@dataclass(frozen=True)
class TransitionConstants:
    """
    Masses entering the z-expansion of one transition.

    Attributes:
        label (str): Process label used in the parameter names.
        m_B (float): Mass of the parent meson.
        m_P (float): Mass of the daughter meson.
        m_R_1m (float): Mass of the lowest 1^- resonance.
        m_R_0p (float): Mass of the lowest 0^+ resonance.
    """

    label: str
    m_B: float
    m_P: float
    m_R_1m: float
    m_R_0p: float

    @property
    def m2_Br1m(self) -> float:
        return self.m_R_1m * self.m_R_1m

    @property
    def m2_Br0p(self) -> float:
        return self.m_R_0p * self.m_R_0p


TRANSITIONS = {
    "D->pi": TransitionConstants("D->pi", 1.867, 0.13957, 2.01027, 2.300),
    "D->K": TransitionConstants("D->K", 1.865, 0.4937, 2.1122, 2.317),
    "D_s->K": TransitionConstants("D_s->K", 1.96835, 0.49368, 2.00685, 2.300),
}


class BSZ2015FormFactors(FormFactors):
    """
    Simplified series expansion with a single pole, truncated after the second
    power of ``z(s) - z(0)``.

    The constant term of ``f_0`` is fixed to that of ``f_p`` so that
    ``f_0(0) = f_p(0)`` holds exactly.

    Args:
        process (str): One of the keys of ``TRANSITIONS``.
        parameters (Parameters): Registry holding the expansion coefficients.
        options (Options, optional): Unused.
    """

    def __init__(self, process: str, parameters: Parameters, options: Options | None = None):
        super().__init__()
        self.constants = TRANSITIONS[process]

        self._a_fp = [self.used_parameter(parameters, self._par_name(f"f+_{i}")) for i in range(3)]
        self._a_ft = [self.used_parameter(parameters, self._par_name(f"fT_{i}")) for i in range(3)]
        self._a_fz = [self.used_parameter(parameters, self._par_name(f"f0_{i}")) for i in (1, 2)]

        m_B, m_P = self.constants.m_B, self.constants.m_P
        self._tau_p = (m_B + m_P) ** 2
        tau_m = (m_B - m_P) ** 2
        self._tau_0 = self._tau_p * (1.0 - sqrt(1.0 - tau_m / self._tau_p))
        self._z_0 = self._calc_z(0.0)

    def _par_name(self, ff_name: str) -> str:
        return f"{self.constants.label}::alpha^{ff_name}@BSZ2015"

    def _calc_z(self, s: complex) -> complex:
        a = cmath.sqrt(self._tau_p - s)
        b = cmath.sqrt(self._tau_p - self._tau_0)
        return (a - b) / (a + b)

    def _calc_ff(self, s: complex, m2_R: float, a: list[float]) -> complex:
        diff_z = self._calc_z(s) - self._z_0
        return 1.0 / (1.0 - s / m2_R) * (a[0] + a[1] * diff_z + a[2] * diff_z * diff_z)

    def f_p(self, q2: float) -> float:
        return self._calc_ff(complex(q2), self.constants.m2_Br1m, [a() for a in self._a_fp]).real

    def f_t(self, q2: float) -> float:
        return self._calc_ff(complex(q2), self.constants.m2_Br1m, [a() for a in self._a_ft]).real

    def f_0(self, q2: float) -> float:
        a = [self._a_fp[0](), self._a_fz[0](), self._a_fz[1]()]
        return self._calc_ff(complex(q2), self.constants.m2_Br0p, a).real

    def f_plus_T(self, q2: float) -> float:
        m_B, m_P = self.constants.m_B, self.constants.m_P
        ff = self._calc_ff(complex(q2), self.constants.m2_Br1m, [a() for a in self._a_ft])
        return (ff * q2 / m_B / (m_B + m_P)).real
