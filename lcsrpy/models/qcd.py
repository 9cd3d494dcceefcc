"""
Running of the strong coupling and of MSbar quark masses.

The strong coupling is obtained by solving the four-loop renormalisation group
equation numerically, starting at the Z mass. Flavour thresholds sit at m_b(m_b)
and m_c(m_c); the coupling is continuous across them. Quark masses run with the
four-loop c-functions of the respective number of active flavours.
"""

from functools import lru_cache
from math import log, pi, sqrt
from typing import Callable

import numpy as np
from scipy.integrate import solve_ivp

import lcsrpy.log as log_
from lcsrpy.errors import NumericalError

ZETA3 = 1.2020569031595942

_log = log_.lcsr_logger(__name__)


def beta_coefficients(nf: int) -> tuple[float, float, float, float]:
    """
    Coefficients of the QCD beta function in the MSbar scheme.

    With ``a = alpha_s / (4 pi)`` the equation reads
    ``d a / d ln(mu^2) = -a^2 (beta0 + beta1 a + beta2 a^2 + beta3 a^3)``.

    Parameters
    ----------
    nf : int
        Number of active quark flavours.

    Returns
    -------
    tuple[float, float, float, float]
        beta0 to beta3.

    """
    beta0 = 11.0 - 2.0 * nf / 3.0
    beta1 = 102.0 - 38.0 * nf / 3.0
    beta2 = 2857.0 / 2.0 - 5033.0 * nf / 18.0 + 325.0 * nf * nf / 54.0
    beta3 = (
        (149753.0 / 6.0 + 3564.0 * ZETA3)
        - (1078361.0 / 162.0 + 6508.0 * ZETA3 / 27.0) * nf
        + (50065.0 / 162.0 + 6472.0 * ZETA3 / 81.0) * nf * nf
        + 1093.0 * nf * nf * nf / 729.0
    )
    return beta0, beta1, beta2, beta3


def active_flavours(mu: float, m_b: float, m_c: float) -> int:
    if mu > m_b:
        return 5
    if mu > m_c:
        return 4
    return 3


def _segments(mu0: float, mu1: float, thresholds: tuple[float, ...]) -> list[tuple[float, float]]:
    # split [mu0, mu1] (in either direction) at every threshold in between
    low, high = min(mu0, mu1), max(mu0, mu1)
    inner = [t for t in thresholds if low < t < high]
    points = [mu0] + sorted(inner, reverse=mu1 < mu0) + [mu1]
    return list(zip(points[:-1], points[1:]))


def _rge(t, a, beta):
    beta0, beta1, beta2, beta3 = beta
    return -a * a * (beta0 + a * (beta1 + a * (beta2 + a * beta3)))


@lru_cache(maxsize=4096)
def alpha_s(
    mu: float, alpha_s_mz: float, m_z: float, m_b: float, m_c: float
) -> float:
    """
    Strong coupling in the MSbar scheme at the scale ``mu``.

    Parameters
    ----------
    mu : float
        Renormalisation scale in GeV.
    alpha_s_mz : float
        Value of the coupling at the Z mass.
    m_z : float
        Z mass.
    m_b : float
        m_b(m_b), threshold between four and five active flavours.
    m_c : float
        m_c(m_c), threshold between three and four active flavours.

    Returns
    -------
    float
        alpha_s(mu).

    """
    if mu <= 0.0:
        raise NumericalError("alpha_s", f"invalid scale mu = {mu}")

    a = alpha_s_mz / (4.0 * pi)
    for start, stop in _segments(m_z, mu, (m_b, m_c)):
        if start == stop:
            continue
        nf = active_flavours(sqrt(start * stop), m_b, m_c)
        solution = solve_ivp(
            _rge,
            (2.0 * log(start), 2.0 * log(stop)),
            [a],
            method="DOP853",
            rtol=1e-10,
            atol=1e-14,
            args=(beta_coefficients(nf),),
        )
        if not solution.success:
            raise NumericalError("alpha_s", solution.message)
        a = float(solution.y[0, -1])
        if not np.isfinite(a) or a <= 0.0:
            raise NumericalError("alpha_s", f"coupling diverges below mu = {stop:g}")

    _log.numerics("alpha_s(%g) = %.8f", mu, 4.0 * pi * a)
    return 4.0 * pi * a


def c_function(alpha: float, nf: int) -> float:
    """Four-loop c-function, m(mu) / m(mu0) = c(alpha_s(mu)) / c(alpha_s(mu0))."""
    x = alpha / pi
    match nf:
        case 3:
            return (4.5 * x) ** (4.0 / 9.0) * (1.0 + 0.895 * x + 1.371 * x**2 + 1.952 * x**3)
        case 4:
            return (25.0 / 6.0 * x) ** (12.0 / 25.0) * (
                1.0 + 1.014 * x + 1.389 * x**2 + 1.091 * x**3
            )
        case 5:
            return (23.0 / 6.0 * x) ** (12.0 / 23.0) * (
                1.0 + 1.175 * x + 1.501 * x**2 + 0.1725 * x**3
            )
        case _:
            raise ValueError(f"No c-function for nf = {nf}")


def run_mass(
    m0: float,
    mu0: float,
    mu: float,
    alpha: Callable[[float], float],
    m_b: float,
    m_c: float,
) -> float:
    """
    Runs an MSbar mass from ``mu0`` to ``mu``.

    Args:
        m0: Mass at the scale ``mu0``.
        mu0: Scale of the input mass.
        mu: Target scale.
        alpha: The strong coupling as a function of the scale.
        m_b: Threshold between four and five active flavours.
        m_c: Threshold between three and four active flavours.

    Returns:
        The mass at ``mu``.
    """
    m = m0
    for start, stop in _segments(mu0, mu, (m_b, m_c)):
        nf = active_flavours(sqrt(start * stop), m_b, m_c)
        m *= c_function(alpha(stop), nf) / c_function(alpha(start), nf)
    return m
