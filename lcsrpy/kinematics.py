"""Kinematic helper functions of a two-body transition P1 -> P2 + (l nu)."""

from math import sqrt


def lambda_(a: float, b: float, c: float) -> float:
    """Källén function a^2 + b^2 + c^2 - 2 (ab + bc + ca)."""
    return a * a + b * b + c * c - 2.0 * (a * b + b * c + c * a)


def momentum(m_D: float, m_P: float, s: float) -> float:
    """
    Three-momentum of the daughter meson in the rest frame of the parent.

    Parameters
    ----------
    m_D : float
        Mass of the parent meson.
    m_P : float
        Mass of the daughter meson.
    s : float
        Momentum transfer squared to the lepton pair.

    Returns
    -------
    float
        ``sqrt(lambda(m_D^2, m_P^2, s)) / (2 m_D)``. Negative values of the Källén
        function are clamped to zero.

    """
    return sqrt(max(0.0, lambda_(m_D * m_D, m_P * m_P, s))) / (2.0 * m_D)


def lepton_velocity(m_l: float, s: float) -> float:
    return 1.0 - m_l * m_l / s


def q2_from_w(m_D: float, m_P: float, w: float) -> float:
    """Momentum transfer squared for the recoil w."""
    return m_D * m_D + m_P * m_P - 2.0 * m_D * m_P * w


def w_from_q2(m_D: float, m_P: float, q2: float) -> float:
    return (m_D * m_D + m_P * m_P - q2) / (2.0 * m_D * m_P)


def dq2_dw(m_D: float, m_P: float) -> float:
    # |ds/dw|, the Jacobian of the change of variables
    return 2.0 * m_D * m_P


def phase_space_bounds(m_D: float, m_P: float, m_l: float) -> tuple[float, float]:
    return m_l * m_l, (m_D - m_P) ** 2
