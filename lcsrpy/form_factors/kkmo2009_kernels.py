"""Next-to-leading order hard-scattering kernels that involve dilogarithms.

The kernels are functions of ``r1 = q2 / mc2`` and ``r2 = s / mc2``. Their
counterparts without dilogarithms are compiled with numba in
:mod:`lcsrpy.functions.cpu_numba`; the ones here call
:func:`lcsrpy.functions.special.dilog` and therefore stay in plain Python.

The ``t1t`` kernels contain terms proportional to ``1 / r1`` and ``ln|r1|``
that cancel in the limit ``r1 -> 0``. Below ``sqrt(eps)`` a truncated series
in ``r1`` is used instead, and the singular terms are never evaluated.
"""

import sys
from math import log, pi, sqrt

from lcsrpy.functions.special import dilog

PI2 = pi * pi
SERIES_THRESHOLD = sqrt(sys.float_info.epsilon)


def t1_tw2_delta(r1: float, r2: float, mc2: float, mu: float, a2pi: float, a4pi: float) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r14 = r12 * r12
    r15 = r13 * r12
    r22 = r2 * r2
    r23 = r22 * r2
    r24 = r22 * r22
    r25 = r23 * r22
    r26 = r23 * r23
    L1mr1 = log(1.0 - r1)
    Lr2 = log(r2)
    Lr2m1 = log(r2 - 1.0)
    Lmu = log(mc2 / (mu * mu))
    L1mr12 = L1mr1 * L1mr1
    Lr2m12 = Lr2m1 * Lr2m1
    dilogr1 = dilog(r1)
    dilog1mr2 = dilog(1.0 - r2)

    ca00 = r2 * (18.0 + PI2 - r1 * (10.0 + PI2)) + r22 * (-10.0 - PI2 + r1 * (2.0 + PI2))
    ca0mu = r2 * (-15.0 + r1 * 9.0) + r22 * (9.0 - r1 * 3.0)
    ca0r1 = -2.0 + r1 * 2.0 + r2 * (4.0 - r1 * 4.0) + r22 * (-2.0 + r1 * 2.0)
    ca0r12 = r2 * (-2.0 + r1 * 2.0) + r22 * (2.0 - r1 * 2.0)

    ca20 = (
        r2 * (5.0 * (34.0 + PI2) - r1 * 10.0 * (26.0 + PI2) + r12 * 6.0 * (18.0 + PI2) + r13 * (-10.0 - PI2))
        + r22 * (-10.0 * (26.0 + PI2) + r1 * 18.0 * (18.0 + PI2) - r12 * 9.0 * (10.0 + PI2) + r13 * (2.0 + PI2))
        + r23 * (6.0 * (18.0 + PI2) - r1 * 9.0 * (10.0 + PI2) + r12 * 3.0 * (2.0 + PI2))
        + r24 * (-10.0 - PI2 + r1 * (2.0 + PI2))
    )
    ca2mu = (
        r2 * (-135.0 + r1 * 210.0 - r12 * 90.0 + r13 * 9.0)
        + r22 * (210.0 - r1 * 270.0 + r12 * 81.0 - r13 * 3.0)
        + r23 * (-90.0 + r1 * 81.0 - r12 * 9.0)
        + r24 * (9.0 - r1 * 3.0)
    )
    ca2r1 = (
        -10.0 + r1 * 20.0 - r12 * 12.0 + r13 * 2.0
        + r2 * (30.0 - r1 * 56.0 + r12 * 30.0 - r13 * 4.0)
        + r22 * (-32.0 + r1 * 54.0 - r12 * 24.0 + r13 * 2.0)
        + r23 * (14.0 - r1 * 20.0 + r12 * 6.0)
        + r24 * (-2.0 + r1 * 2.0)
    )
    ca2r12 = (
        r2 * (-10.0 + r1 * 20.0 - r12 * 12.0 + r13 * 2.0)
        + r22 * (20.0 - r1 * 36.0 + r12 * 18.0 - r13 * 2.0)
        + r23 * (-12.0 + r1 * 18.0 - r12 * 6.0)
        + r24 * (2.0 - r1 * 2.0)
    )

    ca40 = (
        r2 * (42.0 * (50.0 + PI2) - r1 * 126.0 * (42.0 + PI2) + r12 * 140.0 * (34.0 + PI2) - r13 * 70.0 * (26.0 + PI2) + r14 * 15.0 * (18.0 + PI2) + r15 * (-10.0 - PI2))
        + r22 * (-126.0 * (42.0 + PI2) + r1 * 350.0 * (34.0 + PI2) - r12 * 350.0 * (26.0 + PI2) + r13 * 150.0 * (18.0 + PI2) - r14 * 25.0 * (10.0 + PI2) + r15 * (2.0 + PI2))
        + r23 * (140.0 * (34.0 + PI2) - r1 * 350.0 * (26.0 + PI2) + r12 * 300.0 * (18.0 + PI2) - r13 * 100.0 * (10.0 + PI2) + r14 * 10.0 * (2.0 + PI2))
        + r24 * (-70.0 * (26.0 + PI2) + r1 * 150.0 * (18.0 + PI2) - r12 * 100.0 * (10.0 + PI2) + r13 * 20.0 * (2.0 + PI2))
        + r25 * (15.0 * (18.0 + PI2) - r1 * 25.0 * (10.0 + PI2) + r12 * 10.0 * (2.0 + PI2))
        + r26 * (-10.0 - PI2 + r1 * (2.0 + PI2))
    )
    ca4mu = (
        r2 * (-1638.0 + r1 * 4158.0 - r12 * 3780.0 + r13 * 1470.0 - r14 * 225.0 + r15 * 9.0)
        + r22 * (4158.0 - r1 * 9450.0 + r12 * 7350.0 - r13 * 2250.0 + r14 * 225.0 - r15 * 3.0)
        + r23 * (-3780.0 + r1 * 7350.0 - r12 * 4500.0 + r13 * 900.0 - r14 * 30.0)
        + r24 * (1470.0 - r1 * 2250.0 + r12 * 900.0 - r13 * 60.0)
        + r25 * (-225.0 + r1 * 225.0 - r12 * 30.0)
        + r26 * (9.0 - r1 * 3.0)
    )
    ca4r1 = (
        -84.0 + r1 * 252.0 - r12 * 280.0 + r13 * 140.0 - r14 * 30.0 + r15 * 2.0
        + r2 * (336.0 - r1 * 952.0 + r12 * 980.0 - r13 * 440.0 + r14 * 80.0 - r15 * 4.0)
        + r22 * (-532.0 + r1 * 1400.0 - r12 * 1300.0 + r13 * 500.0 - r14 * 70.0 + r15 * 2.0)
        + r23 * (420.0 - r1 * 1000.0 + r12 * 800.0 - r13 * 240.0 + r14 * 20.0)
        + r24 * (-170.0 + r1 * 350.0 - r12 * 220.0 + r13 * 40.0)
        + r25 * (32.0 - r1 * 52.0 + r12 * 20.0)
        + r26 * (-2.0 + r1 * 2.0)
    )
    ca4r12 = (
        r2 * (-84.0 + r1 * 252.0 - r12 * 280.0 + r13 * 140.0 - r14 * 30.0 + r15 * 2.0)
        + r22 * (252.0 - r1 * 700.0 + r12 * 700.0 - r13 * 300.0 + r14 * 50.0 - r15 * 2.0)
        + r23 * (-280.0 + r1 * 700.0 - r12 * 600.0 + r13 * 200.0 - r14 * 20.0)
        + r24 * (140.0 - r1 * 300.0 + r12 * 200.0 - r13 * 40.0)
        + r25 * (-30.0 + r1 * 50.0 - r12 * 20.0)
        + r26 * (2.0 - r1 * 2.0)
    )

    return (
        -3.0 / (r2 * (r1 - r2) ** 7) * (
            (r1 - r2) ** 4 * (ca00 + ca0mu * Lmu + ca0r1 * (L1mr1 - 2.0 * Lr2m1) + ca0r12 * (L1mr12 + Lr2m12 - 2.0 * Lr2 * Lr2m1 + L1mr1 * (Lr2 - 2.0 * Lr2m1) + dilogr1 - 3.0 * dilog1mr2))
            + 6.0 * (r1 - r2) ** 2 * (ca20 + ca2mu * Lmu + ca2r1 * (L1mr1 - 2.0 * Lr2m1) + ca2r12 * (L1mr12 + Lr2m12 - 2.0 * Lr2 * Lr2m1 + L1mr1 * (Lr2 - 2.0 * Lr2m1) + dilogr1 - 3.0 * dilog1mr2)) * a2pi
            + 15.0 * (ca40 + ca4mu * Lmu + ca4r1 * (L1mr1 - 2.0 * Lr2m1) + ca4r12 * (L1mr12 + Lr2m12 - 2.0 * Lr2 * Lr2m1 + L1mr1 * (Lr2 - 2.0 * Lr2m1) + dilogr1 - 3.0 * dilog1mr2)) * a4pi
        )
    )


def t1_tw3_p_theta_rhom1(r1: float, r2: float, lmu: float) -> float:
    logr2 = log(r2)
    l1 = log((1.0 - r1) / (r2 - r1))
    dl1 = PI2 / 6.0 + dilog(1.0 / r2) + logr2 * (logr2 - log(r2 - 1.0))
    dl2 = (
        (-dilog(r1 / r2) + dilog(r1) - 2.0 * dilog((r2 - 1.0) / (r1 - 1.0)))
        - logr2 * logr2 / 2.0 + logr2 * log(r2 - r1) - 2.0 * log((r2 - r1) / (1.0 - r1)) * log(r2 - 1.0)
    )

    return (
        (
            dl1 * (1.0 + r1 + r2) + dl2 * (4.0 * r1 - 1.0)
            + ((r1 + r2) * (r2 - 1.0) + (r1 * (2.0 - 3.0 * r2) + r2) * logr2) / (2.0 * r2)
            + l1 * (1.0 - 2.0 * r1 + lmu * (4.0 * r1 - 1.0))
        ) / (r2 - r1)
    )


def t1_tw3_p_delta_rhom1(r1: float, r2: float, lmu: float) -> float:
    l1mr1 = log(1.0 - r1)
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    dlr1 = dilog(r1)
    dl1mr2 = dilog(1.0 - r2)

    return (
        (
            6.0 - 2.0 * r1 - PI2 / 6.0 * (1.0 + 4.0 * r1)
            + lr2 * (l1mr1 * r1 - lr2m1 * 2.0 * r1)
            + lr2m1 * (lr2m1 * (1.0 + 2.0 * r1) - 4.0 + 2.0 * r1 * (r2 - 1.0) / r2 - l1mr1 * 2.0 * r1 + lmu * (1.0 + r1))
            + lmu * 3.0 / 2.0 * (r1 - 3.0)
            + l1mr1 * (-l1mr1 + 2.0 + r1 + r1 / r2 - (1.0 + r1) * lmu)
            - dlr1 + (1.0 - 2.0 * r1) * dl1mr2
        ) / (r2 - r1)
    )


def t1_tw3_sigma_theta_rhom1(r1: float, r2: float, lmu: float) -> float:
    l1mr1 = log(1.0 - r1)
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    lr2mr1 = log(r2 - r1)
    l1 = 2.0 * lr2m1 + lmu - lr2
    dl1 = (dilog(r1) - dilog(r1 / r2) - 2.0 * dilog((r2 - 1.0) / (r1 - 1.0)))
    dl2 = dilog(1.0 / r2) - l1 * l1

    return (
        3.0 * (
            - dl1 * 2.0 * (4.0 * r1 - 1.0) * (r1 - r2) * r2
            - dl2 * 2.0 * (r1 - r2) * r2 * (1.0 + r1 + r2)
            + l1 * (
                - l1 * (r1 - r2) * r2 * (5.0 + 4.0 * r2)
                + lr2mr1 * 2.0 * (4.0 * r1 - 1.0) * (r1 - r2) * r2
                - lr2m1 * 2.0 * (-5.0 + 5.0 * r1 - 3.0 * r2) * (r1 - r2) * r2
                - lmu * 2.0 * (-3.0 + 2.0 * r1 - 2.0 * r2) * (r1 - r2) * r2
                + r1 * (r2 - 1.0) * r2 - 5.0 * r2 * r2 + r1 * r1 * (2.0 + r2 - 2.0 * r2 * r2)
            )
            + lr2mr1 * (
                - 2.0 * (-1.0 + 2.0 * r1) * (r1 - r2) * r2
            )
            + lr2m1 * (
                lr2m1 * 4.0 * (r1 - r2) * (-2.0 + 3.0 * r1 - r2) * r2
                - l1mr1 * 4.0 * (4.0 * r1 - 1.0) * (r1 - r2) * r2
                + lmu * 2.0 * (-5.0 + 5.0 * r1 - 3.0 * r2) * (r1 - r2) * r2
                - 2.0 * r1 * (-1.0 + r2) * r2 + 2.0 * r2 * (2.0 + 3.0 * r2) + r1 * r1 * (-4.0 - 2.0 * r2 + 4.0 * r2 * r2)
            )
            + l1mr1 * (
                - lmu * 2.0 * (4.0 * r1 - 1.0) * (r1 - r2) * r2
                + 2.0 * (-1.0 + 2.0 * r1) * (r1 - r2) * r2
            )
            + lmu * (
                lmu * (-3.0 + 2.0 * r1 - 2.0 * r2) * (r1 - r2) * r2
                -r1 * (r2 - 1.0) * r2 + r2 * (2.0 + 3.0 * r2) + r1 * r1 * (-2.0 + r2 * (-1.0 + 2.0 * r2))
            )
            + (
                r2 * r2 * (PI2 - 3.0 + (3.0 + PI2) * r2)
                + r1 * (6.0 - (6.0 + PI2) * r2)
                - r1 * r1 * (3.0 + r2 * (PI2 - 9.0 + 6.0 * r2))
            ) / 3.0
        ) / ((r1 - r2) ** 3 * r2)
    )


def t1_tw3_sigma_delta_rhom1(r1: float, r2: float, lmu: float) -> float:
    l1mr1 = log(1.0 - r1)
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    l1 = 2.0 * lr2m1 + lmu - lr2
    l2 = l1mr1 - 2.0 * lr2m1
    dl1 = dilog(r1) + l1mr1 * (l1mr1 + lmu)
    dl2 = dilog(1.0 - r2) + lr2m1 * lr2m1

    return (
        (
            dl1 * 6.0 * (r1 * (3.0 - 4.0 * r2) + r2)
            + dl2 * (-30.0 * r2 + 6.0 * r1 * (-7.0 + 2.0 * r1 + 10.0 * r2))
            + l1 * l2 * (-12.0 * r2 + 6.0 * r1 * (-2.0 + r1 + 3.0 * r2))
            + lr2m1 * (
                lmu * (-18.0 * r2 + 6.0 * r1 * (-5.0 + r1 + 7.0 * r2))
                - 12.0 * (r2 + r1 * (2.0 - r1 - 3.0 * r2 + r2 * r2)) / r2
            )
            - l1mr1 * 6.0 * ((-2.0 + r1) * r1 - 2.0 * r2 + r1 * (5.0 + r1) * r2 + (2.0 - 5.0 * r1) * r2 * r2) / r2
            + lmu * (-3.0 * r1 * (-17.0 + r1 - 5.0 * r2) + 9.0 * r2)
            + r1 * (-72.0 + PI2 * (-5.0 + 4.0 * r1)) + r2 * (6.0 * (-1.0 + r1) * r1 + PI2 * (-7.0 + 8.0 * r1))
            - 6.0 * (1.0 + 3.0 * r2)
        ) / ((r1 - r2) * (r1 - r2) * (r1 - r2))
    )


def t1til_tw3_p_theta_rhom1(r1: float, r2: float, lmu: float) -> float:
    logr1 = log(abs(r1))
    logr2 = log(r2)
    log1mr1 = log(1.0 - r1)
    logr2m1 = log(r2 - 1.0)
    logr2mr1 = log(r2 - r1)
    dl1 = (-1.0 - 5.0 * PI2 / 3.0 + 2.0 * (dilog(1.0 / r2) + 2.0 * dilog(1.0 / r1) + 2.0 * dilog(r2) - 2.0 * dilog(r2 / r1) + 4.0 * dilog((r2 - 1.0) / (r1 - 1.0)))) * r1 * r2 + r1
    dl2 = ((3.0 + 4.0 * logr1 + 2.0 * logr2m1 - 4.0 * logr2mr1)* r1 - 2.0) * r2 - 2.0 * r1
    dl3 = 8.0 * (logr2mr1 - log1mr1) * r1 * r2
    dl4 = 2.0 * ((1.0 - 2.0 * lmu) * r1 - 1.0) * r2
    dl5 = 2.0 * ((-1.0 + 2.0 * lmu) * r1 + 1.0) * r2
    return (dl1 + dl2 * logr2 + dl3 * logr2m1 + dl4 * log1mr1 + dl5 * logr2mr1) / r1


def t1til_tw3_p_delta_rhom1(r1: float, r2: float, lmu: float) -> float:
    r12 = r1 * r1
    logr2 = log(r2)
    logr2m1 = log(r2 - 1.0)
    log1mr1 = log(1.0 - r1)
    l1 = log((r2 - 1.0)/(1.0 - r1))
    dl1 = (3.0 + 4.0 * PI2 / 3.0 - 2.0 * lmu + 4.0 * dilog(1.0 - r2)) * r12 * r2 + r1 * r2
    dl2 = (-2.0 * r12 + (1.0 - 2.0 * r1 + r12) * r2)
    dl3 = (4.0 - (6.0 + 4.0 * l1) * r2) * r12
    dl4 = 2.0 * r12 * r2 * (logr2m1 + l1)
    dl5 = 2.0 * r12 * r2 * (1 - lmu)
    return (dl1 + dl2 * log1mr1 + dl3 * logr2m1 + dl4 * logr2 + dl5 * l1) / r12


def t1til_tw3_sigma_theta_rhom1(r1: float, r2: float, lmu: float) -> float:
    r12 = r1 * r1
    r22 = r2 * r2
    lr1 = log(abs(r1))
    l1mr1 = log(1.0 - r1)
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    lr2mr1 = log(r2 - r1)
    dil = -2.0 * (2.0 * dilog(1/r1) + 4.0 * dilog((r2 - 1.0)/(r1 - 1.0)) + dilog(1/r2) + 2.0 * dilog(r2) - 2.0 * dilog(r2 / r1) + 4.0 * log((r1 - r2)/(r1 - 1)) * log(r2 - 1.0)) * (r2 - r1) * r2
    dl1 = -(r2 - 1.0) * (2.0 - r2 + r1 * (-1.0 + 2.0 * r2))
    dl2 = ((r12 * (r2 - 2.0) - r1 * (r2 - 2.0) * r2 + 2.0 * r22) / r1 + 2.0 * (r2 - r1) * r2 * (2.0 * (lr2mr1 - lr1) - lr2m1)) * lr2
    dl3 = -2.0 * (r1 - 1.0) * r2 * (r2 - r1) * l1mr1 / r1
    dl4 = 2.0 * (r1 - 1.0) * r2 * (r2 - r1) * lr2mr1 / r1
    dl5 = 4.0 * (l1mr1 - lr2mr1) * (r2 - r1) * r2
    dl6 = 5.0 * (r2 - r1) * r2 / 3.0

    return 3.0 * (dl1 + dl2 + dl3 + dl4 + dl5 * lmu + PI2 * dl6 + dil)


def t1til_tw3_sigma_delta_rhom1(r1: float, r2: float, lmu: float) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r22 = r2 * r2
    l1mr1 = log(1.0 - r1)
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    dl1 = (- 17.0 * r1 - r12 + (1.0 - r1 + 2.0 * r12) * r2) / r1
    dl2 = 2.0 * (2.0 * r1 + r2 - 3.0) / 3.0
    dl3 = -4.0 * (-2.0 + r1 + r2) * (-1.0 + r2 * (2.0 * lr2m1 - lr2)) * lr2m1
    dl4 = (
        (4.0 * r12 - 2.0 * r13 + (-r13 - 4.0 * r12 + r1) * r2 + (3.0 * r12 - 2.0 * r1 + 1.0) * r22 
        + 2.0 * r12 * r2 * (-2.0 + r1 + r2) * (2.0 * lr2m1 - lr2)) * l1mr1 / r12
    )
    dl5 = -4.0 * (r2 - 1.0) * l1mr1 * l1mr1 + 4.0 * (r1 + 2.0 * r2 - 3.0) * lr2m1 * lr2m1
    dl6 = 2.0 * (5.0 + r2 - (l1mr1 - lr2m1) * (r2 - r1))
    dl7 = 4.0 * (-3.0 + r1 + 2.0 * r2) * dilog(1.0 - r2) - 4.0 * (r2 - 1.0) * dilog(r1)

    return 3.0 * ((dl1 + PI2 * dl2 + dl5 + dl6 * lmu + dl7) * r2 + dl3 + dl4)


def t1t_tw2_delta(r1: float, r2: float, mc2: float, mu: float, a2pi: float, a4pi: float) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r14 = r12 * r12
    r15 = r13 * r12
    r16 = r13 * r13
    r22 = r2 * r2
    r23 = r22 * r2
    r24 = r22 * r22
    r25 = r23 * r22
    r26 = r23 * r23
    L1mr1 = log(1.0 - r1)
    Lr2 = log(r2)
    Lr2m1 = log(r2 - 1.0)
    Lmu = log(mc2 / (mu * mu))
    L1mr1_ser = - 1. - r1 / 2. - r12 / 3. - r13 / 4.
    dilogr1 = dilog(r1)
    dilog1mr2 = dilog(1.0 - r2)

    ca00 = r2 * (-14.0 + 6.0 * r1 + (6.0 + 2.0 * r1) * r2 + PI2 * (-1.0 + r1 + (1.0 - r1) * r2))
    ca0mu = r2 * (11.0 - 5.0 * r1 + (-5.0 - r1) * r2)
    ca01mr1 = 2.0 * (r1 - r12 + (1.0 - 4.0 * r1 + 3.0 * r12) * r2 + (-1.0 + 3.0 * r1 - 2.0 * r12) * r22)
    ca0r2m1 = 4.0 * (-1.0 + r1 + (2.0 - 2.0 * r1) * r2 + (-1.0 + 1.0 * r1) * r22)
    ca0log2 = 2.0 * r2 * (1.0 - r1 + (-1.0 + r1) * r2)
    ca0dlr1 = 2.0 * r2 * (1.0 - r1 + (-1.0 + r1) * r2)
    ca0dl1mr2 = 2.0 * r2 * (-3.0 + 3.0 * r1 + (3.0 - 3.0 * r1) * r2)

    ca20 = (
        r2 * (10.0 * (PI2 + 30.0) - 20.0 * (PI2 + 22.0) * r1 + 12.0 * (PI2 + 14.0) * r12 - 2.0 * (PI2 + 6.0) * r13)
        + r22 * (-20.0 * (PI2 + 22.0) + 36.0 * (PI2 + 14.0) * r1 - 18.0 * (PI2 + 6.0) * r12 + 2.0 * (PI2 - 2.0) * r13)
        + r23 * (12.0 * (PI2 + 14.0) - 18.0 * (PI2 + 6.0) * r1 + 6.0 * (PI2 - 2.0) * r12)
        + r24 * (-2.0 * (PI2 + 6.0) + 2.0 * (PI2 - 2.0) * r1)
    )
    ca2mu = (
        r2 * (-230.0 + 340.0 * r1 - 132.0 * r12 + 10.0 * r13)
        + r22 * (340.0 - 396.0 * r1 + 90.0 * r12 + 2.0 * r13)
        + r23 * (-132.0 + 90.0 * r1 + 6.0 * r12)
        + r24 * (10.0 + 2.0 * r1)
    )
    ca2l2 = (
        r2 * (-10.0 + 20.0 * r1 - 12.0 * r12 + 2.0 * r13)
        + r22 * (20.0 - 36.0 * r1 + 18.0 * r12 - 2.0 * r13)
        + r23 * (-12.0 + 18.0 * r1 - 6.0 * r12)
        + r24 * (2.0 - 2.0 * r1)
    )
    ca2r2m1 = (
        40.0 - 80.0 * r1 + 48.0 * r12 - 8.0 * r13
        + r2 * (-120.0 + 224.0 * r1 - 120.0 * r12 + 16.0 * r13)
        + r22 * (128.0 - 216.0 * r1 + 96.0 * r12 - 8.0 * r13)
        + r23 * (-56.0 + 80.0 * r1 - 24.0 * r12)
        + r24 * (8.0 - 8.0 * r1)
    )
    ca21mr1 = (
        -20.0 * r1 + 40.0 * r12 - 24.0 * r13 + 4.0 * r14
        + r2 * (-20.0 + 120.0 * r1 - 176.0 * r12 + 88.0 * r13 - 12.0 * r14)
        + r22 * (40.0 - 176.0 * r1 + 216.0 * r12 - 88.0 * r13 + 8.0 * r14)
        + r23 * (-24.0 + 88.0 * r1 - 88.0 * r12 + 24.0 * r13)
        + r24 * (4.0 - 12.0 * r1 + 8.0 * r12)
    )

    ca40 = (
        r2 * (42.0 * (46.0 + PI2) - 126.0 * (38.0 + PI2) * r1 + 140.0 * (30.0 + PI2) * r12 - 70.0 * (22.0 + PI2) * r13 + 15.0 * (14.0 + PI2) * r14 - (6.0 + PI2) * r15)
        + r22 * (-126.0 * (38.0 + PI2) + 350.0 * (30.0 + PI2) * r1 - 350.0 * (22.0 + PI2) * r12 + 150.0 * (14.0 + PI2) * r13 - 25.0 * (6.0 + PI2) * r14 + (-2.0 + PI2) * r15)
        + r23 * (140.0 * (30.0 + PI2) - 350.0 * (22.0 + PI2) * r1 + 300.0 * (14.0 + PI2) * r12 - 100.0 * (6.0 + PI2) * r13 + 10.0 * (-2.0 + PI2) * r14)
        + r24 * (-70.0 * (22.0 + PI2) + 150.0 * (14.0 + PI2) * r1 - 100.0 * (6.0 + PI2) * r12 + 20.0 * (-2.0 + PI2) * r13)
        + r25 * (15.0 * (14.0 + PI2) - 25.0 * (6.0 + PI2) * r1 + 10.0 * (-2.0 + PI2) * r12)
        + r26 * (-6.0 - PI2 + (-2.0 + PI2) * r1)
    )
    ca4mu = (
        r2 * (-1470.0 + 3654.0 * r1 - 3220.0 * r12 + 1190.0 * r13 - 165.0 * r14 + 5.0 * r15)
        + r22 * (3654.0 - 8050.0 * r1 + 5950.0 * r12 - 1650.0 * r13 + 125.0 * r14 + r15)
        + r23 * (-3220.0 + 5950.0 * r1 - 3300.0 * r12 + 500.0 * r13 + 10.0 * r14)
        + r24 * (1190.0 - 1650.0 * r1 + 500.0 * r12 + 20.0 * r13)
        + r25 * (-165.0 + 125.0 * r1 + 10.0 * r12)
        + r26 * (5.0 + r1)
    )
    ca4l2 = (
        r2 * (-42.0 + 126.0 * r1 - 140.0 * r12 + 70.0 * r13 - 15.0 * r14 + r15)
        + r22 * (126.0 - 350.0 * r1 + 350.0 * r12 - 150.0 * r13 + 25.0 * r14 - r15)
        + r23 * (-140.0 + 350.0 * r1 - 300.0 * r12 + 100.0 * r13 - 10.0 * r14)
        + r24 * (70.0 - 150.0 * r1 + 100.0 * r12 - 20.0 * r13)
        + r25 * (-15.0 + 25.0 * r1 - 10.0 * r12)
        + r26 * (1.0 - r1)
    )
    ca4r2m1 = (
        168.0 - 504.0 * r1 + 560.0 * r12 - 280.0 * r13 + 60.0 * r14 - 4.0 * r15
        + r2 * (-672.0 + 1904.0 * r1 - 1960.0 * r12 + 880.0 * r13 - 160.0 * r14 + 8.0 * r15)
        + r22 * (1064.0 - 2800.0 * r1 + 2600.0 * r12 - 1000.0 * r13 + 140.0 * r14 - 4.0 * r15)
        + r23 * (-840.0 + 2000.0 * r1 - 1600.0 * r12 + 480.0 * r13 - 40.0 * r14)
        + r24 * (340.0 - 700.0 * r1 + 440.0 * r12 - 80.0 * r13)
        + r25 * (-64.0 + 104.0 * r1 - 40.0 * r12)
        + r26 * (4.0 - 4.0 * r1)
    )
    ca41mr1 = (
        -84.0 * r1 + 252.0 * r12 - 280.0 * r13 + 140.0 * r14 - 30.0 * r15 + 2.0 * r16
        + r2 * (-84.0 + 672.0 * r1 - 1484.0 * r12 + 1400.0 * r13 - 610.0 * r14 + 112.0 * r15 - 6.0 * r16)
        + r22 * (252.0 - 1484.0 * r1 + 2800.0 * r12 - 2300.0 * r13 + 850.0 * r14 - 122.0 * r15 + 4.0 * r16)
        + r23 * (-280.0 + 1400.0 * r1 - 2300.0 * r12 + 1600.0 * r13 - 460.0 * r14 + 40.0 * r15)
        + r24 * (140.0 - 610.0 * r1 + 850.0 * r12 - 460.0 * r13 + 80.0 * r14)
        + r25 * (-30.0 + 112.0 * r1 - 122.0 * r12 + 40.0 * r13)
        + r26 * (2.0 - 6.0 * r1 + 4.0 * r12)
    )

    if abs(r1) < SERIES_THRESHOLD:
        return (
            -3.0 / (r2 * (r1 - r2) ** 7) * (
                (r1 - r2) ** 4 * (ca00 + ca0mu * Lmu + ca01mr1 * L1mr1_ser + ca0r2m1 * Lr2m1
                    + ca0log2 * (L1mr1_ser * (L1mr1_ser * r1 + Lr2 - 2.0 * Lr2m1) * r1 + Lr2m1 * (Lr2m1 - 2.0 * Lr2)) + ca0dlr1 * dilogr1 + ca0dl1mr2 * dilog1mr2)
                - 3.0 * (r1 - r2) ** 2 * (ca20 + ca2mu * Lmu + ca21mr1 * L1mr1_ser + ca2r2m1 * Lr2m1
                    + ca2l2 * (2.0 * (L1mr1_ser * r1 - Lr2m1) ** 2 - 4.0 * Lr2m1 * Lr2 + 2.0 * L1mr1_ser * Lr2 * r1 + 2.0 * dilogr1 - 6.0 * dilog1mr2)) * a2pi
                - 15.0 * (ca40 + ca4mu * Lmu + ca4r2m1 * Lr2m1 + ca41mr1 * L1mr1_ser
                    + ca4l2 * (2.0 * (L1mr1_ser * r1 - Lr2m1) ** 2 - 4.0 * Lr2m1 * Lr2 + 2.0 * L1mr1_ser * Lr2 * r1 + 2.0 * dilogr1 - 6.0 * dilog1mr2)) * a4pi
            )
        )

    return (
        -3.0 / (r2 * (r1 - r2) ** 7) * (
            (r1 - r2) ** 4 * (ca00 + ca0mu * Lmu + ca01mr1 * L1mr1 / r1 + ca0r2m1 * Lr2m1
                + ca0log2 * (L1mr1 * (L1mr1 + Lr2 - 2.0 * Lr2m1) + Lr2m1 * (Lr2m1 - 2.0 * Lr2)) + ca0dlr1 * dilogr1 + ca0dl1mr2 * dilog1mr2)
            - 3.0 * (r1 - r2) ** 2 * (ca20 + ca2mu * Lmu + ca21mr1 * L1mr1 / r1 + ca2r2m1 * Lr2m1
                + ca2l2 * (2.0 * (L1mr1 - Lr2m1) ** 2 - 4.0 * Lr2m1 * Lr2 + 2.0 * L1mr1 * Lr2 + 2.0 * dilogr1 - 6.0 * dilog1mr2)) * a2pi
            - 15.0 * (ca40 + ca4mu * Lmu + ca4r2m1 * Lr2m1 + ca41mr1 * L1mr1 / r1
                + ca4l2 * (2.0 * (L1mr1 - Lr2m1) ** 2 - 4.0 * Lr2m1 * Lr2 + 2.0 * L1mr1 * Lr2 + 2.0 * dilogr1 - 6.0 * dilog1mr2)) * a4pi
        )
    )


def t1t_tw3_p_theta_rhom1(r1: float, r2: float, lmu: float) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r14 = r13 * r1
    r22 = r2 * r2
    r23 = r22 * r2
    r24 = r23 * r2
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    l1mr1 = log(1.0 - r1)
    lr2mr1 = log(r2 - r1)
    l = log((r1 - r2)/(r1 - 1.0))
    dl_ser = (
        - 6.0 * dilog(1.0 - r2) + 3.0 * dilog(1.0 / r2) - PI2 + 3.0 * lr2 * (3.0 * lr2 / 2.0 - lr2m1)
        + 3.0 * r1 * (r2 + (2.0 * r2 - 1.0) * lr2 - 1.0) / r2
        + 3.0 * r12 * ((4.0 * r22 - 2.0) * lr2 + (r2 - 1.0) * (5.0 * r2 + 1.0)) / (4.0 * r22)
        + r13 * ((6.0 * r23 - 3.0) * lr2 + (r2 - 1.0) * (2.0 * r2 * (5.0 * r2 + 2.0) + 1.0)) / (3.0 * r23)
        + r14 * (12.0 * (2.0 * r24 - 1.0) * lr2 + (r2 - 1.0) * (r2 * (r2 * (47.0 * r2 + 23.0) + 11.0) + 3.0)) / (16.0 * r24)
    )

    if abs(r1) < SERIES_THRESHOLD:
        return 3.0 * PI2 / 2.0 - 2.0 * lr2 + 3.0 * lmu * (l1mr1 - lr2mr1) + l * (1.0 - 6.0 * lr2m1) + dl_ser

    lr1 = log(abs(r1))
    dl = - 3.0 * (dilog(1.0 / r1) + dilog(r2) - dilog(r2 / r1) + 2.0 * dilog((r2 - 1.0)/(r1 - 1.0)) + lr2 * (lr1 + lr2m1 - lr2mr1 - lr2 / 2.0))
    return 3.0 * PI2 / 2.0 - 2.0 * lr2 + 3.0 * lmu * (l1mr1 - lr2mr1) + l * (1.0 - 6.0 * lr2m1) + dl


def t1t_tw3_p_delta_rhom1(r1: float, r2: float, lmu: float) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    l1mr1 = log(1.0 - r1)
    l1mr1_ser = - 1.0 - r1 / 2.0 - r12 / 3.0 - r13 / 4.0
    l = log((r2 - 1.0)/(1.0 - r1))
    dl = - dilog(r1) - dilog(1.0 - r2)

    if abs(r1) < SERIES_THRESHOLD:
        return (
            (-5.0 * PI2 / 6.0 + (-1.0 + (4.0 + 1.0 / r2) * r1 - l1mr1_ser * r12) * l1mr1_ser + (-2.0 - 2.0 / r2 - 2.0 * l1mr1_ser * r1 + 3.0 * lr2m1) * lr2m1
            + (l1mr1_ser * r1 - 2.0 * lr2m1) * lr2 + 2.0 * l * lmu + dl)
        )
    return (
        (-5.0 * PI2 / 6.0 + (4.0 - 1.0 / r1 + 1.0 / r2 - l1mr1) * l1mr1 + (-2.0 - 2.0 / r2 - 2.0 * l1mr1 + 3.0 * lr2m1) * lr2m1
        + (l1mr1 - 2.0 * lr2m1) * lr2 + 2.0 * l * lmu + dl)
    )


def t1t_tw3_sigma_theta_rhom1(r1: float, r2: float, lmu: float) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r14 = r13 * r1
    r22 = r2 * r2
    r23 = r22 * r2
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    l1mr1 = log(1.0 - r1)
    lr2mr1 = log(r2 - r1)
    dl_ser = (
        - r22 * (6.0 * dilog(1.0 - r2) - 3.0 * dilog(1.0 / r2) + PI2)
        + r1 * r2 * (6.0 * dilog(1.0 - r2) - 3.0 * dilog(1.0 / r2) + 3.0 * r2 + 6.0 * r2 * lr2 + PI2 - 3.0)
        + r12 * 3.0 * (3.0 - 8.0 * r2 + 5.0 * r2 + 4.0 * (r2 - 2.0) * r2 * lr2) / 4.0
        + r13 * (5.0 / (4.0 * r2) + 6.0 - 69.0 * r2 / 4.0 + 10.0 * r22 + 3.0 * (2.0 * r2 - 3.0) * r2 * lr2) / 3.0
        + r14 * ((r2 - 1.0) * (r2 * (r2 * (141.0 * r2 - 91.0) - 31.0) - 7.0) + 24.0 * (3.0 * r2 - 4.0) * r23 * lr2) / (48.0 * r22)
    )

    if abs(r1) < SERIES_THRESHOLD:
        return (
            - 3.0 * (4.0 - 9.0 * r2 + 5.0 * r22
            - lr2 * r2 * (- 3.0 + 2.0 * r2 - r1 * (2 * r2 - 3.0)) - 2.0 * lr2m1 * r2 * (r2 - 1.0) - lmu * r2 * (r2 - 1.0)
            - r2 * (r1 - r2) * (6.0 * lr2 * (lr2mr1 - lr2m1 + lr2 / 2.0) + 12.0 * lr2m1 * (l1mr1 - lr2mr1)
            + 2.0 * lr2mr1 * (1.0 - 3.0 * lmu) + 2.0 * l1mr1 * (-1.0 + 3.0 * lmu) + 3.0 * PI2) / 2.0
            + dl_ser)
        )

    lr1 = log(abs(r1))
    dl = r2 * (r1 - r2) * 3.0 * (dilog(1.0 / r1) + dilog(r2) - dilog(r2 / r1) + 2.0 * dilog((r2 - 1.0)/(r1 - 1.0)) + lr2 * lr1)
    return (
        - 3.0 * (4.0 - 9.0 * r2 + 5.0 * r22
        - lr2 * r2 * (- 3.0 + 2.0 * r2 - r1 * (2 * r2 - 3.0)) - 2.0 * lr2m1 * r2 * (r2 - 1.0) - lmu * r2 * (r2 - 1.0)
        - r2 * (r1 - r2) * (6.0 * lr2 * (lr2mr1 - lr2m1 + lr2 / 2.0) + 12.0 * lr2m1 * (l1mr1 - lr2mr1)
        + 2.0 * lr2mr1 * (1.0 - 3.0 * lmu) + 2.0 * l1mr1 * (-1.0 + 3.0 * lmu) + 3.0 * PI2) / 2.0
        + dl)
    )


def t1t_tw3_sigma_delta_rhom1(r1: float, r2: float, lmu: float) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r22 = r2 * r2
    l1mr1 = log(1.0 - r1)
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    l = log((r2 - 1.0)/(1.0 - r1))

    l0 = r2 * (26.0 - 5.0 * r1 - 5.0 * r2 - (-12.0 + 11.0 * r1 + r2) * PI2 / 6.0)
    l1_ser = - (4.0 * r1 - 3.0 * r12 + (-6.0 * r1 + 2.0 * r12) * r2 + (1.0 + 2.0 * r1) * r22) * (-1.0 - r1 / 2.0 - r12 / 3.0 - r13 / 4.0)
    l2 = 2.0 * (4.0 - 3.0 * r1 + (-3.0 + r1) * r2 + r22) * lr2m1
    l3 = r2 * (-14.0 + r1 + r2) * lmu
    dl1 = (
        r2 * ((-4.0 + r1 + 3.0 * r2) * l1mr1 * l1mr1 + (-4.0 + 5.0 * r1 - r2) * lr2m1 * lr2m1 + (-4.0 + 3.0 * r1 + r2) * l1mr1 * lr2
        - 2.0 * (-4.0 + 3.0 * r1 + r2) * (l1mr1 + lr2) * lr2m1 + 2.0 * (r1 - r2) * l * lmu)
    )
    dl2 = r2 * ((-4.0 + r1 + 3.0 * r2) * dilog(r1) + (12.0 - 7.0 * r1 - 5.0 * r2) * dilog(1.0 - r2))

    if abs(r1) < SERIES_THRESHOLD:
        return 3.0 * (l0 + l1_ser + l2 + l3 + dl1 + dl2)

    l1 = - (4.0 * r1 - 3.0 * r12 + (-6.0 * r1 + 2.0 * r12) * r2 + (1.0 + 2.0 * r1) * r22) * l1mr1 / r1
    return 3.0 * (l0 + l1 + l2 + l3 + dl1 + dl2)
