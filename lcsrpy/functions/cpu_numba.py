"""
Compiled kernels of the D -> pi light-cone sum rules.

The functions in this module are pure floating point expressions without
dilogarithms, so that numba can compile them in nopython mode. They are
evaluated inside the integrands of `lcsrpy.form_factors.analytic_d_to_pi`
many thousand times per form factor.

Naming: ``iN*`` are the auxiliary functions of the twist-N three-particle
contributions at leading order (``_d1`` denotes the first derivative w.r.t. u),
``t1*`` are the imaginary parts of the hard-scattering kernels at next-to-leading
order integrated over rho. ``theta_1mrho`` and ``theta_rhom1`` denote the pieces
proportional to theta(1 - rho) and theta(rho - 1).
"""

from math import atanh, log

from numba import jit



# Leading order, twist 3


@jit(nopython=True, cache=True)
def i3(u: float, omega3pi: float) -> float:
    u3 = u * u * u
    ubar2 = (1.0 - u) * (1.0 - u)

    return 5.0 / 2.0 * u3 * ubar2 * (12.0 + (7.0 * u - 4) * omega3pi)


@jit(nopython=True, cache=True)
def i3_d1(u: float, omega3pi: float) -> float:
    u2 = u * u
    ubar = 1.0 - u

    return 15.0 * u2 * ubar * (6.0 - 10.0 * u - (2.0 - 8.0 * u + 7.0 * u2) * omega3pi)


@jit(nopython=True, cache=True)
def i3bar(u: float, omega3pi: float) -> float:
    u3 = u * u * u
    ubar2 = (1.0 - u) * (1.0 - u)

    return 5.0 / 2.0 * u3 * ubar2 * (24.0 * u + 6.0 * u * omega3pi - 3.0 * (omega3pi + 4.0))


@jit(nopython=True, cache=True)
def i3bar_d1(u: float, omega3pi: float) -> float:
    u2 = u * u
    u3 = u2 * u

    return 15.0 / 2.0 * u2 * (12.0 * u3 - 25.0 * u2 + 16.0 * u - 3.0) * (omega3pi + 4.0)


@jit(nopython=True, cache=True)
def i3til(u: float, omega3pi: float) -> float:
    u2 = u * u
    ubar2 = (1.0 - u) * (1.0 - u)

    return 5.0 / 2.0 * u2 * ubar2 * (28.0 * u2 * omega3pi - 2.0 * u * (17.0 * omega3pi + 12.0) + 9.0 * (omega3pi + 4.0))


@jit(nopython=True, cache=True)
def i3til_d1(u: float, omega3pi: float) -> float:
    u2 = u * u
    u3 = u2 * u

    return 15.0 * u * (u - 1.0) * (28.0 * u3 * omega3pi - u2 * (47.0 * omega3pi + 20.0) + u * (23.0 * omega3pi + 36.0) - 3.0 * (omega3pi + 4.0))


# Leading order, twist 4


@jit(nopython=True, cache=True)
def i4(u: float, mpi2: float, a2pi: float, deltapipi: float) -> float:
    u2 = u * u
    u3 = u2 * u
    ubar = 1.0 - u

    return (
        -1.0 / 24.0 * u * ubar * (
            mpi2 * (54.0 * u3 - 81.0 * u2 + 27.0 * ubar + 27.0 * a2pi * (16.0 * u3 - 29.0 * u2 + 13.0 * u - 1.0))
            + 16.0 * u * (20.0 * u - 30.0) * deltapipi
        )
    )


@jit(nopython=True, cache=True)
def i4_d1(u: float, mpi2: float, a2pi: float, deltapipi: float) -> float:
    u2 = u * u
    u3 = u2 * u
    u4 = u2 * u2

    return (
        1.0 / 24 * (
            27.0 * mpi2 * (
                (10.0 * u4 - 20.0 * u3 + 6.0 * u2 + 4.0 * u - 1.0)
                + a2pi * (80.0 * u4 - 180.0 * u3 + 126.0 * u2 - 28.0 * u + 1)
            )
            + 160.0 * u * (6.0 - 15.0 * u + 8.0 * u2) * deltapipi
        )
    )


@jit(nopython=True, cache=True)
def i4bar(
    u: float, mpi2: float, a2pi: float, deltapipi: float, omega4pi: float
) -> float:
    u2 = u * u
    u3 = u2 * u
    ubar = 1.0 - u

    return (
        1.0 / 48.0 * u * ubar * (
            mpi2 * (
                -(54.0 * u3 - 81.0 * u2 - 27.0 * u + 27.0)
                + 27.0 * a2pi * (32.0 * u3 - 43.0 * u2 + 11.0 * u + 1.0)
            )
            - 20.0 * u * (
                (12.0 - 20.0 * u)
                + (378.0 * u2 - 567.0 * u + 189.0) * omega4pi
            ) * deltapipi
        )
    )


@jit(nopython=True, cache=True)
def i4bar_i(
    u: float, mpi2: float, a2pi: float, deltapipi: float, omega4pi: float
) -> float:
    """Integral of `i4bar` from 0 to u."""
    u2 = u * u
    ubar = 1.0 - u
    ubar2 = ubar * ubar

    return (
        1.0 / 96.0 * u2 * ubar2 * (
            mpi2 * (
                9.0 * (3.0 + 2.0 * ubar * u)
                + 9.0 * a2pi * (32.0 * u2 - 26.0 * u - 3.0)
            )
            + 40.0 * u * (4.0 + 63.0 * ubar * omega4pi) * deltapipi
        )
    )


@jit(nopython=True, cache=True)
def i4bar_d1(
    u: float, mpi2: float, a2pi: float, deltapipi: float, omega4pi: float
) -> float:
    u2 = u * u
    u3 = u2 * u
    u4 = u2 * u2

    return (
        1.0 / 48.0 * (
            27.0 * mpi2 * (
                (10.0 * u4 - 20.0 * u3 + 6.0 * u2 + 4.0 * u - 1.0)
                - a2pi * (160.0 * u4 - 300.0 * u3 + 162.0 * u2 - 20.0 * u - 1.0)
            )
            + 40.0 * u * (
                (-40.0 * u2 + 48.0 * u - 12.0)
                + 189.0 * (5.0 * u3 - 10.0 * u2 + 6.0 * u - 1.0) * omega4pi
            ) * deltapipi
        )
    )


@jit(nopython=True, cache=True)
def i4t(u: float, mpi2: float, a2pi: float, deltapipi: float, omega4pi: float) -> float:
    u2 = u * u
    u3 = u2 * u
    u4 = u2 * u2
    u5 = u4 * u
    ubar = 1.0 - u
    ubar2 = ubar * ubar

    return (
        1.0 / 40.0 * (
            mpi2 * (
                + (90.0 * u5 - 225.0 * u4 + 90.0 * u3 + 90.0 * u2 - 45.0 * u)
                + 9.0 * a2pi * (70.0 * u5 - 227.0 * u4 + 254.0 * u3 - 94.0 * u2 - 3.0 * u + 16.0 * (6.0 * u2 - 15.0 * u + 10.0) * u3 * atanh(1 - 2.0 * u) - 8.0 * log(ubar))
            )
            + 10.0 * (
                40.0 * u2 * ubar2
                - 21.0 * (-40.0 * u5 + 87.0 * u4 - 54.0 * u3 + 9.0 * u2 - 2.0 * u + 4.0 * (6.0 * u2 - 15.0 * u + 10.0) * u3 * atanh(1 - 2.0 * u) - 2.0 * log(ubar)) * omega4pi
            ) * deltapipi
        )
    )


@jit(nopython=True, cache=True)
def i4t_d1(
    u: float, mpi2: float, a2pi: float, deltapipi: float, omega4pi: float
) -> float:
    u2 = u * u
    u3 = u2 * u
    u4 = u3 * u
    ubar = 1.0 - u
    ubar2 = ubar * ubar

    return (
        1.0 / 8.0 * (
            mpi2 * (
                + (90.0 * u4 - 180.0 * u3 + 54.0 * u2 + 36.0 * u - 9.0)
                + 9.0 * a2pi * (70.0 * u4 - 172.0 * u3 + 138.0 * u2 - 36.0 * u + 1.0 + 96.0 * ubar2 * u2 * atanh(1 - 2.0 * u))
            )
            + 40.0 * u * (
                4.0 * (1.0 - 3.0 * u + 2.0 * u2)
                + 21.0 * ubar * (-1.0 + 8.0 * u - 10.0 * u2 - 6.0 * ubar * u * atanh(1 - 2.0 * u)) * omega4pi
            ) * deltapipi
        )
    )


# Next-to-leading order, twist 2


@jit(nopython=True, cache=True)
def t1_tw2_theta_1mrho(
    r1: float, r2: float, mc2: float, mu: float, a2pi: float, a4pi: float
) -> float:
    """
    Hard-scattering kernel of f+ at twist 2, theta(1 - rho) piece.

    Parameters
    ----------
    r1 : float
        Momentum transfer in units of the charm mass, q2 / mc2.
    r2 : float
        Dispersion variable in units of the charm mass, s / mc2.
    mc2 : float
        Squared MSbar charm mass at the scale mu.
    mu : float
        Renormalisation scale.
    a2pi, a4pi : float
        Gegenbauer moments of the twist-2 pion LCDA at the scale mu.

    Returns
    -------
    float
        The kernel integrated over rho.

    """
    r12 = r1 * r1
    r13 = r12 * r1
    r14 = r12 * r12
    r15 = r14 * r1
    r22 = r2 * r2
    r23 = r22 * r2
    r24 = r22 * r22
    r25 = r24 * r2
    L = log((r2 - 1.0) ** 2 * mc2 / (mu * mu * r2))

    ca0 = (r1 - r2) ** 4 * (-3.0 + r1 + r2 * 2.0)
    ca2 = (
        (r1 - r2) ** 2 * (
               (-125.0 + r1 * 155.0 - r12 * 43.0 + r13)
        + r2 * (220.0 - r1 * 224.0 + r12 * 40.0)
        + r22 * (-108.0 + 72.0 * r1)
        + r23 * 12.0)
    )
    ca4 = (
        (-3087.0 + r1 * 6804.0 - r12 * 5096.0 + r13 * 1484.0 - r14 * 136.0 + r15)
        + r2 * (8631.0 - 17024.0 * r1 + 10836.0 * r12 - 2424.0 * r13 + 131.0 * r14)
        + r22 * (-8750.0 + 14700.0 * r1 - 7200.0 * r12 + 950.0 * r13)
        + r23 * (3850.0 - r1 * 5000.0 + r12 * 1450.0)
        + r24 * (-675.0 + r1 * 525.0)
        + r25 * 30.0
    )

    cb0 = (r1 - r2) ** 4
    cb2 = (r1 - r2) ** 2 * (15.0 - r1 * 10.0 + r12 + r2 * (-20.0 + r1 * 8.0) + r22 * 6.0)
    cb4 = (
        (210.0 - r1 * 336.0 + r12 * 168.0 - r13 * 28.0 + r14)
        + r2 * (-504.0 + r1 * 672.0 - r12 * 252.0 + r13 * 24.0)
        + r22 * (420.0 - r1 * 420.0 + r12 * 90.0)
        + r23 * (-140.0 + r1 * 80.0)
        + r24 * 15.0
    )

    return (
        (
            (r1 - r2) * (L - 1.0 / r2) * (ca0 + ca2 * a2pi + ca4 * a4pi)
            + (r1 - 1.0) * (1.0 / r2 - 1.0) * (r2 - r1) * (cb0 + cb2 * a2pi + cb4 * a4pi)
            + (1.0 - r1) * (r1 - 1.0) * (L - 1.0) * (cb0 + cb2 * a2pi + cb4 * a4pi)
        ) * (r1 - 1.0) * 3.0 / (r1 - r2) ** 8
    )


@jit(nopython=True, cache=True)
def t1_tw2_theta_rhom1(
    r1: float, r2: float, mc2: float, mu: float, a2pi: float, a4pi: float
) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r14 = r12 * r12
    r15 = r14 * r1
    r16 = r13 * r13
    r22 = r2 * r2
    r23 = r22 * r2
    r24 = r22 * r22
    r25 = r24 * r2
    r26 = r23 * r23
    r27 = r24 * r23
    r28 = r24 * r24
    Lr2 = log(r2)
    Lr2m1 = log(r2 - 1.0)
    Lmu = log(mc2 / (mu * mu))

    ca00 = (
        (-r1 * 4. + r12 * 4.)
        + r2 * (3. + r1 * 12. - r12 * 12.)
        + r22 * (-13. - r1 * 4. + r12 * 8.)
        + r23 * (13. - r1 * 4.)
        - r24 * 3.
    )
    ca0mu = (
        r2 * (1. - r1 * 3. + r12 * 2.)
        + r22 * (r1 * 2. - r12 * 2.)
        + r23 * (-1. + r1)
    )
    ca0r2 = (
        r2 * (-1. + r12)
        + r22 * (3. - r1 * 4. + r12)
    )
    ca0r2m1 = 2.0 * ca0mu

    ca20 = (
        (r1 * 1680. - r12 * 3120 + r13 * 1728 - r14 * 288.)
        + r2 * (-1500. - r1 * 8675. + r12 * 17308. - r13 * 8208. + r14 * 864.)
        + r22 * (10895. + r1 * 2160. - r12 * 21084. + r13 * 10080. - r14 * 576.)
        + r23 * (-19396. + r1 * 15264. + r12 * 5412. - r13 * 3600.)
        + r24 * (12516. - r1 * 12880. + r12 * 1484.)
        + r25 * (-2576. + r1 * 2451.)
        + r26 * 61.
    )
    ca2mu = (
        r2 * (-180. + r1 * 1740. - r12 * 2712. + r13 * 1296. - r14 * 144.)
        + r22 * (-840. - r1 * 1536. + r12 * 4248. - r13 * 2016. + r14 * 144.)
        + r23 * (2448. - r1 * 1944. - r12 * 1224. + r13 * 720.)
        + r24 * (-1800. + r1 * 2112. - r12 * 312.)
        + r25 * (372. - r1 * 372.)
    )
    ca2r2 = (
        r2 * (180. + r1 * 840. - r12 * 1728. + r13 * 720. - r14 * 72.)
        + r22 * (-1740. + r1 * 1536. + r12 * 144. + r13 * 432. - r14 * 72.)
        + r23 * (1992. - r1 * 2448. + r12 * 1512. - r13 * 576.)
        + r24 * (-216. - r1 * 672. + r12 * 168.)
        + r25 * (-300. + r1 * 300.)
    )
    ca2r2m1 = 2.0 * ca2mu

    ca40 = (
        r1 * 98910. - r12 * 281610. + r13 * 294000. - r14 * 136500. + r15 * 27000. - r16 * 1800.
        + r2 * (-92610. - r1 * 628467. + r12 * 2091411. - r13 * 2110325. + r14 * 869950. - r15 * 136800. + r16 * 5400.)
        + r22 * (865977. - r1 * 51660. - r12 * 3323460. + r13 * 3765400. - r14 * 1417650. + r15 * 181800. - r16 * 3600.)
        + r23 * (-2201451. + r1 * 2911860. + r12 * 894420. - r13 * 2358600. + r14 * 840450. - r15 * 72000.)
        + r24 * (2437925. - r1 * 4042510. + r12 * 1372230. + r13 * 345800. - r14 * 156250.)
        + r25 * (-1293760. + r1 * 2102595. - r12 * 890655. + r13 * 63725.)
        + r26 * (307725. - r1 * 414708. + r12 * 137664.)
        + r27 * (-23987. + r1 * 23980)
        + r28 * 181.
    )
    ca4mu = (
        r2 * (-6300. + r1 * 107730. - r12 * 271530. + r13 * 266700. - r14 * 115950. + r15 * 20250. - r16 * 900.)
        + r22 * (-63630. - r1 * 103320. + r12 * 557550. - r13 * 603000. + r14 * 246600. - r15 * 35100. + r16 * 900.)
        + r23 * (242550. - r1 * 299250. - r12 * 210600. + r13 * 411300. - r14 * 158850. + r15 * 14850.)
        + r24 * (-304500. + r1 * 539400. - r12 * 200700. - r13 * 62400. + r14 * 28200.)
        + r25 * (169650. - r1 * 304200. + r12 * 147150. - r13 * 12600.)
        + r26 * (-40950. + r1 * 62820. - r12 * 21870.)
        + r27 * (3180. - r1 * 3180.)
    )
    ca4r2 = (
        r2 * (6300. + r1 * 63630. - r12 * 204750. + r13 * 210000. - r14 * 87750. + r15 * 12600. - r16 * 450.)
        + r22 * (-107730. + r1 * 103320. + r12 * 166950. - r13 * 237000. + r14 * 74250. + r15 * 3600. - r16 * 450.)
        + r23 * (233730. - r1 * 425250. + r12 * 210600. - r13 * 45000. + r14 * 65700 - r15 * 10800.)
        + r24 * (-172200. + r1 * 300600. - r12 * 165600. + r13 * 71400. - r14 * 23700.)
        + r25 * (34050. - r1 * 16650. - r12 * 54900. + r13 * 8100.)
        + r26 * (8100. - r1 * 38520. + r12 * 17820.)
        + r27 * (-2730. + r1 * 2730.)
    )
    ca4r2m1 = 2.0 * ca4mu

    return (
        -3.0 / (r2 * (r1 - r2) ** 4) * (ca00 + ca0mu * Lmu + ca0r2 * Lr2 + ca0r2m1 * Lr2m1)
        + 1.0 / (4.0 * r2 * (r1 - r2) ** 6) * (ca20 + ca2mu * Lmu + ca2r2 * Lr2 + ca2r2m1 * Lr2m1) * a2pi
        + 1.0 / (10.0 * r2 * (r1 - r2) ** 8) * (ca40 + ca4mu * Lmu + ca4r2 * Lr2 + ca4r2m1 * Lr2m1) * a4pi
    )


@jit(nopython=True, cache=True)
def t1til_tw2_theta_1mrho(r1: float, r2: float, a2pi: float, a4pi: float) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r14 = r12 * r12
    r15 = r14 * r1
    r16 = r13 * r13
    r22 = r2 * r2
    r23 = r22 * r2
    r24 = r22 * r22
    r25 = r24 * r2

    ca0 = (
        -r1 + 2.0 * r12 - r13 
        + r2 * (1.0 - r1 - r12 + r13)
        + r22 * (-1.0 + 2.0 * r1 - r12)
    )
    ca2 = (
        -15.0 + 40.0 * r1 - 36.0 * r12 + 12.0 * r13 - r14
        + r2 * (35.0 - 88.0 * r1 + 72.0 * r12 - 20.0 * r13 + r14)
        + r22 * (-26.0 + 60.0 * r1 - 42.0 * r12 + 8.0 * r13)
        + r23 * (6.0 - 12.0 * r1 + 6.0 * r12)
    )
    ca4 = (
        -210.0 + 756.0 * r1 - 1050.0 * r12 + 700.0 * r13 - 225.0 * r14 + 30.0 * r15 - r16
        + r2 * (714.0 - 2436.0 * r1 + 3150.0 * r12 - 1900.0 * r13 + 525.0 * r14 - 54.0 * r15 + r16)
        + r22 * (-924.0 + 2940.0 * r1 - 3450.0 * r12 + 1800.0 * r13 - 390.0 * r14 + 24.0 * r15)
        + r23 * (560.0 - 1620.0 * r1 + 1650.0 * r12 - 680.0 * r13 + 90.0 * r14)
        + r24 * (-155.0 + 390.0 * r1 - 315.0 * r12 + 80.0 * r13)
        + r25 * (15.0 - 30.0 * r1 + 15.0 * r12)
    )

    return (
        -6.0 / (r2 * (r1 - r2) ** 7) * (
            (r1 - r2) ** 3 * ca0 + (r1 - r2) ** 2 * ca2 * a2pi + ca4 * a4pi
        )
    )


@jit(nopython=True, cache=True)
def t1til_tw2_theta_rhom1(r1: float, r2: float, a2pi: float, a4pi: float) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r14 = r12 * r12
    r15 = r14 * r1
    r22 = r2 * r2
    r23 = r22 * r2
    r24 = r22 * r22
    r25 = r24 * r2
    r26 = r23 * r23
    r27 = r24 * r23
    Lr2 = log(r2)

    ca00 = (
        1 - 2.0 * r1
        + r2 * (-1.0 + 4.0 * r1)
        + r22 * (-1.0 - 2.0 * r1)
        + r23
    )
    ca0r2 = -r2 * r1 + r22 * (1.0 + r1) - r23

    ca20 = (
        (15.0 - 40.0 * r1 + 36.0 * r12 - 12.0 * r13)
        + r2 * (-35.0 + 93.0 * r1 - 87.0 * r12 + 24.0 * r13)
        + r22 * (21.0 - 45.0 * r1 + 96.0 * r12 - 12.0 * r13)
        + r23 * (-6.0 - 29.0 * r1 - 45.0 * r12)
        + r24 * (-16.0 + 21.0 * r1)
        + r25 * (21.0)
    )
    ca2r2 = (
        r2 * (-6 * r13)
        + r22 * (6.0 * r13 + 18.0 * r12)
        + r23 * (12.0 * r1 + 12.0 * r12)
        + r24 * (-24.0 - 12.0 * r1)
        + r25 * (-6.0)
    )

    ca40 = (
        420.0 - 1512.0 * r1 + 2100.0 * r12 - 1400.0 * r13 + 450.0 * r14 - 60.0 * r15
        + r2 * (-1428.0 + 4935.0 * r1 - 6510.0 * r12 + 4080.0 * r13 - 1260.0 * r14 + 120.0 * r15)
        + r22 * (1785.0 - 5775.0 * r1 + 6900.0 * r12 - 3600.0 * r13 + 1590.0 * r14 - 60.0 * r15)
        + r23 * (-1015.0 + 2820.0 * r1 - 2040.0 * r12 + 2240.0 * r13 - 780.0 * r14)
        + r24 * (450.0 - 1200.0 * r1 - 1080.0 * r12 - 1320.0 * r13)
        + r25 * (-660.0 - 243.0 * r1 + 630.0 * r12)
        + r26 * (313.0 + 975.0 * r1)
        + r27 * (135.0)
    )
    ca4r2 = (
        r2 * (-15.0 * r15)
        + r22 * (75.0 * r14 + 15.0 * r15)
        + r23 * (690.0 * r13 + 135.0 * r14)
        + r24 * (150.0 * r12 + 150.0 * r13)
        + r25 * (-705.0 * r1 - 150.0 * r12)
        + r26 * (-195.0 - 135.0 * r1)
        + r27 * (-15.0)
    )

    return (
        -6.0 / (r2 * (r1 - r2) ** 7) * ((r1 - r2) ** 4 * (ca00 + ca0r2 * Lr2)
        + (r1 - r2) ** 2 * (ca20 + ca2r2 * Lr2) * a2pi
        + (ca40 / 2.0 + ca4r2 * Lr2) * a4pi
        )
    )


@jit(nopython=True, cache=True)
def t1til_tw2_delta(r1: float, r2: float, a2pi: float, a4pi: float) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r14 = r12 * r12
    r15 = r13 * r12
    r16 = r13 * r13
    r17 = r14 * r13
    r22 = r2 * r2
    r23 = r22 * r2
    r24 = r22 * r22
    r25 = r23 * r22
    r26 = r23 * r23
    L1mr1 = log(1.0 - r1)

    ca00 = r1 - r12 + r2 * (-1.0 + r12) + r22 * (1.0 - r1)
    ca0r1 = (
        r1 - 2.0 * r12 + r13
        + r2 * (-1.0 + r1 + r12 - r13)
        + r22 * (1.0 - 2 * r1 + r12)
    )

    ca20 = (
        5.0 * r1 - 10.0 * r12 + 6.0 * r13 - r14
        + r2 * (-5.0 + 12.0 * r12 - 8.0 * r13 + r14)
        + r22 * (10.0 - 12.0 * r1 + 2.0 * r13)
        + r23 * (-6.0 + 8.0 * r1 - 2.0 * r12)
        + r24 * (1.0 - r1)
    )
    ca2r1 = (
        5.0 * r1 - 15.0 * r12 + 16.0 * r13 - 7.0 * r14 + r15
        + r2 * (-5.0 + 5.0 * r1 + 12.0 * r12 - 20.0 * r13 + 9.0 * r14 - r15)
        + r22 * (10.0 - 22.0 * r1 + 12.0 * r12 + 2.0 * r13 - 2.0 * r14)
        + r23 * (-6.0 + 14.0 * r1 - 10.0 * r12 + 2.0 * r13)
        + r24 * (1.0 - 2.0 * r1 + r12)
    )

    ca40 = (
        42.0 * r1 - 126.0 * r12 + 140.0 * r13 - 70.0 * r14 + 15.0 * r15 - r16
        + r2 * (-42.0 + 210.0 * r12 - 280.0 * r13 + 135.0 * r14 - 24.0 * r15 + r16)
        + r22 * (126.0 - 210.0 * r1 + 150.0 * r13 - 75.0 * r14 + 9.0 * r15)
        + r23 * (-140.0 + 280.0 * r1 - 150.0 * r12 + 10.0 * r14)
        + r24 * (70.0 - 135.0 * r1 + 75.0 * r12 - 10.0 * r13)
        + r25 * (-15.0 + 24.0 * r1 - 9.0 * r12)
        + r26 * (1.0 - r1)
    )
    ca4r1 = (
        42.0 * r1 - 168.0 * r12 + 266.0 * r13 - 210.0 * r14 + 85.0 * r15 - 16.0 * r16 + r17
        + r2 * (-42.0 + 42.0 * r1 + 210.0 * r12 - 490.0 * r13 + 415.0 * r14 - 159.0 * r15 + 25.0 * r16 - r17)
        + r22 * (126.0 - 336.0 * r1 + 210.0 * r12 + 150.0 * r13 - 225.0 * r14 + 84.0 * r15 - 9.0 * r16)
        + r23 * (-140.0 + 420.0 * r1 - 430.0 * r12 + 150.0 * r13 + 10.0 * r14 - 10.0 * r15)
        + r24 * (70.0 - 205.0 * r1 + 210.0 * r12 - 85.0 * r13 + 10.0 * r14)
        + r25 * (-15.0 + 39.0 * r1 - 33.0 * r12 + 9.0 * r13)
        + r26 * (1.0 - 2.0 * r1 + r12)
    )

    return (
        -6.0 / (r1 * r1 * (r1 - r2) ** 7) * (
            (r1 - r2) ** 4 * (ca00 * r1 + ca0r1 * L1mr1)
            + 6.0 * (r1 - r2) ** 2 * (ca20 * r1 + ca2r1 * L1mr1) * a2pi
            + 15.0 * (ca40 * r1 + ca4r1 * L1mr1) * a4pi
        )
    )


@jit(nopython=True, cache=True)
def t1t_tw2_theta_1mrho(
    r1: float, r2: float, mc2: float, mu: float, a2pi: float, a4pi: float
) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r14 = r12 * r12
    r15 = r14 * r1
    r22 = r2 * r2
    r23 = r22 * r2
    r24 = r22 * r22
    r25 = r24 * r2
    L = log((r2 - 1.0) ** 2 * mc2 / (mu * mu * r2))

    ca0 = (r1 - r2) ** 4 * (-r1 * 2.0 + r2 * (1.0 + r1))
    ca2 = (
        (r1 - r2) ** 2 * (-2.0 * (r1 * 55.0 - r12 * 65.0 + 16.0 * r13)
        + r2 * (95.0 - r1 * 15.0 - r12 * 45.0 + r13)
        + r22 * 2.0 * (-35.0 + r1 * 13.0 + r12 * 4.0)
        + r23 * 6.0 * (1.0 + r1))
    )
    ca4 = (
        (-2877.0 * r1 + 6258.0 * r12 - r13 * 4592.0 + r14 * 1288.0 - r15 * 107.0)
        + r2 * (2667.0 - r1 * 462.0 - r12 * 5502.0 + r13 * 4228.0 - r14 * 782.0 + r15)
        + r22 * 6.0 * (-791.0 + r1 * 889.0 - r12 * 21.0 - r13 * 131.0 + r14 * 4.0)
        + r23 * 10.0 * (266.0 - r1 * 280.0 + r12 * 35.0 + r13 * 9.0)
        + r24 * 10.0 * (-49.0 + r1 * 26.0 + r12 * 8.0)
        + r25 * 15.0 * (1.0 + r1)
    )

    cb0 = (r1 - r2) ** 4 * (-1.0 - r1 + 2.0 * r2)
    cb2 = (
        (r1 - r2) ** 2 * (-15.0 - r1 * 85.0 + r12 * 119.0 - r13 * 31.0 
        + r2 * 2.0 * (65.0 - r1 * 34.0 - r12 * 13.0)
        + r22 * 12.0 * (-8.0 + r1 * 5.0)
        + r23 * 12.0)
    )
    cb4 = (
        (-210.0 - r1 * 2331.0 + r12 * 5754.0 - r13 * 4396.0 + r14 * 1259.0 - r15 * 106.0)
        + r2 * 3.0 * (1127.0 - r1 * 728.0 - r12 * 1358.0 + r13 * 1252.0 - r14 * 243.0)
        + r22 * 30.0 * (-189.0 + r1 * 245.0 - r12 * 52.0 - r13 * 14.0)
        + r23 * 20.0 * (161.0 - r1 * 193.0 + 47.0 * r12)
        + r24 * 15.0 * (-43.0 + 33.0 * r1)
        + r25 * 30.0
    )

    return (
        - (
         ca0 + ca2 * a2pi + ca4 * a4pi - L * r2 * (cb0 + cb2 * a2pi + cb4 * a4pi)
        ) * (r1 - 1.0) * (r2 - 1.0) * 3.0 / ((r1 - r2) ** 8 * r2)
    )


@jit(nopython=True, cache=True)
def t1t_tw2_theta_rhom1(
    r1: float, r2: float, mc2: float, mu: float, a2pi: float, a4pi: float
) -> float:
    r12 = r1 * r1
    r13 = r12 * r1
    r14 = r12 * r12
    r15 = r14 * r1
    r16 = r13 * r13
    r22 = r2 * r2
    r23 = r22 * r2
    r24 = r22 * r22
    r25 = r24 * r2
    r26 = r23 * r23
    r27 = r24 * r23
    Lr2 = log(r2)
    Lr2m1 = log(r2 - 1.0)
    Lmu = log(mc2 / (mu * mu))

    C0 = r2 - 1.0
    Clr2 = 60.0 * r2
    Cl = 60.0 * (r1 - 1.0) * (r2 - 1.0) * r2

    ca00 = (
        -60.0 * (r1 * 2.0
        + r2 * (-1.0 - r1 * 12.0 + r12 * 4.0)
        + r22 * 2.0 * (5.0 - r1)
        + r23 * (-1.0))
    )
    ca0mu = -1.0 + 2.0 * r1 - r2
    ca0r2 = 1.0 + r12 + r2 * (-3.0 - r1 * 2.0 - r12 * 3.0) + r22 * (4.0 + r1 * 2.0)
    ca0r2m1 = 2.0 * ca0mu

    ca20 = (
        -5.0 * (24.0 * (r1 * 55.0 - r12 * 90.0 + r13 * 36.0)
        + r2 * (-1140.0 - r1 * 7475.0 + r12 * 13780.0 - r13 * 5544.0 + r14 * 288.0)
        + r22 * (8915.0 - r1 * 3467.0 - r12 * 8672.0 + r13 * 2520.0)
        + r23 * (-10097.0 + r1 * 10501.0 - r12 * 836.0)
        + r24 * 5.0 * (-351.0 * r1 + 599.0)
        + r25 * (-37.0))
    )
    ca2mu = (
        -15.0 + r1 * 130.0 - r12 * 96.0 + r13 * 12.0
        + r2 * (-85.0 - r1 * 68.0 + r12 * 60)
        + r22 * (119.0 - r1 * 26.0)
        + r23 * (-31.0)
    )
    ca2r2 = (
        15.0 + r1 * 70.0 - r12 * 144.0 + r13 * 60.0 + r14 * 6.0
        + r2 * (-145.0 + r1 * 128.0 + r12 * 12.0 - r13 * 24.0 - r14 * 18.0)
        + r22 * (166.0 - r1 * 204.0 + r12 * 54.0 - r13 * 72.0)
        + r23 * (-18.0 + r1 * 40.0 + r12 * 38.0)
        + r24 * (-1.0 + r1 * 37.0)
    )
    ca2r2m1 = 2.0 * ca2mu

    ca40 = (
        2.0 * (-30.0 * (r1 * 2877.0 - r12 * 7875.0 + r13 * 7700.0 - r14 * 3150.0 + r15 * 450.0)
        + r2 * (80010.0 + r1 * 544677.0 - r12 * 1770111.0 - 25.0 * (- r13 * 69041.0 + 2.0 * (r14 * 13331.0 - r15 * 1746.0 + r16 * 36.0)))
        + r22 * (-743127.0 + r1 * 499947.0 + r12 * 1581699.0 - 25.0 * (r13 * 78527.0 - r14 * 27488.0 + r15 * 1944.0))
        + r23 * (1406664.0 - r1 * 2265963.0 + r12 * 539679.0 + 25.0 * (r13 * 19705.0 - r14 * 4702.0))
        + r24 * (-1010261.0 + r1 * 1718047.0 - r12 * 769551.0 + r13 * 40025.0)
        + r25 * (290999.0 + 2.0 * (- r1 * 215674.0 + 51507.0 * r12))
        + r26 * 2.0 * (- 14213.0 + 9245.0 * r1)
        + r27 * 121.0)
    )
    ca4mu = (
        -210.0 + r1 * 3381.0 - r12 * 5670.0 + r13 * 3220.0 - r14 * 645.0 + r15 * 30.0
        + r2 * (-2331.0 - r1 * 2184.0 + r12 * 7350.0 - r13 * 3860.0 + r14 * 495.0)
        + r22 * (5754.0 - r1 * 4074.0 - r12 * 1560.0 + r13 * 940.0)
        + r23 * (-4396.0 + r1 * 3756.0 - r12 * 420.0)
        + r24 * (1259.0 - r1 * 729.0)
        + r25 * (-106.0)
    )
    ca4r2 = (
        210.0 + r1 * 2121.0 - r12 * 6825.0 + r13 * 7000.0 - r14 * 2925.0 + r15 * 420.0 + r16 * 15.0
        + r2 * (- 3591.0 + r1 * 3444.0 + r12 * 5565.0 - r13 * 7900.0 + r14 * 2475.0 - r15 * 90.0 - r16 * 45.0)
        + r22 * (7791.0 - r1 * 14175.0 + r12 * 7020.0 - r13 * 1500.0 + r14 * 270.0 - r15 * 630.0)
        + r23 * (-5740.0 + r1 * 10020.0 - r12 * 5520.0 + r13 * 1480.0 - r14 * 1090.0)
        + r24 * (1135.0 - r1 * 555.0 + r12 * 180.0 + r13 * 570.0)
        + r25 * (270.0 - r1 * 354.0 + r12 * 864.0)
        + r26 * (-31.0 + 121.0 * r1)
    )
    ca4r2m1 = 2.0 * ca4mu

    return (
        -1.0 / (20.0 * r2 * (r1 - r2) ** 8) * ((r1 - r2) ** 4 * (C0 * ca00 + Cl * ca0mu * Lmu + Clr2 * ca0r2 * Lr2 + Cl * ca0r2m1 * Lr2m1)
        + (r1 - r2) ** 2 * (C0 * ca20 + Cl * ca2mu * Lmu + Clr2 * ca2r2 * Lr2 + Cl * ca2r2m1 * Lr2m1) * a2pi
        + (C0 * ca40 + Cl * ca4mu * Lmu + Clr2 * ca4r2 * Lr2 + Cl * ca4r2m1 * Lr2m1) * a4pi)
    )


# Next-to-leading order, twist 3


@jit(nopython=True, cache=True)
def t1_tw3_p_theta_1mrho(r1: float, r2: float, lmu: float) -> float:
    l1 = log((r2 - r1) / (r2 - 1.0))
    l2 = lmu + log((r2 - 1.0) * (r2 - 1.0) / r2)

    return (r1 - r2 * (1.0 + r1 + r2) * l2) * l1 / (r2 * (r1 - r2))


@jit(nopython=True, cache=True)
def t1_tw3_sigma_theta_1mrho(r1: float, r2: float, lmu: float) -> float:
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    lr2mr1 = log(r2 - r1)

    return (
        (
            - 6.0 * (r1 * r1 + 2.0 * (r2 - 1.0) * r2 + r1 * (-1.0 + 2.0 * r2 - 2.0 * r2 * r2))
                / (r2 * (r1 - r2) * (r1 - r2))
            + lr2mr1 * ((lmu - lr2 + 2.0 * lr2m1) * 6.0 * (1.0 + r1 + r2) / (r1 - r2) - 6.0 * r1 / (r2 * (r1 - r2)))
            + lr2m1 * ((-2.0 * lr2m1 - lmu + lr2) * 6.0 * (1.0 + r1 + r2) / (r1 - r2)
                + 6.0 * (-2.0 * (r2 - 1.0) * r2 + r1 * r2 * (2.0 * r2 - 5.0) + r1 * r1 * (1.0 + 2.0 * r2))
                    / ((r2 - r1) * (r2 - r1) * r2)
            )
            + (lmu - lr2) * 6.0 * (r1 - 1.0) * (-1.0 + r1 + r2) / ((r2 - r1) * (r2 - r1))
        ) / (r2 - r1)
    )


@jit(nopython=True, cache=True)
def t1til_tw3_p_theta_1mrho(r1: float, r2: float, lmu: float) -> float:
    l1 = log((r2 - 1.0)/(r2 - r1))
    l2 = lmu + log((r2 - 1.0) * (r2 - 1.0) / r2)

    return 2.0 * l1 * (r2 * l2 - 1.0)


@jit(nopython=True, cache=True)
def t1til_tw3_sigma_theta_1mrho(r1: float, r2: float, lmu: float) -> float:
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    lr2mr1 = log(r2 - r1)

    return - 6.0 * ((r1 - r2) * (lr2mr1 - lr2m1) + r1 - 1.0) * (r2 * (lmu + 2.0 * lr2m1 - lr2) - 1.0)


@jit(nopython=True, cache=True)
def t1t_tw3_p_theta_1mrho(r1: float, r2: float, lmu: float) -> float:
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    l = log((r2 - r1)/(r2 - 1.0))
    return l * (-1.0 + 6.0 * lr2m1 - 3.0 * lr2 + 3.0 * lmu)


@jit(nopython=True, cache=True)
def t1t_tw3_sigma_theta_1mrho(r1: float, r2: float, lmu: float) -> float:
    lr2 = log(r2)
    lr2m1 = log(r2 - 1.0)
    lr2mr1 = log(r2 - r1)

    return (
        3.0 * ((r1 - 1.0) * (- 4.0 + r2 * (3.0 - lr2 + lmu + 2.0 * lr2m1)) +
        + (r1 - r2) * r2 * (lr2m1 * (1.0 + 3.0 * lr2 - 6.0 * lr2m1 + 6.0 * lr2mr1 - 3.0 * lmu)
        + lr2mr1 * (- 1.0 - 3.0 * lr2 + 3.0 * lmu))
        )
    )
