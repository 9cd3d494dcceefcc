import numpy as np
import numpy.testing as npt

from lcsrpy import kinematics

M_D = 1.86966
M_PI = 0.13957


def test_kallen_function():
    assert kinematics.lambda_(1.0, 0.0, 0.0) == 1.0
    npt.assert_allclose(kinematics.lambda_(4.0, 1.0, 1.0), 0.0, atol=1e-15)
    # symmetric in its arguments
    assert kinematics.lambda_(3.0, 0.5, 0.2) == kinematics.lambda_(0.2, 3.0, 0.5)


def test_momentum_at_the_endpoints():
    npt.assert_allclose(
        kinematics.momentum(M_D, M_PI, 0.0), (M_D**2 - M_PI**2) / (2.0 * M_D), rtol=1e-14
    )
    npt.assert_allclose(kinematics.momentum(M_D, M_PI, (M_D - M_PI) ** 2), 0.0, atol=1e-7)


def test_momentum_is_zero_outside_of_the_phase_space():
    assert kinematics.momentum(M_D, M_PI, (M_D - M_PI) ** 2 + 0.1) == 0.0


def test_lepton_velocity():
    assert kinematics.lepton_velocity(0.0, 1.0) == 1.0
    npt.assert_allclose(kinematics.lepton_velocity(0.1, 0.04), 0.75)


def test_recoil_round_trip():
    q2 = np.linspace(0.0, (M_D - M_PI) ** 2, 7)
    w = [kinematics.w_from_q2(M_D, M_PI, s) for s in q2]
    npt.assert_allclose([kinematics.q2_from_w(M_D, M_PI, x) for x in w], q2, atol=1e-14)
    # zero recoil at the endpoint
    npt.assert_allclose(w[-1], 1.0, rtol=1e-14)
    assert kinematics.dq2_dw(M_D, M_PI) == 2.0 * M_D * M_PI


def test_phase_space_bounds():
    s_min, s_max = kinematics.phase_space_bounds(M_D, M_PI, 0.1056583755)
    npt.assert_allclose(s_min, 0.1056583755**2)
    npt.assert_allclose(s_max, (M_D - M_PI) ** 2)
