import numpy as np
from scipy.special import exp1, spence


def dilog(x: float) -> float:
    """
    Real part of the dilogarithm Li2(x) for real arguments.

    ``scipy.special.spence`` implements ``spence(z) = Li2(1 - z)``. The complex
    branch is used so that arguments above one stay on the principal branch,
    whose real part is continuous across the cut.

    Parameters
    ----------
    x : float
        Real argument, may be larger than one.

    Returns
    -------
    float
        Re Li2(x).

    """
    return float(np.real(spence(1.0 - complex(x))))


def gamma_inc_zero(x: float) -> float:
    """Upper incomplete gamma function Gamma(0, x) = E1(x) for x > 0."""
    return float(exp1(x))
