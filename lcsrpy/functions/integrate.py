import math
from dataclasses import dataclass
from typing import Callable

from scipy.integrate import quad

import lcsrpy.log as log
from lcsrpy.errors import NumericalError

_log = log.lcsr_logger(__name__)


@dataclass(frozen=True)
class QAGSConfig:
    """
    Settings of the adaptive Gauss-Kronrod quadrature (QUADPACK QAGS).

    Attributes
    ----------
    epsrel : float
        Requested relative accuracy.
    epsabs : float
        Requested absolute accuracy. Zero means only the relative accuracy counts.
    limit : int
        Maximal number of subintervals.

    """

    epsrel: float = 1.0e-3
    epsabs: float = 0.0
    limit: int = 1000


def integrate(
    integrand: Callable[[float], float],
    lower: float,
    upper: float,
    config: QAGSConfig = QAGSConfig(),
    kernel: str = "integrand",
    point: float | None = None,
) -> float:
    """
    Integrates a scalar function over a finite interval.

    Any failure is raised as a `NumericalError` carrying the kernel name, the
    kinematic point and the upper integration bound: non-convergence reported by
    QUADPACK, a non-finite result, or an arithmetic/domain error raised by the
    integrand itself.

    Parameters
    ----------
    integrand : Callable[[float], float]
        The function to integrate.
    lower : float
        Lower integration bound.
    upper : float
        Upper integration bound.
    config : QAGSConfig, optional
        Accuracy settings.
    kernel : str, optional
        Name used in log messages and errors.
    point : float, optional
        Kinematic point the integral belongs to, only used for error reporting.

    Returns
    -------
    float
        The value of the integral.

    """
    try:
        result = quad(
            integrand,
            lower,
            upper,
            epsabs=config.epsabs,
            epsrel=config.epsrel,
            limit=config.limit,
            full_output=1,
        )
    except (ArithmeticError, ValueError) as exc:
        raise NumericalError(kernel, str(exc), point=point, upper=upper) from exc

    value, abserr, info = result[0], result[1], result[2]
    # quad appends a message only when QUADPACK reports ier != 0
    if len(result) > 3:
        raise NumericalError(kernel, result[3], point=point, upper=upper)
    if not math.isfinite(value):
        raise NumericalError(kernel, "non-finite result", point=point, upper=upper)

    _log.numerics(
        "%s: [%.6g, %.6g] -> %.10g (abserr %.3g, neval %d)",
        kernel,
        lower,
        upper,
        value,
        abserr,
        info["neval"],
    )
    return value
