class LCSRError(Exception):
    """Base class of all errors raised by lcsrpy."""


class ConfigurationError(LCSRError):
    """
    Raised while constructing an object from options, parameters or a config file
    that cannot be satisfied, e.g. an unknown process or model name.
    """


class NumericalError(LCSRError):
    """
    Raised when a numerical evaluation fails.

    Parameters
    ----------
    kernel : str
        Name of the kernel or integrand that failed.
    reason : str
        Description of the failure, e.g. the quadrature message.
    point : float, optional
        Kinematic point (momentum transfer squared) of the evaluation.
    upper : float, optional
        Upper bound of the failing integration.

    """

    def __init__(
        self,
        kernel: str,
        reason: str,
        point: float | None = None,
        upper: float | None = None,
    ):
        self.kernel = kernel
        self.reason = reason
        self.point = point
        self.upper = upper
        msg = f"{kernel}: {reason}"
        if point is not None:
            msg += f" (at q2 = {point:g}"
            msg += f", upper bound = {upper:g})" if upper is not None else ")"
        elif upper is not None:
            msg += f" (upper bound = {upper:g})"
        super().__init__(msg)
