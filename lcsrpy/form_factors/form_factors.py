from abc import ABC, abstractmethod

from lcsrpy.diagnostics import Diagnostics
from lcsrpy.parameters import ParameterUser


class FormFactors(ParameterUser, ABC):
    """
    Hadronic matrix elements of a pseudoscalar to pseudoscalar transition.

    Implementations provide the vector form factor ``f_p``, the scalar form
    factor ``f_0`` and the tensor form factor ``f_t`` as functions of the
    momentum transfer squared ``q2``.
    """

    @abstractmethod
    def f_p(self, q2: float) -> float:
        pass

    @abstractmethod
    def f_0(self, q2: float) -> float:
        pass

    @abstractmethod
    def f_t(self, q2: float) -> float:
        pass

    def f_plus_T(self, q2: float) -> float:
        return 0.0

    def diagnostics(self) -> Diagnostics:
        return Diagnostics()
