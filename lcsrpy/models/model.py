import logging
from abc import ABC, abstractmethod
from cmath import exp as cexp
from dataclasses import dataclass
from math import sqrt

from lcsrpy.errors import ConfigurationError
from lcsrpy.models import qcd
from lcsrpy.options import HeavyQuark, LeptonFlavor, Options
from lcsrpy.parameters import Parameters, ParameterUser


@dataclass(frozen=True)
class WilsonCoefficients:
    """Couplings of the charged-current operators of the weak effective theory."""

    cvl: complex = 1.0 + 0.0j
    cvr: complex = 0.0j
    csl: complex = 0.0j
    csr: complex = 0.0j
    ct: complex = 0.0j

    def conjugate(self) -> "WilsonCoefficients":
        return WilsonCoefficients(
            cvl=complex(self.cvl).conjugate(),
            cvr=complex(self.cvr).conjugate(),
            csl=complex(self.csl).conjugate(),
            csr=complex(self.csr).conjugate(),
            ct=complex(self.ct).conjugate(),
        )


def sector_name(sector: HeavyQuark, lepton: LeptonFlavor) -> str:
    """Prefix of the parameters of one transition, e.g. ``scmunumu``."""
    q = HeavyQuark(sector).value
    l = LeptonFlavor(lepton).value
    return f"{q}c{l}nu{l}"


class Model(ParameterUser, ABC):
    """
    Source of the short-distance inputs: the strong coupling, running quark
    masses, CKM matrix elements and Wilson coefficients.

    Args:
        parameters (Parameters): Registry to read the inputs from.
        options (Options): Options, currently unused by the QCD part.
    """

    def __init__(self, parameters: Parameters, options: Options | None = None):
        super().__init__()
        self.options = options if options is not None else Options()
        self.log = logging.getLogger(self.__class__.__module__)

        self._alpha_s_mz = self.used_parameter(parameters, "QCD::alpha_s(MZ)")
        self._m_z = self.used_parameter(parameters, "mass::Z")
        self._m_b = self.used_parameter(parameters, "mass::b(MSbar)")
        self._m_c = self.used_parameter(parameters, "mass::c(MSbar)")
        self._m_s = self.used_parameter(parameters, "mass::s(2GeV)")
        self._m_d = self.used_parameter(parameters, "mass::d(2GeV)")
        self._m_u = self.used_parameter(parameters, "mass::u(2GeV)")

    def alpha_s(self, mu: float) -> float:
        return qcd.alpha_s(
            float(mu), self._alpha_s_mz(), self._m_z(), self._m_b(), self._m_c()
        )

    def _run(self, m0: float, mu0: float, mu: float) -> float:
        return qcd.run_mass(m0, mu0, mu, self.alpha_s, self._m_b(), self._m_c())

    def m_b_msbar(self, mu: float) -> float:
        return self._run(self._m_b(), self._m_b(), mu)

    def m_c_msbar(self, mu: float) -> float:
        return self._run(self._m_c(), self._m_c(), mu)

    def m_s_msbar(self, mu: float) -> float:
        return self._run(self._m_s(), 2.0, mu)

    def m_d_msbar(self, mu: float) -> float:
        return self._run(self._m_d(), 2.0, mu)

    def m_u_msbar(self, mu: float) -> float:
        return self._run(self._m_u(), 2.0, mu)

    def running_mass(self, flavor: str, mu: float) -> float:
        match flavor:
            case "b":
                return self.m_b_msbar(mu)
            case "c":
                return self.m_c_msbar(mu)
            case "s":
                return self.m_s_msbar(mu)
            case "d":
                return self.m_d_msbar(mu)
            case "u":
                return self.m_u_msbar(mu)
            case _:
                raise ConfigurationError(f"No running mass for quark flavour '{flavor}'")

    @abstractmethod
    def ckm_cd(self) -> complex:
        pass

    @abstractmethod
    def ckm_cs(self) -> complex:
        pass

    @abstractmethod
    def wilson_coefficients(
        self, sector: HeavyQuark, lepton: LeptonFlavor, cp_conjugate: bool = False
    ) -> WilsonCoefficients:
        pass


class StandardModel(Model):
    """
    Standard Model: CKM elements from the Wolfenstein parameters in the exact
    PDG parametrisation and the tree-level Wilson coefficient ``cVL = 1``.
    """

    def __init__(self, parameters: Parameters, options: Options | None = None):
        super().__init__(parameters, options)
        self._lambda = self.used_parameter(parameters, "CKM::lambda")
        self._A = self.used_parameter(parameters, "CKM::A")
        self._rhobar = self.used_parameter(parameters, "CKM::rhobar")
        self._etabar = self.used_parameter(parameters, "CKM::etabar")

    def _angles(self):
        lam, A = self._lambda(), self._A()
        rho_eta = complex(self._rhobar(), self._etabar())
        A2lam4 = A * A * lam**4

        s12 = lam
        s23 = A * lam * lam
        s13_phase = (
            A * lam**3 * rho_eta * sqrt(1.0 - A2lam4)
            / (sqrt(1.0 - lam * lam) * (1.0 - A2lam4 * rho_eta))
        )
        c12 = sqrt(1.0 - s12 * s12)
        c23 = sqrt(1.0 - s23 * s23)
        return s12, c12, s23, c23, s13_phase

    def ckm_cd(self) -> complex:
        s12, c12, s23, c23, s13_phase = self._angles()
        return -s12 * c23 - c12 * s23 * s13_phase

    def ckm_cs(self) -> complex:
        s12, c12, s23, c23, s13_phase = self._angles()
        return c12 * c23 - s12 * s23 * s13_phase

    def wilson_coefficients(
        self, sector: HeavyQuark, lepton: LeptonFlavor, cp_conjugate: bool = False
    ) -> WilsonCoefficients:
        return WilsonCoefficients()


class WilsonScanModel(Model):
    """
    Weak effective theory with free complex Wilson coefficients.

    The CKM elements are read directly as absolute value and phase, the Wilson
    coefficients from parameters such as ``dcenue::Re{cVL}``.
    """

    _COEFFICIENTS = ("cVL", "cVR", "cSL", "cSR", "cT")

    def __init__(self, parameters: Parameters, options: Options | None = None):
        super().__init__(parameters, options)
        self._abs_v_cd = self.used_parameter(parameters, "CKM::abs(V_cd)")
        self._arg_v_cd = self.used_parameter(parameters, "CKM::arg(V_cd)")
        self._abs_v_cs = self.used_parameter(parameters, "CKM::abs(V_cs)")
        self._arg_v_cs = self.used_parameter(parameters, "CKM::arg(V_cs)")

        self._wc = {}
        for sector in HeavyQuark:
            for lepton in LeptonFlavor:
                prefix = sector_name(sector, lepton)
                self._wc[(sector, lepton)] = [
                    (
                        self.used_parameter(parameters, f"{prefix}::Re{{{name}}}"),
                        self.used_parameter(parameters, f"{prefix}::Im{{{name}}}"),
                    )
                    for name in self._COEFFICIENTS
                ]

    def ckm_cd(self) -> complex:
        return self._abs_v_cd() * cexp(1j * self._arg_v_cd())

    def ckm_cs(self) -> complex:
        return self._abs_v_cs() * cexp(1j * self._arg_v_cs())

    def wilson_coefficients(
        self, sector: HeavyQuark, lepton: LeptonFlavor, cp_conjugate: bool = False
    ) -> WilsonCoefficients:
        values = [
            complex(re(), im())
            for re, im in self._wc[(HeavyQuark(sector), LeptonFlavor(lepton))]
        ]
        result = WilsonCoefficients(*values)
        return result.conjugate() if cp_conjugate else result


MODELS = {
    "SM": StandardModel,
    "WET": WilsonScanModel,
}


def make_model(name: str, parameters: Parameters, options: Options | None = None) -> Model:
    try:
        model = MODELS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown model '{name}', expected one of: {', '.join(MODELS)}"
        ) from None
    return model(parameters, options)
