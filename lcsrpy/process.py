from dataclasses import dataclass
from math import sqrt

from lcsrpy.errors import ConfigurationError
from lcsrpy.options import HeavyQuark, Isospin, SpectatorQuark


@dataclass(frozen=True)
class ProcessDescriptor:
    """
    Labels of a D -> P l nu channel.

    Attributes:
        process (str): Name of the transition, used to look up the form factors.
        parent (str): Name of the decaying D meson, e.g. ``D_d``.
        daughter (str): Name of the final-state pseudoscalar, e.g. ``pi^0``.
        isospin_factor (float): Factor multiplying all helicity amplitudes.
    """

    process: str
    parent: str
    daughter: str
    isospin_factor: float

    @property
    def mass_parent(self) -> str:
        return f"mass::{self.parent}"

    @property
    def mass_daughter(self) -> str:
        return f"mass::{self.daughter}"


_D_TO_K_U = ProcessDescriptor("D->K", "D_u", "K_u", 1.0)
_D_TO_K_D = ProcessDescriptor("D->K", "D_d", "K_d", 1.0)

# (Q, q, I) -> descriptor
# Q: down-type quark of the c -> Q transition
# q: spectator quark
# I: total isospin of the daughter meson
PROCESS_TABLE: dict[tuple[HeavyQuark, SpectatorQuark, Isospin], ProcessDescriptor] = {
    (HeavyQuark.DOWN, SpectatorQuark.UP, Isospin.ONE): ProcessDescriptor(
        "D->pi", "D_u", "pi^-", 1.0 / sqrt(2.0)
    ),
    (HeavyQuark.DOWN, SpectatorQuark.DOWN, Isospin.ONE): ProcessDescriptor(
        "D->pi", "D_d", "pi^0", 1.0
    ),
    (HeavyQuark.DOWN, SpectatorQuark.STRANGE, Isospin.ONE_HALF): ProcessDescriptor(
        "D_s->K", "D_s", "K_u", 1.0
    ),
    # Cabibbo-favoured c -> s channels, reachable with both isospin labels
    (HeavyQuark.STRANGE, SpectatorQuark.UP, Isospin.ONE_HALF): _D_TO_K_U,
    (HeavyQuark.STRANGE, SpectatorQuark.UP, Isospin.ONE): _D_TO_K_U,
    (HeavyQuark.STRANGE, SpectatorQuark.DOWN, Isospin.ONE_HALF): _D_TO_K_D,
    (HeavyQuark.STRANGE, SpectatorQuark.DOWN, Isospin.ONE): _D_TO_K_D,
}


def resolve(
    heavy: HeavyQuark, spectator: SpectatorQuark, isospin: Isospin
) -> ProcessDescriptor:
    try:
        return PROCESS_TABLE[(HeavyQuark(heavy), SpectatorQuark(spectator), Isospin(isospin))]
    except (KeyError, ValueError):
        raise ConfigurationError(
            "Unsupported combination of "
            f"Q={getattr(heavy, 'value', heavy)}, "
            f"q={getattr(spectator, 'value', spectator)}, "
            f"I={getattr(isospin, 'value', isospin)}"
        ) from None
