from enum import Enum
from typing import Iterator, Mapping

from lcsrpy.errors import ConfigurationError


class LeptonFlavor(str, Enum):
    ELECTRON = "e"
    MUON = "mu"
    TAU = "tau"


class HeavyQuark(str, Enum):
    """Down-type quark produced in the c -> Q l nu transition."""

    DOWN = "d"
    STRANGE = "s"


class SpectatorQuark(str, Enum):
    UP = "u"
    DOWN = "d"
    STRANGE = "s"


class Isospin(str, Enum):
    ONE = "1"
    ZERO = "0"
    ONE_HALF = "1/2"


_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off")


class Options(Mapping):
    """
    Immutable string-to-string mapping of discrete settings.

    The typed accessors validate a value against its enumeration and raise a
    `ConfigurationError` for anything else, so that invalid settings are found
    when an object is constructed.

    Args:
        values (Mapping, optional): Initial settings. Non-string values are
            converted with ``str``, booleans to ``"true"``/``"false"``.
    """

    def __init__(self, values: Mapping | None = None, **kwargs):
        merged = dict(values or {})
        merged.update(kwargs)
        self._values = {
            str(key): (str(value).lower() if isinstance(value, bool) else str(value))
            for key, value in merged.items()
        }

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Options({self._values!r})"

    def with_defaults(self, defaults: Mapping[str, str]) -> "Options":
        """Returns new options where missing keys are taken from ``defaults``."""
        merged = dict(defaults)
        merged.update(self._values)
        return Options(merged)

    def get_enum(self, key: str, enum: type[Enum], default: Enum) -> Enum:
        value = self._values.get(key, default.value)
        try:
            return enum(value)
        except ValueError:
            allowed = ", ".join(member.value for member in enum)
            raise ConfigurationError(
                f"Invalid value '{value}' for option '{key}', expected one of: {allowed}"
            ) from None

    def get_bool(self, key: str, default: bool) -> bool:
        if key not in self._values:
            return default
        value = self._values[key].lower()
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
        raise ConfigurationError(
            f"Invalid value '{self._values[key]}' for boolean option '{key}'"
        )

    def get_str(self, key: str, default: str) -> str:
        return self._values.get(key, default)

    def lepton(self, default: LeptonFlavor = LeptonFlavor.MUON) -> LeptonFlavor:
        return self.get_enum("l", LeptonFlavor, default)

    def heavy_quark(self, default: HeavyQuark = HeavyQuark.STRANGE) -> HeavyQuark:
        return self.get_enum("Q", HeavyQuark, default)

    def spectator_quark(
        self, default: SpectatorQuark = SpectatorQuark.DOWN
    ) -> SpectatorQuark:
        return self.get_enum("q", SpectatorQuark, default)

    def isospin(self, default: Isospin = Isospin.ONE) -> Isospin:
        return self.get_enum("I", Isospin, default)
