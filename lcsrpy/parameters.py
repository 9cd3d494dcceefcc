import copy
import logging
from importlib import resources
from typing import Iterable, Mapping

import yaml

from lcsrpy.errors import ConfigurationError


class Parameter:
    """
    Handle to a single named value in a `Parameters` registry.

    Calling the handle returns the current value, so objects that keep the handle
    see later changes of the registry.

    Args:
        registry (Parameters): The registry the value lives in.
        name (str): Name of the parameter, e.g. ``mass::D_d``.
    """

    __slots__ = ("_registry", "name")

    def __init__(self, registry: "Parameters", name: str):
        self._registry = registry
        self.name = name

    def __call__(self) -> float:
        return self._registry._values[self.name]

    def __float__(self) -> float:
        return self()

    def set(self, value: float):
        self._registry._values[self.name] = float(value)

    @property
    def range(self) -> tuple[float, float]:
        return self._registry._ranges.get(self.name, (self(), self()))

    def __repr__(self) -> str:
        return f"Parameter({self.name!r}, {self()!r})"


class Parameters:
    """
    Registry of all named numerical inputs.

    The defaults ship with the package in ``lcsrpy/data/parameters.yaml``. Every entry
    there carries a ``central`` value and the ``min``/``max`` of its usual range.
    """

    def __init__(
        self,
        values: Mapping[str, float],
        ranges: Mapping[str, tuple[float, float]] | None = None,
    ):
        self._values = {name: float(value) for name, value in values.items()}
        self._ranges = dict(ranges) if ranges is not None else {}
        self.log = logging.getLogger(self.__class__.__module__)

    @classmethod
    def defaults(cls) -> "Parameters":
        source = resources.files("lcsrpy.data").joinpath("parameters.yaml")
        with source.open("r", encoding="utf-8") as data:
            entries = yaml.safe_load(data)
        return cls.from_entries(entries)

    @classmethod
    def from_entries(cls, entries: Mapping) -> "Parameters":
        """
        Builds a registry from a mapping as found in the yaml file.

        Args:
            entries (Mapping): Either ``name: value`` or
                ``name: {central: ..., min: ..., max: ...}``.

        Returns:
            Parameters: The new registry.
        """
        values = {}
        ranges = {}
        for name, entry in entries.items():
            if isinstance(entry, Mapping):
                if "central" not in entry:
                    raise ConfigurationError(
                        f"Parameter '{name}' needs a central value"
                    )
                values[name] = entry["central"]
                ranges[name] = (
                    float(entry.get("min", entry["central"])),
                    float(entry.get("max", entry["central"])),
                )
            else:
                values[name] = entry
        return cls(values, ranges)

    def __getitem__(self, name: str) -> Parameter:
        if name not in self._values:
            raise ConfigurationError(f"Unknown parameter '{name}'")
        return Parameter(self, name)

    def __setitem__(self, name: str, value: float):
        self[name].set(value)

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def names(self) -> list[str]:
        return list(self._values)

    def override(self, values: Mapping[str, float]) -> "Parameters":
        """Sets several known parameters at once and returns the registry."""
        for name, value in values.items():
            self[name] = value
            self.log.debug(f"Parameter {name} set to {value}")
        return self

    def clone(self) -> "Parameters":
        """Independent copy, changes to the clone are not seen by this registry."""
        return Parameters(copy.copy(self._values), copy.copy(self._ranges))


class ParameterUser:
    """
    Mixin for every object that reads parameters.

    It records the names of all parameters the object depends on, which makes it
    possible to tell which observables are affected by a change of inputs.
    """

    def __init__(self):
        self._used_parameters: set[str] = set()

    def used_parameter(self, parameters: Parameters, name: str) -> Parameter:
        parameter = parameters[name]
        self._used_parameters.add(name)
        return parameter

    def uses(self, other: "ParameterUser"):
        self._used_parameters.update(other.used_parameter_names)

    @property
    def used_parameter_names(self) -> frozenset[str]:
        return frozenset(self._used_parameters)

    def depends_on(self, names: Iterable[str]) -> bool:
        return not self._used_parameters.isdisjoint(names)
