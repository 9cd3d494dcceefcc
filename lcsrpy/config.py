import json
import logging
from pathlib import Path

import numpy as np
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from typing_extensions import Self

from lcsrpy.errors import ConfigurationError

# observables of one kinematic variable (s, q2 or w)
DIFFERENTIAL_OBSERVABLES = (
    "differential_decay_width",
    "normalized_differential_decay_width",
    "differential_branching_ratio",
    "normalized_differential_branching_ratio",
    "differential_a_fb_leptonic",
    "differential_flat_term",
    "differential_lepton_polarization",
    "differential_pdf_q2",
    "differential_pdf_w",
)
# observables integrated over a bin
INTEGRATED_OBSERVABLES = (
    "integrated_branching_ratio",
    "normalized_integrated_branching_ratio",
    "normalized_integrated_decay_width",
    "normalized_integrated_decay_width_p",
    "normalized_integrated_decay_width_0",
    "integrated_a_fb_leptonic",
    "integrated_flat_term",
    "integrated_lepton_polarization",
    "integrated_pdf_q2",
    "integrated_pdf_w",
)
FORM_FACTOR_OBSERVABLES = ("f_p", "f_0", "f_t", "f_plus_T")


class Grid(BaseModel):
    """The (start, stop, step) parameters of ``numpy.arange``."""

    start: float
    stop: float
    step: float = Field(gt=0.0)

    def values(self) -> list[float]:
        return np.arange(self.start, self.stop, self.step).tolist()


class Observable(BaseModel):
    name: str
    points: list[float] | Grid = Field(default=[])
    bins: list[tuple[float, float]] = Field(default=[])

    @model_validator(mode="after")
    def kinematics_match_observable(self) -> Self:
        if self.name in INTEGRATED_OBSERVABLES:
            if len(self.bins) == 0:
                raise ValueError(f"Observable {self.name} needs a list of bins")
        elif self.name in DIFFERENTIAL_OBSERVABLES or self.name in FORM_FACTOR_OBSERVABLES:
            if len(self.kinematics()) == 0:
                raise ValueError(f"Observable {self.name} needs a list or grid of points")
        else:
            raise ValueError(f"Unknown observable {self.name}")
        return self

    def kinematics(self) -> list[float]:
        if isinstance(self.points, Grid):
            return self.points.values()
        return list(self.points)


class RunConfig(BaseModel):
    parameters: dict[str, float] = Field(default={})
    options: dict[str, str | bool | int | float] = Field(default={})
    form_factors: str | None = Field(default=None, alias="form-factors")
    observables: list[Observable] = Field(default=[])
    output: str | None = Field(default=None)

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def merged_options(self) -> dict[str, str]:
        options = {
            key: str(value).lower() if isinstance(value, bool) else str(value)
            for key, value in self.options.items()
        }
        if self.form_factors is not None:
            options["form-factors"] = self.form_factors
        return options


class Config:
    """
    Run configuration read from a json or yaml file.

    Args:
        path_config (str): Path to the configuration file.

    Raises:
        ConfigurationError: If the file cannot be read or does not validate.
    """

    config: dict = {}

    def __init__(self, path_config: str | Path):
        if not isinstance(path_config, (str, Path)):
            raise ConfigurationError("The config file path needs to be a string!")
        self.log = logging.getLogger(self.__class__.__module__)
        _path_config = Path(path_config)
        self.path_config = _path_config
        self.file_type = _path_config.suffix

        try:
            match self.file_type:
                case ".json":
                    with open(_path_config) as data:
                        self.config = json.load(data)
                case ".yaml" | ".yml":
                    with open(_path_config) as data:
                        self.config = yaml.safe_load(data)
                case _:
                    raise ConfigurationError(
                        "The provided config file needs to be a json or yaml file!"
                    )
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"Could not read config file {path_config}: {exc}") from exc

        if self.config is None:
            raise ConfigurationError(
                f"Could not read config file {path_config}. Check if the file exists."
            )

        try:
            self.run = RunConfig.model_validate(self.config)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid config file {path_config}:\n{exc}") from exc

        self.log.info(
            f"Read {len(self.run.observables)} observable(s) and "
            f"{len(self.run.parameters)} parameter override(s) from {_path_config.name}"
        )

    @property
    def parameters(self) -> dict[str, float]:
        return self.run.parameters

    @property
    def options(self) -> dict[str, str]:
        return self.run.merged_options()

    @property
    def observables(self) -> list[Observable]:
        return self.run.observables

    @property
    def output(self) -> Path | None:
        if self.run.output is None:
            return None
        output = Path(self.run.output)
        if not output.is_absolute():
            output = self.path_config.parent / output
        return output
