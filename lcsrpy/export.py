import json
from pathlib import Path

import pandas as pd
import yaml
from pydantic import BaseModel, Field
from pydantic.dataclasses import dataclass

from lcsrpy.errors import ConfigurationError


@dataclass
class Evaluation:
    observable: str = Field()
    kinematics: list[float] = Field()
    value: float = Field()


@dataclass
class DiagnosticValue:
    description: str = Field()
    value: float = Field()


class Export(BaseModel):
    source: str = Field(default="lcsrpy")
    version: str = Field(default="")
    options: dict[str, str] = Field(default={})
    parameters: dict[str, float] = Field(default={})
    evaluations: list[Evaluation] = Field(default=[])
    diagnostics: list[DiagnosticValue] = Field(default=[])

    def add(self, observable: str, kinematics: list[float], value: float) -> None:
        self.evaluations.append(Evaluation(observable, [float(k) for k in kinematics], float(value)))

    def to_frame(self) -> pd.DataFrame:
        """One row per evaluation, the kinematics split into ``s`` or ``s_min``/``s_max``."""
        rows = []
        for evaluation in self.evaluations:
            row = {"observable": evaluation.observable}
            match evaluation.kinematics:
                case [s]:
                    row.update(s=s, s_min=None, s_max=None)
                case [s_min, s_max]:
                    row.update(s=None, s_min=s_min, s_max=s_max)
            row["value"] = evaluation.value
            rows.append(row)
        return pd.DataFrame(rows, columns=["observable", "s", "s_min", "s_max", "value"])

    def save(self, filename: str | Path) -> None:
        if isinstance(filename, str):
            filename = Path(filename)

        match filename.suffix:
            case ".json":
                with open(filename, "w") as f:
                    json.dump(self.model_dump(), f, indent=4)
            case ".yml" | ".yaml":
                with open(filename, "w") as f:
                    yaml.dump(self.model_dump(), f)
            case ".csv":
                self.to_frame().to_csv(filename, index=False)
            case _:
                raise ConfigurationError(f"Unknown file extension {filename.suffix}")
