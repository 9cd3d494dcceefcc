import json
from pathlib import Path

import pandas as pd
import pytest
import yaml
from click.testing import CliRunner

from lcsrpy.cli import cli
from lcsrpy.config import Config
from lcsrpy.errors import ConfigurationError
from lcsrpy.export import Export
from lcsrpy.lcsr import LCSR


def _base_config() -> dict:
    return {
        "parameters": {"mass::D_d": 1.87},
        "options": {"Q": "d", "q": "u", "I": "1", "l": "e"},
        "form-factors": "BSZ2015",
        "observables": [
            {"name": "f_p", "points": [0.0, 1.0]},
            {"name": "differential_branching_ratio", "points": {"start": 0.5, "stop": 2.0, "step": 0.5}},
            {"name": "integrated_branching_ratio", "bins": [[0.1, 1.0], [1.0, 2.0]]},
        ],
    }


def test_config_reads_yaml_and_json(tmp_path: Path) -> None:
    for name, dump in (("run.yaml", yaml.safe_dump), ("run.json", json.dumps)):
        path = tmp_path / name
        path.write_text(dump(_base_config()))
        config = Config(str(path))
        assert config.parameters == {"mass::D_d": 1.87}
        assert config.options["form-factors"] == "BSZ2015"
        assert config.observables[1].kinematics() == [0.5, 1.0, 1.5]
        assert config.output is None


def test_config_rejects_unknown_suffix(tmp_path: Path) -> None:
    path = tmp_path / "run.toml"
    path.write_text("")
    with pytest.raises(ConfigurationError, match="json or yaml"):
        Config(str(path))


def test_config_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Could not read"):
        Config(str(tmp_path / "missing.yaml"))


@pytest.mark.parametrize(
    "observable",
    [
        {"name": "integrated_branching_ratio", "points": [1.0]},
        {"name": "differential_branching_ratio", "bins": [[0.1, 1.0]]},
        {"name": "branching_fraction", "points": [1.0]},
    ],
)
def test_config_validates_observables(tmp_path: Path, observable: dict) -> None:
    config = _base_config()
    config["observables"] = [observable]
    path = tmp_path / "run.yaml"
    path.write_text(yaml.safe_dump(config))
    with pytest.raises(ConfigurationError, match="Invalid config"):
        Config(str(path))


def test_handler_evaluates_all_observables(tmp_path: Path) -> None:
    config = _base_config()
    config["output"] = "results.csv"
    path = tmp_path / "run.yaml"
    path.write_text(yaml.safe_dump(config))

    handler = LCSR(str(path))
    assert handler.parameters["mass::D_d"]() == 1.87
    export = handler.run()

    frame = export.to_frame()
    assert len(frame) == 2 + 3 + 2
    assert (frame["value"] > 0.0).all()
    saved = pd.read_csv(tmp_path / "results.csv")
    assert list(saved["observable"]) == list(frame["observable"])


def test_export_round_trip(tmp_path: Path) -> None:
    export = Export(options={"l": "e"})
    export.add("f_p", [0.0], 0.6)
    export.add("integrated_branching_ratio", [0.1, 1.0], 1e-3)
    export.save(tmp_path / "results.json")
    data = json.loads((tmp_path / "results.json").read_text())
    assert data["evaluations"][1]["kinematics"] == [0.1, 1.0]
    with pytest.raises(ConfigurationError, match="Unknown file extension"):
        export.save(tmp_path / "results.txt")


def test_cli_evaluate(tmp_path: Path) -> None:
    path = tmp_path / "run.yaml"
    path.write_text(yaml.safe_dump(_base_config()))
    output = tmp_path / "out.yaml"

    result = CliRunner().invoke(cli, ["evaluate", "--config", str(path), "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert "integrated_branching_ratio" in result.output
    assert len(yaml.safe_load(output.read_text())["evaluations"]) == 7


def test_cli_diagnostics_of_parametrised_form_factors(tmp_path: Path) -> None:
    path = tmp_path / "run.yaml"
    path.write_text(yaml.safe_dump(_base_config()))

    result = CliRunner().invoke(cli, ["diagnostics", "--config", str(path)])

    assert result.exit_code == 0, result.output


def test_cli_reports_configuration_errors(tmp_path: Path) -> None:
    config = _base_config()
    config["options"]["I"] = "1/2"
    path = tmp_path / "run.yaml"
    path.write_text(yaml.safe_dump(config))

    result = CliRunner().invoke(cli, ["evaluate", "--config", str(path)])

    assert result.exit_code != 0
    assert "Unsupported combination" in result.output


def test_cli_reports_unknown_output_format(tmp_path: Path) -> None:
    path = tmp_path / "run.yaml"
    path.write_text(yaml.safe_dump(_base_config()))

    result = CliRunner().invoke(
        cli, ["evaluate", "--config", str(path), "--output", str(tmp_path / "out.txt")]
    )

    assert result.exit_code != 0
    assert "Unknown file extension .txt" in result.output
    assert not isinstance(result.exception, ConfigurationError)


def test_handler_reads_the_config_once(tmp_path: Path) -> None:
    import lcsrpy

    path = tmp_path / "run.yaml"
    path.write_text(yaml.safe_dump(_base_config()))

    handler = LCSR(path)
    assert handler.config is handler.config
    assert handler.run().version == lcsrpy.__version__
