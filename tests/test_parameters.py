import pytest

from lcsrpy.errors import ConfigurationError
from lcsrpy.parameters import Parameters, ParameterUser


def test_defaults_are_loaded_with_ranges():
    parameters = Parameters.defaults()
    assert "mass::D_d" in parameters
    low, high = parameters["mass::D_d"].range
    assert low <= parameters["mass::D_d"]() <= high


def test_parameter_handles_see_later_changes():
    parameters = Parameters.defaults()
    handle = parameters["D->pi::M^2@KKMO2009"]
    parameters["D->pi::M^2@KKMO2009"] = 5.0
    assert handle() == 5.0
    assert float(handle) == 5.0


def test_clone_is_independent():
    parameters = Parameters.defaults()
    clone = parameters.clone()
    clone["mass::D_d"] = 2.0
    assert parameters["mass::D_d"]() != 2.0


def test_unknown_parameter():
    with pytest.raises(ConfigurationError, match="Unknown parameter"):
        Parameters.defaults()["mass::X"]
    with pytest.raises(ConfigurationError):
        Parameters.defaults().override({"mass::X": 1.0})


def test_from_entries_needs_central_value():
    parameters = Parameters.from_entries({"a": 1.0, "b": {"central": 2.0, "min": 1.5}})
    assert parameters["b"].range == (1.5, 2.0)
    with pytest.raises(ConfigurationError, match="central"):
        Parameters.from_entries({"c": {"min": 1.0}})


def test_parameter_user_tracks_dependencies():
    parameters = Parameters.from_entries({"a": 1.0, "b": 2.0, "c": 3.0})
    first, second = ParameterUser(), ParameterUser()
    first.used_parameter(parameters, "a")
    second.used_parameter(parameters, "b")
    second.uses(first)
    assert second.used_parameter_names == frozenset({"a", "b"})
    assert second.depends_on(["a"])
    assert not second.depends_on(["c"])
