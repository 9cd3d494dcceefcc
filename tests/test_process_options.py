import math

import pytest

from lcsrpy.errors import ConfigurationError
from lcsrpy.options import HeavyQuark, Isospin, LeptonFlavor, Options, SpectatorQuark
from lcsrpy.process import resolve


def test_resolve_charged_pion():
    descriptor = resolve(HeavyQuark.DOWN, SpectatorQuark.UP, Isospin.ONE)
    assert descriptor.process == "D->pi"
    assert descriptor.parent == "D_u"
    assert descriptor.daughter == "pi^-"
    assert descriptor.mass_parent == "mass::D_u"
    assert math.isclose(descriptor.isospin_factor, 1.0 / math.sqrt(2.0))


def test_resolve_accepts_plain_strings():
    descriptor = resolve("d", "s", "1/2")
    assert descriptor.process == "D_s->K"
    assert descriptor.mass_daughter == "mass::K_u"


def test_default_options_resolve():
    options = Options()
    descriptor = resolve(options.heavy_quark(), options.spectator_quark(), options.isospin())
    assert descriptor.process == "D->K"
    assert descriptor.parent == "D_d"


def test_unsupported_combination_names_the_triple():
    with pytest.raises(ConfigurationError, match="Q=d, q=d, I=1/2"):
        resolve(HeavyQuark.DOWN, SpectatorQuark.DOWN, Isospin.ONE_HALF)


def test_options_typed_accessors():
    options = Options({"l": "tau", "Q": "d", "cp-conjugate": True})
    assert options.lepton() is LeptonFlavor.TAU
    assert options.heavy_quark() is HeavyQuark.DOWN
    assert options.get_bool("cp-conjugate", False) is True
    assert options.get_bool("rescale-borel", True) is True
    assert options["cp-conjugate"] == "true"


def test_options_reject_invalid_values():
    with pytest.raises(ConfigurationError, match="expected one of"):
        Options({"l": "nu"}).lepton()
    with pytest.raises(ConfigurationError):
        Options({"rescale-borel": "maybe"}).get_bool("rescale-borel", True)


def test_options_with_defaults_keeps_explicit_values():
    options = Options({"l": "e"}).with_defaults({"l": "mu", "model": "SM"})
    assert options["l"] == "e"
    assert options["model"] == "SM"
