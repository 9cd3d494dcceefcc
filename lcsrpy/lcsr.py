import logging
from functools import cached_property
from pathlib import Path

from lcsrpy import __version__
from lcsrpy.config import (
    DIFFERENTIAL_OBSERVABLES,
    FORM_FACTOR_OBSERVABLES,
    INTEGRATED_OBSERVABLES,
    Config,
)
from lcsrpy.decays.d_to_psd_l_nu import DToPseudoscalarLeptonNeutrino
from lcsrpy.diagnostics import Diagnostics
from lcsrpy.export import DiagnosticValue, Export
from lcsrpy.options import Options
from lcsrpy.parameters import Parameters


class LCSR:
    """
    Handler of a run: reads the configuration, sets up the decay and evaluates the
    requested observables.

    Args:
        path_config (str): Path to a json or yaml configuration file.
    """

    path_config: str

    def __init__(self, path_config: str | Path):
        self.path_config = str(path_config)
        self.log = logging.getLogger(self.__class__.__module__)
        self.parameters = Parameters.defaults().override(self.config.parameters)
        self.options = Options(self.config.options)
        self.decay = DToPseudoscalarLeptonNeutrino(self.parameters, self.options)

    @cached_property
    def config(self) -> Config:
        return Config(self.path_config)

    def run(self) -> Export:
        export = Export(
            version=__version__,
            options=dict(self.decay.options),
            parameters=self.config.parameters,
        )

        for observable in self.config.observables:
            name = observable.name
            self.log.info(f"Evaluating {name}")
            if name in FORM_FACTOR_OBSERVABLES:
                function = getattr(self.decay.form_factors, name)
                for s in observable.kinematics():
                    export.add(name, [s], function(s))
            elif name in DIFFERENTIAL_OBSERVABLES:
                function = getattr(self.decay, name)
                for s in observable.kinematics():
                    export.add(name, [s], function(s))
            elif name in INTEGRATED_OBSERVABLES:
                function = getattr(self.decay, name)
                for s_min, s_max in observable.bins:
                    export.add(name, [s_min, s_max], function(s_min, s_max))

        if self.config.output is not None:
            export.save(self.config.output)
            self.log.info(f"Results written to {self.config.output}")

        return export

    def diagnostics(self) -> Diagnostics:
        return self.decay.diagnostics()

    def export_diagnostics(self) -> Export:
        export = Export(options=dict(self.decay.options), parameters=self.config.parameters)
        export.diagnostics = [
            DiagnosticValue(entry.description, entry.value) for entry in self.diagnostics()
        ]
        return export
