__version__ = "0.1.0"

from .config import Config
from .decays import DToPseudoscalarLeptonNeutrino
from .diagnostics import Diagnostics
from .errors import ConfigurationError, LCSRError, NumericalError
from .form_factors import AnalyticFormFactorDToPiKKMO2009, BSZ2015FormFactors, make_form_factors
from .lcsr import LCSR
from .models import StandardModel, WilsonScanModel, make_model
from .options import Options
from .parameters import Parameters
