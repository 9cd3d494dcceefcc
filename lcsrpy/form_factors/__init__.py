from .analytic_d_to_pi import AnalyticFormFactorDToPiKKMO2009
from .bsz2015 import BSZ2015FormFactors
from .factory import FORM_FACTORS, make_form_factors
from .form_factors import FormFactors
from .pi_lcdas import PionLCDAs
