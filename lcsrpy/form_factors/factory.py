from functools import partial

from lcsrpy.errors import ConfigurationError
from lcsrpy.form_factors.analytic_d_to_pi import AnalyticFormFactorDToPiKKMO2009
from lcsrpy.form_factors.bsz2015 import BSZ2015FormFactors
from lcsrpy.form_factors.form_factors import FormFactors
from lcsrpy.options import Options
from lcsrpy.parameters import Parameters

FORM_FACTORS = {
    "D->pi::KKMO2009": AnalyticFormFactorDToPiKKMO2009,
    "D->pi::BSZ2015": partial(BSZ2015FormFactors, "D->pi"),
    "D->K::BSZ2015": partial(BSZ2015FormFactors, "D->K"),
    "D_s->K::BSZ2015": partial(BSZ2015FormFactors, "D_s->K"),
}


def make_form_factors(
    name: str, parameters: Parameters, options: Options | None = None
) -> FormFactors:
    """
    Creates the form factors registered under ``name``.

    Args:
        name (str): ``"{process}::{variant}"``, e.g. ``D->pi::KKMO2009``.
        parameters (Parameters): Registry passed on to the form factors.
        options (Options, optional): Options passed on to the form factors.

    Returns:
        FormFactors: The new instance.

    Raises:
        ConfigurationError: If no form factors are registered under ``name``.
    """
    try:
        factory = FORM_FACTORS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown form factors '{name}', expected one of: {', '.join(FORM_FACTORS)}"
        ) from None
    return factory(parameters, Options(options))
