from lcsrpy.models.model import (
    Model,
    StandardModel,
    WilsonCoefficients,
    WilsonScanModel,
    make_model,
)
