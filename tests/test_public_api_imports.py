def test_public_imports() -> None:
    # keep the most common imports stable
    import lcsrpy

    assert hasattr(lcsrpy, "__version__")

    from lcsrpy import LCSR, DToPseudoscalarLeptonNeutrino, Parameters  # noqa: F401
    from lcsrpy.form_factors import AnalyticFormFactorDToPiKKMO2009  # noqa: F401
