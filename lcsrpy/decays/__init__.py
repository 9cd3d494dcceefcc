from .d_to_psd_l_nu import Amplitudes, DToPseudoscalarLeptonNeutrino, FlavorBundle
