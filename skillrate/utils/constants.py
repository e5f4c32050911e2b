"""default parameters and numerical thresholds computed once here to avoid recomputation"""
import numpy as np

# rating defaults
DEFAULT_MU = 25.0
DEFAULT_Z = 3.0
DEFAULT_SIGMA = DEFAULT_MU / DEFAULT_Z
DEFAULT_BETA = DEFAULT_SIGMA / 2.0

# lower bound on the variance multiplier after an update
KAPPA = 0.0001

# underflow guards for the truncated gaussian corrections
EPSILON = float(np.finfo(np.float64).eps)
VT_THRESHOLD = 1e-5
