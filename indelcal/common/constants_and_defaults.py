"""
Constants and built-in parameters for the indel error models
"""
import math

from frozendict import frozendict

# Names of the built-in models, as they are entered in a config or on the command line
LOG_LINEAR_MODEL_NAME = "logLinear"
ADAPTIVE_DEFAULT_MODEL_NAME = "adaptiveDefault"
BUILT_IN_MODEL_NAMES = (LOG_LINEAR_MODEL_NAME, ADAPTIVE_DEFAULT_MODEL_NAME)
DEFAULT_MODEL_NAME = LOG_LINEAR_MODEL_NAME

# Log-linear ramp, used as the default in the v2.7.x series and always for candidate generation.
LOG_LINEAR_LOW_ERROR_RATE = 5e-5
LOG_LINEAR_HIGH_ERROR_RATE = 3e-4
# zero-indexed endpoint of the ramp, so the high rate is reached at a repeat count of switch point + 1
LOG_LINEAR_SWITCH_POINT = 15

# Simplified adaptive model. Averages of typical Nano and PCR-free estimates.
ADAPTIVE_NON_STR_RATE = 8e-3
# Keyed by repeat unit length: (low error rate, high error rate, repeat count switch point)
ADAPTIVE_DEFAULT_PARAMETERS = frozendict({
    1: (math.log(4.9e-3), math.log(4.5e-2), 16),
    2: (math.log(1.0e-2), math.log(1.8e-2), 9),
})
# The low anchor of the adaptive ramp is the first repeat count above the non-repeat baseline
ADAPTIVE_LOW_REPEAT_COUNT = 2

# Calibration file keys
INDEL_MODELS_KEY = "IndelModels"
MODEL_NAME_KEY = "name"
MAX_MOTIF_LENGTH_KEY = "MaxMotifLength"
MAX_TRACT_LENGTH_KEY = "MaxTractLength"
MODEL_KEY = "Model"
TABLE_KEYS = (MAX_MOTIF_LENGTH_KEY, MAX_TRACT_LENGTH_KEY, MODEL_KEY)
