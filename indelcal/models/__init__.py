from .rate_table import *
from .adaptive_model import *
from .default_indel_error_models import *
from .calibration_file import *
from .indel_error_model import *
