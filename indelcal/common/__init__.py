from .constants_and_defaults import *
from .errors import *
from .io import *
from .logging import *
