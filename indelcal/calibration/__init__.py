from .options import Options
from .runner import show_rates_runner, indel_error_rate_runner
