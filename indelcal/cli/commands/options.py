"""
Definitions of shared command line options.
"""

import os
import time

from ...common import BUILT_IN_MODEL_NAMES, DEFAULT_MODEL_NAME
from .base import Group

__all__ = ["log_group", "model_group", "output_group"]

log_group = Group("logging", "Options for the run log, shared by every command")
log_group.add_argument(
    "--no-log",
    default=False,
    action='store_true',
    help="Set to turn off log file creation."
)
log_group.add_argument(
    "--log-dir",
    type=str,
    default=os.getcwd(),
    help="Directory for the log file (default is the working directory)"
)
log_group.add_argument(
    "--log-name",
    type=str,
    default=f"{time.time()}_indelcal.log",
    help="Name of the log file"
)
log_group.add_argument(
    "--log-level",
    choices=["DEBUG", "INFO", "WARN", "WARNING", "ERROR"],
    default="INFO",
    help="Lowest severity of log messages to keep"
)
log_group.add_argument(
    "--log-detail",
    choices=["LOW", "MEDIUM", "HIGH"],
    default="MEDIUM",
    help="How much context to print with each log message"
)
log_group.add_argument(
    "--silent-mode",
    default=False,
    action="store_true",
    help="Suppress log messages on stdout"
)

model_group = Group("model", "Indel error model selection")
model_group.add_argument(
    "-m",
    "--model",
    dest="model_name",
    type=str,
    default=DEFAULT_MODEL_NAME,
    help=f"Name of the indel error model. Built-in models are {', '.join(BUILT_IN_MODEL_NAMES)}. "
         f"With --model-file, the name of a model in that file. Default: {DEFAULT_MODEL_NAME}"
)
model_group.add_argument(
    "-f",
    "--model-file",
    dest="model_file",
    type=str,
    default="",
    help="JSON (optionally gzipped) indel error calibration file holding the model."
)

output_group = Group("output")
output_group.add_argument(
    "-o",
    "--output_dir",
    dest="output_dir",
    type=str,
    help="Path to the output directory. Will create if not present.",
    default=os.getcwd()
)
output_group.add_argument(
    "-p",
    "--prefix",
    dest="prefix",
    type=str,
    help="Prefix to use to name files",
    default="indelcal"
)
