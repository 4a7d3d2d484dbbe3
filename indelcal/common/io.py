"""
Functions related to system I/O
"""

import contextlib
import gzip
import logging
import os
import sys

from pathlib import Path
from typing import Callable, Iterator, TextIO
from Bio import bgzf

__all__ = [
    "is_compressed",
    "open_input",
    "open_output",
    "validate_input_path",
    "validate_output_path"
]

_LOG = logging.getLogger(__name__)


def is_compressed(file: str | Path) -> bool:
    """
    Determine if file is gzip compressed. BGZF files are gzip files, so they count too.

    :param file: Path to a file.
    :return: True if file is compressed, False otherwise.

    Note
    ----
    The check reads the first two bytes of the file. ``1f 8b`` is the gzip magic number,
    which no JSON or YAML text file can start with.
    """
    with open(file, "rb") as buffer:
        magic_number = buffer.read(2)
    return magic_number == b"\x1f\x8b"


@contextlib.contextmanager
def open_input(path: str | Path) -> Iterator[TextIO]:
    """
    Opens a text file for reading, whether it is plain, gzipped or bgzipped.

    :param path: The path to the input file.
    :return: The handle to the text file with input data.
    """
    open_: Callable[..., TextIO]
    if is_compressed(path):
        # gzip reads BGZF as well as plain gzip, bgzf.open only reads the former
        open_ = gzip.open
    else:
        open_ = open
    handle = open_(path, "rt", encoding="utf-8")
    try:
        yield handle
    finally:
        handle.close()


@contextlib.contextmanager
def open_output(path: str | Path) -> Iterator[TextIO]:
    """
    Opens a text file for writing, replacing any existing file. Files ending in .gz or .bgz are
    written as BGZF. Callers check for existing files with validate_output_path first.

    If the directory containing the file does not exist, it will be created
    automatically.

    :param path: The path to the output file.
    :return: The handle to the text file where data should be written to.
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    open_: Callable[..., TextIO]
    if {".gz", ".bgz"} & set(output_path.suffixes):
        open_ = bgzf.open
    else:
        open_ = open
    handle = open_(output_path, mode="wt")

    try:
        yield handle
    finally:
        handle.close()


def validate_input_path(path: str | Path):
    """
    Determine if the input path is a readable, non-empty file. Exits if it is not.

    :param path: Path to validate

    Raises
    ------
    5 = FileNotFoundError
        Raised if the input file does not exist or is not a file.
    7 = RuntimeError
        Raised if the input file is empty.
    9 = PermissionError
        Raised if the calling process has no read access to the file.
    """
    path = Path(path)

    if not path.is_file():
        _LOG.error(f"Path '{path}' does not exist or not a file")
        sys.exit(5)
    if path.stat().st_size == 0:
        _LOG.error(f"File '{path}' is empty")
        sys.exit(7)
    if not os.access(path, os.R_OK):
        _LOG.error(f"cannot read from '{path}': access denied")
        sys.exit(9)


def validate_output_path(path: str | Path, is_file: bool = True, overwrite: bool = False):
    """
    Determine if the output path is valid.

    A file path is valid if it does not exist yet, or overwrite is set. A directory path is valid if
    the process can write to it; a missing directory is created.

    :param path: The path to validate.
    :param is_file: (optional) If set, validate the path assuming that it points to a file (default).
    :param overwrite: (optional) If set, an existing file may be overwritten

    Raises
    ------
    3 = FileExistsError
        Raised if path is a file and already exists.
    11 = PermissionError
        Raised if the calling process does not have adequate access rights to.
    """
    path = Path(path)
    if is_file:
        if path.is_file() and not overwrite:
            _LOG.error(f"file '{path}' already exists")
            sys.exit(3)
    elif path.is_dir():
        if not os.access(path, os.W_OK):
            _LOG.error(f"cannot write to '{path}', access denied")
            sys.exit(11)
    else:
        path.mkdir(parents=True, exist_ok=True)
