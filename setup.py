#!/usr/bin/env python3


__author__ = 'indelcal developers'
__copyright__ = 'Copyright (c) 2017-2026'
__license__ = 'GPLv3'
__version__ = '1.0.0'
__status__ = 'prod'

import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open('requirements.txt') as f:
    required = [line for line in f.read().splitlines() if line and not line.startswith('#')]

setuptools.setup(
    name="indelcal",
    version=__version__,
    author=__author__,
    description="Indel sequencing error models for small variant calling",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Development Status :: 5 - Production/Stable",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    install_requires=required,
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "indelcal=indelcal.cli:run",
        ],
    },
)
