# SPDX-License-Identifier: MPL-2.0
#
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
#
# Copyright (c) 2026 Xueling Lin

import os

from setuptools import setup, find_packages


project_name = "remotelock"
this_directory = os.path.abspath(os.path.dirname(__file__))


def read_version():
    """Function to read the package version without importing the package."""
    init_path = os.path.join(this_directory, project_name, "__init__.py")
    with open(init_path, encoding="utf-8") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"\'')
    raise RuntimeError("Unable to find __version__ in remotelock/__init__.py")


setup(
    name=project_name,
    version=read_version(),
    description="Named, time-bounded distributed locks backed by a shared store",
    license="MPL-2.0",
    python_requires=">=3.8",
    packages=find_packages(include=[project_name, f"{project_name}.*"]),
    install_requires=[
        "redis>=4.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
