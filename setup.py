#!/usr/bin/env python
"""
Copyright 2026 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import os
import re

from setuptools import find_packages, setup


def get_version() -> str:
    # importing fixint would require its dependencies to be installed already
    version_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'fixint', 'version.py')
    with open(version_path, 'r') as f:
        match = re.search(r"^BASE_VERSION = '([^']+)'$", f.read(), re.MULTILINE)
    assert match is not None, 'BASE_VERSION not found'
    return match.group(1)


setup(
    name='fixint',
    version=get_version(),
    description='Fixed-width integer packing and unpacking, big-endian and little-endian, signed and unsigned',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License, Version 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('fixint_tests', 'fixint_tests.*')),
    install_requires=[
        'pydantic>=2',
        'PyYAML',
        'structlog',
        'typing_extensions>=4.6',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
