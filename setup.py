#! /usr/bin/env python
#
# Copyright (c) 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from setuptools import setup, find_packages
from pathlib import Path


with Path(__file__).parent.joinpath('README.rst').open() as readme:
    long_description = readme.read()


setup(
    name='libsedml',
    version='1.0.0',
    packages=find_packages(include=['libsedml*']),
    package_data={
        'libsedml': ['py.typed', 'locale/**/*.mo', 'locale/**/*.po'],
    },
    entry_points={
        'console_scripts': [
            'sedml-validate=libsedml.cli:validate',
            'sedml2json=libsedml.cli:sedml2json',
        ]
    },
    python_requires='>=3.9',
    install_requires=['elementpath>=4.4.0, <5.0.0', 'lxml', 'python-libsbml'],
    extras_require={
        'dev': ['tox', 'coverage', 'lxml', 'elementpath>=4.4.0, <5.0.0',
                'python-libsbml', 'Sphinx', 'sphinx_rtd_theme', 'flake8',
                'mypy', 'lxml-stubs'],
        'docs': ['elementpath>=4.4.0, <5.0.0', 'lxml', 'python-libsbml',
                 'Sphinx', 'sphinx_rtd_theme']
    },
    author='Davide Brunato',
    author_email='brunato@sissa.it',
    url='https://github.com/sissaschool/libsedml',
    license='MIT',
    license_file='LICENSE',
    description='A library for reading, writing and validating SED-ML documents',
    long_description=long_description,
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing :: Markup :: XML',
    ]
)
