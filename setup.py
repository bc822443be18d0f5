#!/usr/bin/env python

"""Distutils setup file"""

from setuptools import setup, find_packages

# Metadata
PACKAGE_NAME = "PySwitch"
PACKAGE_VERSION = "0.1.0"

setup(
    name=PACKAGE_NAME,
    version=PACKAGE_VERSION,

    description="Expression-style 'switch' for Python",
    license="PSF or ZPL",

    python_requires=">=3.8",
    install_requires=['zope.interface'],
    extras_require={'test': ['pytest']},

    test_suite  = 'switch.tests.test_suite',
    package_dir = {'':'src'},
    packages    = find_packages('src'),
)
