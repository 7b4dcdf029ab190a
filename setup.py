#!/usr/bin/env python3

from setuptools import setup, find_packages

requires = [
    "sqlalchemy (>=1.4,<3.0)",
]

extras = {
    "test": ["pytest (>=7.0)"],
}

setup(name='Yard-calc',
      version='1.0.0',
      description='Command line calculator without operator precedence',
      author='BHodges',
      install_requires=requires,
      extras_require=extras,
      scripts=['yard-calc.py'],
      packages=find_packages(exclude=['tests']))
