# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

long_description = "Classic and balanced (centered, edge-extrapolated) SMA, WMA, EMA and slope for Python 3"

setup(
    name = "balanced-ma",
    packages = find_packages(exclude=["tests", "tests.*", "scripts"]),
    version = "0.1.0",
    description=long_description,
    long_description=long_description,
    keywords = ['moving average', 'smoothing', 'technical analysis', 'python3', 'pandas'],
    license="The MIT License (MIT)",
    classifiers = [
        'Programming Language :: Python :: 3',
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    python_requires=">=3.8",
    install_requires=['numpy', 'pandas', 'numba'],

    # List additional groups of dependencies here (e.g. development dependencies).
    # You can install these using the following syntax, for example:
    # $ pip install -e .[dev,test]
    extras_require = {
        'dev': ['pytest', 'jupyterlab'],
        'test': ['pytest'],
    },
)
