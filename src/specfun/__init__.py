"""
Real-valued special functions evaluated in single or double precision.

The width of an evaluation follows its arguments: numpy.float32 scalars run
in single precision, numpy.float64 scalars and Python numbers in double.
"""

__version__ = '0.1.0'

import logging

from .utils import chbevl, RealFloat, FLOAT32, FLOAT64, real_float
from .gamma import gammasgn, poch, is_gamma_pole
from .bessel import i0, i0e
from .traits import Gamma, RealGamma, Bessel
from .real import Real

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ['__version__',
           'gammasgn',
           'poch',
           'is_gamma_pole',
           'i0',
           'i0e',
           'chbevl',
           'Real',
           'RealFloat',
           'FLOAT32',
           'FLOAT64',
           'real_float',
           'Gamma',
           'RealGamma',
           'Bessel']
