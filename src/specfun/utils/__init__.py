from .float_types import RealFloat, FLOAT32, FLOAT64, real_float
from .chebyshev import chbevl
