import numpy as np

from ..utils.float_types import real_float


def is_gamma_pole(x):
    """
    Determines if x is at a pole of the Gamma function (0, -1, -2, etc).

    -0.0 and -Inf count as poles (both are <= 0 and equal their own
    floor); NaN and positive values never do.

    """
    x = real_float(x)(x)
    return bool(x <= 0 and x == np.floor(x))
