import numpy as np

from .gamma_util import is_gamma_pole
from ..utils.float_types import real_float


def gammasgn(x):
    """
    Sign of the gamma function.

        gammasgn(x) = +1.0 if gamma(x) > 0
                      -1.0 if gamma(x) < 0

    Gamma is never zero on the real line, so this is well defined except at
    the poles x = 0, -1, -2, ..., where 0.0 is returned. NaN and +-Inf are
    returned unchanged.

    Between two negative poles the sign alternates: it is -1 on (-2k-1, -2k)
    and +1 on (-2k-2, -2k-1), so gammasgn(-0.23) is -1.0 and gammasgn(-1.5)
    is +1.0.

    Arguments:
        x (float): The argument, evaluated in its own width

    Returns:
        (float) +1.0, -1.0 or 0.0 in the width of x

    """
    real = real_float(x)
    x = real(x)
    if not np.isfinite(x):
        return x
    if is_gamma_pole(x):
        return real(0)
    if not np.signbit(x):
        return real(1)
    # Every float of magnitude >= 2**mantissa_bits is an integer (a pole),
    # so the floor below is always small enough to convert exactly.
    if int(np.floor(-x)) & 1:
        return real(1)
    return real(-1)
