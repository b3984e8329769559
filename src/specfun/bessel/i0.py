import numpy as np

from ..constants import I0_A, I0_B
from ..utils.chebyshev import chbevl_cast
from ..utils.float_types import FLOAT32, FLOAT64, real_float

# Tables cast once per width
_I0_TABLES = {real: (real.table(I0_A), real.table(I0_B)) for real in (FLOAT32, FLOAT64)}


def i0(x):
    """
    Modified Bessel function of the first kind, order zero.

    The range is split at |x| = 8: on [0, 8] a Chebyshev expansion of
    exp(-x) I0(x) is used, above 8 one of exp(-x) sqrt(x) I0(x) in 8/x.
    Both are then scaled back by exp(|x|).

    Returns +Inf for +-Inf and NaN for NaN. Overflows to +Inf once exp(|x|)
    does (|x| > ~88.7 in float32, ~709.8 in float64).

    """
    real = real_float(x)
    x = np.abs(real(x))
    if not np.isfinite(x):
        return x
    with np.errstate(over="ignore"):
        return np.exp(x) * _i0e_abs(x, real)


def i0e(x):
    """
    Exponentially scaled modified Bessel function of order zero,
    exp(-|x|) I0(x).

    """
    real = real_float(x)
    return _i0e_abs(np.abs(real(x)), real)


def _i0e_abs(x, real):
    table_a, table_b = _I0_TABLES[real]
    if x <= real(8):
        return chbevl_cast(x / real(2) - real(2), table_a)
    return chbevl_cast(real(32) / x - real(2), table_b) / np.sqrt(x)
