import numpy as np
from scipy.special import gamma, gammaln

from .gamma_util import is_gamma_pole
from ..utils.float_types import real_float


def lgammafn(x):
    """
    The function lgammafn computes log|gamma(x)| in the width of x.

    NaN is returned as is and the poles of gamma give +Inf. Where gamma(x)
    itself is representable, the log of its magnitude is taken: gamma is
    accurate to a few ulp relative, so the log is accurate to a few ulp
    absolute, which keeps differences of two large log-gamma values
    accurate. Where gamma over- or underflows, scipy.special.gammaln
    (Cephes lgam) is used. The sign of gamma is tracked separately by
    gammasgn().

    """
    real = real_float(x)
    x = real(x)
    if np.isnan(x):
        return x
    if is_gamma_pole(x):
        return real(np.inf)
    g = gamma(x)
    if np.isfinite(g) and g != 0:
        return real(np.log(np.abs(g)))
    return real(gammaln(x))
