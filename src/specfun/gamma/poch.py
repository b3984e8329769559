import logging

import numpy as np

from .gamma_util import is_gamma_pole
from .gammasgn import gammasgn
from .lgammafn import lgammafn
from ..utils.float_types import real_float

log = logging.getLogger(__name__)


def poch(x, m):
    """
    The Pochhammer symbol (rising factorial) for real x and m

        poch(x, m) = gamma(x + m) / gamma(x)

    Integer steps of m are peeled off by direct multiplication (m >= 1) or
    division (m <= -1), which makes every integer m exact. What is left is
    either handled by a four term asymptotic series for x > MIN_FOR_EXP, or
    by the difference of log|gamma| with the signs tracked by gammasgn().

    Edge values: poch(0, 0) = 1, poch(0, 0.25) = 0, poch(-2, 1) = -2. The
    last one is gamma(-1)/gamma(-2), which is undefined, but the recursion
    gamma(x + 1) = x gamma(x) gives -2 and that is what SciPy returns too.

    Arguments:
        x (float): Base of the symbol

        m (float): Number of rising steps, any real value

    Returns:
        (float) The ratio in the common width of x and m. NaN where gamma(x + m)
        has a pole that gamma(x) does not cancel, 0.0 where only gamma(x)
        has one.

    """
    with np.errstate(over="ignore", under="ignore", divide="ignore", invalid="ignore"):
        return _poch(x, m)


def _poch(x, m):
    real = real_float(x, m)
    x = real(x)
    m = real(m)
    one = real(1)
    r = one

    while m >= one:
        if x + m == one:
            break
        m -= one
        r *= x + m
        if not np.isfinite(r) or r == 0:
            break

    while m <= -one:
        if x + m == one:
            break
        r /= x + m
        m += one
        if not np.isfinite(r) or r == 0:
            break

    if m == 0:
        log.debug("poch: integer steps only, result %s", r)
        return r

    if x > real.min_for_exp and abs(m) <= one:
        log.debug("poch: asymptotic expansion at x=%s, remaining m=%s", x, m)
        return r * _poch_asymptotic(x, m, real)

    if is_gamma_pole(x + m) and not is_gamma_pole(x) and x + m != m:
        log.debug("poch: gamma(%s) has an uncancelled pole", x + m)
        return real(np.nan)

    if not is_gamma_pole(x + m) and is_gamma_pole(x):
        log.debug("poch: gamma(%s) has a pole, ratio is zero", x)
        return real(0)

    log.debug("poch: log-gamma difference at x=%s, remaining m=%s", x, m)
    return r * np.exp(lgammafn(x + m) - lgammafn(x)) * gammasgn(x + m) * gammasgn(x)


def _poch_asymptotic(x, m, real):
    # x**m * (1 + m(m-1)/2x + m(m-1)(m-2)(3m-1)/24x^2 + m^2(m-1)^2(m-2)(m-3)/48x^3)
    one, two, three = real(1), real(2), real(3)
    return np.power(x, m) * (
        one
        + m * (m - one) / (two * x)
        + m * (m - one) * (m - two) * (three * m - one) / (real(24) * x * x)
        + m * m * (m - one) * (m - one) * (m - two) * (m - three) / (real(48) * x * x * x)
    )
