from .float_types import real_float


def chbevl(x, coefficients):
    '''
    Evaluates the Chebyshev series

        y = sum c[i] T_i(x/2), i = 0..N-1

    with the coefficients stored in reverse order, highest degree first,
    so that c[0] is the last entry. The argument is expected in [-2, 2]:
    callers map their own interval onto it before calling.

    The coefficients are cast to the width of x on every call.

    Adapted from the Cephes routine written by Stephen L. Moshier

    '''
    real = real_float(x)
    coef = real.table(coefficients)
    if not coef:
        raise ValueError("chbevl() needs at least one coefficient.")
    return chbevl_cast(real(x), coef)


def chbevl_cast(x, coef):
    '''
    chbevl() for an argument and a non-empty table already in one width.

    '''
    zero = type(x)(0)
    b0 = coef[0]
    b1 = zero
    b2 = zero
    for c in coef[1:]:
        b2 = b1
        b1 = b0
        b0 = x * b1 - b2 + c
    return (b0 - b2) * type(x)(0.5)
