import math
import numbers
from dataclasses import dataclass

import numpy as np

from ..constants import MIN_FOR_EXP


@dataclass(frozen=True)
class RealFloat:
    """
    A supported floating point width. Calling it casts a value to that width.

    All of the special functions are written once against this object; the
    width of the arguments decides which instance they run with.

    """

    name: str
    type: type
    bits: int

    def __call__(self, value):
        """
        Cast a real value to this width.

        Python numbers too large for a float (e.g. 10**400) saturate to
        +-Inf instead of raising OverflowError, as does any value beyond
        the range of the width.

        """
        if not isinstance(value, np.generic):
            try:
                value = float(value)
            except OverflowError:
                value = math.inf if value > 0 else -math.inf
        with np.errstate(over="ignore"):
            return self.type(value)

    @property
    def eps(self):
        return np.finfo(self.type).eps

    @property
    def min_for_exp(self):
        return self.type(MIN_FOR_EXP)

    def table(self, coefficients):
        """
        Cast a coefficient table to this width. Nothing is cached: the
        module level tables are cast once at import by their users.

        """
        return tuple(self(c) for c in coefficients)


FLOAT32 = RealFloat("float32", np.float32, 32)
FLOAT64 = RealFloat("float64", np.float64, 64)

_WIDTHS = {np.dtype(np.float32): FLOAT32, np.dtype(np.float64): FLOAT64}


def _strong_width(value):
    # numpy float scalars carry their width, Python numbers adapt to the other arguments
    if isinstance(value, np.ndarray):
        raise TypeError(
            f"specfun evaluates scalars only; got an array of shape {value.shape}."
        )
    if isinstance(value, (complex, np.complexfloating)):
        raise TypeError("Complex arguments are not supported.")
    if isinstance(value, np.floating):
        try:
            return _WIDTHS[value.dtype]
        except KeyError:
            raise TypeError(f"Unsupported floating point width: {value.dtype}.") from None
    if isinstance(value, numbers.Real):
        return None
    raise TypeError(f"Expected a real number; got {type(value).__name__}.")


def real_float(*values):
    """
    Resolve the width an evaluation runs in.

    Arguments:
        values: The scalar arguments of a single call

    Returns:
        (RealFloat) FLOAT32 or FLOAT64. The widest numpy float among the
        arguments wins; plain Python numbers resolve to FLOAT64 on their own.

    """
    width = None
    for value in values:
        strong = _strong_width(value)
        if strong is not None and (width is None or strong.bits > width.bits):
            width = strong
    return FLOAT64 if width is None else width
