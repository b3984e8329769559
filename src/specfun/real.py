from .bessel import i0, i0e
from .gamma import gammasgn, poch
from .utils.float_types import real_float


class Real:
    """
    A real scalar fixed to its floating point width, with the special
    functions available as methods.

        Real(1.23).gammasgn()              # 1.0
        Real(np.float32(-1.5)).gammasgn()  # 1.0, as numpy.float32

    Results are numpy scalars of the same width as the wrapped value.

    """

    __slots__ = ("_value", "_width")

    def __init__(self, value):
        if isinstance(value, Real):
            value = value.value
        width = real_float(value)
        object.__setattr__(self, "_width", width)
        object.__setattr__(self, "_value", width(value))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable.")

    @property
    def value(self):
        return self._value

    @property
    def width(self):
        return self._width

    def gammasgn(self):
        return gammasgn(self._value)

    def poch(self, m):
        if isinstance(m, Real):
            m = m.value
        return poch(self._value, m)

    def i0(self):
        return i0(self._value)

    def i0e(self):
        return i0e(self._value)

    def __float__(self):
        return float(self._value)

    def __eq__(self, other):
        if isinstance(other, Real):
            other = other.value
        return self._value == other

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return f"Real({self._value!r}, width={self._width.name})"
