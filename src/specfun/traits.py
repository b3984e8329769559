"""Capability protocols for values that expose the special functions.

These are structural: anything with the right methods satisfies them, no
base class is involved. :class:`specfun.Real` implements both
:class:`RealGamma` and :class:`Bessel`.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Gamma(Protocol):
    """Gamma related functions meaningful for real and complex arguments.

    Nothing is declared yet; the full, log and incomplete gamma functions
    will live here once they are supported.
    """


@runtime_checkable
class RealGamma(Gamma, Protocol):
    """Gamma related functions that are only defined for real arguments."""

    def gammasgn(self):
        """Sign of gamma(self): +1.0, -1.0, or 0.0 at a pole."""
        ...

    def poch(self, m):
        """Pochhammer symbol gamma(self + m) / gamma(self)."""
        ...


@runtime_checkable
class Bessel(Protocol):
    """Modified Bessel functions of the first kind."""

    def i0(self):
        """I0(self)."""
        ...

    def i0e(self):
        """exp(-|self|) I0(self)."""
        ...
