"""This module defines the errors raised by polynomial arithmetic over GF(p).

All errors derive from PolynomialError. Division-like failures also derive
from ZeroDivisionError and a bad modulus also derives from ValueError, so
callers catching the built-in exception types keep working.

Next to raising, failures can be captured as values: attempt() calls a
function and returns an Outcome, holding either the result or the error.
"""

import collections


class PolynomialError(Exception):
    """Base class for errors in polynomial arithmetic over GF(p)."""


class NotInvertible(PolynomialError, ZeroDivisionError):
    """Modular inverse requested for a non-unit (modulus not prime, or element zero)."""


class DivisionByZeroPolynomial(PolynomialError, ZeroDivisionError):
    """Division by (or reduction modulo) the zero polynomial."""


class NotPrimeModulus(PolynomialError, ValueError):
    """Modulus for the coefficient field is not a prime number."""


class Outcome(collections.namedtuple('Outcome', ['value', 'error'])):
    """Result of an operation: either a value (error is None) or an error."""

    __slots__ = ()

    @property
    def ok(self):
        """True if the operation succeeded."""
        return self.error is None

    def unwrap(self):
        """Return the value, or raise the captured error."""
        if self.error is not None:
            raise self.error

        return self.value


def attempt(func, *args, **kwargs):
    """Call func(*args, **kwargs) and return an Outcome.

    Only PolynomialError is captured, any other exception propagates.
    """
    try:
        value = func(*args, **kwargs)
    except PolynomialError as exc:
        return Outcome(None, exc)

    return Outcome(value, None)
