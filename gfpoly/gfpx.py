"""This module supports arithmetic with polynomials over GF(p), for prime p.

Polynomials over GF(p) are represented as coefficient tuples.
The polynomial a_0 + a_1 X + ... + a_n X^n corresponds
to the tuple (a_0, a_1, ... , a_n) of integers in {0, ... , p-1}.
Leading coefficient a_n is nonzero, except for the zero polynomial,
which is represented by (0,) and has degree 0 by convention.
Use is_zero() or bool() to tell the zero polynomial apart from nonzero constants.

The operators +,-,*,<<,>>,//,%,** and function divmod are overloaded.
The operators <,<=,>,>=,==,!= are overloaded as well, using the order of
the base-p encodings of polynomials (zero polynomial is the smallest).
Coefficients are accessed using Python indexing.

GCD, Euclidean division with remainder and modular powers are all supported.
Irreducibility is decided by Rabin's test, and a basic routine to find
the next largest irreducible polynomial is provided as well.

Polynomials of different types (that is, over different fields GF(p))
cannot be mixed, and all operations return new polynomials.
"""

import functools
import logging
from gfpoly import gmpy as gmpy2
from gfpoly.errors import DivisionByZeroPolynomial, NotPrimeModulus

X = 'x'  # symbol for indeterminate in polynomials


@functools.cache
def GFpX(p):
    """Create type for polynomials over GF(p)."""
    if p < 2 or not gmpy2.is_prime(p):
        raise NotPrimeModulus(f'modulus {p} is not prime')

    GFpPolynomial = type(f'GF({p})[{X}]', (Polynomial,), {'__slots__': ()})
    GFpPolynomial.p = p
    globals()[f'GF({p})[{X}]'] = GFpPolynomial  # NB: exploit unique name dynamic Polynomial type
    return GFpPolynomial


class Polynomial:
    """Polynomials over GF(p) represented as tuples of integers in {0, ... , p-1}.

    Invariant: attribute 'value' is a nonempty tuple whose last element is nonzero,
    unless 'value' is (0,) representing the zero polynomial.
    """

    __slots__ = 'value'

    p = None

    def __init__(self, value=0, check=True):
        """Initialize polynomial to given value (zero polynomial, by default).

        Coefficient lists are reduced modulo p, and leading zeros are removed.
        """
        if check:
            value = self._intern(value)
        self.value = tuple(value)

    @classmethod
    def _intern(cls, a):
        # convert a to cls internal format, if possible
        a = cls._coerce(a)
        if a is NotImplemented:
            raise TypeError(f'polynomial over GF({cls.p}) expected')

        return a

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, Polynomial):
            if not isinstance(a, cls):
                raise TypeError(f'polynomial of type {cls.__name__} expected')

            return a.value

        if isinstance(a, int):
            return cls._from_int(a)

        if isinstance(a, str):
            return cls._from_terms(a)

        if isinstance(a, (list, tuple)):
            if not all(isinstance(a_i, int) for a_i in a):
                raise TypeError('polynomial coefficients must be integers')

            return cls._normalize(a)

        return NotImplemented

    @property
    def modulus(self):
        """Prime modulus p of the coefficient field GF(p)."""
        return type(self).p

    @property
    def coefficients(self):
        """Coefficients a_0, a_1, ..., a_n as a tuple."""
        return self.value

    def __int__(self):
        return self._to_int(self.value)

    def __getitem__(self, key):  # NB: no set_item to prevent mutability
        if isinstance(key, slice):
            raise IndexError('slicing of polynomials not supported, use coefficients instead')

        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials')

        if key < 0:
            raise IndexError('negative index not allowed for polynomials')

        try:
            v = self.value[key]
        except IndexError:
            v = 0
        return v

    def __iter__(self):
        yield from self.value

    def __call__(self, x):
        """Evaluate polynomial at given x."""
        p = type(self).p
        x = x % p
        y = 0
        for c in reversed(self.value):
            y *= x
            y += c
            y %= p
        return y

    @classmethod
    def _normalize(cls, a):
        p = cls.p
        c = [a_i % p for a_i in a] or [0]
        return cls._strip(c)

    @staticmethod
    def _strip(c):
        # remove leading zeros in place, keeping at least one coefficient
        while len(c) > 1 and not c[-1]:
            c.pop()
        return c

    @staticmethod
    def _is_zero(a):
        return len(a) == 1 and a[0] == 0

    @classmethod
    def _from_int(cls, a):
        p = cls.p
        neg = a < 0
        if neg:
            a = -a
        c = []
        while a:
            a, r = divmod(a, p)
            c.append(p - r if neg and r else r)
        return c or [0]

    @classmethod
    def _to_int(cls, a):
        p = cls.p
        s = 0
        for a_i in reversed(a):
            s *= p
            s += a_i
        return s

    @classmethod
    def _from_terms(cls, s, x=X):
        d = {}
        s = ''.join(s.split())  # remove all whitespace
        for term in s.split('+'):
            try:
                if term.find(x) == -1:
                    c = int(term)
                    i = 0
                elif term.endswith(x):
                    c = term[:-1]
                    c = 1 if c == '' else int(c)
                    i = 1
                else:
                    c, i = term.split(f'{x}^')
                    c = 1 if c == '' else int(c)
                    i = int(i)
            except Exception as exc:
                raise ValueError('ill formatted polynomial') from exc

            if i < 0:
                raise ValueError('negative exponent in polynomial')

            d[i] = d.get(i, 0) + c

        m = max(d.keys(), default=0)
        a = [0] * (m+1)
        for i, c in d.items():
            a[i] = c
        return cls._normalize(a)

    @classmethod
    def _to_terms(cls, a, x=X):
        if cls._is_zero(a):
            return '0'

        terms = []
        for i in range(len(a) - 1, -1, -1):
            if a[i]:
                c = '' if a[i] == 1 else a[i]
                if i == 0:
                    terms.append(f'{a[i]}')  # x^0 = 1
                elif i == 1:
                    terms.append(f'{c}{x}')  # x^1 = x
                else:
                    terms.append(f'{c}{x}^{i}')
        return '+'.join(terms)

    @staticmethod
    def _to_display(a, x=X):
        # every coefficient shown, constant term without x^0
        terms = [f'{a[i]}{x}^{i}' for i in range(len(a) - 1, 0, -1)]
        terms.append(f'{a[0]}')
        return ' + '.join(terms)

    @staticmethod
    def _deg(a):
        return len(a) - 1

    @classmethod
    def _monic(cls, a):
        a1 = a[-1]
        if a1 in (0, 1):
            return list(a)

        p = cls.p
        a1 = gmpy2.mod_inverse(a1, p)
        return [(a_i * a1) % p for a_i in a]

    @classmethod
    def _neg(cls, a):
        p = cls.p
        return [0 if a_i == 0 else p - a_i for a_i in a]

    @classmethod
    def _add(cls, a, b):
        p = cls.p
        if len(a) < len(b):
            a, b = b, a
        # len(a) >= len(b)
        c = list(a)
        for i, b_i in enumerate(b):
            c[i] += b_i
            if c[i] >= p:
                c[i] -= p
        return cls._strip(c)

    @classmethod
    def _sub(cls, a, b):
        p = cls.p
        c = list(a) + [0] * (len(b) - len(a))
        for i, b_i in enumerate(b):
            c[i] -= b_i
            if c[i] < 0:
                c[i] += p
        return cls._strip(c)

    @classmethod
    def _mul(cls, a, b):
        p = cls.p
        if len(a) > len(b):
            a, b = b, a
        # len(a) <= len(b)
        c = [0] * (len(a) + len(b) - 1)
        for i, a_i in enumerate(a):
            if a_i:
                for j, b_j in enumerate(b):
                    c[i + j] += a_i * b_j
        for i in range(len(c)):
            c[i] %= p
        return cls._strip(c)

    @classmethod
    def _lshift(cls, a, n):
        if cls._is_zero(a):
            return [0]

        return [0] * n + list(a)

    @staticmethod
    def _rshift(a, n):
        return list(a[n:]) or [0]

    @classmethod
    def _mod(cls, a, b):
        if b is None:  # see _powmod()
            return a

        return cls._divmod(a, b)[1]

    @classmethod
    def _divmod(cls, a, b):
        p = cls.p
        if cls._is_zero(b):
            raise DivisionByZeroPolynomial('division by zero polynomial')

        m = len(a)
        n = len(b)
        if m < n:
            return [0], list(a)

        b1 = gmpy2.mod_inverse(b[-1], p)
        q, r = [0] * (m - n + 1), list(a)
        while not cls._is_zero(r) and len(r) >= n:
            i = len(r) - n
            q[i] = q_i = (r[-1] * b1) % p
            for j, b_j in enumerate(b):
                r[i + j] = (r[i + j] - q_i * b_j) % p
            cls._strip(r)
        return cls._strip(q), r

    @classmethod
    def _powmod(cls, a, n, modulus=None):
        if n < 0:
            raise ValueError('negative exponent')

        c = cls._mod([1], modulus)
        b = cls._mod(list(a), modulus)
        while n > 0:
            if n & 1:
                c = cls._mul(c, b)
                c = cls._mod(c, modulus)
            b = cls._mul(b, b)
            b = cls._mod(b, modulus)
            n >>= 1
        return c

    @classmethod
    def _powx(cls, n, modulus):
        return cls._powmod([0, 1], n, modulus=modulus)

    @classmethod
    def _gcd(cls, a, b, monic=False):
        while not cls._is_zero(b):
            a, b = b, cls._mod(a, b)
        if monic:
            return cls._monic(a)

        return list(a)

    @classmethod
    def _is_irreducible(cls, a):
        p = cls.p
        n = cls._deg(a)
        if n <= 0:
            return False

        x = [0, 1]
        t = cls._mod(cls._sub(cls._powx(gmpy2.int_pow(p, n), a), x), a)
        if not cls._is_zero(t):
            logging.debug(f'Reducible {cls._to_terms(a)}: {X}^({p}^{n}) != {X} modulo polynomial')
            return False

        for q in gmpy2.prime_divisors(n):
            h = cls._sub(cls._powx(gmpy2.int_pow(p, n // q), a), x)
            g = cls._gcd(a, h)
            if cls._deg(g) > 0:
                logging.debug(f'Reducible {cls._to_terms(a)}: factor {cls._to_terms(g)} '
                              f'in common with {X}^({p}^{n // q}) - {X}')
                return False

        return True

    @classmethod
    def _next_irreducible(cls, a):
        p = cls.p
        a = cls._to_int(a)
        while True:
            a += 1
            if a % p == 0 and a != p:
                a += 1  # skip multiples of X, except X itself
            _a = cls._from_int(a)
            if _a[-1] != 1:  # ensure monic a
                a = p**len(_a) - 1  # continue from X^len(_a)
                continue
            if cls._is_irreducible(_a):
                break

        return _a

    @classmethod
    def from_terms(cls, s, x=X):
        """Convert string s with sum of powers of x to a polynomial."""
        return cls(cls._from_terms(s, x), check=False)

    @classmethod
    def to_terms(cls, a, x=X):
        """Convert polynomial a to a string with sum of powers of x."""
        a = cls._intern(a)
        return cls._to_terms(a, x)

    @classmethod
    def deg(cls, a):
        """Degree of polynomial a (0 if a is zero polynomial)."""
        a = cls._intern(a)
        return cls._deg(a)

    def degree(self):
        """Degree of polynomial (0 for zero polynomial)."""
        return self._deg(self.value)

    def is_zero(self):
        """Test for the zero polynomial."""
        return self._is_zero(self.value)

    def lc(self):
        """Leading coefficient of polynomial (0 for zero polynomial)."""
        return self.value[-1]

    def monic(self):
        """Monic version of polynomial.

        Zero polynomial remains unchanged.
        """
        cls = type(self)
        return cls(cls._monic(self.value), check=False)

    def __neg__(self):
        cls = type(self)
        return cls(cls._neg(self.value), check=False)

    def __pos__(self):
        return self

    @classmethod
    def add(cls, a, b):
        """Add polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._add(a, b), check=False)

    def __add__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._add(self.value, other), check=False)

    __radd__ = __add__

    @classmethod
    def sub(cls, a, b):
        """Subtract polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._sub(a, b), check=False)

    def __sub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(self.value, other), check=False)

    def __rsub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(other, self.value), check=False)

    @classmethod
    def mul(cls, a, b):
        """Multiply polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mul(a, b), check=False)

    def __mul__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(self.value, other), check=False)

    __rmul__ = __mul__

    def __lshift__(self, other):
        """Multiply polynomial by X^other."""
        if not isinstance(other, int):
            return NotImplemented

        if other < 0:
            raise ValueError('negative shift count')

        cls = type(self)
        return cls(cls._lshift(self.value, other), check=False)

    def __rshift__(self, other):
        """Quotient for polynomial divided by X^other."""
        if not isinstance(other, int):
            return NotImplemented

        if other < 0:
            raise ValueError('negative shift count')

        cls = type(self)
        return cls(cls._rshift(self.value, other), check=False)

    def __floordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divmod(self.value, other)[0], check=False)

    def __rfloordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divmod(other, self.value)[0], check=False)

    @classmethod
    def mod(cls, a, b):
        """Reduce polynomial a modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mod(a, b), check=False)

    def __mod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(self.value, other), check=False)

    def __rmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(other, self.value), check=False)

    @classmethod
    def divmod(cls, a, b):
        """Divide polynomial a by polynomial b with remainder, for nonzero b.

        Return q, r satisfying a = q b + r with r zero or deg(r) < deg(b).
        """
        a = cls._intern(a)
        b = cls._intern(b)
        q, r = cls._divmod(a, b)
        return cls(q, check=False), cls(r, check=False)

    def __divmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = cls._divmod(self.value, other)
        return cls(q, check=False), cls(r, check=False)

    def __rdivmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = cls._divmod(other, self.value)
        return cls(q, check=False), cls(r, check=False)

    @classmethod
    def powmod(cls, a, n, b):
        """Polynomial a to the power of n modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._powmod(a, n, modulus=b), check=False)

    @classmethod
    def powx(cls, n, b):
        """Polynomial X to the power of n modulo polynomial b, for nonzero b."""
        b = cls._intern(b)
        return cls(cls._powx(n, b), check=False)

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        return cls(cls._powmod(self.value, other), check=False)

    @classmethod
    def gcd(cls, a, b, monic=False):
        """Greatest common divisor of polynomials a and b.

        The result is only made monic if monic is set, otherwise its leading
        coefficient is the one left by the last nonzero remainder.
        """
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._gcd(a, b, monic=monic), check=False)

    @classmethod
    def is_irreducible(cls, a):
        """Test polynomial a for irreducibility, using Rabin's test.

        Polynomial a of degree n>0 is irreducible over GF(p) if and only if
        X^(p^n) = X modulo a, and gcd(a, X^(p^(n/q)) - X) = 1 for all prime divisors q of n.
        """
        a = cls._intern(a)
        return cls._is_irreducible(a)

    @classmethod
    def next_irreducible(cls, a):
        """Return lexicographically next monic irreducible polynomial > a.

        E.g., X < X+1 < X^2+X+1 < X^3+X+1 < X^3+X^2+1 < ... for p=2.
        """
        a = cls._intern(a)
        return cls(cls._next_irreducible(a), check=False)

    def __str__(self):
        return self._to_display(self.value)

    def __repr__(self):
        return self._to_terms(self.value)

    def __lt__(self, other):
        """Strictly less-than comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) < self._to_int(other)

    def __le__(self, other):
        """Less-than or equal comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) <= self._to_int(other)

    def __eq__(self, other):
        """Equality test."""
        other = self._coerce(other)
        if other is NotImplemented:
            return False

        return self.value == tuple(other)

    def __ge__(self, other):
        """Greater-than or equal comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) >= self._to_int(other)

    def __gt__(self, other):
        """Strictly greater-than comparison."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._to_int(self.value) > self._to_int(other)

    def __ne__(self, other):
        """Negated equality test."""
        other = self._coerce(other)
        if other is NotImplemented:
            return True

        return self.value != tuple(other)

    def __hash__(self):
        """Make polynomials hashable (e.g., for caching)."""
        return hash((type(self).__name__, self.value))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return not self._is_zero(self.value)
