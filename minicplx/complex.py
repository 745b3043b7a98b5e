#!/usr/bin/env python
# coding: utf-8
r"""Complex numbers over a generic scalar field.

A value :math:`z = a + i b` is stored as the pair ``(re, im)``.  The
arithmetic only relies on the operators of the scalar type that each
operation actually needs, so that ``Complex`` also works over ints,
``fractions.Fraction`` or sympy expressions.  :class:`Complex32` and
:class:`Complex64` fix the scalar type to single and double precision;
the polar quantities (norm and argument) are only defined for the latter.
"""

import logging
import math

from minicplx.lib.backend import FLOAT32, FLOAT64, np
from minicplx.lib.tools import __


class Complex(object):
    r"""Immutable complex value ``re + i * im``.

    Parameters
    ----------
    re : T
        Real part.
    im : T
        Imaginary part.

    Attributes
    ----------
    dtype : type, None
        Scalar type the components are coerced to; ``None`` keeps them as
        given.
    zero_division : {'ignore', 'warn', 'raise'}
        What :meth:`div` does with a zero-magnitude divisor.  ``'ignore'``
        leaves it to the scalar type (``inf``/``nan`` for numpy floats),
        ``'warn'`` does the same but logs a warning, ``'raise'`` raises
        ``ZeroDivisionError`` before dividing.
    """
    __slots__ = ('_re', '_im')

    dtype = None
    zero_division = 'ignore'
    zero_division_modes = ('ignore', 'warn', 'raise')

    @classmethod
    def config(cls, **kwargs):
        """Global configuration, shared by Complex and all its subclasses.

        Parameters
        ----------
        zero_division : {'ignore', 'warn', 'raise'}, optional
        """
        for key, value in kwargs.items():
            if key != 'zero_division':
                logging.warning(__('No configuration "{}"!', key))
                continue
            if value not in cls.zero_division_modes:
                raise ValueError("Cannot recognize zero_division {} as any in {}."
                                 .format(value, list(cls.zero_division_modes)))
            setattr(Complex, key, value)
        return

    def __init__(self, re, im):
        if self.dtype is not None:
            re = self.dtype(re)
            im = self.dtype(im)
        self._re = re
        self._im = im
        return

    @property
    def re(self):
        return self._re

    @property
    def im(self):
        return self._im

    def _check(self, other, op):
        if not isinstance(other, Complex):
            raise TypeError(
                "Cannot {} {} and {}, only Complex is supported.".format(
                    op, type(self).__name__, other.__class__.__name__
                )
            )
        return _common_class(type(self), type(other))

    # (a + i b) + (c + i d) == (a + c) + i (b + d)
    def add(self, other):
        cls = self._check(other, 'add')
        return cls(self.re + other.re, self.im + other.im)

    # (a + i b) - (c + i d) == (a - c) + i (b - d)
    def sub(self, other):
        cls = self._check(other, 'subtract')
        return cls(self.re - other.re, self.im - other.im)

    # (a + i b) * (c + i d) == (a*c - b*d) + i (b*c + a*d)
    def mul(self, other):
        cls = self._check(other, 'multiply')
        a, b = self.re, self.im
        c, d = other.re, other.im
        return cls(a * c - b * d, b * c + a * d)

    # (a + i b) / (c + i d) == [(a + i b) * (c - i d)] / (c*c + d*d)
    def div(self, other):
        """Divide by `other` through its conjugate.

        The behaviour for a zero-magnitude `other` follows
        :attr:`zero_division`.
        """
        cls = self._check(other, 'divide')
        a, b = self.re, self.im
        c, d = other.re, other.im
        if self.zero_division != 'ignore' and c == 0 and d == 0:
            if self.zero_division == 'raise':
                raise ZeroDivisionError(
                    "Cannot divide {!r} by zero-magnitude {!r}.".format(self, other)
                )
            logging.warning(__('Division of {!r} by zero-magnitude {!r}', self, other))
        with np.errstate(divide='ignore', invalid='ignore', over='ignore', under='ignore'):
            deno = c * c + d * d
            re = (a * c + b * d) / deno
            im = (b * c - a * d) / deno
        return cls(re, im)

    def conjugate(self):
        cls = type(self)
        return cls(self.re, -self.im)

    def __neg__(self):
        cls = type(self)
        return cls(-self.re, -self.im)

    def __add__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.div(other)

    def __eq__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return bool(self.re == other.re and self.im == other.im)

    def __hash__(self):
        return hash((self.re, self.im))

    def __repr__(self):
        return '{}({}, {})'.format(type(self).__name__, self.re, self.im)


class Complex32(Complex):
    """Single-precision complex value."""
    __slots__ = ()
    dtype = FLOAT32


class Complex64(Complex):
    """Double-precision complex value, with its polar quantities."""
    __slots__ = ()
    dtype = FLOAT64

    def norm(self):
        """Euclidean magnitude ``sqrt(re**2 + im**2)``.

        Returns
        -------
        norm : float
        """
        return math.sqrt(self.re * self.re + self.im * self.im)

    def arg(self):
        """Phase angle in radians, in ``(-pi, pi]``, as given by ``atan2``.

        Returns
        -------
        arg : float
        """
        return math.atan2(self.im, self.re)


def _common_class(cls1, cls2):
    if issubclass(cls2, cls1):
        return cls2
    elif issubclass(cls1, cls2):
        return cls1
    elif cls1.dtype is not None and cls2.dtype is not None:
        dtype = np.promote_types(cls1.dtype, cls2.dtype)
        for cls in (cls1, cls2):
            if np.dtype(cls.dtype) == dtype:
                return cls
    return cls1


def _check_complex64(c, name):
    if not isinstance(c, Complex64):
        raise TypeError(
            "{} is only defined for Complex64, not {}".format(
                name, c.__class__.__name__
            )
        )
    return c


def norm(c):
    """Magnitude of a :class:`Complex64`."""
    return _check_complex64(c, 'norm').norm()


def arg(c):
    """Argument of a :class:`Complex64`."""
    return _check_complex64(c, 'arg').arg()
