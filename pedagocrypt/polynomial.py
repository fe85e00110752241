"""Polynomials in the monomial basis over a prime field."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import reduce
from operator import add

from .lagrange import LagrangePolynomial, dft as _dft

__all__ = ["Polynomial", "sum_polynomials", "trim_zeros"]


def trim_zeros(coefficients: Sequence[int]) -> list[int]:
    """Return ``coefficients`` without trailing (highest-degree) zeros."""
    trimmed = list(coefficients)
    while trimmed and trimmed[-1] == 0:
        trimmed.pop()
    return trimmed


def _last_nonzero(coefficients: Sequence[int]) -> int | None:
    for index in range(len(coefficients) - 1, -1, -1):
        if coefficients[index] != 0:
            return index
    return None


@dataclass(frozen=True)
class Polynomial:
    """A polynomial with a fixed number of coefficients, lowest degree first.

    Coefficients are integers reduced modulo the prime ``modulus``.
    """

    coefficients: tuple[int, ...]
    modulus: int

    def __init__(self, coefficients: Iterable[int], modulus: int) -> None:
        if modulus < 2:
            raise ValueError(f"modulus must be a prime, got {modulus}")
        object.__setattr__(self, "coefficients", tuple(c % modulus for c in coefficients))
        object.__setattr__(self, "modulus", modulus)

    def _check_field(self, other: Polynomial) -> None:
        if self.modulus != other.modulus:
            raise ValueError(
                f"polynomials over different fields: {self.modulus} and {other.modulus}"
            )

    def num_terms(self) -> int:
        """Return the number of coefficients."""
        return len(self.coefficients)

    def degree(self) -> int:
        """Return the index of the highest non-zero coefficient, or 0 for the zero polynomial."""
        index = _last_nonzero(self.coefficients)
        return 0 if index is None else index

    def leading_coefficient(self) -> int:
        """Return the highest non-zero coefficient, or 0 for the zero polynomial."""
        index = _last_nonzero(self.coefficients)
        return 0 if index is None else self.coefficients[index]

    def evaluate(self, x: int) -> int:
        """Evaluate the polynomial at ``x``."""
        p = self.modulus
        return sum(c * pow(x, i, p) for i, c in enumerate(self.coefficients)) % p

    def pow_mult(self, power: int, coeff: int) -> Polynomial:
        """Return this polynomial times ``coeff * x**power``, with ``power`` more terms."""
        if power < 0:
            raise ValueError("power must be non-negative")
        shifted = [0] * power + [c * coeff for c in self.coefficients]
        return Polynomial(shifted, self.modulus)

    def resized(self, length: int) -> Polynomial:
        """Return a copy with ``length`` terms, truncating or zero-padding as needed."""
        if length < 0:
            raise ValueError("length must be non-negative")
        coeffs = list(self.coefficients[:length])
        coeffs.extend([0] * (length - len(coeffs)))
        return Polynomial(coeffs, self.modulus)

    def quotient_and_remainder(self, divisor: Polynomial) -> tuple[Polynomial, Polynomial]:
        """Euclidean division; both results keep this polynomial's number of terms.

        Raises ``ZeroDivisionError`` when a division step needs the zero divisor.
        """
        self._check_field(divisor)
        p = self.modulus
        size = self.num_terms()
        quotient = [0] * size
        remainder = list(self.coefficients)
        divisor_coeffs = divisor.coefficients
        divisor_degree = _last_nonzero(divisor_coeffs)

        while any(remainder) and len(remainder) >= len(divisor_coeffs):
            if divisor_degree is None:
                raise ZeroDivisionError("polynomial division by zero")
            rem_degree = _last_nonzero(remainder)
            if rem_degree < divisor_degree:
                break
            diff = rem_degree - divisor_degree
            scale = remainder[rem_degree] * pow(divisor_coeffs[divisor_degree], -1, p) % p
            quotient[diff] = scale
            for i, coeff in enumerate(divisor_coeffs[: divisor_degree + 1]):
                remainder[diff + i] = (remainder[diff + i] - coeff * scale) % p
            remainder = trim_zeros(remainder)

        remainder.extend([0] * (size - len(remainder)))
        return Polynomial(quotient, p), Polynomial(remainder[:size], p)

    def dft(self) -> LagrangePolynomial:
        """Evaluate at the roots of unity, giving the polynomial in the Lagrange basis.

        Raises ``ValueError`` if the field has no roots of unity of this order.
        """
        return _dft(self.coefficients, self.modulus)

    def __add__(self, other: object) -> Polynomial:
        """Add coefficient-wise; the result keeps this polynomial's number of terms."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_field(other)
        padded = other.resized(self.num_terms()).coefficients
        return Polynomial((a + b for a, b in zip(self.coefficients, padded)), self.modulus)

    def __sub__(self, other: object) -> Polynomial:
        """Subtract coefficient-wise; the result keeps this polynomial's number of terms."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_field(other)
        padded = other.resized(self.num_terms()).coefficients
        return Polynomial((a - b for a, b in zip(self.coefficients, padded)), self.modulus)

    def __neg__(self) -> Polynomial:
        return Polynomial((-c for c in self.coefficients), self.modulus)

    def __mul__(self, other: object) -> Polynomial:
        """Multiply; the result has ``len(self) + len(other) - 1`` terms."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_field(other)
        product = [0] * (self.num_terms() + other.num_terms() - 1)
        for i, a in enumerate(self.coefficients):
            for j, b in enumerate(other.coefficients):
                product[i + j] += a * b
        return Polynomial(product, self.modulus)

    def __floordiv__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.quotient_and_remainder(other)[0]

    def __mod__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.quotient_and_remainder(other)[1]

    def __str__(self) -> str:
        return " + ".join(
            str(c) if i == 0 else f"{c}x^{i}" for i, c in enumerate(self.coefficients)
        )


def sum_polynomials(polynomials: Iterable[Polynomial]) -> Polynomial:
    """Add up polynomials left to right; the result has the first one's number of terms."""
    items = list(polynomials)
    if not items:
        raise ValueError("cannot sum an empty collection of polynomials")
    return reduce(add, items)