"""Polynomials in the Lagrange basis over a prime field, with roots of unity as nodes."""

from __future__ import annotations

from collections.abc import Iterable
from math import prod

__all__ = ["LagrangePolynomial", "dft", "primitive_root_of_unity"]


def _prime_factors(n: int) -> list[int]:
    factors = []
    candidate = 2
    while candidate * candidate <= n:
        if n % candidate == 0:
            factors.append(candidate)
            while n % candidate == 0:
                n //= candidate
        candidate += 1
    if n > 1:
        factors.append(n)
    return factors


def _multiplicative_generator(modulus: int) -> int:
    """Return the smallest generator of the multiplicative group modulo a prime."""
    order = modulus - 1
    factors = _prime_factors(order)
    for g in range(1, modulus):
        if all(pow(g, order // q, modulus) != 1 for q in factors):
            return g
    raise ValueError(f"{modulus} has no multiplicative generator")


def primitive_root_of_unity(n: int, modulus: int) -> int:
    """Return a primitive ``n``-th root of unity in the field of integers modulo ``modulus``.

    Raises ``ValueError`` when ``n`` does not divide the order of the multiplicative group.
    """
    if n <= 0 or (modulus - 1) % n != 0:
        raise ValueError(f"no primitive {n}-th root of unity modulo {modulus}")
    generator = _multiplicative_generator(modulus)
    return pow(generator, (modulus - 1) // n, modulus)


class LagrangePolynomial:
    """A polynomial given by its values at the powers of a primitive root of unity."""

    def __init__(self, coefficients: Iterable[int], modulus: int) -> None:
        coeffs = tuple(c % modulus for c in coefficients)
        if not coeffs:
            raise ValueError("a polynomial needs at least one coefficient")
        root = primitive_root_of_unity(len(coeffs), modulus)
        self.coefficients = coeffs
        self.modulus = modulus
        self.nodes = tuple(pow(root, i, modulus) for i in range(len(coeffs)))

    def num_terms(self) -> int:
        """Return the number of independent terms."""
        return len(self.coefficients)

    def evaluate(self, x: int) -> int:
        """Evaluate the polynomial at ``x`` by barycentric interpolation."""
        p = self.modulus
        x %= p
        for node, value in zip(self.nodes, self.coefficients):
            if node == x:
                return value

        node_poly = prod(x - node for node in self.nodes) % p
        total = 0
        for j, (node_j, value) in enumerate(zip(self.nodes, self.coefficients)):
            denominator = prod(node_j - node_m for m, node_m in enumerate(self.nodes) if m != j)
            total += value * pow(denominator * (x - node_j) % p, -1, p)
        return node_poly * total % p

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LagrangePolynomial):
            return NotImplemented
        return (self.coefficients, self.modulus) == (other.coefficients, other.modulus)

    def __hash__(self) -> int:
        return hash((self.coefficients, self.modulus))

    def __repr__(self) -> str:
        return f"LagrangePolynomial({list(self.coefficients)!r}, modulus={self.modulus})"

    def __str__(self) -> str:
        return " + ".join(
            f"{value}*l_{node}(x)" for value, node in zip(self.coefficients, self.nodes)
        )


def dft(coefficients: Iterable[int], modulus: int) -> LagrangePolynomial:
    """Evaluate a monomial-basis polynomial at the roots of unity.

    Returns the polynomial in the Lagrange basis whose nodes are those roots.
    """
    coeffs = [c % modulus for c in coefficients]
    n = len(coeffs)
    root = primitive_root_of_unity(n, modulus)
    values = [
        sum(c * pow(root, i * j, modulus) for j, c in enumerate(coeffs)) % modulus
        for i in range(n)
    ]
    return LagrangePolynomial(values, modulus)