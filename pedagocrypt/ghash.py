"""GHASH, the authentication function of AES-GCM, over GF(2^128).

A field element is a sequence of 128 bits; bit ``i`` is the coefficient of
``α^i``. Bytes map to bits most significant bit first, so the first bit of
the first byte is the constant term. The field polynomial is
``f = 1 + α + α^2 + α^7 + α^128``.
"""

from __future__ import annotations

from collections.abc import Sequence

from .polynomial import Polynomial

__all__ = [
    "GHash",
    "bits_from_int",
    "bits_to_bytes",
    "block_to_bits",
    "field_multiply",
    "field_multiply_spec",
]

_FIELD_BITS = 128
_BLOCK_BYTES = _FIELD_BITS // 8

# Coefficients of f = 1 + α + α^2 + α^7 + α^128, lowest degree first.
_FIELD_POLYNOMIAL = Polynomial(
    (1 if i in (0, 1, 2, 7, 128) else 0 for i in range(_FIELD_BITS + 1)), 2
)

# R = 11100001 || 0^120, the reduction constant of the GCM specification.
_SPEC_R = tuple(bits_ for bits_ in (1, 1, 1, 0, 0, 0, 0, 1)) + (0,) * (_FIELD_BITS - 8)


def bits_from_int(num: int, length: int) -> list[int]:
    """Return ``num`` as ``length`` bits, most significant first.

    Raises ``ValueError`` if ``num`` is negative or does not fit.
    """
    if num < 0:
        raise ValueError("number must be non-negative")
    if num.bit_length() > length:
        raise ValueError(f"{num} does not fit in {length} bits")
    return [(num >> (length - 1 - i)) & 1 for i in range(length)]


def block_to_bits(block: bytes) -> tuple[int, ...]:
    """Turn up to 16 bytes into a field element, zero-padding on the right."""
    data = bytes(block)
    if len(data) > _BLOCK_BYTES:
        raise ValueError(f"block has {len(data)} bytes, at most {_BLOCK_BYTES} allowed")
    bits = [bit for byte in data for bit in bits_from_int(byte, 8)]
    bits.extend([0] * (_FIELD_BITS - len(bits)))
    return tuple(bits)


def bits_to_bytes(bits: Sequence[int]) -> bytes:
    """Pack bits into bytes, eight at a time, the first bit most significant."""
    out = bytearray()
    for start in range(0, len(bits), 8):
        chunk = bits[start : start + 8]
        out.append(sum(1 << (7 - i) for i, bit in enumerate(chunk) if bit))
    return bytes(out)


def _check_element(bits: Sequence[int]) -> tuple[int, ...]:
    element = tuple(int(b) & 1 for b in bits)
    if len(element) != _FIELD_BITS:
        raise ValueError(f"field element needs {_FIELD_BITS} bits, got {len(element)}")
    return element


def _xor(x: Sequence[int], y: Sequence[int]) -> tuple[int, ...]:
    return tuple(a ^ b for a, b in zip(x, y))


def field_multiply(x: Sequence[int], y: Sequence[int]) -> tuple[int, ...]:
    """Multiply two field elements as polynomials, reduced modulo the field polynomial."""
    px = Polynomial(_check_element(x), 2)
    py = Polynomial(_check_element(y), 2)
    reduced = (px * py) % _FIELD_POLYNOMIAL
    return tuple(reduced.coefficients[:_FIELD_BITS])


def field_multiply_spec(x: Sequence[int], y: Sequence[int]) -> tuple[int, ...]:
    """Multiply two field elements with the shift-and-add algorithm of the GCM specification."""
    x_bits = _check_element(x)
    v = _check_element(y)
    z = (0,) * _FIELD_BITS
    for bit in x_bits:
        if bit:
            z = _xor(z, v)
        carry = v[-1]
        v = (0,) + v[:-1]
        if carry:
            v = _xor(v, _SPEC_R)
    return z


class GHash:
    """GHASH keyed by the hash key ``H``, in AES-GCM the encryption of the zero block."""

    def __init__(self, hash_key: bytes) -> None:
        key = bytes(hash_key)
        if len(key) != _BLOCK_BYTES:
            raise ValueError(
                f"the hash key should be 128 bits, or 16 bytes; got {len(key)} bytes"
            )
        self.hash_key = block_to_bits(key)

    def _absorb(self, acc: tuple[int, ...], data: bytes) -> tuple[int, ...]:
        for start in range(0, len(data), _BLOCK_BYTES):
            block = block_to_bits(data[start : start + _BLOCK_BYTES])
            acc = field_multiply(_xor(acc, block), self.hash_key)
        return acc

    def digest(self, aad: bytes, ciphertext: bytes) -> bytes:
        """Return the 16-byte GHASH of the additional data and the ciphertext."""
        aad = bytes(aad)
        ciphertext = bytes(ciphertext)
        acc = (0,) * _FIELD_BITS
        acc = self._absorb(acc, aad)
        acc = self._absorb(acc, ciphertext)
        lengths = tuple(bits_from_int(len(aad) * 8, 64) + bits_from_int(len(ciphertext) * 8, 64))
        acc = field_multiply(_xor(acc, lengths), self.hash_key)
        return bits_to_bytes(acc)