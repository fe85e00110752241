"""Readable reference implementations of SHA-2, HMAC, GHASH, Poseidon, Merkle trees and polynomials."""

__version__ = "0.1.0"

__all__ = [
    "ghash",
    "hmac_sha256",
    "lagrange",
    "merkle",
    "polynomial",
    "poseidon",
    "sha",
    "sponge",
]