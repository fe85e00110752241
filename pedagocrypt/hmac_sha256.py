"""HMAC built on the SHA-256 hash function."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .sha import Sha256

__all__ = ["hmac_sha256", "main"]

_BLOCK_SIZE = 64
_OUTPUT_SIZE = 32


def _block_sized_key(key: bytes) -> bytes:
    """Hash keys longer than a block, then zero-pad to the block size."""
    if len(key) > _BLOCK_SIZE:
        key = Sha256().digest(key)
    return key.ljust(_BLOCK_SIZE, b"\x00")


def hmac_sha256(key: bytes, message: bytes) -> bytes:
    """Return the 32-byte HMAC-SHA256 of ``message`` under ``key``."""
    block_key = _block_sized_key(bytes(key))
    inner_pad = bytes(b ^ 0x36 for b in block_key)
    outer_pad = bytes(b ^ 0x5C for b in block_key)
    hasher = Sha256()
    inner_hash = hasher.digest(inner_pad + bytes(message))
    return hasher.digest(outer_pad + inner_hash)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the HMAC-SHA256 of a message given a key on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Please provide an input argument.", file=sys.stderr)
        return 1
    key, message = args[0].encode("utf-8"), args[1].encode("utf-8")
    print(f"Result: {hmac_sha256(key, message).hex()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())