"""SHA-256 and SHA-512 hash functions, following FIPS 180-3."""

from __future__ import annotations

from typing import ClassVar

__all__ = ["Sha256", "Sha512", "sha256", "sha512"]


class _Sha:
    """Shared Merkle–Damgård core of the SHA-2 family."""

    WORD_BITS: ClassVar[int]
    INITIAL_HASH: ClassVar[tuple[int, ...]]
    ROUND_CONSTANTS: ClassVar[tuple[int, ...]]
    SIGMA_0: ClassVar[tuple[int, int, int]]
    SIGMA_1: ClassVar[tuple[int, int, int]]
    SMALL_SIGMA_0: ClassVar[tuple[int, int, int]]
    SMALL_SIGMA_1: ClassVar[tuple[int, int, int]]

    @property
    def _mask(self) -> int:
        return (1 << self.WORD_BITS) - 1

    @property
    def _word_bytes(self) -> int:
        return self.WORD_BITS // 8

    @property
    def block_size(self) -> int:
        """Size of one message block in bytes."""
        return self._word_bytes * 16

    @property
    def digest_size(self) -> int:
        """Size of the digest in bytes."""
        return self._word_bytes * 8

    def _rotr(self, x: int, n: int) -> int:
        return ((x >> n) | (x << (self.WORD_BITS - n))) & self._mask

    def _sigma(self, x: int, rotations: tuple[int, int, int]) -> int:
        a, b, c = rotations
        return self._rotr(x, a) ^ self._rotr(x, b) ^ self._rotr(x, c)

    def _small_sigma(self, x: int, params: tuple[int, int, int]) -> int:
        a, b, shift = params
        return self._rotr(x, a) ^ self._rotr(x, b) ^ (x >> shift)

    def _ch(self, x: int, y: int, z: int) -> int:
        return (x & y) ^ (~x & self._mask & z)

    @staticmethod
    def _maj(x: int, y: int, z: int) -> int:
        return (x & y) ^ (x & z) ^ (y & z)

    def _pad(self, data: bytes) -> bytes:
        length_bytes = self.block_size // 8
        bit_length = len(data) * 8
        zeros = (self.block_size - length_bytes - (len(data) + 1)) % self.block_size
        return (
            data
            + b"\x80"
            + bytes(zeros)
            + bit_length.to_bytes(length_bytes, "big")
        )

    def digest(self, data: bytes) -> bytes:
        """Return the hash of ``data``."""
        mask = self._mask
        wb = self._word_bytes
        state = list(self.INITIAL_HASH)
        message = self._pad(bytes(data))

        for start in range(0, len(message), self.block_size):
            block = message[start : start + self.block_size]
            words = [
                int.from_bytes(block[i : i + wb], "big")
                for i in range(0, self.block_size, wb)
            ]
            for i in range(16, len(self.ROUND_CONSTANTS)):
                words.append(
                    (
                        self._small_sigma(words[i - 2], self.SMALL_SIGMA_1)
                        + words[i - 7]
                        + self._small_sigma(words[i - 15], self.SMALL_SIGMA_0)
                        + words[i - 16]
                    )
                    & mask
                )

            a, b, c, d, e, f, g, h = state
            for k, w in zip(self.ROUND_CONSTANTS, words):
                temp1 = (h + self._sigma(e, self.SIGMA_1) + self._ch(e, f, g) + k + w) & mask
                temp2 = (self._sigma(a, self.SIGMA_0) + self._maj(a, b, c)) & mask
                h, g, f = g, f, e
                e = (d + temp1) & mask
                d, c, b = c, b, a
                a = (temp1 + temp2) & mask

            state = [(s + v) & mask for s, v in zip(state, (a, b, c, d, e, f, g, h))]

        return b"".join(word.to_bytes(wb, "big") for word in state)


class Sha256(_Sha):
    """The SHA-256 hash function."""

    WORD_BITS = 32
    INITIAL_HASH = (
        0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
        0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
    )
    ROUND_CONSTANTS = (
        0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4,
        0xAB1C5ED5, 0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE,
        0x9BDC06A7, 0xC19BF174, 0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F,
        0x4A7484AA, 0x5CB0A9DC, 0x76F988DA, 0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
        0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967, 0x27B70A85, 0x2E1B2138, 0x4D2C6DFC,
        0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85, 0xA2BFE8A1, 0xA81A664B,
        0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070, 0x19A4C116,
        0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
        0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7,
        0xC67178F2,
    )
    SIGMA_0 = (2, 13, 22)
    SIGMA_1 = (6, 11, 25)
    SMALL_SIGMA_0 = (7, 18, 3)
    SMALL_SIGMA_1 = (17, 19, 10)

    def digest(self, data: bytes) -> bytes:
        """Return the 32-byte SHA-256 digest of ``data``."""
        return super().digest(data)


class Sha512(_Sha):
    """The SHA-512 hash function."""

    WORD_BITS = 64
    INITIAL_HASH = (
        0x6A09E667F3BCC908, 0xBB67AE8584CAA73B, 0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
        0x510E527FADE682D1, 0x9B05688C2B3E6C1F, 0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
    )
    ROUND_CONSTANTS = (
        0x428A2F98D728AE22, 0x7137449123EF65CD, 0xB5C0FBCFEC4D3B2F, 0xE9B5DBA58189DBBC,
        0x3956C25BF348B538, 0x59F111F1B605D019, 0x923F82A4AF194F9B, 0xAB1C5ED5DA6D8118,
        0xD807AA98A3030242, 0x12835B0145706FBE, 0x243185BE4EE4B28C, 0x550C7DC3D5FFB4E2,
        0x72BE5D74F27B896F, 0x80DEB1FE3B1696B1, 0x9BDC06A725C71235, 0xC19BF174CF692694,
        0xE49B69C19EF14AD2, 0xEFBE4786384F25E3, 0x0FC19DC68B8CD5B5, 0x240CA1CC77AC9C65,
        0x2DE92C6F592B0275, 0x4A7484AA6EA6E483, 0x5CB0A9DCBD41FBD4, 0x76F988DA831153B5,
        0x983E5152EE66DFAB, 0xA831C66D2DB43210, 0xB00327C898FB213F, 0xBF597FC7BEEF0EE4,
        0xC6E00BF33DA88FC2, 0xD5A79147930AA725, 0x06CA6351E003826F, 0x142929670A0E6E70,
        0x27B70A8546D22FFC, 0x2E1B21385C26C926, 0x4D2C6DFC5AC42AED, 0x53380D139D95B3DF,
        0x650A73548BAF63DE, 0x766A0ABB3C77B2A8, 0x81C2C92E47EDAEE6, 0x92722C851482353B,
        0xA2BFE8A14CF10364, 0xA81A664BBC423001, 0xC24B8B70D0F89791, 0xC76C51A30654BE30,
        0xD192E819D6EF5218, 0xD69906245565A910, 0xF40E35855771202A, 0x106AA07032BBD1B8,
        0x19A4C116B8D2D0C8, 0x1E376C085141AB53, 0x2748774CDF8EEB99, 0x34B0BCB5E19B48A8,
        0x391C0CB3C5C95A63, 0x4ED8AA4AE3418ACB, 0x5B9CCA4F7763E373, 0x682E6FF3D6B2B8A3,
        0x748F82EE5DEFB2FC, 0x78A5636F43172F60, 0x84C87814A1F0AB72, 0x8CC702081A6439EC,
        0x90BEFFFA23631E28, 0xA4506CEBDE82BDE9, 0xBEF9A3F7B2C67915, 0xC67178F2E372532B,
        0xCA273ECEEA26619C, 0xD186B8C721C0C207, 0xEADA7DD6CDE0EB1E, 0xF57D4F7FEE6ED178,
        0x06F067AA72176FBA, 0x0A637DC5A2C898A6, 0x113F9804BEF90DAE, 0x1B710B35131C471B,
        0x28DB77F523047D84, 0x32CAAB7B40C72493, 0x3C9EBE0A15C9BEBC, 0x431D67C49C100D4C,
        0x4CC5D4BECB3E42B6, 0x597F299CFC657E2A, 0x5FCB6FAB3AD6FAEC, 0x6C44198C4A475817,
    )
    SIGMA_0 = (28, 34, 39)
    SIGMA_1 = (14, 18, 41)
    SMALL_SIGMA_0 = (1, 8, 7)
    SMALL_SIGMA_1 = (19, 61, 6)

    def digest(self, data: bytes) -> bytes:
        """Return the 64-byte SHA-512 digest of ``data``."""
        return super().digest(data)


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return Sha256().digest(data)


def sha512(data: bytes) -> bytes:
    """Return the SHA-512 digest of ``data``."""
    return Sha512().digest(data)