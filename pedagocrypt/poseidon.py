"""The Poseidon permutation-based hash over a prime field."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["Poseidon", "PoseidonConfig", "Sponge"]


class Sponge(ABC):
    """Absorb and squeeze behaviour of a sponge-based hash function."""

    @abstractmethod
    def permute(self) -> None:
        """Apply the round function to the sponge state."""

    @abstractmethod
    def absorb(self, elements: Sequence[int]) -> None:
        """Absorb field elements into the sponge."""

    @abstractmethod
    def squeeze(self, n: int) -> list[int]:
        """Squeeze ``n`` field elements out of the sponge."""


@dataclass(frozen=True)
class PoseidonConfig:
    """Round parameters of a Poseidon instance."""

    width: int
    alpha: int
    num_p: int
    num_f: int
    round_constants: tuple[int, ...]
    mds_matrix: tuple[tuple[int, ...], ...]
    modulus: int

    def __post_init__(self) -> None:
        if self.width <= 1:
            raise ValueError("hash width should be greater than 1")
        mds = tuple(tuple(v % self.modulus for v in row) for row in self.mds_matrix)
        if len(mds) != self.width or any(len(row) != self.width for row in mds):
            raise ValueError("mds matrix should be width by width")
        constants = tuple(c % self.modulus for c in self.round_constants)
        if len(constants) != (self.num_p + self.num_f) * self.width:
            raise ValueError(
                "round constants should be equal to number of full and partial rounds"
            )
        object.__setattr__(self, "mds_matrix", mds)
        object.__setattr__(self, "round_constants", constants)


class Poseidon:
    """Poseidon hash holding a state of ``width`` field elements."""

    def __init__(
        self,
        width: int,
        alpha: int,
        num_p: int,
        num_f: int,
        round_constants: Sequence[int],
        mds: Sequence[Sequence[int]],
        modulus: int,
    ) -> None:
        self.config = PoseidonConfig(
            width, alpha, num_p, num_f, tuple(round_constants), tuple(map(tuple, mds)), modulus
        )
        self.state = [0] * width

    def _is_full_round(self, round_index: int) -> bool:
        half = self.config.num_f // 2
        return round_index < half or round_index >= self.config.num_p + half

    def _add_round_constants(self, round_index: int) -> None:
        cfg = self.config
        offset = round_index * cfg.width
        constants = cfg.round_constants[offset : offset + cfg.width]
        self.state = [(s + c) % cfg.modulus for s, c in zip(self.state, constants)]

    def _apply_non_linear_layer(self, round_index: int) -> None:
        cfg = self.config
        if self._is_full_round(round_index):
            self.state = [pow(s, cfg.alpha, cfg.modulus) for s in self.state]
        else:
            self.state[0] = pow(self.state[0], cfg.alpha, cfg.modulus)

    def _apply_linear_layer(self) -> None:
        cfg = self.config
        self.state = [
            sum(s * m for s, m in zip(self.state, row)) % cfg.modulus for row in cfg.mds_matrix
        ]

    def hash(self, state: Sequence[int]) -> int:
        """Run the permutation on ``state``, zero-padded to the width, and return element 1."""
        cfg = self.config
        values = [v % cfg.modulus for v in state]
        if len(values) > cfg.width:
            raise ValueError(f"state has {len(values)} elements, more than width {cfg.width}")
        self.state = values + [0] * (cfg.width - len(values))
        for round_index in range(cfg.num_f + cfg.num_p):
            self._add_round_constants(round_index)
            self._apply_non_linear_layer(round_index)
            self._apply_linear_layer()
        return self.state[1]