"""A simplex sponge over the Poseidon permutation, absorbing and squeezing any number of elements."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from .poseidon import Poseidon, Sponge

__all__ = ["PoseidonSponge", "SpongeError", "SpongeState"]


class SpongeError(Exception):
    """Raised when the sponge is used in a state that does not allow the operation."""


class SpongeState(Enum):
    """The phase a sponge is in."""

    INIT = "init"
    ABSORBING = "absorbing"
    SQUEEZING = "squeezing"


class PoseidonSponge(Sponge):
    """Poseidon sponge with ``rate`` elements absorbed or squeezed per permutation.

    The sponge starts in ``INIT``; ``start_absorbing`` and ``start_squeezing``
    move it forward, and once squeezing it can no longer absorb.
    """

    def __init__(
        self,
        width: int,
        alpha: int,
        num_p: int,
        num_f: int,
        rate: int,
        round_constants: Sequence[int],
        mds: Sequence[Sequence[int]],
        modulus: int,
    ) -> None:
        if not 0 < rate <= width:
            raise ValueError(f"rate must be between 1 and the width {width}, got {rate}")
        self.poseidon = Poseidon(width, alpha, num_p, num_f, round_constants, mds, modulus)
        self.rate = rate
        self.capacity = width - rate
        self.absorb_index = 0
        self.squeeze_index = 0
        self.sponge_state = SpongeState.INIT

    @property
    def modulus(self) -> int:
        """The prime of the field."""
        return self.poseidon.config.modulus

    def _require(self, state: SpongeState, action: str) -> None:
        if self.sponge_state is not state:
            raise SpongeError(
                f"cannot {action}: sponge is in {self.sponge_state.value} state"
            )

    def _add_at(self, offset: int, values: Sequence[int]) -> None:
        state = self.poseidon.state
        p = self.modulus
        for i, value in enumerate(values):
            state[offset + i] = (state[offset + i] + value) % p

    def permute(self) -> None:
        """Run the permutation on the state and reset the absorb index."""
        self.poseidon.hash(list(self.poseidon.state))
        self.absorb_index = 0

    def start_absorbing(self) -> PoseidonSponge:
        """Move from the initial state to absorbing."""
        self._require(SpongeState.INIT, "start absorbing")
        self.sponge_state = SpongeState.ABSORBING
        return self

    def absorb(self, elements: Sequence[int]) -> None:
        """Absorb field elements, permuting after each full ``rate`` chunk."""
        self._require(SpongeState.ABSORBING, "absorb")
        remaining = [e % self.modulus for e in elements]

        if self.absorb_index + len(remaining) <= self.rate:
            self._add_at(self.capacity + self.absorb_index, remaining)
            self.absorb_index += len(remaining)
            return
        if self.absorb_index != 0:
            fill = self.rate - self.absorb_index
            self._add_at(self.capacity + self.absorb_index, remaining[:fill])
            remaining = remaining[fill:]
            self.permute()

        full = len(remaining) - len(remaining) % self.rate
        for start in range(0, full, self.rate):
            self._add_at(self.capacity, remaining[start : start + self.rate])
            self.permute()

        leftover = remaining[full:]
        if leftover:
            self._add_at(self.capacity, leftover)
            self.absorb_index = len(leftover)

    def start_squeezing(self) -> PoseidonSponge:
        """Move from absorbing to squeezing, permuting if a chunk is partly absorbed."""
        self._require(SpongeState.ABSORBING, "start squeezing")
        if self.absorb_index != 0:
            self.permute()
        self.sponge_state = SpongeState.SQUEEZING
        return self

    def squeeze(self, n: int) -> list[int]:
        """Squeeze ``n`` field elements out of the sponge."""
        self._require(SpongeState.SQUEEZING, "squeeze")
        if n < 0:
            raise ValueError("cannot squeeze a negative number of elements")
        result: list[int] = []
        while True:
            left = n - len(result)
            start = self.capacity + self.squeeze_index
            if self.squeeze_index + left <= self.rate:
                result.extend(self.poseidon.state[start : start + left])
                self.squeeze_index += left
                return result

            size = min(left, self.rate - self.squeeze_index)
            result.extend(self.poseidon.state[start : start + size])
            self.squeeze_index += size
            if self.squeeze_index == self.rate:
                self.permute()
                self.squeeze_index = 0