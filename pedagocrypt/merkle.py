"""A basic Merkle tree with membership proofs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from .sha import Sha256

__all__ = ["MerkleTree", "Proof", "Side"]


class Side(Enum):
    """Which side of the current hash a sibling hash sits on."""

    LEFT = "Left"
    RIGHT = "Right"


@dataclass
class Proof:
    """Sibling hashes from a leaf up to the root."""

    steps: list[tuple[bytes, Side]] = field(default_factory=list)

    def __iter__(self) -> Iterator[tuple[bytes, Side]]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return "".join(f'("{digest.hex()}", {side.value})' for digest, side in self.steps)


class MerkleTree:
    """A Merkle tree over string leaves hashed with SHA-256."""

    def __init__(self, leaves: Iterable[str]) -> None:
        self.leaves = list(leaves)
        if not self.leaves:
            raise ValueError("a Merkle tree needs at least one leaf")
        hasher = Sha256()
        level = [hasher.digest(leaf.encode("utf-8")) for leaf in self.leaves]
        levels = [level]
        while len(level) > 1:
            pairs = (level[i : i + 2] for i in range(0, len(level), 2))
            level = [hasher.digest(pair[0] + pair[-1]) for pair in pairs]
            levels.append(level)
        # Root level first, leaves last.
        self._levels = levels[::-1]

    def root_hash(self) -> bytes:
        """Return the root hash."""
        return self._levels[0][0]

    def get_proof(self, leaf_index: int) -> Proof:
        """Return a proof that the leaf at ``leaf_index`` belongs to the tree."""
        if not 0 <= leaf_index < len(self.leaves):
            raise IndexError(f"leaf index {leaf_index} out of range")
        steps = []
        index = leaf_index
        for level in reversed(self._levels[1:]):
            if index % 2 == 0:
                side, sibling = Side.RIGHT, index + 1
                if sibling >= len(level):
                    # An unpaired node was hashed with itself.
                    sibling = index
            else:
                side, sibling = Side.LEFT, index - 1
            steps.append((level[sibling], side))
            index //= 2
        return Proof(steps)

    def prove(self, value: str, proof: Proof) -> bool:
        """Check that ``proof`` shows ``value`` to be a leaf of this tree."""
        hasher = Sha256()
        digest = hasher.digest(value.encode("utf-8"))
        for sibling, side in proof:
            combined = sibling + digest if side is Side.LEFT else digest + sibling
            digest = hasher.digest(combined)
        return digest == self.root_hash()

    def __str__(self) -> str:
        lines = ["Leaves:"]
        lines.extend(f"  {i}: {leaf}" for i, leaf in enumerate(self.leaves))
        for depth in range(len(self._levels) - 1, -1, -1):
            hashes = self._levels[depth]
            if len(hashes) == 1:
                lines.append("Root Hash:")
                lines.append(f"  {hashes[0].hex()}")
            else:
                lines.append(f"Level {depth}:")
                lines.extend(f"  {digest.hex()}" for digest in hashes)
        return "\n".join(lines) + "\n"