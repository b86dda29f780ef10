"""Sparse Merkle tree of commitments."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from zkane.hashing import hash_internal, hash_leaf

HASH_SIZE = 32


class MerkleError(Exception):
    """Base error for Merkle tree operations."""


class TreeFullError(MerkleError):
    """Raised when inserting into a tree that has no free leaves."""


class LeafIndexError(MerkleError, IndexError):
    """Raised when a leaf index is outside the filled part of the tree."""


def _as_hash(value: bytes) -> bytes:
    value = bytes(value)
    if len(value) != HASH_SIZE:
        raise ValueError(f"expected {HASH_SIZE} bytes, got {len(value)}")
    return value


@dataclass
class MerklePath:
    """Sibling hashes and left/right flags from a leaf up to the root."""

    elements: List[bytes] = field(default_factory=list)
    indices: List[bool] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.elements) != len(self.indices):
            raise ValueError("path elements and indices must have the same length")

    def __len__(self) -> int:
        return len(self.elements)


def _walk_path(commitment: bytes, leaf_index: int, path: MerklePath, root: bytes) -> bool:
    current = hash_leaf(_as_hash(commitment))
    index = leaf_index
    for sibling, is_right in zip(path.elements, path.indices):
        if (index % 2 == 1) != bool(is_right):
            return False
        sibling = bytes(sibling)
        current = hash_internal(sibling, current) if is_right else hash_internal(current, sibling)
        index //= 2
    return current == bytes(root)


class MerkleTree:
    """A fixed-height sparse Merkle tree with cached node hashes."""

    def __init__(self, height: int) -> None:
        if height < 0:
            raise ValueError("height must not be negative")
        self._height = height
        self._leaf_count = 0
        self._cache: Dict[Tuple[int, int], bytes] = {}
        zero = hash_leaf(bytes(HASH_SIZE))
        self._zero_hashes = [zero]
        for _ in range(height):
            zero = hash_internal(zero, zero)
            self._zero_hashes.append(zero)

    def _node(self, level: int, index: int) -> bytes:
        return self._cache.get((level, index), self._zero_hashes[level])

    def insert(self, commitment: bytes) -> int:
        """Insert a commitment and return its leaf index."""
        if self.is_full():
            raise TreeFullError("Merkle tree is full")
        leaf_index = self._leaf_count
        current = hash_leaf(_as_hash(commitment))
        self._cache[(0, leaf_index)] = current
        index = leaf_index
        for level in range(1, self._height + 1):
            is_right = index % 2 == 1
            sibling = self._node(level - 1, index - 1 if is_right else index + 1)
            current = hash_internal(sibling, current) if is_right else hash_internal(current, sibling)
            index //= 2
            self._cache[(level, index)] = current
        self._leaf_count += 1
        return leaf_index

    def root(self) -> bytes:
        """Return the current root hash."""
        if self._leaf_count == 0:
            return self._zero_hashes[self._height]
        return self._node(self._height, 0)

    def generate_path(self, leaf_index: int) -> MerklePath:
        """Return the inclusion path for an inserted leaf."""
        if not 0 <= leaf_index < self._leaf_count:
            raise LeafIndexError("Leaf index out of bounds")
        elements: List[bytes] = []
        indices: List[bool] = []
        index = leaf_index
        for level in range(self._height):
            is_right = index % 2 == 1
            elements.append(self._node(level, index - 1 if is_right else index + 1))
            indices.append(is_right)
            index //= 2
        return MerklePath(elements, indices)

    def verify_path(
        self, commitment: bytes, leaf_index: int, path: MerklePath, expected_root: bytes
    ) -> bool:
        """Check that ``path`` proves ``commitment`` at ``leaf_index`` under ``expected_root``."""
        if len(path) != self._height:
            return False
        return _walk_path(commitment, leaf_index, path, expected_root)

    def zero_hashes(self) -> List[bytes]:
        """Return the empty-subtree hash for each level, leaves first."""
        return list(self._zero_hashes)

    def leaf_count(self) -> int:
        """Return the number of inserted leaves."""
        return self._leaf_count

    def height(self) -> int:
        """Return the height of the tree."""
        return self._height

    def is_full(self) -> bool:
        """Return whether every leaf slot is taken."""
        return self._leaf_count >= (1 << self._height)


def verify_merkle_path(
    commitment: bytes, leaf_index: int, path: MerklePath, root: bytes, tree_height: int
) -> bool:
    """Verify an inclusion path without the tree itself."""
    if len(path) != tree_height:
        return False
    return _walk_path(commitment, leaf_index, path, root)