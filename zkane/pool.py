"""High-level privacy pool state: commitments and spent nullifiers."""

from dataclasses import dataclass, field
from typing import Set, Tuple

from zkane.merkle import MerklePath, MerkleTree

NULLIFIER_HASH_SIZE = 32


class NullifierAlreadySpentError(Exception):
    """Raised when a nullifier hash is spent a second time."""


def _as_nullifier_hash(value: bytes) -> bytes:
    value = bytes(value)
    if len(value) != NULLIFIER_HASH_SIZE:
        raise ValueError(
            f"nullifier hash must be {NULLIFIER_HASH_SIZE} bytes, got {len(value)}"
        )
    return value


@dataclass(frozen=True)
class PoolConfig:
    """Parameters of a pool: the asset, its fixed denomination and the tree height."""

    asset_id: Tuple[int, int]
    denomination: int
    tree_height: int
    verifier_key: bytes = field(default=b"")

    def __post_init__(self) -> None:
        if self.tree_height < 0:
            raise ValueError("tree_height must not be negative")
        if self.denomination < 0:
            raise ValueError("denomination must not be negative")

    def max_deposits(self) -> int:
        """Return the number of leaves the commitment tree can hold."""
        return 1 << self.tree_height


class PrivacyPool:
    """A privacy pool for one asset and denomination."""

    def __init__(self, config: PoolConfig) -> None:
        self.config = config
        self._tree = MerkleTree(config.tree_height)
        self._spent: Set[bytes] = set()

    def merkle_root(self) -> bytes:
        """Return the current root of the commitment tree."""
        return self._tree.root()

    def commitment_count(self) -> int:
        """Return how many commitments have been deposited."""
        return self._tree.leaf_count()

    def is_nullifier_spent(self, nullifier_hash: bytes) -> bool:
        """Return whether ``nullifier_hash`` has already been spent."""
        return bytes(nullifier_hash) in self._spent

    def add_commitment(self, commitment: bytes) -> int:
        """Insert a commitment and return its leaf index.

        Raises ``TreeFullError`` when the pool is at capacity.
        """
        return self._tree.insert(commitment)

    def generate_merkle_proof(self, leaf_index: int) -> MerklePath:
        """Return the inclusion path for the commitment at ``leaf_index``."""
        return self._tree.generate_path(leaf_index)

    def process_withdrawal(self, nullifier_hash: bytes) -> None:
        """Mark a nullifier hash as spent, refusing a second spend."""
        key = _as_nullifier_hash(nullifier_hash)
        if key in self._spent:
            raise NullifierAlreadySpentError("Nullifier already spent")
        self._spent.add(key)

    def verify_withdrawal_proof(self, nullifier_hash: bytes, merkle_root: bytes) -> bool:
        """Check a withdrawal against the pool state without spending it."""
        if self.is_nullifier_spent(nullifier_hash):
            return False
        return bytes(merkle_root) == self.merkle_root()

    def max_capacity(self) -> int:
        """Return the maximum number of commitments."""
        return self.config.max_deposits()

    def is_full(self) -> bool:
        """Return whether the pool accepts no more deposits."""
        return self.commitment_count() >= self.max_capacity()

    def stats(self) -> Tuple[int, int, int]:
        """Return (commitment count, spent nullifier count, capacity)."""
        return (self.commitment_count(), len(self._spent), self.max_capacity())