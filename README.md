# zkane

Building blocks for a privacy pool. The package has hash functions, a sparse
Merkle tree of commitments, and an in-memory pool that keeps track of deposits
and spent nullifiers.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Hashing

`zkane.hashing` provides `sha256`, `blake2s` (32 bytes), `blake2b` (64 bytes)
and three tree hashes:

- `merkle_hash(left, right)` is BLAKE2s of the two nodes joined, with no prefix.
- `hash_leaf(leaf)` puts a `0x00` prefix before the data.
- `hash_internal(left, right)` puts a `0x01` prefix before the data.

Because of the different prefixes, a leaf hash can't collide with an
internal-node hash.

```python
from zkane.hashing import sha256, hash_leaf, hash_internal

sha256(b"hello world").hex()
# 'b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9'
node = hash_internal(hash_leaf(bytes(32)), hash_leaf(bytes([1]) * 32))
```

`zkane.poseidon` provides `poseidon_hash`, `poseidon_hash_two` and
`poseidon_hash_single`, with the helpers `bytes_to_field_elements` and
`field_element_to_bytes`. They work over the BN254 scalar field:

- The input is cut into 31-byte chunks.
- Each chunk becomes a field element.
- The elements are summed and mixed by squaring.
- The result is returned as 32 little-endian bytes.

This is a simple placeholder mixing function. It is **not** a secure hash.

## Merkle tree

```python
from zkane.merkle import MerkleTree, verify_merkle_path

tree = MerkleTree(4)                 # room for 2**4 leaves
index = tree.insert(bytes([1]) * 32) # 0
path = tree.generate_path(index)
assert len(path) == 4
assert tree.verify_path(bytes([1]) * 32, index, path, tree.root())
assert verify_merkle_path(bytes([1]) * 32, index, path, tree.root(), 4)
```

Commitments must be exactly 32 bytes. Otherwise `insert` raises `ValueError`.

A `MerklePath` holds two things:

- `elements`: the sibling hashes.
- `indices`: for each level, whether the node is the right child.

The two lists must have the same length.

`MerkleTree.zero_hashes()` returns the hash of an empty subtree at each level,
leaves first. An empty tree's root is the last of these.

Errors:

- `insert` on a full tree raises `TreeFullError`.
- `generate_path` for a leaf that has not been inserted raises `LeafIndexError`.

Both errors are subclasses of `MerkleError`.

## Privacy pool

```python
from zkane.pool import PoolConfig, PrivacyPool, NullifierAlreadySpentError

pool = PrivacyPool(PoolConfig(asset_id=(2, 1), denomination=1_000_000, tree_height=4))
pool.add_commitment(bytes([42]) * 32)                  # leaf index 0
proof = pool.generate_merkle_proof(0)

nullifier_hash = bytes([1]) * 32
assert pool.verify_withdrawal_proof(nullifier_hash, pool.merkle_root())
pool.process_withdrawal(nullifier_hash)
assert pool.is_nullifier_spent(nullifier_hash)

pool.stats()  # (commitments, spent nullifiers, capacity) -> (1, 1, 16)
```

`PoolConfig.max_deposits()` and `PrivacyPool.max_capacity()` return
`2 ** tree_height`. `is_full()` reports whether that many commitments have
been added. When the pool is full, `add_commitment` raises `TreeFullError`.

Spending the same nullifier hash a second time raises
`NullifierAlreadySpentError`.

## What this package does not do

- There is no zero-knowledge proof generation or verification.
  `verify_withdrawal_proof` checks only two things: that the nullifier hash is
  unspent, and that the given root equals the pool's current root.
- Pool state lives in memory only. Nothing is stored on disk or on a
  blockchain.
- There are no contracts, no transaction handling, no network service and no
  command-line tool.