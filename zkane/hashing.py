"""Hash functions used by the privacy pool."""

import hashlib

LEAF_PREFIX = b"\x00"
INTERNAL_PREFIX = b"\x01"


def sha256(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


def blake2s(data: bytes) -> bytes:
    """Return the 32-byte BLAKE2s-256 digest of ``data``."""
    return hashlib.blake2s(data, digest_size=32).digest()


def blake2b(data: bytes) -> bytes:
    """Return the 64-byte BLAKE2b-512 digest of ``data``."""
    return hashlib.blake2b(data, digest_size=64).digest()


def merkle_hash(left: bytes, right: bytes) -> bytes:
    """Hash two 32-byte nodes together without a domain prefix."""
    return blake2s(bytes(left) + bytes(right))


def hash_leaf(leaf: bytes) -> bytes:
    """Hash a leaf value, prefixed with 0x00 to separate it from internal nodes."""
    return blake2s(LEAF_PREFIX + bytes(leaf))


def hash_internal(left: bytes, right: bytes) -> bytes:
    """Hash an internal node, prefixed with 0x01 to separate it from leaves."""
    return blake2s(INTERNAL_PREFIX + bytes(left) + bytes(right))