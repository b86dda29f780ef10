"""A simplified Poseidon-style hash over the BN254 scalar field.

This is a placeholder mixing function, not a secure hash.
"""

from typing import List

MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
CHUNK_SIZE = 31
ELEMENT_SIZE = 32


def bytes_to_field_elements(data: bytes) -> List[int]:
    """Split ``data`` into 31-byte chunks and map each to a field element.

    Each chunk is placed at offset 1 of a 32-byte little-endian buffer and
    reduced modulo the field order. Empty input yields a single zero element.
    """
    data = bytes(data)
    elements = [
        int.from_bytes(b"\x00" + data[start:start + CHUNK_SIZE], "little") % MODULUS
        for start in range(0, len(data), CHUNK_SIZE)
    ]
    return elements or [0]


def field_element_to_bytes(element: int) -> bytes:
    """Serialise a field element as 32 little-endian bytes."""
    return (element % MODULUS).to_bytes(ELEMENT_SIZE, "little")


def _permute(elements: List[int]) -> int:
    total = sum(elements) % MODULUS
    total = total * total % MODULUS
    total = (total + 1) % MODULUS
    return total * total % MODULUS


def poseidon_hash(data: bytes) -> bytes:
    """Hash arbitrary bytes to a 32-byte field element encoding."""
    return field_element_to_bytes(_permute(bytes_to_field_elements(data)))


def poseidon_hash_two(left: bytes, right: bytes) -> bytes:
    """Hash the concatenation of two 32-byte values."""
    return poseidon_hash(bytes(left) + bytes(right))


def poseidon_hash_single(data: bytes) -> bytes:
    """Hash a single 32-byte value."""
    return poseidon_hash(data)