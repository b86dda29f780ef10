"""Hashing, commitment Merkle trees and in-memory privacy pool state."""

__version__ = "0.1.0"
__all__ = ["hashing", "poseidon", "merkle", "pool"]