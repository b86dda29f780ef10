import pytest

from zkane.merkle import LeafIndexError, TreeFullError, verify_merkle_path
from zkane.pool import NullifierAlreadySpentError, PoolConfig, PrivacyPool


def make_config(height=4):
    return PoolConfig(asset_id=(2, 1), denomination=1000000, tree_height=height)


def make_pool(height=4):
    return PrivacyPool(make_config(height))


def test_privacy_pool_creation():
    pool = make_pool()
    assert pool.commitment_count() == 0
    assert pool.max_capacity() == 16
    assert not pool.is_full()


def test_config_max_deposits():
    assert make_config(20).max_deposits() == 1 << 20
    assert make_config(0).max_deposits() == 1


def test_config_rejects_negative_height():
    with pytest.raises(ValueError):
        PoolConfig(asset_id=(2, 1), denomination=1, tree_height=-1)


def test_commitment_addition():
    pool = make_pool()
    leaf_index = pool.add_commitment(bytes([42]) * 32)
    assert leaf_index == 0
    assert pool.commitment_count() == 1


def test_root_changes_after_deposit():
    pool = make_pool()
    before = pool.merkle_root()
    pool.add_commitment(bytes([42]) * 32)
    assert len(pool.merkle_root()) == 32
    assert pool.merkle_root() != before


def test_nullifier_spending():
    pool = make_pool()
    nullifier_hash = bytes([42]) * 32
    assert not pool.is_nullifier_spent(nullifier_hash)
    pool.process_withdrawal(nullifier_hash)
    assert pool.is_nullifier_spent(nullifier_hash)
    with pytest.raises(NullifierAlreadySpentError):
        pool.process_withdrawal(nullifier_hash)


def test_process_withdrawal_rejects_wrong_size():
    pool = make_pool()
    with pytest.raises(ValueError):
        pool.process_withdrawal(b"\x01" * 31)


def test_merkle_proof_generation():
    pool = make_pool()
    commitment = bytes([42]) * 32
    leaf_index = pool.add_commitment(commitment)
    proof = pool.generate_merkle_proof(leaf_index)
    assert len(proof) == 4
    assert verify_merkle_path(commitment, leaf_index, proof, pool.merkle_root(), 4)


def test_merkle_proof_out_of_bounds():
    pool = make_pool()
    pool.add_commitment(bytes([1]) * 32)
    with pytest.raises(LeafIndexError):
        pool.generate_merkle_proof(1)


def test_withdrawal_proof_verification():
    pool = make_pool()
    pool.add_commitment(bytes([42]) * 32)
    nullifier_hash = bytes([1]) * 32
    assert pool.verify_withdrawal_proof(nullifier_hash, pool.merkle_root())
    pool.process_withdrawal(nullifier_hash)
    assert not pool.verify_withdrawal_proof(nullifier_hash, pool.merkle_root())


def test_withdrawal_proof_wrong_root():
    pool = make_pool()
    pool.add_commitment(bytes([42]) * 32)
    assert not pool.verify_withdrawal_proof(bytes([1]) * 32, bytes(32))


def test_pool_capacity():
    pool = make_pool()
    for i in range(16):
        pool.add_commitment(bytes([i]) * 32)
    assert pool.is_full()
    assert pool.commitment_count() == 16
    with pytest.raises(TreeFullError):
        pool.add_commitment(bytes([99]) * 32)


def test_pool_stats():
    pool = make_pool()
    pool.add_commitment(bytes([1]) * 32)
    pool.add_commitment(bytes([2]) * 32)
    pool.process_withdrawal(bytes([1]) * 32)
    assert pool.stats() == (2, 1, 16)