import pytest

from hardclaw.address import Address
from hardclaw.amount import HclawAmount
from hardclaw.stake import (
    AlreadyUnstakingError,
    DoubleSigning,
    Downtime,
    HoneyPotApproval,
    InsufficientStakeError,
    InvalidVerification,
    NotUnstakingError,
    StakeError,
    StakeInfo,
    StakeManager,
    StakeNotFoundError,
    UnbondingNotCompleteError,
)

ZERO_HASH = bytes(32)


def make_address(seed: int) -> Address:
    return Address.from_bytes(bytes([seed]) * 20)


def test_stake_and_verify():
    manager = StakeManager()
    addr = make_address(1)

    manager.stake(addr, HclawAmount.from_hclaw(1000))
    assert manager.can_verify(addr)
    assert manager.active_verifier_count() == 1
    assert manager.total_staked == HclawAmount.from_hclaw(1000)


def test_insufficient_stake():
    manager = StakeManager()
    with pytest.raises(InsufficientStakeError) as info:
        manager.stake(make_address(1), HclawAmount.from_hclaw(100))
    assert info.value.need == HclawAmount.from_hclaw(1000)
    assert manager.get_stake(make_address(1)) is None


def test_slashing():
    manager = StakeManager()
    addr = make_address(1)
    manager.stake(addr, HclawAmount.from_hclaw(1000))

    slashed = manager.slash(addr, HoneyPotApproval(solution_id=ZERO_HASH))

    assert slashed.whole_hclaw() == 1000
    assert not manager.can_verify(addr)
    assert manager.active_verifier_count() == 0


def test_partial_slash():
    manager = StakeManager()
    addr = make_address(1)
    manager.stake(addr, HclawAmount.from_hclaw(1000))

    slashed = manager.slash(addr, InvalidVerification(details="test"))
    assert slashed.whole_hclaw() == 100

    stake = manager.get_stake(addr)
    assert stake.effective_stake().whole_hclaw() == 900
    assert len(stake.slash_history) == 1
    assert stake.slash_history[0].amount == slashed


def test_unstaking():
    manager = StakeManager(
        min_stake=HclawAmount.from_hclaw(100), unbonding_period_ms=0
    )
    addr = make_address(1)
    manager.stake(addr, HclawAmount.from_hclaw(100))

    manager.begin_unstake(addr)
    assert not manager.can_verify(addr)

    amount = manager.complete_unstake(addr)
    assert amount.whole_hclaw() == 100
    assert manager.get_stake(addr) is None
    assert manager.total_staked.is_zero()


def test_with_min_stake():
    manager = StakeManager.with_min_stake(HclawAmount.from_hclaw(100))
    addr = make_address(1)
    manager.stake(addr, HclawAmount.from_hclaw(100))
    assert manager.can_verify(addr)


def test_unbonding_not_complete():
    manager = StakeManager()
    addr = make_address(1)
    manager.stake(addr, HclawAmount.from_hclaw(1000))
    manager.begin_unstake(addr)
    with pytest.raises(UnbondingNotCompleteError) as info:
        manager.complete_unstake(addr)
    assert info.value.ready_at == manager.get_stake(addr).withdrawable_at


def test_double_begin_unstake():
    manager = StakeManager()
    addr = make_address(1)
    manager.stake(addr, HclawAmount.from_hclaw(1000))
    manager.begin_unstake(addr)
    with pytest.raises(AlreadyUnstakingError):
        manager.begin_unstake(addr)


def test_complete_without_begin():
    manager = StakeManager()
    addr = make_address(1)
    manager.stake(addr, HclawAmount.from_hclaw(1000))
    with pytest.raises(NotUnstakingError):
        manager.complete_unstake(addr)


def test_unknown_address_errors():
    manager = StakeManager()
    addr = make_address(9)
    with pytest.raises(StakeNotFoundError):
        manager.slash(addr, Downtime(offline_duration_secs=3600))
    with pytest.raises(StakeError):
        manager.distribute_reward(addr, HclawAmount.from_hclaw(1))
    with pytest.raises(StakeNotFoundError):
        manager.begin_unstake(addr)
    assert not manager.can_verify(addr)


def test_restake_reactivates():
    manager = StakeManager()
    addr = make_address(1)
    manager.stake(addr, HclawAmount.from_hclaw(1000))
    manager.begin_unstake(addr)
    manager.stake(addr, HclawAmount.from_hclaw(1000))
    stake = manager.get_stake(addr)
    assert stake.is_active
    assert stake.withdrawable_at is None
    assert stake.amount.whole_hclaw() == 2000


def test_distribute_reward():
    manager = StakeManager()
    addr = make_address(1)
    manager.stake(addr, HclawAmount.from_hclaw(1000))
    manager.distribute_reward(addr, HclawAmount.from_hclaw(5))
    manager.distribute_reward(addr, HclawAmount.from_hclaw(3))
    assert manager.get_stake(addr).total_rewards.whole_hclaw() == 8


def test_active_verifiers_lists_only_active():
    manager = StakeManager()
    a, b = make_address(1), make_address(2)
    manager.stake(a, HclawAmount.from_hclaw(1000))
    manager.stake(b, HclawAmount.from_hclaw(1000))
    manager.begin_unstake(b)
    assert [info.address for info in manager.active_verifiers()] == [a]


@pytest.mark.parametrize(
    "reason, percent",
    [
        (HoneyPotApproval(solution_id=ZERO_HASH), 100),
        (InvalidVerification(details="x"), 10),
        (DoubleSigning(block_hash_1=ZERO_HASH, block_hash_2=bytes([1]) * 32), 100),
        (Downtime(offline_duration_secs=60), 1),
    ],
)
def test_slash_percentages(reason, percent):
    assert reason.slash_percentage() == percent


def test_stake_info_apply_slash_records_timestamp():
    info = StakeInfo(make_address(1), HclawAmount.from_hclaw(200))
    taken = info.apply_slash(Downtime(offline_duration_secs=10), 1234)
    assert taken.whole_hclaw() == 2
    assert info.slash_history[0].timestamp == 1234
    assert info.is_active
    assert info.can_verify(HclawAmount.from_hclaw(198))
    assert not info.can_verify(HclawAmount.from_hclaw(199))