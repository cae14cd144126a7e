"""Verifier stakes, slashing and unbonding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional

from hardclaw.address import Address
from hardclaw.amount import HclawAmount
from hardclaw.timestamps import now_millis


class StakeError(ValueError):
    """Base class for staking errors."""


class StakeNotFoundError(StakeError, LookupError):
    """No stake exists for the address."""

    def __init__(self) -> None:
        super().__init__("stake not found")


class InsufficientStakeError(StakeError):
    """The amount staked is below the minimum."""

    def __init__(self, have: HclawAmount, need: HclawAmount) -> None:
        super().__init__(f"insufficient stake: have {have}, need {need}")
        self.have = have
        self.need = need


class AlreadyUnstakingError(StakeError):
    """Unstaking has already begun."""

    def __init__(self) -> None:
        super().__init__("already unstaking")


class NotUnstakingError(StakeError):
    """Unstaking has not begun."""

    def __init__(self) -> None:
        super().__init__("not unstaking")


class UnbondingNotCompleteError(StakeError):
    """The unbonding period has not yet passed."""

    def __init__(self, ready_at: int) -> None:
        super().__init__(f"unbonding not complete, ready at {ready_at}")
        self.ready_at = ready_at


class SlashingReason:
    """Why a verifier's stake is slashed."""

    _PERCENTAGE: ClassVar[int] = 0

    def slash_percentage(self) -> int:
        """Percentage of the stake taken for this reason."""
        return self._PERCENTAGE


@dataclass(frozen=True)
class HoneyPotApproval(SlashingReason):
    """Approved a honey pot solution; the whole stake is taken."""

    solution_id: bytes
    _PERCENTAGE: ClassVar[int] = 100


@dataclass(frozen=True)
class InvalidVerification(SlashingReason):
    """Submitted an invalid verification."""

    details: str
    _PERCENTAGE: ClassVar[int] = 10


@dataclass(frozen=True)
class DoubleSigning(SlashingReason):
    """Signed two conflicting blocks; the whole stake is taken."""

    block_hash_1: bytes
    block_hash_2: bytes
    _PERCENTAGE: ClassVar[int] = 100


@dataclass(frozen=True)
class Downtime(SlashingReason):
    """Was offline for too long."""

    offline_duration_secs: int
    _PERCENTAGE: ClassVar[int] = 1


@dataclass(frozen=True)
class SlashEvent:
    """A single slash."""

    reason: SlashingReason
    amount: HclawAmount
    timestamp: int


@dataclass
class StakeInfo:
    """A verifier's stake and its history."""

    address: Address
    amount: HclawAmount
    staked_at: int = field(default_factory=now_millis)
    withdrawable_at: Optional[int] = None
    is_active: bool = True
    total_rewards: HclawAmount = HclawAmount.ZERO
    total_slashed: HclawAmount = HclawAmount.ZERO
    slash_history: List[SlashEvent] = field(default_factory=list)

    def effective_stake(self) -> HclawAmount:
        """Stake remaining after slashes."""
        return self.amount.saturating_sub(self.total_slashed)

    def can_verify(self, min_stake: HclawAmount) -> bool:
        """Return True if active with at least ``min_stake`` effective stake."""
        return self.is_active and self.effective_stake() >= min_stake

    def apply_slash(self, reason: SlashingReason, timestamp: int) -> HclawAmount:
        """Slash the stake for ``reason`` and return the amount taken."""
        percent = reason.slash_percentage()
        slash_amount = self.amount.percentage(percent)
        self.total_slashed = self.total_slashed.saturating_add(slash_amount)
        self.slash_history.append(SlashEvent(reason, slash_amount, timestamp))
        if percent == 100:
            self.is_active = False
        return slash_amount

    def add_rewards(self, amount: HclawAmount) -> None:
        """Add to the rewards earned."""
        self.total_rewards = self.total_rewards.saturating_add(amount)


class StakeManager:
    """Holds the stakes of all verifiers."""

    DEFAULT_UNBONDING_PERIOD_MS = 7 * 24 * 60 * 60 * 1000
    DEFAULT_MIN_STAKE = HclawAmount.from_hclaw(1000)

    def __init__(
        self,
        min_stake: HclawAmount = DEFAULT_MIN_STAKE,
        unbonding_period_ms: int = DEFAULT_UNBONDING_PERIOD_MS,
    ) -> None:
        self._stakes: Dict[Address, StakeInfo] = {}
        self._min_stake = min_stake
        self._unbonding_period_ms = unbonding_period_ms
        self._total_staked = HclawAmount.ZERO

    @classmethod
    def with_min_stake(cls, min_stake: HclawAmount) -> StakeManager:
        """Manager with a custom minimum stake."""
        return cls(min_stake=min_stake)

    @property
    def min_stake(self) -> HclawAmount:
        """Minimum stake needed to participate."""
        return self._min_stake

    @property
    def total_staked(self) -> HclawAmount:
        """Total staked across all verifiers."""
        return self._total_staked

    def _require(self, address: Address) -> StakeInfo:
        try:
            return self._stakes[address]
        except KeyError:
            raise StakeNotFoundError() from None

    def stake(self, address: Address, amount: HclawAmount) -> None:
        """Add stake for ``address``; the amount must meet the minimum."""
        if amount < self._min_stake:
            raise InsufficientStakeError(amount, self._min_stake)
        info = self._stakes.setdefault(address, StakeInfo(address, HclawAmount.ZERO))
        info.amount = info.amount.saturating_add(amount)
        info.is_active = True
        info.withdrawable_at = None
        self._total_staked = self._total_staked.saturating_add(amount)

    def begin_unstake(self, address: Address) -> None:
        """Deactivate the stake and start its unbonding period."""
        info = self._require(address)
        if info.withdrawable_at is not None:
            raise AlreadyUnstakingError()
        info.is_active = False
        info.withdrawable_at = now_millis() + self._unbonding_period_ms

    def complete_unstake(self, address: Address) -> HclawAmount:
        """Withdraw the stake after unbonding; return the effective amount."""
        info = self._require(address)
        if info.withdrawable_at is None:
            raise NotUnstakingError()
        if now_millis() < info.withdrawable_at:
            raise UnbondingNotCompleteError(info.withdrawable_at)
        amount = info.effective_stake()
        self._total_staked = self._total_staked.saturating_sub(info.amount)
        del self._stakes[address]
        return amount

    def slash(self, address: Address, reason: SlashingReason) -> HclawAmount:
        """Slash a verifier and return the amount taken."""
        return self._require(address).apply_slash(reason, now_millis())

    def distribute_reward(self, address: Address, amount: HclawAmount) -> None:
        """Credit rewards to a verifier."""
        self._require(address).add_rewards(amount)

    def get_stake(self, address: Address) -> Optional[StakeInfo]:
        """Stake info for ``address``, or None."""
        return self._stakes.get(address)

    def can_verify(self, address: Address) -> bool:
        """Return True if ``address`` may verify."""
        info = self._stakes.get(address)
        return info is not None and info.can_verify(self._min_stake)

    def active_verifier_count(self) -> int:
        """Number of active verifiers."""
        return sum(1 for info in self._stakes.values() if info.is_active)

    def active_verifiers(self) -> List[StakeInfo]:
        """All active stakes."""
        return [info for info in self._stakes.values() if info.is_active]