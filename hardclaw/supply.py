"""Token supply tracking and difficulty adjustment."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional

from hardclaw.amount import HclawAmount

U64_MAX = 2**64 - 1


@dataclass
class SupplyMetrics:
    """Current token supply figures."""

    total_minted: HclawAmount = field(default=HclawAmount.ZERO)
    total_burned: HclawAmount = field(default=HclawAmount.ZERO)
    circulating_supply: HclawAmount = field(default=HclawAmount.ZERO)
    total_staked: HclawAmount = field(default=HclawAmount.ZERO)
    effective_circulating: HclawAmount = field(default=HclawAmount.ZERO)

    def calculate_effective(self) -> HclawAmount:
        """Circulating supply not locked in stakes."""
        return self.circulating_supply.saturating_sub(self.total_staked)

    def net_supply(self) -> HclawAmount:
        """Minted minus burned."""
        return self.total_minted.saturating_sub(self.total_burned)

    def burn_rate(self) -> float:
        """Burned as a percentage of minted."""
        if self.total_minted.is_zero():
            return 0.0
        return self.total_burned.raw / self.total_minted.raw * 100.0

    def stake_rate(self) -> float:
        """Staked as a percentage of circulating supply."""
        if self.circulating_supply.is_zero():
            return 0.0
        return self.total_staked.raw / self.circulating_supply.raw * 100.0


class SupplyManager:
    """Tracks supply and adjusts difficulty from recent block times."""

    DEFAULT_TARGET_BLOCK_TIME_MS = 1000
    DEFAULT_ADJUSTMENT_WINDOW = 100

    def __init__(
        self,
        target_block_time_ms: int = DEFAULT_TARGET_BLOCK_TIME_MS,
        adjustment_window: int = DEFAULT_ADJUSTMENT_WINDOW,
        difficulty: int = 1,
    ) -> None:
        self._metrics = SupplyMetrics()
        self._difficulty = difficulty
        self._target_block_time_ms = target_block_time_ms
        self._adjustment_window = adjustment_window
        self._recent_block_times: Deque[int] = deque(maxlen=adjustment_window)

    @property
    def metrics(self) -> SupplyMetrics:
        """Current supply metrics."""
        return self._metrics

    @property
    def difficulty(self) -> int:
        """Current difficulty."""
        return self._difficulty

    def record_mint(self, amount: HclawAmount) -> None:
        """Record newly minted tokens."""
        m = self._metrics
        m.total_minted = m.total_minted.saturating_add(amount)
        m.circulating_supply = m.circulating_supply.saturating_add(amount)
        self._update_effective()

    def record_burn(self, amount: HclawAmount) -> None:
        """Record burned tokens."""
        m = self._metrics
        m.total_burned = m.total_burned.saturating_add(amount)
        m.circulating_supply = m.circulating_supply.saturating_sub(amount)
        self._update_effective()

    def record_stake_change(self, staked: HclawAmount, unstaked: HclawAmount) -> None:
        """Record tokens staked and unstaked."""
        m = self._metrics
        m.total_staked = m.total_staked.saturating_add(staked).saturating_sub(unstaked)
        self._update_effective()

    def _update_effective(self) -> None:
        self._metrics.effective_circulating = self._metrics.calculate_effective()

    def record_block_time(self, block_time_ms: int) -> None:
        """Record a block time and adjust difficulty once the window is full."""
        self._recent_block_times.append(block_time_ms)
        if len(self._recent_block_times) >= self._adjustment_window:
            self._adjust_difficulty()

    def _adjust_difficulty(self) -> None:
        average = self.average_block_time()
        if average is None:
            return
        target = self._target_block_time_ms
        if average < target * 9 // 10:
            self._difficulty = min(self._difficulty + 1, U64_MAX)
        elif average > target * 11 // 10:
            self._difficulty = max(self._difficulty - 1, 1)

    def average_block_time(self) -> Optional[int]:
        """Truncated mean of the recent block times, or None if there are none."""
        if not self._recent_block_times:
            return None
        return sum(self._recent_block_times) // len(self._recent_block_times)