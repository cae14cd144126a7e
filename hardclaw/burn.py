"""Tracking of burned tokens."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from itertools import islice
from typing import Deque, Dict, List

from hardclaw.amount import HclawAmount
from hardclaw.timestamps import now_millis


class BurnReason(Enum):
    """Why tokens were burned."""

    JOB_FEE = "job_fee"
    JOB_SUBMISSION = "job_submission"
    SLASHING = "slashing"
    MANUAL = "manual"


@dataclass(frozen=True)
class BurnEvent:
    """A single burn."""

    amount: HclawAmount
    reason: BurnReason
    timestamp: int


@dataclass(frozen=True)
class BurnStats:
    """Summary of burns so far."""

    total_burned: HclawAmount
    job_fee_burns: HclawAmount
    submission_burns: HclawAmount
    slash_burns: HclawAmount
    burn_count: int


class BurnManager:
    """Records burns, totals per reason and a bounded history."""

    def __init__(self, max_history: int = 10_000) -> None:
        self._total_burned = HclawAmount.ZERO
        self._by_reason: Dict[BurnReason, HclawAmount] = {}
        self._history: Deque[BurnEvent] = deque(maxlen=max_history)

    @property
    def total_burned(self) -> HclawAmount:
        """Total ever burned."""
        return self._total_burned

    def burn(self, amount: HclawAmount, reason: BurnReason) -> None:
        """Record a burn of ``amount`` for ``reason``."""
        self._total_burned = self._total_burned.saturating_add(amount)
        self._by_reason[reason] = self.burned_for(reason).saturating_add(amount)
        self._history.append(BurnEvent(amount, reason, now_millis()))

    def burned_for(self, reason: BurnReason) -> HclawAmount:
        """Total burned for one reason."""
        return self._by_reason.get(reason, HclawAmount.ZERO)

    def stats(self) -> BurnStats:
        """Return summary statistics."""
        return BurnStats(
            total_burned=self._total_burned,
            job_fee_burns=self.burned_for(BurnReason.JOB_FEE),
            submission_burns=self.burned_for(BurnReason.JOB_SUBMISSION),
            slash_burns=self.burned_for(BurnReason.SLASHING),
            burn_count=len(self._history),
        )

    def recent_burns(self, limit: int) -> List[BurnEvent]:
        """Return up to ``limit`` most recent burns, oldest first."""
        start = max(len(self._history) - max(limit, 0), 0)
        return list(islice(self._history, start, None))