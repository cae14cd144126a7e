"""Detection of honey pot approvals, the defence against lazy miners.

The protocol injects solutions that look valid but fail verification. A miner
that approves one has not really verified it, and is recorded as an offender
so that its stake can be slashed.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Hashable, List, Set


@dataclass(frozen=True)
class HoneyPotStats:
    """Counts of known honey pots and of miners who approved one."""

    total_honey_pots: int = 0
    total_offenders: int = 0


class HoneyPotDetector:
    """Knows which solutions are honey pots and which miners approved them.

    Safe to share between threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._known_honey_pots: Set[Hashable] = set()
        self._offenders: Set[Hashable] = set()

    def register(self, solution_id: Hashable) -> None:
        """Mark ``solution_id`` as a honey pot."""
        with self._lock:
            self._known_honey_pots.add(solution_id)

    def is_honey_pot(self, solution_id: Hashable) -> bool:
        """Return True if ``solution_id`` is a registered honey pot."""
        with self._lock:
            return solution_id in self._known_honey_pots

    def record_offender(self, miner: Hashable, solution_id: Hashable) -> None:
        """Record ``miner`` as an offender if ``solution_id`` is a honey pot."""
        with self._lock:
            if solution_id in self._known_honey_pots:
                self._offenders.add(miner)

    def is_offender(self, miner: Hashable) -> bool:
        """Return True if ``miner`` has approved a honey pot."""
        with self._lock:
            return miner in self._offenders

    def get_offenders(self) -> List[Hashable]:
        """All miners currently awaiting slashing."""
        with self._lock:
            return list(self._offenders)

    def clear_offender(self, miner: Hashable) -> None:
        """Forget ``miner`` as an offender, once it has been slashed."""
        with self._lock:
            self._offenders.discard(miner)

    def stats(self) -> HoneyPotStats:
        """Current counts."""
        with self._lock:
            return HoneyPotStats(
                total_honey_pots=len(self._known_honey_pots),
                total_offenders=len(self._offenders),
            )