"""Splitting a bounty between solver, verifier and burn."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from hardclaw.address import Address
from hardclaw.amount import HclawAmount


class InvalidSharesError(ValueError):
    """The configured shares do not sum to 100."""


@dataclass(frozen=True)
class FeeDistribution:
    """How one bounty was split."""

    solver_amount: HclawAmount
    solver: Address
    verifier_amount: HclawAmount
    verifier: Address
    burn_amount: HclawAmount

    def total(self) -> HclawAmount:
        """Sum of all parts."""
        return self.solver_amount.saturating_add(self.verifier_amount).saturating_add(
            self.burn_amount
        )


class FeeDistributor:
    """Splits bounties by fixed percentage shares."""

    def __init__(self, solver_share: int, verifier_share: int, burn_share: int) -> None:
        if solver_share + verifier_share + burn_share != 100:
            raise InvalidSharesError("Shares must sum to 100")
        self._shares = (solver_share, verifier_share, burn_share)

    @classmethod
    def default_shares(cls) -> FeeDistributor:
        """Distributor with the protocol's 95/4/1 split."""
        return cls(95, 4, 1)

    def distribute(
        self, bounty: HclawAmount, solver: Address, verifier: Address
    ) -> FeeDistribution:
        """Split ``bounty``; the burn takes the rounding remainder."""
        solver_share, verifier_share, _ = self._shares
        solver_amount = bounty.percentage(solver_share)
        verifier_amount = bounty.percentage(verifier_share)
        burn_amount = bounty.saturating_sub(solver_amount).saturating_sub(verifier_amount)
        return FeeDistribution(
            solver_amount=solver_amount,
            solver=solver,
            verifier_amount=verifier_amount,
            verifier=verifier,
            burn_amount=burn_amount,
        )

    def shares(self) -> Tuple[int, int, int]:
        """Return the (solver, verifier, burn) percentages."""
        return self._shares