"""Token economics: fee distribution, burn-to-request and elastic block rewards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from hardclaw.address import Address
from hardclaw.amount import HclawAmount
from hardclaw.burn import BurnManager, BurnReason
from hardclaw.distribution import FeeDistribution, FeeDistributor, InvalidSharesError
from hardclaw.supply import SupplyManager, SupplyMetrics


class TokenError(ValueError):
    """Base class for token economics errors."""


class InsufficientBurnError(TokenError):
    """A job submission burned less than the required minimum."""

    def __init__(self, required: HclawAmount, provided: HclawAmount) -> None:
        super().__init__(f"insufficient burn: required {required}, provided {provided}")
        self.required = required
        self.provided = provided


@dataclass
class TokenEconomicsConfig:
    """Fee shares, the minimum burn-to-request and the target block reward."""

    solver_share: int = 95
    verifier_share: int = 4
    burn_share: int = 1
    min_burn_to_request: HclawAmount = HclawAmount.from_raw(1_000_000_000_000_000)
    target_block_reward: HclawAmount = HclawAmount.from_hclaw(10)

    def is_valid(self) -> bool:
        """Return True if the three shares sum to 100."""
        return self.solver_share + self.verifier_share + self.burn_share == 100


class TokenEconomics:
    """Distributes fees, records burns and computes block rewards."""

    def __init__(self, config: Optional[TokenEconomicsConfig] = None) -> None:
        config = config if config is not None else TokenEconomicsConfig()
        if not config.is_valid():
            raise InvalidSharesError("Fee shares must sum to 100")
        self._config = config
        self._fee_distributor = FeeDistributor(
            config.solver_share, config.verifier_share, config.burn_share
        )
        self._burn_manager = BurnManager()
        self._supply_manager = SupplyManager()

    @property
    def config(self) -> TokenEconomicsConfig:
        """The configuration in use."""
        return self._config

    def process_job_completion(
        self, bounty: HclawAmount, solver: Address, verifier: Address
    ) -> FeeDistribution:
        """Split a bounty and record the burned part as a job-fee burn."""
        distribution = self._fee_distributor.distribute(bounty, solver, verifier)
        self._burn_manager.burn(distribution.burn_amount, BurnReason.JOB_FEE)
        return distribution

    def process_job_submission(self, burn_amount: HclawAmount) -> None:
        """Record a burn-to-request; raise if it is below the configured minimum."""
        required = self._config.min_burn_to_request
        if burn_amount < required:
            raise InsufficientBurnError(required, burn_amount)
        self._burn_manager.burn(burn_amount, BurnReason.JOB_SUBMISSION)

    def calculate_block_reward(self, difficulty: int) -> HclawAmount:
        """Block reward, falling as difficulty rises; never below one base unit."""
        if difficulty == 0:
            return self._config.target_block_reward
        base = self._config.target_block_reward.raw
        adjusted = base * 1000 // (1000 + difficulty)
        return HclawAmount.from_raw(max(adjusted, 1))

    def supply_metrics(self) -> SupplyMetrics:
        """Current supply metrics."""
        return self._supply_manager.metrics

    def total_burned(self) -> HclawAmount:
        """Total tokens burned so far."""
        return self._burn_manager.total_burned