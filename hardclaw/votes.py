"""Schelling point vote results and their tally."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class VoteResult(Enum):
    """Outcome of a single vote."""

    ACCEPT = "accept"
    REJECT = "reject"
    ABSTAIN = "abstain"

    def as_byte(self) -> int:
        """Return the byte used for this vote when hashing."""
        return _VOTE_BYTES[self]


_VOTE_BYTES = {
    VoteResult.ACCEPT: 1,
    VoteResult.REJECT: 2,
    VoteResult.ABSTAIN: 0,
}


@dataclass(frozen=True)
class RevealedVote:
    """A vote as seen after reveal; ``vote`` is None while still unrevealed."""

    vote: Optional[VoteResult] = None
    quality_score: Optional[int] = None


@dataclass
class VotingResults:
    """Aggregated results of a Schelling point vote."""

    total_votes: int = 0
    accept_votes: int = 0
    reject_votes: int = 0
    abstain_votes: int = 0
    avg_quality_score: float = 0.0
    majority: Optional[VoteResult] = None

    @classmethod
    def from_votes(cls, votes: Iterable[RevealedVote]) -> VotingResults:
        """Tally revealed votes; unrevealed votes are ignored."""
        results = cls()
        accepted_qualities = []

        for entry in votes:
            if entry.vote is None:
                continue
            results.total_votes += 1
            if entry.vote is VoteResult.ACCEPT:
                results.accept_votes += 1
                if entry.quality_score is not None:
                    accepted_qualities.append(entry.quality_score)
            elif entry.vote is VoteResult.REJECT:
                results.reject_votes += 1
            else:
                results.abstain_votes += 1

        if accepted_qualities:
            results.avg_quality_score = sum(accepted_qualities) / len(accepted_qualities)

        if results.accept_votes > results.reject_votes:
            results.majority = VoteResult.ACCEPT
        elif results.reject_votes > results.accept_votes:
            results.majority = VoteResult.REJECT

        return results

    def has_majority(self) -> bool:
        """Return True when accept and reject votes are not tied."""
        return self.majority is not None

    def accept_percentage(self) -> float:
        """Percentage of accept votes among accept and reject votes."""
        participating = self.accept_votes + self.reject_votes
        if participating == 0:
            return 0.0
        return self.accept_votes / participating * 100.0