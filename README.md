# hardclaw

Building blocks for the economy of a proof-of-verification network. The
package covers exact token amounts, 20-byte addresses, fee splitting, token
burns, supply tracking with difficulty adjustment, verifier staking and
slashing, detection of honey-pot approvals, quality rubrics for subjective
work, and tallying of revealed Schelling-point votes.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `hardclaw.amount` | `HclawAmount`, `AmountError` and its subclasses, `DECIMALS`, `ONE_HCLAW`, `MAX_SUPPLY` |
| `hardclaw.address` | `Address`, `AddressError`, `InvalidHexError`, `InvalidLengthError` |
| `hardclaw.timestamps` | `now_millis()`, `timestamp_to_datetime(ts)` |
| `hardclaw.votes` | `VoteResult`, `RevealedVote`, `VotingResults` |
| `hardclaw.quality` | `QualityMetric`, `CustomMetric`, `QualityAssessment`, `QualityRubric` |
| `hardclaw.burn` | `BurnReason`, `BurnEvent`, `BurnStats`, `BurnManager` |
| `hardclaw.distribution` | `FeeDistributor`, `FeeDistribution`, `InvalidSharesError` |
| `hardclaw.supply` | `SupplyMetrics`, `SupplyManager` |
| `hardclaw.economics` | `TokenEconomicsConfig`, `TokenEconomics`, `TokenError`, `InsufficientBurnError` |
| `hardclaw.stake` | `StakeManager`, `StakeInfo`, slashing reasons, `SlashEvent`, stake errors |
| `hardclaw.honey_pot` | `HoneyPotDetector`, `HoneyPotStats` |

## Token amounts

`HclawAmount` holds an integer count of base units in the unsigned 128-bit
range. One HCLAW is 10^18 base units.

```python
from hardclaw.amount import HclawAmount

bounty = HclawAmount.from_hclaw(100)
half = HclawAmount.from_decimal_str("1.5")

print(bounty.to_decimal_string())           # 100.0
print(half)                                 # 1.5 HCLAW
print((bounty - half).whole_hclaw())        # 98
print(bounty.percentage(95).whole_hclaw())  # 95
```

`saturating_add` stops at `MAX_SUPPLY` and `saturating_sub` stops at zero.
`checked_add`, `checked_sub` and `checked_mul` return `None` on overflow or
underflow, and `checked_div` returns `None` for a zero divisor. The operators
`+`, `-` and `*` raise `AmountOverflowError` in those cases, and `//` raises
`ZeroDivisionError`. `from_decimal_str` raises `InvalidAmountFormatError`,
`TooManyDecimalsError` (more than 18 fractional digits) or
`AmountOverflowError`.

## Addresses

```python
from hardclaw.address import Address

solver = Address.from_hex("0x" + "11" * 20)
print(solver)                  # 0x1111...
print(Address.ZERO.is_zero())  # True
```

Bad hex raises `InvalidHexError`. A length other than 20 bytes raises
`InvalidLengthError`.

## Fees, burns and supply

```python
from hardclaw.address import Address
from hardclaw.amount import HclawAmount
from hardclaw.economics import TokenEconomics

economics = TokenEconomics()
solver = Address.from_hex("0x" + "11" * 20)
verifier = Address.from_hex("0x" + "22" * 20)

split = economics.process_job_completion(HclawAmount.from_hclaw(100), solver, verifier)
print(split.solver_amount.whole_hclaw(),
      split.verifier_amount.whole_hclaw(),
      split.burn_amount.whole_hclaw())      # 95 4 1

economics.process_job_submission(HclawAmount.from_hclaw(1))  # burn-to-request
print(economics.total_burned())             # 2.0 HCLAW
print(economics.calculate_block_reward(1000))  # 5.0 HCLAW
```

A submission that burns less than `min_burn_to_request` (0.001 HCLAW by
default) raises `InsufficientBurnError`. Shares that do not sum to 100 raise
`InvalidSharesError`.

You can also use `FeeDistributor`, `BurnManager` and `SupplyManager` on their
own. `BurnManager` keeps totals per `BurnReason` and a bounded history, which
`recent_burns(limit)` returns. `SupplyManager` tracks minted, burned, staked
and circulating amounts. Once its window of block times is full, it raises
the difficulty if the average block time is more than 10% below the target.
It lowers the difficulty, to a minimum of 1, if the average is more than 10%
above the target.

## Staking and slashing

```python
from hardclaw.address import Address
from hardclaw.amount import HclawAmount
from hardclaw.stake import InvalidVerification, StakeManager

verifier = Address.from_hex("0x" + "22" * 20)
stakes = StakeManager()
stakes.stake(verifier, HclawAmount.from_hclaw(1000))
stakes.slash(verifier, InvalidVerification(details="bad proof"))
print(stakes.get_stake(verifier).effective_stake().whole_hclaw())  # 900
```

The slashing reasons and what each one takes:

| Reason | Share of the stake taken | Effect |
| --- | --- | --- |
| `HoneyPotApproval` | 100% | deactivates the verifier |
| `DoubleSigning` | 100% | deactivates the verifier |
| `InvalidVerification` | 10% | |
| `Downtime` | 1% | |

Unstaking works in two steps. `begin_unstake` starts an unbonding period, seven
days by default. `complete_unstake` returns the effective stake once that
period has passed. Failures raise subclasses of `StakeError`.

`HoneyPotDetector` is thread-safe. It records which solution ids are honey
pots, and which miners approved one so that they can be slashed.

## Subjective work

```python
from hardclaw.quality import QualityAssessment, QualityMetric, QualityRubric
from hardclaw.votes import RevealedVote, VoteResult, VotingResults

assessment = QualityAssessment.detailed([
    (QualityMetric.CREATIVITY, 100),
    (QualityMetric.COHERENCE, 80),
    (QualityMetric.RELEVANCE, 60),
])
print(QualityRubric.creative().calculate_weighted_score(assessment))  # 82

results = VotingResults.from_votes([
    RevealedVote(VoteResult.ACCEPT, 80),
    RevealedVote(VoteResult.ACCEPT, 90),
    RevealedVote(VoteResult.REJECT, 30),
    RevealedVote(),  # not yet revealed: ignored
])
print(results.majority, results.avg_quality_score)  # VoteResult.ACCEPT 85.0
```

Abstentions do not count towards the majority, and a tie gives no majority.
The average quality score is taken over accepting votes only.

## What this package does not do

This package is a library only. It has:

- no command-line program
- no node or networking
- no blockchain, block or account state
- no persistent storage or wallet files
- no key generation, signing or signature checks

Addresses are built from raw bytes or hex, not derived from public keys. Votes
are tallied once revealed. The commit-and-reveal rounds that produce them are
not included. Honey pots are detected, not generated.