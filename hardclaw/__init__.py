"""Token amounts, fees, burns, supply, staking, honey-pot detection and vote tallying."""

__version__ = "0.9.1"

__all__ = [
    "address",
    "amount",
    "burn",
    "distribution",
    "economics",
    "honey_pot",
    "quality",
    "stake",
    "supply",
    "timestamps",
    "votes",
]