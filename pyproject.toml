[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hardclaw"
version = "0.9.1"
description = "Token amounts, fee distribution, burns, supply tracking, staking, honey-pot detection and vote tallying for a proof-of-verification economy"
requires-python = ">=3.10"
dependencies = []
keywords = ["tokenomics", "staking", "slashing", "proof-of-verification", "voting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hardclaw"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
