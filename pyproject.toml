[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "univ3math"
version = "4.0.0"
description = "Exact integer math for concentrated-liquidity AMM pools: tick math, sqrt price math, swap steps, liquidity sizing and fee accounting"
requires-python = ">=3.10"
dependencies = []
keywords = ["uniswap-v3", "amm", "defi", "tick-math", "fixed-point", "liquidity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["univ3math"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
