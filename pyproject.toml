[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkane"
version = "0.1.0"
description = "Commitment Merkle trees, nullifier tracking and hashing primitives for privacy pools"
requires-python = ">=3.10"
dependencies = []
keywords = ["privacy pool", "merkle tree", "commitment", "nullifier", "poseidon", "blake2"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zkane"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
