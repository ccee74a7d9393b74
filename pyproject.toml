[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkproofs"
version = "0.1.0"
description = "Prime fields, polynomials, Fiat-Shamir transcripts, sumcheck and GKR proofs"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = [
    "zero-knowledge",
    "sumcheck",
    "gkr",
    "fiat-shamir",
    "polynomials",
    "secret-sharing",
    "finite-field",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zkproofs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
