[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pedagocrypt"
version = "0.1.0"
description = "Readable reference implementations of SHA-2, HMAC, GHASH, Poseidon, Merkle trees and prime-field polynomials"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "sha256",
    "sha512",
    "hmac",
    "ghash",
    "poseidon",
    "sponge",
    "merkle-tree",
    "polynomial",
    "lagrange",
    "finite-field",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pedagocrypt-hmac = "pedagocrypt.hmac_sha256:main"

[tool.hatch.build.targets.wheel]
packages = ["pedagocrypt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
