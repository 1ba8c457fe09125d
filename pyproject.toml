[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "cryptobench"
version = "0.1.0"
description = "Classroom cryptography tools: a simplified DES with ECB/CFB/CTR modes, modular exponentiation, letter frequency analysis, n-bit block substitution and 2x2 Hill ciphers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "des",
    "rsa",
    "modular-exponentiation",
    "hill-cipher",
    "substitution-cipher",
    "frequency-analysis",
    "education",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptobench-rsa = "cryptobench.rsa:main"
cryptobench-letter-freq = "cryptobench.letter_freq:main"
cryptobench-block-sub = "cryptobench.block_sub:main"
cryptobench-hill = "cryptobench.hill:main"
cryptobench-toolbox = "cryptobench.toolbox:main"

[tool.setuptools.packages.find]
include = ["cryptobench*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
