[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corekit"
version = "0.1.0"
description = "Building blocks for byte-level services: file abstractions, sorted string tables, compact encodings, AEAD keys, timers, rate limiting and datagram RPC wire structures."
requires-python = ">=3.10"
keywords = [
    "sstable",
    "rope",
    "cuckoo-filter",
    "varint",
    "hexdump",
    "chacha20-poly1305",
    "timer",
    "rate-limiter",
    "icmp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Networking",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
corekit-hash-filter-stats = "corekit.hash_filter:main"

[tool.hatch.build.targets.wheel]
packages = ["corekit"]

[tool.hatch.build.targets.sdist]
include = [
    "corekit",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
