[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "sacheatfinder"
version = "0.1.0"
description = "Brute-force search for alphabetic codes whose JAMCRC matches a known list of cheat hashes"
requires-python = ">=3.10"
dependencies = []
keywords = ["crc32", "jamcrc", "brute-force", "cheat-codes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sacheatfinder = "sacheatfinder.cli:main"

[tool.setuptools.packages.find]
include = ["sacheatfinder*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
