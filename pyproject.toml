[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scaffkit"
version = "0.1.0"
description = "Building blocks for genome scaffold gap filling: FASTA/FASTQ/SAM/PAF parsing, scaffold layouts and contig pairing."
requires-python = ">=3.10"
dependencies = []
keywords = ["bioinformatics", "genome", "scaffold", "fasta", "fastq", "sam", "paf", "cigar", "gap-filling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scaffkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
