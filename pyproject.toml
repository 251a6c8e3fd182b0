[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teamnote"
version = "0.1.0"
description = "Competitive programming algorithms: string matching, flows, matching, polynomial multiplication and DP optimisations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "kmp",
    "z-function",
    "manacher",
    "aho-corasick",
    "suffix-array",
    "fft",
    "ntt",
    "max-flow",
    "bipartite-matching",
    "convex-hull-trick",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["teamnote"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
