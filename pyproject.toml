[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statecheck"
version = "0.1.0"
description = "Consistency testers (linearizability, sequential consistency), sequential specifications, vector clocks and hashable collections for model checking."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linearizability",
    "sequential-consistency",
    "model-checking",
    "vector-clock",
    "distributed-systems",
    "testing",
]
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
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["statecheck"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
