[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsdrkit"
version = "0.1.0"
description = "SigMF metadata handling, automatic gain control and queue-backed sample sources and sinks"
requires-python = ">=3.10"
dependencies = []
keywords = ["sdr", "sigmf", "signal-processing", "agc", "radio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
sigmf-col = "fsdrkit.sigmf.cli_collection:main"
sigmf-hash = "fsdrkit.sigmf.cli_hash:main"

[tool.hatch.build.targets.wheel]
packages = ["fsdrkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
