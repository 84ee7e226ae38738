[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depegwatch"
version = "0.1.0"
description = "Poll stablecoin prices and flag depeg risk as it develops"
requires-python = ">=3.10"
dependencies = []
keywords = ["stablecoin", "depeg", "crypto", "price", "risk", "monitoring"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
depegwatch = "depegwatch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["depegwatch"]

[tool.pytest.ini_options]
addopts = "-ra"
