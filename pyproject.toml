[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bancojaveriano"
version = "0.1.0"
description = "A small interactive bank ledger with savings and checking accounts, stored as JSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "savings", "checking", "ledger", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bancojaveriano = "bancojaveriano.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bancojaveriano"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
