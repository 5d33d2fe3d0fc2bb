[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rskwallet"
version = "0.1.0"
description = "Configuration, diagnostics and transaction status tools for a Rootstock wallet"
requires-python = ">=3.10"
keywords = ["rootstock", "rsk", "wallet", "alchemy", "blockchain", "cli", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]
dependencies = [
    "click>=8.1",
    "platformdirs>=3.0",
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
rskwallet-config = "rskwallet.config_command:main"
rskwallet-tx = "rskwallet.tx:main"

[tool.hatch.build.targets.wheel]
packages = ["rskwallet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
