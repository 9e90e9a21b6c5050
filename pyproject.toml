[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sniffwatch"
version = "0.1.0"
description = "Traffic chart bookkeeping, country codes and flag selection for a network traffic monitor"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "monitoring", "traffic", "chart", "country", "flags"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sniffwatch = "sniffwatch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sniffwatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
