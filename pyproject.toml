[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "integrity_rules"
version = "0.1.0"
description = "Selection rules, rule trees and report helpers for file integrity checking"
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["integrity", "intrusion detection", "rules", "regex", "filesystem"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["integrity_rules"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
