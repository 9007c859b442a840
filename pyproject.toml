[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ino"
version = "0.1.0"
description = "Route patterns, route grouping, value validators and transaction scopes"
requires-python = ">=3.10"
dependencies = []
keywords = ["routing", "validation", "url-pattern", "database", "transactions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ino"]

[tool.pytest.ini_options]
addopts = "-ra"
