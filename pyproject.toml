[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prodcons"
version = "0.1.0"
description = "Multithreaded producer-consumer simulation over a two-priority bounded buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["producer-consumer", "threading", "bounded-buffer", "concurrency", "priority-queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
prodcons = "prodcons.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["prodcons"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
