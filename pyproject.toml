[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leetcrust"
version = "0.1.0"
description = "Command-line helper that creates Rust solution files for coding problems from their starter code, plus a set of worked solutions"
requires-python = ">=3.10"
keywords = ["code-generation", "problems", "rust", "cli", "algorithms"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]
dependencies = [
    "requests",
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
leetcrust = "leetcrust.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["leetcrust"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
