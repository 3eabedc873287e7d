[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kzkit"
version = "0.1.0"
description = "Practice-tool utilities: embedded-style printf formatting, memory watches, scene tables, vector math, segment addressing and a digit-by-digit number editor"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "printf",
    "formatting",
    "watches",
    "scenes",
    "vector-math",
    "segments",
    "practice-tool",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["kzkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
