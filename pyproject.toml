[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "berrylang"
version = "0.1.0"
description = "Core pieces of a small embeddable scripting language: bytes buffers, base64/hex codecs, a class model and command-line option parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "scripting", "bytes", "base64", "berry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["berrylang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
