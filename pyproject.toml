[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "protocore"
version = "0.1.0"
description = "Core utilities for prototyping: vector maths, poses, 4x4 matrices, CRCs, timers, a C-like code emitter, file helpers and logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "pose", "crc32", "crc8", "timer", "code-generation"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["protocore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
