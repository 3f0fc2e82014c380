[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xcore"
version = "0.1.0"
description = "Core building blocks: bit helpers, atomics, bounded containers, a stream interface and file system path utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "queue", "linked-list", "filesystem", "paths", "bits", "atomic", "endianness"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xcore"]

[tool.pytest.ini_options]
addopts = "-ra"
