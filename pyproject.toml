[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unionlayer"
version = "0.1.0"
description = "Two-layer union of ordinary directories with copy-on-write and whiteout markers"
requires-python = ">=3.10"
dependencies = []
keywords = ["unionfs", "overlay", "copy-on-write", "whiteout", "filesystem"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["unionlayer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
