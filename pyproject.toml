[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asmvm"
version = "0.1.0"
description = "A small 8-bit virtual machine that preprocesses, parses and runs a compact assembly language"
requires-python = ">=3.10"
dependencies = []
keywords = ["assembly", "virtual machine", "emulator", "interpreter", "8-bit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
asmvm = "asmvm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["asmvm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
