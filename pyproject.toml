[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wiredoc"
version = "0.1.0"
description = "Validated BSON-style documents and MongoDB wire protocol headers, flags and OP_MSG sections"
requires-python = ">=3.10"
dependencies = []
keywords = ["bson", "mongodb", "wire-protocol", "documents", "op_msg", "hexdump"]
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
    "Topic :: Database :: Database Engines/Servers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wiredoc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
