[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cbormodel"
version = "0.1.0"
description = "Typed value model for Concise Binary Object Representation (CBOR) data items"
requires-python = ">=3.10"
dependencies = []
keywords = ["cbor", "rfc8949", "data model", "value types"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cbormodel-info = "cbormodel.info:main"

[tool.hatch.build.targets.wheel]
packages = ["cbormodel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
