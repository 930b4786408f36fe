[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "unitprice"
version = "0.1.0"
description = "Compare prices per weight across units and currencies, and keep catalogs sorted by unit price."
requires-python = ">=3.10"
dependencies = []
keywords = ["unit price", "currency", "conversion", "shopping", "catalog"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unitprice = "unitprice.cli:main"

[tool.setuptools.packages.find]
include = ["unitprice*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
