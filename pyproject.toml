[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "formulaparse"
version = "0.1.0"
description = "Expand chemical formulas, count their protons and check their parentheses against a periodic table file"
requires-python = ">=3.10"
dependencies = []
keywords = ["chemistry", "chemical formula", "periodic table", "protons", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
formulaparse = "formulaparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["formulaparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
