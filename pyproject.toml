[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bracketcalc"
version = "0.1.0"
description = "A small arithmetic calculator with bracket support, usable as a library or from the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "arithmetic", "expression", "evaluator", "lexer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bracketcalc = "bracketcalc.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bracketcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
