[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trilex"
version = "0.1.0"
description = "A small lexer for C source files, with compiler identification from predefined macros"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "c", "compiler", "preprocessor", "macros"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trilex = "trilex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["trilex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
