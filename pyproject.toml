[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "atomsh"
version = "0.1.0"
description = "A small interactive shell front end that cleans up command lines and splits them into typed tokens"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "tokenizer", "lexer", "command line", "parsing"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
atomsh = "atomsh.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["atomsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
