[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bibliodata"
version = "0.1.0"
description = "Small data model for bibliographic records: authors, articles, chapters and books."
requires-python = ">=3.10"
dependencies = []
keywords = ["bibliography", "books", "articles", "chapters", "authors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bibliodata = "bibliodata.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bibliodata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
