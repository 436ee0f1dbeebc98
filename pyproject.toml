[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algobox"
version = "0.1.0"
description = "Classic algorithms, data structures and small terminal programs for learning and practice"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "graphs",
    "recursion",
    "backtracking",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algobox-sort = "algobox.sorting:main"
algobox-palindrome = "algobox.strings:main"
algobox-prime = "algobox.numbers:prime_main"
algobox-sieve = "algobox.numbers:sieve_main"
algobox-calc = "algobox.calculator:main"
algobox-dijkstra = "algobox.graphs:main"
algobox-maze = "algobox.maze:main"
algobox-hexagon = "algobox.hexagon:main"
algobox-tictactoe = "algobox.tictactoe:main"
algobox-guess = "algobox.games:guessing_main"
algobox-rps = "algobox.games:rps_main"
algobox-hospital = "algobox.hospital:main"
algobox-records = "algobox.records:main"
algobox-report = "algobox.report:main"
algobox-todo = "algobox.todo:main"

[tool.hatch.build.targets.wheel]
packages = ["algobox"]

[tool.hatch.build.targets.sdist]
include = ["algobox", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
