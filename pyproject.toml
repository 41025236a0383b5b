[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gopractice"
version = "0.1.0"
description = "Small classic programming exercises: stacks, lists, sequences, puzzles, RPN and text filters"
requires-python = ">=3.10"
keywords = [
    "exercises",
    "stack",
    "linked-list",
    "fizzbuzz",
    "fibonacci",
    "n-queens",
    "rpn",
    "calculator",
    "cat",
    "wc",
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
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gopractice-even = "gopractice.even:main"
gopractice-list = "gopractice.linkedlist:main"
gopractice-queens = "gopractice.queens:main"
gopractice-rpn = "gopractice.rpn:main"
gopractice-calc = "gopractice.calc:main"
gopractice-cat = "gopractice.cat:main"
gopractice-wc = "gopractice.wc:main"
gopractice-proc = "gopractice.proc:main"
gopractice-draw = "gopractice.draw:main"

[tool.hatch.build.targets.wheel]
packages = ["gopractice"]

[tool.hatch.build.targets.sdist]
include = ["gopractice", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
