[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typtea"
version = "0.1.0"
description = "A minimal typing speed test in your terminal"
requires-python = ">=3.10"
keywords = ["typing", "typing-test", "wpm", "terminal", "tui", "game"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
typtea = "typtea.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["typtea"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
