[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quackplot"
version = "0.1.0"
description = "An interactive graphing calculator that plots equations in x typed at the keyboard"
requires-python = ">=3.10"
keywords = ["graphing", "calculator", "plot", "shunting-yard", "rpn", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
quackplot = "quackplot.app:main"

[tool.hatch.build.targets.wheel]
packages = ["quackplot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
