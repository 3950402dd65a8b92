[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "run1c"
version = "1.0.0"
description = "Command-line launcher for 1C:Enterprise file databases with a persistent history of opened paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["1c", "launcher", "enterprise", "history"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
run1c = "run1c.launcher:main"

[tool.hatch.build.targets.wheel]
packages = ["run1c"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
