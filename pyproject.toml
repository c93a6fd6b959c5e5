[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roombaoi"
version = "0.1.0"
description = "Build and send Roomba Open Interface drive and motor commands over a binary stream"
requires-python = ">=3.10"
dependencies = []
keywords = ["roomba", "open interface", "robot", "serial", "drive"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["roombaoi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
