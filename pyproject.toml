[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "framelayout"
version = "0.3.3"
description = "Minimalist immediate-mode GUI layout built from nested rectangular frames"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "layout", "ui", "rectangle", "immediate-mode", "frames"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["framelayout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
