[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "defender"
version = "0.1.0"
description = "A side-view space shooter: protect the humanoids from the landers."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame", "defender"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
defender = "defender.app:main"

[tool.hatch.build.targets.wheel]
packages = ["defender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
